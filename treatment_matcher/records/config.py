from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_DEFAULT_PHOTOS_CSV = Path(__file__).resolve().parent.parent / "data" / "treatment_photos.csv"


@dataclass(frozen=True)
class RecordStoreConfig:
    """
    Where the photo table export lives and how it is read.
    """

    photos_csv: Path = Path(os.getenv("TREATMENT_PHOTOS_CSV", str(_DEFAULT_PHOTOS_CSV)))
    list_separator: str = ","
    max_records: int = int(os.getenv("TREATMENT_PHOTOS_LIMIT", "2000"))


DEFAULT_RECORD_STORE_CONFIG = RecordStoreConfig()
