from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class CacheConfig:
    ttl_seconds: float = float(os.getenv("MATCH_CACHE_TTL", "300"))
    max_entries: int = int(os.getenv("MATCH_CACHE_MAX_ENTRIES", "512"))
    enabled: bool = os.getenv("MATCH_CACHE_ENABLED", "1") not in ("0", "false", "False")


DEFAULT_CACHE_CONFIG = CacheConfig()
