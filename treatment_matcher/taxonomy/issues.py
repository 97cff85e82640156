"""Issue → concern / general category / areas mapping.

Dashboard issue display names are resolved to taxonomy slugs, then to one or more
concern rows. An issue with several concern rows carries the union of their areas.
"""
from __future__ import annotations

import re

from .models import Area, Concern, GeneralCategory, IssueConcernMapping

A = Area
G = GeneralCategory

DISPLAY_NAME_TO_SLUG: dict[str, str] = {
    "Forehead Wrinkles": "forehead-lines",
    "Crow's Feet Wrinkles": "crow's-feet",
    "Glabella Wrinkles": "glabella",
    "Under Eye Wrinkles": "under-eye-wrinkles",
    "Perioral Wrinkles": "perioral-wrinkles",
    "Bunny Lines": "bunny-lines",
    "Neck Lines": "neck-lines",
    "Dry Skin": "dry-skin",
    "Whiteheads": "whiteheads",
    "Blackheads": "blackheads",
    "Crepey Skin": "crepey-skin",
    "Dark Spots": "dark-spots",
    "Red Spots": "red-spots",
    "Scars": "scars",
    "Under Eye Dark Circles": "under-eye-dark-circles",
    "Under Eye Hollow": "under-eye-hollows",
    "Upper Eye Hollow": "upper-eye-hollow",
    "Lower Eyelid Bags": "lower-eyelid-bags",
    "Mid Cheek Flattening": "mid-cheek-flattening",
    "Cheekbone - Not Prominent": "cheekbone-not-prominent",
    "Temporal Hollow": "temporal-hollow",
    "Loose Neck Skin": "loose-neck-skin",
    "Platysmal Bands": "platysmal-bands",
    "Excess/Submental Fullness": "submental-fullness",
    "Nasolabial Folds": "nasolabial-folds",
    "Marionette Lines": "marionette-lines",
    "Jowls": "jowls",
    "Lower Cheeks - Volume Depletion": "lower-cheeks-volume-depletion",
    "Prejowl Sulcus": "prejowl-sulcus",
    "Brow Asymmetry": "brow-asymmetry",
    "Brow Ptosis": "brow-ptosis",
    "Excess Upper Eyelid Skin": "excess-upper-eyelid-skin",
    "Lower Eyelid - Excess Skin": "excess-lower-eyelid-skin",
    "Upper Eyelid Droop": "upper-eyelid-droop",
    "Lower Eyelid Sag": "lower-eyelid-sag",
    "Ill-Defined Jawline": "ill-defined-jawline",
    "Asymmetric Jawline": "asymmetric-jawline",
    "Masseter Hypertrophy": "masseter-hypertrophy",
    "Retruded Chin": "retruded-chin",
    "Over-Projected Chin": "over-projected-chin",
    "Asymmetric Chin": "asymmetric-chin",
    "Crooked Nose": "crooked-nose",
    "Droopy Tip": "droopy-tip",
    "Dorsal Hump": "dorsal-hump",
    "Tip Droop When Smiling": "tip-droop-when-smiling",
    "Thin Lips": "thin-lips",
    "Lacking Philtral Column": "lacking-philtral-column",
    "Long Philtral Column": "long-philtral-column",
    "Gummy Smile": "gummy-smile",
    "Asymmetric Lips": "asymmetric-lips",
    "Dry Lips": "dry-lips",
    "Lip Thinning When Smiling": "lip-thinning-when-smiling",
    "Flat Forehead": "flat-forehead",
    "Heavy Lateral Cheek": "heavy-lateral-cheek",
    "Rosacea": "rosacea",
}

CONCERN_NAMES: dict[str, tuple[str, GeneralCategory]] = {
    "fine-lines-wrinkles": ("Fine Lines & Wrinkles", G.skin_health),
    "skin-texture": ("Skin Texture", G.skin_health),
    "pigmentation": ("Pigmentation", G.skin_health),
    "volume-loss": ("Volume Loss", G.volume_loss),
    "skin-laxity": ("Skin Laxity", G.skin_laxity),
    "excess-fat": ("Excess Fat", G.excess_fat),
    "facial-asymmetry": ("Facial Asymmetry", G.proportions),
    "facial-structure": ("Facial Structure", G.proportions),
}

# (issue slug, concern id, areas); one issue may appear on several rows.
_ISSUE_CONCERN_ROWS: list[tuple[str, str, tuple[Area, ...]]] = [
    ("11s", "fine-lines-wrinkles", (A.forehead,)),
    ("forehead-lines", "fine-lines-wrinkles", (A.forehead,)),
    ("crow's-feet", "fine-lines-wrinkles", (A.eyes,)),
    ("glabella", "fine-lines-wrinkles", (A.forehead,)),
    ("under-eye-wrinkles", "fine-lines-wrinkles", (A.eyes,)),
    ("perioral-wrinkles", "fine-lines-wrinkles", (A.lips,)),
    ("bunny-lines", "fine-lines-wrinkles", (A.nose,)),
    ("neck-lines", "fine-lines-wrinkles", (A.neck,)),
    ("marionette-lines", "fine-lines-wrinkles", (A.lips, A.jawline)),
    ("nasolabial-folds", "fine-lines-wrinkles", (A.cheeks, A.lips)),
    ("dry-skin", "skin-texture", (A.full_face,)),
    ("whiteheads", "skin-texture", (A.full_face,)),
    ("blackheads", "skin-texture", (A.full_face,)),
    ("crepey-skin", "skin-texture", (A.full_face,)),
    ("dark-spots", "pigmentation", (A.full_face,)),
    ("red-spots", "pigmentation", (A.full_face,)),
    ("scars", "skin-texture", (A.full_face,)),
    ("under-eye-dark-circles", "pigmentation", (A.eyes,)),
    ("under-eye-hollows", "volume-loss", (A.eyes,)),
    ("upper-eye-hollow", "volume-loss", (A.eyes,)),
    ("lower-eyelid-bags", "skin-laxity", (A.eyes,)),
    ("mid-cheek-flattening", "volume-loss", (A.cheeks,)),
    ("cheekbone-not-prominent", "volume-loss", (A.cheeks,)),
    ("temporal-hollow", "volume-loss", (A.forehead,)),
    ("loose-neck-skin", "skin-laxity", (A.neck,)),
    ("platysmal-bands", "volume-loss", (A.neck,)),
    ("submental-fullness", "excess-fat", (A.chin, A.jawline)),
    ("jowls", "skin-laxity", (A.jawline,)),
    ("lower-cheeks-volume-depletion", "volume-loss", (A.cheeks,)),
    ("prejowl-sulcus", "skin-laxity", (A.jawline,)),
    ("brow-asymmetry", "facial-asymmetry", (A.forehead, A.eyes)),
    ("brow-ptosis", "skin-laxity", (A.forehead, A.eyes)),
    ("excess-upper-eyelid-skin", "skin-laxity", (A.eyes,)),
    ("excess-lower-eyelid-skin", "skin-laxity", (A.eyes,)),
    ("upper-eyelid-droop", "skin-laxity", (A.eyes,)),
    ("lower-eyelid-sag", "skin-laxity", (A.eyes,)),
    ("ill-defined-jawline", "skin-laxity", (A.jawline,)),
    ("ill-defined-jawline", "excess-fat", (A.jawline,)),
    ("asymmetric-jawline", "facial-asymmetry", (A.jawline,)),
    ("masseter-hypertrophy", "facial-structure", (A.jawline,)),
    ("retruded-chin", "facial-structure", (A.chin,)),
    ("over-projected-chin", "facial-structure", (A.chin,)),
    ("asymmetric-chin", "facial-asymmetry", (A.chin,)),
    ("crooked-nose", "facial-structure", (A.nose,)),
    ("droopy-tip", "facial-structure", (A.nose,)),
    ("dorsal-hump", "facial-structure", (A.nose,)),
    ("tip-droop-when-smiling", "facial-structure", (A.nose,)),
    ("thin-lips", "facial-structure", (A.lips,)),
    ("lacking-philtral-column", "volume-loss", (A.lips,)),
    ("long-philtral-column", "facial-structure", (A.lips,)),
    ("gummy-smile", "volume-loss", (A.lips,)),
    ("asymmetric-lips", "facial-asymmetry", (A.lips,)),
    ("dry-lips", "skin-texture", (A.lips,)),
    ("lip-thinning-when-smiling", "volume-loss", (A.lips,)),
]


def _build_slug_mapping() -> dict[str, IssueConcernMapping]:
    concerns_by_slug: dict[str, list[Concern]] = {}
    areas_by_slug: dict[str, list[Area]] = {}
    for slug, concern_id, areas in _ISSUE_CONCERN_ROWS:
        name, category = CONCERN_NAMES[concern_id]
        concerns = concerns_by_slug.setdefault(slug, [])
        if not any(c.concern_id == concern_id for c in concerns):
            concerns.append(
                Concern(concern_id=concern_id, name=name, general_category=category, areas=areas)
            )
        merged = areas_by_slug.setdefault(slug, [])
        for area in areas:
            if area not in merged:
                merged.append(area)
    return {
        slug: IssueConcernMapping(
            issue_slug=slug,
            concerns=tuple(concerns),
            areas=tuple(areas_by_slug[slug]),
        )
        for slug, concerns in concerns_by_slug.items()
    }


SLUG_TO_MAPPING: dict[str, IssueConcernMapping] = _build_slug_mapping()

_WHITESPACE_RE = re.compile(r"\s+")
_APOSTROPHE_RE = re.compile(r"['’]")


def issue_slug(display_name: str) -> str:
    """Slug for an issue display name; untracked names are slugified."""
    key = (display_name or "").strip()
    if key in DISPLAY_NAME_TO_SLUG:
        return DISPLAY_NAME_TO_SLUG[key]
    return _APOSTROPHE_RE.sub("", _WHITESPACE_RE.sub("-", key.lower()))
