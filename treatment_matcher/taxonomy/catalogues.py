"""Option catalogues used by the plan and recommender flows."""
from __future__ import annotations

OTHER_FINDING_LABEL = "Other finding"

ASSESSMENT_FINDINGS: tuple[str, ...] = (
    "Thin Lips",
    "Dry Lips",
    "Asymmetric Lips",
    "Under Eye Hollows",
    "Under Eye Wrinkles",
    "Excess Upper Eyelid Skin",
    "Forehead Wrinkles",
    "Bunny Lines",
    "Crow's feet",
    "Mid Cheek Flattening",
    "Cheekbone - Not Prominent",
    "Nasolabial Folds",
    "Marionette Lines",
    "Prejowl Sulcus",
    "Retruded Chin",
    "Ill-Defined Jawline",
    "Jowls",
    "Excess/Submental Fullness",
    "Over-Projected Chin",
    "Temporal Hollow",
    "Platysmal Bands",
    "Loose Neck Skin",
    "Dark Spots",
    "Red Spots",
    "Gummy Smile",
    "Dorsal Hump",
    "Crooked Nose",
    "Droopy Tip",
    "Eyelid Bags",
    "Scars",
    "Fine Lines",
    "Masseter Hypertrophy",
    "Sagging Skin",
)

ASSESSMENT_FINDINGS_BY_AREA: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Lips", ("Thin Lips", "Dry Lips", "Asymmetric Lips", "Gummy Smile")),
    (
        "Eyes",
        ("Under Eye Hollows", "Under Eye Wrinkles", "Excess Upper Eyelid Skin", "Eyelid Bags", "Crow's feet"),
    ),
    ("Forehead", ("Forehead Wrinkles", "Bunny Lines", "Temporal Hollow")),
    ("Cheeks", ("Mid Cheek Flattening", "Cheekbone - Not Prominent")),
    ("Nasolabial", ("Nasolabial Folds", "Marionette Lines")),
    (
        "Jawline",
        (
            "Prejowl Sulcus",
            "Retruded Chin",
            "Ill-Defined Jawline",
            "Jowls",
            "Excess/Submental Fullness",
            "Over-Projected Chin",
            "Masseter Hypertrophy",
        ),
    ),
    ("Neck", ("Platysmal Bands", "Loose Neck Skin")),
    ("Skin", ("Dark Spots", "Red Spots", "Scars", "Fine Lines", "Sagging Skin")),
    ("Nose", ("Dorsal Hump", "Crooked Nose", "Droopy Tip")),
)

ALL_INTEREST_OPTIONS: tuple[str, ...] = (
    "Contour Cheeks",
    "Improve Cheek Definition",
    "Rejuvenate Upper Eyelids",
    "Rejuvenate Lower Eyelids",
    "Balance Brows",
    "Balance Forehead",
    "Contour Jawline",
    "Contour Neck",
    "Balance Jawline",
    "Hydrate Lips",
    "Balance Lips",
    "Balance Nose",
    "Hydrate Skin",
    "Tighten Skin Laxity",
    "Shadow Correction",
    "Exfoliate Skin",
    "Smoothen Fine Lines",
    "Even Skin Tone",
    "Fade Scars",
)

# Plan-entry regions (finer grained than Area).
REGION_OPTIONS: tuple[str, ...] = (
    "Forehead",
    "Glabella",
    "Crow's feet",
    "Lips",
    "Cheeks",
    "Nasolabial",
    "Marionette lines",
    "Prejowl sulcus",
    "Jawline",
    "Lower face",
    "Under eyes",
    "Multiple",
    "Other",
)

# Region chips always offered by the photo browser.
REGION_CANONICAL: tuple[str, ...] = ("Eyes", "Forehead", "Cheeks", "Nose", "Lips", "Jawline", "Skin")

TIMELINE_OPTIONS: tuple[str, ...] = ("Now", "Add next visit", "Wishlist", "Completed")
DEFAULT_TIMELINE = "Wishlist"

HERE_FOR_OPTIONS: tuple[str, ...] = ("Tox", "Filler")

GENERAL_CONCERN_TO_FINDINGS: dict[str, tuple[str, ...]] = {
    "Skin texture": ("Fine Lines", "Sagging Skin"),
    "Pigmentation": ("Dark Spots", "Red Spots"),
    "Fine lines & wrinkles": (
        "Forehead Wrinkles",
        "Under Eye Wrinkles",
        "Bunny Lines",
        "Crow's feet",
        "Fine Lines",
    ),
    "Volume loss": (
        "Under Eye Hollows",
        "Mid Cheek Flattening",
        "Cheekbone - Not Prominent",
        "Temporal Hollow",
        "Prejowl Sulcus",
    ),
    "Excess fullness": ("Excess/Submental Fullness", "Masseter Hypertrophy", "Jowls"),
    "Skin laxity": ("Sagging Skin", "Loose Neck Skin", "Excess Upper Eyelid Skin"),
    "Asymmetry": ("Asymmetric Lips", "Over-Projected Chin", "Crooked Nose"),
    "Alignment": ("Gummy Smile", "Droopy Tip"),
    "Definition": (
        "Ill-Defined Jawline",
        "Cheekbone - Not Prominent",
        "Nasolabial Folds",
        "Marionette Lines",
        "Prejowl Sulcus",
        "Retruded Chin",
    ),
}

GENERAL_CONCERNS_OPTIONS: tuple[str, ...] = tuple(GENERAL_CONCERN_TO_FINDINGS)

# Recommender region filter label → suggestion areas.
REGION_FILTER_TO_AREAS: dict[str, tuple[str, ...]] = {
    "Skin/Full face": ("Skin",),
    "Forehead/Brows": ("Forehead",),
    "Eyes": ("Eyes",),
    "Cheeks": ("Cheeks",),
    "Nose": ("Nose",),
    "Lips": ("Lips",),
    "Jawline": ("Jawline",),
    "Chin": ("Jawline",),
    "Neck": ("Jawline",),
}

REGION_FILTER_OPTIONS: tuple[str, ...] = tuple(REGION_FILTER_TO_AREAS)
