"""Treatment interests (suggestions): each maps to exactly one area and to the issues
that make up its feature breakdown."""
from __future__ import annotations

from .models import Area

SUGGESTION_TO_AREA: dict[str, Area] = {
    "Contour Cheeks": Area.cheeks,
    "Improve Cheek Definition": Area.cheeks,
    "Rejuvenate Upper Eyelids": Area.eyes,
    "Rejuvenate Lower Eyelids": Area.eyes,
    "Balance Brows": Area.forehead,
    "Balance Forehead": Area.forehead,
    "Contour Jawline": Area.jawline,
    "Contour Neck": Area.jawline,
    "Balance Jawline": Area.jawline,
    "Hydrate Lips": Area.lips,
    "Balance Lips": Area.lips,
    "Balance Nose": Area.nose,
    "Hydrate Skin": Area.skin,
    "Tighten Skin Laxity": Area.skin,
    "Shadow Correction": Area.skin,
    "Exfoliate Skin": Area.skin,
    "Smoothen Fine Lines": Area.skin,
    "Even Skin Tone": Area.skin,
    "Fade Scars": Area.skin,
}

SUGGESTION_TO_ISSUES: dict[str, tuple[str, ...]] = {
    "Contour Cheeks": ("Heavy Lateral Cheek",),
    "Improve Cheek Definition": (
        "Mid Cheek Flattening",
        "Cheekbone - Not Prominent",
        "Lower Cheeks - Volume Depletion",
    ),
    "Rejuvenate Upper Eyelids": (
        "Excess Upper Eyelid Skin",
        "Upper Eyelid Droop",
        "Upper Eye Hollow",
    ),
    "Rejuvenate Lower Eyelids": (
        "Lower Eyelid - Excess Skin",
        "Lower Eyelid Bags",
        "Under Eye Hollow",
        "Lower Eyelid Sag",
        "Under Eye Dark Circles",
    ),
    "Balance Brows": ("Brow Asymmetry", "Brow Ptosis"),
    "Balance Forehead": ("Flat Forehead", "Temporal Hollow"),
    "Contour Jawline": (
        "Excess/Submental Fullness",
        "Jowls",
        "Ill-Defined Jawline",
        "Masseter Hypertrophy",
        "Over-Projected Chin",
    ),
    "Contour Neck": ("Loose Neck Skin", "Platysmal Bands"),
    "Balance Jawline": (
        "Asymmetric Jawline",
        "Asymmetric Chin",
        "Prejowl Sulcus",
        "Retruded Chin",
    ),
    "Hydrate Lips": ("Dry Lips",),
    "Balance Lips": (
        "Asymmetric Lips",
        "Gummy Smile",
        "Thin Lips",
        "Lip Thinning When Smiling",
        "Lacking Philtral Column",
        "Long Philtral Column",
    ),
    "Balance Nose": ("Dorsal Hump", "Droopy Tip", "Tip Droop When Smiling", "Crooked Nose"),
    "Hydrate Skin": ("Dry Skin",),
    "Tighten Skin Laxity": ("Crepey Skin",),
    "Shadow Correction": ("Nasolabial Folds", "Marionette Lines"),
    "Exfoliate Skin": ("Blackheads", "Whiteheads"),
    "Smoothen Fine Lines": (
        "Bunny Lines",
        "Crow's Feet Wrinkles",
        "Forehead Wrinkles",
        "Glabella Wrinkles",
        "Under Eye Wrinkles",
        "Perioral Wrinkles",
        "Neck Lines",
    ),
    "Even Skin Tone": ("Dark Spots", "Red Spots", "Rosacea [DEPRECATED]"),
    "Fade Scars": ("Scars",),
}

ALL_TREATMENT_INTERESTS: list[str] = sorted(SUGGESTION_TO_AREA, key=str.casefold)


def _invert_issues() -> dict[str, str]:
    # The first suggestion listing an issue owns it.
    inverted: dict[str, str] = {}
    for suggestion, issues in SUGGESTION_TO_ISSUES.items():
        for issue in issues:
            inverted.setdefault(issue, suggestion)
    return inverted


ISSUE_TO_SUGGESTION: dict[str, str] = _invert_issues()
