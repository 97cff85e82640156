"""Keyword rule tables.

Every table is a list of ``Rule`` rows matched with ``rules.matches_any``. Unless a
table says otherwise the lowercased query text must contain a lowercased keyword.
"""
from __future__ import annotations

from .models import ContextProducts, FindingRecommendation
from .rules import Rule

# Interest → treatments. All matching rows contribute.
INTEREST_TO_TREATMENTS: list[Rule[tuple[str, ...]]] = [
    Rule(("cheek", "contour", "definition"), ("Skincare", "Filler", "Biostimulants")),
    Rule(("eyelid", "upper eyelid", "lower eyelid", "rejuvenate"), ("Skincare", "Laser")),
    Rule(("brow", "brows"), ("Skincare", "Neurotoxin", "Filler")),
    Rule(("forehead",), ("Skincare", "Neurotoxin", "Filler", "Laser", "Biostimulants")),
    Rule(("jawline", "jaw"), ("Skincare", "Filler", "Biostimulants", "Kybella")),
    Rule(("neck",), ("Skincare", "Kybella", "Biostimulants")),
    Rule(("lip", "lips", "hydrate", "balance lips"), ("Skincare", "Filler")),
    Rule(("nose", "balance nose"), ("Skincare", "Filler")),
    Rule(
        ("hydrate skin", "exfoliate", "skin tone", "even skin"),
        ("Skincare", "Chemical Peel", "Microneedling", "Laser"),
    ),
    Rule(("laxity", "tighten", "sag"), ("Skincare", "Biostimulants")),
    Rule(("shadow", "tear trough", "under eye"), ("Skincare", "Filler", "Biostimulants")),
    Rule(
        ("scar", "fade", "line", "fine line", "smoothen"),
        (
            "Skincare",
            "Laser",
            "Chemical Peel",
            "Microneedling",
            "Filler",
            "Neurotoxin",
            "Biostimulants",
        ),
    ),
]

# Issue → treatments. Only the first matching row applies.
ISSUE_TO_TREATMENTS: list[Rule[tuple[str, ...]]] = [
    Rule(("wrinkles",), ("Neurotoxin", "Laser", "Chemical Peel")),
    Rule(("fine lines",), ("Neurotoxin", "Laser", "Skincare")),
    Rule(("crow's feet",), ("Neurotoxin", "Laser")),
    Rule(("forehead lines",), ("Neurotoxin",)),
    Rule(("frown lines",), ("Neurotoxin",)),
    Rule(("volume loss",), ("Filler",)),
    Rule(("hollow cheeks",), ("Filler",)),
    Rule(("thin lips",), ("Filler",)),
    Rule(("nasolabial folds",), ("Filler",)),
    Rule(("marionette lines",), ("Filler",)),
    Rule(("under eye bags",), ("Filler", "Laser")),
    Rule(("dark circles",), ("Filler", "Skincare")),
    Rule(("acne",), ("Chemical Peel", "Laser", "Skincare")),
    Rule(("acne scars",), ("Microneedling", "Laser", "Chemical Peel", "PRP", "PDGF")),
    Rule(("hyperpigmentation",), ("Chemical Peel", "Laser", "Skincare")),
    Rule(("dark spots",), ("Chemical Peel", "Laser", "Skincare")),
    Rule(("sun damage",), ("Laser", "Chemical Peel")),
    Rule(("redness",), ("Laser", "Skincare")),
    Rule(("rosacea",), ("Laser", "Skincare")),
    Rule(("skin laxity",), ("Laser", "Microneedling")),
    Rule(("sagging skin",), ("Laser", "Microneedling")),
    Rule(("double chin",), ("Filler", "Laser")),
    Rule(("jowls",), ("Filler", "Laser", "Microneedling")),
    Rule(("uneven skin tone",), ("Chemical Peel", "Laser", "Skincare")),
    Rule(("texture",), ("Microneedling", "Chemical Peel", "Laser", "PRP", "PDGF")),
    Rule(("pores",), ("Microneedling", "Chemical Peel")),
    Rule(("droopy eyelids",), ("Laser", "Neurotoxin")),
]

# Assessment finding → goal / region / treatments. Only the first matching row applies.
FINDING_TO_GOAL_REGION_TREATMENTS: list[Rule[FindingRecommendation]] = [
    Rule(
        ("thin lips", "asymmetric lips"),
        FindingRecommendation(goal="Balance Lips", region="Lips", treatments=("Filler", "Neurotoxin")),
    ),
    Rule(
        ("dry lips",),
        FindingRecommendation(goal="Hydrate Lips", region="Lips", treatments=("Filler", "Skincare")),
    ),
    Rule(
        ("under eye hollow", "eyelid bag", "tear trough"),
        FindingRecommendation(
            goal="Rejuvenate Lower Eyelids", region="Under eyes", treatments=("Filler", "Biostimulants")
        ),
    ),
    Rule(
        ("under eye wrinkle",),
        FindingRecommendation(
            goal="Smoothen Fine Lines",
            region="Under eyes",
            treatments=("Neurotoxin", "Filler", "Microneedling", "Laser"),
        ),
    ),
    Rule(
        ("excess upper eyelid", "excess skin"),
        FindingRecommendation(
            goal="Rejuvenate Upper Eyelids", region="Other", treatments=("Laser", "Chemical Peel")
        ),
    ),
    Rule(
        ("forehead wrinkle", "bunny line", "crow's feet"),
        FindingRecommendation(
            goal="Smoothen Fine Lines", region="Forehead", treatments=("Neurotoxin", "Filler", "Laser")
        ),
    ),
    Rule(
        ("mid cheek", "cheek flatten", "cheekbone"),
        FindingRecommendation(
            goal="Improve Cheek Definition", region="Cheeks", treatments=("Filler", "Biostimulants")
        ),
    ),
    Rule(
        ("nasolabial", "marionette", "smile line"),
        FindingRecommendation(
            goal="Shadow Correction",
            region="Nasolabial",
            treatments=("Filler", "Biostimulants", "Laser", "Chemical Peel", "Microneedling"),
        ),
    ),
    Rule(
        ("prejowl", "retruded chin", "chin"),
        FindingRecommendation(
            goal="Balance Jawline", region="Jawline", treatments=("Filler", "Biostimulants")
        ),
    ),
    Rule(
        ("jowl", "ill-defined jaw", "submental", "over-project"),
        FindingRecommendation(
            goal="Contour Jawline", region="Jawline", treatments=("Filler", "Biostimulants", "Kybella")
        ),
    ),
    Rule(
        ("temporal hollow",),
        FindingRecommendation(
            goal="Balance Forehead", region="Forehead", treatments=("Filler", "Biostimulants")
        ),
    ),
    Rule(
        ("platysmal", "loose neck", "neck"),
        FindingRecommendation(
            goal="Contour Neck", region="Jawline", treatments=("Neurotoxin", "Kybella", "Biostimulants")
        ),
    ),
    Rule(
        ("dark spot", "red spot"),
        FindingRecommendation(
            goal="Even Skin Tone", region="Other", treatments=("Laser", "Chemical Peel", "Skincare")
        ),
    ),
    Rule(
        ("gummy smile",),
        FindingRecommendation(goal="Balance Lips", region="Lips", treatments=("Neurotoxin",)),
    ),
    Rule(
        ("dorsal hump", "crooked nose", "droopy tip"),
        FindingRecommendation(goal="Balance Nose", region="Other", treatments=("Filler",)),
    ),
    Rule(
        ("scar", "fine line"),
        FindingRecommendation(
            goal="Smoothen Fine Lines",
            region="Other",
            treatments=("Laser", "Chemical Peel", "Microneedling", "Filler", "Neurotoxin", "Biostimulants"),
        ),
    ),
    Rule(
        ("masseter", "hypertrophy"),
        FindingRecommendation(goal="Contour Jawline", region="Jawline", treatments=("Neurotoxin",)),
    ),
    Rule(
        ("sagging", "laxity"),
        FindingRecommendation(
            goal="Tighten Skin Laxity", region="Other", treatments=("Laser", "Biostimulants")
        ),
    ),
]

# Goal (interest) → plan regions. All matching rows contribute.
GOAL_TO_REGIONS: list[Rule[tuple[str, ...]]] = [
    Rule(("lip", "lips"), ("Lips",)),
    Rule(
        ("eye", "eyelid", "under eye", "shadow", "tear trough"),
        ("Under eyes", "Forehead", "Crow's feet"),
    ),
    Rule(("brow", "forehead"), ("Forehead", "Glabella", "Crow's feet")),
    Rule(("cheek",), ("Cheeks", "Nasolabial")),
    Rule(("jaw", "jawline", "prejowl", "jowl", "chin", "submentum"), ("Jawline",)),
    Rule(("neck", "platysmal"), ("Jawline",)),
    Rule(("nose",), ("Other",)),
    Rule(
        ("skin", "tone", "scar", "line", "exfoliate", "hydrate skin", "laxity", "tighten"),
        ("Nasolabial", "Forehead", "Glabella", "Crow's feet", "Cheeks", "Jawline", "Under eyes", "Other"),
    ),
]

# Free-text goal / finding context → recommended products, scoped per treatment.
RECOMMENDED_PRODUCTS_BY_CONTEXT: list[Rule[ContextProducts]] = [
    Rule(
        ("hydrate", "dry", "moisturize", "barrier", "laxity"),
        ContextProducts(
            treatment="Skincare",
            products=(
                "SkinCeuticals Hyaluronic Acid Intensifier | Multi-Glycan Hydrating Serum for Plump & Smooth Skin",
                "SkinCeuticals Hydrating B5 Gel | Lightweight Moisturizer with Vitamin B5 for Deep Skin Hydration",
                "GM Collin Daily Ceramide Comfort | Nourishing Skin Barrier Capsules for Hydration & Repair (20 Ct.)",
                "SkinCeuticals Triple Lipid Restore 2:4:2 | Anti-Aging Moisturizer for Skin Barrier Repair & Hydration",
            ),
        ),
    ),
    Rule(
        ("acne", "red spot", "oil", "breakout", "pore", "salicylic", "benzoyl"),
        ContextProducts(
            treatment="Skincare",
            products=(
                "SkinCeuticals Blemish + Age Defense | Targeted Serum for Acne and Signs of Aging",
                "GM Collin Essential Oil Complex | Nourishing Blend for Calm, Hydrated, Glowing Skin",
                "SkinCeuticals Silymarin CF | Antioxidant Serum for Oily & Acne-Prone Skin",
            ),
        ),
    ),
    Rule(
        ("dark spot", "pigment", "even skin", "tone", "hyperpigmentation", "melasma"),
        ContextProducts(
            treatment="Skincare",
            products=(
                "SkinCeuticals C E Ferulic | Antioxidant Vitamin C Serum for Brightening & Anti-Aging",
                "SkinCeuticals Phloretin CF | Antioxidant Serum for Environmental Damage & Uneven Skin Tone",
                "SkinCeuticals Serum 10 AOX | Antioxidant Serum with 10% Vitamin C for Brightening & Protection",
                "SkinCeuticals Discoloration Defense | Targeted Serum for Dark Spots & Uneven Skin Tone",
                "SkinCeuticals Phyto A+ Brightening Treatment | Lightweight Gel Moisturizer for Dull, Uneven Skin",
                "The Treatment On The Daily SPF 45 | Lightweight Sunscreen for Daily Protection",
            ),
        ),
    ),
    Rule(
        ("fine line", "smoothen", "wrinkle", "anti-aging", "exfoliate", "scar"),
        ContextProducts(
            treatment="Skincare",
            products=(
                "SkinCeuticals Retinol 0.3% | Anti-Aging Serum for Wrinkles & Skin Renewal",
                "SkinCeuticals Retinol 0.5% | Anti-Aging Serum for Wrinkles & Skin Renewal",
                "SkinCeuticals Retinol 1.0% | Anti-Aging Serum for Wrinkles & Skin Renewal",
                "SkinCeuticals C E Ferulic | Antioxidant Vitamin C Serum for Brightening & Anti-Aging",
                "SkinCeuticals Metacell Renewal B3 | Brightening & Anti-Aging Serum with Vitamin B3",
                "SkinCeuticals Glycolic 10 Renew Overnight | Exfoliating Night Serum for Smoother, Radiant Skin",
            ),
        ),
    ),
    Rule(
        ("sensitive", "redness", "irritat", "licorice", "centella"),
        ContextProducts(
            treatment="Skincare",
            products=(
                "GM Collin Sensiderm Cleansing Milk | Gentle Cleanser for Sensitive & Irritated Skin",
                "SkinCeuticals Triple Lipid Restore 2:4:2 | Anti-Aging Moisturizer for Skin Barrier Repair & Hydration",
                "SkinCeuticals Phyto Corrective Gel | Soothing Hydrating Serum for Redness & Sensitive Skin",
                "The Treatment On The Daily SPF 45 | Lightweight Sunscreen for Daily Protection",
            ),
        ),
    ),
    Rule(
        ("dark spot", "pigment", "even skin", "tone", "red spot", "vascular"),
        ContextProducts(
            treatment="Laser",
            products=(
                "BBL (BroadBand Light)",
                "IPL (Intense Pulsed Light)",
                "PicoSure",
                "PicoWay",
                "VBeam (Pulsed Dye)",
                "Excel V",
            ),
        ),
    ),
    Rule(
        ("fine line", "smoothen", "wrinkle", "resurfacing", "scar", "exfoliate"),
        ContextProducts(
            treatment="Laser",
            products=(
                "Moxi",
                "Halo",
                "Moxi + BBL",
                "Fraxel",
                "Clear + Brilliant",
                "Sciton ProFractional",
                "AcuPulse",
            ),
        ),
    ),
    Rule(
        ("acne", "oil", "red spot", "exfoliate"),
        ContextProducts(treatment="Chemical Peel", products=("Salicylic", "Glycolic", "Jessner", "Mandelic")),
    ),
    Rule(
        ("dark spot", "pigment", "even skin", "tone"),
        ContextProducts(
            treatment="Chemical Peel", products=("Glycolic", "TCA", "Mandelic", "VI Peel", "Lactic acid")
        ),
    ),
    Rule(
        ("fine line", "smoothen", "wrinkle", "exfoliate"),
        ContextProducts(treatment="Chemical Peel", products=("Glycolic", "TCA", "Lactic acid", "Jessner")),
    ),
    Rule(
        ("lip", "lips", "balance lips", "thin lips", "dry lips"),
        ContextProducts(treatment="Filler", products=("Hyaluronic acid (HA) – lip",)),
    ),
    Rule(
        ("cheek", "volume", "mid cheek", "cheekbone", "hollow"),
        ContextProducts(
            treatment="Filler",
            products=(
                "Hyaluronic acid (HA) – cheek",
                "PLLA / Sculptra",
                "Calcium hydroxyapatite (e.g. Radiesse)",
            ),
        ),
    ),
    Rule(
        ("nasolabial", "marionette", "shadow", "smile line"),
        ContextProducts(
            treatment="Filler",
            products=("Hyaluronic acid (HA) – nasolabial", "Hyaluronic acid (HA) – other"),
        ),
    ),
    Rule(
        ("under eye", "tear trough", "hollow", "eyelid"),
        ContextProducts(
            treatment="Filler",
            products=("Hyaluronic acid (HA) – tear trough", "Hyaluronic acid (HA) – other"),
        ),
    ),
    Rule(
        ("fine line", "smoothen", "wrinkle", "forehead", "crow", "bunny", "gummy smile"),
        ContextProducts(
            treatment="Neurotoxin",
            products=(
                "OnabotulinumtoxinA (Botox)",
                "AbobotulinumtoxinA (Dysport)",
                "IncobotulinumtoxinA (Xeomin)",
                "PrabotulinumtoxinA (Jeuveau)",
                "DaxibotulinumtoxinA (Daxxify)",
            ),
        ),
    ),
    Rule(
        ("scar", "fine line", "texture", "pore", "laxity", "tighten"),
        ContextProducts(
            treatment="Microneedling",
            products=(
                "Standard microneedling",
                "RF microneedling",
                "With growth factors / PRP",
                "Nanoneedling",
            ),
        ),
    ),
]
