"""Treatment catalogue: canonical categories, product lists and meta.

Price ranges are transcribed from the 2025 price list and treated as opaque strings.
"""
from __future__ import annotations

from .models import TreatmentMeta

OTHER_LABEL = "Other"
OTHER_PRODUCT_LABEL = "Other"

# Surgical / invasive procedures excluded from selectable options.
SURGICAL_TREATMENTS: tuple[str, ...] = (
    "Threadlift",
    "Blepharoplasty",
    "Facelift",
    "Rhinoplasty",
    "Surgical",
)

_ALL_TREATMENTS_RAW: tuple[str, ...] = (
    "Skincare",
    "Laser",
    "Chemical Peel",
    "Microneedling",
    "Filler",
    "Neurotoxin",
    "Biostimulants",
    "Kybella",
    "Threadlift",
)

ALL_TREATMENTS: tuple[str, ...] = tuple(
    t for t in _ALL_TREATMENTS_RAW if t not in SURGICAL_TREATMENTS
)

# The Treatment Skin Boutique catalogue.
SKINCARE_PRODUCTS: tuple[str, ...] = (
    "The Treatment Don't Be A Flake Moisturizer – Restorative Antioxidant Cream for Glowing Skin",
    "The Treatment Dream Lover | Firming & Anti-Aging Moisturizer",
    "The Treatment Glycolic Acid Gel Pads | Exfoliating Pads for Smoother, Brighter Skin",
    "The Treatment Last Call Cleansing Oil | Gentle Makeup Remover & Hydrating Cleanser",
    "The Treatment Let's Get Physical Tinted SPF 44 | Lightweight Tinted Sunscreen with Broad Spectrum Protection",
    "The Treatment On The Daily SPF 45 | Lightweight Sunscreen for Daily Protection",
    "The Treatment Sleep Tight Moisturizer | Intensive Anti-Aging Night Cream",
    "The TreatMINT Cooling Clay Mask | Detoxifying & Refreshing Face Mask for Clear Skin",
    "SkinCeuticals A.G.E. Advanced Eye Cream | Nourishing Pre-Cleanse for Radiant, Balanced Skin Anti-Aging Treatment for Wrinkles & Puffiness",
    "SkinCeuticals A.G.E. Interrupter Advanced | Anti-Aging Cream for Wrinkles & Loss of Firmness",
    "SkinCeuticals Advanced RGN‑6 | Regenerative Anti-Aging Cream",
    "SkinCeuticals Antioxidant Lip Repair | Nourishing Lip Treatment",
    "SkinCeuticals AOX Eye Gel | Antioxidant Eye Treatment for Dark Circles & Puffiness",
    "SkinCeuticals Biocellulose Restorative Mask | Hydrating & Repairing Sheet Mask for Radiant Skin",
    "SkinCeuticals Blemish + Age Defense | Targeted Serum for Acne and Signs of Aging",
    "SkinCeuticals C E Ferulic | Antioxidant Vitamin C Serum for Brightening & Anti-Aging",
    "SkinCeuticals Cell Cycle Catalyst | Resurfacing Serum for Radiance & Skin Renewal",
    "Skinceuticals Clarifying Clay Mask | Detoxifying Face Mask for Oil Control",
    "SkinCeuticals Daily Moisture | Lightweight Hydrating Moisturizer for All Skin Types",
    "SkinCeuticals Discoloration Defense | Targeted Serum for Dark Spots & Uneven Skin Tone",
    "SkinCeuticals Emollience | Hydrating Moisturizer for Normal to Dry Skin",
    "SkinCeuticals Epidermal Repair | Calming Therapeutic Treatment for Compromised or Sensitive Skin",
    "SkinCeuticals Equalizing Toner | Alcohol-Free Toner for Balanced, Refreshed Skin",
    "SkinCeuticals Eye Balm | Rich Anti-Aging Eye Cream for Mature, Dry Skin",
    "SkinCeuticals Gentle Cleanser | Soothing Cream Cleanser for Dry & Sensitive Skin",
    "SkinCeuticals Glycolic 10 Renew Overnight | Exfoliating Night Serum for Smoother, Radiant Skin",
    "SkinCeuticals Hyaluronic Acid Intensifier | Multi-Glycan Hydrating Serum for Plump & Smooth Skin",
    "SkinCeuticals Hydra Balm | Intensive Moisturizing Balm for Compromised, Dry & Dehydrated Skin",
    "SkinCeuticals Hydrating B5 Gel | Lightweight Moisturizer with Vitamin B5 for Deep Skin Hydration",
    "SkinCeuticals Hydrating B5 Mask | Nourishing Face Mask with Vitamin B5 for Intense Moisture",
    "SkinCeuticals LHA Cleanser | Exfoliating Face Wash for Acne-Prone & Congested Skin",
    "SkinCeuticals LHA Toner | Exfoliating Toner for Clogged Pores & Dead Skin Cell Removal",
    "SkinCeuticals Metacell Renewal B3 | Brightening & Anti-Aging Serum with Vitamin B3",
    "SkinCeuticals Micro-Exfoliating Scrub | Gentle Face Scrub for Smooth & Radiant Skin",
    "SkinCeuticals P-Tiox | Glass Skin Serum for Skin Protection & Repair",
    "SkinCeuticals Phloretin CF | Antioxidant Serum for Environmental Damage & Uneven Skin Tone",
    "SkinCeuticals Phyto A+ Brightening Treatment | Lightweight Gel Moisturizer for Dull, Uneven Skin",
    "SkinCeuticals Phyto Corrective Essence Mist | Hydrating & Soothing Face Mist for Redness and Sensitivity",
    "SkinCeuticals Phyto Corrective Gel | Soothing Hydrating Serum for Redness & Sensitive Skin",
    "SkinCeuticals Phyto Corrective Masque | Soothing Hydrating Mask for Redness & Sensitive Skin",
    "SkinCeuticals Purifying Cleanser | Deep Cleansing Face Wash for Oily & Acne-Prone Skin",
    "SkinCeuticals Redness Neutralizer | Soothing Serum for Sensitive & Redness-Prone Skin",
    "SkinCeuticals Renew Overnight | Intensive Night Cream for Dry & Dehydrated Skin",
    "SkinCeuticals Replenishing Cleanser | Hydrating Face Wash for Dry & Sensitive Skin",
    "SkinCeuticals Resveratrol B E | Nighttime Antioxidant Serum with Pure Resveratrol 1%",
    "SkinCeuticals Retexturing Activator | Exfoliating Serum for Smoother, Refined Skin Texture",
    "SkinCeuticals Retinol 0.3% | Anti-Aging Serum for Wrinkles & Skin Renewal",
    "SkinCeuticals Retinol 0.5% | Anti-Aging Serum for Wrinkles & Skin Renewal",
    "SkinCeuticals Retinol 1.0% | Anti-Aging Serum for Wrinkles & Skin Renewal",
    "SkinCeuticals Serum 10 AOX | Antioxidant Serum with 10% Vitamin C for Brightening & Protection",
    "SkinCeuticals Silymarin CF | Antioxidant Serum for Oily & Acne-Prone Skin",
    "SkinCeuticals Simply Clean | Gentle Foaming Cleanser for All Skin Types",
    "SkinCeuticals Soothing Cleanser | Gentle Face Wash for Sensitive & Irritated Skin",
    "SkinCeuticals Tripeptide-R Neck Repair | Firming & Anti-Aging Treatment for Neck & Décolletage",
    "SkinCeuticals Triple Lipid Restore 2:4:2 | Anti-Aging Moisturizer for Skin Barrier Repair & Hydration",
    "GM Collin Daily Ceramide Comfort | Nourishing Skin Barrier Capsules for Hydration & Repair (20 Ct.)",
    "GM Collin Essential Oil Complex | Nourishing Blend for Calm, Hydrated, Glowing Skin",
    "GM Collin Hydramucine Hydrating Mist | Refreshing Toner for Radiant, Glowy Skin",
    "GM Collin Rosa Sea Gel-Cream | Soothing Moisturizer for Redness & Inflammation",
    "GM Collin Sensiderm Cleansing Milk | Gentle Cleanser for Sensitive & Irritated Skin",
    "Omnilux Contour Face | LED Light Therapy Device for Skin Rejuvenation",
    "Plated Intense Exosomes | Advanced Serum for Skin Repair & Rejuvenation",
    OTHER_PRODUCT_LABEL,
)

LASER_DEVICES: tuple[str, ...] = (
    "Moxi",
    "Halo",
    "BBL (BroadBand Light)",
    "Moxi + BBL",
    "PicoSure",
    "PicoWay",
    "Fraxel",
    "Clear + Brilliant",
    "IPL (Intense Pulsed Light)",
    "Sciton ProFractional",
    "Laser Genesis",
    "VBeam (Pulsed Dye)",
    "Excel V",
    "AcuPulse",
    OTHER_PRODUCT_LABEL,
)

TREATMENT_PRODUCT_OPTIONS: dict[str, tuple[str, ...]] = {
    "Skincare": SKINCARE_PRODUCTS,
    "Laser": LASER_DEVICES,
    "Filler": (
        "Hyaluronic acid (HA) – lip",
        "Hyaluronic acid (HA) – cheek",
        "Hyaluronic acid (HA) – nasolabial",
        "Hyaluronic acid (HA) – tear trough",
        "Hyaluronic acid (HA) – other",
        "Calcium hydroxyapatite (e.g. Radiesse)",
        "PLLA / Sculptra",
        "Polycaprolactone (e.g. Ellansé)",
        OTHER_PRODUCT_LABEL,
    ),
    "Neurotoxin": (
        "OnabotulinumtoxinA (Botox)",
        "AbobotulinumtoxinA (Dysport)",
        "IncobotulinumtoxinA (Xeomin)",
        "PrabotulinumtoxinA (Jeuveau)",
        "DaxibotulinumtoxinA (Daxxify)",
        "LetibotulinumtoxinA (Letybo)",
        "RimabotulinumtoxinB (Myobloc)",
        OTHER_PRODUCT_LABEL,
    ),
    "Chemical Peel": (
        "Glycolic",
        "Salicylic",
        "TCA",
        "Jessner",
        "Lactic acid",
        "Mandelic",
        "Phenol (deep)",
        "VI Peel",
        "Blue peel",
        "Enzyme peel",
        OTHER_PRODUCT_LABEL,
    ),
    "Microneedling": (
        "Standard microneedling",
        "RF microneedling",
        "Nanoneedling",
        "Dermaroller",
        "Dermapen",
        "With growth factors / PRP",
        OTHER_PRODUCT_LABEL,
    ),
    "Biostimulants": (
        "PLLA (e.g. Sculptra)",
        "Calcium hydroxyapatite (e.g. Radiesse)",
        "Polycaprolactone (e.g. Ellansé)",
        "Other collagen stimulator",
        OTHER_PRODUCT_LABEL,
    ),
    "Kybella": (
        "Kybella (deoxycholic acid)",
        "Other injectable",
        OTHER_PRODUCT_LABEL,
    ),
    "Threadlift": (
        "PDO threads",
        "PCL threads",
        "Suspension threads",
        "Barbed",
        "Smooth",
        OTHER_PRODUCT_LABEL,
    ),
}

TREATMENT_META: dict[str, TreatmentMeta] = {
    "Skincare": TreatmentMeta(longevity="Ongoing", downtime="None", price_range="$75–$275"),
    "Laser": TreatmentMeta(longevity="6–12+ months", downtime="3–7 days", price_range="$250–$4,000"),
    "Chemical Peel": TreatmentMeta(longevity="1–3 months", downtime="3–7 days", price_range="$50–$900"),
    "Microneedling": TreatmentMeta(longevity="2–4 months", downtime="1–3 days", price_range="$250–$3,100"),
    "Filler": TreatmentMeta(longevity="6–18 months", downtime="1–2 days", price_range="$750–$950"),
    "Neurotoxin": TreatmentMeta(longevity="3–4 months", downtime="None", price_range="$5.20–$995"),
    "Biostimulants": TreatmentMeta(longevity="18–24+ months", downtime="1–3 days", price_range="$375–$5,200"),
    "Kybella": TreatmentMeta(longevity="Permanent", downtime="3–7 days", price_range="$1,200–$1,800"),
    "Threadlift": TreatmentMeta(longevity="12–18 months", downtime="3–7 days", price_range="$1,500–$4,000"),
}

# Treatments that can be added on the same visit.
SAME_DAY_TREATMENTS: tuple[str, ...] = ("Skincare", "Neurotoxin", "Filler", "Biostimulants")

QUANTITY_QUICK_OPTIONS_DEFAULT: tuple[str, ...] = ("1", "2", "3", "4", "5")
QUANTITY_OPTIONS_FILLER: tuple[str, ...] = ("1", "2", "3", "4", "5")
QUANTITY_OPTIONS_TOX: tuple[str, ...] = ("20", "40", "60", "80", "100")
