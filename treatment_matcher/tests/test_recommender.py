from dataclasses import replace

from treatment_matcher.matching.models import PlanItem
from treatment_matcher.recommender import (
    goal_region_treatments_for_finding,
    goals_and_regions_for_treatment,
    recommended_products,
    suggested_treatments_for_findings,
)
from treatment_matcher.recommender.findings import (
    findings_by_area_for_treatment,
    findings_for_here_for,
    findings_for_treatment,
    findings_from_concerns,
)
from treatment_matcher.recommender.plan import (
    display_area_for_item,
    display_area_for_text,
    filter_treatments_by_same_day,
    quantity_context,
)
from treatment_matcher.taxonomy import DEFAULT_REGISTRY
from treatment_matcher.taxonomy.catalogues import ALL_INTEREST_OPTIONS, REGION_OPTIONS


class TestFindingRecommendation:
    def test_thin_lips(self):
        rec = goal_region_treatments_for_finding("Thin Lips")
        assert rec.goal == "Balance Lips"
        assert rec.region == "Lips"
        assert rec.treatments == ("Filler", "Neurotoxin")

    def test_first_matching_row_wins(self):
        # "over-project" belongs to the Contour Jawline row, but "chin" matches earlier
        assert goal_region_treatments_for_finding("Over-Projected Chin").goal == "Balance Jawline"

    def test_empty_other_and_unmatched(self):
        assert goal_region_treatments_for_finding("") is None
        assert goal_region_treatments_for_finding("Other finding") is None
        assert goal_region_treatments_for_finding("Something new") is None

    def test_suggested_treatments_are_deduplicated(self):
        rows = suggested_treatments_for_findings(["Thin Lips", "Asymmetric Lips", "Gummy Smile", "Mystery"])
        assert [(r.treatment, r.goal, r.example_finding) for r in rows] == [
            ("Filler", "Balance Lips", "Thin Lips"),
            ("Neurotoxin", "Balance Lips", "Thin Lips"),
        ]

    def test_findings_for_treatment(self):
        findings = findings_for_treatment("kybella")
        assert findings == [
            "Ill-Defined Jawline",
            "Jowls",
            "Excess/Submental Fullness",
            "Platysmal Bands",
            "Loose Neck Skin",
        ]

    def test_findings_by_area(self):
        groups = findings_by_area_for_treatment("Kybella")
        assert [g.area for g in groups] == ["Jawline", "Neck"]
        assert groups[1].findings == ["Platysmal Bands", "Loose Neck Skin"]

    def test_findings_for_here_for(self):
        tox = findings_for_here_for("Tox")
        filler = findings_for_here_for("Filler")
        both = findings_for_here_for(None)
        assert "Gummy Smile" in tox and "Gummy Smile" not in filler
        assert "Jowls" in filler and "Jowls" not in tox
        assert both == sorted(set(tox) | set(filler), key=str.casefold)

    def test_findings_from_concerns(self):
        findings = findings_from_concerns(["Pigmentation", "Skin texture", "Unknown"])
        assert findings == ["Dark Spots", "Red Spots", "Fine Lines", "Sagging Skin"]


class TestGoalsForTreatment:
    def test_kybella(self):
        result = goals_and_regions_for_treatment("Kybella")
        assert result.goals == ["Contour Jawline", "Balance Jawline", "Contour Neck"]
        assert result.regions[0] == "Jawline"

    def test_unknown_treatment_falls_back_to_catalogues(self):
        result = goals_and_regions_for_treatment("Rhinoplasty")
        assert result.goals == list(ALL_INTEREST_OPTIONS)
        assert result.regions == list(REGION_OPTIONS)

    def test_goals_without_regions_fall_back_to_region_catalogue(self):
        registry = replace(DEFAULT_REGISTRY, goal_region_rules=[])
        result = goals_and_regions_for_treatment("Kybella", registry)
        assert result.goals == ["Contour Jawline", "Balance Jawline", "Contour Neck"]
        assert result.regions == list(REGION_OPTIONS)


class TestRecommendedProducts:
    def test_filler_cheek_volume(self):
        assert recommended_products("Filler", "cheek volume") == [
            "Hyaluronic acid (HA) – cheek",
            "PLLA / Sculptra",
            "Calcium hydroxyapatite (e.g. Radiesse)",
        ]

    def test_union_is_deduplicated(self):
        products = recommended_products("Chemical Peel", "acne and dark spot")
        assert products == ["Salicylic", "Glycolic", "Jessner", "Mandelic", "TCA", "VI Peel", "Lactic acid"]

    def test_blank_context(self):
        assert recommended_products("Filler", "   ") == []

    def test_unknown_treatment(self):
        assert recommended_products("Unknown", "cheek") == []


class TestPlanHelpers:
    def test_quantity_context(self):
        assert quantity_context("Filler").unit_label == "Syringes"
        assert quantity_context("Botox").unit_label == "Units"
        assert quantity_context("Neurotoxin").options == ["20", "40", "60", "80", "100"]
        assert quantity_context("RF microneedling").unit_label == "Sessions"
        assert quantity_context("Kybella").unit_label == "Quantity"
        assert quantity_context(None).unit_label == "Quantity"

    def test_same_day_filter(self):
        names = ["Skincare", "Laser", "Filler", "Kybella"]
        assert filter_treatments_by_same_day(names, True) == ["Skincare", "Filler"]
        assert filter_treatments_by_same_day(names, False) == names

    def test_display_area_for_text(self):
        assert display_area_for_text("Under eyes") == "Eyes"
        assert display_area_for_text("Crow's feet") == "Eyes"
        assert display_area_for_text("Balance Brows") is None
        assert display_area_for_text("Prejowl sulcus") == "Jawline"
        assert display_area_for_text("Hydrate Skin") == "Skin"
        assert display_area_for_text("  ") is None

    def test_display_area_for_item(self):
        assert display_area_for_item(PlanItem(region="Multiple", interest="Balance Lips")) == "Lips"
        assert display_area_for_item(PlanItem(findings=["Mystery", "Jowls"])) == "Jawline"
        assert display_area_for_item(PlanItem()) is None
