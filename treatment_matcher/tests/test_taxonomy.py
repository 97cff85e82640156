from treatment_matcher.taxonomy import DEFAULT_REGISTRY
from treatment_matcher.taxonomy.issues import issue_slug
from treatment_matcher.taxonomy.models import Area, GeneralCategory
from treatment_matcher.taxonomy.rules import MatchDirection, Rule, all_matches, first_match, matches_any
from treatment_matcher.taxonomy.suggestions import ALL_TREATMENT_INTERESTS, SUGGESTION_TO_AREA
from treatment_matcher.taxonomy.treatments import (
    ALL_TREATMENTS,
    OTHER_PRODUCT_LABEL,
    SURGICAL_TREATMENTS,
    TREATMENT_PRODUCT_OPTIONS,
)

registry = DEFAULT_REGISTRY


class TestRules:
    def test_text_contains_keyword_is_case_insensitive(self):
        assert matches_any("Balance LIPS", ["lip"])
        assert not matches_any("lip", ["balance lips"])

    def test_keyword_contains_text(self):
        assert matches_any("lip", ["balance lips"], MatchDirection.keyword_contains_text)

    def test_either_direction(self):
        assert matches_any("crow's feet", ["Crow's Feet Wrinkles"], MatchDirection.either)
        assert matches_any("Crow's Feet Wrinkles", ["crow's feet"], MatchDirection.either)

    def test_empty_text_never_matches(self):
        assert not matches_any("", ["lip"])
        assert not matches_any("lips", [""])

    def test_first_and_all_matches(self):
        rules = [Rule(("a",), 1), Rule(("b",), 2), Rule(("ab",), 3)]
        assert first_match("xab", rules) == 1
        assert all_matches("xab", rules) == [1, 2, 3]
        assert first_match("zzz", rules) is None


class TestSuggestions:
    def test_every_interest_has_an_area(self):
        for name in ALL_TREATMENT_INTERESTS:
            assert registry.area_for_suggestion(name) is not None

    def test_interest_catalogue_is_sorted(self):
        assert ALL_TREATMENT_INTERESTS == sorted(SUGGESTION_TO_AREA, key=str.casefold)

    def test_unknown_suggestion_is_unmapped(self):
        assert registry.area_for_suggestion("Grow Taller") is None
        assert registry.issues_for_suggestion("Grow Taller") == []

    def test_issues_for_suggestion(self):
        assert "Thin Lips" in registry.issues_for_suggestion("Balance Lips")

    def test_suggestion_for_issue(self):
        assert registry.suggestion_for_issue("Thin Lips") == "Balance Lips"
        assert registry.suggestion_for_issue("Nasolabial Folds") == "Shadow Correction"
        assert registry.suggestion_for_issue("Unheard Of") is None


class TestIssues:
    def test_display_name_resolves_to_slug(self):
        assert issue_slug("Excess/Submental Fullness") == "submental-fullness"

    def test_untracked_name_is_slugified(self):
        assert issue_slug("Crow's  Feet") == "crows-feet"

    def test_multi_concern_issue(self):
        concerns = registry.concerns_for_issue("Ill-Defined Jawline")
        assert [c.concern_id for c in concerns] == ["skin-laxity", "excess-fat"]
        assert registry.areas_for_issue("Ill-Defined Jawline") == [Area.jawline]
        assert registry.general_category_for_issue("Ill-Defined Jawline") is GeneralCategory.skin_laxity

    def test_areas_are_unioned_in_first_seen_order(self):
        assert registry.areas_for_issue("Nasolabial Folds") == [Area.cheeks, Area.lips]
        assert registry.areas_for_issue("Excess/Submental Fullness") == [Area.chin, Area.jawline]

    def test_unknown_issue_is_empty(self):
        assert registry.concerns_for_issue("Unheard Of") == []
        assert registry.areas_for_issue("Unheard Of") == []
        assert registry.general_category_for_issue("Unheard Of") is None
        assert registry.concern_name_for_issue("Unheard Of") is None

    def test_group_by_category(self):
        rows = registry.group_issues_by_category(["Dry Skin", "Thin Lips", "Jowls", "Mystery", "Dry Skin"])
        assert [r.label for r in rows] == ["Skin Health", "Proportions", "Skin Laxity", "Other"]
        assert rows[0].issues == ["Dry Skin"]
        assert rows[-1].issues == ["Mystery"]

    def test_group_by_concern(self):
        rows = registry.group_issues_by_concern(["Thin Lips", "Dark Spots", "Mystery", " "])
        assert [r.label for r in rows] == ["Facial Structure", "Pigmentation", "Other"]


class TestTreatments:
    def test_surgical_treatments_are_not_offered(self):
        assert not set(SURGICAL_TREATMENTS) & set(ALL_TREATMENTS)

    def test_product_lists_end_with_other(self):
        for products in TREATMENT_PRODUCT_OPTIONS.values():
            assert products[-1] == OTHER_PRODUCT_LABEL

    def test_interest_treatments_are_a_union(self):
        treatments = registry.treatments_for_interest("Balance Lips")
        assert treatments == ["Skincare", "Filler"]

    def test_unmatched_interest_is_empty_in_registry(self):
        assert registry.treatments_for_interest("Grow Taller") == []

    def test_issue_treatments_use_first_matching_row(self):
        assert registry.treatments_for_issue("Acne Scars") == ["Chemical Peel", "Laser", "Skincare"]
        assert registry.treatments_for_issue("Thin Lips") == ["Filler"]

    def test_meta_lookup(self):
        meta = registry.meta_for_treatment("Filler")
        assert meta.price_range == "$750–$950"
        assert registry.meta_for_treatment("Unknown").longevity is None

    def test_products_for_unknown_treatment(self):
        assert registry.products_for_treatment("Unknown") == []
