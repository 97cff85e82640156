from treatment_matcher.matching.criteria import (
    build_criteria,
    resolve_allowed_products,
    resolve_allowed_treatments,
    resolve_region_for_interest,
    resolve_region_for_issue,
    treatment_options_for,
    treatments_for_interest,
)
from treatment_matcher.matching.models import CandidateItem, SelectionCriteria
from treatment_matcher.taxonomy.treatments import ALL_TREATMENTS, OTHER_PRODUCT_LABEL


class TestAllowedTreatments:
    def test_no_criteria_means_no_restriction(self):
        assert resolve_allowed_treatments(SelectionCriteria()) == frozenset()

    def test_interest_only(self):
        allowed = resolve_allowed_treatments(SelectionCriteria(interest="Balance Lips"))
        assert allowed == {"Skincare", "Filler"}

    def test_other_interest_allows_full_catalogue(self):
        allowed = resolve_allowed_treatments(SelectionCriteria(interest="Other"))
        assert allowed == set(ALL_TREATMENTS)

    def test_unmatched_interest_allows_full_catalogue(self):
        assert treatments_for_interest("Grow Taller") == list(ALL_TREATMENTS)

    def test_issue_only(self):
        allowed = resolve_allowed_treatments(SelectionCriteria(issue="Thin Lips"))
        assert allowed == {"Filler"}

    def test_unmatched_issue_is_no_restriction(self):
        assert resolve_allowed_treatments(SelectionCriteria(issue="Mystery")) == frozenset()

    def test_interest_and_issue_intersect(self):
        allowed = resolve_allowed_treatments(SelectionCriteria(interest="Balance Lips", issue="Thin Lips"))
        assert allowed == {"Filler"}

    def test_disjoint_interest_and_issue_is_no_restriction(self):
        # "Balance Lips" → Skincare/Filler, "Forehead Lines" → Neurotoxin
        allowed = resolve_allowed_treatments(
            SelectionCriteria(interest="Balance Lips", issue="Forehead Lines")
        )
        assert allowed == frozenset()


class TestRegionResolution:
    def test_region_for_interest(self):
        assert resolve_region_for_interest("Balance Lips") == "Lips"
        assert resolve_region_for_interest("Grow Taller") is None

    def test_region_for_issue(self):
        assert resolve_region_for_issue("Nasolabial Folds") == "Cheeks"
        assert resolve_region_for_issue("Mystery") is None


class TestBuildCriteria:
    def test_interest_sets_region(self):
        criteria = build_criteria(interest="Balance Lips")
        assert criteria == SelectionCriteria(interest="Balance Lips", region="Lips")

    def test_issue_supplies_interest_and_region(self):
        criteria = build_criteria(issue="Nasolabial Folds")
        assert criteria.interest == "Shadow Correction"
        assert criteria.issue == "Nasolabial Folds"
        assert criteria.region == "Cheeks"

    def test_explicit_region_wins(self):
        criteria = build_criteria(interest="Balance Lips", region="Skin")
        assert criteria.region == "Skin"

    def test_blank_values_become_none(self):
        assert build_criteria(interest="  ", treatment="") == SelectionCriteria()


class TestAllowedProducts:
    def test_catalogue_without_sentinel(self):
        products = resolve_allowed_products("Kybella")
        assert products == ["Kybella (deoxycholic acid)", "Other injectable"]
        assert OTHER_PRODUCT_LABEL not in products

    def test_context_narrows_products(self):
        products = resolve_allowed_products("Filler", "lips")
        assert products == ["Hyaluronic acid (HA) – lip"]

    def test_unknown_treatment(self):
        assert resolve_allowed_products("Unknown", "lips") == []


def test_treatment_options_restricted_to_interest():
    candidates = [
        CandidateItem(general_treatments=("Filler",)),
        CandidateItem(general_treatments=("Neurotoxin",)),
        CandidateItem(general_treatments=("Oral/Topical",)),
    ]
    assert treatment_options_for(candidates, SelectionCriteria()) == ["Skincare", "Filler", "Neurotoxin"]
    assert treatment_options_for(candidates, SelectionCriteria(interest="Balance Lips")) == ["Skincare", "Filler"]
