from treatment_matcher.matching.models import CandidateItem, ClientProfile, MatchType, SelectionCriteria
from treatment_matcher.matching.scorer import (
    classify,
    criteria_terms,
    display_title,
    match_reason,
    partition,
    relevance_matches,
    score,
    sort_candidates,
    to_result,
)

BOTH = CandidateItem(id="both", name="Balance Lips - Thin Lips", area_names=("Lips",))
INTEREST_ONLY = CandidateItem(id="interest", name="Balance Lips", area_names=("Lips",))
NEITHER = CandidateItem(id="neither", name="Lip Flip", area_names=("Lips",))

CRITERIA = SelectionCriteria(interest="Balance Lips", issue="Thin Lips", region="Lips")


class TestScore:
    def test_terms(self):
        assert criteria_terms(CRITERIA) == ["Balance Lips", "Thin Lips"]
        assert criteria_terms(SelectionCriteria(interest="  ", region="Lips")) == []

    def test_score_counts_terms_in_name(self):
        terms = criteria_terms(CRITERIA)
        assert score(BOTH, terms) == 2
        assert score(INTEREST_ONLY, terms) == 1
        assert score(NEITHER, terms) == 0

    def test_classification(self):
        terms = criteria_terms(CRITERIA)
        assert classify(BOTH, terms) is MatchType.exact
        assert classify(INTEREST_ONLY, terms) is MatchType.close
        assert classify(NEITHER, []) is None

    def test_score_is_monotonic_in_matched_terms(self):
        terms = criteria_terms(CRITERIA)
        ordered = sort_candidates([NEITHER, INTEREST_ONLY, BOTH], terms)
        assert [c.id for c in ordered] == ["both", "interest", "neither"]


class TestOrdering:
    def test_ties_sort_by_folded_name(self):
        items = [
            CandidateItem(id="b", name="beta"),
            CandidateItem(id="a", name="Álpha"),
            CandidateItem(id="c", name="Alpha"),
        ]
        assert [c.id for c in sort_candidates(items, [])] == ["c", "a", "b"]

    def test_folded_ties_order_independent_of_input(self):
        names = ["Álpha", "alpha", "Alpha"]
        for order in (names, list(reversed(names)), names[1:] + names[:1]):
            items = [CandidateItem(id=n, name=n) for n in order]
            assert [c.name for c in sort_candidates(items, [])] == ["Alpha", "alpha", "Álpha"]

    def test_sort_is_stable_for_identical_keys(self):
        items = [CandidateItem(id=str(i), name="Same") for i in range(5)]
        assert [c.id for c in sort_candidates(items, ["x"])] == ["0", "1", "2", "3", "4"]

    def test_partition_with_terms(self):
        exact, close = partition([NEITHER, BOTH, INTEREST_ONLY], criteria_terms(CRITERIA))
        assert [c.id for c in exact] == ["both"]
        assert [c.id for c in close] == ["interest", "neither"]

    def test_partition_without_terms(self):
        exact, close = partition([NEITHER, BOTH], [])
        assert [c.id for c in exact] == ["both", "neither"]
        assert close == []


class TestReason:
    def test_exact(self):
        assert match_reason(BOTH, CRITERIA) == "Exact match"

    def test_issue_then_interest_then_area(self):
        issue_only = CandidateItem(name="Thin Lips fix", area_names=("Lips",))
        assert match_reason(issue_only, CRITERIA) == "Matches Issue: Thin Lips"
        assert match_reason(INTEREST_ONLY, CRITERIA) == "Matches Interest: Balance Lips"
        assert match_reason(NEITHER, CRITERIA) == "Matches Area: Lips"

    def test_close_match_fallback(self):
        elsewhere = CandidateItem(name="Lip Flip", area_names=("Cheeks",))
        assert match_reason(elsewhere, CRITERIA) == "Close match"

    def test_no_terms_no_reason(self):
        assert match_reason(BOTH, SelectionCriteria(region="Lips")) == ""


class TestRelevance:
    def test_similar_skin_type_either_direction(self):
        photo = CandidateItem(skin_type="Dry")
        assert relevance_matches(photo, ClientProfile(skin_type="Very dry")) == ["Similar skin type"]

    def test_similar_skin_tone(self):
        photo = CandidateItem(skin_tone="Light to medium")
        assert relevance_matches(photo, ClientProfile(skin_tone="light")) == ["Similar skin tone"]
        assert relevance_matches(CandidateItem(skin_tone="Light"), ClientProfile(skin_tone="Light to medium")) == []

    def test_no_client(self):
        assert relevance_matches(CandidateItem(skin_type="Dry"), None) == []


class TestTitle:
    def test_name_wins(self):
        assert display_title(CandidateItem(name="  Fuller lips ")) == "Fuller lips"

    def test_treatments_and_areas(self):
        photo = CandidateItem(general_treatments=("Filler", "Biostimulants"), area_names=("Cheeks All", "All"))
        assert display_title(photo) == "Filler, Biostimulants – Cheeks"

    def test_fallback(self):
        assert display_title(CandidateItem(area_names=("Lips",))) == "Lips"
        assert display_title(CandidateItem()) == "Treatment example"


def test_to_result_carries_reason_and_title():
    result = to_result(INTEREST_ONLY, CRITERIA, ClientProfile())
    assert result.match_type is MatchType.close
    assert result.score == 1
    assert result.reason == "Matches Interest: Balance Lips"
    assert result.title == "Balance Lips"
