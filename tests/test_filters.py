from candidate_search.filters import (
    apply_filters,
    count_by_field,
    filter_results,
    paginate,
    sort_candidates,
    sort_results,
    total_pages,
)
from candidate_search.pipeline_types import CandidateRecord, EnhancedSearchResult


def _cands():
    return [
        CandidateRecord(id=1, country="Ghana", exact_location="East Legon, Accra",
                        willingness_to_relocate="Yes", highest_education="Bachelor's Degree"),
        CandidateRecord(id=2, country="Nigeria", exact_location="Lagos",
                        willingness_to_relocate="No", highest_education="High School"),
        CandidateRecord(id=3, country="Ghana", exact_location="Kumasi"),
    ]


def test_country_filter_is_exact():
    assert [c.id for c in apply_filters(_cands(), country="Ghana")] == [1, 3]
    assert len(apply_filters(_cands(), country="All Countries")) == 3


def test_location_and_education_filters_are_contains():
    assert [c.id for c in apply_filters(_cands(), location="accra")] == [1]
    assert [c.id for c in apply_filters(_cands(), education="bachelor")] == [1]
    assert len(apply_filters(_cands(), location="All Locations")) == 3


def test_relocation_filter_is_case_insensitive_equality():
    assert [c.id for c in apply_filters(_cands(), relocation="no")] == [2]
    assert len(apply_filters(_cands(), relocation="All")) == 3


def test_filters_combine():
    assert [c.id for c in apply_filters(_cands(), country="Ghana", location="kumasi")] == [3]


def test_pagination():
    items = list(range(25))
    assert paginate(items, 1, 12) == list(range(12))
    assert paginate(items, 3, 12) == [24]
    assert paginate(items, 4, 12) == []
    assert total_pages(25, 12) == 3
    assert total_pages(0, 12) == 0


def test_count_by_field_uses_unknown_for_blanks():
    counts = count_by_field(_cands() + [CandidateRecord(id=4)], "country")
    assert counts == {"Ghana": 2, "Nigeria": 1, "Unknown": 1}


def test_filter_results_keeps_rank_order():
    cands = _cands()
    results = [EnhancedSearchResult(candidate=c, score=s) for c, s in zip(reversed(cands), (90, 50, 10))]
    kept = filter_results(results, country="Ghana")
    assert [r.candidate.id for r in kept] == [3, 1]


def _dated():
    return [
        CandidateRecord(id=1, full_name="kofi", exact_location="Tema", created_at="2024-03-01T10:00:00"),
        CandidateRecord(id=2, full_name="Ama", exact_location="accra", created_at="2024-05-01T10:00:00"),
        CandidateRecord(id=3, full_name="Efua", created_at="2024-01-01T10:00:00"),
    ]


def test_sort_candidates_by_date_both_directions():
    assert [c.id for c in sort_candidates(_dated())] == [3, 1, 2]
    assert [c.id for c in sort_candidates(_dated(), "date", ascending=False)] == [2, 1, 3]


def test_sort_candidates_by_name_and_location_ignore_case():
    assert [c.id for c in sort_candidates(_dated(), "name")] == [2, 3, 1]
    # blank location sorts first ascending
    assert [c.id for c in sort_candidates(_dated(), "location")] == [3, 2, 1]


def test_sort_keeps_input_order_for_equal_keys():
    cands = [CandidateRecord(id=i) for i in range(4)]
    assert [c.id for c in sort_candidates(cands, "date", ascending=False)] == [0, 1, 2, 3]


def test_sort_results_reorders_ranked_list():
    results = [EnhancedSearchResult(candidate=c, score=s) for c, s in zip(_dated(), (90, 50, 10))]
    assert [r.candidate.id for r in sort_results(results, "name")] == [2, 3, 1]
