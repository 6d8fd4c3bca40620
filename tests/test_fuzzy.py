from candidate_search.fuzzy import fuzzy_score, levenshtein_distance


def test_levenshtein_classic_pairs():
    assert levenshtein_distance("kitten", "sitting") == 3
    assert levenshtein_distance("flaw", "lawn") == 2
    assert levenshtein_distance("kumasi", "kumasi") == 0


def test_levenshtein_is_case_insensitive():
    assert levenshtein_distance("ACCRA", "accra") == 0


def test_levenshtein_empty_sides():
    assert levenshtein_distance("", "abc") == 3
    assert levenshtein_distance("abc", "") == 3
    assert levenshtein_distance("", "") == 0


def test_fuzzy_score_bounds_and_values():
    assert fuzzy_score("abcd", "abxy") == 0.5
    assert fuzzy_score("kumasi", "kumasi") == 1.0
    assert fuzzy_score("a", "xyz") == 0.0
    assert fuzzy_score("teacher", "teaching") == 1 - 3 / 8


def test_fuzzy_score_empty_is_zero():
    assert fuzzy_score("", "teacher") == 0.0
    assert fuzzy_score("teacher", "") == 0.0


def test_fuzzy_score_is_symmetric():
    assert fuzzy_score("driver", "diver") == fuzzy_score("diver", "driver")
