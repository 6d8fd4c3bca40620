from candidate_search.query_analysis import parse_query_raw, split_location_clause
from candidate_search.synonyms import SynonymDictionaries

NO_SYNONYMS = SynonymDictionaries()


def test_trailing_location_clause_is_split_off():
    parsed = parse_query_raw("teacher in kumasi", synonyms=NO_SYNONYMS)
    assert parsed.raw_job_title == "teacher"
    assert parsed.raw_location == "kumasi"
    assert parsed.requested_location == "kumasi"
    assert parsed.tokens == ["teacher", "kumasi"]


def test_multi_word_prepositions():
    assert split_location_clause("nurse located in Tamale") == ("nurse", "Tamale")
    assert split_location_clause("security guard stationed at Tema Harbour") == (
        "security guard",
        "Tema Harbour",
    )


def test_location_match_is_case_insensitive():
    parsed = parse_query_raw("Teacher IN Kumasi", synonyms=NO_SYNONYMS)
    assert parsed.requested_location == "Kumasi"
    assert "kumasi" in parsed.tokens


def test_no_location_clause():
    parsed = parse_query_raw("software developer", synonyms=NO_SYNONYMS)
    assert parsed.requested_location is None
    assert parsed.raw_location == ""
    assert parsed.raw_job_title == "software developer"
    assert parsed.tokens == ["software", "developer"]


def test_preposition_inside_a_word_is_not_a_clause():
    parsed = parse_query_raw("maintenance engineer", synonyms=NO_SYNONYMS)
    assert parsed.requested_location is None


def test_clause_cannot_span_a_comma():
    parsed = parse_query_raw("driver based in East Legon, Accra", synonyms=NO_SYNONYMS)
    assert parsed.requested_location is None


def test_only_role_tokens_are_expanded():
    syn = SynonymDictionaries.from_dicts(
        job_titles={"teacher": ["tutor"]},
        skills={"kumasi": ["ashanti"]},
    )
    parsed = parse_query_raw("teacher in kumasi", synonyms=syn)
    assert parsed.tokens == ["teacher", "tutor", "kumasi"]


def test_default_dictionaries_expand_role():
    parsed = parse_query_raw("teacher")
    assert parsed.tokens[0] == "teacher"
    assert "tutor" in parsed.tokens


def test_empty_query():
    parsed = parse_query_raw("")
    assert parsed.tokens == []
    assert parsed.requested_location is None
