import pytest

from candidate_search.dictionaries import JOB_TITLE_SYNONYMS
from candidate_search.synonyms import (
    SynonymDictionaries,
    expand_term_with_synonyms,
    load_default_synonyms,
)


def test_expand_known_key_includes_its_synonyms():
    expanded = expand_term_with_synonyms("teacher")
    assert expanded[0] == "teacher"
    assert "tutor" in expanded
    assert "educator" in expanded


def test_expand_is_bidirectional():
    expanded = expand_term_with_synonyms("tutor")
    # "teacher" and "lecturer" both list "tutor"
    assert "teacher" in expanded
    assert "lecturer" in expanded
    assert "professor" in expanded


def test_expand_unknown_term_returns_itself():
    assert expand_term_with_synonyms("zookeeper") == ["zookeeper"]


def test_expand_normalises_case_and_whitespace():
    assert expand_term_with_synonyms("  Teacher ")[0] == "teacher"


def test_expand_uses_injected_tables():
    syn = SynonymDictionaries.from_dicts(job_titles={"Cleaner": ["Maid"]})
    assert expand_term_with_synonyms("maid", syn) == ["maid", "cleaner"]
    assert expand_term_with_synonyms("cleaner", syn) == ["cleaner", "maid"]


def test_expand_checks_skill_table_too():
    syn = SynonymDictionaries.from_dicts(skills={"excel": ["spreadsheet"]})
    assert expand_term_with_synonyms("spreadsheet", syn) == ["spreadsheet", "excel"]


def test_expand_has_no_duplicates():
    expanded = expand_term_with_synonyms("chef")
    assert len(expanded) == len(set(expanded))


def test_default_tables_are_shared_and_read_only():
    assert load_default_synonyms() is load_default_synonyms()
    with pytest.raises(TypeError):
        JOB_TITLE_SYNONYMS["astronaut"] = ("cosmonaut",)  # type: ignore[index]
