"""Bidirectional synonym expansion over the job-title and skill tables."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, List, Mapping, Optional, Tuple

from .dictionaries import JOB_TITLE_SYNONYMS, SKILL_SYNONYMS

SynonymTable = Mapping[str, Tuple[str, ...]]


@dataclass(frozen=True, eq=False)
class SynonymDictionaries:
    job_titles: SynonymTable = field(default_factory=dict)
    skills: SynonymTable = field(default_factory=dict)

    def tables(self) -> Tuple[SynonymTable, SynonymTable]:
        return (self.job_titles, self.skills)

    @classmethod
    def from_dicts(
        cls,
        job_titles: Optional[Dict[str, List[str]]] = None,
        skills: Optional[Dict[str, List[str]]] = None,
    ) -> "SynonymDictionaries":
        def _norm(table: Optional[Dict[str, List[str]]]) -> Dict[str, Tuple[str, ...]]:
            return {
                k.lower().strip(): tuple(s.lower().strip() for s in v)
                for k, v in (table or {}).items()
            }

        return cls(job_titles=_norm(job_titles), skills=_norm(skills))


@lru_cache(maxsize=1)
def load_default_synonyms() -> SynonymDictionaries:
    return SynonymDictionaries(job_titles=JOB_TITLE_SYNONYMS, skills=SKILL_SYNONYMS)


def expand_term_with_synonyms(
    term: str,
    synonyms: Optional[SynonymDictionaries] = None,
) -> List[str]:
    """
    Return the term plus every related entry from both tables.

    A key equal to the term contributes itself and all of its synonyms; a
    key whose synonym list contains the term contributes the same (so the
    lookup works in both directions). The result keeps first-seen order
    with the term itself first.
    """
    t = (term or "").lower().strip()
    dictionaries = synonyms if synonyms is not None else load_default_synonyms()

    expanded: Dict[str, None] = {t: None}
    for table in dictionaries.tables():
        for key, values in table.items():
            if key == t or t in values:
                expanded.setdefault(key, None)
                for s in values:
                    expanded.setdefault(s, None)
    return list(expanded)
