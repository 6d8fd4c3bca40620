# candidate_search/_singletons.py
from functools import lru_cache
from typing import List, Optional

from loguru import logger

from .candidate_store import load_candidates_snapshot
from .filters import sort_candidates
from .indexer import CandidatesIndex, build_candidates_index
from .pipeline_types import CandidateRecord

# Read-only once published; refresh_index swaps the reference wholesale.
_INDEX: Optional[CandidatesIndex] = None


@lru_cache(maxsize=1)
def get_candidates() -> List[CandidateRecord]:
    # newest first, the default listing order
    return sort_candidates(load_candidates_snapshot(), "date", ascending=False)


def get_index() -> CandidatesIndex:
    global _INDEX
    if _INDEX is None:
        _INDEX = build_candidates_index(get_candidates())
    return _INDEX


def peek_index() -> Optional[CandidatesIndex]:
    """The published index, without building one."""
    return _INDEX


def refresh_index() -> CandidatesIndex:
    global _INDEX
    get_candidates.cache_clear()
    fresh = build_candidates_index(get_candidates())
    _INDEX = fresh
    logger.info("Candidate index refreshed ({} candidates)", fresh.corpus_size)
    return fresh


def set_index(index: Optional[CandidatesIndex]) -> None:
    global _INDEX
    _INDEX = index
