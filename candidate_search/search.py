from __future__ import annotations
"""
Search orchestrator for the candidate ranking engine.

Two-stage pipeline:
- prefilter on the two priority fields (exact postings, else fuzzy scan of
  the field vocabulary), falling back to the whole corpus when nothing hits
- full scoring of the prefiltered set, sort, priority-presence tie-break
- min-score filter that never empties a non-empty result list
"""

from dataclasses import replace
from typing import List, Optional, Set

import numpy as np
from loguru import logger

from .config import (
    INSIGHTS_MATCH_FLOOR,
    INSIGHTS_TOP_MATCHES,
    PREFILTER_FUZZY_MIN_SIMILARITY,
    PRIORITY_FIELDS,
    ScoringConfig,
    SearchOptions,
)
from .fuzzy import fuzzy_score
from .indexer import CandidatesIndex
from .pipeline_types import EnhancedSearchResult, SearchInsights
from .query_analysis import parse_query_raw, scoring_terms
from .scoring import round_half_up, score_candidate_against_query


# =============================================================================
# Prefilter
# =============================================================================

def prefilter_candidates(index: CandidatesIndex, terms: List[str]) -> List[int]:
    """
    Positions whose priority fields hold any term, exactly or fuzzily.

    When a term has no exact posting in a field, the field's whole
    vocabulary is scanned for terms at >= 0.8 similarity. That scan is
    O(vocabulary) per term and is the known cost hot spot on big corpora.
    """
    hits: Set[int] = set()
    for term in terms:
        for pf in PRIORITY_FIELDS:
            postings = index.inverted.get(pf, {})
            exact = postings.get(term)
            if exact:
                hits.update(exact)
                continue
            for tok in index.doc_freqs.get(pf, {}):
                if fuzzy_score(term, tok) >= PREFILTER_FUZZY_MIN_SIMILARITY:
                    hits.update(postings.get(tok, ()))

    if not hits:
        logger.warning(
            "Prefilter matched nothing on priority fields; scoring all {} candidates",
            index.corpus_size,
        )
        return list(range(index.corpus_size))
    return sorted(hits)


def _priority_presence(result: EnhancedSearchResult) -> int:
    return sum(1 for f in PRIORITY_FIELDS if result.candidate.field_text(f))


def _strip_debug(results: List[EnhancedSearchResult]) -> List[EnhancedSearchResult]:
    return [replace(r, debug=None) for r in results]


# =============================================================================
# Public search API
# =============================================================================

def enhanced_candidate_search(
    index: CandidatesIndex,
    query: str,
    options: Optional[SearchOptions] = None,
    config: Optional[ScoringConfig] = None,
) -> List[EnhancedSearchResult]:
    """
    Rank the indexed candidates against a free-text query.

    A blank query returns the first ``top_k`` candidates in snapshot order
    with score 0. Otherwise the best ``top_k`` results scoring at least
    ``min_score`` are returned, or the best ``top_k`` overall when none
    qualifies.
    """
    opts = options or SearchOptions()
    top_k = opts.top_k

    if not query or not query.strip():
        return [EnhancedSearchResult(candidate=c, score=0) for c in index.candidates[:top_k]]

    parsed = parse_query_raw(query, index.options, index.synonyms)
    terms = scoring_terms(parsed, index.options)

    positions = prefilter_candidates(index, terms)
    logger.debug("Query {!r}: {} terms, {} candidates after prefilter", query, len(terms), len(positions))

    scored = [
        score_candidate_against_query(ci, index, parsed, config, terms=terms)
        for ci in positions
    ]
    # stable sort keeps corpus order for residual ties
    scored.sort(key=lambda r: (-r.score, -_priority_presence(r)))

    filtered = [r for r in scored if r.score >= opts.min_score][:top_k]
    if not filtered:
        if scored:
            logger.warning(
                "No candidate reached min_score={} for {!r}; returning best {} regardless",
                opts.min_score,
                query,
                min(top_k, len(scored)),
            )
        filtered = scored[:top_k]

    if opts.debug:
        return filtered
    return _strip_debug(filtered)


def get_search_insights(
    index: CandidatesIndex,
    query: str,
    config: Optional[ScoringConfig] = None,
) -> SearchInsights:
    """
    Score the whole corpus (no prefilter) and summarise the outcome.
    Diagnostic only; not meant for the hot query path.
    """
    parsed = parse_query_raw(query or "", index.options, index.synonyms)
    terms = scoring_terms(parsed, index.options)

    scored_all = [
        score_candidate_against_query(ci, index, parsed, config, terms=terms)
        for ci in range(index.corpus_size)
    ]
    scored_all.sort(key=lambda r: -r.score)
    matched = [r for r in scored_all if r.score > INSIGHTS_MATCH_FLOOR]

    average = 0
    if matched:
        average = int(round_half_up(float(np.mean([r.score for r in matched]))))

    return SearchInsights(
        total_candidates=index.corpus_size,
        matched_candidates=len(matched),
        top_matches=matched[:INSIGHTS_TOP_MATCHES],
        average_score=average,
    )
