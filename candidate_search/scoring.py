from __future__ import annotations

"""
Field scoring and per-candidate ranking.

Each (query term, field) pair is scored on one of two paths:

* exact: a BM25-style score when the candidate's field holds the term;
* fallback: best token-level relation (exact 1.0, prefix/substring 0.8,
  Levenshtein similarity * 0.9), counted when it clears the fuzzy
  threshold, otherwise a flat 0.5 if the raw field text contains the term.

``score_candidate_against_query`` runs the two priority fields first
(boosted so they dominate), then the secondary fields, then the location
bonus, and rescales the raw total onto an integer 0-100 score.
"""

import math
from typing import Dict, List, Optional

from .config import (
    BM25_B,
    BM25_K1,
    COUNTRY_FIELD,
    FUZZY_CONTRIBUTION,
    FUZZY_TOKEN_PENALTY,
    LOCATION_CONTAINS_BONUS,
    LOCATION_FIELD,
    LOCATION_FUZZY_BONUS,
    LOCATION_FUZZY_MIN_SIMILARITY,
    PRIORITY_FIELDS,
    RAW_SUBSTRING_SCORE,
    SCORE_SOFT_CEILING,
    SUBSTRING_TOKEN_SCORE,
    ScoringConfig,
)
from .fuzzy import fuzzy_score
from .indexer import CandidatesIndex
from .normalize import tokenize
from .pipeline_types import EnhancedSearchResult, MatchedField, ParsedQuery


def round_half_up(value: float, ndigits: int = 0) -> float:
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def normalize_score(raw_score: float, ceiling: float = SCORE_SOFT_CEILING) -> int:
    """Cap at the soft ceiling and rescale linearly onto an integer in [0, 100]."""
    capped = min(max(raw_score, 0.0), ceiling)
    return int(round_half_up(capped / ceiling * 100))


# ---------------------------------------------------------------------------
# Term-level scores
# ---------------------------------------------------------------------------

def bm25_field_score(
    term: str,
    field: str,
    cand_idx: int,
    index: CandidatesIndex,
    k1: float = BM25_K1,
    b: float = BM25_B,
) -> float:
    tf = index.term_freqs[cand_idx].get(field, {}).get(term, 0)
    if tf == 0:
        return 0.0

    df = index.doc_freqs.get(field, {}).get(term, 0)
    n = max(1, index.corpus_size)
    idf = math.log(1 + (n - df + 0.5) / (df + 0.5))

    field_len = index.field_lengths[cand_idx].get(field, 0)
    avg_len = index.avg_field_length.get(field) or 1.0

    numer = tf * (k1 + 1)
    denom = tf + k1 * (1 - b + b * field_len / max(1.0, avg_len))
    return max(0.0, idf * (numer / denom))


def field_fuzzy_token_score(term: str, field: str, cand_idx: int, index: CandidatesIndex) -> float:
    """Best token relation in [0, 1] between ``term`` and the field's tokens."""
    tokens = index.term_freqs[cand_idx].get(field)
    if not tokens:
        return 0.0
    best = 0.0
    for tok in tokens:
        if tok == term:
            return 1.0
        if term in tok or term.startswith(tok):
            best = max(best, SUBSTRING_TOKEN_SCORE)
        else:
            best = max(best, fuzzy_score(term, tok) * FUZZY_TOKEN_PENALTY)
    return best


def evaluate_field(
    field: str,
    cand_idx: int,
    index: CandidatesIndex,
    terms: List[str],
    config: Optional[ScoringConfig] = None,
    boost: float = 1.0,
) -> float:
    """Sum per-term scores for one field, times the field weight and boost."""
    cfg = config or ScoringConfig()
    field_value = index.candidates[cand_idx].field_text(field)
    if not field_value:
        return 0.0
    lowered = field_value.lower()

    field_score = 0.0
    for term in terms:
        bm = bm25_field_score(term, field, cand_idx, index)
        if bm > 0:
            field_score += bm
            continue

        fs = field_fuzzy_token_score(term, field, cand_idx, index)
        if fs >= cfg.fuzzy_threshold:
            field_score += fs * FUZZY_CONTRIBUTION
        elif term and term in lowered:
            field_score += RAW_SUBSTRING_SCORE

    weight = index.field_weights.get(field, 1.0)
    return field_score * weight * boost


# ---------------------------------------------------------------------------
# Candidate ranking
# ---------------------------------------------------------------------------

def _location_bonus(
    cand_idx: int, index: CandidatesIndex, requested_location: str
) -> Optional[MatchedField]:
    cand = index.candidates[cand_idx]
    cand_loc = f"{cand.field_text(LOCATION_FIELD)} {cand.field_text(COUNTRY_FIELD)}".lower()
    wanted = requested_location.lower()
    weight = index.field_weights.get(LOCATION_FIELD) or 1.0

    if wanted and wanted in cand_loc:
        return MatchedField(
            field="location_bonus",
            score=LOCATION_CONTAINS_BONUS * weight,
            explanation="Requested location directly matched (contains)",
        )

    loc_tokens = tokenize(cand_loc, index.options)
    best = 0.0
    for t in tokenize(wanted, index.options):
        for lt in loc_tokens:
            best = max(best, fuzzy_score(t, lt))
    if best >= LOCATION_FUZZY_MIN_SIMILARITY:
        bonus = LOCATION_FUZZY_BONUS * best * weight
        return MatchedField(
            field="location_bonus",
            score=bonus,
            explanation=f"Requested location fuzzy match ({int(round_half_up(best * 100))}%)",
        )
    return None


def score_candidate_against_query(
    cand_idx: int,
    index: CandidatesIndex,
    parsed: ParsedQuery,
    config: Optional[ScoringConfig] = None,
    terms: Optional[List[str]] = None,
) -> EnhancedSearchResult:
    cfg = config or ScoringConfig()
    terms = terms if terms is not None else list(parsed.tokens)
    matched: List[MatchedField] = []
    total = 0.0

    # 1) priority fields, boosted as a block
    priority_score = 0.0
    for f in PRIORITY_FIELDS:
        s = evaluate_field(f, cand_idx, index, terms, cfg)
        if s > 0:
            matched.append(
                MatchedField(field=f, score=round_half_up(s, 2), explanation="Priority field initial match")
            )
        priority_score += s
    if priority_score > 0:
        total += priority_score * cfg.top_field_boost_multiplier

    # 2) everything else
    for f, weight in index.field_weights.items():
        if f in PRIORITY_FIELDS:
            continue
        s = evaluate_field(f, cand_idx, index, terms, cfg)
        if s > 0:
            matched.append(
                MatchedField(
                    field=f,
                    score=round_half_up(s, 2),
                    explanation=f"Secondary field match (weight={weight:g})",
                )
            )
            total += s

    # 3) at most one location bonus
    location_bonus = 0.0
    if parsed.requested_location:
        bonus = _location_bonus(cand_idx, index, parsed.requested_location)
        if bonus is not None:
            location_bonus = bonus.score
            total += location_bonus
            bonus.score = round_half_up(bonus.score, 2)
            matched.append(bonus)

    debug: Dict[str, float] = {
        "raw_score": total,
        "priority_score": priority_score,
        "location_bonus": location_bonus,
    }
    return EnhancedSearchResult(
        candidate=index.candidates[cand_idx],
        score=normalize_score(total),
        matched_fields=matched,
        debug=debug,
    )
