from __future__ import annotations
"""
Mapping utilities to convert engine results into API responses.

Centralises the conversion from ``EnhancedSearchResult`` into the pydantic
schemas (CandidateSearchItem / CandidateSearchResponse) so the HTTP layer
and the debug CLI present results the same way.
"""

from typing import Iterable, List

from .config import (
    COUNTRY_FIELD,
    JOB_FIELD,
    CandidateSearchItem,
    CandidateSearchResponse,
    MatchedFieldItem,
    SearchInsightsResponse,
)
from .filters import count_by_field, paginate, total_pages
from .pipeline_types import EnhancedSearchResult, SearchInsights


def _clamp_score(score: float) -> int:
    return max(0, min(100, int(score)))


def to_api_item(result: EnhancedSearchResult) -> CandidateSearchItem:
    return CandidateSearchItem(
        candidate=result.candidate.to_payload(),
        score=_clamp_score(result.score),
        matched_fields=[
            MatchedFieldItem(field=m.field, score=m.score, explanation=m.explanation)
            for m in result.matched_fields
        ],
    )


def map_results_to_response(
    results: Iterable[EnhancedSearchResult],
    query: str,
    page: int = 1,
    per_page: int = 12,
) -> CandidateSearchResponse:
    """
    Map the full ranked list into a single response page, with country and
    position facet counts over the whole list.
    """
    ranked: List[EnhancedSearchResult] = list(results)
    matched = [r.candidate for r in ranked]
    page = max(1, page)
    return CandidateSearchResponse(
        query=query,
        total=len(ranked),
        page=page,
        total_pages=total_pages(len(ranked), per_page),
        candidates=[to_api_item(r) for r in paginate(ranked, page, per_page)],
        countries=count_by_field(matched, COUNTRY_FIELD),
        positions=count_by_field(matched, JOB_FIELD),
    )


def map_insights_to_response(insights: SearchInsights) -> SearchInsightsResponse:
    return SearchInsightsResponse(
        total_candidates=insights.total_candidates,
        matched_candidates=insights.matched_candidates,
        average_score=insights.average_score,
        top_matches=[to_api_item(r) for r in insights.top_matches],
    )
