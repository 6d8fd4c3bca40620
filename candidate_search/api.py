from __future__ import annotations

"""
FastAPI application exposing the candidate ranking engine.

- The index is built once at startup from the candidate snapshot and
  reused by every request; POST /candidates/reindex rebuilds and swaps it
- A blank query lists candidates newest first (snapshot order by created_at)
- Facet filters, optional re-sorting and pagination apply after ranking
"""

from typing import Literal, Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from . import _singletons
from .candidate_store import find_candidate
from .config import (
    API_MIN_SCORE,
    API_PER_PAGE,
    API_TOP_K,
    CandidateDetailResponse,
    CandidateSearchResponse,
    HealthResponse,
    SearchInsightsResponse,
    SearchOptions,
    configure_logging,
)
from .filters import filter_results, sort_results
from .indexer import CandidatesIndex
from .mapping import map_insights_to_response, map_results_to_response
from .search import enhanced_candidate_search, get_search_insights

app = FastAPI()
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def startup_event() -> None:
    configure_logging()
    logger.info("Starting app warmup...")
    try:
        index = _singletons.get_index()
        logger.info("Candidate index warm with {} candidates", index.corpus_size)
    except (FileNotFoundError, ValueError) as e:
        logger.warning("Candidate snapshot unavailable at startup: {}", e)


def _current_index() -> CandidatesIndex:
    try:
        return _singletons.get_index()
    except (FileNotFoundError, ValueError) as e:
        logger.error("Candidate index could not be built: {}", e)
        raise HTTPException(status_code=500, detail="Candidate data not loaded")


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    index = _singletons.peek_index()
    return HealthResponse(status="healthy", candidates=index.corpus_size if index else 0)


@app.get("/candidates/search", response_model=CandidateSearchResponse)
def search_candidates(
    query: str = "",
    top_k: int = Query(API_TOP_K, ge=1, le=500),
    min_score: float = Query(API_MIN_SCORE, ge=0),
    country: Optional[str] = None,
    location: Optional[str] = None,
    relocation: Optional[str] = None,
    education: Optional[str] = None,
    sort_by: Optional[Literal["name", "date", "location"]] = None,
    ascending: bool = True,
    page: int = Query(1, ge=1),
    per_page: int = Query(API_PER_PAGE, ge=1, le=100),
) -> CandidateSearchResponse:
    index = _current_index()
    results = enhanced_candidate_search(
        index, query, SearchOptions(top_k=top_k, min_score=min_score)
    )
    results = filter_results(
        results,
        country=country,
        location=location,
        relocation=relocation,
        education=education,
    )
    if sort_by:
        results = sort_results(results, sort_by, ascending)
    logger.info("Search {!r} returned {} candidates", query, len(results))
    return map_results_to_response(results, query, page=page, per_page=per_page)


@app.get("/candidates/insights", response_model=SearchInsightsResponse)
def search_insights(query: str = "") -> SearchInsightsResponse:
    return map_insights_to_response(get_search_insights(_current_index(), query))


@app.post("/candidates/reindex", response_model=HealthResponse)
def reindex() -> HealthResponse:
    try:
        index = _singletons.refresh_index()
    except (FileNotFoundError, ValueError) as e:
        logger.error("Reindex failed: {}", e)
        raise HTTPException(status_code=500, detail="Candidate data not loaded")
    return HealthResponse(status="reindexed", candidates=index.corpus_size)


@app.get("/candidates/{candidate_id}", response_model=CandidateDetailResponse)
def get_candidate(candidate_id: str) -> CandidateDetailResponse:
    cand = find_candidate(_current_index().candidates, candidate_id)
    if cand is None:
        raise HTTPException(status_code=404, detail="Candidate not found")
    return CandidateDetailResponse(candidate=cand.to_payload())
