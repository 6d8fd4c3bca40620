from __future__ import annotations

import os
import re
import sys
from pathlib import Path
from typing import Any, Dict, FrozenSet, List, Optional

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field


# ---------------------------
# Paths
# ---------------------------

PROJECT_ROOT = Path(__file__).resolve().parents[1]

DATA_DIR = PROJECT_ROOT / "data"
CANDIDATES_SNAPSHOT_PATH = Path(
    os.getenv("CANDIDATES_SNAPSHOT_PATH", str(DATA_DIR / "candidates.json"))
)


# ---------------------------
# Index defaults
# ---------------------------

# split on anything that is not a unicode letter or digit
TOKENIZE_PATTERN = r"[\W_]+"
MIN_TOKEN_LEN = 2

STOPWORDS: FrozenSet[str] = frozenset(
    {
        "the",
        "and",
        "a",
        "an",
        "in",
        "on",
        "at",
        "for",
        "of",
        "to",
        "with",
        "by",
        "from",
        "is",
        "are",
        "as",
    }
)

# The two privileged fields. Their weights must stay well above every other
# field (roughly 5-8x the next highest).
JOB_FIELD = "job_looking_for"
LOCATION_FIELD = "exact_location"
COUNTRY_FIELD = "country"
PRIORITY_FIELDS: List[str] = [JOB_FIELD, LOCATION_FIELD]

DEFAULT_FIELD_WEIGHTS: Dict[str, float] = {
    JOB_FIELD: 10.0,
    LOCATION_FIELD: 8.0,
    "highest_education": 1.2,
    "future_learning_plans": 1.0,
    "skills": 1.5,
    "work_history": 1.0,
    "education_history": 0.9,
    "certifications": 0.7,
    "projects": 0.6,
    "publications": 0.5,
    "awards": 0.4,
    "professional_affiliations": 0.4,
    "interests": 0.3,
    "professional_references": 0.2,
}


# ---------------------------
# Scoring constants
# ---------------------------

BM25_K1 = 1.2
BM25_B = 0.75

FUZZY_THRESHOLD = 0.45
FUZZY_TOKEN_PENALTY = 0.9     # fuzzy token similarity is always below exact/substring
SUBSTRING_TOKEN_SCORE = 0.8   # prefix / substring relation between term and token
FUZZY_CONTRIBUTION = 0.8      # share of a fuzzy-path hit that reaches the field score
RAW_SUBSTRING_SCORE = 0.5     # low-confidence containment on the raw field text

TOP_FIELD_BOOST_MULTIPLIER = 2.5

LOCATION_CONTAINS_BONUS = 40.0
LOCATION_FUZZY_BONUS = 25.0
LOCATION_FUZZY_MIN_SIMILARITY = 0.75

SCORE_SOFT_CEILING = 300.0


# ---------------------------
# Orchestrator defaults
# ---------------------------

PREFILTER_FUZZY_MIN_SIMILARITY = 0.8

DEFAULT_TOP_K = int(os.getenv("CANDIDATE_SEARCH_TOP_K", "50"))
DEFAULT_MIN_SCORE = float(os.getenv("CANDIDATE_SEARCH_MIN_SCORE", "10"))

INSIGHTS_MATCH_FLOOR = 10      # strictly greater than counts as matched
INSIGHTS_TOP_MATCHES = 10


# ---------------------------
# API defaults
# ---------------------------

# The search route serves a results page rather than the full top-50 list.
API_TOP_K = 36
API_MIN_SCORE = 0.0
API_PER_PAGE = 12


# ---------------------------
# Logging / observability
# ---------------------------

LOG_LEVEL = os.getenv("CANDIDATE_SEARCH_LOG_LEVEL", "INFO")


def configure_logging(level: Optional[str] = None) -> None:
    """Route loguru output to stderr at the configured level."""
    logger.remove()
    logger.add(sys.stderr, level=(level or LOG_LEVEL).upper())


# ---------------------------
# Typed options
# ---------------------------

class IndexOptions(BaseModel):
    """
    Tokenisation settings shared by the indexer and the query parser.
    Queries must be tokenised the same way as the documents they hit.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    tokenize_regex: re.Pattern = Field(default_factory=lambda: re.compile(TOKENIZE_PATTERN))
    min_token_len: int = Field(default=MIN_TOKEN_LEN, ge=1)
    stopwords: FrozenSet[str] = STOPWORDS


class ScoringConfig(BaseModel):
    """Per-call knobs for the candidate ranker."""

    fuzzy_threshold: float = Field(default=FUZZY_THRESHOLD, ge=0.0, le=1.0)
    top_field_boost_multiplier: float = Field(default=TOP_FIELD_BOOST_MULTIPLIER, ge=0.0)


class SearchOptions(BaseModel):
    top_k: int = Field(default=DEFAULT_TOP_K, ge=1)
    min_score: float = Field(default=DEFAULT_MIN_SCORE, ge=0.0)
    debug: bool = False


# ---------------------------
# Pydantic models shared around the app
# ---------------------------

class MatchedFieldItem(BaseModel):
    field: str
    score: float
    explanation: str


class CandidateSearchItem(BaseModel):
    """
    One ranked candidate as returned over HTTP: the full candidate payload,
    its 0-100 score and the matched-field trail.
    """

    candidate: Dict[str, Any]
    score: int = Field(ge=0, le=100)
    matched_fields: List[MatchedFieldItem] = Field(default_factory=list)


class CandidateSearchResponse(BaseModel):
    """
    Response body for GET /candidates/search.
    """

    query: str
    total: int = Field(ge=0)
    page: int = Field(ge=1)
    total_pages: int = Field(ge=0)
    candidates: List[CandidateSearchItem]
    countries: Dict[str, int] = Field(default_factory=dict)
    positions: Dict[str, int] = Field(default_factory=dict)


class CandidateDetailResponse(BaseModel):
    """
    Response body for GET /candidates/{candidate_id}.
    """

    candidate: Dict[str, Any]


class SearchInsightsResponse(BaseModel):
    total_candidates: int
    matched_candidates: int
    average_score: int
    top_matches: List[CandidateSearchItem]


class HealthResponse(BaseModel):
    """
    Response body for GET /health.
    """

    status: str
    candidates: int = 0
