"""Typed containers shared across the indexing and ranking modules."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict

from .normalize import sanitize_text


class CandidateRecord(BaseModel):
    """
    A candidate profile as supplied by the data store.

    Every field is free text and may be missing, None or not a string at
    all; unknown columns are kept as extra properties. Read values through
    ``field_text`` rather than the attributes directly.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    id: Any = None
    full_name: Any = None
    email: Any = None
    job_looking_for: Any = None
    exact_location: Any = None
    country: Any = None
    willingness_to_relocate: Any = None
    highest_education: Any = None
    future_learning_plans: Any = None
    skills: Any = None
    work_history: Any = None
    education_history: Any = None
    certifications: Any = None
    projects: Any = None
    publications: Any = None
    awards: Any = None
    professional_affiliations: Any = None
    interests: Any = None
    professional_references: Any = None
    created_at: Any = None

    @classmethod
    def coerce(cls, raw: Union["CandidateRecord", Mapping[str, Any]]) -> "CandidateRecord":
        if isinstance(raw, cls):
            return raw
        return cls.model_validate({str(k): v for k, v in dict(raw).items()})

    def field_text(self, name: str) -> str:
        """Return the trimmed text of a known or extra field ("" when absent)."""
        if name in type(self).model_fields:
            return sanitize_text(getattr(self, name))
        return sanitize_text((self.model_extra or {}).get(name))

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump()


@dataclass
class MatchedField:
    """One line of the explanation trail attached to a ranked candidate."""

    field: str
    score: float
    explanation: str


@dataclass
class EnhancedSearchResult:
    candidate: CandidateRecord
    score: int
    matched_fields: List[MatchedField] = field(default_factory=list)
    debug: Optional[Dict[str, float]] = None


@dataclass
class ParsedQuery:
    """Role and location segments of a query plus the terms used for scoring."""

    raw_job_title: str
    raw_location: str
    tokens: List[str]
    requested_location: Optional[str] = None


@dataclass
class SearchInsights:
    total_candidates: int
    matched_candidates: int
    top_matches: List[EnhancedSearchResult]
    average_score: int
