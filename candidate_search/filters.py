"""Facet filters, pagination and facet counts for ranked candidate lists."""

from __future__ import annotations

import math
from typing import Dict, List, Optional, Sequence, TypeVar

from .pipeline_types import CandidateRecord, EnhancedSearchResult

T = TypeVar("T")

ALL_COUNTRIES = "All Countries"
ALL_LOCATIONS = "All Locations"
ALL = "All"


def apply_filters(
    candidates: Sequence[CandidateRecord],
    country: Optional[str] = None,
    location: Optional[str] = None,
    relocation: Optional[str] = None,
    education: Optional[str] = None,
) -> List[CandidateRecord]:
    """Narrow a candidate list; empty or "All ..." values leave it untouched."""
    out = list(candidates)
    if country and country != ALL_COUNTRIES:
        out = [c for c in out if c.field_text("country") == country.strip()]
    if location and location != ALL_LOCATIONS:
        loc = location.strip().lower()
        out = [c for c in out if loc in c.field_text("exact_location").lower()]
    if relocation and relocation != ALL:
        rel = relocation.strip().lower()
        out = [c for c in out if c.field_text("willingness_to_relocate").lower() == rel]
    if education and education != ALL:
        edu = education.strip().lower()
        out = [c for c in out if edu in c.field_text("highest_education").lower()]
    return out


def paginate(items: Sequence[T], page: int, per_page: int) -> List[T]:
    """1-based page slice."""
    start = max(page - 1, 0) * per_page
    return list(items[start:start + per_page])


def total_pages(total: int, per_page: int) -> int:
    if per_page <= 0:
        return 0
    return math.ceil(total / per_page)


def count_by_field(candidates: Sequence[CandidateRecord], field: str) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for c in candidates:
        key = c.field_text(field) or "Unknown"
        counts[key] = counts.get(key, 0) + 1
    return counts


def filter_results(results: Sequence[EnhancedSearchResult], **facets: Optional[str]) -> List[EnhancedSearchResult]:
    """Apply ``apply_filters`` to ranked results, keeping their order."""
    kept = {id(c) for c in apply_filters([r.candidate for r in results], **facets)}
    return [r for r in results if id(r.candidate) in kept]


_SORT_FIELDS = {"name": "full_name", "date": "created_at", "location": "exact_location"}


def _sort_key(cand: CandidateRecord, sort_by: str) -> str:
    # unknown keys sort by date
    text = cand.field_text(_SORT_FIELDS.get(sort_by, "created_at"))
    return text if sort_by == "date" else text.lower()


def sort_candidates(
    candidates: Sequence[CandidateRecord], sort_by: str = "date", ascending: bool = True
) -> List[CandidateRecord]:
    """
    Sort by name, date (``created_at``) or location. Blank values sort as
    "" and equal keys keep their input order in both directions.
    """
    return sorted(candidates, key=lambda c: _sort_key(c, sort_by), reverse=not ascending)


def sort_results(
    results: Sequence[EnhancedSearchResult], sort_by: str = "date", ascending: bool = True
) -> List[EnhancedSearchResult]:
    return sorted(results, key=lambda r: _sort_key(r.candidate, sort_by), reverse=not ascending)
