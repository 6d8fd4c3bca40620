"""Query parsing: role / location split, tokenisation and synonym expansion."""

from __future__ import annotations

import re
from typing import Dict, List, Optional, Tuple

from loguru import logger

from .config import IndexOptions
from .normalize import DEFAULT_OPTIONS, tokenize
from .pipeline_types import ParsedQuery
from .synonyms import SynonymDictionaries, expand_term_with_synonyms

# ---------------------------------------------------------------------------
# Location clause detection
# ---------------------------------------------------------------------------

# A trailing clause introduced by a locative preposition, e.g.
# "experienced teacher in Kumasi" or "driver based in Tema".
_LOCATION_RX = re.compile(
    r"\b(?:in|at|near|around|based in|based\s+at|located in|working in|stationed at)\b"
    r"\s*([^\n,;]+)$",
    re.I,
)


def split_location_clause(query: str) -> Tuple[str, str]:
    """Return (role_part, location_part); location_part is "" when absent."""
    q = (query or "").strip()
    m = _LOCATION_RX.search(q)
    if m and m.group(1):
        return q[: m.start()].strip(), m.group(1).strip()
    return q, ""


def parse_query_raw(
    query: str,
    options: Optional[IndexOptions] = None,
    synonyms: Optional[SynonymDictionaries] = None,
) -> ParsedQuery:
    opts = options or DEFAULT_OPTIONS
    job_part, location = split_location_clause(query)

    job_tokens = tokenize(job_part, opts)
    location_tokens = tokenize(location, opts) if location else []

    # role terms are expanded, location terms are kept verbatim
    expanded: Dict[str, None] = {}
    for t in job_tokens:
        for x in expand_term_with_synonyms(t, synonyms):
            expanded.setdefault(x, None)
    for t in location_tokens:
        expanded.setdefault(t, None)

    tokens: List[str] = list(expanded)
    logger.debug(
        "Parsed query {!r}: role={!r} location={!r} terms={}",
        query,
        job_part,
        location,
        tokens,
    )
    return ParsedQuery(
        raw_job_title=job_part,
        raw_location=location,
        tokens=tokens,
        requested_location=location or None,
    )


def scoring_terms(parsed: ParsedQuery, options: Optional[IndexOptions] = None) -> List[str]:
    """Terms to score with; falls back to a plain tokenisation of both segments."""
    if parsed.tokens:
        return list(parsed.tokens)
    return tokenize(f"{parsed.raw_job_title} {parsed.raw_location}", options)


__all__ = [
    "parse_query_raw",
    "scoring_terms",
    "split_location_clause",
]
