from __future__ import annotations

"""
Text normalisation helpers shared by the indexer and the query parser.

Documents and queries must go through the same tokenizer so that the
inverted index and the query terms see the same view of the text.

Public helpers:

* sanitize_text(value) -> str
    The single "as text, default empty" accessor for loosely typed values.

* tokenize(text, options) -> List[str]
    Lower-cases, splits on non letter/digit runs and drops short tokens
    and stopwords.
"""

from typing import Any, List, Optional

from .config import IndexOptions

DEFAULT_OPTIONS = IndexOptions()


def sanitize_text(value: Any) -> str:
    """Stringify and trim; None and NaN become ""."""
    if value is None:
        return ""
    if isinstance(value, float) and value != value:
        return ""
    if not isinstance(value, str):
        value = str(value)
    return value.strip()


def tokenize(text: Optional[str], options: Optional[IndexOptions] = None) -> List[str]:
    """Split text into index terms. Empty or missing input yields []."""
    raw = sanitize_text(text).lower()
    if not raw:
        return []
    opts = options or DEFAULT_OPTIONS
    tokens = (t.strip() for t in opts.tokenize_regex.split(raw))
    return [
        t for t in tokens if len(t) >= opts.min_token_len and t not in opts.stopwords
    ]
