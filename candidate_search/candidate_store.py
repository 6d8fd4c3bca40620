from __future__ import annotations

"""
Candidate snapshot loading.

The engine indexes a full snapshot of the candidate table. This module
turns a snapshot file (JSON, JSON lines, CSV or parquet export of the
form responses table) into ``CandidateRecord`` objects.
"""

from pathlib import Path
from typing import Any, List, Optional, Sequence

import pandas as pd
from loguru import logger

from .config import CANDIDATES_SNAPSHOT_PATH
from .pipeline_types import CandidateRecord

_READERS = {
    ".json": lambda p: pd.read_json(p, orient="records", dtype=False),
    ".jsonl": lambda p: pd.read_json(p, orient="records", lines=True, dtype=False),
    ".csv": lambda p: pd.read_csv(p, dtype=str, keep_default_na=False),
    ".parquet": pd.read_parquet,
}


def candidates_from_frame(df: pd.DataFrame) -> List[CandidateRecord]:
    """Convert a dataframe (one row per candidate) into records; NaN becomes None."""
    if df.empty:
        return []
    clean = df.astype(object).where(pd.notna(df), None)
    clean.columns = [str(c).strip() for c in clean.columns]
    return [CandidateRecord.coerce(row) for row in clean.to_dict(orient="records")]


def load_candidates_snapshot(path: Path = CANDIDATES_SNAPSHOT_PATH) -> List[CandidateRecord]:
    """
    Convenience helper to load the candidate snapshot.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Candidate snapshot not found: {path}")
    reader = _READERS.get(path.suffix.lower())
    if reader is None:
        raise ValueError(f"Unsupported snapshot format: {path.suffix!r}")

    logger.info("Loading candidate snapshot from {}", path)
    df = reader(path)
    records = candidates_from_frame(df)
    logger.info("Loaded candidate snapshot with {} rows", len(records))
    return records


def find_candidate(
    candidates: Sequence[CandidateRecord], candidate_id: Any
) -> Optional[CandidateRecord]:
    wanted = str(candidate_id).strip()
    for cand in candidates:
        if cand.id is not None and str(cand.id).strip() == wanted:
            return cand
    return None
