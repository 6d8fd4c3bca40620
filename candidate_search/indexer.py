from __future__ import annotations

"""
Corpus indexer for the candidate ranking engine.

``build_candidates_index`` makes one pass over a full candidate snapshot
and produces, per weighted field:

* an inverted index (term -> candidate positions),
* per-candidate term frequencies and character lengths,
* document frequencies and the average character length.

Candidates are referenced everywhere by their integer position in the
snapshot. The index is read-only once built; there is no incremental
update, a changed snapshot means a new index.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Set, Union

from loguru import logger

from .config import DEFAULT_FIELD_WEIGHTS, IndexOptions
from .normalize import DEFAULT_OPTIONS, tokenize
from .pipeline_types import CandidateRecord
from .synonyms import SynonymDictionaries, load_default_synonyms

FieldWeightMap = Dict[str, float]


@dataclass
class CandidatesIndex:
    candidates: List[CandidateRecord]
    inverted: Dict[str, Dict[str, Set[int]]]
    term_freqs: List[Dict[str, Dict[str, int]]]
    doc_freqs: Dict[str, Dict[str, int]]
    avg_field_length: Dict[str, float]
    field_lengths: List[Dict[str, int]]
    field_weights: FieldWeightMap
    options: IndexOptions = field(default_factory=IndexOptions)
    synonyms: SynonymDictionaries = field(default_factory=load_default_synonyms)

    @property
    def corpus_size(self) -> int:
        return len(self.candidates)

    @property
    def fields(self) -> List[str]:
        return list(self.field_weights)

    def vocabulary_size(self, field_name: str) -> int:
        return len(self.doc_freqs.get(field_name, {}))


def build_candidates_index(
    candidates: Sequence[Union[CandidateRecord, Mapping[str, Any]]],
    field_weights: Optional[FieldWeightMap] = None,
    options: Optional[IndexOptions] = None,
    synonyms: Optional[SynonymDictionaries] = None,
) -> CandidatesIndex:
    weights = dict(field_weights if field_weights is not None else DEFAULT_FIELD_WEIGHTS)
    opts = options or DEFAULT_OPTIONS
    records = [CandidateRecord.coerce(c) for c in candidates]
    fields = list(weights)

    logger.info(
        "Building candidates index over {} candidates and {} fields",
        len(records),
        len(fields),
    )

    inverted: Dict[str, Dict[str, Set[int]]] = {f: {} for f in fields}
    doc_freqs: Dict[str, Dict[str, int]] = {f: {} for f in fields}
    term_freqs: List[Dict[str, Dict[str, int]]] = []
    field_lengths: List[Dict[str, int]] = []

    for idx, cand in enumerate(records):
        cand_tf: Dict[str, Dict[str, int]] = {}
        cand_len: Dict[str, int] = {}
        for f in fields:
            raw = cand.field_text(f)
            cand_len[f] = len(raw)
            tf: Dict[str, int] = {}
            cand_tf[f] = tf
            if not raw:
                continue

            for tok in tokenize(raw, opts):
                if tok not in tf:
                    # first sighting in this candidate's field
                    doc_freqs[f][tok] = doc_freqs[f].get(tok, 0) + 1
                    tf[tok] = 0
                tf[tok] += 1
                inverted[f].setdefault(tok, set()).add(idx)

        term_freqs.append(cand_tf)
        field_lengths.append(cand_len)

    avg_field_length: Dict[str, float] = {}
    for f in fields:
        lengths = [lens[f] for lens in field_lengths if lens[f] > 0]
        avg_field_length[f] = sum(lengths) / len(lengths) if lengths else 0.0

    index = CandidatesIndex(
        candidates=records,
        inverted=inverted,
        term_freqs=term_freqs,
        doc_freqs=doc_freqs,
        avg_field_length=avg_field_length,
        field_lengths=field_lengths,
        field_weights=weights,
        options=opts,
        synonyms=synonyms if synonyms is not None else load_default_synonyms(),
    )
    logger.info(
        "Candidates index ready: {} candidates, {} distinct terms",
        index.corpus_size,
        sum(index.vocabulary_size(f) for f in fields),
    )
    return index
