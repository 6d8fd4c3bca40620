# candidate_search/debug_search.py
import argparse
from pathlib import Path

from .candidate_store import load_candidates_snapshot
from .config import DEFAULT_MIN_SCORE, DEFAULT_TOP_K, SearchOptions, configure_logging
from .indexer import build_candidates_index
from .search import enhanced_candidate_search, get_search_insights


def _label(cand) -> str:
    name = cand.field_text("full_name") or f"#{cand.field_text('id')}"
    job = cand.field_text("job_looking_for") or "-"
    loc = cand.field_text("exact_location") or "-"
    return f"{name} | {job} | {loc}"


def main(args):
    configure_logging(args.log_level)
    index = build_candidates_index(load_candidates_snapshot(Path(args.snapshot)))

    if args.insights:
        ins = get_search_insights(index, args.query)
        print(f"Total candidates:   {ins.total_candidates}")
        print(f"Matched candidates: {ins.matched_candidates}")
        print(f"Average score:      {ins.average_score}\n")
        results = ins.top_matches
    else:
        opts = SearchOptions(top_k=args.top_k, min_score=args.min_score, debug=True)
        results = enhanced_candidate_search(index, args.query, opts)

    print(f"Q: {args.query}")
    for rank, r in enumerate(results, start=1):
        raw = f" (raw {r.debug['raw_score']:.2f})" if r.debug else ""
        print(f"{rank:>3}. [{r.score:>3}]{raw} {_label(r.candidate)}")
        for m in r.matched_fields:
            print(f"       - {m.field}: {m.score} {m.explanation}")


if __name__ == "__main__":
    ap = argparse.ArgumentParser()
    ap.add_argument("--snapshot", required=True)
    ap.add_argument("--query", default="")
    ap.add_argument("--top_k", type=int, default=DEFAULT_TOP_K)
    ap.add_argument("--min_score", type=float, default=DEFAULT_MIN_SCORE)
    ap.add_argument("--insights", action="store_true")
    ap.add_argument("--log_level", default="WARNING")
    main(ap.parse_args())
