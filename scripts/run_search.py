from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from engine import KeywordIndex, make_index  # noqa: E402


def run_queries(index: KeywordIndex, queries: list[list[str]]) -> list[dict[str, object]]:
    results: list[dict[str, object]] = []
    for kw1, kw2 in queries:
        results.append({"kw1": kw1, "kw2": kw2, "documents": index.top5_search(kw1, kw2)})
    return results


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Build a keyword index and run top-5 searches.")
    parser.add_argument("--docs", required=True, help="File listing document files, one per line.")
    parser.add_argument("--noise", required=True, help="File listing noise words.")
    parser.add_argument(
        "--query",
        nargs=2,
        action="append",
        default=[],
        metavar=("KW1", "KW2"),
        help="Keyword pair to search for; may be repeated.",
    )
    parser.add_argument("--json", action="store_true", help="Print results as JSON.")
    parser.add_argument("--verbose", action="store_true", help="Log every merged document.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        index = make_index(args.docs, args.noise)
    except FileNotFoundError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    results = run_queries(index, args.query)
    if args.json:
        summary = {"documents": len(index.documents), "keywords": len(index), "results": results}
        print(json.dumps(summary, ensure_ascii=False, indent=2))
        return 0

    print(f"Documents: {len(index.documents)}")
    print(f"Keywords: {len(index)}")
    for result in results:
        documents = ", ".join(result["documents"]) or "(no matches)"
        print(f"{result['kw1']} OR {result['kw2']}: {documents}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
