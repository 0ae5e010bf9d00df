"""Quote verification CLI.

Checks every quoted span of a draft against an interview transcript and
any number of supplementary source files.

Usage:
    # Verify a draft against its transcript
    quotecheck --draft draft.md --transcript transcript.txt

    # Add supplementary sources (checked after the transcript, in order)
    quotecheck --draft draft.md --transcript transcript.txt --source report.txt --source notes.txt

    # CI mode: exit non-zero when any quote is unverified
    quotecheck --draft draft.md --transcript transcript.txt --ci --out results.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from quotecheck.models import CandidateSource, ContextPrecision, VerificationResult, check_source_ids
from quotecheck.services import summarize, verify


def load_sources(paths: list[Path]) -> list[CandidateSource]:
    """Load source files as candidates; the file name doubles as ID and display name."""
    check_source_ids([path.name for path in paths])
    return [
        CandidateSource(
            id=path.name,
            display_name=path.name,
            content=path.read_text(encoding="utf-8"),
        )
        for path in paths
    ]


def print_result(index: int, result: VerificationResult, verbose: bool = False) -> None:
    """Print a single verification result."""
    symbol = "✓" if result.matched else "✗"
    print(f"{symbol} [{index + 1}] \"{result.quote_text}\"")
    if result.matched:
        suffix = " (approximate context)" if result.precision == ContextPrecision.APPROXIMATE else ""
        print(f"    found in: {result.source_name}{suffix}")
        if verbose:
            print(f"    context: ...{result.context_excerpt}...")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Verify quotations in a draft against its transcript and sources"
    )
    parser.add_argument("--draft", type=Path, required=True, help="Path to draft file")
    parser.add_argument("--transcript", type=Path, required=True, help="Path to transcript file")
    parser.add_argument("--source", type=Path, action="append", default=[],
                        help="Supplementary source file (repeatable, checked in order)")
    parser.add_argument("--out", type=Path, help="Output file for JSON results")
    parser.add_argument("--ci", action="store_true",
                        help="CI mode: exit non-zero when any quote is unverified")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Show context excerpts and debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    draft = args.draft.read_text(encoding="utf-8")
    transcript = args.transcript.read_text(encoding="utf-8")
    try:
        sources = load_sources(args.source)
    except ValueError as e:
        parser.error(str(e))

    results = verify(draft, transcript, sources)
    summary = summarize(results)

    for index, result in enumerate(results):
        print_result(index, result, verbose=args.verbose)

    print("=" * 70)
    print(f"Quotes: {summary.total}  Verified: {summary.verified}  Unverified: {summary.unverified}")
    print("=" * 70)

    if args.out:
        payload = {
            "results": [r.model_dump(mode="json") for r in results],
            "summary": summary.model_dump(mode="json"),
        }
        args.out.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    if args.ci and summary.unverified > 0:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
