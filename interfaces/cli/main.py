from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

from config import LOG_LEVEL
from claims.errors import ClaimAnalysisError
from claims.model import ClaimRecord
from claims.pipeline.selector import STRATEGY_NAMES
from interfaces.analyzer_factory import ClaimAnalyzer, build_analyzer

logger = logging.getLogger(__name__)


def _print_record(record: ClaimRecord) -> None:
    print(json.dumps(record.to_dict(), ensure_ascii=False, indent=2))


async def run_once(analyzer: ClaimAnalyzer, text: str) -> int:
    try:
        record = await analyzer.analyze(text)
    except ClaimAnalysisError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    _print_record(record)
    return 0


async def run_interactive(analyzer: ClaimAnalyzer) -> int:
    print("Claim narrator. Describe the incident, 'exit' to quit.")
    while True:
        try:
            text = input("> ").strip()
        except EOFError:
            break
        if text.lower() in {"exit", "quit", "q"}:
            break
        if not text:
            continue
        await run_once(analyzer, text)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Turn a claim description into a structured record.")
    parser.add_argument("text", nargs="*", help="claim text; read from stdin when piped, prompt otherwise")
    parser.add_argument("--strategy", choices=STRATEGY_NAMES, help="analysis strategy")
    parser.add_argument("--api-key", dest="credential", help="credential for the remote strategy")
    parser.add_argument("--vocabulary", choices=["open", "canonical"], help="label vocabulary policy")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))

    try:
        analyzer = build_analyzer(args.credential, args.strategy, args.vocabulary)
    except ClaimAnalysisError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.text:
        return asyncio.run(run_once(analyzer, " ".join(args.text)))
    if not sys.stdin.isatty():
        return asyncio.run(run_once(analyzer, sys.stdin.read()))
    return asyncio.run(run_interactive(analyzer))


if __name__ == "__main__":
    raise SystemExit(main())
