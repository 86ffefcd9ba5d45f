"""Command line entry point.

Usage:
    python -m wolfram_answers "speed of light"
    python -m wolfram_answers "speed of light" --mode numeric
    python -m wolfram_answers "what day is it" --mode spoken
"""

from __future__ import annotations

import argparse
import logging
import sys

from .client import WolframClient
from .config import resolve_config
from .exceptions import WolframAnswersError
from .extraction import AnswerExtractor

MODES = ("answer", "numeric", "longest", "spoken", "json")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Ask Wolfram|Alpha a question and print the best answer",
        prog="python -m wolfram_answers",
    )
    parser.add_argument("query", help="Natural-language query")
    parser.add_argument(
        "--mode",
        choices=MODES,
        default="answer",
        help="What to print (default: answer)",
    )
    parser.add_argument(
        "--keep-parens",
        action="store_true",
        help="Keep parenthesized asides in answer text",
    )
    parser.add_argument(
        "--keep-interpretation",
        action="store_true",
        help="Keep the 'Input interpretation' section as an answer candidate",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug output to stderr"
    )
    return parser


def run(args: argparse.Namespace, client: WolframClient) -> str:
    """Execute one query in the requested mode and return the text to print."""
    if args.mode == "spoken":
        return client.query_spoken(args.query)
    if args.mode == "json":
        return client.query_json(args.query).decode("utf-8")

    document = client.query(args.query)
    if not args.keep_interpretation:
        document.remove_input_interpretation()

    extractor = AnswerExtractor.from_config(client.config)
    if args.mode == "numeric":
        return str(extractor.numerical_answer(document))
    if args.mode == "longest":
        return extractor.longest_answer(document)
    return extractor.answer(document)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        )
        root = logging.getLogger("wolfram_answers")
        root.addHandler(handler)
        root.setLevel(logging.DEBUG)

    try:
        overrides = {"keep_parens": True} if args.keep_parens else None
        cfg = resolve_config(overrides).to_frozen()
        with WolframClient(cfg) as client:
            print(run(args, client))
    except WolframAnswersError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
