from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from .eval.common import stringify
from .evaluator import evaluate
from .parser import PARSER_KINDS, parse_source
from .printer import print_tree
from .types import Environment, TallyError, TlyValue

log = logging.getLogger(__name__)

LOG_LEVEL_ENV = "TALLY_LOG_LEVEL"
PARSER_ENV = "TALLY_PARSER"


def run(src: str, out: Optional[TextIO] = None, parser_kind: str = "lalr") -> TlyValue:
    """Parse and evaluate src against a fresh Environment."""
    tree = parse_source(src, parser_kind=parser_kind)
    return evaluate(tree, Environment(out=out))


def _load_source(arg: Optional[str]) -> str:
    """
    Resolve CLI input into source text.
    - None or "-" => read stdin.
    - Otherwise => read the file at that path.
    """

    if arg is None or arg == "-":
        return sys.stdin.read()

    return Path(arg).read_text(encoding="utf-8")


def _positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {raw!r}") from None

    if value < 1:
        raise argparse.ArgumentTypeError("indent must be at least 1")

    return value


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="tally", description="Evaluate a Tally program and print its parse tree.")
    ap.add_argument("source", nargs="?", help="Path to a source file (defaults to stdin)")
    ap.add_argument("--parser", choices=PARSER_KINDS, default=os.environ.get(PARSER_ENV, "lalr"),
                    help=f"Parsing engine (default: ${PARSER_ENV} or lalr)")
    mode = ap.add_mutually_exclusive_group()
    mode.add_argument("--no-tree", action="store_true", help="Evaluate only; skip the parse tree")
    mode.add_argument("--tree-only", action="store_true", help="Print the parse tree without evaluating")
    ap.add_argument("--token-types", action="store_true", help="Prefix terminal lines with their token type")
    ap.add_argument("--indent", type=_positive_int, default=2, help="Spaces per tree depth level (default: 2)")
    ap.add_argument("--log-level", default=os.environ.get(LOG_LEVEL_ENV, "WARNING"),
                    help=f"Logging level (default: ${LOG_LEVEL_ENV} or WARNING)")
    return ap


def _configure_logging(level_name: str) -> None:
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        raise SystemExit(f"Unknown log level: {level_name}")

    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    _configure_logging(args.log_level)

    out = sys.stdout

    try:
        source = _load_source(args.source)
    except (OSError, UnicodeDecodeError) as exc:
        sys.stderr.write(f"error: cannot read {args.source}: {getattr(exc, 'strerror', None) or exc}\n")
        return 1

    try:
        tree = parse_source(source, parser_kind=args.parser)

        if not args.tree_only:
            out.write("The result is:\n")
            result = evaluate(tree, Environment(out=out))
            out.write(stringify(result) + "\n")
    except TallyError as err:
        log.debug("run aborted: %s", type(err).__name__)
        sys.stderr.write(f"error: {err}\n")
        return 1

    if not args.no_tree:
        if not args.tree_only:
            out.write("\n")
        out.write("Parse tree:\n\n")
        print_tree(tree, out, indent=" " * args.indent, token_types=args.token_types)

    return 0


if __name__ == "__main__":
    sys.exit(main())
