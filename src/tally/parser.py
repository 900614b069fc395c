"""Front-end: packaged lark grammar plus a parse entry point.

The evaluator and the tree printer only ever see the `program` tree this
module returns; syntax errors surface here as ParseError before either runs.
"""
from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from lark import Lark, Tree, UnexpectedCharacters, UnexpectedEOF, UnexpectedInput, UnexpectedToken

from .types import TallyError

log = logging.getLogger(__name__)

GRAMMAR_PATH = Path(__file__).resolve().parent / "grammar.lark"
PARSER_KINDS = ("lalr", "earley")


class ParseError(TallyError):
    """Parse error with position info"""
    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        self.message = message
        self.line = line
        self.column = column
        super().__init__(
            f"{message} at line {line}, col {column}" if line is not None else message
        )


def _read_grammar() -> str:
    if not GRAMMAR_PATH.exists():
        raise FileNotFoundError(f"grammar not found at {GRAMMAR_PATH}")

    return GRAMMAR_PATH.read_text(encoding="utf-8")


@lru_cache(maxsize=None)
def make_parser(parser_kind: str = "lalr") -> Lark:
    if parser_kind not in PARSER_KINDS:
        raise ValueError(f"unknown parser kind {parser_kind!r}; expected one of {', '.join(PARSER_KINDS)}")

    log.debug("building %s parser from %s", parser_kind, GRAMMAR_PATH)

    if parser_kind == "lalr":
        return Lark(_read_grammar(), start="program", parser="lalr", propagate_positions=True)

    return Lark(_read_grammar(), start="program", parser="earley", lexer="basic", propagate_positions=True)


def _describe(exc: UnexpectedInput) -> str:
    match exc:
        case UnexpectedEOF():
            return "Unexpected end of input"
        case UnexpectedToken(token=tok):
            if tok.type == "$END":
                return "Unexpected end of input"
            return f"Unexpected token {tok.value!r}"
        case UnexpectedCharacters(char=ch):
            return f"Unexpected character {ch!r}"
        case _:
            return "Invalid syntax"


def _position(exc: UnexpectedInput) -> tuple[Optional[int], Optional[int]]:
    line = getattr(exc, "line", None)
    column = getattr(exc, "column", None)

    # lark reports -1 for positions at end of input
    if line is None or line < 1:
        return None, None

    return line, column


def parse_source(src: str, parser_kind: str = "lalr") -> Tree:
    parser = make_parser(parser_kind)

    try:
        tree = parser.parse(src)
    except UnexpectedInput as exc:
        line, column = _position(exc)
        raise ParseError(_describe(exc), line, column) from exc
    except RecursionError:
        raise ParseError("Input nested too deeply to parse") from None

    log.debug("parsed %d statement(s)", len(tree.children))
    return tree
