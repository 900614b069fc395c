"""Tally: a small assignment/print/arithmetic language over lark parse trees."""

from .eval.common import stringify as display
from .evaluator import evaluate
from .parser import ParseError, parse_source
from .printer import print_tree, render
from .runner import run
from .types import (
    DivisionByZeroError,
    Environment,
    EvalError,
    NestingDepthError,
    NumericRangeError,
    TallyError,
    TlyNull,
    TlyNumber,
    TlyString,
    TlyValue,
    TypeMismatchError,
    UndefinedVariableError,
)

__all__ = [
    "DivisionByZeroError",
    "Environment",
    "EvalError",
    "NestingDepthError",
    "NumericRangeError",
    "ParseError",
    "TallyError",
    "TlyNull",
    "TlyNumber",
    "TlyString",
    "TlyValue",
    "TypeMismatchError",
    "UndefinedVariableError",
    "display",
    "evaluate",
    "parse_source",
    "print_tree",
    "render",
    "run",
]
