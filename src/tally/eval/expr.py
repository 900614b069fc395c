from __future__ import annotations

import math
from typing import Callable, List

from lark import Token

from ..tree import Node, is_token
from ..types import (
    DivisionByZeroError,
    Environment,
    EvalError,
    NumericRangeError,
    TlyNumber,
    TlyString,
    TlyValue,
    TypeMismatchError,
    value_kind,
)
from ..utils import tly_equals

EvalFunc = Callable[[Node, Environment], TlyValue]

def as_op(x: Node) -> str:
    if is_token(x):
        return str(x.value)

    raise EvalError(f"Expected operator token, got {x!r}")

def eval_infix(children: List[Node], env: Environment, eval_func: EvalFunc) -> TlyValue:
    """Fold `operand (op operand)*` left to right once every operand is known."""
    operands = [eval_func(children[i], env) for i in range(0, len(children), 2)]
    ops = [as_op(children[i]) for i in range(1, len(children), 2)]

    if len(operands) != len(ops) + 1:
        raise EvalError("Malformed infix expression")

    acc = operands[0]

    for op, rhs in zip(ops, operands[1:]):
        acc = apply_binary_operator(op, acc, rhs)

    return acc

def eval_unary(op_node: Node, rhs_node: Node, env: Environment, eval_func: EvalFunc) -> TlyValue:
    rhs = eval_func(rhs_node, env)

    match op_node:
        case Token(type='MINUS'):
            return TlyNumber(-_require_number('-', rhs))
        case _:
            raise EvalError(f"Unsupported unary op {as_op(op_node)}")

def eval_compare(children: List[Node], env: Environment, eval_func: EvalFunc) -> TlyValue:
    if len(children) != 3:
        raise EvalError("Malformed comparison")

    lhs_node, op_node, rhs_node = children
    lhs = eval_func(lhs_node, env)
    rhs = eval_func(rhs_node, env)

    return TlyNumber(1.0 if _compare_values(as_op(op_node), lhs, rhs) else 0.0)

def apply_binary_operator(op: str, lhs: TlyValue, rhs: TlyValue) -> TlyValue:
    match op:
        case '+':
            if isinstance(lhs, TlyString) and isinstance(rhs, TlyString):
                return TlyString(lhs.value + rhs.value)
            a, b = _require_numbers(op, lhs, rhs)
            return _finite(op, a + b)
        case '-':
            a, b = _require_numbers(op, lhs, rhs)
            return _finite(op, a - b)
        case '*':
            a, b = _require_numbers(op, lhs, rhs)
            return _finite(op, a * b)
        case '/':
            a, b = _require_numbers(op, lhs, rhs)
            if b == 0:
                raise DivisionByZeroError(op)
            return _finite(op, a / b)
        case '%':
            a, b = _require_numbers(op, lhs, rhs)
            if b == 0:
                raise DivisionByZeroError(op)
            return _finite(op, a % b)
        case '^':
            a, b = _require_numbers(op, lhs, rhs)
            return _power(a, b)
    raise EvalError(f"Unknown operator {op}")

def _power(base: float, exponent: float) -> TlyNumber:
    if base == 0 and exponent < 0:
        raise DivisionByZeroError('^')

    try:
        result = base ** exponent
    except OverflowError:
        raise NumericRangeError('^') from None

    # negative base with a fractional exponent yields a complex number
    if isinstance(result, complex):
        raise NumericRangeError('^')

    return _finite('^', result)

def _finite(op: str, result: float) -> TlyNumber:
    if not math.isfinite(result):
        raise NumericRangeError(op)

    return TlyNumber(result)

def _compare_values(op: str, lhs: TlyValue, rhs: TlyValue) -> bool:
    match op:
        case '==':
            return tly_equals(lhs, rhs)
        case '!=':
            return not tly_equals(lhs, rhs)

    match (lhs, rhs):
        case (TlyNumber(value=a), TlyNumber(value=b)) | (TlyString(value=a), TlyString(value=b)):
            pass
        case _:
            raise TypeMismatchError(op, (value_kind(lhs), value_kind(rhs)))

    match op:
        case '<':
            return a < b
        case '<=':
            return a <= b
        case '>':
            return a > b
        case '>=':
            return a >= b
        case _:
            raise EvalError(f"Unknown comparator {op}")

def _require_number(op: str, value: TlyValue) -> float:
    if isinstance(value, TlyNumber):
        return value.value

    raise TypeMismatchError(op, (value_kind(value),))

def _require_numbers(op: str, lhs: TlyValue, rhs: TlyValue) -> tuple[float, float]:
    if isinstance(lhs, TlyNumber) and isinstance(rhs, TlyNumber):
        return lhs.value, rhs.value

    raise TypeMismatchError(op, (value_kind(lhs), value_kind(rhs)))
