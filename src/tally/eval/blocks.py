from __future__ import annotations

from typing import Any, Callable, List

from ..tree import Node
from ..types import Environment, EvalError, TlyNull, TlyValue
from .common import stringify

EvalFunc = Callable[[Node, Environment], TlyValue]

def eval_program(children: List[Any], env: Environment, eval_func: EvalFunc) -> TlyValue:
    """Run a stmt list in source order, returning last value."""
    result: TlyValue = TlyNull()

    for child in children:
        result = eval_func(child, env)

    return result

def eval_print(children: List[Any], env: Environment, eval_func: EvalFunc) -> TlyValue:
    if len(children) != 1:
        raise EvalError("Malformed print statement")

    value = eval_func(children[0], env)
    env.write_line(stringify(value))

    return value
