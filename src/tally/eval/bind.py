from __future__ import annotations

from typing import Any, Callable, List

from ..tree import Node
from ..types import Environment, EvalError, TlyValue
from .common import expect_ident_token

EvalFunc = Callable[[Node, Environment], TlyValue]

def assign_ident(name: str, value: TlyValue, env: Environment) -> TlyValue:
    """Bind name to value, replacing any earlier binding."""
    env.define(name, value)
    return value

def eval_assign(children: List[Any], env: Environment, eval_func: EvalFunc) -> TlyValue:
    if len(children) != 2:
        raise EvalError("Malformed assignment")

    name_node, value_node = children
    name = expect_ident_token(name_node, "Assignment target")
    value = eval_func(value_node, env)

    return assign_ident(name, value, env)
