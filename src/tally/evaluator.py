from __future__ import annotations

import logging
from types import SimpleNamespace
from typing import Callable, Dict, Optional, TextIO

from lark import Token

from .tree import Node, is_token, node_position, tree_label
from .types import Environment, EvalError, NestingDepthError, TlyValue

from .eval.bind import eval_assign
from .eval.blocks import eval_print, eval_program
from .eval.expr import eval_compare, eval_infix, eval_unary
from .eval.literals import token_number, token_string

log = logging.getLogger(__name__)

EvalFunc = Callable[[Node, Environment], TlyValue]


def _maybe_attach_location(exc: EvalError, node: Node) -> None:
    if getattr(exc, "_augmented", False):
        return

    line, column = node_position(node)
    if line is None:
        return

    exc.tly_meta = SimpleNamespace(line=line, column=column)
    exc._augmented = True  # type: ignore[attr-defined]

# ---------------- Public API ----------------

def evaluate(tree: Node, env: Optional[Environment] = None, out: Optional[TextIO] = None) -> TlyValue:
    """Evaluate a parsed program.

    A fresh Environment is created unless one is passed in; program output
    from `print` goes to `out` (stdout by default) in statement order.
    """
    if env is None:
        env = Environment(out=out)
    elif out is not None:
        env.out = out

    try:
        result = eval_node(tree, env)
    except RecursionError:
        raise NestingDepthError() from None

    log.debug("evaluation finished with %d binding(s)", len(env.vars))
    return result

# ---------------- Core evaluator ----------------

def eval_node(n: Node, env: Environment) -> TlyValue:
    try:
        return _eval_node_inner(n, env)
    except EvalError as e:
        _maybe_attach_location(e, n)
        raise


def _eval_node_inner(n: Node, env: Environment) -> TlyValue:
    if is_token(n):
        return _eval_token(n, env)

    d = tree_label(n)
    handler = _NODE_DISPATCH.get(d) if d is not None else None
    if handler is None:
        raise EvalError(f"Unsupported node type: {d!r}")

    return handler(n.children, env)


def _eval_token(t: Token, env: Environment) -> TlyValue:
    match t.type:
        case 'NUMBER':
            return token_number(t)
        case 'STRING':
            return token_string(t)
        case 'NAME':
            return env.get(str(t.value))
        case _:
            raise EvalError(f"Unhandled token {t.type}:{t.value}")


def _eval_neg(children, env: Environment) -> TlyValue:
    op, rhs_node = children
    return eval_unary(op, rhs_node, env, eval_node)


_NODE_DISPATCH: Dict[str, Callable[..., TlyValue]] = {
    'program': lambda children, env: eval_program(children, env, eval_node),
    'assign': lambda children, env: eval_assign(children, env, eval_node),
    'print_stmt': lambda children, env: eval_print(children, env, eval_node),
    'compare': lambda children, env: eval_compare(children, env, eval_node),
    'add': lambda children, env: eval_infix(children, env, eval_node),
    'mul': lambda children, env: eval_infix(children, env, eval_node),
    'pow': lambda children, env: eval_infix(children, env, eval_node),
    'neg': _eval_neg,
}
