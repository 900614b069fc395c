from __future__ import annotations

from typing import Any

from ..tree import is_token, token_kind
from ..types import EvalError, TlyNull, TlyNumber, TlyString

def expect_ident_token(node: Any, context: str) -> str:
    if is_token(node) and token_kind(node) == 'NAME':
        return str(node.value)

    raise EvalError(f"{context} must be an identifier")

def stringify(value: Any) -> str:
    if isinstance(value, TlyString):
        return value.value

    if isinstance(value, TlyNumber):
        return repr(value)

    if isinstance(value, TlyNull):
        return "nil"

    return str(value)
