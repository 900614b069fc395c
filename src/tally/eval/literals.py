from __future__ import annotations

import math
import re

from lark import Token

from ..types import EvalError, NumericRangeError, TlyNumber, TlyString

_ESCAPES = {
    'n': "\n",
    't': "\t",
    'r': "\r",
    '"': '"',
    '\\': "\\",
}

_ESCAPE_RE = re.compile(r'\\(.)', re.DOTALL)

def token_number(token: Token) -> TlyNumber:
    try:
        value = float(token.value)
    except ValueError:
        raise EvalError(f"Malformed number literal {token.value!r}") from None

    if not math.isfinite(value):
        raise NumericRangeError(literal=str(token.value))

    return TlyNumber(value)

def token_string(token: Token) -> TlyString:
    raw = token.value

    if len(raw) >= 2 and raw[0] == '"' and raw[-1] == '"':
        raw = raw[1:-1]

    # unknown escapes keep their backslash
    return TlyString(_ESCAPE_RE.sub(lambda m: _ESCAPES.get(m.group(1), m.group(0)), raw))
