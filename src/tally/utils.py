from __future__ import annotations

from .types import TlyNull, TlyNumber, TlyString, TlyValue


def tly_equals(lhs: TlyValue, rhs: TlyValue) -> bool:
    match (lhs, rhs):
        case (TlyNull(), TlyNull()):
            return True
        case (TlyNumber(value=a), TlyNumber(value=b)):
            return a == b
        case (TlyString(value=a), TlyString(value=b)):
            return a == b
        case _:
            return False
