from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Dict, Optional, TextIO, Tuple
from typing_extensions import TypeAlias

# ---------- Value Model ----------

@dataclass
class TlyNull:
    def __repr__(self) -> str:
        return "nil"

@dataclass
class TlyNumber:
    value: float
    def __repr__(self) -> str:
        v = self.value
        return str(int(v)) if v.is_integer() else str(v)

@dataclass
class TlyString:
    value: str
    def __repr__(self) -> str:
        return f'"{self.value}"'

TlyValue: TypeAlias = TlyNull | TlyNumber | TlyString

def value_kind(value: TlyValue) -> str:
    match value:
        case TlyNumber():
            return "number"
        case TlyString():
            return "text"
        case TlyNull():
            return "nil"

    return type(value).__name__

# ---------- Exceptions ----------

class TallyError(Exception):
    """Base for every error the front-end or the evaluator raises."""

class EvalError(TallyError):
    tly_meta: Optional[object]

    def __init__(self, message: str):
        super().__init__(message)
        self.tly_meta = None

    def __str__(self) -> str:
        msg = super().__str__()

        meta = getattr(self, "tly_meta", None)
        if meta is None:
            return msg

        line = getattr(meta, "line", None)
        col = getattr(meta, "column", None)

        if line is None:
            return msg

        if col is None:
            return f"{msg} (line {line})"

        return f"{msg} (line {line}, col {col})"

class UndefinedVariableError(EvalError):
    def __init__(self, name: str):
        super().__init__(f"Name '{name}' is not defined")
        self.name = name

class DivisionByZeroError(EvalError):
    def __init__(self, op: str):
        super().__init__(f"Division by zero in '{op}'")
        self.op = op

class TypeMismatchError(EvalError):
    def __init__(self, op: str, kinds: Tuple[str, ...]):
        super().__init__(f"Operator '{op}' does not support {', '.join(kinds)}")
        self.op = op
        self.kinds = kinds

class NumericRangeError(EvalError):
    def __init__(self, op: Optional[str] = None, literal: Optional[str] = None):
        if literal is not None:
            super().__init__(f"Number literal {literal} is outside the real number range")
        else:
            super().__init__(f"Operator '{op}' produced a value outside the real number range")
        self.op = op
        self.literal = literal

class NestingDepthError(EvalError):
    def __init__(self) -> None:
        super().__init__("Expression nested too deeply to evaluate")

# ---------- Environment ----------

class Environment:
    """Variable bindings plus the output sink for one evaluation run."""

    def __init__(self, out: Optional[TextIO] = None):
        self.vars: Dict[str, TlyValue] = {}
        self.out: TextIO = out if out is not None else sys.stdout

    def define(self, name: str, val: TlyValue) -> None:
        self.vars[name] = val

    def get(self, name: str) -> TlyValue:
        if name in self.vars:
            return self.vars[name]

        raise UndefinedVariableError(name)

    def __contains__(self, name: object) -> bool:
        return name in self.vars

    def write_line(self, text: str) -> None:
        self.out.write(text + "\n")
