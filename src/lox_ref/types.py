from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional, TextIO, Tuple

from lark import Token
from typing_extensions import TypeAlias, TypeGuard

# ---------- Value Model ----------

@dataclass(frozen=True)
class LoxNil:
    def __repr__(self) -> str:
        return "nil"

@dataclass(frozen=True)
class LoxBool:
    value: bool
    def __repr__(self) -> str:
        return "true" if self.value else "false"

@dataclass(frozen=True)
class LoxNumber:
    value: float

    def __post_init__(self) -> None:
        # ints are never observable; everything numeric is a double
        if not isinstance(self.value, float):
            object.__setattr__(self, "value", float(self.value))

    def __repr__(self) -> str:
        from .eval.common import format_number  # local import to avoid cycle
        return format_number(self.value)

@dataclass(frozen=True)
class LoxString:
    value: str
    def __repr__(self) -> str:
        return f'"{self.value}"'

LoxValue: TypeAlias = LoxNil | LoxBool | LoxNumber | LoxString

_LOX_VALUE_TYPES: Tuple[type, ...] = (
    LoxNil,
    LoxBool,
    LoxNumber,
    LoxString,
)

def is_lox_value(value: object) -> TypeGuard[LoxValue]:
    return isinstance(value, _LOX_VALUE_TYPES)

def to_lox_value(value: object) -> LoxValue:
    """Wrap a plain Python scalar (None/bool/int/float/str) as a runtime value."""
    if is_lox_value(value):
        return value

    match value:
        case None:
            return LoxNil()
        case bool(b):
            return LoxBool(b)
        case int(n) | float(n):
            return LoxNumber(float(n))
        case str(s):
            return LoxString(s)

    raise TypeError(f"Cannot convert {type(value).__name__} to a Lox value")

# ---------- Exceptions ----------

class LoxRuntimeError(Exception):
    """Evaluation failure tied to the operator token that caused it."""

    token: Token
    message: str

    source: Optional[str]

    def __init__(self, token: Token, message: str):
        super().__init__(message)
        self.token = token
        self.message = message
        self.source = None

    def source_line(self) -> Optional[str]:
        """Text of the source line the token sits on, when the run had source attached."""
        line = self.line
        if self.source is None or line is None or line < 1:
            return None

        lines = self.source.splitlines()
        if line > len(lines):
            return None

        return lines[line - 1]

    @property
    def line(self) -> Optional[int]:
        return getattr(self.token, "line", None)

    @property
    def column(self) -> Optional[int]:
        return getattr(self.token, "column", None)

    def __str__(self) -> str:
        line = self.line
        col = self.column

        if line is None:
            return self.message

        if col is None:
            return f"{self.message} (line {line})"

        return f"{self.message} (line {line}, col {col})"

class LoxInternalError(Exception):
    """Raised for trees the evaluator does not understand (never reported as a runtime error)."""

    def __init__(self, msg: str):
        super().__init__(f"internal error: {msg}")

OPERAND_MUST_BE_NUMBER = "Operand must be a number."
OPERANDS_MUST_BE_NUMBERS_OR_STRINGS = "Operands must be 2 numbers or 2 strings."

# ---------- Evaluation context ----------

class Frame:
    """Per-run evaluation context: where print output goes and the source it came from."""

    def __init__(self, out: Optional[TextIO] = None, source: Optional[str] = None):
        self._out = out
        self.source = source

    @property
    def out(self) -> TextIO:
        # resolved lazily so redirected sys.stdout is honoured
        return self._out if self._out is not None else sys.stdout

    def write_line(self, text: str) -> None:
        out = self.out
        out.write(text)
        out.write("\n")
