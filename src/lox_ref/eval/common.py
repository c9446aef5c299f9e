from __future__ import annotations

import math
from typing import Any, Callable, Optional

from lark import Token, Tree

from ..types import (
    OPERAND_MUST_BE_NUMBER,
    Frame,
    LoxBool,
    LoxNil,
    LoxNumber,
    LoxRuntimeError,
    LoxString,
    LoxValue,
)
from ..tree import is_token

EvalFunc = Callable[[Tree, Frame], LoxValue]

def token_kind(node: Any) -> Optional[str]:
    if not is_token(node):
        return None
    tok: Token = node
    return str(tok.type)

def require_number(op: Token, value: Any) -> float:
    if isinstance(value, LoxNumber):
        return value.value

    raise LoxRuntimeError(op, OPERAND_MUST_BE_NUMBER)

def require_numbers(op: Token, lhs: Any, rhs: Any) -> tuple[float, float]:
    if isinstance(lhs, LoxNumber) and isinstance(rhs, LoxNumber):
        return lhs.value, rhs.value

    raise LoxRuntimeError(op, OPERAND_MUST_BE_NUMBER)

def format_number(num: float) -> str:
    if math.isnan(num):
        return "NaN"

    if math.isinf(num):
        return "Infinity" if num > 0 else "-Infinity"

    text = repr(num)
    if text.endswith(".0"):
        text = text[:-2]

    return text

def stringify(value: Any) -> str:
    match value:
        case LoxNil():
            return "nil"
        case LoxNumber(value=num):
            return format_number(num)
        case LoxBool(value=b):
            return "true" if b else "false"
        case LoxString(value=s):
            return s

    if value is None:
        return "nil"

    return str(value)
