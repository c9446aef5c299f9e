from __future__ import annotations

import math
from typing import List

from lark import Token, Tree

from ..types import (
    OPERANDS_MUST_BE_NUMBERS_OR_STRINGS,
    Frame,
    LoxBool,
    LoxInternalError,
    LoxNumber,
    LoxRuntimeError,
    LoxString,
    LoxValue,
)
from ..utils import lox_equals
from .common import EvalFunc, require_number, require_numbers, token_kind
from .helpers import is_truthy

def eval_literal(children: List[object]) -> LoxValue:
    return children[0]

def eval_grouping(children: List[object], frame: Frame, eval_func: EvalFunc) -> LoxValue:
    return eval_func(children[0], frame)

def eval_unary(op: Token, rhs_node: Tree, frame: Frame, eval_func: EvalFunc) -> LoxValue:
    rhs = eval_func(rhs_node, frame)

    match token_kind(op):
        case 'BANG':
            return LoxBool(not is_truthy(rhs))
        case 'MINUS':
            return LoxNumber(-require_number(op, rhs))

    raise LoxInternalError(f"unsupported unary operator {op!r}")

def eval_binary(children: List[object], frame: Frame, eval_func: EvalFunc) -> LoxValue:
    lhs_node, op, rhs_node = children
    # both sides always run, left first
    lhs = eval_func(lhs_node, frame)
    rhs = eval_func(rhs_node, frame)

    return apply_binary_operator(op, lhs, rhs)

def apply_binary_operator(op: Token, lhs: LoxValue, rhs: LoxValue) -> LoxValue:
    match token_kind(op):
        case 'GREATER':
            a, b = require_numbers(op, lhs, rhs)
            return LoxBool(a > b)
        case 'GREATER_EQUAL':
            a, b = require_numbers(op, lhs, rhs)
            return LoxBool(a >= b)
        case 'LESS':
            a, b = require_numbers(op, lhs, rhs)
            return LoxBool(a < b)
        case 'LESS_EQUAL':
            a, b = require_numbers(op, lhs, rhs)
            return LoxBool(a <= b)
        case 'MINUS':
            a, b = require_numbers(op, lhs, rhs)
            return LoxNumber(a - b)
        case 'PLUS':
            return _add(op, lhs, rhs)
        case 'SLASH':
            a, b = require_numbers(op, lhs, rhs)
            return LoxNumber(ieee_divide(a, b))
        case 'STAR':
            a, b = require_numbers(op, lhs, rhs)
            return LoxNumber(a * b)
        case 'BANG_EQUAL':
            return LoxBool(not lox_equals(lhs, rhs))
        case 'EQUAL_EQUAL':
            return LoxBool(lox_equals(lhs, rhs))

    raise LoxInternalError(f"unsupported binary operator {op!r}")

def _add(op: Token, lhs: LoxValue, rhs: LoxValue) -> LoxValue:
    match (lhs, rhs):
        case (LoxNumber(value=a), LoxNumber(value=b)):
            return LoxNumber(a + b)
        case (LoxString(value=a), LoxString(value=b)):
            return LoxString(a + b)

    raise LoxRuntimeError(op, OPERANDS_MUST_BE_NUMBERS_OR_STRINGS)

def ieee_divide(a: float, b: float) -> float:
    """Float division that yields +-inf/nan on a zero divisor instead of raising."""
    if b != 0.0:
        return a / b

    if a == 0.0 or math.isnan(a):
        return math.nan

    return math.copysign(math.inf, a) * math.copysign(1.0, b)
