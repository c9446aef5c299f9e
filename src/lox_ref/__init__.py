"""Evaluation core for a small Lox-style scripting language."""

import logging

from .types import (
    Frame,
    LoxBool,
    LoxInternalError,
    LoxNil,
    LoxNumber,
    LoxRuntimeError,
    LoxString,
    LoxValue,
)
from .token_types import TT, make_token
from .evaluator import evaluate, execute, register_expr, register_stmt
from .runner import ErrorReporter, RunResult, StderrReporter, interpret, run_statements

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ErrorReporter",
    "Frame",
    "LoxBool",
    "LoxInternalError",
    "LoxNil",
    "LoxNumber",
    "LoxRuntimeError",
    "LoxString",
    "LoxValue",
    "RunResult",
    "StderrReporter",
    "TT",
    "evaluate",
    "execute",
    "interpret",
    "make_token",
    "register_expr",
    "register_stmt",
    "run_statements",
]
