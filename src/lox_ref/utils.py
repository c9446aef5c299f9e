from __future__ import annotations

import os as _os

from .types import LoxBool, LoxNil, LoxNumber, LoxString, LoxValue

_TRUTHY_FLAGS = {"1", "true", "yes", "on"}


def lox_equals(lhs: LoxValue, rhs: LoxValue) -> bool:
    match (lhs, rhs):
        case (LoxNil(), LoxNil()):
            return True
        case (LoxNil(), _) | (_, LoxNil()):
            return False
        case (LoxNumber(value=a), LoxNumber(value=b)):
            return a == b
        case (LoxString(value=a), LoxString(value=b)):
            return a == b
        case (LoxBool(value=a), LoxBool(value=b)):
            return a == b
        case _:
            # mixed variants are simply unequal
            return False


def debug_py_trace_enabled() -> bool:
    """True when LOX_DEBUG_PY_TRACE asks for Python tracebacks on runtime errors."""
    return _os.environ.get("LOX_DEBUG_PY_TRACE", "").strip().lower() in _TRUTHY_FLAGS
