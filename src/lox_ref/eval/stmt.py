from __future__ import annotations

from typing import List

from ..types import Frame
from .common import EvalFunc, stringify

def exec_expr_stmt(children: List[object], frame: Frame, eval_func: EvalFunc) -> None:
    eval_func(children[0], frame)

def exec_print_stmt(children: List[object], frame: Frame, eval_func: EvalFunc) -> None:
    value = eval_func(children[0], frame)
    frame.write_line(stringify(value))
