from __future__ import annotations

from typing import Callable, Dict, Optional

from lark import Tree

from .types import Frame, LoxInternalError, LoxValue
from . import tree
from .tree import BINARY, EXPR_STMT, GROUPING, LITERAL, PRINT_STMT, UNARY, is_tree, tree_label
from .eval.expr import eval_binary, eval_grouping, eval_literal, eval_unary
from .eval.stmt import exec_expr_stmt, exec_print_stmt

ExprHandler = Callable[[Tree, Frame], LoxValue]
StmtHandler = Callable[[Tree, Frame], None]

# ---------------- Public API ----------------

def evaluate(expr: Tree, frame: Optional[Frame]=None) -> LoxValue:
    """Compute the value of an expression node; raises LoxRuntimeError on failure."""
    if frame is None:
        frame = Frame()

    return eval_node(expr, frame)

def execute(stmt: Tree, frame: Optional[Frame]=None) -> None:
    """Run one statement node for its effects; raises LoxRuntimeError on failure."""
    if frame is None:
        frame = Frame()

    exec_node(stmt, frame)

def register_expr(label: str) -> Callable[[ExprHandler], ExprHandler]:
    def dec(fn: ExprHandler) -> ExprHandler:
        _EXPR_DISPATCH[label] = fn
        tree.EXPR_LABELS.add(label)
        return fn

    return dec

def register_stmt(label: str) -> Callable[[StmtHandler], StmtHandler]:
    def dec(fn: StmtHandler) -> StmtHandler:
        _STMT_DISPATCH[label] = fn
        tree.STMT_LABELS.add(label)
        return fn

    return dec

# ---------------- Core evaluator ----------------

def eval_node(n: Tree, frame: Frame) -> LoxValue:
    handler = _EXPR_DISPATCH.get(tree_label(n)) if is_tree(n) else None
    if handler is None:
        raise LoxInternalError(f"cannot evaluate {_describe(n)}")

    return handler(n, frame)

def exec_node(n: Tree, frame: Frame) -> None:
    handler = _STMT_DISPATCH.get(tree_label(n)) if is_tree(n) else None
    if handler is None:
        raise LoxInternalError(f"cannot execute {_describe(n)}")

    handler(n, frame)

def _describe(n: object) -> str:
    label = tree_label(n)
    if label is not None:
        return f"node '{label}'"
    return f"{type(n).__name__} value"

_EXPR_DISPATCH: Dict[str, ExprHandler] = {
    LITERAL: lambda n, _frame: eval_literal(n.children),
    GROUPING: lambda n, frame: eval_grouping(n.children, frame, eval_node),
    UNARY: lambda n, frame: eval_unary(n.children[0], n.children[1], frame, eval_node),
    BINARY: lambda n, frame: eval_binary(n.children, frame, eval_node),
}

_STMT_DISPATCH: Dict[str, StmtHandler] = {
    EXPR_STMT: lambda n, frame: exec_expr_stmt(n.children, frame, eval_node),
    PRINT_STMT: lambda n, frame: exec_print_stmt(n.children, frame, eval_node),
}
