"""Node constructors and accessors for the expression/statement tree.

Nodes are plain ``lark.Tree`` instances labelled by node kind, so trees
produced by a Lark-based parser can be fed to the evaluator directly.
Operators are ``lark.Token`` instances (see ``token_types``).
"""
from __future__ import annotations

from typing import List, Optional, Set

from lark import Token, Tree
from typing_extensions import TypeAlias, TypeGuard

from .types import LoxValue, is_lox_value, to_lox_value
from .token_types import TT, make_token

Node: TypeAlias = Tree | Token

# Expression labels
LITERAL = 'literal'
GROUPING = 'grouping'
UNARY = 'unary'
BINARY = 'binary'

# Statement labels
EXPR_STMT = 'exprstmt'
PRINT_STMT = 'printstmt'

# grown by evaluator.register_expr / register_stmt
EXPR_LABELS: Set[str] = {LITERAL, GROUPING, UNARY, BINARY}
STMT_LABELS: Set[str] = {EXPR_STMT, PRINT_STMT}

# ---------------- Builders ----------------

def _as_op(op: Token | TT | str) -> Token:
    if isinstance(op, Token):
        return op
    return make_token(op)

def literal(value: object) -> Tree:
    return Tree(LITERAL, [to_lox_value(value)])

def grouping(inner: Tree) -> Tree:
    return Tree(GROUPING, [inner])

def unary(op: Token | TT | str, operand: Tree) -> Tree:
    return Tree(UNARY, [_as_op(op), operand])

def binary(left: Tree, op: Token | TT | str, right: Tree) -> Tree:
    return Tree(BINARY, [left, _as_op(op), right])

def expr_stmt(expr: Tree) -> Tree:
    return Tree(EXPR_STMT, [expr])

def print_stmt(expr: Tree) -> Tree:
    return Tree(PRINT_STMT, [expr])

# ---------------- Accessors ----------------

def is_tree(node: object) -> TypeGuard[Tree]:
    return isinstance(node, Tree)

def is_token(node: object) -> TypeGuard[Token]:
    return isinstance(node, Token)

def tree_label(node: object) -> Optional[str]:
    return node.data if is_tree(node) else None

def tree_children(node: object) -> List[object]:
    if not is_tree(node):
        return []

    return list(node.children)

def is_expr(node: object) -> bool:
    return tree_label(node) in EXPR_LABELS

def is_stmt(node: object) -> bool:
    return tree_label(node) in STMT_LABELS

def render_expr(node: object) -> str:
    """Parenthesised prefix rendering, e.g. ``(* (- 123) (group 45.67))``."""
    if is_lox_value(node):
        return _render_value(node)

    if is_token(node):
        return str(node.value)

    label = tree_label(node)
    children = tree_children(node)

    if label == LITERAL:
        return render_expr(children[0])
    if label == GROUPING:
        return _parenthesize("group", children[0])
    if label == UNARY:
        op, operand = children
        return _parenthesize(str(op), operand)
    if label == BINARY:
        left, op, right = children
        return _parenthesize(str(op), left, right)
    if label == EXPR_STMT:
        return _parenthesize(";", children[0])
    if label == PRINT_STMT:
        return _parenthesize("print", children[0])

    if label is not None:
        return _parenthesize(label, *children)
    return str(node)

def _parenthesize(name: str, *parts: object) -> str:
    rendered = " ".join(render_expr(part) for part in parts)
    return f"({name} {rendered})" if rendered else f"({name})"

def _render_value(value: LoxValue) -> str:
    # strings keep their quotes so the rendering stays unambiguous
    return repr(value)
