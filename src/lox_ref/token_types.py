"""
Operator token kinds understood by the evaluator.

The parser hands the evaluator ``lark.Token`` instances whose ``type`` is
the name of one of these members.
"""

from enum import Enum, auto
from typing import Dict, Optional

from lark import Token


class TT(Enum):
    """Token Types - operator subset consumed by the evaluator"""

    # Unary
    BANG = auto()
    MINUS = auto()

    # Arithmetic
    PLUS = auto()
    SLASH = auto()
    STAR = auto()

    # Comparison
    GREATER = auto()
    GREATER_EQUAL = auto()
    LESS = auto()
    LESS_EQUAL = auto()

    # Equality
    BANG_EQUAL = auto()
    EQUAL_EQUAL = auto()


LEXEMES: Dict[TT, str] = {
    TT.BANG: "!",
    TT.MINUS: "-",
    TT.PLUS: "+",
    TT.SLASH: "/",
    TT.STAR: "*",
    TT.GREATER: ">",
    TT.GREATER_EQUAL: ">=",
    TT.LESS: "<",
    TT.LESS_EQUAL: "<=",
    TT.BANG_EQUAL: "!=",
    TT.EQUAL_EQUAL: "==",
}

_BY_LEXEME: Dict[str, TT] = {lexeme: kind for kind, lexeme in LEXEMES.items()}


def make_token(kind: TT | str, line: int = 1, column: int = 1, start_pos: Optional[int] = None) -> Token:
    """Build an operator token; ``kind`` may be a TT member or a lexeme like ``"+"``."""
    if isinstance(kind, str):
        try:
            kind = _BY_LEXEME[kind]
        except KeyError:
            raise ValueError(f"Unknown operator lexeme {kind!r}") from None

    lexeme = LEXEMES[kind]
    end_pos = start_pos + len(lexeme) if start_pos is not None else None

    return Token(
        kind.name,
        lexeme,
        start_pos=start_pos,
        line=line,
        column=column,
        end_line=line,
        end_column=column + len(lexeme),
        end_pos=end_pos,
    )


def token_tt(tok: Token) -> Optional[TT]:
    """Map a token back to its TT member, or None for foreign token types."""
    try:
        return TT[str(tok.type)]
    except KeyError:
        return None
