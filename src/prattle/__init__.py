"""
prattle - a Pratt-parsing front end for small arithmetic expressions.

Reads expression text such as ``-a + b * (c - 1) ^ 2`` and produces an AST
that reflects operator precedence, associativity and unary/binary
disambiguation.
"""

from __future__ import annotations

from ._version import get_version
from .core import (
    BinaryExpr,
    Expr,
    IntLitExpr,
    NameExpr,
    ParseError,
    Parser,
    PrattleError,
    PrefixExpr,
    Token,
    TokenizeError,
    TokenKind,
    parse_expr,
    render,
    tokenize,
)

__version__ = get_version()

__all__ = [
    "__version__",
    "tokenize",
    "Parser",
    "parse_expr",
    "render",
    "Token",
    "TokenKind",
    "Expr",
    "NameExpr",
    "IntLitExpr",
    "PrefixExpr",
    "BinaryExpr",
    "PrattleError",
    "TokenizeError",
    "ParseError",
]
