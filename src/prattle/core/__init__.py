"""
prattle core: tokenizer, token types, expression AST and Pratt parser.

Usage:
    from prattle.core import parse_expr

    expr = parse_expr("-a + b * 2")
    print(expr.render())
"""

from prattle.core.errors import (
    IntegerOverflow,
    MalformedTokenForExpression,
    MissingInfixHandler,
    MissingPrefixHandler,
    ParseError,
    PrattleError,
    TokenizeError,
    UnexpectedEndOfInput,
    UnexpectedToken,
)
from prattle.core.expressions import (
    BinaryExpr,
    Expr,
    IntLitExpr,
    NameExpr,
    PrefixExpr,
    from_dict,
    render,
    to_dict,
)
from prattle.core.parser import Parser, parse_expr
from prattle.core.tokenizer import tokenize
from prattle.core.tokens import Token, TokenKind

__all__ = [
    # Pipeline
    "tokenize",
    "Parser",
    "parse_expr",
    "render",
    "to_dict",
    "from_dict",
    # Types
    "Token",
    "TokenKind",
    "Expr",
    "NameExpr",
    "IntLitExpr",
    "PrefixExpr",
    "BinaryExpr",
    # Errors
    "PrattleError",
    "TokenizeError",
    "IntegerOverflow",
    "ParseError",
    "MissingPrefixHandler",
    "MissingInfixHandler",
    "UnexpectedEndOfInput",
    "UnexpectedToken",
    "MalformedTokenForExpression",
]
