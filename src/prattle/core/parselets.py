"""
Parselets for the Pratt parser.

A parselet knows how to build an expression node when a given token type is
met in a given position:

- prefix parselets run when a token starts an expression;
- infix parselets run when a token follows a completed left operand.

Each parselet is configured with a fixed binding power when it is
registered.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from prattle.core.errors import UnexpectedToken
from prattle.core.expressions import BinaryExpr, Expr, IntLitExpr, NameExpr, PrefixExpr
from prattle.core.tokens import Token, TokenKind

if TYPE_CHECKING:
    from prattle.core.parser import Parser


class PrefixParselet(ABC):
    """Builds an expression from a token in prefix position."""

    def __init__(self, binding_power: int) -> None:
        self.binding_power = binding_power

    @abstractmethod
    def parse(self, parser: Parser, token: Token) -> Expr:
        """Return the expression started by ``token``."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(binding_power={self.binding_power})"


class InfixParselet(ABC):
    """Combines a completed left operand with a token in infix position."""

    def __init__(self, binding_power: int) -> None:
        self.binding_power = binding_power

    @abstractmethod
    def parse(self, parser: Parser, left: Expr, token: Token) -> Expr:
        """Return the expression formed by ``left`` and ``token``."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(binding_power={self.binding_power})"


class NameParselet(PrefixParselet):
    def parse(self, parser: Parser, token: Token) -> Expr:
        return NameExpr.from_token(token)


class IntLitParselet(PrefixParselet):
    def parse(self, parser: Parser, token: Token) -> Expr:
        return IntLitExpr.from_token(token)


class PrefixOperatorParselet(PrefixParselet):
    """Unary ``+ - ! ~``: parses its operand at the prefix binding power."""

    def parse(self, parser: Parser, token: Token) -> Expr:
        operand = parser.parse_expression(self.binding_power)
        return PrefixExpr.from_token(token, operand)


class GroupParselet(PrefixParselet):
    """``( expr )``: resets precedence and consumes the matching ``)``."""

    def parse(self, parser: Parser, token: Token) -> Expr:
        inner = parser.parse_expression(self.binding_power)
        closing = parser.advance(expected="')'")
        if closing.kind != TokenKind.CLOSE_PAREN:
            raise UnexpectedToken(closing, "')'")
        return inner


class BinaryOperatorParselet(InfixParselet):
    """Left-associative binary operator.

    The right operand is parsed at this operator's own binding power, so a
    following operator of equal power is left for the enclosing loop.
    """

    def parse(self, parser: Parser, left: Expr, token: Token) -> Expr:
        right = parser.parse_expression(self.binding_power)
        return BinaryExpr.from_token(left, token, right)
