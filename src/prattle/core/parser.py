"""
Pratt (precedence-climbing) parser for the prattle expression language.

Binding powers (higher binds tighter):
    + -     10
    * /     20
    ^       30
    prefix  40   (unary + - ! ~)

All binary operators are left-associative: the right operand is parsed at
the operator's own binding power, and an operator only continues the
current left operand when its power is strictly greater than the minimum
active at that level.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from prattle.core.errors import MissingInfixHandler, MissingPrefixHandler, UnexpectedEndOfInput
from prattle.core.expressions import Expr
from prattle.core.parselets import (
    BinaryOperatorParselet,
    GroupParselet,
    InfixParselet,
    IntLitParselet,
    NameParselet,
    PrefixOperatorParselet,
    PrefixParselet,
)
from prattle.core.tokenizer import tokenize
from prattle.core.tokens import (
    CARET_BP,
    PREFIX_BP,
    PRODUCT_BP,
    SUM_BP,
    Token,
    TokenKind,
)

logger = logging.getLogger(__name__)


class Parser:
    """Single-use Pratt parser over a token list."""

    def __init__(self, tokens: Sequence[Token]) -> None:
        self.tokens = list(tokens)
        self.pos = 0
        self.prefix_parselets: dict[TokenKind, PrefixParselet] = {}
        self.infix_parselets: dict[TokenKind, InfixParselet] = {}
        self._started = False

        self.register_prefix(TokenKind.NAME, NameParselet(PREFIX_BP))
        self.register_prefix(TokenKind.INT_LIT, IntLitParselet(PREFIX_BP))
        self.register_prefix(TokenKind.BANG, PrefixOperatorParselet(PREFIX_BP))
        self.register_prefix(TokenKind.TILDE, PrefixOperatorParselet(PREFIX_BP))
        self.register_prefix(TokenKind.MINUS, PrefixOperatorParselet(PREFIX_BP))
        self.register_prefix(TokenKind.PLUS, PrefixOperatorParselet(PREFIX_BP))
        self.register_prefix(TokenKind.OPEN_PAREN, GroupParselet(0))

        self.register_infix(TokenKind.PLUS, BinaryOperatorParselet(SUM_BP))
        self.register_infix(TokenKind.MINUS, BinaryOperatorParselet(SUM_BP))
        self.register_infix(TokenKind.SLASH, BinaryOperatorParselet(PRODUCT_BP))
        self.register_infix(TokenKind.STAR, BinaryOperatorParselet(PRODUCT_BP))
        self.register_infix(TokenKind.CARET, BinaryOperatorParselet(CARET_BP))

    @classmethod
    def from_source(cls, source: str) -> Parser:
        return cls(tokenize(source))

    # -- Registry --

    def register_prefix(self, kind: TokenKind, parselet: PrefixParselet) -> None:
        self._check_not_started()
        self.prefix_parselets[kind] = parselet

    def register_infix(self, kind: TokenKind, parselet: InfixParselet) -> None:
        self._check_not_started()
        self.infix_parselets[kind] = parselet

    def unregister_infix(self, kind: TokenKind) -> None:
        self._check_not_started()
        self.infix_parselets.pop(kind, None)

    def _check_not_started(self) -> None:
        if self._started:
            raise RuntimeError("parselet registry is read-only once parsing has started")

    # -- Cursor --

    def peek(self) -> Token | None:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def advance(self, expected: str = "an operand") -> Token:
        tok = self.peek()
        if tok is None:
            raise UnexpectedEndOfInput(expected)
        self.pos += 1
        return tok

    @property
    def remaining(self) -> list[Token]:
        """Tokens not consumed by :meth:`parse`."""
        return self.tokens[self.pos :]

    # -- Parsing --

    def parse(self) -> Expr:
        """Parse one complete expression from the start of the token stream."""
        if self._started:
            raise RuntimeError("Parser.parse() may only be called once")
        self._started = True
        logger.debug("Parsing %d tokens", len(self.tokens))
        expr = self.parse_expression(0)
        if self.remaining:
            logger.debug("Leaving %d unconsumed tokens", len(self.remaining))
        return expr

    def parse_expression(self, min_binding_power: int) -> Expr:
        token = self.advance()
        prefix = self.prefix_parselets.get(token.kind)
        if prefix is None:
            raise MissingPrefixHandler(token)
        left = prefix.parse(self, token)

        while True:
            nxt = self.peek()
            if nxt is None or not nxt.is_binary_operator:
                break
            if nxt.binding_power <= min_binding_power:
                break
            token = self.advance()
            infix = self.infix_parselets.get(token.kind)
            if infix is None:
                raise MissingInfixHandler(token)
            left = infix.parse(self, left, token)

        return left


def parse_expr(source: str) -> Expr:
    """Parse an expression string into an AST.

    Args:
        source: Expression string (e.g., "-a + b * 2")

    Returns:
        Parsed expression AST.

    Raises:
        ParseError: If the token stream is not a valid expression.
        TokenizeError: If tokenization fails.
    """
    return Parser.from_source(source).parse()
