"""
Error types for prattle tokenizing and parsing.

Every error here is fatal: the core never recovers from one or turns it into
a value. Callers decide whether to abort, report, or retry.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from prattle.core.tokens import Token


class PrattleError(Exception):
    """Base exception for all prattle errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class TokenizeError(PrattleError):
    """
    Raised when source text cannot be turned into tokens.

    Examples:
    - Integer literal outside the signed 32-bit range
    """

    pass


class IntegerOverflow(TokenizeError):
    """An accumulated digit run does not fit in a signed 32-bit integer."""

    def __init__(self, digits: str) -> None:
        self.digits = digits
        super().__init__(f"Integer literal {digits} does not fit in 32 bits")


class ParseError(PrattleError):
    """
    Raised when a token sequence cannot be parsed into an expression.

    Examples:
    - Token with no prefix behaviour at the start of an expression
    - Operator with no registered infix behaviour
    - Input ending where an operand or ')' is required
    """

    pass


class MissingPrefixHandler(ParseError):
    """A token appears where an expression must start but has no prefix parselet."""

    def __init__(self, token: Token) -> None:
        self.token = token
        super().__init__(f"Unexpected {token.debug_repr()} at start of expression")


class MissingInfixHandler(ParseError):
    """A binary-operator token has no registered infix parselet."""

    def __init__(self, token: Token) -> None:
        self.token = token
        super().__init__(f"Invalid infix operator {token.debug_repr()}")


class UnexpectedEndOfInput(ParseError):
    """The token stream ran out while something was still required."""

    def __init__(self, expected: str = "an operand") -> None:
        self.expected = expected
        super().__init__(f"Unexpected end of input, expected {expected}")


class MalformedTokenForExpression(ParseError):
    """An expression node was built from a token of the wrong kind.

    This signals a broken parselet registration rather than bad user input.
    """

    def __init__(self, token: Token, expected: str) -> None:
        self.token = token
        self.expected = expected
        super().__init__(f"{token.debug_repr()} is not a valid {expected}")


class UnexpectedToken(ParseError):
    """A token other than the one required was found, e.g. ``(1 2)``."""

    def __init__(self, token: Token, expected: str) -> None:
        self.token = token
        self.expected = expected
        super().__init__(f"Unexpected {token.debug_repr()}, expected {expected}")
