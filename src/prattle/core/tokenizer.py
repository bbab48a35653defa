"""
Tokenizer for the prattle expression language.

Converts an expression string into a flat list of tokens. Two pending runs
are tracked while scanning: a digit run and a name run (anything that is not
whitespace, an operator, or a digit starting a fresh literal).
"""

from __future__ import annotations

import logging

from prattle.core.errors import IntegerOverflow
from prattle.core.tokens import INT32_MAX, SYMBOLS, Token

logger = logging.getLogger(__name__)

_WHITESPACE = frozenset(" \n")
_DIGITS = frozenset("0123456789")


def tokenize(source: str) -> list[Token]:
    """Tokenize an expression string into a list of tokens.

    Raises:
        IntegerOverflow: If a digit run does not fit in a signed 32-bit integer.
    """
    tokens: list[Token] = []
    digits: list[str] = []
    name: list[str] = []

    def flush_int() -> None:
        if not digits:
            return
        tokens.append(_int_token("".join(digits)))
        digits.clear()

    def flush_name() -> None:
        if not name:
            return
        tokens.append(Token.name_token("".join(name)))
        name.clear()

    for c in source:
        if c in _WHITESPACE:
            flush_int()
            flush_name()
        elif c in SYMBOLS:
            flush_int()
            flush_name()
            tokens.append(Token.of(SYMBOLS[c]))
        elif c in _DIGITS:
            # A digit extends an active name run; otherwise it starts or
            # extends an integer run.
            if name:
                name.append(c)
            else:
                digits.append(c)
        else:
            flush_int()
            name.append(c)

    flush_name()
    flush_int()

    logger.debug("Tokenized %d characters into %d tokens", len(source), len(tokens))
    return tokens


def _int_token(digits: str) -> Token:
    # Length check first: int() refuses very long digit strings.
    significant = digits.lstrip("0") or "0"
    if len(significant) > len(str(INT32_MAX)) or int(significant) > INT32_MAX:
        raise IntegerOverflow(digits)
    return Token.int_lit(int(significant))
