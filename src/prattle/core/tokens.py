"""
Token types and binding powers for the prattle expression language.
"""

from __future__ import annotations

from enum import StrEnum, auto

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Binding powers: higher binds tighter.
SUM_BP = 10
PRODUCT_BP = 20
CARET_BP = 30
PREFIX_BP = 40

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class TokenKind(StrEnum):
    """Token types for the expression language."""

    # Operands
    NAME = auto()
    INT_LIT = auto()

    # Operators
    PLUS = auto()
    MINUS = auto()
    SLASH = auto()
    STAR = auto()
    CARET = auto()
    TILDE = auto()
    BANG = auto()

    # Punctuation
    OPEN_PAREN = auto()
    CLOSE_PAREN = auto()


SYMBOLS: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "/": TokenKind.SLASH,
    "*": TokenKind.STAR,
    "!": TokenKind.BANG,
    "~": TokenKind.TILDE,
    "(": TokenKind.OPEN_PAREN,
    ")": TokenKind.CLOSE_PAREN,
    "^": TokenKind.CARET,
}

_SYMBOL_TEXT: dict[TokenKind, str] = {kind: sym for sym, kind in SYMBOLS.items()}

# Variant names used by the debug form, e.g. in binary expression output.
_VARIANT_NAMES: dict[TokenKind, str] = {
    TokenKind.NAME: "Name",
    TokenKind.INT_LIT: "IntLit",
    TokenKind.PLUS: "Plus",
    TokenKind.MINUS: "Minus",
    TokenKind.SLASH: "Slash",
    TokenKind.STAR: "Star",
    TokenKind.CARET: "Caret",
    TokenKind.TILDE: "Tilde",
    TokenKind.BANG: "Bang",
    TokenKind.OPEN_PAREN: "OpenParen",
    TokenKind.CLOSE_PAREN: "CloseParen",
}

_BINDING_POWERS: dict[TokenKind, int] = {
    TokenKind.PLUS: SUM_BP,
    TokenKind.MINUS: SUM_BP,
    TokenKind.SLASH: PRODUCT_BP,
    TokenKind.STAR: PRODUCT_BP,
    TokenKind.CARET: CARET_BP,
}


def debug_string(text: str) -> str:
    """Quote ``text`` the way a debug formatter prints a string literal."""
    out = ['"']
    for c in text:
        if c == "\\":
            out.append("\\\\")
        elif c == '"':
            out.append('\\"')
        elif c == "\n":
            out.append("\\n")
        elif c == "\r":
            out.append("\\r")
        elif c == "\t":
            out.append("\\t")
        elif c == "\0":
            out.append("\\0")
        elif not c.isprintable() and c != " ":
            out.append(f"\\u{{{ord(c):x}}}")
        else:
            out.append(c)
    out.append('"')
    return "".join(out)


class Token(BaseModel):
    """
    A single token produced by the tokenizer.

    ``name`` is set only for NAME tokens and ``value`` only for INT_LIT
    tokens. Tokens carry no source position.
    """

    kind: TokenKind
    name: str | None = Field(default=None, description="Identifier text for NAME")
    value: int | None = Field(
        default=None, ge=INT32_MIN, le=INT32_MAX, description="Value for INT_LIT"
    )

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_payload(self) -> Token:
        if (self.kind == TokenKind.NAME) != (self.name is not None):
            raise ValueError("name is required for NAME tokens and only for them")
        if (self.kind == TokenKind.INT_LIT) != (self.value is not None):
            raise ValueError("value is required for INT_LIT tokens and only for them")
        return self

    @classmethod
    def of(cls, kind: TokenKind) -> Token:
        """Build a payload-free operator or punctuation token."""
        return cls(kind=kind)

    @classmethod
    def name_token(cls, name: str) -> Token:
        return cls(kind=TokenKind.NAME, name=name)

    @classmethod
    def int_lit(cls, value: int) -> Token:
        return cls(kind=TokenKind.INT_LIT, value=value)

    @property
    def text(self) -> str:
        """Textual representation: symbol, identifier or decimal digits."""
        if self.kind == TokenKind.NAME:
            assert self.name is not None
            return self.name
        if self.kind == TokenKind.INT_LIT:
            return str(self.value)
        return _SYMBOL_TEXT[self.kind]

    @property
    def is_binary_operator(self) -> bool:
        return self.kind in _BINDING_POWERS

    @property
    def binding_power(self) -> int:
        """Infix binding power; 0 for anything that is not a binary operator."""
        return _BINDING_POWERS.get(self.kind, 0)

    def debug_repr(self) -> str:
        """Variant-style debug form, e.g. ``Plus``, ``Name("x")``, ``IntLit(5)``."""
        variant = _VARIANT_NAMES[self.kind]
        if self.kind == TokenKind.NAME:
            assert self.name is not None
            return f"{variant}({debug_string(self.name)})"
        if self.kind == TokenKind.INT_LIT:
            return f"{variant}({self.value})"
        return variant

    def __str__(self) -> str:
        return self.text
