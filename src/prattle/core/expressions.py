"""
Expression AST for the prattle expression language.

Four node types make up a strict tree: every composite node owns its
children and nothing is shared. Nodes are frozen once built.

Rendering produces the nested structural text consumed downstream:

    (name: "x")
    (int: 5)
    (operator: "-", operand: (int: 1))
    (left operand: ((int: 1)), operator: Plus, right operand: ((int: 2)))

Binary nodes print the operator token's variant name while prefix nodes
print the operator symbol. Consumers depend on both shapes.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_serializer, field_validator

from prattle.core.errors import MalformedTokenForExpression
from prattle.core.tokens import INT32_MAX, INT32_MIN, SYMBOLS, Token, TokenKind, debug_string

_PREFIX_OPERATORS = frozenset({TokenKind.PLUS, TokenKind.MINUS, TokenKind.BANG, TokenKind.TILDE})
_PREFIX_SYMBOLS = frozenset(sym for sym, kind in SYMBOLS.items() if kind in _PREFIX_OPERATORS)


class NameExpr(BaseModel):
    """A bare name."""

    type: Literal["name"] = "name"
    name: str = Field(description="Identifier text")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_token(cls, token: Token) -> NameExpr:
        if token.kind != TokenKind.NAME:
            raise MalformedTokenForExpression(token, "name expression")
        assert token.name is not None
        return cls(name=token.name)

    def render(self) -> str:
        return f"(name: {debug_string(self.name)})"

    def __str__(self) -> str:
        return self.render()


class IntLitExpr(BaseModel):
    """A signed 32-bit integer literal."""

    type: Literal["int"] = "int"
    value: int = Field(ge=INT32_MIN, le=INT32_MAX, description="Literal value")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_token(cls, token: Token) -> IntLitExpr:
        if token.kind != TokenKind.INT_LIT:
            raise MalformedTokenForExpression(token, "int literal")
        assert token.value is not None
        return cls(value=token.value)

    def render(self) -> str:
        return f"(int: {self.value})"

    def __str__(self) -> str:
        return self.render()


class PrefixExpr(BaseModel):
    """Unary operation: op operand."""

    type: Literal["prefix"] = "prefix"
    operator: str = Field(description="Operator symbol, e.g. '-'")
    operand: Expr

    model_config = ConfigDict(frozen=True)

    @field_validator("operator")
    @classmethod
    def _operator_is_prefix(cls, v: str) -> str:
        if v not in _PREFIX_SYMBOLS:
            raise ValueError(f"{v!r} is not a prefix operator")
        return v

    @classmethod
    def from_token(cls, token: Token, operand: Expr) -> PrefixExpr:
        if token.kind not in _PREFIX_OPERATORS:
            raise MalformedTokenForExpression(token, "prefix operator")
        return cls(operator=token.text, operand=operand)

    def render(self) -> str:
        return f"(operator: {debug_string(self.operator)}, operand: {self.operand.render()})"

    def __str__(self) -> str:
        return self.render()


class BinaryExpr(BaseModel):
    """Binary operation: left op right."""

    type: Literal["binary"] = "binary"
    left: Expr
    operator: Token
    right: Expr

    model_config = ConfigDict(frozen=True)

    @field_validator("operator", mode="before")
    @classmethod
    def _operator_from_symbol(cls, v: Any) -> Any:
        # Accept the symbol form produced by to_dict().
        if isinstance(v, str) and v in SYMBOLS:
            return Token.of(SYMBOLS[v])
        return v

    @field_validator("operator")
    @classmethod
    def _operator_is_binary(cls, v: Token) -> Token:
        if not v.is_binary_operator:
            raise ValueError(f"{v.debug_repr()} is not a binary operator")
        return v

    @field_serializer("operator")
    def _operator_to_symbol(self, v: Token) -> str:
        return v.text

    @classmethod
    def from_token(cls, left: Expr, token: Token, right: Expr) -> BinaryExpr:
        if not token.is_binary_operator:
            raise MalformedTokenForExpression(token, "binary operator")
        return cls(left=left, operator=token, right=right)

    def render(self) -> str:
        return (
            f"(left operand: ({self.left.render()}), "
            f"operator: {self.operator.debug_repr()}, "
            f"right operand: ({self.right.render()}))"
        )

    def __str__(self) -> str:
        return self.render()


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = NameExpr | IntLitExpr | PrefixExpr | BinaryExpr

# Rebuild models for recursive forward references
PrefixExpr.model_rebuild()
BinaryExpr.model_rebuild()


def render(expr: Expr) -> str:
    """Render an expression tree as nested structural text."""
    return expr.render()


def to_dict(expr: Expr) -> dict[str, Any]:
    """JSON-friendly structural dump, tagged with a ``type`` field per node."""
    return expr.model_dump(mode="json")


def from_dict(data: dict[str, Any]) -> Expr:
    """Rebuild an expression tree from the output of :func:`to_dict`."""
    return _EXPR_ADAPTER.validate_python(data)


_EXPR_ADAPTER: TypeAdapter[Expr] = TypeAdapter(Expr)
