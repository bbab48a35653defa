"""Tests for expression nodes: construction, rendering and JSON dumps."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from prattle.core.errors import MalformedTokenForExpression
from prattle.core.expressions import (
    BinaryExpr,
    IntLitExpr,
    NameExpr,
    PrefixExpr,
    from_dict,
    render,
    to_dict,
)
from prattle.core.parser import parse_expr
from prattle.core.tokens import Token, TokenKind


class TestRendering:
    """Rendered shapes are consumed downstream and must match exactly."""

    def test_name(self) -> None:
        assert NameExpr(name="x").render() == '(name: "x")'

    def test_name_with_quote(self) -> None:
        assert NameExpr(name='a"b').render() == '(name: "a\\"b")'

    def test_name_with_c1_control(self) -> None:
        assert parse_expr("a\x85b").render() == '(name: "a\\u{85}b")'

    def test_int(self) -> None:
        assert IntLitExpr(value=5).render() == "(int: 5)"

    def test_prefix(self) -> None:
        assert render(parse_expr("-1")) == '(operator: "-", operand: (int: 1))'

    def test_binary_uses_variant_name(self) -> None:
        assert render(parse_expr("1+2")) == (
            "(left operand: ((int: 1)), operator: Plus, right operand: ((int: 2)))"
        )

    def test_left_associative_chain(self) -> None:
        assert render(parse_expr("1-2-3")) == (
            "(left operand: ((left operand: ((int: 1)), operator: Minus, "
            "right operand: ((int: 2)))), operator: Minus, right operand: ((int: 3)))"
        )

    def test_prefix_inside_binary(self) -> None:
        assert render(parse_expr("-a*b")) == (
            '(left operand: ((operator: "-", operand: (name: "a"))), '
            'operator: Star, right operand: ((name: "b")))'
        )

    @pytest.mark.parametrize(
        ("source", "variant"),
        [("a/b", "Slash"), ("a^b", "Caret"), ("a-b", "Minus")],
    )
    def test_operator_variants(self, source: str, variant: str) -> None:
        assert f"operator: {variant}," in render(parse_expr(source))

    def test_str_matches_render(self) -> None:
        expr = parse_expr("!x + ~y")
        assert str(expr) == expr.render()

    def test_rendering_is_repeatable(self) -> None:
        expr = parse_expr("(a+1)*-b^2")
        assert expr.render() == expr.render()


class TestFromToken:
    def test_name_from_wrong_token(self) -> None:
        with pytest.raises(MalformedTokenForExpression, match="IntLit"):
            NameExpr.from_token(Token.int_lit(1))

    def test_int_from_wrong_token(self) -> None:
        with pytest.raises(MalformedTokenForExpression):
            IntLitExpr.from_token(Token.name_token("x"))

    def test_prefix_from_wrong_token(self) -> None:
        with pytest.raises(MalformedTokenForExpression):
            PrefixExpr.from_token(Token.of(TokenKind.STAR), NameExpr(name="x"))

    def test_binary_from_wrong_token(self) -> None:
        with pytest.raises(MalformedTokenForExpression):
            BinaryExpr.from_token(
                NameExpr(name="a"), Token.of(TokenKind.BANG), NameExpr(name="b")
            )

    def test_binary_operator_validated(self) -> None:
        with pytest.raises(ValidationError):
            BinaryExpr(
                left=NameExpr(name="a"),
                operator=Token.of(TokenKind.TILDE),
                right=NameExpr(name="b"),
            )

    def test_prefix_operator_validated(self) -> None:
        with pytest.raises(ValidationError):
            PrefixExpr(operator="*", operand=NameExpr(name="x"))

    def test_nodes_are_frozen(self) -> None:
        expr = NameExpr(name="x")
        with pytest.raises(ValidationError):
            expr.name = "y"  # type: ignore[misc]


class TestDict:
    def test_to_dict_shape(self) -> None:
        assert to_dict(parse_expr("-1+x")) == {
            "type": "binary",
            "left": {"type": "prefix", "operator": "-", "operand": {"type": "int", "value": 1}},
            "operator": "+",
            "right": {"type": "name", "name": "x"},
        }

    def test_from_dict_rebuilds_tree(self) -> None:
        expr = parse_expr("(a+1)*-b^2")
        assert from_dict(to_dict(expr)) == expr

    def test_from_dict_rejects_non_prefix_operator(self) -> None:
        with pytest.raises(ValidationError):
            from_dict(
                {"type": "prefix", "operator": "*", "operand": {"type": "int", "value": 1}}
            )
