"""
Property-based tests using Hypothesis.

These tests verify tokenizer and parser invariants across a wide range of
inputs.
"""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from prattle.core.errors import PrattleError
from prattle.core.expressions import BinaryExpr, Expr, IntLitExpr, NameExpr, PrefixExpr
from prattle.core.parser import parse_expr
from prattle.core.tokenizer import tokenize
from prattle.core.tokens import INT32_MAX, Token, TokenKind

_names = st.text(alphabet="abcxyz_", min_size=1, max_size=5)
_operands = st.one_of(st.integers(min_value=0, max_value=INT32_MAX).map(str), _names)
_binary_ops = st.sampled_from("+-*/^")
_prefix_ops = st.sampled_from("+-!~")


@st.composite
def expressions(draw: st.DrawFn, depth: int = 3) -> str:
    """Well-formed expression text."""
    if depth == 0:
        return draw(_operands)
    choice = draw(st.integers(min_value=0, max_value=3))
    if choice == 0:
        return draw(_operands)
    if choice == 1:
        return draw(_prefix_ops) + draw(expressions(depth - 1))
    if choice == 2:
        return "(" + draw(expressions(depth - 1)) + ")"
    left = draw(expressions(depth - 1))
    right = draw(expressions(depth - 1))
    return f"{left}{draw(_binary_ops)}{right}"


def _leaves(expr: Expr) -> list[Expr]:
    if isinstance(expr, NameExpr | IntLitExpr):
        return [expr]
    if isinstance(expr, PrefixExpr):
        return _leaves(expr.operand)
    assert isinstance(expr, BinaryExpr)
    return _leaves(expr.left) + _leaves(expr.right)


class TestTokenizerProperties:
    @given(st.integers(min_value=0, max_value=INT32_MAX))
    @settings(max_examples=200)
    def test_literal_roundtrip(self, k: int) -> None:
        """Invariant: decimal text of k tokenizes to exactly IntLit(k)."""
        assert tokenize(str(k)) == [Token.int_lit(k)]

    @given(expressions())
    @settings(max_examples=200)
    def test_spaces_between_tokens_are_ignored(self, source: str) -> None:
        """Invariant: padding operators with spaces leaves the token stream unchanged."""
        spaced = "".join(f" {c} " if c in "+-*/^!~()" else c for c in source)
        assert tokenize(spaced) == tokenize(source)

    @given(st.text(max_size=200))
    @settings(max_examples=200)
    def test_tokenize_never_crashes(self, text: str) -> None:
        """Invariant: tokenize only ever raises PrattleError."""
        try:
            tokenize(text)
        except PrattleError:
            pass


class TestParserProperties:
    @given(expressions())
    @settings(max_examples=200)
    def test_well_formed_input_parses(self, source: str) -> None:
        """Invariant: every generated expression parses, keeping operand order."""
        expr = parse_expr(source)
        operand_kinds = (TokenKind.NAME, TokenKind.INT_LIT)
        operand_tokens = [t for t in tokenize(source) if t.kind in operand_kinds]
        leaves = _leaves(expr)
        assert len(leaves) == len(operand_tokens)
        for leaf, tok in zip(leaves, operand_tokens, strict=True):
            if isinstance(leaf, NameExpr):
                assert leaf.name == tok.name
            else:
                assert leaf.value == tok.value

    @given(expressions())
    @settings(max_examples=100)
    def test_rendering_is_pure(self, source: str) -> None:
        """Invariant: rendering the same tree twice gives identical text."""
        expr = parse_expr(source)
        assert expr.render() == expr.render()
        assert parse_expr(source).render() == expr.render()

    @given(st.text(alphabet="ab12 +-*/^!~()", max_size=40))
    @settings(max_examples=300)
    def test_parse_fails_fast_with_typed_errors(self, text: str) -> None:
        """Invariant: arbitrary input either parses or raises PrattleError."""
        try:
            parse_expr(text)
        except PrattleError:
            pass
