"""Tests for the arithmetic expression evaluator."""

import math

import pytest

from parxeval import ExpressionError, MissingVariable, evaluate, substitute
from parxeval._expression import TokenKind, format_number, nth_root, tokenize


class TestTokenize:
    def test_token_kinds(self) -> None:
        tokens = tokenize("nthRoot(x_1, 2.5e3) ^ -1")
        assert [t.kind for t in tokens] == [
            TokenKind.NAME,
            TokenKind.LPAREN,
            TokenKind.NAME,
            TokenKind.COMMA,
            TokenKind.NUMBER,
            TokenKind.RPAREN,
            TokenKind.OPERATOR,
            TokenKind.OPERATOR,
            TokenKind.NUMBER,
            TokenKind.END,
        ]

    def test_spans_point_into_text(self) -> None:
        text = "mass / volume"
        tokens = tokenize(text)
        assert [text[t.start : t.end] for t in tokens[:-1]] == ["mass", "/", "volume"]

    def test_identifier_is_maximal(self) -> None:
        tokens = tokenize("ab2c")
        assert tokens[0].text == "ab2c"

    def test_unexpected_character(self) -> None:
        with pytest.raises(ExpressionError, match="Unexpected character"):
            tokenize("a % b")


class TestEvaluate:
    @pytest.mark.parametrize(
        ("expression", "expected"),
        [
            ("3 + 4", 7.0),
            ("10 - 4 - 3", 3.0),
            ("2 * 3 * 4", 24.0),
            ("24 / 4 / 3", 2.0),
            ("2 + 3 * 4", 14.0),
            ("(2 + 3) * 4", 20.0),
            ("2 ^ 3", 8.0),
            ("2 ^ 3 ^ 2", 512.0),
            ("-2 ^ 2", -4.0),
            ("(-2) ^ 2", 4.0),
            ("2 ^ -1", 0.5),
            ("--3", 3.0),
            ("+3", 3.0),
            ("2 * 3 ^ 2", 18.0),
            ("1.5e1 + .5", 15.5),
        ],
    )
    def test_arithmetic(self, expression: str, expected: float) -> None:
        assert evaluate(expression, {}) == expected

    def test_bindings(self) -> None:
        assert evaluate("mass / (density * volume)", {"mass": 10, "density": 2, "volume": 6}) == pytest.approx(
            10 / 12,
        )

    def test_functions(self) -> None:
        assert evaluate("abs(-4)", {}) == 4.0
        assert evaluate("nthRoot(9, 2)", {}) == 3.0
        assert evaluate("nthRoot(27, 3) + abs(x)", {"x": -1}) == 4.0

    def test_function_name_usable_as_variable(self) -> None:
        assert evaluate("abs + abs(abs)", {"abs": -2}) == 0.0

    def test_missing_variable(self) -> None:
        with pytest.raises(MissingVariable) as excinfo:
            evaluate("a + b", {"a": 1})
        assert excinfo.value.name == "b"

    def test_name_prefix_is_not_substituted(self) -> None:
        # "vol" is bound but "volume" is not
        with pytest.raises(MissingVariable, match="volume"):
            evaluate("volume", {"vol": 1})

    def test_unknown_function(self) -> None:
        with pytest.raises(ExpressionError, match="unknown function 'sin'"):
            evaluate("sin(1)", {})

    def test_wrong_arity(self) -> None:
        with pytest.raises(ExpressionError, match="takes 2 argument"):
            evaluate("nthRoot(8)", {})

    @pytest.mark.parametrize("expression", ["", "1 +", "(1 + 2", "1 2", "* 3", "abs()", "1 + )"])
    def test_syntax_errors(self, expression: str) -> None:
        with pytest.raises(ExpressionError):
            evaluate(expression, {})

    def test_division_by_zero_follows_ieee(self) -> None:
        assert evaluate("1 / 0", {}) == math.inf
        assert evaluate("-1 / 0", {}) == -math.inf
        assert math.isnan(evaluate("0 / 0", {}))

    def test_power_outside_reals(self) -> None:
        with pytest.raises(ExpressionError, match="not a real number"):
            evaluate("(-8) ^ 0.5", {})


class TestNthRoot:
    def test_exact_integer_roots(self) -> None:
        assert nth_root(9, 2) == 3.0
        assert nth_root(27, 3) == 3.0
        assert nth_root(1024, 10) == 2.0

    def test_negative_radicand_odd_degree(self) -> None:
        assert nth_root(-8, 3) == -2.0

    def test_negative_radicand_even_degree(self) -> None:
        with pytest.raises(ExpressionError, match="odd integer degree"):
            nth_root(-4, 2)

    def test_zero_degree(self) -> None:
        with pytest.raises(ExpressionError, match="must not be zero"):
            nth_root(4, 0)

    def test_irrational_root(self) -> None:
        assert nth_root(2, 2) == pytest.approx(math.sqrt(2))


class TestSubstitute:
    def test_replaces_names_with_values(self) -> None:
        assert substitute("mass / (density * volume)", {"mass": 10.0, "density": 2.0, "volume": 6.0}) == "10 / (2 * 6)"

    def test_keeps_function_names(self) -> None:
        assert substitute("nthRoot(x, 2)", {"x": 9.0}) == "nthRoot(9, 2)"

    def test_parenthesizes_negative_values(self) -> None:
        assert substitute("x ^ 2", {"x": -3.0}) == "(-3) ^ 2"

    def test_missing_variable(self) -> None:
        with pytest.raises(MissingVariable):
            substitute("x + y", {"x": 1.0})


class TestFormatNumber:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (10.0, "10"),
            (-2.0, "-2"),
            (2.5, "2.5"),
            (0.1, "0.1"),
            (1e20, "1e+20"),
            (math.inf, "inf"),
            (0.0, "0"),
            (-0.0, "-0"),
        ],
    )
    def test_format(self, value: float, expected: str) -> None:
        assert format_number(value) == expected

    def test_negative_zero_keeps_its_sign_through_substitution(self) -> None:
        text = substitute("1 / x", {"x": -0.0})

        assert text == "1 / (-0)"
        assert evaluate(text, {}) == -math.inf
