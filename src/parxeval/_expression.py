"""Arithmetic expression evaluation.

Expressions are tokenized and parsed by recursive descent against a symbol
table of bound variable values, so identifiers are never replaced textually
before parsing.

Grammar (lowest to highest precedence):

    expr   := term (("+" | "-") term)*
    term   := unary (("*" | "/") unary)*
    unary  := ("+" | "-") unary | power
    power  := atom ("^" unary)?
    atom   := NUMBER | NAME "(" expr ("," expr)* ")" | NAME | "(" expr ")"

`^` is right associative and binds tighter than unary minus, so `-2 ^ 2`
is `-4` and `2 ^ 3 ^ 2` is `512`.
"""

import logging
import math
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import NoReturn

from ._errors import ExpressionError, MissingVariable

logger = logging.getLogger(__name__)


class TokenKind(StrEnum):
    NUMBER = auto()
    NAME = auto()
    OPERATOR = auto()
    LPAREN = auto()
    RPAREN = auto()
    COMMA = auto()
    END = auto()


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    text: str
    start: int
    end: int


_TOKEN_RE = re.compile(
    r"""
    (?P<number>(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)
    | (?P<name>[A-Za-z_][A-Za-z0-9_]*)
    | (?P<operator>[-+*/^])
    | (?P<lparen>\()
    | (?P<rparen>\))
    | (?P<comma>,)
    """,
    re.VERBOSE,
)
_WHITESPACE_RE = re.compile(r"\s+")


def tokenize(expression: str) -> list[Token]:
    """Split expression text into tokens, ending with an END token.

    Raises:
        ExpressionError: If the text contains a character outside the grammar.

    """
    tokens: list[Token] = []
    pos = 0
    while pos < len(expression):
        if space := _WHITESPACE_RE.match(expression, pos):
            pos = space.end()
            continue
        match = _TOKEN_RE.match(expression, pos)
        if match is None:
            msg = f"Unexpected character {expression[pos]!r} at position {pos} in: {expression}"
            raise ExpressionError(msg)
        kind = TokenKind(match.lastgroup)
        tokens.append(Token(kind=kind, text=match.group(), start=pos, end=match.end()))
        pos = match.end()
    tokens.append(Token(kind=TokenKind.END, text="", start=pos, end=pos))
    return tokens


def _divide(a: float, b: float) -> float:
    # IEEE semantics: x / 0 is a signed infinity, 0 / 0 is nan
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _is_odd_integer(x: float) -> bool:
    return x.is_integer() and int(x) % 2 == 1


def _power(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        msg = f"{base} ^ {exponent} is not a real number"
        raise ExpressionError(msg) from None


def nth_root(radicand: float, degree: float) -> float:
    """Real nth root; a negative radicand needs an odd integer degree.

    Example:
        >>> nth_root(27, 3)
        3.0
        >>> nth_root(-8, 3)
        -2.0

    """
    radicand, degree = float(radicand), float(degree)
    if degree == 0:
        msg = "nthRoot degree must not be zero"
        raise ExpressionError(msg)
    if radicand < 0:
        if not _is_odd_integer(degree):
            msg = f"nthRoot of negative radicand {radicand} requires an odd integer degree, got {degree}"
            raise ExpressionError(msg)
        return -nth_root(-radicand, degree)
    if radicand == 0:
        return 0.0 if degree > 0 else math.inf

    root = radicand ** (1.0 / degree)
    # Snap to an exact integer root when one exists (27 ** (1/3) == 3.0000000000000004)
    if degree.is_integer() and math.isfinite(root):
        nearest = round(root)
        if nearest != 0 and float(nearest) ** degree == radicand:
            return float(nearest)
    return root


@dataclass(frozen=True, slots=True)
class Function:
    arity: int
    impl: Callable[..., float]


FUNCTIONS: Mapping[str, Function] = {
    "abs": Function(arity=1, impl=abs),
    "nthRoot": Function(arity=2, impl=nth_root),
}
"""Named functions available in expressions."""


class _Parser:
    """Recursive-descent evaluator over a token list."""

    def __init__(self, expression: str, bindings: Mapping[str, float]) -> None:
        self.expression = expression
        self.tokens = tokenize(expression)
        self.bindings = bindings
        self.pos = 0

    @property
    def current(self) -> Token:
        return self.tokens[self.pos]

    def _advance(self) -> Token:
        token = self.tokens[self.pos]
        if token.kind is not TokenKind.END:
            self.pos += 1
        return token

    def _expect(self, kind: TokenKind) -> Token:
        token = self.current
        if token.kind is not kind:
            self._fail(f"expected {kind}")
        return self._advance()

    def _fail(self, reason: str) -> NoReturn:
        token = self.current
        found = token.text or "end of expression"
        msg = f"Invalid expression ({reason}, found {found!r} at position {token.start}): {self.expression}"
        raise ExpressionError(msg)

    def parse(self) -> float:
        if self.current.kind is TokenKind.END:
            self._fail("empty expression")
        value = self._expr()
        if self.current.kind is not TokenKind.END:
            self._fail("unexpected trailing input")
        return value

    def _expr(self) -> float:
        value = self._term()
        while self.current.kind is TokenKind.OPERATOR and self.current.text in "+-":
            op = self._advance().text
            rhs = self._term()
            value = value + rhs if op == "+" else value - rhs
        return value

    def _term(self) -> float:
        value = self._unary()
        while self.current.kind is TokenKind.OPERATOR and self.current.text in "*/":
            op = self._advance().text
            rhs = self._unary()
            value = value * rhs if op == "*" else _divide(value, rhs)
        return value

    def _unary(self) -> float:
        if self.current.kind is TokenKind.OPERATOR and self.current.text in "+-":
            op = self._advance().text
            operand = self._unary()
            return -operand if op == "-" else operand
        return self._power()

    def _power(self) -> float:
        base = self._atom()
        if self.current.kind is TokenKind.OPERATOR and self.current.text == "^":
            self._advance()
            return _power(base, self._unary())
        return base

    def _atom(self) -> float:
        token = self.current
        match token.kind:
            case TokenKind.NUMBER:
                self._advance()
                return float(token.text)
            case TokenKind.NAME:
                self._advance()
                if self.current.kind is TokenKind.LPAREN:
                    return self._call(token.text)
                if token.text not in self.bindings:
                    raise MissingVariable(token.text)
                return float(self.bindings[token.text])
            case TokenKind.LPAREN:
                self._advance()
                value = self._expr()
                self._expect(TokenKind.RPAREN)
                return value
            case _:
                self._fail("expected a number, name or '('")

    def _call(self, name: str) -> float:
        function = FUNCTIONS.get(name)
        if function is None:
            self._fail(f"unknown function '{name}'")
        self._expect(TokenKind.LPAREN)
        args = [self._expr()]
        while self.current.kind is TokenKind.COMMA:
            self._advance()
            args.append(self._expr())
        self._expect(TokenKind.RPAREN)
        if len(args) != function.arity:
            msg = f"{name}() takes {function.arity} argument(s), got {len(args)}: {self.expression}"
            raise ExpressionError(msg)
        return float(function.impl(*args))


def evaluate(expression: str, bindings: Mapping[str, float]) -> float:
    """Evaluate an arithmetic expression against bound variable values.

    Args:
        expression: Expression text using variable names as placeholders.
        bindings: Mapping from variable name to its numeric value.

    Returns:
        The result as a float.

    Raises:
        MissingVariable: If the expression uses a name that has no binding.
        ExpressionError: If the text is malformed or an operation leaves
            the real numbers.

    Example:
        >>> evaluate("mass / (density * volume)", {"mass": 10, "density": 2, "volume": 6})
        0.8333333333333334

    """
    result = _Parser(expression, bindings).parse()
    logger.debug("Evaluated %s -> %r", expression, result)
    return result


def format_number(value: float) -> str:
    """Format a number the way it is shown in evaluated expressions.

    Integral values drop the trailing `.0`. Negative zero keeps its sign, so
    `1 / x` with `x = -0.0` still evaluates to `-inf` from the text.
    """
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(float(value))


def substitute(expression: str, bindings: Mapping[str, float]) -> str:
    """Replace every variable name in the expression with its bound value.

    Function names followed by `(` are left in place. Negative values are
    parenthesized so the text keeps its meaning.

    Raises:
        MissingVariable: If a name has no binding.

    Example:
        >>> substitute("abs(x) + y", {"x": -3.0, "y": 4.5})
        'abs((-3)) + 4.5'

    """
    tokens = tokenize(expression)
    pieces: list[str] = []
    last = 0
    for index, token in enumerate(tokens):
        if token.kind is not TokenKind.NAME:
            continue
        if tokens[index + 1].kind is TokenKind.LPAREN and token.text in FUNCTIONS:
            continue
        if token.text not in bindings:
            raise MissingVariable(token.text)
        text = format_number(bindings[token.text])
        if text.startswith("-"):
            text = f"({text})"
        pieces.append(expression[last : token.start])
        pieces.append(text)
        last = token.end
    pieces.append(expression[last:])
    return "".join(pieces)
