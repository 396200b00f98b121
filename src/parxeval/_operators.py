"""Supported OpenMath operators and their rendering in expressions."""

from enum import StrEnum
from typing import Self

from ._errors import UnsupportedOperator
from ._namespaces import ARITH1


class Operator(StrEnum):
    """An arithmetic operator, valued by its OpenMath IRI.

    Each member carries the symbol it renders as and whether it renders as a
    function call (`symbol(a, b)`) instead of an infix chain (`a symbol b`).
    """

    symbol: str
    function_style: bool

    def __new__(cls, iri: str, symbol: str, function_style: bool = False) -> Self:
        obj = str.__new__(cls, iri)
        obj._value_ = iri
        obj.symbol = symbol
        obj.function_style = function_style
        return obj

    PLUS = ARITH1.plus, "+"
    MINUS = ARITH1.minus, "-"
    TIMES = ARITH1.times, "*"
    DIVIDE = ARITH1.divide, "/"
    POWER = ARITH1.power, "^"
    ROOT = ARITH1.root, "nthRoot", True
    ABS = ARITH1.abs, "abs", True

    @classmethod
    def from_iri(cls, iri: str) -> Self:
        """Look up the operator for an IRI.

        Raises:
            UnsupportedOperator: If the IRI is not in the supported table.

        """
        try:
            return cls(iri)
        except ValueError:
            raise UnsupportedOperator(iri) from None

    def render(self, tokens: list[str]) -> str:
        """Compose argument tokens into expression text."""
        if self.function_style:
            return f"{self.symbol}({', '.join(tokens)})"
        return f" {self.symbol} ".join(tokens)


def is_equality(iri: str) -> bool:
    """Check whether an operator IRI denotes equality (`relation1#eq`)."""
    return iri.endswith("#eq")
