"""Exceptions raised while locating, building and evaluating formulas.

Every error aborts the enclosing top-level evaluation. Nothing is retried and
no partial value is ever returned.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ._terms import Term


class FormulaError(Exception):
    """Base class for every error raised by parxeval."""


class QueryFailure(FormulaError):
    """The graph store is unreachable or answered with an unexpected shape."""


class MalformedFormula(QueryFailure):
    """A formula node is structurally broken (no operator, missing arguments)."""

    def __init__(self, node: Term, reason: str) -> None:
        self.node = node
        self.reason = reason
        super().__init__(f"Malformed formula {node}: {reason}")


class FormulaNotFound(FormulaError):
    """No interdependency formula matches a (process, data element) pair."""

    def __init__(self, process: str, data_element: str) -> None:
        self.process = process
        self.data_element = data_element
        super().__init__(f"No formula found for process '{process}' and data element '{data_element}'")


class UnsupportedOperator(FormulaError):
    """A formula uses an operator outside the supported arithmetic set."""

    def __init__(self, operator: str) -> None:
        self.operator = operator
        super().__init__(f"Unsupported operator: {operator}")


class UnknownArgumentType(FormulaError):
    """An argument is neither a numeric literal, a variable nor an application."""

    def __init__(self, argument: Term, types: frozenset[str] = frozenset()) -> None:
        self.argument = argument
        self.types = types
        detail = f" (types: {', '.join(sorted(types))})" if types else ""
        super().__init__(f"Unknown argument type for: {argument}{detail}")


class InvalidVariableName(FormulaError):
    """A variable's local name cannot be used as an expression identifier."""

    def __init__(self, variable: Term, name: str) -> None:
        self.variable = variable
        self.name = name
        super().__init__(f"Variable {variable} has local name '{name}', which is not a valid identifier")


class MissingVariableValue(FormulaError):
    """A variable has neither a recorded value nor a defining formula."""

    def __init__(self, variable: Term) -> None:
        self.variable = variable
        super().__init__(f"No recorded value and no defining formula for variable {variable}")


class CycleDetected(FormulaError):
    """A variable's resolution chain came back to a variable still in progress."""

    def __init__(self, variable: Term, chain: Sequence[Term]) -> None:
        self.variable = variable
        self.chain = tuple(chain)
        path = " -> ".join(str(node) for node in (*self.chain, variable))
        super().__init__(f"Cycle detected while resolving variable {variable}: {path}")


class MissingVariable(FormulaError):
    """The expression mentions an identifier that has no bound value."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Missing value for variable: {name}")


class ExpressionError(FormulaError):
    """The expression text is malformed or leaves the arithmetic domain."""
