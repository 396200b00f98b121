"""In-memory GraphStore populated from Python."""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import TYPE_CHECKING, TypeAlias

from parxeval._errors import MalformedFormula
from parxeval._namespaces import OM, RELATION1
from parxeval._operators import is_equality
from parxeval._terms import IRI, BlankNode, LiteralTerm, as_node, double

if TYPE_CHECKING:
    from collections.abc import Sequence

    from parxeval._terms import Node, Term

logger = logging.getLogger(__name__)

ArgumentLike: TypeAlias = "Term | str | float"


def _as_argument(value: ArgumentLike) -> Term:
    if isinstance(value, IRI | BlankNode | LiteralTerm):
        return value
    if isinstance(value, int | float):
        return double(value)
    return as_node(value)


class InMemoryGraphStore:
    """A GraphStore that keeps the formula graph in dictionaries.

    Nodes may be given as `IRI`/`BlankNode` terms or as plain strings
    (`"_:label"` for blank nodes). Numbers in argument lists become
    `xsd:double` literals.

    Example:
        >>> store = InMemoryGraphStore()
        >>> store.add_variable("http://example.org#A")
        >>> store.add_data_element("http://example.org#A_DE", "http://example.org#A", 3.0)
        >>> store.recorded_value_of(IRI("http://example.org#A"))
        3.0

    """

    def __init__(self) -> None:
        self._operators: dict[Node, str] = {}
        self._arguments: dict[Node, tuple[Term, ...]] = {}
        self._types: defaultdict[Node, set[str]] = defaultdict(set)
        self._data_for: defaultdict[Node, list[Node]] = defaultdict(list)
        self._values: dict[Node, float] = {}
        self._interdependencies: defaultdict[Node, list[Node]] = defaultdict(list)

    def close(self) -> None:
        """Nothing to release; present so both stores can be used with `with`."""

    def __enter__(self) -> InMemoryGraphStore:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # -- population ---------------------------------------------------------

    def add_type(self, node: Node | str, type_iri: str) -> None:
        self._types[as_node(node)].add(type_iri)

    def add_variable(self, node: Node | str) -> None:
        self.add_type(node, OM.Variable)

    def add_application(self, node: Node | str, operator: str, arguments: Sequence[ArgumentLike]) -> None:
        """Add an `om:Application` of `operator` to the ordered `arguments`."""
        key = as_node(node)
        self.add_type(key, OM.Application)
        self._operators[key] = str(operator)
        self._arguments[key] = tuple(_as_argument(arg) for arg in arguments)

    def add_equation(self, node: Node | str, lhs: ArgumentLike, rhs: ArgumentLike) -> None:
        """Add an equality application `lhs = rhs`."""
        self.add_application(node, RELATION1.eq, [lhs, rhs])

    def add_data_element(self, element: Node | str, variable: Node | str, value: float | str | None = None) -> None:
        """Record that `element` is data for `variable`, optionally with a value."""
        key = as_node(element)
        self._data_for[key].append(as_node(variable))
        if value is not None:
            self._values[key] = float(value)

    def add_interdependency(self, process: Node | str, formula: Node | str) -> None:
        self._interdependencies[as_node(process)].append(as_node(formula))

    # -- GraphStore ---------------------------------------------------------

    def operator_of(self, node: Node) -> str:
        try:
            return self._operators[node]
        except KeyError:
            raise MalformedFormula(node, "no operator") from None

    def arguments_of(self, node: Node) -> list[Term]:
        return list(self._arguments.get(node, ()))

    def types_of(self, node: Node) -> frozenset[str]:
        return frozenset(self._types.get(node, ()))

    def recorded_value_of(self, variable: Node) -> float | None:
        for element, variables in self._data_for.items():
            if variable in variables and element in self._values:
                return self._values[element]
        return None

    def defining_formulas_of(self, variable: Node) -> list[Node]:
        return [
            node
            for node, operator in self._operators.items()
            if is_equality(operator) and self._arguments[node][:1] == (variable,)
        ]

    def interdependencies_of(self, process: Node, data_element: Node) -> list[Node]:
        candidates: list[Node] = []
        for formula in self._interdependencies.get(process, ()):
            lhs = self._arguments.get(formula, ())[:1]
            if not lhs or isinstance(lhs[0], LiteralTerm):
                continue
            if OM.Variable in self.types_of(lhs[0]) and lhs[0] in self._data_for.get(data_element, ()):
                candidates.append(formula)
        logger.debug("Interdependencies of %s for %s: %s", process, data_element, candidates)
        return candidates
