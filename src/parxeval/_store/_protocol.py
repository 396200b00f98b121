"""GraphStore protocol consumed by the formula pipeline."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from parxeval._terms import Node, Term


@runtime_checkable
class GraphStore(Protocol):
    """Request/response oracle over the formula graph.

    Every method is one round trip to the store. Implementations raise
    `QueryFailure` when the store cannot answer.
    """

    def operator_of(self, node: Node) -> str:
        """Return the operator IRI of an application node.

        Raises `MalformedFormula` if the node has no operator.
        """
        ...

    def arguments_of(self, node: Node) -> list[Term]:
        """Return the application's arguments in list order."""
        ...

    def types_of(self, node: Node) -> frozenset[str]:
        """Return the declared `rdf:type` IRIs of a node."""
        ...

    def recorded_value_of(self, variable: Node) -> float | None:
        """Return the value a data element records for the variable, if any."""
        ...

    def defining_formulas_of(self, variable: Node) -> list[Node]:
        """Return equality formulas whose left-hand argument is the variable."""
        ...

    def interdependencies_of(self, process: Node, data_element: Node) -> list[Node]:
        """Return the process's interdependency formulas defining the data element's variable."""
        ...
