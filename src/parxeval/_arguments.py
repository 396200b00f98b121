"""Classification of formula arguments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from ._errors import UnknownArgumentType
from ._namespaces import OM
from ._terms import IRI, BlankNode, LiteralTerm

if TYPE_CHECKING:
    from ._store import GraphStore
    from ._terms import Node, Term


@dataclass(frozen=True, slots=True)
class Literal:
    """A numeric constant written directly in the argument list."""

    value: float
    lexical: str


@dataclass(frozen=True, slots=True)
class VariableRef:
    """A variable to be resolved to a number."""

    node: Node


@dataclass(frozen=True, slots=True)
class NestedApplication:
    """A nested operator application, built recursively."""

    node: Node


ArgumentRef: TypeAlias = "Literal | VariableRef | NestedApplication"


def classify_argument(store: GraphStore, term: Term) -> ArgumentRef:
    """Decide how an argument term takes part in the expression.

    An `om:Application` node is a nested application even if it carries other
    types too; an `om:Variable` node without that type is a variable.

    Raises:
        UnknownArgumentType: For non-numeric literals and nodes that are
            neither applications nor variables.

    """
    match term:
        case LiteralTerm():
            value = term.as_number()
            if value is None:
                raise UnknownArgumentType(term)
            return Literal(value=value, lexical=term.lexical.strip())
        case IRI() | BlankNode():
            types = store.types_of(term)
            if OM.Application in types:
                return NestedApplication(term)
            if OM.Variable in types:
                return VariableRef(term)
            raise UnknownArgumentType(term, types)
