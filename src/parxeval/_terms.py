"""RDF terms exchanged with the graph store."""

import math
import re
from dataclasses import dataclass

from ._namespaces import NUMERIC_DATATYPES, XSD

# Characters that may not appear inside an IRIREF in SPARQL
_ILLEGAL_IRI_CHARS = re.compile(r'[\x00-\x20<>"{}|^`\\]')
_BLANK_NODE_LABEL = re.compile(r"^[A-Za-z0-9_][A-Za-z0-9_.\-]*$")
_LOCAL_NAME = re.compile(r".*[#/](.+)$")

# XSD lexical spaces; Python's float() also accepts "1_000", "infinity" and the like
_DOUBLE_LEXICAL = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_DECIMAL_LEXICAL = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")
_INTEGER_LEXICAL = re.compile(r"[+-]?[0-9]+")


def _lexical_pattern(datatype: str | None) -> re.Pattern[str]:
    if datatype is None or datatype in {XSD.double, XSD.float}:
        return _DOUBLE_LEXICAL
    if datatype == XSD.decimal:
        return _DECIMAL_LEXICAL
    return _INTEGER_LEXICAL


@dataclass(frozen=True, slots=True)
class IRI:
    value: str

    def __post_init__(self) -> None:
        if not self.value or _ILLEGAL_IRI_CHARS.search(self.value):
            msg = f"Invalid IRI: {self.value!r}"
            raise ValueError(msg)

    def __str__(self) -> str:
        return self.value

    def sparql(self) -> str:
        return f"<{self.value}>"


@dataclass(frozen=True, slots=True)
class BlankNode:
    id: str

    def __post_init__(self) -> None:
        if not _BLANK_NODE_LABEL.match(self.id):
            msg = f"Invalid blank node label: {self.id!r}"
            raise ValueError(msg)

    def __str__(self) -> str:
        return f"_:{self.id}"

    def sparql(self) -> str:
        # GraphDB resolves `<_:label>` to the blank node it reported
        return f"<_:{self.id}>"


@dataclass(frozen=True, slots=True)
class LiteralTerm:
    lexical: str
    datatype: str | None = None

    def __str__(self) -> str:
        if self.datatype is None:
            return f'"{self.lexical}"'
        return f'"{self.lexical}"^^<{self.datatype}>'

    def as_number(self) -> float | None:
        """Return the literal's finite numeric value, or None if it has none."""
        if self.datatype is not None and self.datatype not in NUMERIC_DATATYPES:
            return None
        lexical = self.lexical.strip()
        if not _lexical_pattern(self.datatype).fullmatch(lexical):
            return None
        value = float(lexical)
        if not math.isfinite(value):
            return None
        return value


Node = IRI | BlankNode
Term = IRI | BlankNode | LiteralTerm


def local_name(node: Node) -> str:
    """Return the fragment or last path segment of a node's identifier.

    Example:
        >>> local_name(IRI("http://example.org/plant#FillTime"))
        'FillTime'
        >>> local_name(IRI("http://example.org/plant/Volume"))
        'Volume'

    """
    if isinstance(node, BlankNode):
        return node.id
    match = _LOCAL_NAME.match(node.value)
    return match.group(1) if match else node.value


def double(value: float | str) -> LiteralTerm:
    """Create an `xsd:double` literal."""
    return LiteralTerm(lexical=str(value), datatype=XSD.double)


def as_node(value: str | Node) -> Node:
    """Coerce a plain string (`_:label` or an IRI) into a node term."""
    if isinstance(value, IRI | BlankNode):
        return value
    if value.startswith("_:"):
        return BlankNode(value[2:])
    return IRI(value)
