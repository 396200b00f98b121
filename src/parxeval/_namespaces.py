"""Vocabulary IRIs used by the formula graph."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Namespace:
    """An IRI prefix; attribute or call access yields a full IRI.

    Example:
        >>> OM.Variable
        'http://openmath.org/vocab/math#Variable'

    """

    base: str

    def __call__(self, local: str) -> str:
        return f"{self.base}{local}"

    def __getattr__(self, local: str) -> str:
        if local.startswith("__"):
            raise AttributeError(local)
        return f"{self.base}{local}"

    def __str__(self) -> str:
        return self.base


RDF = Namespace("http://www.w3.org/1999/02/22-rdf-syntax-ns#")
XSD = Namespace("http://www.w3.org/2001/XMLSchema#")
OM = Namespace("http://openmath.org/vocab/math#")
PARX = Namespace("http://www.hsu-hh.de/aut/ParX#")
DINEN61360 = Namespace("http://www.w3id.org/hsu-aut/DINEN61360#")
VDI3682 = Namespace("http://www.w3id.org/hsu-aut/VDI3682#")

# OpenMath content dictionaries for the operators
ARITH1 = Namespace("http://www.openmath.org/cd/arith1#")
RELATION1 = Namespace("http://www.openmath.org/cd/relation1#")

NUMERIC_DATATYPES = frozenset(
    XSD(name)
    for name in (
        "double",
        "float",
        "decimal",
        "integer",
        "int",
        "long",
        "short",
        "byte",
        "nonNegativeInteger",
        "nonPositiveInteger",
        "positiveInteger",
        "negativeInteger",
        "unsignedInt",
        "unsignedLong",
        "unsignedShort",
        "unsignedByte",
    )
)
"""Datatypes whose literals are read as numbers."""

SPARQL_PREFIXES = "\n".join(
    f"PREFIX {prefix}: <{ns}>"
    for prefix, ns in (
        ("rdf", RDF),
        ("xsd", XSD),
        ("om", OM),
        ("parx", PARX),
        ("din", DINEN61360),
        ("vdi3682", VDI3682),
    )
)
