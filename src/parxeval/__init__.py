"""Evaluate process formulas stored in a knowledge graph."""

__all__ = [
    "ARITH1",
    "DINEN61360",
    "IRI",
    "OM",
    "PARX",
    "RDF",
    "RELATION1",
    "VDI3682",
    "XSD",
    "BlankNode",
    "BoundExpression",
    "CycleDetected",
    "ExpressionError",
    "FormulaError",
    "FormulaNotFound",
    "FormulaResult",
    "GraphStore",
    "InMemoryGraphStore",
    "InvalidVariableName",
    "LiteralTerm",
    "MalformedFormula",
    "MissingVariable",
    "MissingVariableValue",
    "Operator",
    "QueryFailure",
    "ResolutionContext",
    "SparqlGraphStore",
    "UnknownArgumentType",
    "UnsupportedOperator",
    "build_expression",
    "evaluate",
    "evaluate_by_process_output",
    "evaluate_formula",
    "graphdb_endpoint",
    "local_name",
    "locate_formula",
    "resolve_variable",
    "substitute",
]

from ._builder import BoundExpression, build_expression
from ._context import ResolutionContext
from ._errors import (
    CycleDetected,
    ExpressionError,
    FormulaError,
    FormulaNotFound,
    InvalidVariableName,
    MalformedFormula,
    MissingVariable,
    MissingVariableValue,
    QueryFailure,
    UnknownArgumentType,
    UnsupportedOperator,
)
from ._evaluate import FormulaResult, evaluate_by_process_output, evaluate_formula
from ._expression import evaluate, substitute
from ._locator import locate_formula
from ._namespaces import ARITH1, DINEN61360, OM, PARX, RDF, RELATION1, VDI3682, XSD
from ._operators import Operator
from ._resolver import resolve_variable
from ._store import GraphStore, InMemoryGraphStore, SparqlGraphStore, graphdb_endpoint
from ._terms import IRI, BlankNode, LiteralTerm, local_name
