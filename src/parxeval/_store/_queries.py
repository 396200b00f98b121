"""SPARQL query text for each GraphStore request.

Node terms are rendered with `Node.sparql()`, which only emits IRIs that
passed validation, so no user text reaches the query unescaped.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from parxeval._namespaces import SPARQL_PREFIXES

if TYPE_CHECKING:
    from parxeval._terms import Node


def _select(body: str) -> str:
    return f"{SPARQL_PREFIXES}\n{body.strip()}\n"


def operator_query(node: Node) -> str:
    return _select(f"SELECT ?op WHERE {{ {node.sparql()} om:operator ?op }} LIMIT 1")


def arguments_query(node: Node) -> str:
    """Ordered list elements; `?pos` counts the list cells before each element."""
    return _select(
        f"""
SELECT ?arg (COUNT(?mid) - 1 AS ?pos) WHERE {{
  {node.sparql()} om:arguments ?list .
  ?list rdf:rest* ?mid .
  ?mid rdf:rest* ?cell .
  ?cell rdf:first ?arg .
}}
GROUP BY ?cell ?arg
ORDER BY ?pos
""",
    )


def types_query(node: Node) -> str:
    return _select(f"SELECT ?type WHERE {{ {node.sparql()} a ?type }}")


def recorded_value_query(variable: Node) -> str:
    return _select(
        f"""
SELECT ?val WHERE {{
  ?de parx:isDataFor {variable.sparql()} ;
      din:hasInstanceDescription ?desc .
  ?desc din:value ?val .
}}
LIMIT 1
""",
    )


def defining_formulas_query(variable: Node) -> str:
    return _select(
        f"""
SELECT DISTINCT ?formula WHERE {{
  ?formula om:operator ?op ;
           om:arguments ?args .
  ?args rdf:first {variable.sparql()} .
  FILTER(STRENDS(STR(?op), "#eq"))
}}
""",
    )


def interdependencies_query(process: Node, data_element: Node) -> str:
    return _select(
        f"""
SELECT DISTINCT ?formula WHERE {{
  {process.sparql()} parx:hasInterdependency ?formula .
  ?formula om:arguments ?args .
  ?args rdf:first ?lhs .
  ?lhs a om:Variable .
  {data_element.sparql()} parx:isDataFor ?lhs .
}}
""",
    )
