"""GraphStore backed by a SPARQL endpoint over HTTP."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import requests
from pydantic import ValidationError

from parxeval._errors import MalformedFormula, QueryFailure
from parxeval._terms import IRI, BlankNode, LiteralTerm

from . import _queries
from ._results import SparqlResponse

if TYPE_CHECKING:
    from parxeval._terms import Node, Term

    from ._results import SparqlTerm

logger = logging.getLogger(__name__)

_HEADERS = {
    "Content-Type": "application/x-www-form-urlencoded",
    "Accept": "application/sparql-results+json",
}


def graphdb_endpoint(server: str, repository: str) -> str:
    """Build the query endpoint of a GraphDB repository.

    Example:
        >>> graphdb_endpoint("http://localhost:7200/", "TEST0525")
        'http://localhost:7200/repositories/TEST0525'

    """
    return f"{server.rstrip('/')}/repositories/{repository}"


class SparqlGraphStore:
    """Answer GraphStore requests with SPARQL SELECT queries.

    Attributes:
        endpoint: URL the queries are POSTed to.
        timeout: Seconds to wait for a response; None waits indefinitely.

    """

    def __init__(
        self,
        endpoint: str,
        *,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.endpoint = endpoint
        self.timeout = timeout
        self._session = session if session is not None else requests.Session()

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> SparqlGraphStore:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def select(self, query: str) -> list[dict[str, SparqlTerm]]:
        """Run a SELECT query and return its result rows.

        Raises:
            QueryFailure: On transport errors, non-2xx statuses or a response
                that is not SPARQL JSON results.

        """
        logger.debug("SPARQL query to %s:\n%s", self.endpoint, query)
        try:
            response = self._session.post(
                self.endpoint,
                data={"query": query},
                headers=_HEADERS,
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            status = e.response.status_code if e.response is not None else None
            msg = f"SPARQL request to {self.endpoint} failed ({status}): {e}"
            raise QueryFailure(msg) from e

        try:
            parsed = SparqlResponse.model_validate_json(response.content)
        except ValidationError as e:
            msg = f"Unexpected response from {self.endpoint}: {e}"
            raise QueryFailure(msg) from e

        logger.debug("  %d row(s)", len(parsed.rows))
        return parsed.rows

    def _column(self, query: str, var: str) -> list[Term]:
        terms: list[Term] = []
        for row in self.select(query):
            if var not in row:
                msg = f"Result row is missing ?{var}: {row}"
                raise QueryFailure(msg)
            terms.append(row[var].to_term())
        return terms

    def _nodes(self, query: str, var: str) -> list[Node]:
        nodes: list[Node] = []
        for term in self._column(query, var):
            if not isinstance(term, IRI | BlankNode):
                msg = f"Expected a node for ?{var}, got literal {term}"
                raise QueryFailure(msg)
            nodes.append(term)
        return nodes

    def operator_of(self, node: Node) -> str:
        operators = self._column(_queries.operator_query(node), "op")
        if not operators:
            raise MalformedFormula(node, "no operator")
        operator = operators[0]
        if not isinstance(operator, IRI):
            raise MalformedFormula(node, f"operator {operator} is not an IRI")
        return operator.value

    def arguments_of(self, node: Node) -> list[Term]:
        positioned: list[tuple[int, Term]] = []
        for row in self.select(_queries.arguments_query(node)):
            if "arg" not in row or "pos" not in row:
                msg = f"Result row is missing ?arg or ?pos: {row}"
                raise QueryFailure(msg)
            try:
                position = int(row["pos"].value)
            except ValueError:
                msg = f"List position is not an integer: {row['pos'].value!r}"
                raise QueryFailure(msg) from None
            positioned.append((position, row["arg"].to_term()))
        positioned.sort(key=lambda item: item[0])
        return [term for _, term in positioned]

    def types_of(self, node: Node) -> frozenset[str]:
        return frozenset(str(term) for term in self._nodes(_queries.types_query(node), "type"))

    def recorded_value_of(self, variable: Node) -> float | None:
        values = self._column(_queries.recorded_value_query(variable), "val")
        if not values:
            return None
        value = values[0]
        number = value.as_number() if isinstance(value, LiteralTerm) else None
        if number is None:
            msg = f"Recorded value of {variable} is not a number: {value}"
            raise QueryFailure(msg)
        return number

    def defining_formulas_of(self, variable: Node) -> list[Node]:
        return self._nodes(_queries.defining_formulas_query(variable), "formula")

    def interdependencies_of(self, process: Node, data_element: Node) -> list[Node]:
        return self._nodes(_queries.interdependencies_query(process, data_element), "formula")
