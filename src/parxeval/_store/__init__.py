"""Graph store implementations.

- GraphStore: the protocol the formula pipeline consumes
- SparqlGraphStore: queries a SPARQL endpoint over HTTP
- InMemoryGraphStore: a graph built from Python, for tests and offline use
"""

from ._memory import InMemoryGraphStore
from ._protocol import GraphStore
from ._sparql import SparqlGraphStore, graphdb_endpoint

__all__ = ["GraphStore", "InMemoryGraphStore", "SparqlGraphStore", "graphdb_endpoint"]
