"""Pydantic models for the SPARQL 1.1 JSON results format."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from parxeval._terms import IRI, BlankNode, LiteralTerm, Term


class SparqlTerm(BaseModel):
    """One bound value in a result row."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    type: Literal["uri", "literal", "typed-literal", "bnode"]
    value: str
    datatype: str | None = None
    lang: str | None = Field(default=None, alias="xml:lang")

    def to_term(self) -> Term:
        match self.type:
            case "uri":
                return IRI(self.value)
            case "bnode":
                return BlankNode(self.value)
            case "literal" | "typed-literal":
                return LiteralTerm(lexical=self.value, datatype=self.datatype)


class SparqlHead(BaseModel):
    vars: list[str] = Field(default_factory=list)


class SparqlResults(BaseModel):
    bindings: list[dict[str, SparqlTerm]]


class SparqlResponse(BaseModel):
    """A SELECT query response (`application/sparql-results+json`)."""

    head: SparqlHead = Field(default_factory=SparqlHead)
    results: SparqlResults

    @property
    def rows(self) -> list[dict[str, SparqlTerm]]:
        return self.results.bindings
