"""Tests for RDF terms and local names."""

import pytest

from parxeval import IRI, XSD, BlankNode, LiteralTerm, local_name
from parxeval._terms import as_node, double


class TestLocalName:
    @pytest.mark.parametrize(
        ("iri", "expected"),
        [
            ("http://example.org/plant#FillTime", "FillTime"),
            ("http://example.org/plant/Volume", "Volume"),
            ("http://example.org/a#b/c", "c"),
            ("http://example.org/a/b#c", "c"),
            ("urn:x", "urn:x"),
        ],
    )
    def test_iri(self, iri: str, expected: str) -> None:
        assert local_name(IRI(iri)) == expected

    def test_blank_node(self) -> None:
        assert local_name(BlankNode("b0")) == "b0"


class TestIRI:
    @pytest.mark.parametrize("value", ["", "http://ex.org/a b", "http://ex.org/<x>", 'http://ex.org/"'])
    def test_rejects_illegal_characters(self, value: str) -> None:
        with pytest.raises(ValueError, match="Invalid IRI"):
            IRI(value)

    def test_sparql(self) -> None:
        assert IRI("http://ex.org#a").sparql() == "<http://ex.org#a>"


class TestBlankNode:
    def test_sparql(self) -> None:
        assert BlankNode("node1").sparql() == "<_:node1>"
        assert str(BlankNode("node1")) == "_:node1"

    def test_rejects_bad_label(self) -> None:
        with pytest.raises(ValueError, match="Invalid blank node"):
            BlankNode("a b")


class TestLiteralTerm:
    def test_double(self) -> None:
        assert double(2.5).as_number() == 2.5

    def test_plain_numeric_literal(self) -> None:
        assert LiteralTerm("42").as_number() == 42.0

    def test_integer_datatype(self) -> None:
        assert LiteralTerm("7", XSD.integer).as_number() == 7.0

    def test_non_numeric_datatype(self) -> None:
        assert LiteralTerm("7", XSD.string).as_number() is None

    @pytest.mark.parametrize("lexical", ["abc", "INF", "NaN", "", "1_000", "infinity", "0x10", "1e999"])
    def test_not_a_finite_number(self, lexical: str) -> None:
        assert LiteralTerm(lexical, XSD.double).as_number() is None


class TestAsNode:
    def test_iri_string(self) -> None:
        assert as_node("http://ex.org#a") == IRI("http://ex.org#a")

    def test_blank_node_string(self) -> None:
        assert as_node("_:b1") == BlankNode("b1")

    def test_passthrough(self) -> None:
        node = BlankNode("b1")
        assert as_node(node) is node


class TestNumericLexicalForms:
    @pytest.mark.parametrize(
        ("lexical", "expected"),
        [("1.5e3", 1500.0), (" -2.5 ", -2.5), (".5", 0.5), ("+7", 7.0), ("-0.0", -0.0)],
    )
    def test_double(self, lexical: str, expected: float) -> None:
        assert LiteralTerm(lexical, XSD.double).as_number() == expected

    def test_decimal_has_no_exponent(self) -> None:
        assert LiteralTerm("12.50", XSD.decimal).as_number() == 12.5
        assert LiteralTerm("1e3", XSD.decimal).as_number() is None

    @pytest.mark.parametrize("lexical", ["1.0", "1e3", "1_000"])
    def test_integer_rejects_non_integer_forms(self, lexical: str) -> None:
        assert LiteralTerm(lexical, XSD.integer).as_number() is None

    def test_unicode_digits_are_rejected(self) -> None:
        assert LiteralTerm("٣", XSD.double).as_number() is None
