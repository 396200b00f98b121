"""Tests for the in-memory graph store."""

import pytest

from parxeval import IRI, OM, XSD, BlankNode, GraphStore, InMemoryGraphStore, LiteralTerm, MalformedFormula

from .graphs import EX, add_measured


def test_satisfies_protocol(store: InMemoryGraphStore) -> None:
    assert isinstance(store, GraphStore)


class TestApplications:
    def test_arguments_are_converted(self, store: InMemoryGraphStore) -> None:
        store.add_application(EX.F, EX.op, [EX.A, "_:b", 2, LiteralTerm("3", XSD.integer)])

        assert store.operator_of(IRI(EX.F)) == EX.op
        assert store.arguments_of(IRI(EX.F)) == [
            IRI(EX.A),
            BlankNode("b"),
            LiteralTerm("2", XSD.double),
            LiteralTerm("3", XSD.integer),
        ]
        assert store.types_of(IRI(EX.F)) == frozenset({OM.Application})

    def test_unknown_node(self, store: InMemoryGraphStore) -> None:
        assert store.arguments_of(IRI(EX.Nothing)) == []
        assert store.types_of(IRI(EX.Nothing)) == frozenset()
        with pytest.raises(MalformedFormula, match="no operator"):
            store.operator_of(IRI(EX.Nothing))


class TestValues:
    def test_recorded_value(self, store: InMemoryGraphStore) -> None:
        add_measured(store, "mass", 10)

        assert store.recorded_value_of(IRI(EX.mass)) == 10.0

    def test_element_without_value_is_skipped(self, store: InMemoryGraphStore) -> None:
        add_measured(store, "mass", None)
        store.add_data_element(EX.mass_DE2, EX.mass, "12.5")

        assert store.recorded_value_of(IRI(EX.mass)) == 12.5

    def test_no_value(self, store: InMemoryGraphStore) -> None:
        store.add_variable(EX.mass)

        assert store.recorded_value_of(IRI(EX.mass)) is None


class TestFormulaLookup:
    def test_defining_formulas(self, injection_store: InMemoryGraphStore) -> None:
        assert injection_store.defining_formulas_of(IRI(EX.volume)) == [IRI(EX.VolumeFormula)]
        assert injection_store.defining_formulas_of(IRI(EX.mass)) == []

    def test_interdependencies(self, injection_store: InMemoryGraphStore) -> None:
        assert injection_store.interdependencies_of(IRI(EX.Injection), IRI(EX.Output_DE)) == [IRI(EX.FillFormula)]

    def test_literal_left_hand_side_is_skipped(self, store: InMemoryGraphStore) -> None:
        store.add_equation(EX.F, 1, 2)
        store.add_interdependency(EX.P, EX.F)

        assert store.interdependencies_of(IRI(EX.P), IRI(EX.Output_DE)) == []
