"""Tests for locating the formula of a process output."""

import pytest

from parxeval import ARITH1, IRI, InMemoryGraphStore, locate_formula

from .graphs import EX, add_measured


def locate(store: InMemoryGraphStore, process: str, data_element: str) -> IRI | None:
    return locate_formula(store, IRI(process), IRI(data_element))


class TestLocateFormula:
    def test_finds_formula_for_output(self, injection_store: InMemoryGraphStore) -> None:
        assert locate(injection_store, EX.Injection, EX.Output_DE) == IRI(EX.FillFormula)

    def test_other_output_of_same_process(self, injection_store: InMemoryGraphStore) -> None:
        injection_store.add_data_element(EX.volume_DE, EX.volume)

        assert locate(injection_store, EX.Injection, EX.volume_DE) == IRI(EX.VolumeFormula)

    def test_not_found_for_unknown_data_element(self, injection_store: InMemoryGraphStore) -> None:
        assert locate(injection_store, EX.Injection, EX.mass_DE) is None

    def test_not_found_for_other_process(self, injection_store: InMemoryGraphStore) -> None:
        assert locate(injection_store, EX.Cooling, EX.Output_DE) is None

    def test_left_hand_side_must_be_a_variable(self, store: InMemoryGraphStore) -> None:
        add_measured(store, "Output", None)
        store.add_application(EX.F, ARITH1.plus, ["_:sum", 1])
        store.add_application("_:sum", ARITH1.plus, [EX.Output, 1])
        store.add_interdependency(EX.P, EX.F)

        assert locate(store, EX.P, EX.Output_DE) is None

    def test_only_left_hand_side_counts(self, store: InMemoryGraphStore) -> None:
        add_measured(store, "Output", None)
        add_measured(store, "Other", None)
        store.add_equation(EX.F, EX.Other, EX.Output)
        store.add_interdependency(EX.P, EX.F)

        assert locate(store, EX.P, EX.Output_DE) is None

    def test_first_match_wins_with_warning(self, store: InMemoryGraphStore, caplog: pytest.LogCaptureFixture) -> None:
        add_measured(store, "Output", None)
        store.add_equation(EX.F1, EX.Output, 1)
        store.add_equation(EX.F2, EX.Output, 2)
        store.add_interdependency(EX.P, EX.F1)
        store.add_interdependency(EX.P, EX.F2)

        assert locate(store, EX.P, EX.Output_DE) == IRI(EX.F1)
        assert "2 interdependencies" in caplog.text
