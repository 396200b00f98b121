"""Formula graphs shared by the test modules."""

from parxeval import ARITH1, InMemoryGraphStore
from parxeval._namespaces import Namespace

EX = Namespace("http://example.org/plant#")


def add_measured(store: InMemoryGraphStore, name: str, value: float | None) -> None:
    """Add variable `EX.<name>` with data element `EX.<name>_DE` recording `value`."""
    store.add_variable(EX(name))
    store.add_data_element(EX(f"{name}_DE"), EX(name), value)


def add_injection_graph(store: InMemoryGraphStore) -> InMemoryGraphStore:
    """Fill time of an injection process.

    Output = mass / (density * volume), where volume has no recorded value and
    is defined by volume = length * (width * height).
    """
    add_measured(store, "Output", None)
    add_measured(store, "mass", 10)
    add_measured(store, "density", 2)
    add_measured(store, "length", 2)
    add_measured(store, "width", 3)
    add_measured(store, "height", 1)
    store.add_variable(EX.volume)

    store.add_equation(EX.FillFormula, EX.Output, "_:quotient")
    store.add_application("_:quotient", ARITH1.divide, [EX.mass, "_:product"])
    store.add_application("_:product", ARITH1.times, [EX.density, EX.volume])

    store.add_equation(EX.VolumeFormula, EX.volume, "_:lwh")
    store.add_application("_:lwh", ARITH1.times, [EX.length, "_:wh"])
    store.add_application("_:wh", ARITH1.times, [EX.width, EX.height])

    store.add_interdependency(EX.Injection, EX.VolumeFormula)
    store.add_interdependency(EX.Injection, EX.FillFormula)
    return store
