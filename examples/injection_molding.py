"""Injection Molding Example for parxeval.

This example builds the formula graph of an injection molding process in an
InMemoryGraphStore and evaluates it the same way `parxeval solve` does
against GraphDB:
- The fill ratio is an interdependency formula of the Injection process
- The cavity volume has no recorded value; it is solved from its own
  defining formula (volume = length * width * height)

Run it with:
    python examples/injection_molding.py
"""

from parxeval import ARITH1, InMemoryGraphStore, evaluate_by_process_output
from parxeval._namespaces import Namespace

PLANT = Namespace("http://example.org/injection#")

# -----------------------------------------------------------------------------
# Measured variables
# -----------------------------------------------------------------------------

store = InMemoryGraphStore()

for name, value in {
    "mass": 10.0,
    "density": 2.0,
    "length": 2.0,
    "width": 3.0,
    "height": 1.0,
}.items():
    store.add_variable(PLANT(name))
    store.add_data_element(PLANT(f"{name}_DE"), PLANT(name), value)

store.add_variable(PLANT.volume)
store.add_variable(PLANT.FillRatio)
store.add_data_element(PLANT.FillRatio_DE, PLANT.FillRatio)

# -----------------------------------------------------------------------------
# Formulas
# -----------------------------------------------------------------------------

# FillRatio = mass / (density * volume)
store.add_equation(PLANT.FillFormula, PLANT.FillRatio, "_:quotient")
store.add_application("_:quotient", ARITH1.divide, [PLANT.mass, "_:product"])
store.add_application("_:product", ARITH1.times, [PLANT.density, PLANT.volume])

# volume = length * width * height
store.add_equation(PLANT.VolumeFormula, PLANT.volume, "_:lwh")
store.add_application("_:lwh", ARITH1.times, [PLANT.length, PLANT.width, PLANT.height])

store.add_interdependency(PLANT.Injection, PLANT.FillFormula)


if __name__ == "__main__":
    result = evaluate_by_process_output(store, PLANT.Injection, PLANT.FillRatio_DE)
    if result is None:
        print("No interdependency formula found")
    else:
        print(f"Formula:              {result.formula}")
        print(f"Expression:           {result.symbolic}")
        print(f"Evaluated Expression: {result.expression}")
        print(f"Result:               {result.result}")
