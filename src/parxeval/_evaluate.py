"""Top-level formula evaluation."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ._builder import build_expression
from ._context import ResolutionContext
from ._expression import evaluate, substitute
from ._locator import locate_formula
from ._terms import as_node

if TYPE_CHECKING:
    from ._store import GraphStore
    from ._terms import Node

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FormulaResult:
    """Outcome of evaluating one formula.

    Attributes:
        formula: The evaluated formula node.
        expression: The expression with every variable replaced by its value.
        result: The computed value.
        symbolic: The expression with variable names.
        bindings: Values of the variables in `symbolic`.

    """

    formula: Node
    expression: str
    result: float
    symbolic: str
    bindings: dict[str, float] = field(default_factory=dict)


def evaluate_formula(store: GraphStore, formula: Node | str) -> FormulaResult:
    """Build and evaluate a formula node.

    Every call starts from a fresh resolution context: no value from an
    earlier call is reused, and every variable is read from the store again.

    Args:
        store: The graph store holding the formula.
        formula: The formula node (an IRI string, `_:label`, or node term).

    Returns:
        The evaluated expression and its result.

    Raises:
        FormulaError: Any error from building, resolving or evaluating.

    Example:
        >>> from parxeval import ARITH1, InMemoryGraphStore
        >>> store = InMemoryGraphStore()
        >>> store.add_application("http://ex.org#F", ARITH1.plus, [3, 4])
        >>> evaluate_formula(store, "http://ex.org#F").result
        7.0

    """
    node = as_node(formula)
    context = ResolutionContext(store=store)

    bound = build_expression(node, context)
    result = evaluate(bound.expression, bound.bindings)
    evaluated = substitute(bound.expression, bound.bindings)

    logger.debug("%s: %s = %s = %r", node, bound.expression, evaluated, result)
    return FormulaResult(
        formula=node,
        expression=evaluated,
        result=result,
        symbolic=bound.expression,
        bindings=dict(bound.bindings),
    )


def evaluate_by_process_output(
    store: GraphStore,
    process: Node | str,
    data_element: Node | str,
) -> FormulaResult | None:
    """Locate the formula for a process output and evaluate it.

    Returns:
        The evaluation result, or None if no interdependency formula of the
        process defines the data element.

    """
    formula = locate_formula(store, as_node(process), as_node(data_element))
    if formula is None:
        return None
    return evaluate_formula(store, formula)
