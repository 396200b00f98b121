"""Resolution of variables to numbers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ._errors import MissingVariableValue
from ._expression import evaluate

if TYPE_CHECKING:
    from ._context import ResolutionContext
    from ._terms import Node

logger = logging.getLogger(__name__)


def resolve_variable(variable: Node, context: ResolutionContext) -> float:
    """Resolve a variable to its numeric value.

    A value recorded by a data element is used as is. Otherwise the variable
    must be the left-hand side of an equality formula somewhere in the graph;
    that formula is built and evaluated, resolving its own variables with the
    same context so cycles of any length are caught.

    Args:
        variable: The variable node.
        context: State of the current top-level evaluation.

    Returns:
        The variable's value.

    Raises:
        CycleDetected: If the variable is already being resolved further up
            the chain.
        MissingVariableValue: If there is neither a recorded value nor a
            defining formula.

    """
    with context.resolving(variable):
        if variable in context.resolved:
            return context.resolved[variable]

        value = context.store.recorded_value_of(variable)
        if value is not None:
            logger.debug("%s = %r (recorded)", variable, value)
        else:
            value = _solve_defining_formula(variable, context)
            logger.debug("%s = %r (from defining formula)", variable, value)

        context.resolved[variable] = value
        return value


def _solve_defining_formula(variable: Node, context: ResolutionContext) -> float:
    # Builder and resolver recurse into each other
    from ._builder import build_expression  # noqa: PLC0415

    formulas = context.store.defining_formulas_of(variable)
    if not formulas:
        raise MissingVariableValue(variable)
    if len(formulas) > 1:
        logger.warning(
            "Variable %s has %d defining formulas, using the first: %s",
            variable,
            len(formulas),
            ", ".join(str(f) for f in formulas),
        )

    bound = build_expression(formulas[0], context)
    return evaluate(bound.expression, bound.bindings)
