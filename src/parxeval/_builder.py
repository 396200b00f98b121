"""Reconstruction of arithmetic expressions from formula nodes."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ._arguments import Literal, NestedApplication, VariableRef, classify_argument
from ._errors import InvalidVariableName, MalformedFormula
from ._expression import format_number
from ._operators import Operator, is_equality
from ._resolver import resolve_variable
from ._terms import local_name

if TYPE_CHECKING:
    from ._context import ResolutionContext
    from ._terms import Node, Term

logger = logging.getLogger(__name__)

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


@dataclass(frozen=True, slots=True)
class BoundExpression:
    """Expression text with variable names, plus the values bound to them."""

    expression: str
    bindings: dict[str, float] = field(default_factory=dict)


def variable_name(variable: Node) -> str:
    """Return the identifier a variable is written as in expressions.

    Raises:
        InvalidVariableName: If the local name is not identifier-shaped.

    """
    name = local_name(variable)
    if not _IDENTIFIER.match(name):
        raise InvalidVariableName(variable, name)
    return name


def _literal_token(value: float) -> str:
    text = format_number(value)
    # "(-2) ^ 2" must not read as "-(2 ^ 2)"
    return f"({text})" if text.startswith("-") else text


def _build_single(term: Term, context: ResolutionContext) -> BoundExpression:
    """Build one argument on its own (the right-hand side of an equality)."""
    match classify_argument(context.store, term):
        case Literal(value=value):
            return BoundExpression(_literal_token(value))
        case VariableRef(node=node):
            name = variable_name(node)
            return BoundExpression(name, {name: resolve_variable(node, context)})
        case NestedApplication(node=node):
            return build_expression(node, context)


def build_expression(node: Node, context: ResolutionContext) -> BoundExpression:
    """Reconstruct the expression of a formula node.

    Arguments are visited in list order. Variables are resolved (recursively
    through their defining formulas if needed) and bound under their local
    name; nested applications are built and parenthesized. An equality node
    contributes nothing of its own: it yields the build of its right-hand
    argument.

    A nested application whose text was already emitted earlier in the same
    argument list is not emitted again, so `plus(x, plus(a, b), plus(a, b))`
    builds to `x + (a + b)`.

    Args:
        node: The application node to build.
        context: State of the current top-level evaluation.

    Returns:
        The expression text and the bindings of every variable it mentions.

    Raises:
        UnsupportedOperator: If the operator is not in the supported table.
        UnknownArgumentType: If an argument cannot be classified.
        MalformedFormula: If the argument list is empty, an equality has no
            right-hand side, or the node occurs in its own argument tree.

    """
    with context.building_application(node):
        return _build_node(node, context)


def _build_node(node: Node, context: ResolutionContext) -> BoundExpression:
    store = context.store
    operator_iri = store.operator_of(node)

    if is_equality(operator_iri):
        arguments = store.arguments_of(node)
        if len(arguments) < 2:  # noqa: PLR2004
            raise MalformedFormula(node, f"equality has {len(arguments)} argument(s)")
        logger.debug("%s is an equality, building its right-hand side %s", node, arguments[1])
        return _build_single(arguments[1], context)

    operator = Operator.from_iri(operator_iri)
    arguments = store.arguments_of(node)
    if not arguments:
        raise MalformedFormula(node, "empty argument list")

    tokens: list[str] = []
    bindings: dict[str, float] = {}
    emitted: set[str] = set()

    for term in arguments:
        match classify_argument(store, term):
            case Literal(value=value):
                tokens.append(_literal_token(value))
            case VariableRef(node=variable):
                name = variable_name(variable)
                bindings[name] = resolve_variable(variable, context)
                tokens.append(name)
            case NestedApplication(node=nested_node):
                nested = build_expression(nested_node, context)
                bindings.update(nested.bindings)
                if nested.expression in emitted:
                    logger.debug("Dropping repeated sub-expression (%s) in %s", nested.expression, node)
                    continue
                tokens.append(f"({nested.expression})")
                emitted.add(nested.expression)

    expression = operator.render(tokens)
    logger.debug("Built %s: %s", node, expression)
    return BoundExpression(expression, bindings)
