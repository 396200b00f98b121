"""Lookup of the formula governing a process output."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ._store import GraphStore
    from ._terms import Node

logger = logging.getLogger(__name__)


def locate_formula(store: GraphStore, process: Node, data_element: Node) -> Node | None:
    """Find the interdependency formula of `process` that defines `data_element`.

    The formula's left-hand argument must be a variable the data element is
    data for. When several formulas qualify, the first one the store returns
    is used; stores give no ordering guarantee, so a warning lists them all.

    Returns:
        The formula node, or None if no interdependency matches.

    """
    candidates = store.interdependencies_of(process, data_element)
    if not candidates:
        logger.debug("No interdependency of %s defines %s", process, data_element)
        return None
    if len(candidates) > 1:
        logger.warning(
            "%d interdependencies of %s define %s, using the first: %s",
            len(candidates),
            process,
            data_element,
            ", ".join(str(c) for c in candidates),
        )
    logger.debug("Located formula %s", candidates[0])
    return candidates[0]
