"""Per-call resolution state.

One `ResolutionContext` is created for each top-level evaluation and threaded
through every nested build and resolution. It is never stored or reused, so
nothing survives from one top-level call to the next.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ._errors import CycleDetected, MalformedFormula

if TYPE_CHECKING:
    from ._store import GraphStore
    from ._terms import Node

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ResolutionContext:
    """State shared by one top-level evaluation.

    Attributes:
        store: The graph store every query goes to.
        chain: Variables currently being resolved, outermost first.
        resolved: Values of variables already resolved during this call.
        building: Application nodes currently being built, outermost first.

    """

    store: GraphStore
    chain: list[Node] = field(default_factory=list)
    resolved: dict[Node, float] = field(default_factory=dict)
    building: list[Node] = field(default_factory=list)

    def in_progress(self, variable: Node) -> bool:
        return variable in self.chain

    @contextmanager
    def resolving(self, variable: Node) -> Iterator[None]:
        """Mark a variable as in progress for the duration of the block.

        Raises:
            CycleDetected: If the variable is already in progress.

        """
        if self.in_progress(variable):
            raise CycleDetected(variable, self.chain)
        self.chain.append(variable)
        logger.debug("%sresolving %s", "  " * (len(self.chain) - 1), variable)
        try:
            yield
        finally:
            self.chain.pop()

    @contextmanager
    def building_application(self, node: Node) -> Iterator[None]:
        """Mark an application node as being built for the duration of the block.

        Raises:
            MalformedFormula: If the node is already being built, i.e. it
                occurs in its own argument tree.

        """
        if node in self.building:
            raise MalformedFormula(node, "application contains itself")
        self.building.append(node)
        try:
            yield
        finally:
            self.building.pop()
