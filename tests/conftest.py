"""Shared fixtures: formula graphs built in an InMemoryGraphStore."""

import pytest

from parxeval import InMemoryGraphStore

from .graphs import add_injection_graph


@pytest.fixture
def store() -> InMemoryGraphStore:
    return InMemoryGraphStore()


@pytest.fixture
def injection_store() -> InMemoryGraphStore:
    return add_injection_graph(InMemoryGraphStore())
