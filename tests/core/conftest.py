"""Shared test fixtures."""

from typing import Any, Dict, List, Tuple

import pytest

from knotwork.core.events import GraphEvent
from knotwork.core.graph import Graph


class RecordingListener:
    """Listener that records every event it receives."""

    def __init__(self) -> None:
        self.events: List[Tuple[GraphEvent, Dict[str, Any]]] = []

    def on_state_change(self, event: GraphEvent, details: Dict[str, Any]) -> None:
        self.events.append((event, details))

    @property
    def kinds(self) -> List[GraphEvent]:
        return [event for event, _ in self.events]


@pytest.fixture
def directed_graph() -> Graph:
    """
    Fixture providing a directed graph with the following structure:
    a -> b -> c
    ^         |
    +---------+
    """
    return Graph.from_edges([("a", "b"), ("b", "c"), ("c", "a")], directed=True, name="cycle")


@pytest.fixture
def undirected_graph() -> Graph:
    """Fixture providing an undirected graph: a - b - c, plus isolated d."""
    graph = Graph.from_edges([("a", "b"), ("b", "c")], directed=False, name="path")
    graph.nodes.add("d")
    return graph


@pytest.fixture
def listener() -> RecordingListener:
    return RecordingListener()
