"""
Graph event system.

This module provides an event system for graph mutations, allowing components
to subscribe to and be notified of changes in a graph's collections. Every graph
owns one GraphEventManager; listeners are called synchronously, in registration
order, after the mutation they describe has been applied.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, List, Protocol

logger = logging.getLogger(__name__)


class GraphEvent(Enum):
    """Events that can occur in a graph."""

    NODE_ADDED = auto()
    NODE_REMOVED = auto()
    NODE_RENAMED = auto()
    EDGE_ADDED = auto()
    EDGE_REMOVED = auto()
    SUBGRAPH_ADDED = auto()
    SUBGRAPH_REMOVED = auto()
    SUBGRAPH_RENAMED = auto()


class GraphEventListener(Protocol):
    """Protocol for objects that listen to graph state changes."""

    def on_state_change(self, event: GraphEvent, details: Dict[str, Any]) -> None:
        """
        Called when the graph state changes.

        Args:
            event (GraphEvent): Type of event that occurred
            details (Dict[str, Any]): The affected objects, keyed by kind
                ("node", "edge", "subgraph", plus "old_name" for renames)
        """
        ...


@dataclass
class GraphEventManager:
    """
    Manages graph event subscriptions and notifications.

    Attributes:
        enabled (bool): When False, notify() is a no-op
        _listeners (List[GraphEventListener]): Registered event listeners
    """

    enabled: bool = True
    _listeners: List[GraphEventListener] = field(default_factory=list)

    def add_listener(self, listener: GraphEventListener) -> None:
        """
        Add a listener for graph events.

        Args:
            listener (GraphEventListener): The listener to add
        """
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: GraphEventListener) -> None:
        """
        Remove a graph event listener.

        Args:
            listener (GraphEventListener): The listener to remove
        """
        if listener in self._listeners:
            self._listeners.remove(listener)

    @property
    def listeners(self) -> List[GraphEventListener]:
        return list(self._listeners)

    def notify(self, event: GraphEvent, details: Dict[str, Any]) -> None:
        """
        Notify all listeners of a graph event.

        A failing listener is logged and does not prevent the remaining
        listeners from being notified. The mutation itself is never undone.

        Args:
            event (GraphEvent): The type of event that occurred
            details (Dict[str, Any]): Additional information about the event
        """
        if not self.enabled or not self._listeners:
            return

        for listener in list(self._listeners):
            try:
                listener.on_state_change(event, details)
            except Exception:
                logger.exception("Error notifying listener %r of %s", listener, event.name)

    def clear_listeners(self) -> None:
        """Remove all event listeners."""
        self._listeners.clear()
