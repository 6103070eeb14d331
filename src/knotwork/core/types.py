"""
Core type definitions and protocols.

This module provides type aliases and protocols used across the collections and
graph operations to keep node references and edge identities consistent.
"""

from typing import TYPE_CHECKING, Any, Dict, Hashable, Protocol, Tuple, Union

if TYPE_CHECKING:
    from .models.node import Node

# Nodes can be referred to either by name or by the node object itself.
NodeRef = Union[str, "Node"]

# Key under which an edge is stored; its shape depends on the identity strategy.
EdgeKey = Hashable

# Endpoint names of an edge, in (source, target) order.
EndpointNames = Tuple[str, str]

UserData = Dict[Any, Any]


class EdgeIdentity(Protocol):
    """Protocol defining how an edge collection identifies its edges."""

    is_directed: bool

    def key(self, source: "Node", target: "Node") -> EdgeKey:
        """Return the identity key of the edge between two nodes."""
        ...
