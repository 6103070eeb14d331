"""
Custom exceptions for the graph library.

This module defines the hierarchy of custom exceptions used throughout the library
to report violations of the graph's consistency rules. Each exception type
corresponds to a specific category of errors that may occur while mutating or
querying a graph and its collections.
"""


class ValidationError(ValueError):
    """
    Raised when data validation fails.

    This exception is raised when input data fails to meet the required validation
    criteria, such as name checks or configuration value checks.

    Examples:
        * Empty or non-string node names
        * Unknown user data copy mode
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class ConfigurationError(Exception):
    """
    Raised when configuration is invalid.

    This exception is raised when a graph configuration cannot be built from
    its source, such as a mapping that violates the configuration schema or
    environment variables with malformed values.

    Examples:
        * Unknown configuration keys
        * Invalid configuration values
        * Malformed boolean environment variables
    """


class DuplicateResourceError(Exception):
    """
    Raised when attempting to create a duplicate resource.

    This exception is raised when attempting to insert an item that
    already exists in a collection, violating uniqueness constraints.
    """


class DuplicateNameError(DuplicateResourceError):
    """
    Raised when a node or sub graph name is already taken.

    Edges never raise this error: re-adding an edge with an existing identity
    returns the existing edge instead.

    Examples:
        * Adding a node whose name already exists
        * Renaming a node to the name of another node
        * Adding a sub graph whose name already exists
    """


class ResourceNotFoundError(LookupError):
    """
    Raised when a requested resource is not found.

    This exception is raised when attempting to access or operate on an
    item that does not exist in the relevant collection.
    """


class NodeNotFoundError(ResourceNotFoundError):
    """
    Raised when a requested node is not found.

    Examples:
        * Node lookup by non-existent name
        * Edge creation with an endpoint missing from the graph
        * Sub graph reference to a node the parent graph does not contain
    """


class EdgeNotFoundError(ResourceNotFoundError):
    """
    Raised when a requested edge is not found.

    Examples:
        * Edge lookup by endpoints that are not connected
        * Sub graph reference to an edge the parent graph does not contain
    """


class SubGraphNotFoundError(ResourceNotFoundError):
    """Raised when a requested sub graph is not found."""


class InvalidOperationError(Exception):
    """
    Raised when an operation is invalid in the current context.

    This exception is raised when attempting to perform an operation that
    is not valid given the current state or mode of the graph.

    Examples:
        * Transposing an undirected graph
        * Adding a node or edge that already belongs to another graph
    """


class UnsupportedOperationError(TypeError):
    """
    Raised when an operation is not supported at all.

    Graphs define structural equality but are mutable, so hashing them
    is refused rather than producing a hash that drifts with the graph.
    """
