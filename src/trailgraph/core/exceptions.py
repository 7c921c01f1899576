"""
Custom exceptions for the route graph system.

This module defines the exceptions raised when the graph or search components
are misused. Note that failing to find a path is NOT an error: searches report
it through ``PathResult.found`` (or a ``None`` result) instead of raising.
"""


class ValidationError(Exception):
    """
    Raised when input data fails validation.

    Examples:
        * Coordinate given as a 3-element sequence
        * Non-numeric latitude or longitude
        * Coordinate payload not matching the JSON schema
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class ConfigurationError(Exception):
    """
    Raised when graph or search configuration is invalid.

    Examples:
        * Non-positive connectivity threshold
        * Negative memory limit
        * Heuristic that is neither a name nor a strategy
    """


class GraphOperationError(Exception):
    """
    Raised when a graph operation cannot be carried out.

    Examples:
        * Unsupported search algorithm
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class ResourceNotFoundError(Exception):
    """Raised when a requested resource is not found."""


class NodeNotFoundError(ResourceNotFoundError):
    """
    Raised when a node handed to a finder does not belong to its graph.

    Snapping never raises this; it only guards direct node-level calls.
    """
