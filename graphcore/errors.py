"""
Error hierarchy for graphcore.

Every error raised by the library derives from GraphCoreError, and also from
the builtin exception it is closest to so callers can catch either.
"""


class GraphCoreError(Exception):
    """Base class for all graphcore errors."""


class DuplicateItemError(GraphCoreError, ValueError):
    """An item was registered with a disjoint set more than once."""


class UnknownItemError(GraphCoreError, KeyError):
    """An operation referenced an item never registered with the disjoint set."""


class SameComponentError(GraphCoreError, ValueError):
    """Two items passed to union already share a component."""


class EmptyQueueError(GraphCoreError, IndexError):
    """peek_min or remove_min was called on an empty priority queue."""


class InvalidEdgeError(GraphCoreError, ValueError):
    """An edge references an unknown vertex or carries an invalid weight."""


class NoPathExistsError(GraphCoreError):
    """The requested end vertex is unreachable from the start vertex."""


class KeyNotFoundError(GraphCoreError, KeyError):
    """A lookup referenced a key the mapping does not contain."""


class ConfigError(GraphCoreError, ValueError):
    """A run configuration is missing fields or holds invalid values."""
