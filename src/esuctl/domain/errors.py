"""Exception taxonomy for the graph domain.

Edge mutation never raises: out-of-range and self-loop edges are silent
no-ops. The exceptions below cover caller-input validation only.
"""

from __future__ import annotations


class GraphError(Exception):
    """Base class for every domain-level graph failure."""


class GraphCapacityError(GraphError, ValueError):
    """Vertex count outside ``0..MAX_VERTICES``."""


class VertexOutOfRange(GraphError, IndexError):
    """Vertex index outside ``[0, size)`` on a read query."""


class InvalidSubgraphSize(GraphError, ValueError):
    """Enumeration requested with ``k < 1`` or ``k > size``."""


class GraphFormatError(GraphError, ValueError):
    """Graph description text that cannot start a graph block."""
