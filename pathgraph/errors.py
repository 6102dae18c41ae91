"""Exception types raised by pathgraph.

Every error derives from ``GraphError`` and from the builtin exception that
best describes it, so callers can catch either.
"""


class GraphError(Exception):
    """Base class for all pathgraph errors."""


class NullKeyError(GraphError, TypeError):
    """A map or graph operation received ``None`` as a key."""


class DuplicateKeyError(GraphError, ValueError):
    """A key or node identifier is already present."""


class NotFoundError(GraphError, LookupError):
    """A key, node or edge does not exist."""


class EndpointNotFoundError(NotFoundError):
    """The start or end of a shortest-path query is not a node of the graph."""


class NoPathError(NotFoundError):
    """Both endpoints exist but no directed path connects them."""


class GraphLoadError(GraphError):
    """A graph description file could not be read or parsed."""
