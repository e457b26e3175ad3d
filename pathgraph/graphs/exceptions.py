"""
Errors raised by graph construction and shortest-path runs.

Each error also derives from the builtin a caller would naturally catch
(ValueError for collisions, KeyError for missing nodes, TypeError for a
start argument that is not a node), so code written against plain
builtins keeps working.
"""


class GraphError(Exception):
    """Base class for all pathgraph graph errors."""


class NodeAlreadyExistsError(GraphError, ValueError):
    """A node with the same name is already part of the graph."""


class EdgeAlreadyExistsError(GraphError, ValueError):
    """An edge with the same ordered (from, to) pair is already stored."""


class NodeOwnedError(GraphError, ValueError):
    """The node already belongs to another live graph."""


class NodeNotFoundError(GraphError, KeyError):
    """An edge endpoint is not a node of the graph."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0]) if self.args else ""


class InvalidStartNodeError(GraphError, TypeError):
    """The start argument of a shortest-path run is not a Node."""


NoNodeError = InvalidStartNodeError
