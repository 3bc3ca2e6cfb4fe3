from __future__ import annotations


class GraphError(Exception):
    """
    Base class for every error raised by graphkit.
    """


class NotFoundError(GraphError, KeyError):
    """
    A referenced node or edge does not exist.
    """

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0]) if self.args else ""


class InvalidArgumentError(GraphError, ValueError):
    """
    Malformed input shape, incompatible graph variants,
    or an operation requested on a variant that does not support it.
    """


class CycleDetectedError(GraphError):
    """
    Topological ordering is impossible: the graph has a cycle,
    or it changed structurally while being walked.
    """
