"""
Exception hierarchy for dotpath.

Every error raised by the library derives from GraphError, and also from
the closest built-in exception so callers can catch either. File access
problems are not wrapped: OSError and its subclasses propagate as-is.
"""

from __future__ import annotations


class GraphError(Exception):
    """Base class for all dotpath errors."""


class NodeNotFoundError(GraphError, LookupError):
    """A node referenced by an operation does not exist."""

    def __init__(self, label: str, role: str = "Node") -> None:
        self.label = label
        self.role = role
        super().__init__(f"{role} doesn't exist: {label}")


class EdgeNotFoundError(GraphError, LookupError):
    """An edge referenced by an operation does not exist."""

    def __init__(self, source: str, target: str) -> None:
        self.source = source
        self.target = target
        super().__init__(f"Edge doesn't exist: {source} -> {target}")


class NodeHasEdgesError(GraphError, ValueError):
    """Attempt to remove a node that still has incoming or outgoing edges."""

    def __init__(self, label: str, in_degree: int, out_degree: int) -> None:
        self.label = label
        self.in_degree = in_degree
        self.out_degree = out_degree
        super().__init__(
            f"Cannot remove node with connected edges: {label} "
            f"(in={in_degree}, out={out_degree})"
        )


class UnsupportedOptionError(GraphError, ValueError):
    """An option value (algorithm, output format) is not recognised."""

    kind = "option"

    def __init__(
        self,
        value: object,
        available: tuple[str, ...] | list[str] = (),
        hint: str | None = None,
    ) -> None:
        self.value = value
        self.available = tuple(available)
        message = f"Unsupported {self.kind}: {value}"
        if self.available:
            message += f". Available: {', '.join(self.available)}"
        if hint:
            message += f" ({hint})"
        super().__init__(message)


class UnsupportedAlgorithmError(UnsupportedOptionError):
    """Unknown search algorithm name."""

    kind = "algorithm"


class UnsupportedFormatError(UnsupportedOptionError):
    """Unknown rendering format."""

    kind = "format"


class EmptyPathError(GraphError, RuntimeError):
    """Start or end node requested from a path with no nodes."""

    def __init__(self, message: str = "Path is empty") -> None:
        super().__init__(message)


class GraphFormatError(GraphError, ValueError):
    """A stored graph snapshot does not have the expected shape."""
