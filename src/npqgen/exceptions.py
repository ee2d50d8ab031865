from __future__ import annotations


class QueryGenerationError(Exception):
    """
    Base class for every structural failure raised by npqgen.

    None of these are transient: retrying the same call on the same
    schema fails the same way.
    """


class DuplicateLabel(QueryGenerationError):
    def __init__(self, label: str) -> None:
        super().__init__(f"node with label {label!r} already exists")
        self.label = label


class NodeNotFound(QueryGenerationError, LookupError):
    def __init__(self, label: str) -> None:
        super().__init__(f"node {label!r} not found")
        self.label = label


class StartNodeNotFound(QueryGenerationError, LookupError):
    def __init__(self, label: str) -> None:
        super().__init__(f"no existing node in graph with label {label!r}")
        self.label = label


class AdjacencyExhausted(QueryGenerationError):
    """
    Raised when a walk still owes hops but the current node has no
    incident relationships.
    """

    def __init__(self, label: str, remaining: int) -> None:
        super().__init__(
            f"dead end at {label!r} with {remaining} hop(s) remaining"
        )
        self.label = label
        self.remaining = remaining


class IndexOutOfRange(QueryGenerationError, IndexError):
    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"index {index} out of range for subgraph of size {size}")
        self.index = index
        self.size = size
