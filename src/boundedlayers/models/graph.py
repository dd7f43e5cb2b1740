"""Dependency graph models consumed by the validator."""

from collections.abc import Iterable, Iterator

from pydantic import BaseModel, ConfigDict, Field

from boundedlayers.exceptions import UnknownReferenceError


class Node(BaseModel):
    """A build unit (e.g. a project) and the ids of the units it references."""
    id: str
    name: str
    references: tuple[str, ...] = Field(default_factory=tuple)

    model_config = ConfigDict(frozen=True)


class Graph:
    """Ordered set of nodes with case-insensitive id lookup."""

    def __init__(self, nodes: Iterable[Node]):
        self._nodes = tuple(nodes)
        self._by_id: dict[str, Node] = {}
        for node in self._nodes:
            key = node.id.lower()
            if key in self._by_id:
                raise ValueError(f"Duplicate node id: {node.id}")
            self._by_id[key] = node

    @property
    def nodes(self) -> tuple[Node, ...]:
        return self._nodes

    def find(self, node_id: str) -> Node:
        """Resolve a node id, ignoring case.

        Raises:
            UnknownReferenceError: If no node has this id
        """
        try:
            return self._by_id[node_id.lower()]
        except KeyError:
            raise UnknownReferenceError(node_id) from None

    def __contains__(self, node_id: object) -> bool:
        return isinstance(node_id, str) and node_id.lower() in self._by_id

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)
