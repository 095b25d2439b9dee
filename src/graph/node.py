"""Nodes, arcs and mirrored edges.

An edge between u and v is stored as two arcs, u->v registered at u and
v->u registered at v, that share one EdgeRecord (key and payload). A lone
arc with no mirror is a directed connection. Arcs are registered at their
origin only, so an incoming unmirrored arc is not visible from its target.
"""

import itertools
import logging
from typing import Any

from src.errors import InternalInvariantViolation

log = logging.getLogger(__name__)

_node_keys = itertools.count()
_edge_keys = itertools.count()


class EdgeRecord:
    """Key and payload shared by the two arcs of one edge."""

    __slots__ = ("key", "data", "mirrored")

    def __init__(self, data: Any = None, mirrored: bool = False) -> None:
        self.key = next(_edge_keys)
        self.data = data
        self.mirrored = mirrored  # set by add_edge, trusted when force_search=False


class Arc:
    """A directed connection source -> target backed by an EdgeRecord."""

    __slots__ = ("source", "target", "record")

    def __init__(self, source: "Node", target: "Node", record: EdgeRecord) -> None:
        self.source = source
        self.target = target
        self.record = record

    @property
    def key(self) -> int:
        return self.record.key

    @property
    def data(self) -> Any:
        return self.record.data

    @data.setter
    def data(self, value: Any) -> None:
        self.record.data = value

    def mirror(self) -> "Arc | None":
        """Find the reverse arc sharing this arc's key, if it exists."""
        for arc in self.target._neighbours.get(self.source.key, ()):
            if arc.record is self.record and arc is not self:
                return arc
        return None

    def is_mirrored(self, force_search: bool = True) -> bool:
        if force_search:
            return self.mirror() is not None
        return self.record.mirrored

    def __repr__(self) -> str:
        return (
            f"Arc({self.source.index}->{self.target.index}, key={self.key})"
        )


class Node:
    """A graph vertex with a process-unique key and a mutable position index.

    Nodes are shared, never copied, when several graphs reference them;
    Graph.clone() is the only way to get new identities.
    """

    __slots__ = ("key", "index", "data", "_neighbours")

    def __init__(self, index: int = 0, data: Any = None) -> None:
        self.key = next(_node_keys)
        self.index = index
        self.data = data
        # neighbour key -> arcs registered here that point at that neighbour
        self._neighbours: dict[int, list[Arc]] = {}

    def add_arc(
        self, target: "Node", data: Any = None, record: EdgeRecord | None = None
    ) -> Arc:
        """Register a single arc self -> target at this node."""
        if record is None:
            record = EdgeRecord(data)
        arc = Arc(self, target, record)
        self._neighbours.setdefault(target.key, []).append(arc)
        return arc

    def _discard(self, arc: Arc) -> bool:
        bucket = self._neighbours.get(arc.target.key)
        if not bucket:
            return False
        for i, candidate in enumerate(bucket):
            if candidate is arc:
                del bucket[i]
                if not bucket:
                    del self._neighbours[arc.target.key]
                return True
        return False

    def out_arcs(self) -> list[Arc]:
        """Every arc registered at this node, mirrored or not."""
        return [arc for bucket in self._neighbours.values() for arc in bucket]

    def arcs_to(self, other: "Node") -> list[Arc]:
        return list(self._neighbours.get(other.key, ()))

    def edges(self, force_search: bool = True) -> list[Arc]:
        """Arcs from this node that belong to a mirrored edge."""
        return [a for a in self.out_arcs() if a.is_mirrored(force_search)]

    def arcs(self, force_search: bool = True) -> list[Arc]:
        """Arcs from this node that have no mirror (directed connections)."""
        return [a for a in self.out_arcs() if not a.is_mirrored(force_search)]

    def has_arc(self, other: "Node") -> bool:
        return bool(self._neighbours.get(other.key))

    def has_edge(self, other: "Node") -> bool:
        return any(arc.mirror() is not None for arc in self.arcs_to(other))

    def degree(self) -> int:
        """Number of mirrored edges incident to this node."""
        return len(self.edges())

    def __repr__(self) -> str:
        return f"Node(key={self.key}, index={self.index})"


def add_arc(source: Node, target: Node, data: Any = None) -> Arc:
    """Create a directed connection source -> target."""
    return source.add_arc(target, data)


def add_edge(u: Node, v: Node, data: Any = None) -> Arc:
    """Create an undirected edge as two mirrored arcs sharing one record.

    Returns:
        The u -> v arc.
    """
    record = EdgeRecord(data, mirrored=True)
    arc = u.add_arc(v, record=record)
    v.add_arc(u, record=record)
    return arc


def erase_arc(arc: Arc) -> None:
    """Remove a single arc from its origin node."""
    if not arc.source._discard(arc):
        log.critical("Arc %r is not registered at its source node", arc)
        raise InternalInvariantViolation(
            f"{arc!r} is not registered at its source node"
        )


def erase_edge(arc: Arc) -> None:
    """Remove both arcs of an undirected edge.

    Raises:
        InternalInvariantViolation: If the mirror arc is missing.
    """
    mirror = arc.mirror()
    if mirror is None:
        log.critical("Edge %r has no mirror arc; graph state is corrupted", arc)
        raise InternalInvariantViolation(f"{arc!r} has no mirror arc")
    erase_arc(arc)
    erase_arc(mirror)


def has_arc(u: Node, v: Node) -> bool:
    """True if any arc u -> v exists, mirrored or not."""
    return u.has_arc(v)


def has_edge(u: Node, v: Node) -> bool:
    """True if an undirected u - v edge exists (both arcs, same key)."""
    return u.has_edge(v)
