"""Graph composition: splice a subgraph into a node or an edge, fuse two graphs.

All operators mutate the host in place and share node identities with the
graph being spliced in; clone the replacement first if it must stay intact.
"""

import logging
from collections.abc import Sequence

from src.errors import InvalidArgument, StructuralPrecondition
from src.graph.graph import Graph
from src.graph.node import Arc, Node, add_arc, add_edge, erase_arc, erase_edge
from src.sampling.numbers import uniform_int
from src.sampling.sequences import random_element, random_subsequence, shuffle

log = logging.getLogger(__name__)


def expand_node(
    host: Graph,
    target: Node,
    replacement: Graph,
    attach_points: Sequence[Node] | None = None,
) -> None:
    """Substitute `target` with the nodes of `replacement`.

    Every connection leaving `target` is moved to a uniformly chosen attach
    point (default: any node of `replacement`). The first replacement node
    takes over target's slot; the rest are appended. Incoming unmirrored
    arcs are not visible from `target` and are left untouched.

    Raises:
        StructuralPrecondition: If target is not in host, replacement is
            empty, or attach_points is empty.
    """
    if not host.has_node(target):
        raise StructuralPrecondition("Node to expand must be in the graph")
    if len(replacement) == 0:
        raise StructuralPrecondition("Replacement graph must contain at least one node")

    new_nodes = list(replacement)
    possible = list(attach_points) if attach_points is not None else new_nodes
    if not possible:
        raise StructuralPrecondition("expand_node needs at least one attach point")

    moved = 0
    done: set[int] = set()
    for edge in target.edges():
        if edge.key in done:
            continue
        done.add(edge.key)
        add_edge(random_element(possible), edge.target, edge.data)
        erase_edge(edge)
        moved += 1
    for arc in target.arcs():
        add_arc(random_element(possible), arc.target, arc.data)
        erase_arc(arc)
        moved += 1

    host._put(target.index, new_nodes[0])
    host.add_nodes(new_nodes[1:])
    log.debug(
        "expand_node: moved %d connections, host now has %d nodes",
        moved,
        len(host),
    )


def _expand_connection(
    host: Graph, arc: Arc, replacement: Graph, entry: Node, exit: Node, directed: bool
) -> None:
    if not replacement.has_node(entry) or not replacement.has_node(exit):
        raise StructuralPrecondition("entry and exit must be nodes of the replacement")
    if not host.has_node(arc.source):
        raise StructuralPrecondition("Connection to expand must start in the graph")

    source, target = arc.source, arc.target
    if directed:
        erase_arc(arc)
        add_arc(source, entry)
        add_arc(exit, target)
    else:
        erase_edge(arc)
        add_edge(source, entry)
        add_edge(exit, target)
    host.merge_graph(replacement)


def expand_edge(
    host: Graph, edge: Arc, replacement: Graph, entry: Node, exit: Node
) -> None:
    """Replace the edge u - v by u - entry, exit - v and append `replacement`.

    Raises:
        StructuralPrecondition: If entry or exit is not in replacement, or
            the edge does not start in host.
    """
    _expand_connection(host, edge, replacement, entry, exit, directed=False)


def expand_arc(
    host: Graph, arc: Arc, replacement: Graph, entry: Node, exit: Node
) -> None:
    """Directed counterpart of expand_edge: u -> entry, exit -> v."""
    _expand_connection(host, arc, replacement, entry, exit, directed=True)


def fuse_graph(
    host: Graph,
    guest: Graph,
    mapping: Sequence[tuple[Node, Node]],
    collapse_parallel: bool = False,
) -> None:
    """Merge `guest` into `host`, identifying guest nodes with host nodes.

    `mapping` holds (host_node, guest_node) pairs. Every connection of the
    guest touching an identified guest node is rewritten onto the matching
    host node; identified guest nodes are dropped and the rest appended.
    The host ends with len(host) + len(guest) - len(mapping) nodes.

    Args:
        host: Graph receiving the guest.
        guest: Graph being merged; its identified nodes lose their connections.
        mapping: Injective (host_node, guest_node) pairs.
        collapse_parallel: Skip a rewritten host-to-host connection when the
            host already has one, keeping a simple graph simple.

    Raises:
        StructuralPrecondition: If a host side is not in host or a guest
            side is not in guest.
        InvalidArgument: If a node appears twice on either side.
    """
    host_seen: set[int] = set()
    whom: dict[int, Node] = {}
    for host_node, guest_node in mapping:
        if not host.has_node(host_node):
            raise StructuralPrecondition(
                "Left side of a mapping must contain only nodes from the host graph"
            )
        if not guest.has_node(guest_node):
            raise StructuralPrecondition(
                "Right side of a mapping must contain only nodes from the guest graph"
            )
        if host_node.key in host_seen or guest_node.key in whom:
            raise InvalidArgument("Identification mapping must be injective")
        host_seen.add(host_node.key)
        whom[guest_node.key] = host_node

    done: set[int] = set()
    for _, guest_node in mapping:
        for edge in guest_node.edges():
            target = edge.target
            if edge.key in done:
                continue
            if not guest.has_node(target):
                continue
            if target.key in whom:
                # both ends identified: handle from the lower-index end only
                if edge.source.index > target.index:
                    continue
                u, v = whom[guest_node.key], whom[target.key]
                if not collapse_parallel or not u.has_edge(v):
                    add_edge(u, v, edge.data)
                erase_edge(edge)
                done.add(edge.key)
                continue
            add_edge(whom[guest_node.key], target, edge.data)
            erase_edge(edge)

    for arc in guest.arcs():
        source, target = arc.source, arc.target
        if not guest.has_node(target):
            continue
        if source.key not in whom and target.key not in whom:
            continue
        u = whom.get(source.key, source)
        v = whom.get(target.key, target)
        both = source.key in whom and target.key in whom
        if not (both and collapse_parallel and u.has_arc(v)):
            add_arc(u, v, arc.data)
        erase_arc(arc)

    host.add_nodes([node for node in guest if node.key not in whom])
    log.debug(
        "fuse_graph: identified %d nodes, host now has %d nodes",
        len(mapping),
        len(host),
    )


def fuse_random(
    host: Graph, guest: Graph, at_least: int = 0, collapse_parallel: bool = False
) -> list[tuple[Node, Node]]:
    """Fuse along a random identification of k nodes, k in [at_least, min sizes].

    Returns:
        The mapping that was used.

    Raises:
        InvalidArgument: If at_least is negative or exceeds the smaller size.
    """
    maximum = min(len(host), len(guest))
    if at_least < 0 or at_least > maximum:
        raise InvalidArgument(
            f"fuse_random expects at_least in [0, {maximum}], got {at_least}"
        )

    pick = uniform_int(at_least, maximum)
    left = random_subsequence(list(host), pick)
    shuffle(left)
    right = random_subsequence(list(guest), pick)
    shuffle(right)

    mapping = list(zip(left, right))
    fuse_graph(host, guest, mapping, collapse_parallel)
    return mapping
