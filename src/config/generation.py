"""Generation configuration dataclasses, all frozen and slotted for immutability."""

from dataclasses import dataclass, field

KINDS: tuple[str, ...] = (
    "chain",
    "path",
    "tree",
    "wide_tree",
    "bipartite",
    "regular_bipartite",
    "undirected",
)


@dataclass(frozen=True, slots=True)
class ChainConfig:
    """Chain / path parameters."""

    size: int = 10
    randomize: bool = True  # False keeps nodes in chain order


@dataclass(frozen=True, slots=True)
class TreeConfig:
    """Random recursive tree and wide tree parameters."""

    size: int = 10
    min_diameter: int = 2  # wide_tree only
    random_ends: bool = True  # wide_tree only: False pins backbone ends to 0 and 1


@dataclass(frozen=True, slots=True)
class BipartiteConfig:
    """Random bipartite graph parameters."""

    left: int = 5
    right: int = 5
    edges: int | None = None  # None draws a uniform count
    allow_parallel: bool = False


@dataclass(frozen=True, slots=True)
class RegularBipartiteConfig:
    """Exact regular bipartite graph parameters."""

    n: int = 6  # nodes per side
    degree: int = 2


@dataclass(frozen=True, slots=True)
class UndirectedConfig:
    """Random simple undirected graph parameters."""

    size: int = 10
    edges: int | None = None  # None draws a uniform count
    connected: bool = False


@dataclass(frozen=True, slots=True)
class GenerationConfig:
    """Top-level configuration: which generator to run and with what.

    Only the sub-config matching `kind` is used; the others keep their
    defaults. Cross-parameter validation runs in __post_init__ to reject
    invalid configurations before any sampling happens.
    """

    kind: str = "tree"
    chain: ChainConfig = field(default_factory=ChainConfig)
    tree: TreeConfig = field(default_factory=TreeConfig)
    bipartite: BipartiteConfig = field(default_factory=BipartiteConfig)
    regular_bipartite: RegularBipartiteConfig = field(
        default_factory=RegularBipartiteConfig
    )
    undirected: UndirectedConfig = field(default_factory=UndirectedConfig)
    seed: int | None = 42  # None keeps the current generator state
    index_start: int = 0
    log_seed: bool = True
    description: str = ""
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Cross-parameter validation for the selected generator."""
        if self.kind not in KINDS:
            raise ValueError(f"kind must be one of {KINDS}, got {self.kind!r}")

        if self.kind in ("chain", "path") and self.chain.size <= 0:
            raise ValueError(f"chain.size must be positive, got {self.chain.size}")

        if self.kind == "tree" and self.tree.size <= 0:
            raise ValueError(f"tree.size must be positive, got {self.tree.size}")

        if self.kind == "wide_tree":
            if self.tree.min_diameter < 2:
                raise ValueError(
                    f"tree.min_diameter ({self.tree.min_diameter}) must be >= 2"
                )
            if self.tree.min_diameter >= self.tree.size:
                raise ValueError(
                    f"tree.min_diameter ({self.tree.min_diameter}) must be "
                    f"< tree.size ({self.tree.size})"
                )

        if self.kind == "bipartite":
            b = self.bipartite
            if b.left < 1 or b.right < 1:
                raise ValueError(
                    f"bipartite sides must be positive, got {b.left} x {b.right}"
                )
            if b.edges is not None and b.edges < 0:
                raise ValueError(f"bipartite.edges must be >= 0, got {b.edges}")
            if (
                b.edges is not None
                and not b.allow_parallel
                and b.edges > b.left * b.right
            ):
                raise ValueError(
                    f"bipartite.edges ({b.edges}) must be <= left * right "
                    f"({b.left * b.right}) without parallel edges"
                )

        if self.kind == "regular_bipartite":
            r = self.regular_bipartite
            if r.n < 1:
                raise ValueError(f"regular_bipartite.n must be positive, got {r.n}")
            if not 0 <= r.degree <= r.n:
                raise ValueError(
                    f"regular_bipartite.degree ({r.degree}) must be in [0, {r.n}]"
                )

        if self.kind == "undirected":
            u = self.undirected
            if u.size < 1:
                raise ValueError(f"undirected.size must be positive, got {u.size}")
            most = u.size * (u.size - 1) // 2
            if u.edges is not None and not 0 <= u.edges <= most:
                raise ValueError(
                    f"undirected.edges ({u.edges}) must be in [0, {most}]"
                )
            if u.connected and u.edges is not None and u.edges < u.size - 1:
                raise ValueError(
                    f"undirected.edges ({u.edges}) must be >= size - 1 "
                    f"({u.size - 1}) for a connected graph"
                )
