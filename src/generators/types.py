"""Result container for configuration-driven generation."""

from dataclasses import dataclass

from src.graph.graph import Graph


@dataclass(frozen=True)
class GenerationResult:
    """Immutable record of one generator run and its provenance.

    Bipartite kinds produce two graphs (left, right); every other kind
    produces one.
    """

    kind: str
    graphs: tuple[Graph, ...]
    seed: int  # seed in effect when generation started
    config_hash: str  # full_config_hash of the generating config

    @property
    def graph(self) -> Graph:
        """The single graph, or the left side of a bipartite pair."""
        return self.graphs[0]
