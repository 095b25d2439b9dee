"""Tests for the generation configuration system."""

import json
import re

import pytest
from dataclasses import FrozenInstanceError, replace

from src.config import (
    DEFAULT_CONFIG,
    KINDS,
    BipartiteConfig,
    ChainConfig,
    GenerationConfig,
    RegularBipartiteConfig,
    TreeConfig,
    UndirectedConfig,
    config_from_dict,
    config_from_json,
    config_hash,
    config_to_dict,
    config_to_json,
    full_config_hash,
    structure_config_hash,
)


class TestDefaultConfig:
    """DEFAULT_CONFIG has the expected values."""

    def test_default_config_values(self):
        assert DEFAULT_CONFIG.kind == "tree"
        assert DEFAULT_CONFIG.tree.size == 10
        assert DEFAULT_CONFIG.seed == 42
        assert DEFAULT_CONFIG.index_start == 0
        assert DEFAULT_CONFIG.log_seed is True
        assert DEFAULT_CONFIG.regular_bipartite.n == 6
        assert DEFAULT_CONFIG.regular_bipartite.degree == 2
        assert DEFAULT_CONFIG.bipartite.edges is None

    def test_every_kind_constructs(self):
        for kind in KINDS:
            assert GenerationConfig(kind=kind).kind == kind


class TestConfigImmutability:
    """Frozen dataclasses prevent mutation."""

    def test_config_frozen(self):
        with pytest.raises(FrozenInstanceError):
            DEFAULT_CONFIG.seed = 99  # type: ignore[misc]

    def test_sub_config_frozen(self):
        with pytest.raises(FrozenInstanceError):
            DEFAULT_CONFIG.tree.size = 1000  # type: ignore[misc]


class TestConfigRoundTrip:
    """JSON serialization round-trip preserves identity."""

    def test_config_round_trip_hash(self):
        restored = config_from_json(config_to_json(DEFAULT_CONFIG))
        assert config_hash(DEFAULT_CONFIG) == config_hash(restored)

    def test_config_round_trip_with_optionals(self):
        cfg = GenerationConfig(
            kind="undirected",
            undirected=UndirectedConfig(size=8, edges=12, connected=True),
            seed=None,
            tags=("smoke", "connected"),
            description="eight nodes",
        )
        restored = config_from_json(config_to_json(cfg))
        assert restored == cfg
        assert restored.tags == ("smoke", "connected")
        assert restored.seed is None

    def test_dict_round_trip(self):
        cfg = replace(DEFAULT_CONFIG, kind="bipartite", bipartite=BipartiteConfig(3, 4, 5))
        d = config_to_dict(cfg)
        assert d["bipartite"]["edges"] == 5
        assert config_from_dict(d) == cfg

    def test_json_is_sorted(self):
        data = json.loads(config_to_json(DEFAULT_CONFIG))
        assert list(data) == sorted(data)


class TestConfigHashing:
    """Hashing behavior for structure and full identity."""

    def test_structure_hash_ignores_seed(self):
        cfg2 = replace(DEFAULT_CONFIG, seed=99, description="other", tags=("x",))
        assert structure_config_hash(DEFAULT_CONFIG) == structure_config_hash(cfg2)

    def test_full_hash_includes_seed(self):
        cfg2 = replace(DEFAULT_CONFIG, seed=99)
        assert full_config_hash(DEFAULT_CONFIG) != full_config_hash(cfg2)

    def test_config_hash_is_hex_string(self):
        h = full_config_hash(DEFAULT_CONFIG)
        assert len(h) == 16
        assert re.match(r"^[0-9a-f]{16}$", h)

    def test_different_structure_different_hash(self):
        cfg2 = replace(DEFAULT_CONFIG, tree=TreeConfig(size=11))
        assert structure_config_hash(DEFAULT_CONFIG) != structure_config_hash(cfg2)

    def test_sub_config_hash(self):
        assert config_hash(ChainConfig()) == config_hash(ChainConfig(size=10))


class TestConfigValidation:
    """Cross-parameter validation catches invalid configs."""

    def test_unknown_kind(self):
        with pytest.raises(ValueError, match="kind"):
            GenerationConfig(kind="hypercube")

    def test_chain_size(self):
        with pytest.raises(ValueError, match="chain.size"):
            GenerationConfig(kind="path", chain=ChainConfig(size=0))

    def test_wide_tree_diameter(self):
        with pytest.raises(ValueError, match="min_diameter"):
            GenerationConfig(kind="wide_tree", tree=TreeConfig(size=5, min_diameter=5))

    def test_bipartite_too_many_edges(self):
        with pytest.raises(ValueError, match="bipartite.edges"):
            GenerationConfig(kind="bipartite", bipartite=BipartiteConfig(2, 2, 5))

    def test_bipartite_parallel_allows_more(self):
        cfg = GenerationConfig(
            kind="bipartite", bipartite=BipartiteConfig(2, 2, 5, allow_parallel=True)
        )
        assert cfg.bipartite.edges == 5

    def test_regular_bipartite_degree(self):
        with pytest.raises(ValueError, match="degree"):
            GenerationConfig(
                kind="regular_bipartite",
                regular_bipartite=RegularBipartiteConfig(n=3, degree=4),
            )

    def test_undirected_connected_edges(self):
        with pytest.raises(ValueError, match="size - 1"):
            GenerationConfig(
                kind="undirected",
                undirected=UndirectedConfig(size=6, edges=3, connected=True),
            )

    def test_inactive_sub_config_not_validated(self):
        cfg = GenerationConfig(kind="tree", chain=ChainConfig(size=0))
        assert cfg.chain.size == 0


class TestSerializationStrict:
    """Strict mode rejects unknown keys."""

    def test_serialization_strict_rejects_extra_keys(self):
        data = json.loads(config_to_json(DEFAULT_CONFIG))
        data["unknown_field"] = "sneaky"
        with pytest.raises(Exception):
            config_from_json(json.dumps(data))

    def test_wrong_type_rejected(self):
        data = json.loads(config_to_json(DEFAULT_CONFIG))
        data["tree"]["size"] = "ten"
        with pytest.raises(Exception):
            config_from_json(json.dumps(data))
