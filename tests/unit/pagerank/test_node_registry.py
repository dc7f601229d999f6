import pytest

from rankgraph.pagerank.models import Node
from rankgraph.pagerank.registry import NodeRegistry


@pytest.fixture
def registry():
    return NodeRegistry()


class TestNodeRegistry:
    def test_intern_creates_node(self, registry):
        index, created = registry.intern("a", score=0.85)

        assert (index, created) == (0, True)
        assert registry.nodes[0] == Node(identifier="a", score=0.85)
        assert registry.nodes[0].incoming == []
        assert registry.nodes[0].out_degree == 0

    def test_intern_existing_is_noop(self, registry):
        registry.intern("a", score=0.85)
        registry.nodes[0].score = 3.0

        index, created = registry.intern("a", score=0.5)

        assert (index, created) == (0, False)
        assert registry.nodes[0].score == 3.0
        assert len(registry) == 1

    def test_indices_are_dense_and_ordered(self, registry):
        for name in ("x", "y", "z"):
            registry.intern(name, score=0.0)

        assert [registry.get_index(name) for name in ("x", "y", "z")] == [0, 1, 2]
        assert [node.identifier for node in registry] == ["x", "y", "z"]
        assert dict(registry.items()) == {"x": 0, "y": 1, "z": 2}

    def test_lookup_never_creates(self, registry):
        assert registry.get_index("missing") is None
        assert registry.get("missing") is None
        assert "missing" not in registry
        assert len(registry) == 0

    def test_equal_identifiers_share_a_node(self, registry):
        registry.intern((1, 2), score=0.0)
        index, created = registry.intern(tuple([1, 2]), score=0.0)

        assert (index, created) == (0, False)

    def test_unhashable_identifier_raises_type_error(self, registry):
        with pytest.raises(TypeError):
            registry.intern(["a"], score=0.0)
        assert ["a"] not in registry

    def test_unhashable_lookup_returns_none(self, registry):
        registry.intern("a", score=1.0)

        assert registry.get_index(["a"]) is None
        assert registry.get(["a"]) is None
        assert len(registry) == 1

    def test_node_in_degree(self):
        node = Node(identifier="a", score=1.0, incoming=[0, 0, 2])
        assert node.in_degree == 3
