import pytest

from garfield.hyperedge import (
    MAX_NODES,
    MIN_NODES,
    MIN_SCORE,
    HyperedgeCandidate,
    calculate_chain_cohesion,
    calculate_cohesion,
    detect_call_chains,
    detect_config_patterns,
    detect_directory_groups,
    detect_file_groups,
    detect_hyperedges,
    process_candidates,
)
from garfield.model import Confidence, Edge, GraphData, Node


def _node(node_id, label, file, loc="L1"):
    return Node(node_id, label, file, loc)


def _calls(src, tgt):
    return Edge(src, tgt, "calls", Confidence.EXTRACTED)


@pytest.fixture
def graph():
    nodes = [
        _node("order.rs:create_order", "create_order", "order.rs", "L10"),
        _node("order.rs:validate_items", "validate_items", "order.rs", "L25"),
        _node("order.rs:save_order", "save_order", "order.rs", "L40"),
        _node("order.rs:send_confirmation", "send_confirmation", "order.rs", "L55"),
        _node("inventory.rs:check_stock", "check_stock", "inventory.rs", "L5"),
    ]
    links = [
        _calls("order.rs:create_order", "order.rs:validate_items"),
        _calls("order.rs:create_order", "order.rs:save_order"),
        _calls("order.rs:create_order", "inventory.rs:check_stock"),
        _calls("order.rs:save_order", "order.rs:send_confirmation"),
    ]
    return GraphData.create(nodes, links, 2)


def _candidate(cid, nodes, score):
    return HyperedgeCandidate(
        id=cid,
        label=cid.title(),
        nodes=nodes,
        relation="test",
        confidence=Confidence.INFERRED,
        source_file="test.rs",
        score=score,
    )


def test_detect_file_groups(graph):
    candidates = detect_file_groups(graph)
    assert len(candidates) == 1
    order = candidates[0]
    assert order.source_file == "order.rs"
    assert len(order.nodes) == 4
    assert order.relation == "participate_in"
    assert order.confidence == Confidence.INFERRED
    assert order.id == "file_order"
    assert order.label == "order module"
    assert order.score == pytest.approx(0.75)


def test_detect_call_chains(graph):
    candidates = detect_call_chains(graph)
    assert candidates
    assert len(candidates) == 1
    chain = candidates[0]
    assert chain.id == "chain_0"
    assert chain.nodes == [
        "order.rs:create_order",
        "order.rs:save_order",
        "order.rs:send_confirmation",
    ]
    assert chain.label == "Call Chain (3)"
    assert chain.relation == "call_chain"
    assert chain.confidence == Confidence.EXTRACTED
    assert chain.source_file == "order.rs"
    assert chain.score == pytest.approx(1.0)


def test_cohesion_calculation(graph):
    node_ids = [
        "order.rs:create_order",
        "order.rs:validate_items",
        "order.rs:save_order",
    ]
    score = calculate_cohesion(node_ids, graph)
    assert 0.0 < score <= 1.0
    assert score == pytest.approx(0.5)


def test_cohesion_without_edges_is_half():
    graph = GraphData.create([_node("a", "a", "x.rs")], [], 0)
    assert calculate_cohesion(["a"], graph) == 0.5


def test_chain_cohesion_single_node():
    graph = GraphData.create([_node("a", "a", "x.rs")], [], 0)
    assert calculate_chain_cohesion(["a"], graph) == 0.5


def test_chain_cohesion_missing_link(graph):
    chain = [
        "order.rs:create_order",
        "order.rs:validate_items",
        "order.rs:send_confirmation",
    ]
    assert calculate_chain_cohesion(chain, graph) == pytest.approx(0.6)


def test_process_candidates_filters():
    candidates = [
        _candidate("too_small", ["a", "b"], 0.5),
        _candidate("valid", ["a", "b", "c"], 0.5),
        _candidate("low_score", ["x", "y", "z"], 0.1),
    ]
    hyperedges = process_candidates(candidates)
    assert [h.id for h in hyperedges] == ["valid"]


def test_process_candidates_rejects_oversized():
    nodes = [f"n{i}" for i in range(MAX_NODES + 1)]
    assert process_candidates([_candidate("big", nodes, 0.9)]) == []


def test_dedup_by_node_set():
    candidates = [
        _candidate("first", ["a", "b", "c"], 0.8),
        _candidate("second", ["c", "b", "a"], 0.9),
    ]
    hyperedges = process_candidates(candidates)
    assert len(hyperedges) == 1
    assert hyperedges[0].id == "first"


def test_process_candidates_sorts_by_score():
    candidates = [
        _candidate("mid", ["a", "b", "c"], 0.5),
        _candidate("high", ["d", "e", "f"], 0.9),
        _candidate("low", ["g", "h", "i"], 0.4),
    ]
    assert [h.id for h in process_candidates(candidates)] == ["high", "mid", "low"]


def test_into_hyperedge_uses_score():
    hyperedge = _candidate("x", ["a", "b", "c"], 0.42).into_hyperedge()
    assert hyperedge.confidence_score == 0.42
    assert hyperedge.nodes == ["a", "b", "c"]
    assert hyperedge.relation == "test"


def test_detect_hyperedges_integration(graph):
    hyperedges = detect_hyperedges(graph)
    assert hyperedges
    for he in hyperedges:
        assert MIN_NODES <= len(he.nodes) <= MAX_NODES
        assert he.confidence_score >= MIN_SCORE
    assert [h.id for h in hyperedges] == ["chain_0", "file_order"]


def test_detect_hyperedges_empty_graph():
    assert detect_hyperedges(GraphData.create([], [], 0)) == []


def test_config_pattern_detection():
    nodes = [
        _node("a.yaml:svc1", "svc1", "a.yaml", "L1"),
        _node("a.yaml:svc2", "svc2", "a.yaml", "L10"),
        _node("a.yaml:svc3", "svc3", "a.yaml", "L20"),
    ]
    candidates = detect_config_patterns(GraphData.create(nodes, [], 1))
    assert candidates
    yaml_group = next(c for c in candidates if c.source_file.endswith(".yaml"))
    assert yaml_group.id == "config_yaml"
    assert yaml_group.label == "Config files (.yaml)"
    assert yaml_group.relation == "config_group"
    assert yaml_group.score == 0.5


def test_config_pattern_ignores_code():
    nodes = [_node(f"a.rs:f{i}", f"f{i}", "a.rs") for i in range(4)]
    assert detect_config_patterns(GraphData.create(nodes, [], 0)) == []


def test_directory_groups():
    nodes = [_node(f"login:{i}", f"l{i}", "src/auth/login.rs") for i in range(3)]
    nodes += [_node(f"token:{i}", f"t{i}", "src/auth/token.rs") for i in range(3)]
    candidates = detect_directory_groups(GraphData.create(nodes, [], 0))
    assert len(candidates) == 1
    group = candidates[0]
    assert group.id == "dir_auth"
    assert group.label == "auth directory"
    assert group.relation == "directory_module"
    assert len(group.nodes) == 6


def test_directory_groups_needs_six_nodes():
    nodes = [_node(f"n{i}", f"n{i}", "src/auth/login.rs") for i in range(5)]
    assert detect_directory_groups(GraphData.create(nodes, [], 0)) == []


def test_directory_groups_requires_same_parent():
    nodes = [_node(f"x{i}", f"x{i}", "x/auth/a.rs") for i in range(3)]
    nodes += [_node(f"y{i}", f"y{i}", "y/auth/b.rs") for i in range(3)]
    assert detect_directory_groups(GraphData.create(nodes, [], 0)) == []


def test_directory_groups_skip_root_and_hidden():
    nodes = [_node(f"r{i}", f"r{i}", "main.rs") for i in range(6)]
    nodes += [_node(f"h{i}", f"h{i}", ".hidden/a.rs") for i in range(6)]
    assert detect_directory_groups(GraphData.create(nodes, [], 0)) == []


def test_hyperedges_reference_existing_nodes():
    nodes = [_node(x, x, "test.rs") for x in ("A", "B", "C")]
    graph = GraphData.create(nodes, [], 0)
    hyperedges = detect_hyperedges(graph)
    ids = {n.id for n in graph.nodes}
    assert len(hyperedges) == 1
    assert all(node_id in ids for he in hyperedges for node_id in he.nodes)