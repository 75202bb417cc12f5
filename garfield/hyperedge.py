"""Detection of hyperedges: groups of three or more nodes that work together."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from pathlib import PurePath

from garfield.model import Confidence, GraphData, Hyperedge, Node

MIN_NODES = 3
MAX_NODES = 20
MIN_SCORE = 0.3

_CONFIG_EXTENSIONS = ("yaml", "yml", "json", "toml", "tf", "dockerfile")


@dataclass
class HyperedgeCandidate:
    """A possible hyperedge before deduplication and filtering."""

    id: str
    label: str
    nodes: list[str]
    relation: str
    confidence: Confidence
    source_file: str
    score: float

    def into_hyperedge(self) -> Hyperedge:
        """Turn the candidate into a hyperedge, using its score as confidence."""
        return Hyperedge(
            id=self.id,
            label=self.label,
            nodes=list(self.nodes),
            relation=self.relation,
            confidence=self.confidence,
            confidence_score=self.score,
            source_file=self.source_file,
        )


def detect_hyperedges(graph: GraphData) -> list[Hyperedge]:
    """Run every detector over the graph and return the surviving hyperedges."""
    candidates = [
        *detect_file_groups(graph),
        *detect_call_chains(graph),
        *detect_config_patterns(graph),
        *detect_directory_groups(graph),
    ]
    return process_candidates(candidates)


def _file_stem(path: str) -> str:
    return PurePath(path).stem or "unknown"


def _extension(path: str) -> str:
    return PurePath(path).suffix.lstrip(".").lower()


def detect_file_groups(graph: GraphData) -> list[HyperedgeCandidate]:
    """Group nodes by source file."""
    by_file: dict[str, list[Node]] = defaultdict(list)
    for node in graph.nodes:
        by_file[node.source_file].append(node)

    candidates = []
    for file, nodes in by_file.items():
        if not MIN_NODES <= len(nodes) <= MAX_NODES * 2:
            continue
        stem = _file_stem(file)
        node_ids = [n.id for n in nodes]
        candidates.append(
            HyperedgeCandidate(
                id=f"file_{stem.lower().replace(' ', '_')}",
                label=f"{stem} module",
                nodes=node_ids,
                relation="participate_in",
                confidence=Confidence.INFERRED,
                source_file=file,
                score=calculate_cohesion(node_ids, graph),
            )
        )
    return candidates


def detect_call_chains(graph: GraphData) -> list[HyperedgeCandidate]:
    """Find chains of calls A -> B -> C ... of three to twenty nodes."""
    adj: dict[str, list[str]] = defaultdict(list)
    for edge in graph.links:
        if edge.relation == "calls":
            adj[edge.source].append(edge.target)

    node_ids = [n.id for n in graph.nodes]
    valid = set(node_ids)
    candidates: list[HyperedgeCandidate] = []

    def walk(current: str, visited: set[str], chain: list[str]) -> None:
        visited.add(current)
        for neighbor in adj.get(current, ()):
            if neighbor not in valid or neighbor in visited:
                continue
            chain.append(neighbor)
            if MIN_NODES <= len(chain) <= MAX_NODES:
                candidates.append(
                    HyperedgeCandidate(
                        id=f"chain_{len(candidates)}",
                        label=f"Call Chain ({len(chain)})",
                        nodes=list(chain),
                        relation="call_chain",
                        confidence=Confidence.EXTRACTED,
                        source_file=_first_file(chain, graph),
                        score=calculate_chain_cohesion(chain, graph),
                    )
                )
            if len(chain) < MAX_NODES:
                walk(neighbor, visited, chain)
            chain.pop()
        visited.discard(current)

    for start in node_ids:
        walk(start, set(), [start])

    return candidates


def detect_config_patterns(graph: GraphData) -> list[HyperedgeCandidate]:
    """Group nodes that come from configuration files of the same kind."""
    by_ext: dict[str, list[Node]] = defaultdict(list)
    for node in graph.nodes:
        ext = _extension(node.source_file)
        if ext:
            by_ext[ext].append(node)

    candidates = []
    for ext in _CONFIG_EXTENSIONS:
        nodes = by_ext.get(ext)
        if not nodes or not MIN_NODES <= len(nodes) <= MAX_NODES:
            continue
        node_ids = [n.id for n in nodes]
        candidates.append(
            HyperedgeCandidate(
                id=f"config_{ext}",
                label=f"Config files (.{ext})",
                nodes=node_ids,
                relation="config_group",
                confidence=Confidence.INFERRED,
                source_file=nodes[0].source_file,
                score=calculate_cohesion(node_ids, graph),
            )
        )
    return candidates


def detect_directory_groups(graph: GraphData) -> list[HyperedgeCandidate]:
    """Group nodes whose files share a parent directory (six nodes or more)."""
    by_dir: dict[str, list[Node]] = defaultdict(list)
    for node in graph.nodes:
        parts = PurePath(node.source_file).parent.parts
        directory = parts[-1] if parts else "root"
        if directory == "root" or directory.startswith((".", "/")):
            continue
        by_dir[directory].append(node)

    candidates = []
    for directory, nodes in by_dir.items():
        if len(nodes) < MIN_NODES * 2:
            continue
        parents = {str(PurePath(n.source_file).parent) for n in nodes}
        if len(parents) != 1:
            continue
        node_ids = [n.id for n in nodes]
        candidates.append(
            HyperedgeCandidate(
                id=f"dir_{directory.lower()}",
                label=f"{directory} directory",
                nodes=node_ids,
                relation="directory_module",
                confidence=Confidence.INFERRED,
                source_file=nodes[0].source_file,
                score=calculate_cohesion(node_ids, graph),
            )
        )
    return candidates


def calculate_cohesion(node_ids: list[str], graph: GraphData) -> float:
    """Internal edges divided by all edges touching the group; 0.5 if none."""
    members = set(node_ids)
    internal = external = 0
    for edge in graph.links:
        src_in = edge.source in members
        tgt_in = edge.target in members
        if src_in and tgt_in:
            internal += 1
        elif src_in or tgt_in:
            external += 1
    total = internal + external
    if total == 0:
        return 0.5
    return internal / total


def calculate_chain_cohesion(chain: list[str], graph: GraphData) -> float:
    """Share of consecutive chain links present in the graph, plus a same-file bonus."""
    expected = max(len(chain) - 1, 0)
    if expected == 0:
        return 0.5

    pairs = {(e.source, e.target) for e in graph.links}
    present = sum(
        1
        for src, tgt in zip(chain, chain[1:])
        if (src, tgt) in pairs or (tgt, src) in pairs
    )
    edge_score = present / expected

    by_id: dict[str, Node] = {}
    for node in graph.nodes:
        by_id.setdefault(node.id, node)
    first = by_id.get(chain[0])
    last = by_id.get(chain[-1])
    bonus = 0.1 if first and last and first.source_file == last.source_file else 0.0

    return min(edge_score + bonus, 1.0)


def _first_file(node_ids: list[str], graph: GraphData) -> str:
    for node_id in node_ids:
        for node in graph.nodes:
            if node.id == node_id:
                return node.source_file
    return ""


def process_candidates(candidates: list[HyperedgeCandidate]) -> list[Hyperedge]:
    """Drop duplicate node sets and weak or badly sized groups; sort by score."""
    seen: set[str] = set()
    unique = []
    for candidate in candidates:
        key = "|".join(sorted(candidate.nodes))
        if key in seen:
            continue
        seen.add(key)
        unique.append(candidate)

    kept = [
        c
        for c in unique
        if c.score >= MIN_SCORE and MIN_NODES <= len(c.nodes) <= MAX_NODES
    ]
    kept.sort(key=lambda c: c.score, reverse=True)
    return [c.into_hyperedge() for c in kept]