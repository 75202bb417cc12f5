"""Core graph data types: nodes, edges, hyperedges and containers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Confidence(str, Enum):
    """How certain a relationship is."""

    EXTRACTED = "EXTRACTED"
    INFERRED = "INFERRED"
    AMBIGUOUS = "AMBIGUOUS"

    def default_score(self) -> float:
        """Numeric score used when an edge is created without an explicit one."""
        return _DEFAULT_SCORES[self]


_DEFAULT_SCORES = {
    Confidence.EXTRACTED: 1.0,
    Confidence.INFERRED: 0.75,
    Confidence.AMBIGUOUS: 0.2,
}


class FileType(str, Enum):
    """Kind of file or artefact a node comes from."""

    CODE = "code"
    MARKDOWN = "markdown"
    BINARY = "binary"
    RATIONALE = "rationale"


@dataclass
class Node:
    """A single entity in the knowledge graph."""

    id: str
    label: str
    source_file: str
    source_location: str
    community: int | None = None
    node_type: str | None = None
    file_type: FileType | None = None
    file_stem: str | None = None


@dataclass
class Edge:
    """A directed relationship between two nodes."""

    source: str
    target: str
    relation: str
    confidence: Confidence
    confidence_score: float | None = None
    source_file: str = ""
    note: str | None = None

    def __post_init__(self) -> None:
        if self.confidence_score is None:
            self.confidence_score = self.confidence.default_score()

    @classmethod
    def with_details(
        cls,
        source: str,
        target: str,
        relation: str,
        confidence: Confidence,
        confidence_score: float,
        source_file: str,
        note: str | None,
    ) -> Edge:
        """Create an edge with every field given explicitly."""
        return cls(
            source=source,
            target=target,
            relation=relation,
            confidence=confidence,
            confidence_score=confidence_score,
            source_file=source_file,
            note=note,
        )


@dataclass
class Hyperedge:
    """A group of nodes that work together."""

    id: str
    label: str
    nodes: list[str]
    relation: str
    confidence: Confidence
    confidence_score: float
    source_file: str


@dataclass
class ExtractionResult:
    """Nodes and edges extracted from one or more files."""

    nodes: list[Node] = field(default_factory=list)
    links: list[Edge] = field(default_factory=list)
    hyperedges: list[Hyperedge] = field(default_factory=list)

    def add_node(self, node: Node) -> None:
        """Append a node."""
        self.nodes.append(node)

    def add_edge(self, edge: Edge) -> None:
        """Append an edge."""
        self.links.append(edge)


@dataclass
class GraphMetadata:
    """Summary counts for a graph."""

    total_nodes: int
    total_edges: int
    communities: int


@dataclass
class GraphData:
    """A complete graph with its metadata."""

    nodes: list[Node] = field(default_factory=list)
    links: list[Edge] = field(default_factory=list)
    hyperedges: list[Hyperedge] = field(default_factory=list)
    metadata: GraphMetadata = field(default_factory=lambda: GraphMetadata(0, 0, 0))

    @classmethod
    def create(cls, nodes: list[Node], links: list[Edge], communities: int) -> GraphData:
        """Build a graph whose metadata counts the given nodes and links."""
        nodes = list(nodes)
        links = list(links)
        return cls(
            nodes=nodes,
            links=links,
            hyperedges=[],
            metadata=GraphMetadata(len(nodes), len(links), communities),
        )