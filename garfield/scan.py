"""Per-file extraction state and text-based fallback extraction."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePath

from garfield.model import ExtractionResult, Node

_SIMPLE_PATTERNS = (
    ("fn ", "function"),
    ("func ", "function"),
    ("def ", "function"),
    ("class ", "class"),
    ("struct ", "struct"),
    ("interface ", "interface"),
    ("pub fn", "function"),
    ("pub func", "function"),
)


def _file_stem(file_path: str) -> str:
    return PurePath(file_path).stem or "unknown"


def _lines(text: str) -> list[str]:
    """Split text into lines on ``\\n``, dropping a trailing ``\\r`` from each."""
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


@dataclass
class ExtractContext:
    """State shared by the passes that extract one file."""

    file_path: str
    source: bytes = b""
    file_stem: str = field(init=False)
    known_nodes: set[str] = field(init=False, default_factory=set)
    rationale_seen: set[str] = field(init=False, default_factory=set)

    def __post_init__(self) -> None:
        if isinstance(self.source, str):
            self.source = self.source.encode("utf-8")
        else:
            self.source = bytes(self.source)
        self.file_stem = _file_stem(self.file_path)

    def add_known_node(self, node_id: str) -> None:
        """Record a node id as defined."""
        self.known_nodes.add(node_id)

    def is_known(self, node_id: str) -> bool:
        """Whether a node id has been recorded."""
        return node_id in self.known_nodes

    def has_rationale(self, key: str) -> bool:
        """Whether a rationale key has already been produced."""
        return key in self.rationale_seen

    def add_rationale(self, key: str) -> None:
        """Record a rationale key."""
        self.rationale_seen.add(key)


def extract_name_from_line(line: str, keyword: str) -> str:
    """Return the identifier that directly follows ``keyword`` in ``line``, or ''."""
    pos = line.find(keyword)
    if pos < 0:
        return ""
    name_chars = []
    for char in line[pos + len(keyword):]:
        if not (char.isalnum() or char == "_"):
            break
        name_chars.append(char)
    return "".join(name_chars)


def simple_extract(source: str, file_path: str) -> ExtractionResult:
    """Find definition-like lines by keyword when no parser is available."""
    result = ExtractionResult()
    stem = _file_stem(file_path)
    for lineno, line in enumerate(_lines(source), start=1):
        for pattern, _kind in _SIMPLE_PATTERNS:
            if pattern not in line:
                continue
            name = extract_name_from_line(line, pattern)
            if name:
                result.add_node(Node(f"{stem}:{name}", name, stem, f"L{lineno}"))
    return result


def make_import_node_id(module: str) -> str:
    """Normalise an imported module name into a node id."""
    cleaned = module.strip().lstrip(".")
    for separator in ("\\", "/", "."):
        cleaned = cleaned.replace(separator, "_")
    return cleaned.lower()


def extract_go_import(text: str) -> str:
    """Strip whitespace and surrounding quotes from a Go import path literal."""
    return text.strip().strip('"')