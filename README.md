# garfield

garfield holds the pieces of a source-code knowledge graph: definitions
(functions, classes, methods, structs and so on) are nodes, and calls and
imports between them are edges. On such a graph it can group nodes into
communities and detect hyperedges, which are groups of three or more nodes
that belong together.

It is a plain library with no runtime dependencies.

## Modules

- `garfield.model`: the graph data types. These are `Node`, `Edge`,
  `Hyperedge`, `ExtractionResult`, `GraphMetadata` and `GraphData`, plus the
  `Confidence` and `FileType` enums. An edge's confidence is `EXTRACTED`,
  `INFERRED` or `AMBIGUOUS`. If an edge is built without a score, it gets
  1.0, 0.75 or 0.2 to match. `Edge.with_details(...)` sets every field
  explicitly. `GraphData.create(nodes, links, communities)` fills in the
  metadata counts.
- `garfield.lang`: the table of supported languages (`LANG_CONFIGS`,
  `LangConfig`). Each entry gives the language's extensions, its comment
  style, and the syntax node kinds it uses for imports and definitions. The
  table covers rust, python, ruby, java, go, javascript, typescript, c, cpp,
  scala, lua, php, bash, zig, elixir, kotlin and swift. Two helpers work on
  it: `get_extension_lang(ext)` maps an extension without the dot to a
  language name, and `all_definition_kinds()` lists every definition kind.
- `garfield.scan`: line-based extraction and per-file state.
  - `simple_extract(source, file_path)` looks for keywords such as `def `,
    `fn `, `class `, `struct ` and `interface `. It records the identifier
    that follows as a node with id `<file stem>:<name>` and location
    `L<line>`.
  - `extract_name_from_line(line, keyword)` returns that identifier.
  - `make_import_node_id(module)` turns a module name into a lower-case id
    with `_` in place of separators.
  - `extract_go_import(text)` strips quotes from a Go import path.
  - `ExtractContext` tracks the known node ids and rationale keys for one
    file.
- `garfield.leiden`: `leiden_communities(n, edges)` takes a weighted edge
  list of index triples. It assigns nodes to communities by greedy local
  moves that raise modularity, running up to 10 rounds. Communities are
  renumbered so that the largest is 0. A graph with no edge weight puts
  every node in its own community.
- `garfield.hyperedge`: `detect_hyperedges(graph)` finds candidate groups
  and keeps the best of them. It groups nodes by source file, by call chain
  (`calls` edges), by configuration file type (yaml, yml, json, toml, tf,
  dockerfile) and by parent directory. Each detector is also available on
  its own. So are `calculate_cohesion`, `calculate_chain_cohesion` and
  `process_candidates`.

## Example

```python
from garfield.model import Confidence, Edge, ExtractionResult, GraphData, Node
from garfield.hyperedge import detect_hyperedges
from garfield.leiden import leiden_communities
from garfield.scan import simple_extract

result = ExtractionResult()
for name in ("create_order", "save_order", "send_confirmation"):
    result.add_node(Node(f"order:{name}", name, "order.py", "L1"))
result.add_edge(Edge("order:create_order", "order:save_order", "calls", Confidence.EXTRACTED))
result.add_edge(Edge("order:save_order", "order:send_confirmation", "calls", Confidence.EXTRACTED))

graph = GraphData.create(result.nodes, result.links, 1)
for hyperedge in detect_hyperedges(graph):
    print(hyperedge.label, hyperedge.nodes, hyperedge.confidence_score)

print(leiden_communities(4, [(0, 1, 1.0), (2, 3, 1.0)]))  # [0, 0, 1, 1]

found = simple_extract("def hello():\n    pass\n", "pkg/test.py")
print([(n.id, n.source_location) for n in found.nodes])  # [('test:hello', 'L1')]
```

## Hyperedge rules

- A hyperedge holds between 3 and 20 nodes.
- Its cohesion score must be at least 0.3. The score is the share of the
  edges touching the group that stay inside it, or 0.5 when no edge touches
  it. For call chains, the score is the share of links present, plus 0.1
  when the first and last nodes share a file, capped at 1.0.
- Groups with the same set of nodes are kept once, the first one found.
- The result is ordered from the highest score down.

## What it does not do

- It does not parse source files into syntax trees. The only extraction in
  the package is the keyword-based `simple_extract`. That function finds no
  calls, imports, docstrings or rationale comments.
- It does not read files from disk or walk directories.
- It does not save or load graphs, and it writes no reports.
- It has no command-line interface.