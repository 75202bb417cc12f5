"""Knowledge-graph data types, language table, line-based extraction, community and hyperedge detection."""

__version__ = "0.2.0"