"""Community detection by greedy local moves that increase modularity."""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Iterable

_MAX_ITERATIONS = 10
_MIN_GAIN = 1e-10


def leiden_communities(n: int, edges: Iterable[tuple[int, int, float]]) -> list[int]:
    """Assign each of ``n`` nodes to a community.

    ``edges`` holds ``(source, target, weight)`` triples with node indices in
    ``range(n)``. Communities are renumbered so that the largest gets 0.
    """
    if n == 0:
        return []

    edges = list(edges)
    total_weight = sum(weight for _, _, weight in edges)
    if total_weight == 0.0:
        return list(range(n))

    neighbors: dict[int, list[tuple[int, float]]] = defaultdict(list)
    node_weights = [0.0] * n
    for src, tgt, weight in edges:
        neighbors[src].append((tgt, weight))
        neighbors[tgt].append((src, weight))
        node_weights[src] += weight
        node_weights[tgt] += weight

    community = list(range(n))
    community_weights = list(node_weights)
    m = total_weight

    for _ in range(_MAX_ITERATIONS):
        moved = False
        for node in range(n):
            current_c = community[node]
            k_i = node_weights[node]
            if k_i == 0.0:
                continue

            comm_sums: dict[int, float] = {}
            current_comm_sum = 0.0
            for nbr, weight in neighbors.get(node, ()):
                nbr_c = community[nbr]
                if nbr_c == current_c:
                    current_comm_sum += weight
                comm_sums[nbr_c] = comm_sums.get(nbr_c, 0.0) + weight

            best_c = current_c
            best_gain = 0.0
            for c, weight_to_c in comm_sums.items():
                if c == current_c:
                    continue
                gain = (weight_to_c - current_comm_sum) / m - k_i * (
                    community_weights[c] - k_i
                ) / (m * m)
                if gain > best_gain:
                    best_gain = gain
                    best_c = c

            if best_c != current_c and best_gain > _MIN_GAIN:
                community_weights[current_c] -= k_i
                community_weights[best_c] += k_i
                community[node] = best_c
                moved = True

        if not moved:
            break

    counts = Counter(community)
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    renumber = {old_id: new_id for new_id, (old_id, _) in enumerate(ranked)}
    return [renumber[c] for c in community]