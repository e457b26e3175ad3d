"""
Helpers shared by the graph algorithms.
"""

from typing import Dict, Hashable, Iterable, List, Optional


def node_names(nodes: Iterable) -> List[Hashable]:
    """
    Names of ``nodes`` in the given order.

    Example:
        >>> from pathgraph.graphs import Node
        >>> node_names([Node("A"), Node("B")])
        ['A', 'B']
    """
    return [node.name for node in nodes]


def reconstruct_path(
    previous: Dict[Hashable, Optional[Hashable]], target: Hashable
) -> Optional[List[Hashable]]:
    """
    Walk a predecessor map back from ``target`` to the source.

    ``previous[key]`` is the key before ``key`` on a shortest path, or None
    for the source and for unreached keys.

    Args:
        previous: Predecessor map produced by a shortest-path run.
        target: Key to reconstruct the path to.

    Returns:
        Keys from source to target (inclusive), ``[target]`` if target is a
        key with no predecessor, or None if target is not in the map.

    Raises:
        ValueError: If the predecessor links form a cycle.

    Example:
        >>> reconstruct_path({'A': None, 'B': 'A', 'C': 'B'}, 'C')
        ['A', 'B', 'C']
        >>> reconstruct_path({'A': None}, 'D') is None
        True
    """
    if target not in previous:
        return None

    path = [target]
    seen = {target}
    current = previous[target]
    while current is not None:
        if current in seen:
            raise ValueError(f"Predecessor map has a cycle through {current!r}")
        seen.add(current)
        path.append(current)
        current = previous.get(current)

    path.reverse()
    return path
