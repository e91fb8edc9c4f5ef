"""
Path reconstruction from a parent map.
"""

from __future__ import annotations

from collections.abc import Mapping


def reconstruct_path(
    parents: Mapping[str, str | None], start: str, node: str
) -> tuple[str, ...]:
    """
    Follow parent links from node back to start.

    Stops at start, at a node with no parent, or on a cycle in the parent map.

    Args:
        parents: Maps node id to parent id (None for no parent)
        start: Id the path must begin with
        node: Id the path ends with

    Returns:
        Tuple from start to node, or () when the chain does not reach start
    """
    path: list[str] = []
    seen: set[str] = set()
    current: str | None = node

    while current is not None and current not in seen:
        path.append(current)
        if current == start:
            break
        seen.add(current)
        current = parents.get(current)

    if not path or path[-1] != start:
        return ()
    path.reverse()
    return tuple(path)
