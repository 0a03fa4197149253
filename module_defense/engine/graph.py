"""Graph connectivity over modules and connections.

Modules are nodes, connections are undirected unweighted edges. All walks
are breadth-first with an explicit queue. Neighbours are visited in
ascending module id, so visitation order (and therefore every tie-break
that relies on it) depends only on topology.
"""

from collections import deque

from ..models.game import Game


def build_adjacency(game: Game) -> dict[int, list[int]]:
    """Build a neighbour list for every module.

    Connections whose endpoints no longer exist are ignored.

    Args:
        game: Current game state

    Returns:
        Mapping of module id to sorted neighbour ids (every module present,
        isolated modules map to an empty list)
    """
    adjacency: dict[int, set[int]] = {module_id: set() for module_id in game.modules}
    for connection in game.connections.values():
        if connection.a in adjacency and connection.b in adjacency:
            adjacency[connection.a].add(connection.b)
            adjacency[connection.b].add(connection.a)
    return {module_id: sorted(neighbours) for module_id, neighbours in adjacency.items()}


def bfs_distances(adjacency: dict[int, list[int]], source_id: int) -> dict[int, int]:
    """Compute hop distances from ``source_id`` to every reachable module.

    Unreachable modules get no entry. The returned dict is ordered by
    visitation, so iterating it yields modules in BFS encounter order.

    Args:
        adjacency: Neighbour lists from build_adjacency
        source_id: Module to start from

    Returns:
        Mapping of module id to hop distance (source maps to 0)

    Raises:
        KeyError: If source_id is not in the adjacency map
    """
    if source_id not in adjacency:
        raise KeyError(source_id)

    distances = {source_id: 0}
    queue = deque([source_id])
    while queue:
        current = queue.popleft()
        for neighbour in adjacency[current]:
            if neighbour not in distances:
                distances[neighbour] = distances[current] + 1
                queue.append(neighbour)
    return distances


def connected_component(adjacency: dict[int, list[int]], source_id: int) -> list[int]:
    """Return the ids of every module in the same component as ``source_id``.

    The list starts with the source and follows BFS encounter order.
    """
    return list(bfs_distances(adjacency, source_id))


def components(game: Game) -> list[list[int]]:
    """Partition all modules into maximal connected components.

    Components are listed in order of their lowest-created module.
    """
    adjacency = build_adjacency(game)
    seen: set[int] = set()
    result = []
    for module_id in game.modules:
        if module_id in seen:
            continue
        component = connected_component(adjacency, module_id)
        seen.update(component)
        result.append(component)
    return result
