from __future__ import annotations

from typing import Any, Callable, Hashable, Iterable

from .queue import PriorityQueue


def astar(
    start: Hashable,
    goal: Hashable,
    neighbors: Callable[[Any], Iterable[Any]],
    heuristic: Callable[[Any, Any], int],
    *,
    cost: Callable[[Any, Any], int] = lambda a, b: 1,
    passable: Callable[[Any], bool] = lambda x: True,
) -> tuple[list | None, float]:
    """Generic A* over arbitrary node types. Returns (path_list, total_cost) or (None, inf) if no path.

    The path includes both ``start`` and ``goal``. The search stops as soon as
    ``goal`` is popped, which is only optimal for a consistent heuristic.
    """
    g: dict[Hashable, int] = {start: 0}
    came_from: dict[Hashable, Hashable] = {}
    closed: set[Hashable] = set()
    frontier: PriorityQueue[Hashable] = PriorityQueue()
    frontier.push(start, heuristic(start, goal))

    while frontier:
        current = frontier.pop()
        if current in closed:
            continue
        if current == goal:
            break
        closed.add(current)

        for nxt in neighbors(current):
            if nxt in closed or not passable(nxt):
                continue
            tentative = g[current] + int(cost(current, nxt))
            if tentative < g.get(nxt, tentative + 1):
                came_from[nxt] = current
                g[nxt] = tentative
                frontier.push(nxt, tentative + int(heuristic(nxt, goal)))

    if goal != start and goal not in came_from:
        return None, float("inf")

    node = goal
    rev = [node]
    while node in came_from:
        node = came_from[node]
        rev.append(node)
    rev.reverse()
    return rev, g[goal]
