"""Island counting and measuring on grids of land and water."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterator, Sequence

_STEPS = ((0, 1), (0, -1), (1, 0), (-1, 0))


def _islands(
    grid: Sequence[Sequence[Hashable]], is_land: Callable[[Hashable], bool]
) -> Iterator[int]:
    """Yield the area of each island, scanning row by row."""
    land = {
        (r, c)
        for r, row in enumerate(grid)
        for c, cell in enumerate(row)
        if is_land(cell)
    }
    for r, row in enumerate(grid):
        for c, _ in enumerate(row):
            if (r, c) not in land:
                continue
            land.discard((r, c))
            stack = [(r, c)]
            area = 0
            while stack:
                cr, cc = stack.pop()
                area += 1
                for dr, dc in _STEPS:
                    neighbour = (cr + dr, cc + dc)
                    if neighbour in land:
                        land.discard(neighbour)
                        stack.append(neighbour)
            yield area


def max_area_of_island(grid: Sequence[Sequence[int]]) -> int:
    """Return the largest number of 1 cells joined edge to edge, or 0."""
    return max(_islands(grid, lambda cell: cell == 1), default=0)


def num_islands(grid: Sequence[Sequence[str]]) -> int:
    """Count the groups of '1' cells joined edge to edge."""
    return sum(1 for _ in _islands(grid, lambda cell: cell == "1"))