"""Sparse binary grid for Langton's ant simulation."""

from typing import Dict, Iterator, Tuple


class GridStore:
    """
    Unbounded two-state grid backed by a coordinate-keyed dict.

    Coordinate convention: (x, y) with y growing downwards (screen space).
    Cells that were never written read as 0. Written cells are never
    dropped, so the visited set only grows until clear().
    """

    def __init__(self):
        self._cells: Dict[Tuple[int, int], int] = {}

    def get(self, x: int, y: int) -> int:
        """Return the cell value, 0 if the cell was never written."""
        return self._cells.get((x, y), 0)

    def set(self, x: int, y: int, value: int) -> None:
        """Write a cell; any truthy value is stored as 1."""
        self._cells[(x, y)] = 1 if value else 0

    def flip(self, x: int, y: int) -> int:
        """Toggle a cell and return the value it held before."""
        old = self.get(x, y)
        self._cells[(x, y)] = 1 - old
        return old

    def clear(self) -> None:
        """Forget every visited cell."""
        self._cells.clear()

    def cells(self) -> Iterator[Tuple[int, int, int]]:
        """
        Yield (x, y, value) for every visited cell.

        Order is unspecified. Each call starts a fresh pass.
        """
        for (x, y), value in self._cells.items():
            yield x, y, value

    def copy_cells(self) -> Dict[Tuple[int, int], int]:
        """Detached copy of the visited cells for snapshots."""
        return dict(self._cells)

    def count_set(self) -> int:
        """Number of visited cells currently holding 1."""
        return sum(self._cells.values())

    def bounds(self) -> Tuple[int, int, int, int]:
        """Return (min_x, min_y, max_x, max_y) of visited cells."""
        if not self._cells:
            return 0, 0, 0, 0
        xs = [x for x, _ in self._cells]
        ys = [y for _, y in self._cells]
        return min(xs), min(ys), max(xs), max(ys)

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, pos: Tuple[int, int]) -> bool:
        return pos in self._cells
