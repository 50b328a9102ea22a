"""Wall-following and breadth-first walks through a character grid maze."""

from collections import deque
from collections.abc import Iterable
from typing import Optional

Cell = tuple[int, int]

WALL = "#"
START = "S"
EXIT = "E"

# West, north, east, south as (row, column) offsets.
_DIRECTIONS: tuple[Cell, ...] = ((0, -1), (-1, 0), (0, 1), (1, 0))


class Maze:
    """A rectangular grid with walls, one start cell and one exit cell."""

    def __init__(self, grid: Iterable[str], start: Cell, end: Cell) -> None:
        self.grid = tuple(grid)
        self.height = len(self.grid)
        self.width = len(self.grid[0]) if self.grid else 0
        if any(len(row) != self.width for row in self.grid):
            raise ValueError("maze rows must all have the same width")
        for cell in (start, end):
            if not self._inside(*cell):
                raise ValueError(f"cell {cell} lies outside the maze")
        self.start = start
        self.end = end

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "Maze":
        """Build a maze from text rows marked with ``S`` for start and ``E`` for exit."""
        grid = [line.rstrip("\r\n") for line in lines]
        start: Optional[Cell] = None
        end: Optional[Cell] = None
        for row, text in enumerate(grid):
            for col, char in enumerate(text):
                if char == START:
                    start = (row, col)
                elif char == EXIT:
                    end = (row, col)
        if start is None:
            raise ValueError("maze has no start cell")
        if end is None:
            raise ValueError("maze has no exit cell")
        return cls(grid, start, end)

    def _inside(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def _open(self, row: int, col: int) -> bool:
        return self._inside(row, col) and self.grid[row][col] != WALL

    def _follow(self, turn_when_blocked: int, turn_after_step: int) -> int:
        row, col = self.start
        direction = 0
        cells = 1
        seen: set[tuple[int, int, int]] = set()
        while (row, col) != self.end:
            state = (row, col, direction)
            if state in seen:
                raise ValueError("exit cannot be reached by following the wall")
            seen.add(state)
            d_row, d_col = _DIRECTIONS[direction]
            n_row, n_col = row + d_row, col + d_col
            if not self._open(n_row, n_col):
                direction = (direction + turn_when_blocked) % 4
                continue
            cells += 1
            row, col = n_row, n_col
            direction = (direction + turn_after_step) % 4
        return cells

    def follow_left(self) -> int:
        """Count the cells entered, start included, keeping a hand on the left wall."""
        return self._follow(1, 3)

    def follow_right(self) -> int:
        """Count the cells entered, start included, keeping a hand on the right wall."""
        return self._follow(3, 1)

    def shortest_path(self) -> int:
        """Return the number of cells on a shortest route from start to exit, both included."""
        cells = {self.start: 1}
        queue = deque([self.start])
        while queue:
            current = queue.popleft()
            if current == self.end:
                return cells[current]
            row, col = current
            for d_row, d_col in _DIRECTIONS:
                nxt = (row + d_row, col + d_col)
                if self._open(*nxt) and nxt not in cells:
                    cells[nxt] = cells[current] + 1
                    queue.append(nxt)
        raise ValueError("exit cannot be reached from the start")