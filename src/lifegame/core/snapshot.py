"""Read-only views of a board for renderers."""

from typing import Iterator, List, Protocol, Tuple

import numpy as np

from .board import Board


class CellSource(Protocol):
    """Anything a renderer can poll: dimensions plus a cell query."""

    width: int
    height: int

    def is_alive(self, x: int, y: int) -> bool:
        ...


class BoardSnapshot:
    """Immutable copy of one generation.

    Renderers may hold on to a snapshot across frames; later steps of the
    board do not affect it.
    """

    def __init__(self, cells: np.ndarray, width: int, height: int, generation: int = 0, running: bool = True) -> None:
        """Initialize a snapshot.

        Args:
            cells: Row-major boolean cells of length width * height
            width: Number of columns
            height: Number of rows
            generation: Generation the cells belong to
            running: Whether the board was running when captured

        Raises:
            ValueError: If the cell count doesn't match the dimensions
        """
        if cells.size != width * height:
            raise ValueError(f"Expected {width * height} cells for {width}x{height}, got {cells.size}")

        self.width = width
        self.height = height
        self.generation = generation
        self.running = running
        self._cells = np.array(cells, dtype=bool).ravel()
        self._cells.flags.writeable = False

    @classmethod
    def capture(cls, board: Board) -> "BoardSnapshot":
        """Copy the current generation of a board."""
        return cls(board.cells, board.width, board.height, board.generation, board.running)

    @property
    def cells(self) -> np.ndarray:
        return self._cells

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.width, self.height)

    @property
    def population(self) -> int:
        return int(np.count_nonzero(self._cells))

    def is_alive(self, x: int, y: int) -> bool:
        """Get the state of a cell.

        Raises:
            IndexError: If coordinates are outside the board
        """
        if self._cells.size == 0:
            return False
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Coordinates ({x}, {y}) out of bounds for {self.width}x{self.height} board")
        return bool(self._cells[y * self.width + x])

    def alive_cells(self) -> Iterator[Tuple[int, int]]:
        """Yield (x, y) for every living cell in row-major order."""
        for index in np.flatnonzero(self._cells):
            y, x = divmod(int(index), self.width)
            yield (x, y)

    def rows(self) -> List[List[bool]]:
        """Cells as a list of rows."""
        return self._cells.reshape(self.height, self.width).tolist()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoardSnapshot):
            return False
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __str__(self) -> str:
        """String representation showing living cells as '*' and dead as '.'."""
        return "\n".join("".join("*" if alive else "." for alive in row) for row in self.rows())
