"""Double-buffered toroidal board for Conway's Game of Life."""

import logging
from typing import Optional, Tuple

import numpy as np
import torch
import torch.nn.functional as F

logger = logging.getLogger(__name__)

DEFAULT_ALIVE_PROBABILITY = 0.25


def clamp_probability(probability: float) -> float:
    """Clamp a probability into [0.0, 1.0]."""
    return min(1.0, max(0.0, float(probability)))


class Board:
    """Game of Life board on a torus.

    Cells are stored row-major (``index = y * width + x``) in two boolean
    buffers of identical length. One buffer holds the current generation,
    the other is scratch space for ``step()``; the roles swap after every
    step by flipping a slot index, so no cells are ever copied.
    """

    def __init__(
        self,
        width: int,
        height: int,
        initial_probability: float = DEFAULT_ALIVE_PROBABILITY,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        """Initialize a new board with a random first generation.

        Args:
            width: Number of columns (0 gives an inert, empty board)
            height: Number of rows (0 gives an inert, empty board)
            initial_probability: Chance each cell starts alive
            rng: Optional numpy random generator, for reproducible seeding

        Raises:
            TypeError: If width or height is not an integer
            ValueError: If width or height is negative
        """
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

        self.width = int(width)
        self.height = int(height)
        self.running = True
        self._rng = rng if rng is not None else np.random.default_rng()
        self._generation = 0

        # Two-slot arena: _slot selects the current generation
        self._buffers = (
            np.zeros(self.size, dtype=bool),
            np.zeros(self.size, dtype=bool),
        )
        self._slot = 0

        self._kernel = (
            torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
        )

        self.randomize(initial_probability)
        logger.debug("Created %dx%d board (population %d)", self.width, self.height, self.population)

    @property
    def size(self) -> int:
        """Total number of cells."""
        return self.width * self.height

    @property
    def shape(self) -> Tuple[int, int]:
        """Board dimensions as (width, height)."""
        return (self.width, self.height)

    @property
    def generation(self) -> int:
        """Number of generations advanced since creation."""
        return self._generation

    @property
    def _current(self) -> np.ndarray:
        return self._buffers[self._slot]

    @property
    def _scratch(self) -> np.ndarray:
        return self._buffers[1 - self._slot]

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the current generation, row-major."""
        view = self._current.view()
        view.flags.writeable = False
        return view

    @property
    def population(self) -> int:
        """Number of living cells."""
        return int(np.count_nonzero(self._current))

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Coordinates ({x}, {y}) out of bounds for {self.width}x{self.height} board")
        return y * self.width + x

    def is_alive(self, x: int, y: int) -> bool:
        """Get the state of a cell in the current generation.

        Returns:
            True if cell is alive, False if dead (always False on an empty board)

        Raises:
            IndexError: If coordinates are outside the board
        """
        if self.size == 0:
            return False
        return bool(self._current[self._index(x, y)])

    def set_alive(self, x: int, y: int, alive: bool) -> None:
        """Set the state of a cell in the current generation.

        Raises:
            IndexError: If coordinates are outside the board
        """
        self._current[self._index(x, y)] = bool(alive)

    def neighbor_count(self, x: int, y: int) -> int:
        """Count living neighbors of a cell, wrapping around every edge.

        Args:
            x: Column coordinate
            y: Row coordinate

        Returns:
            Number of living neighbors (0-8)

        Raises:
            IndexError: If coordinates are outside the board
        """
        if self.size == 0:
            return 0
        self._index(x, y)

        cells = self._current
        count = 0
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue
                nx = (x + dx + self.width) % self.width
                ny = (y + dy + self.height) % self.height
                count += int(cells[ny * self.width + nx])
        return count

    def neighbor_counts(self) -> np.ndarray:
        """Count neighbors for all cells using a circular-padded convolution.

        Returns:
            Array of shape (height, width) with the neighbor count of each cell
        """
        if self.size == 0:
            return np.zeros((self.height, self.width), dtype=np.int8)

        grid = torch.from_numpy(self._current.reshape(self.height, self.width).astype(np.float32))
        padded = F.pad(grid.unsqueeze(0).unsqueeze(0), (1, 1, 1, 1), mode="circular")
        neighbors = F.conv2d(padded, self._kernel)
        return neighbors[0, 0].numpy().astype(np.int8)

    def step(self) -> None:
        """Advance the board by one generation.

        A live cell survives with 2 or 3 neighbors, a dead cell is born with
        exactly 3; every other cell is dead in the next generation.
        """
        if self.size == 0:
            return

        counts = self.neighbor_counts().ravel()
        current = self._current
        scratch = self._scratch

        np.logical_and(current, counts == 2, out=scratch)
        np.logical_or(scratch, counts == 3, out=scratch)

        self._slot = 1 - self._slot
        self._generation += 1

    def randomize(self, probability: float = DEFAULT_ALIVE_PROBABILITY) -> None:
        """Resample every cell independently.

        Args:
            probability: Chance each cell will be alive, clamped to [0.0, 1.0]
        """
        p = clamp_probability(probability)
        if p != probability:
            logger.debug("Clamped alive probability %r to %.2f", probability, p)
        np.less(self._rng.random(self.size), p, out=self._current)
        logger.debug("Randomized board with p=%.2f (population %d)", p, self.population)

    def clear(self) -> None:
        """Clear all cells (set all to dead)."""
        self._current.fill(False)
        logger.debug("Cleared board")

    def __str__(self) -> str:
        """String representation showing living cells as '*' and dead as '.'."""
        rows = self._current.reshape(self.height, self.width)
        return "\n".join("".join("*" if alive else "." for alive in row) for row in rows)
