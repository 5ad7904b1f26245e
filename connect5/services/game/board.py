from typing import List, Optional, Tuple

from connect5.models import DiscColor

ROWS = 6
COLUMNS = 9
WINNING_LENGTH = 5

# (row step, column step) for horizontal, vertical, "/" and "\" axes
AXES: Tuple[Tuple[int, int], ...] = (
    (0, 1),
    (1, 0),
    (-1, 1),
    (1, 1),
)


class Board:
    """Fixed 6x9 grid of discs with gravity-fill drops and five-in-a-row detection.

    Row 0 is the top of the board. A cell holds either ``None`` (empty) or the
    ``DiscColor`` dropped into it. The board knows nothing about players or turns.
    """

    def __init__(self, rows: int = ROWS, columns: int = COLUMNS, winning_length: int = WINNING_LENGTH):
        self.rows = rows
        self.columns = columns
        self.winning_length = winning_length
        self.grid: List[List[Optional[DiscColor]]] = []
        self.clear()

    def clear(self) -> None:
        self.grid = [[None] * self.columns for _ in range(self.rows)]

    def cell(self, row: int, column: int) -> Optional[DiscColor]:
        return self.grid[row][column]

    def drop(self, column: int, color: DiscColor) -> bool:
        """Place a disc in the lowest empty cell of ``column``.

        Returns False, leaving the grid untouched, when the column is full.
        Raises IndexError for a column outside the board.
        """
        if not 0 <= column < self.columns:
            raise IndexError(f"column {column} outside 0..{self.columns - 1}")
        for row in range(self.rows - 1, -1, -1):
            if self.grid[row][column] is None:
                self.grid[row][column] = color
                return True
        return False

    def is_full(self) -> bool:
        return all(cell is not None for cell in self.grid[0])

    def check_win(self, color: DiscColor) -> bool:
        for row in range(self.rows):
            for column in range(self.columns):
                if self.grid[row][column] is not color:
                    continue
                for d_row, d_col in AXES:
                    if self.run_length(row, column, d_row, d_col) >= self.winning_length:
                        return True
        return False

    def run_length(self, row: int, column: int, d_row: int, d_col: int) -> int:
        """Length of the contiguous run through (row, column) along one axis.

        Walks outward in both directions up to and including the board edge.
        """
        color = self.grid[row][column]
        if color is None:
            return 0
        count = 1
        for sign in (1, -1):
            r, c = row + sign * d_row, column + sign * d_col
            while 0 <= r < self.rows and 0 <= c < self.columns and self.grid[r][c] is color:
                count += 1
                r += sign * d_row
                c += sign * d_col
        return count

    def render(self) -> str:
        """Text snapshot: every cell bracketed, top row first, one row per line."""
        lines = []
        for row in self.grid:
            lines.append(''.join(f"[{cell.symbol if cell else ' '}]" for cell in row))
        return '\n'.join(lines) + '\n'

    def to_rows(self) -> List[List[Optional[str]]]:
        return [[cell.value if cell else None for cell in row] for row in self.grid]
