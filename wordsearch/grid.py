#
import math
from typing import List, NamedTuple, Tuple, Iterator


_EMPTY = ''


class Cell(NamedTuple):

    x: int
    y: int

    def __str__(self):
        return "({}, {})".format(self.x, self.y)


class Direction(NamedTuple):

    dx: int
    dy: int
    name: str

    def step(self, start: Cell, i: int) -> Cell:
        return Cell(start.x + i * self.dx, start.y + i * self.dy)


HORIZONTAL = Direction(1, 0, 'horizontal')
VERTICAL = Direction(0, 1, 'vertical')
DIRECTIONS = (HORIZONTAL, VERTICAL)


class GridModel(object):
    """Square letter buffer indexed by (x, y), where x is the column and y is the row.

    Only the code that generates a puzzle writes to an instance; the finished
    puzzle holds the output of freeze().
    """

    def __init__(self, rows: List[List[str]]):
        self.rows = rows
        self.size = len(rows)
        assert all(len(row) == self.size for row in rows), "grid must be square"

    @classmethod
    def empty(cls, size: int) -> 'GridModel':
        return GridModel([[_EMPTY] * size for _ in range(size)])

    @staticmethod
    def determine_size(grid_chars: str) -> int:
        num_squares = len(list(filter(lambda ch: ch not in "\r\n\t", grid_chars)))
        dim = math.sqrt(num_squares)
        assert round(dim) == dim
        return int(dim)

    @classmethod
    def build(cls, grid_chars: str, blank: str='_') -> 'GridModel':
        grid_chars = ''.join(filter(lambda ch: ch not in "\r\n\t", grid_chars))
        size = GridModel.determine_size(grid_chars)
        rows = []
        for y in range(size):
            row = []
            for x in range(size):
                val = grid_chars[y * size + x]
                row.append(_EMPTY if val == blank else val)
            rows.append(row)
        return GridModel(rows)

    def in_bounds(self, cell: Cell) -> bool:
        return 0 <= cell.x < self.size and 0 <= cell.y < self.size

    def value(self, cell: Cell) -> str:
        return self.rows[cell.y][cell.x]

    def put(self, cell: Cell, letter: str):
        self.rows[cell.y][cell.x] = letter

    def is_empty(self, cell: Cell) -> bool:
        return self.value(cell) == _EMPTY

    def cells(self) -> Iterator[Cell]:
        for y in range(self.size):
            for x in range(self.size):
                yield Cell(x, y)

    def to_text(self, newline="", blank='_'):
        cells = []
        for row in self.rows:
            for value in row:
                cells.append(blank if value == _EMPTY else value)
            cells.append(newline)
        return ''.join(cells)

    def freeze(self) -> Tuple[str, ...]:
        assert all(value != _EMPTY for row in self.rows for value in row), "cannot freeze a grid with empty cells"
        return tuple(''.join(row) for row in self.rows)
