#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from typing import Optional, Sequence, Tuple, List

from wordsearch.grid import Cell
from wordsearch.generate import PlacedWord


def _same_cells(cells: Sequence[Cell], path: Sequence[Tuple[int, int]]) -> bool:
    for cell, (x, y) in zip(cells, path):
        if cell.x != x or cell.y != y:
            return False
    return True


def check_word(path: Sequence[Tuple[int, int]], placed_words: Sequence[PlacedWord]) -> Optional[PlacedWord]:
    """Return the first placed word whose cells equal the path read forward or backward."""
    path = list(path)
    for pw in placed_words:
        if len(pw.cells) != len(path):
            continue
        if _same_cells(pw.cells, path):
            return pw
        if _same_cells(pw.cells, path[::-1]):
            return pw
    return None


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


class Selection(object):
    """Path of cells picked one at a time, kept straight and contiguous."""

    def __init__(self):
        self._cells: List[Cell] = []

    @property
    def cells(self) -> Tuple[Cell, ...]:
        return tuple(self._cells)

    def __len__(self):
        return len(self._cells)

    def clear(self):
        self._cells = []

    def start(self, cell: Tuple[int, int]):
        self._cells = [Cell(*cell)]

    def accepts(self, cell: Tuple[int, int]) -> bool:
        if not self._cells:
            return True
        cell = Cell(*cell)
        if cell in self._cells:
            return False
        first, last = self._cells[0], self._cells[-1]
        dx, dy = cell.x - last.x, cell.y - last.y
        if abs(dx) > 1 or abs(dy) > 1:
            return False
        if len(self._cells) >= 2:
            if dx != _sign(last.x - first.x) or dy != _sign(last.y - first.y):
                return False
        return True

    def extend(self, cell: Tuple[int, int]) -> bool:
        if not self.accepts(cell):
            return False
        self._cells.append(Cell(*cell))
        return True

    @staticmethod
    def between(start: Tuple[int, int], end: Tuple[int, int]) -> Optional[Tuple[Cell, ...]]:
        """Return the straight line of cells from start to end, or None if they share no row, column or diagonal."""
        start, end = Cell(*start), Cell(*end)
        dx, dy = end.x - start.x, end.y - start.y
        if dx != 0 and dy != 0 and abs(dx) != abs(dy):
            return None
        steps = max(abs(dx), abs(dy))
        ux, uy = _sign(dx), _sign(dy)
        return tuple(Cell(start.x + i * ux, start.y + i * uy) for i in range(steps + 1))
