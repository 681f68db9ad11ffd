#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import random
import logging
from typing import NamedTuple, Tuple, List, Sequence, Optional

import wordsearch
from wordsearch.grid import Cell, Direction, GridModel, DIRECTIONS

_log = logging.getLogger(__name__)


class PlacedWord(NamedTuple):

    word: str
    start: Cell
    direction: Direction
    cells: Tuple[Cell, ...]

    def length(self):
        return len(self.word)

    def __str__(self):
        return f"PlacedWord<{self.word} at {self.start} {self.direction.name}>"


class Puzzle(NamedTuple):

    grid: Tuple[str, ...]       # one string per row
    size: int
    words: Tuple[str, ...]      # placed words only, in placement order
    placed_words: Tuple[PlacedWord, ...]

    def letter(self, cell: Cell) -> str:
        return self.grid[cell.y][cell.x]

    def spell(self, cells: Sequence[Cell]) -> str:
        return ''.join(self.letter(Cell(*c)) for c in cells)


def prepare_words(words: Sequence[str], size: int) -> List[str]:
    """Normalize words, drop the ones that are empty or cannot fit, and sort longest first."""
    normalized = map(wordsearch.normalize, words)
    usable = [w for w in normalized if 0 < len(w) <= size]
    usable.sort(key=len, reverse=True)
    return usable


def can_place(grid: GridModel, word: str, start: Cell, direction: Direction) -> bool:
    for i, letter in enumerate(word):
        cell = direction.step(start, i)
        if not grid.in_bounds(cell):
            return False
        if not grid.is_empty(cell) and grid.value(cell) != letter:
            return False
    return True


def place(grid: GridModel, word: str, start: Cell, direction: Direction) -> PlacedWord:
    cells = []
    for i, letter in enumerate(word):
        cell = direction.step(start, i)
        grid.put(cell, letter)
        cells.append(cell)
    return PlacedWord(word, start, direction, tuple(cells))


def try_place(grid: GridModel, word: str, rng: random.Random) -> Optional[PlacedWord]:
    directions = list(DIRECTIONS)
    rng.shuffle(directions)
    for direction in directions:
        positions = list(grid.cells())
        rng.shuffle(positions)
        for start in positions:
            if can_place(grid, word, start, direction):
                return place(grid, word, start, direction)
    return None


def fill_empty(grid: GridModel, rng: random.Random, letters: str=wordsearch.FILL_LETTERS):
    for cell in grid.cells():
        if grid.is_empty(cell):
            grid.put(cell, rng.choice(letters))


def generate_puzzle(words: Sequence[str], size: int=wordsearch.DEFAULT_SIZE, rng: random.Random=None) -> Puzzle:
    """Place words on a square grid and fill the rest with noise letters.

    Words are placed longest first, each at the first valid spot in a random
    search order, and are never moved afterwards. A word with no valid spot
    is left out of the result; compare len(puzzle.words) to the request to
    detect that.
    """
    assert size > 0, "size must be positive"
    if rng is None:
        rng = random.Random()
    grid = GridModel.empty(size)
    placed_words: List[PlacedWord] = []
    for word in prepare_words(words, size):
        placed = try_place(grid, word, rng)
        if placed is None:
            _log.debug("no room for %s in %dx%d grid", word, size, size)
            continue
        placed_words.append(placed)
    fill_empty(grid, rng)
    return Puzzle(grid.freeze(), size, tuple(pw.word for pw in placed_words), tuple(placed_words))
