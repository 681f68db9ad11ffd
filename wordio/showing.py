#!/usr/bin/env python3

from typing import TextIO, Collection
import sys
import logging

from wordsearch.generate import Puzzle
from wordsearch.grid import Cell


_log = logging.getLogger(__name__)


def to_text(puzzle: Puzzle, newline: str="\n", spacer: str=" ", highlight: Collection[Cell]=None, hidden: str='.') -> str:
    """Return the grid as text, one row per line.

    If highlight is given, letters outside those cells are replaced by the hidden character.
    """
    lines = []
    for y, row in enumerate(puzzle.grid):
        if highlight is not None:
            row = ''.join(letter if Cell(x, y) in highlight else hidden for x, letter in enumerate(row))
        lines.append(spacer.join(row))
    return newline.join(lines) + newline


def show(puzzle: Puzzle, ofile: TextIO=sys.stdout, category: str=None, requested: int=None):
    if category:
        print(f"category: {category}", file=ofile)
    print(to_text(puzzle), file=ofile)
    print("words to find:", file=ofile)
    for word in puzzle.words:
        print(f"  {word}", file=ofile)
    if requested is not None and requested > len(puzzle.words):
        dropped = requested - len(puzzle.words)
        _log.warning("%d of %d requested words could not be placed", dropped, requested)
        print(f"({dropped} requested words did not fit)", file=ofile)
