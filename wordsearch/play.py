#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import random
import logging
from typing import Optional, Sequence, Tuple, List, Set, FrozenSet

import wordsearch
from wordsearch.categories import Category, get_category, get_random_category, choose_words, DEFAULT_COUNT
from wordsearch.generate import Puzzle, PlacedWord, generate_puzzle
from wordsearch.grid import Cell
from wordsearch.match import check_word

_log = logging.getLogger(__name__)


class GameRound(object):

    def __init__(self, puzzle: Puzzle, category: Category=None):
        self.puzzle = puzzle
        self.category = category
        self._found: Set[str] = set()

    @property
    def found_words(self) -> FrozenSet[str]:
        return frozenset(self._found)

    def is_found(self, word: str) -> bool:
        return word in self._found

    def submit(self, path: Sequence[Tuple[int, int]]) -> Optional[PlacedWord]:
        """Check a path and record the word it spells if that word was not found yet.

        Returns the newly found word, or None for a miss or a repeat.
        """
        matched = check_word(path, self.puzzle.placed_words)
        if matched is None:
            return None
        if self.is_found(matched.word):
            _log.debug("%s already found", matched.word)
            return None
        self._found.add(matched.word)
        return matched

    def remaining(self) -> List[PlacedWord]:
        return [pw for pw in self.puzzle.placed_words if not self.is_found(pw.word)]

    def found_cells(self) -> Set[Cell]:
        cells = set()
        for pw in self.puzzle.placed_words:
            if self.is_found(pw.word):
                cells.update(pw.cells)
        return cells

    def is_won(self) -> bool:
        return len(self._found) == len(self.puzzle.words)


def new_round(category: str=None, size: int=wordsearch.DEFAULT_SIZE, count: int=DEFAULT_COUNT, rng: random.Random=None) -> GameRound:
    rng = rng or random.Random()
    chosen = get_random_category(rng) if category is None else get_category(category)
    words = choose_words(chosen, count, rng)
    puzzle = generate_puzzle(words, size, rng)
    if len(puzzle.words) < len(words):
        _log.warning("placed %d of %d %s words", len(puzzle.words), len(words), chosen.name)
    return GameRound(puzzle, chosen)
