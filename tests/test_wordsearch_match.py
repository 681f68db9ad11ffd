#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from unittest import TestCase
from wordsearch.generate import generate_puzzle, place
from wordsearch.grid import GridModel, Cell, HORIZONTAL, VERTICAL
from wordsearch.match import check_word, Selection
import tests


def _placed_cat_car():
    grid = GridModel.empty(4)
    cat = place(grid, 'CAT', Cell(0, 0), HORIZONTAL)
    car = place(grid, 'CAR', Cell(0, 0), VERTICAL)
    return cat, car


class CheckWordTest(TestCase):

    def test_forward(self):
        cat, car = _placed_cat_car()
        self.assertIs(cat, check_word([Cell(0, 0), Cell(1, 0), Cell(2, 0)], [cat, car]))
        self.assertIs(car, check_word([Cell(0, 0), Cell(0, 1), Cell(0, 2)], [cat, car]))

    def test_reverse(self):
        cat, car = _placed_cat_car()
        self.assertIs(cat, check_word([Cell(2, 0), Cell(1, 0), Cell(0, 0)], [cat, car]))
        self.assertIs(car, check_word([(0, 2), (0, 1), (0, 0)], [cat, car]))

    def test_plain_tuples(self):
        cat, car = _placed_cat_car()
        self.assertIs(cat, check_word([(0, 0), (1, 0), (2, 0)], [cat, car]))

    def test_wrong_length(self):
        cat, car = _placed_cat_car()
        self.assertIsNone(check_word([(0, 0), (1, 0)], [cat, car]))
        self.assertIsNone(check_word([(0, 0), (1, 0), (2, 0), (3, 0)], [cat, car]))
        self.assertIsNone(check_word([], [cat, car]))

    def test_wrong_cells(self):
        cat, car = _placed_cat_car()
        self.assertIsNone(check_word([(0, 1), (1, 1), (2, 1)], [cat, car]))
        self.assertIsNone(check_word([(0, 0), (1, 1), (2, 2)], [cat, car]))
        self.assertIsNone(check_word([(1, 0), (0, 0), (2, 0)], [cat, car]))

    def test_no_placed_words(self):
        self.assertIsNone(check_word([(0, 0)], []))

    def test_first_match_wins(self):
        cat, _ = _placed_cat_car()
        twin = cat._replace(word='CAT2')
        self.assertIs(cat, check_word(cat.cells, [cat, twin]))
        self.assertIs(twin, check_word(cat.cells, [twin, cat]))

    def test_generated_bidirectional(self):
        for seed in tests.seeds():
            puzzle = generate_puzzle(['adventure', 'mystery', 'treasure', 'quest', 'legend'], 10, tests.make_rng(seed))
            for pw in puzzle.placed_words:
                self.assertEqual(pw.word, check_word(pw.cells, puzzle.placed_words).word)
                self.assertEqual(pw.word, check_word(tuple(reversed(pw.cells)), puzzle.placed_words).word)


class SelectionTest(TestCase):

    def test_start(self):
        s = Selection()
        self.assertEqual(0, len(s))
        s.start((3, 4))
        self.assertTupleEqual((Cell(3, 4),), s.cells)
        s.start((1, 1))
        self.assertTupleEqual((Cell(1, 1),), s.cells)

    def test_extend_first(self):
        s = Selection()
        self.assertTrue(s.extend((5, 5)))
        self.assertTupleEqual((Cell(5, 5),), s.cells)

    def test_extend_adjacent(self):
        s = Selection()
        s.start((1, 1))
        self.assertFalse(s.extend((3, 1)))
        self.assertTrue(s.extend((2, 1)))
        self.assertTrue(s.extend((3, 1)))
        self.assertTupleEqual((Cell(1, 1), Cell(2, 1), Cell(3, 1)), s.cells)

    def test_extend_direction(self):
        s = Selection()
        s.start((2, 2))
        self.assertTrue(s.extend((2, 1)))
        self.assertFalse(s.extend((3, 0)))
        self.assertFalse(s.extend((1, 1)))
        self.assertTrue(s.extend((2, 0)))
        self.assertTupleEqual((Cell(2, 2), Cell(2, 1), Cell(2, 0)), s.cells)

    def test_extend_diagonal(self):
        s = Selection()
        s.start((0, 0))
        self.assertTrue(s.extend((1, 1)))
        self.assertTrue(s.extend((2, 2)))
        self.assertFalse(s.extend((3, 2)))

    def test_no_revisit(self):
        s = Selection()
        s.start((0, 0))
        self.assertFalse(s.extend((0, 0)))
        s.extend((1, 0))
        self.assertFalse(s.extend((0, 0)))

    def test_clear(self):
        s = Selection()
        s.start((0, 0))
        s.clear()
        self.assertTupleEqual(tuple(), s.cells)

    def test_between(self):
        self.assertTupleEqual((Cell(0, 0), Cell(1, 0), Cell(2, 0)), Selection.between((0, 0), (2, 0)))
        self.assertTupleEqual((Cell(1, 3), Cell(1, 2), Cell(1, 1)), Selection.between((1, 3), (1, 1)))
        self.assertTupleEqual((Cell(0, 2), Cell(1, 1), Cell(2, 0)), Selection.between((0, 2), (2, 0)))
        self.assertTupleEqual((Cell(4, 4),), Selection.between((4, 4), (4, 4)))
        self.assertIsNone(Selection.between((0, 0), (2, 1)))

    def test_selection_matches(self):
        cat, car = _placed_cat_car()
        s = Selection()
        s.start((0, 2))
        s.extend((0, 1))
        s.extend((0, 0))
        self.assertIs(car, check_word(s.cells, [cat, car]))
