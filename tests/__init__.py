import sys
import random
from collections import defaultdict
import logging
import os
import os.path
import errno
from typing import List, Dict, DefaultDict
from unittest import TestCase

from wordsearch.generate import Puzzle

_ENV_LOG_LEVEL = 'UNIT_TESTS_LOG_LEVEL'
_ENV_SEEDS = 'UNIT_TESTS_SEEDS'
_TESTS_ENV_FILE_FILENAME = 'tests.env'
_MERGED_ENV = None
_LOGGING_CONFIGURED = False


def get_env_files():
    dirs = [os.getcwd()]
    parent = os.path.dirname(os.getcwd())
    if parent:
        dirs.append(parent)
    return list(map(lambda dirname: os.path.join(dirname, _TESTS_ENV_FILE_FILENAME), dirs))


def parse_env_file(pathnames: List[str]) -> Dict[str, str]:
    env = {}
    for pathname in pathnames:
        try:
            with open(pathname, 'r') as ifile:
                for lineno, line in enumerate(ifile):
                    line = line.rstrip("\r\n")
                    try:
                        name, value = line.split('=', 1)
                    except ValueError as e:
                        print(f"tests: invalid line {lineno} in {pathname}: {e}", file=sys.stderr)
                        continue
                    env[name] = value
        except IOError as e:
            if e.errno != errno.ENOENT:
                print(f"tests: error reading {pathname}: {e}", file=sys.stderr)
    return env


def get_merged_env() -> DefaultDict[str, str]:
    global _MERGED_ENV
    if _MERGED_ENV is None:
        file_env = parse_env_file(get_env_files())
        process_env = dict(os.environ)
        merged_env = defaultdict(lambda: None)
        merged_env.update(file_env)
        merged_env.update(process_env)
        _MERGED_ENV = merged_env
    return _MERGED_ENV


def configure_logging():
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return
    env = get_merged_env()
    level_str = env[_ENV_LOG_LEVEL] or 'INFO'
    try:
        level = logging.__dict__[level_str]
    except KeyError:
        print(f"tests: illegal log level {level_str}", file=sys.stderr)
        level = logging.INFO
    logging.basicConfig(level=level)
    _LOGGING_CONFIGURED = True


configure_logging()


def seeds() -> List[int]:
    """Seeds that randomized tests loop over; set UNIT_TESTS_SEEDS to a number to run more."""
    num_seeds = int(get_merged_env()[_ENV_SEEDS] or 20)
    return list(range(0xf177, 0xf177 + num_seeds))


def make_rng(seed: int=0xf177) -> random.Random:
    return random.Random(seed)


def check_puzzle(test: TestCase, puzzle: Puzzle):
    test.assertEqual(puzzle.size, len(puzzle.grid))
    for row in puzzle.grid:
        test.assertEqual(puzzle.size, len(row))
        for letter in row:
            test.assertTrue('A' <= letter <= 'Z', f"not a letter: {repr(letter)}")
    test.assertEqual(len(puzzle.words), len(puzzle.placed_words))
    for word, pw in zip(puzzle.words, puzzle.placed_words):
        test.assertEqual(word, pw.word)
        test.assertEqual(pw.length(), len(pw.cells))
        test.assertEqual(pw.start, pw.cells[0])
        for i, cell in enumerate(pw.cells):
            test.assertTrue(0 <= cell.x < puzzle.size and 0 <= cell.y < puzzle.size, f"{cell} out of bounds")
            test.assertEqual((pw.start.x + i * pw.direction.dx, pw.start.y + i * pw.direction.dy), cell)
            test.assertEqual(pw.word[i], puzzle.letter(cell))
