import re
import sys
import json
import random
import logging
import datetime
import os
from argparse import ArgumentParser, Namespace
from typing import Optional, Sequence, TextIO, Tuple

import wordsearch
from wordsearch import categories
from wordsearch.grid import Cell
from wordsearch.match import Selection
from wordsearch.play import GameRound, new_round
from wordsearch.generate import generate_puzzle
from . import rendering
from . import showing


_log = logging.getLogger(__name__)


def timestamp(dt=None):
    dt = dt or datetime.datetime.now()
    dt_str = dt.isoformat(timespec='seconds')
    dt_str = dt_str.replace(':', '')
    dt_str = dt_str.replace('-', '')
    return dt_str


def _generate_filename(directory, suffix=".html"):
    stamp = timestamp()
    return os.path.join(directory, f"ws{stamp}{suffix}")


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise ValueError("must be positive")
    return number


def create_arg_parser() -> ArgumentParser:
    parser = ArgumentParser(description="Generate and play word search puzzles.")
    parser.add_argument("words", nargs='*', metavar="WORD", help="words to hide; defaults to a subset of a category")
    parser.add_argument("--category", choices=categories.category_names(), help="draw words from category; random if unset")
    parser.add_argument("--size", metavar="N", type=_positive_int, default=wordsearch.DEFAULT_SIZE, help="set grid size")
    parser.add_argument("--count", metavar="N", type=_positive_int, default=categories.DEFAULT_COUNT, help="number of category words to draw")
    parser.add_argument("--seed", metavar="N", type=int, help="seed the random number generator")
    parser.add_argument("--render", metavar="FILE", nargs='?', const='', help="render as HTML to FILE, or PDF if FILE ends with .pdf; defaults to timestamped filename in $PWD")
    parser.add_argument("--answers", action='store_true', help="with --render, mark the cells of hidden words")
    parser.add_argument("--config", metavar="FILE", help="with --render, specify FILE with config settings in JSON")
    parser.add_argument("--more-css", metavar="FILE", help="with --render, read additional styles from FILE")
    parser.add_argument("--tmpdir", metavar="DIR", help="use DIR for temp files")
    parser.add_argument("--play", action='store_true', help="play in the terminal; enter moves as 'x1,y1 x2,y2'")
    parser.add_argument("--log-level", choices=('INFO', 'DEBUG', 'WARNING', 'ERROR'), default='INFO', help="set log level")
    return parser


def _parse_move(line: str) -> Optional[Tuple[Cell, Cell]]:
    m = re.fullmatch(r'\s*(\d+)\s*,\s*(\d+)\s+(\d+)\s*,\s*(\d+)\s*', line)
    if m is None:
        return None
    x1, y1, x2, y2 = map(int, m.groups())
    return Cell(x1, y1), Cell(x2, y2)


def play(game: GameRound, ifile: TextIO, ofile: TextIO) -> bool:
    """Read moves until the round is won or input ends. Return whether the round was won."""
    puzzle = game.puzzle
    showing.show(puzzle, ofile, game.category.name if game.category else None)
    if game.is_won():
        return True
    for line in ifile:
        if not line.strip():
            continue
        move = _parse_move(line)
        if move is None:
            print("enter a move like '0,0 4,0'", file=ofile)
            continue
        path = Selection.between(*move)
        if path is None or not all(0 <= c.x < puzzle.size and 0 <= c.y < puzzle.size for c in path):
            print("not a straight line on the grid", file=ofile)
            continue
        spelled = puzzle.spell(path)
        matched = game.submit(path)
        if matched is not None:
            print(f"found {matched.word} ({len(game.found_words)} of {len(puzzle.words)})", file=ofile)
        elif game.is_found(spelled) or game.is_found(spelled[::-1]):
            print(f"already found {spelled}", file=ofile)
        else:
            print(f"{spelled} is not a hidden word", file=ofile)
        if game.is_won():
            print("all words found", file=ofile)
            return True
    return False


def create_round(args: Namespace, rng: random.Random) -> Tuple[GameRound, int]:
    if args.words:
        words = wordsearch.canonicalize_all(args.words)
        return GameRound(generate_puzzle(words, args.size, rng)), len(words)
    game = new_round(args.category, args.size, args.count, rng)
    return game, min(args.count, len(game.category.words))


def main(argl: Sequence[str]=None, stdin: TextIO=sys.stdin, stdout: TextIO=sys.stdout):
    parser = create_arg_parser()
    args = parser.parse_args(argl)
    if args.render is not None and args.play:
        parser.error("--play cannot be combined with --render")
    if args.words and args.category:
        parser.error("--category cannot be combined with explicit words")
    logging.basicConfig(level=logging.__dict__[args.log_level])
    rng = random.Random(args.seed)
    game, requested = create_round(args, rng)
    category_name = game.category.name if game.category else None
    if args.render is not None:
        output_pathname = args.render or _generate_filename(os.getcwd())
        config = rendering.get_default_config()
        if args.config:
            with open(args.config, 'r') as ifile:
                rendering.merge_dict(config, json.load(ifile))
        more_css = []
        if args.more_css:
            with open(args.more_css, 'r') as ifile:
                more_css.append(ifile.read())
        info = {'category': category_name}
        model = rendering.RenderModel.build(game.puzzle, info, answers=args.answers)
        rendering.write_output(model, output_pathname, config, more_css, args.tmpdir)
        _log.debug("rendered %d words to %s", len(game.puzzle.words), output_pathname)
        if not args.render:
            print(output_pathname, file=stdout)
        return 0
    if args.play:
        won = play(game, stdin, stdout)
        return 0 if won else 1
    showing.show(game.puzzle, stdout, category_name, requested)
    return 0
