import io
import os
import collections.abc
import copy
import math
import html
import pdfkit
import logging
import tempfile
from typing import Dict, List, Iterable, Any, Iterator, TextIO, Collection
from collections import defaultdict

from wordsearch.generate import Puzzle
from wordsearch.grid import Cell


_log = logging.getLogger(__name__)


_GRID_CELL_WIDTH = 30
_GRID_CELL_HEIGHT = 30

_DEFAULT_CSS_MODEL = {
    'body': {
        'width': '7.5in',
        'font-family': 'Georgia, serif',
    },
    'grid': {
        'cell': {
            'font-size': '14pt',
            'width': f'{_GRID_CELL_WIDTH}px',
            'height': f'{_GRID_CELL_HEIGHT}px',
            'border': '1px solid #ccc',
        },
        'answer': {
            'background-color': '#ddd',
            'font-weight': 'bold',
        },
    },
    'words': {
        'margin-top': '16px',
        'font-size': '11pt',
        'column-width': '140px',
    },
    'heading': {
        'margin-bottom': '12px',
        'title': {
            'font-size': '18pt',
            'font-weight': 'bold',
        },
        'category': {
            'font-size': '11pt',
            'font-style': 'italic',
        },
    },
}

_CSS_TEMPLATE = """
body {{
    margin-left: auto;
    margin-right: auto;
    width: {body[width]};
    font-family: {body[font-family]};
}}

.heading {{
    margin-bottom: {heading[margin-bottom]};
}}

.heading .title {{
    font-size: {heading[title][font-size]};
    font-weight: {heading[title][font-weight]};
}}

.heading .category {{
    font-size: {heading[category][font-size]};
    font-style: {heading[category][font-style]};
    text-transform: capitalize;
}}

.grid table {{
    border-collapse: collapse;
}}

.grid td {{
    border: {grid[cell][border]};
    font-size: {grid[cell][font-size]};
    width: {grid[cell][width]};
    height: {grid[cell][height]};
    text-align: center;
    vertical-align: middle;
}}

.grid td.answer {{
    background-color: {grid[answer][background-color]};
    font-weight: {grid[answer][font-weight]};
}}

.words {{
    margin-top: {words[margin-top]};
    font-size: {words[font-size]};
}}

.words-column {{
    float: left;
    width: {words[column-width]};
}}

"""

_DEFAULT_CONFIG = {
    'title': 'Word Search',
    'columns': 3,
    'css': _DEFAULT_CSS_MODEL
}

# https://stackoverflow.com/a/3233356/2657036
def merge_dict(d, u):
    for k, v in u.items():
        if isinstance(v, collections.abc.Mapping):
            d[k] = merge_dict(d.get(k, {}), v)
        else:
            d[k] = v
    return d


def get_default_config():
    return copy.deepcopy(_DEFAULT_CONFIG)


class RenderCell(object):

    def __init__(self, x: int, y: int, letter: str, answer: bool=False):
        self.x = x
        self.y = y
        self.letter = letter
        self.answer = answer

    def get_class(self):
        return 'answer' if self.answer else 'letter'


class RenderModel(object):

    def __init__(self, rows: List[List[RenderCell]], words: List[str], info: Dict[str, str]):
        self.rows = rows
        for row in rows:
            for cell in row:
                assert isinstance(cell, RenderCell), "rows contains non-cell elements"
        self.words = words
        self.info = defaultdict(lambda: None)
        self.info.update(info or {})

    def cells(self) -> Iterator[RenderCell]:
        for row in self.rows:
            for cell in row:
                yield cell

    @classmethod
    def build(cls, puzzle: Puzzle, info: Dict[str, str]=None, answers: bool=False) -> 'RenderModel':
        answer_cells: Collection[Cell] = set()
        if answers:
            answer_cells = {cell for pw in puzzle.placed_words for cell in pw.cells}
        rows = []
        for y, letters in enumerate(puzzle.grid):
            row = []
            for x, letter in enumerate(letters):
                row.append(RenderCell(x, y, letter, Cell(x, y) in answer_cells))
            rows.append(row)
        return RenderModel(rows, sorted(puzzle.words), info)


# noinspection PyMethodMayBeStatic
class GridRenderer(object):

    def __init__(self, config: Dict[str, Any]=None):
        self.config = config or get_default_config()

    def render(self, gridrows: List[List[RenderCell]], ofile, indent=0):
        def fprint(text):
            print(' ' * indent, text, sep="", file=ofile)
        fprint("<table>")
        for row_index, row in enumerate(gridrows, start=1):
            fprint(f"  <tr class=\"row\" id=\"row-{row_index}\">")
            for cell in row:
                assert isinstance(cell, RenderCell), f"not a cell {cell}"
                css_class = cell.get_class()
                fprint(f"    <td id=\"cell-{cell.x}-{cell.y}\" class=\"{css_class} column-{cell.x + 1}\">{html.escape(cell.letter)}</td>")
            fprint("  </tr>")
        fprint("</table>")


class WordListRenderer(object):

    def __init__(self, config: Dict[str, Any]=None):
        self.config = config or get_default_config()

    def get_breaks(self, num_words) -> List[int]:
        try:
            # noinspection PyTypeChecker
            return self.config['breaks']
        except KeyError:
            pass
        num_columns = max(1, self.config['columns'])
        division_len = int(math.ceil(num_words / num_columns))
        return [division_len * i - 1 for i in range(1, num_columns)]

    def render(self, words: List[str], ofile, indent=0):
        def fprint(text):
            print(' ' * indent, text, sep="", file=ofile)
        breaks = self.get_breaks(len(words))
        fprint("<div class=\"words-column\">")
        for i, word in enumerate(words):
            fprint(f"  <div class=\"word\">{html.escape(word)}</div>")
            if i in breaks and i != len(words) - 1:
                fprint("</div>")
                fprint("<div class=\"words-column\">")
        fprint("</div>")


class PuzzleRenderer(object):

    def __init__(self, config: Dict[str, Any]=None, more_css: Iterable[str]=None):
        self.config = config or get_default_config()
        self.grid_renderer = GridRenderer(self.config)
        self.word_renderer = WordListRenderer(self.config)
        self.more_css = more_css or tuple()

    def render(self, model: RenderModel, ofile=None):
        return_str = ofile is None
        if return_str:
            ofile = io.StringIO()
        self._render(model, ofile)
        if return_str:
            return ofile.getvalue()

    def _render(self, model: RenderModel, of: TextIO):
        def fprint(text, indent=0):
            print(' ' * indent, text, sep="", file=of)
        title = model.info['title'] or self.config.get('title') or ''
        category = model.info['category'] or ''
        fprint("<!DOCTYPE html>")
        fprint("<html>")
        fprint("<head>")
        fprint(f"  <title>{html.escape(title)}</title>")
        base_css = _CSS_TEMPLATE.format(**(self.config['css']))
        for style_markup in [base_css] + list(self.more_css):
            fprint(f"<style>{style_markup}</style>")
        fprint("</head>")
        fprint("  <body>")
        fprint("    <div class=\"heading\">")
        fprint(f"      <div class=\"title\">{html.escape(title)}</div>")
        fprint(f"      <div class=\"category\">{html.escape(category)}</div>")
        fprint("    </div>")
        fprint("    <div class=\"grid\">")
        self.grid_renderer.render(model.rows, of, indent=6)
        fprint("    </div>")
        fprint("    <div class=\"words\">")
        self.word_renderer.render(model.words, of, indent=6)
        fprint("    </div>")
        fprint("  </body>")
        fprint("</html>")


def make_pdf_options():
    return {
        'quiet': '',
        'page-size': 'Letter',
        'margin-top': '0.5in',
        'margin-right': '0.5in',
        'margin-bottom': '0.5in',
        'margin-left': '0.5in',
        'encoding': "UTF-8",
     }


def write_output(model: RenderModel, output: str, config: Dict[str, Any]=None, more_css: Iterable[str]=None, tmpdir: str=None):
    """Write HTML to output, or a PDF if output ends with .pdf."""
    renderer = PuzzleRenderer(config, more_css=more_css)
    html_file = output
    pdf_file = output if output.lower().endswith('.pdf') else None
    if pdf_file:
        fd, html_file = tempfile.mkstemp(".html", "wordsearch", dir=tmpdir)
        os.close(fd)
    try:
        with open(html_file, 'w') as ofile:
            renderer.render(model, ofile)
        if pdf_file:
            pdfkit.from_file(html_file, pdf_file, options=make_pdf_options())
        _log.debug("wrote %s", output)
    finally:
        if pdf_file:
            try:
                os.remove(html_file)
            except IOError as e:
                _log.info("caught error deleting temp file %s: %s", html_file, e)
