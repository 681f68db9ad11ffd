#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import random
from typing import NamedTuple, Tuple, List, Dict

DEFAULT_COUNT = 8

WORD_CATEGORIES: Dict[str, Tuple[str, ...]] = {
    'classic': (
        'ADVENTURE', 'MYSTERY', 'TREASURE', 'DISCOVERY', 'JOURNEY',
        'EXPLORE', 'WONDER', 'CURIOUS', 'HIDDEN', 'SECRET',
        'PUZZLE', 'QUEST', 'LEGEND', 'ANCIENT', 'WISDOM',
    ),
    'nature': (
        'MOUNTAIN', 'FOREST', 'OCEAN', 'RIVER', 'MEADOW',
        'VALLEY', 'CANYON', 'SUNSET', 'SUNRISE', 'HORIZON',
        'BREEZE', 'THUNDER', 'RAINBOW', 'WILDLIFE', 'BLOOM',
    ),
    'vintage': (
        'TELEGRAPH', 'GAZETTE', 'JOURNAL', 'HERALD', 'TRIBUNE',
        'CHRONICLE', 'DISPATCH', 'BULLETIN', 'EDITION', 'HEADLINE',
        'COLUMN', 'PRESS', 'INK', 'TYPE', 'PRINT',
    ),
    'coffee': (
        'ESPRESSO', 'CAPPUCCINO', 'LATTE', 'MOCHA', 'AMERICANO',
        'ARABICA', 'ROAST', 'BREW', 'STEAM', 'CREAM',
        'BEAN', 'GRIND', 'POUR', 'AROMA', 'SMOOTH',
    ),
}


class Category(NamedTuple):

    name: str
    words: Tuple[str, ...]


def category_names() -> List[str]:
    return list(WORD_CATEGORIES.keys())


def get_category(name: str) -> Category:
    return Category(name, WORD_CATEGORIES[name])


def get_random_category(rng: random.Random=None) -> Category:
    rng = rng or random.Random()
    return get_category(rng.choice(category_names()))


def choose_words(category: Category, count: int=DEFAULT_COUNT, rng: random.Random=None) -> List[str]:
    """Return up to count words of the category in random order."""
    rng = rng or random.Random()
    words = list(category.words)
    rng.shuffle(words)
    return words[:count]
