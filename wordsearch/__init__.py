#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import re
import logging
from typing import Iterable, List
import unidecode

unicode_normalize = unidecode.unidecode

_log = logging.getLogger(__name__)

DEFAULT_SIZE = 12
FILL_LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_REGEX_NONCHARMATCH = {
    'alpha': '[^A-Za-z]',
    'whitespace': r'\s',
}


def get_regex_noncharmatch(allowed: str) -> str:
    try:
        return _REGEX_NONCHARMATCH[allowed]
    except KeyError:
        raise ValueError(str(allowed))


def _contains_nonascii(letters):
    for l in letters:
        if ord(l) > 127:
            return True
    return False


def normalize(word: str) -> str:
    """Uppercase a word and strip all whitespace from it."""
    return re.sub(get_regex_noncharmatch('whitespace'), '', word).upper()


def canonicalize(rendering: str, allowed: str='alpha') -> str:
    """Transliterate a rendering to ASCII and keep only characters from the allowed alphabet, uppercased.

    Stricter than normalize(), which only removes whitespace; used where words
    come from people rather than from the built-in categories.
    """
    if _contains_nonascii(rendering):
        rendering = unicode_normalize(rendering)
    return re.sub(get_regex_noncharmatch(allowed), '', rendering).upper()


def canonicalize_all(renderings: Iterable[str]) -> List[str]:
    words = []
    for rendering in renderings:
        canonical = canonicalize(rendering)
        if not canonical:
            _log.info("discarding %s because it has no letters", repr(rendering)[:64])
            continue
        words.append(canonical)
    return words
