"""Pure predicates that classify plaintext tokens and answers."""

from __future__ import annotations

import re

from wolfram_answers.constants import (
    DATE_ANSWER_PROBABILITY,
    DATE_PUNCTUATION_PATTERN,
    DATE_WORDS,
    NUMBER_PATTERN,
)

from .normalize import normalize

# ASCII digits only; "×10^" is matched literally
NUMBER_RE = re.compile(NUMBER_PATTERN, re.ASCII)
_DATE_PUNCTUATION_RE = re.compile(DATE_PUNCTUATION_PATTERN)


def is_number(token: str, *, keep_parens: bool = False) -> bool:
    """Return True when the whole (normalized) token is a number.

    Accepts an optional sign, a bare leading dot and a ``×10^n`` suffix:
    ``"-3"``, ``".5"`` and ``"6.022×10^23"`` are numbers, ``"5kg"`` is not.
    """
    return NUMBER_RE.fullmatch(normalize(token, keep_parens=keep_parens)) is not None


def is_long_date_answer(text: str) -> bool:
    """Return True when more than 30% of the words are weekday or month names.

    Punctuation (``- . , ! ?``) is dropped first and names are compared
    case-sensitively against full English names.
    """
    words = _DATE_PUNCTUATION_RE.sub("", text).split()
    if not words:
        return False

    date_words = sum(1 for word in words if word in DATE_WORDS)
    return date_words / len(words) > DATE_ANSWER_PROBABILITY
