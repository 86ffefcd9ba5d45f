"""Locate a value/unit pair inside a single subsection."""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING

from wolfram_answers.constants import NUMERICAL_ANSWER_PROBABILITY
from wolfram_answers.exceptions import NoMatchError

from .classifiers import NUMBER_RE, is_number
from .normalize import normalize

if TYPE_CHECKING:
    from wolfram_answers.core.types import Subsection


@dataclasses.dataclass(frozen=True, slots=True)
class NumericAnswer:
    """A number found in a subsection.

    Attributes:
        value: The first word that is a number, e.g. ``"299792458"``.
        unit: The word right after the value, taken verbatim; empty when the
            value is the last word.
        offset: Character offset of the first number in the raw
            (un-normalized) plaintext.
    """

    value: str
    unit: str = ""
    offset: int = 0

    def __str__(self) -> str:
        return f"{self.value} {self.unit}"


def numeric_density(words: list[str], *, keep_parens: bool = False) -> float:
    """Share of `words` that are numbers."""
    if not words:
        return 0.0
    numbers = sum(1 for w in words if is_number(w, keep_parens=keep_parens))
    return numbers / len(words)


def find_numeric_answer(
    subsection: Subsection, *, keep_parens: bool = False
) -> NumericAnswer | None:
    """Return the numerical answer in `subsection`, or None if it has none.

    A subsection counts as numerical when at least 10% of its space-separated
    words are numbers.

    Raises:
        NoMatchError: If the subsection passed the density check but no number
            can be found in its text.
    """
    words = normalize(subsection.plaintext, keep_parens=keep_parens).split(" ")

    if numeric_density(words, keep_parens=keep_parens) < NUMERICAL_ANSWER_PROBABILITY:
        return None

    match = NUMBER_RE.search(subsection.plaintext)
    if match is None:
        raise NoMatchError(
            f"no number found in likely numerical answer {subsection.plaintext!r}"
        )

    idx = next(
        (i for i, word in enumerate(words) if is_number(word, keep_parens=keep_parens)),
        0,
    )
    unit = words[idx + 1] if idx + 1 < len(words) else ""
    return NumericAnswer(value=words[idx], unit=unit, offset=match.start())
