"""Plaintext normalization applied before answers are compared."""

from __future__ import annotations

import re

from wolfram_answers.constants import PARENS_PATTERN

_PARENS_RE = re.compile(PARENS_PATTERN)


def normalize(text: str, *, keep_parens: bool = False) -> str:
    """Remove parenthesized asides from `text` unless `keep_parens` is set.

    The match is greedy and runs per line: ``"foo (bar)"`` becomes ``"foo "``
    and ``"a (b) c (d)"`` becomes ``"a "``, dropping the text between the two
    groups as well. The function is idempotent.
    """
    if keep_parens:
        return text
    return _PARENS_RE.sub("", text)
