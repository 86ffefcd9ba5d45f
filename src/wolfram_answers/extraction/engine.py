"""Answer extraction engine.

Picks the single best answer string from a decoded result. A numerical
answer (value and unit) wins when one exists; otherwise the longest
subsection text is returned.

The two scans differ: `AnswerExtractor.numerical_answer`
stops at the first date or the first number it meets, while
`AnswerExtractor.longest_answer` always walks every subsection.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from wolfram_answers.core.types import Document, QueryResult
from wolfram_answers.exceptions import (
    NoLikelyAnswerError,
    NoNumericAnswerError,
    NoSectionsError,
    ProbablyDateError,
)

from .classifiers import is_long_date_answer
from .normalize import normalize
from .numeric import NumericAnswer, find_numeric_answer

if TYPE_CHECKING:
    from wolfram_answers.config import FrozenConfig

log = logging.getLogger(__name__)


def _query_result(target: Document | QueryResult) -> QueryResult:
    """Unwrap a Document and reject results with nothing to scan."""
    result = target.query_result if isinstance(target, Document) else target
    if result is None:
        raise NoSectionsError("document has no query result")
    if result.num_sections == 0 or not result.sections:
        raise NoSectionsError(
            "no sections in result, check for errors in the result or the "
            "presence of 'did you mean' suggestions"
        )
    if result.num_sections != len(result.sections):
        raise NoSectionsError(
            f"result announces {result.num_sections} sections but contains "
            f"{len(result.sections)}"
        )
    return result


class AnswerExtractor:
    """Extract answers from decoded results.

    Attributes:
        keep_parens: When False, parenthesized asides are removed from
            plaintext before it is analysed.
    """

    def __init__(self, *, keep_parens: bool = False) -> None:
        self.keep_parens = keep_parens

    @classmethod
    def from_config(cls, cfg: FrozenConfig) -> AnswerExtractor:
        return cls(keep_parens=cfg.keep_parens)

    def numerical_answer(self, target: Document | QueryResult) -> NumericAnswer:
        """Return the value and unit of the first numerical subsection.

        A subsection is numerical when at least 10% of its words are numbers.
        Dates take precedence: the first subsection that reads like a long
        date ends the scan.

        Raises:
            NoSectionsError: If the result has no sections.
            ProbablyDateError: If a date was found before any number.
            NoLikelyAnswerError: If no subsection is numerical.
            NoMatchError: If the numerical heuristics disagree.
        """
        result = _query_result(target)

        for section in result.sections:
            for subsection in section.subsections:
                if is_long_date_answer(subsection.plaintext):
                    raise ProbablyDateError(
                        f"numerical answer is likely to be a date: "
                        f"{subsection.plaintext!r}"
                    )

                found = find_numeric_answer(subsection, keep_parens=self.keep_parens)
                if found is not None:
                    log.debug(
                        "Numerical answer %r found in section %r",
                        found.value,
                        section.title,
                    )
                    return found

        raise NoLikelyAnswerError("no answer above numerical likeliness threshold")

    def longest_answer(self, target: Document | QueryResult) -> str:
        """Return the longest normalized plaintext of any subsection.

        Length is measured in characters; on ties the first one wins. A result
        whose sections have no subsections yields ``""``.

        Raises:
            NoSectionsError: If the result has no sections.
        """
        result = _query_result(target)

        longest = ""
        for section in result.sections:
            for subsection in section.subsections:
                text = normalize(subsection.plaintext, keep_parens=self.keep_parens)
                if len(text) > len(longest):
                    longest = text

        return longest

    def answer(self, target: Document | QueryResult) -> str:
        """Return the numerical answer, or the longest answer if there is none.

        The numerical answer is rendered as ``"<value> <unit>"``. When the unit
        is empty the trailing space is kept.

        Raises:
            NoSectionsError: If the result has no sections.
            NoMatchError: If the numerical heuristics disagree.
        """
        try:
            found = self.numerical_answer(target)
        except NoNumericAnswerError as e:
            log.debug("Falling back to longest answer: %s", e)
            return self.longest_answer(target)

        return str(found)


# --- Module-level API ---
# Without an explicit keep_parens these resolve configuration on every call
# (scope, environment, files), so they can also raise ConfigurationError.


def _extractor(keep_parens: bool | None) -> AnswerExtractor:
    if keep_parens is not None:
        return AnswerExtractor(keep_parens=keep_parens)

    from wolfram_answers.config import resolve_config

    return AnswerExtractor.from_config(resolve_config().to_frozen())


def get_answer(
    target: Document | QueryResult, *, keep_parens: bool | None = None
) -> str:
    """Return the best answer for `target`.

    Args:
        target: A decoded `Document` or its `QueryResult`.
        keep_parens: Overrides the configured ``keep_parens`` setting. When
            given, configuration is not resolved at all.

    Raises:
        NoSectionsError: If the result has no sections.
        ConfigurationError: If `keep_parens` is omitted and the configuration
            sources are invalid, e.g. a malformed pyproject.toml.

    See Also:
        `AnswerExtractor.answer` for the selection rules.
    """
    return _extractor(keep_parens).answer(target)


def get_numerical_answer(
    target: Document | QueryResult, *, keep_parens: bool | None = None
) -> NumericAnswer:
    """Return the first numerical answer; see `AnswerExtractor.numerical_answer`."""
    return _extractor(keep_parens).numerical_answer(target)


def get_longest_answer(
    target: Document | QueryResult, *, keep_parens: bool | None = None
) -> str:
    """Return the longest answer; see `AnswerExtractor.longest_answer`."""
    return _extractor(keep_parens).longest_answer(target)
