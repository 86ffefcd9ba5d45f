"""Result document model for Wolfram|Alpha Full Results responses.

A response is a tree: a `Document` holds one `QueryResult`, which holds an
ordered list of `Section`s (the API calls them "pods"), each holding ordered
`Subsection`s ("subpods"). Subsections carry the plaintext answers.

Everything below the `QueryResult` is immutable. The only permitted mutation
is `QueryResult.remove_input_interpretation()`, which drops the section that
merely restates the query.
"""

from __future__ import annotations

import dataclasses
import typing

from wolfram_answers.constants import INPUT_INTERPRETATION_TITLE

if typing.TYPE_CHECKING:
    from collections.abc import Callable

    from wolfram_answers.extraction.numeric import NumericAnswer

# --- One-or-many fields ---
# The API encodes several fields as either a single object or a list of
# objects. Exactly one arm is ever populated, so they are modelled as a tagged
# union instead of two optional fields.


@dataclasses.dataclass(frozen=True, slots=True)
class Absent:
    """The field was not present in the response."""

    def as_list(self) -> list[typing.Any]:
        return []


@dataclasses.dataclass(frozen=True, slots=True)
class Single[T]:
    """The field held a single value."""

    value: T

    def as_list(self) -> list[T]:
        return [self.value]


@dataclasses.dataclass(frozen=True, slots=True)
class Many[T]:
    """The field held a list of values."""

    values: tuple[T, ...]

    def as_list(self) -> list[T]:
        return list(self.values)


ABSENT = Absent()

type OneOrMany[T] = Absent | Single[T] | Many[T]

# --- Failure signalling ---
# `"error"` on a query result is either a plain boolean or an error object.


@dataclasses.dataclass(frozen=True, slots=True)
class FailureFlag:
    """Boolean error marker without any detail."""

    value: bool


@dataclasses.dataclass(frozen=True, slots=True)
class FailureDetail:
    """Structured error, e.g. for an invalid app id."""

    code: str
    message: str


type Failure = FailureFlag | FailureDetail

# --- Auxiliary records ---


@dataclasses.dataclass(frozen=True, slots=True)
class Source:
    """Origin of a piece of data; use it for attribution."""

    url: str = ""
    text: str = ""


@dataclasses.dataclass(frozen=True, slots=True)
class Link:
    url: str = ""
    text: str = ""
    title: str = ""


@dataclasses.dataclass(frozen=True, slots=True)
class Unit:
    """A unit in short (symbol) and long (written out) form."""

    short: str = ""
    long: str = ""


@dataclasses.dataclass(frozen=True, slots=True)
class SectionInfo:
    units: tuple[Unit, ...] = ()
    text: str = ""
    links: tuple[Link, ...] = ()


@dataclasses.dataclass(frozen=True, slots=True)
class SubsectionInfo:
    links: OneOrMany[Source] = ABSENT


@dataclasses.dataclass(frozen=True, slots=True)
class State:
    """An alternative rendering of a section (e.g. "More digits")."""

    name: str = ""
    input: str = ""
    step_by_step: bool = False


@dataclasses.dataclass(frozen=True, slots=True)
class ExpressionType:
    name: str = ""


@dataclasses.dataclass(frozen=True, slots=True)
class Tip:
    """How to rephrase a query that was not understood."""

    text: str = ""


@dataclasses.dataclass(frozen=True, slots=True)
class QueryWarning:
    """An automatic correction, e.g. "Freddy Mercury" -> "Freddie Mercury"."""

    word: str = ""
    suggestion: str = ""
    text: str = ""


@dataclasses.dataclass(frozen=True, slots=True)
class DidYouMean:
    """A possible reinterpretation of an unsuccessful query."""

    score: str = ""
    level: str = ""
    value: str = ""


@dataclasses.dataclass(frozen=True, slots=True)
class AssumptionValue:
    name: str = ""
    word: str = ""
    description: str = ""
    input: str = ""


@dataclasses.dataclass(frozen=True, slots=True)
class Assumption:
    """How an ambiguous part of the input was interpreted."""

    type: str = ""
    word: str = ""
    template: str = ""
    count: int = 0
    values: tuple[AssumptionValue, ...] = ()


# --- Document tree ---


@dataclasses.dataclass(frozen=True, slots=True)
class Subsection:
    """The smallest unit of answer text.

    You will mostly care about `plaintext`; it is the only field the
    extraction engine reads.
    """

    plaintext: str = ""
    title: str = ""
    primary: bool = False
    image_source: str = ""
    micro_sources: OneOrMany[str] = ABSENT
    data_sources: OneOrMany[str] = ABSENT
    infos: SubsectionInfo | None = None


@dataclasses.dataclass(frozen=True, slots=True)
class Section:
    """One titled block of information in a query result."""

    title: str = ""
    subsections: tuple[Subsection, ...] = ()
    primary: bool = False
    id: str = ""
    scanner: str = ""
    position: int = 0
    num_subsections: int = 0
    error: bool = False
    states: tuple[State, ...] = ()
    expression_types: OneOrMany[ExpressionType] = ABSENT
    infos: OneOrMany[SectionInfo] = ABSENT

    def for_each_subsection(self, func: Callable[[Subsection], typing.Any]) -> None:
        """Call `func` once per subsection, in order."""
        for subsection in self.subsections:
            func(subsection)


@dataclasses.dataclass(slots=True)
class QueryResult:
    """The payload of a query: ranked sections plus success signalling.

    A result with ``success=False`` carries no usable sections; inspect
    `error`, `did_you_means` and `tips` instead.
    """

    sections: list[Section] = dataclasses.field(default_factory=list)
    num_sections: int = 0
    success: bool = False
    error: Failure | None = None
    did_you_means: OneOrMany[DidYouMean] = ABSENT
    sources: OneOrMany[Source] = ABSENT
    tips: OneOrMany[Tip] = ABSENT
    warnings: OneOrMany[QueryWarning] = ABSENT
    assumptions: OneOrMany[Assumption] = ABSENT
    datatypes: str = ""
    timed_out: str = ""
    timed_out_sections: str = ""
    recalculate: str = ""
    id: str = ""
    host: str = ""
    server: str = ""
    related: str = ""
    version: str = ""
    parse_id_server: str = ""
    timing: float = 0.0
    parse_timing: float = 0.0
    parse_timed_out: bool = False
    _interpretation_removed: bool = dataclasses.field(
        default=False, init=False, repr=False, compare=False
    )

    def remove_input_interpretation(self) -> QueryResult:
        """Drop the section that restates the query, in place.

        The input interpretation is normally the first section; otherwise every
        section with that title is removed. Runs at most once per result and
        returns ``self`` for chaining.
        """
        if self._interpretation_removed:
            return self
        self._interpretation_removed = True

        before = len(self.sections)
        if self.sections and self.sections[0].title == INPUT_INTERPRETATION_TITLE:
            del self.sections[0]
        else:
            self.sections[:] = [
                s for s in self.sections if s.title != INPUT_INTERPRETATION_TITLE
            ]
        removed = before - len(self.sections)
        self.num_sections = max(self.num_sections - removed, 0)
        return self

    def for_each_section(self, func: Callable[[Section], typing.Any]) -> None:
        """Call `func` once per section, in order."""
        for section in self.sections:
            func(section)

    def get_answer(self, *, keep_parens: bool | None = None) -> str:
        """See `wolfram_answers.extraction.get_answer`."""
        from wolfram_answers.extraction.engine import get_answer

        return get_answer(self, keep_parens=keep_parens)

    def get_numerical_answer(
        self, *, keep_parens: bool | None = None
    ) -> NumericAnswer:
        """See `wolfram_answers.extraction.get_numerical_answer`."""
        from wolfram_answers.extraction.engine import get_numerical_answer

        return get_numerical_answer(self, keep_parens=keep_parens)

    def get_longest_answer(self, *, keep_parens: bool | None = None) -> str:
        """See `wolfram_answers.extraction.get_longest_answer`."""
        from wolfram_answers.extraction.engine import get_longest_answer

        return get_longest_answer(self, keep_parens=keep_parens)


@dataclasses.dataclass(frozen=True, slots=True)
class Document:
    """Root of a decoded Full Results response.

    Build it with `decode_document()`; do not instantiate it yourself outside
    of tests. Every operation delegates to the contained `QueryResult`.
    """

    query_result: QueryResult | None = None

    def remove_input_interpretation(self) -> Document:
        if self.query_result is not None:
            self.query_result.remove_input_interpretation()
        return self

    def get_answer(self, *, keep_parens: bool | None = None) -> str:
        from wolfram_answers.extraction.engine import get_answer

        return get_answer(self, keep_parens=keep_parens)

    def get_numerical_answer(
        self, *, keep_parens: bool | None = None
    ) -> NumericAnswer:
        from wolfram_answers.extraction.engine import get_numerical_answer

        return get_numerical_answer(self, keep_parens=keep_parens)

    def get_longest_answer(self, *, keep_parens: bool | None = None) -> str:
        from wolfram_answers.extraction.engine import get_longest_answer

        return get_longest_answer(self, keep_parens=keep_parens)
