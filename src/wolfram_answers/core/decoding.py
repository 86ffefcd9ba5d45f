"""Decode Full Results JSON into the result document model.

The response body is parsed with `json` and validated against pydantic wire
models that mirror the API's keys (``pods``, ``numpods``, ``val`` ...). Each
wire model converts itself into the matching frozen dataclass from
`core.types` as part of validation, so a successful validation yields the
finished document tree.

Missing or null fields take their zero value, mirroring the lenient shape of
the API. Fields that are present with the wrong JSON type make the whole
document invalid and raise `InvalidFormatError`.
"""

import json
import logging
from typing import Annotated, Any

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    ValidationError,
)

from wolfram_answers.exceptions import InvalidFormatError

from .types import (
    ABSENT,
    Assumption,
    AssumptionValue,
    DidYouMean,
    Document,
    ExpressionType,
    FailureDetail,
    FailureFlag,
    Link,
    Many,
    QueryResult,
    QueryWarning,
    Section,
    SectionInfo,
    Single,
    Source,
    State,
    Subsection,
    SubsectionInfo,
    Tip,
    Unit,
)

log = logging.getLogger(__name__)


def decode_document(data: bytes | str) -> Document:
    """Decode a Full Results JSON body into a `Document`.

    Args:
        data: Raw response body (``output=JSON``).

    Returns:
        The decoded document. ``Document.query_result`` is None when the body
        has no ``queryresult`` key.

    Raises:
        InvalidFormatError: If the body is not valid JSON or does not fit the
            document grammar.
    """
    try:
        raw = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidFormatError(f"Response is not valid JSON: {e}") from e

    try:
        wire = _DocumentIn.model_validate(raw)
    except ValidationError as e:
        log.debug("Response failed validation with %d error(s)", e.error_count())
        raise InvalidFormatError(
            f"Response does not fit the document grammar: {e}"
        ) from e

    return Document(query_result=wire.query_result)


def decode_document_string(data: str) -> Document:
    """Decode a JSON string; see `decode_document`."""
    return decode_document(data)


# --- Field types ---


def _or(default: Any) -> BeforeValidator:
    """Treat an explicit JSON null like a missing key."""
    return BeforeValidator(lambda v: default if v is None else v)


def _into(domain: type) -> AfterValidator:
    """Turn a validated wire model into its `core.types` dataclass."""
    return AfterValidator(lambda model: domain(**dict(model)))


def _arm(value: Any) -> Any:
    if value is None:
        return ABSENT
    if isinstance(value, list):
        return Many(tuple(value))
    return Single(value)


def _one_or_many(item: Any) -> Any:
    # A single object and a list of objects are both valid for these keys
    return Annotated[item | list[item] | None, AfterValidator(_arm)]


def _tuple_of(item: Any) -> Any:
    return Annotated[list[item], _or([]), AfterValidator(tuple)]


def _failure(value: Any) -> Any:
    if isinstance(value, bool):
        return FailureFlag(value)
    return value


Text = Annotated[StrictStr, _or("")]
Flag = Annotated[StrictBool, _or(False)]
Count = Annotated[StrictInt, _or(0)]
Seconds = Annotated[StrictInt | StrictFloat, _or(0.0), AfterValidator(float)]


class _WireModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


# --- Auxiliary records ---


class _SourceIn(_WireModel):
    url: Text = ""
    text: Text = ""


SourceIn = Annotated[_SourceIn, _into(Source)]


class _LinkIn(_WireModel):
    url: Text = ""
    text: Text = ""
    title: Text = ""


class _UnitIn(_WireModel):
    short: Text = ""
    long: Text = ""


class _SectionInfoIn(_WireModel):
    units: _tuple_of(Annotated[_UnitIn, _into(Unit)]) = ()
    text: Text = ""
    links: _tuple_of(Annotated[_LinkIn, _into(Link)]) = ()


class _SubsectionInfoIn(_WireModel):
    links: _one_or_many(SourceIn) = ABSENT


class _StateIn(_WireModel):
    name: Text = ""
    input: Text = ""
    step_by_step: Flag = Field(False, validation_alias="stepbystep")


class _ExpressionTypeIn(_WireModel):
    name: Text = ""


class _TipIn(_WireModel):
    text: Text = ""


class _WarningIn(_WireModel):
    word: Text = ""
    suggestion: Text = ""
    text: Text = ""


class _DidYouMeanIn(_WireModel):
    score: Text = ""
    level: Text = ""
    value: Text = Field("", validation_alias="val")


class _AssumptionValueIn(_WireModel):
    name: Text = ""
    word: Text = ""
    description: Text = Field("", validation_alias="desc")
    input: Text = ""


class _AssumptionIn(_WireModel):
    type: Text = ""
    word: Text = ""
    template: Text = ""
    count: Count = 0
    values: _tuple_of(Annotated[_AssumptionValueIn, _into(AssumptionValue)]) = ()


class _ErrorIn(_WireModel):
    code: Text = ""
    message: Text = Field("", validation_alias="msg")


# {"microsources": {"microsource": "X" | ["X", "Y"]}}


class _MicroSourcesIn(_WireModel):
    microsource: _one_or_many(StrictStr) = ABSENT


class _DataSourcesIn(_WireModel):
    datasource: _one_or_many(StrictStr) = ABSENT


# --- Document tree ---


class _SubsectionIn(_WireModel):
    plaintext: Text = ""
    title: Text = ""
    primary: Flag = False
    image_source: Text = Field("", validation_alias="imagesource")
    micro_sources: Annotated[
        _MicroSourcesIn | None,
        AfterValidator(lambda v: ABSENT if v is None else v.microsource),
    ] = Field(ABSENT, validation_alias="microsources")
    data_sources: Annotated[
        _DataSourcesIn | None,
        AfterValidator(lambda v: ABSENT if v is None else v.datasource),
    ] = Field(ABSENT, validation_alias="datasources")
    infos: Annotated[_SubsectionInfoIn, _into(SubsectionInfo)] | None = None


class _SectionIn(_WireModel):
    title: Text = ""
    subsections: _tuple_of(Annotated[_SubsectionIn, _into(Subsection)]) = Field(
        (), validation_alias="subpods"
    )
    primary: Flag = False
    id: Text = ""
    scanner: Text = ""
    position: Count = 0
    num_subsections: Count = Field(0, validation_alias="numsubpods")
    error: Flag = False
    states: _tuple_of(Annotated[_StateIn, _into(State)]) = ()
    expression_types: _one_or_many(
        Annotated[_ExpressionTypeIn, _into(ExpressionType)]
    ) = Field(ABSENT, validation_alias="expressiontypes")
    infos: _one_or_many(Annotated[_SectionInfoIn, _into(SectionInfo)]) = ABSENT


class _QueryResultIn(_WireModel):
    sections: Annotated[
        list[Annotated[_SectionIn, _into(Section)]], _or([])
    ] = Field(default_factory=list, validation_alias="pods")
    num_sections: Count = Field(0, validation_alias="numpods")
    success: Flag = False
    error: Annotated[
        StrictBool | Annotated[_ErrorIn, _into(FailureDetail)] | None,
        AfterValidator(_failure),
    ] = None
    did_you_means: _one_or_many(Annotated[_DidYouMeanIn, _into(DidYouMean)]) = Field(
        ABSENT, validation_alias="didyoumeans"
    )
    sources: _one_or_many(SourceIn) = ABSENT
    tips: _one_or_many(Annotated[_TipIn, _into(Tip)]) = ABSENT
    warnings: _one_or_many(Annotated[_WarningIn, _into(QueryWarning)]) = ABSENT
    assumptions: _one_or_many(Annotated[_AssumptionIn, _into(Assumption)]) = ABSENT
    datatypes: Text = ""
    timed_out: Text = Field("", validation_alias="timedout")
    timed_out_sections: Text = Field("", validation_alias="timedoutpods")
    recalculate: Text = ""
    id: Text = ""
    host: Text = ""
    server: Text = ""
    related: Text = ""
    version: Text = ""
    parse_id_server: Text = Field("", validation_alias="parseidserver")
    timing: Seconds = 0.0
    parse_timing: Seconds = Field(0.0, validation_alias="parsetiming")
    parse_timed_out: Flag = Field(False, validation_alias="parsetimedout")


class _DocumentIn(_WireModel):
    query_result: Annotated[_QueryResultIn, _into(QueryResult)] | None = Field(
        None, validation_alias="queryresult"
    )

