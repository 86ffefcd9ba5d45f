"""Result document model and its JSON decoder."""

from .decoding import decode_document, decode_document_string
from .types import (
    ABSENT,
    Absent,
    Assumption,
    AssumptionValue,
    DidYouMean,
    Document,
    ExpressionType,
    Failure,
    FailureDetail,
    FailureFlag,
    Link,
    Many,
    OneOrMany,
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

__all__ = [  # noqa: RUF022
    # Document tree
    "Document",
    "QueryResult",
    "Section",
    "Subsection",
    # Tagged unions
    "ABSENT",
    "Absent",
    "Single",
    "Many",
    "OneOrMany",
    "Failure",
    "FailureFlag",
    "FailureDetail",
    # Auxiliary records
    "Assumption",
    "AssumptionValue",
    "DidYouMean",
    "ExpressionType",
    "Link",
    "QueryWarning",
    "SectionInfo",
    "Source",
    "State",
    "SubsectionInfo",
    "Tip",
    "Unit",
    # Decoding
    "decode_document",
    "decode_document_string",
]
