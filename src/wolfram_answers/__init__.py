"""Pick the best answer out of Wolfram|Alpha query results."""

import importlib.metadata
import logging

from wolfram_answers.client import AsyncWolframClient, WolframClient
from wolfram_answers.config import (
    FrozenConfig,
    ResolvedConfig,
    config_override,
    config_scope,
    resolve_config,
)
from wolfram_answers.core import (
    Document,
    QueryResult,
    Section,
    Subsection,
    decode_document,
    decode_document_string,
)
from wolfram_answers.exceptions import (
    ConfigurationError,
    ExtractionError,
    InvalidFormatError,
    MissingKeyError,
    NetworkError,
    NoLikelyAnswerError,
    NoMatchError,
    NoNumericAnswerError,
    NoSectionsError,
    ProbablyDateError,
    WolframAnswersError,
)
from wolfram_answers.extraction import (
    AnswerExtractor,
    NumericAnswer,
    get_answer,
    get_longest_answer,
    get_numerical_answer,
    is_long_date_answer,
    is_number,
    normalize,
)
from wolfram_answers.frontdoor import ask, ask_async

# Version handling
try:
    __version__ = importlib.metadata.version("wolfram-answers")
except importlib.metadata.PackageNotFoundError:
    __version__ = "development"

# Set up a null handler for the library's root logger.
# This prevents 'No handler found' errors if the consuming app has no logging configured.
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Public API
__all__ = [  # noqa: RUF022
    # Front door
    "ask",
    "ask_async",
    # Clients
    "WolframClient",
    "AsyncWolframClient",
    # Document model
    "Document",
    "QueryResult",
    "Section",
    "Subsection",
    "decode_document",
    "decode_document_string",
    # Extraction
    "AnswerExtractor",
    "NumericAnswer",
    "get_answer",
    "get_numerical_answer",
    "get_longest_answer",
    "is_number",
    "is_long_date_answer",
    "normalize",
    # Configuration
    "FrozenConfig",
    "ResolvedConfig",
    "resolve_config",
    "config_scope",
    "config_override",
    # Exceptions
    "WolframAnswersError",
    "ConfigurationError",
    "MissingKeyError",
    "NetworkError",
    "InvalidFormatError",
    "ExtractionError",
    "NoSectionsError",
    "NoNumericAnswerError",
    "ProbablyDateError",
    "NoLikelyAnswerError",
    "NoMatchError",
]
