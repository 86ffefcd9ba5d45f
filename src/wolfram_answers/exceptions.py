"""Exceptions for Wolfram|Alpha answer extraction"""  # noqa: D415


class WolframAnswersError(Exception):
    """Base exception for all wolfram_answers errors"""  # noqa: D415


class ConfigurationError(WolframAnswersError):
    """Raised when configuration values or files are invalid"""  # noqa: D415


class MissingKeyError(WolframAnswersError):
    """Raised when the Wolfram|Alpha app id is required but not configured"""  # noqa: D415


class NetworkError(WolframAnswersError):
    """Raised when the HTTP request to Wolfram|Alpha fails"""  # noqa: D415


class InvalidFormatError(WolframAnswersError):
    """Raised when a response body does not decode into a Document"""  # noqa: D415


class ExtractionError(WolframAnswersError):
    """Base class for failures of the answer extraction engine"""  # noqa: D415


class NoSectionsError(ExtractionError):
    """Raised when a result has no sections to scan.

    Check the result for an error payload or for "did you mean" suggestions.
    """


class NoNumericAnswerError(ExtractionError):
    """A numerical scan finished without a usable number.

    `get_answer()` recovers from this family by falling back to the longest
    answer.
    """


class ProbablyDateError(NoNumericAnswerError):
    """Raised when a long-form date was found before any numerical answer"""  # noqa: D415


class NoLikelyAnswerError(NoNumericAnswerError):
    """Raised when no subsection is above the numerical likeliness threshold"""  # noqa: D415


class NoMatchError(ExtractionError):
    """Raised when a likely numerical subsection contains no number.

    The density check and the number finder disagree; this should never happen.
    """
