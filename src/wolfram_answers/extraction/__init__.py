"""Answer extraction: normalization, classification and selection."""

from .classifiers import is_long_date_answer, is_number
from .engine import (
    AnswerExtractor,
    get_answer,
    get_longest_answer,
    get_numerical_answer,
)
from .normalize import normalize
from .numeric import NumericAnswer, find_numeric_answer, numeric_density

__all__ = [
    "AnswerExtractor",
    "NumericAnswer",
    "find_numeric_answer",
    "get_answer",
    "get_longest_answer",
    "get_numerical_answer",
    "is_long_date_answer",
    "is_number",
    "normalize",
    "numeric_density",
]
