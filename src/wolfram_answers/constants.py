"""
Project-wide constants for Wolfram|Alpha answer extraction
"""  # noqa: D200, D212, D415

from typing import Final

# ==============================================================================
# API and Network Configuration
# ==============================================================================

FULL_RESULTS_URL: Final = "https://api.wolframalpha.com/v2/query"
SPOKEN_RESULTS_URL: Final = "https://api.wolframalpha.com/v1/spoken"

NETWORK_TIMEOUT = 30.0  # seconds

# ==============================================================================
# Answer Extraction Heuristics
# ==============================================================================

# Share of words that must be numbers for a subsection to count as numerical
NUMERICAL_ANSWER_PROBABILITY = 0.1
# Share of words that must be weekday/month names for a text to count as a date
DATE_ANSWER_PROBABILITY = 0.3

# Whole-token number, e.g. "-3", ".5", "6.022×10^23"
NUMBER_PATTERN: Final = r"-?\d*\.?\d+(?:×10\^-?\d+)?"

# Greedy: "a (b) c (d)" loses everything from the first "(" to the last ")"
PARENS_PATTERN: Final = r"\(.*\)"

# Characters dropped before counting date words
DATE_PUNCTUATION_PATTERN: Final = r"[-.,!?]"

INPUT_INTERPRETATION_TITLE: Final = "Input interpretation"

WEEKDAYS: Final = frozenset(
    {
        "Monday",
        "Tuesday",
        "Wednesday",
        "Thursday",
        "Friday",
        "Saturday",
        "Sunday",
    }
)

MONTHS: Final = frozenset(
    {
        "January",
        "February",
        "March",
        "April",
        "May",
        "June",
        "July",
        "August",
        "September",
        "October",
        "November",
        "December",
    }
)

DATE_WORDS: Final = WEEKDAYS | MONTHS
