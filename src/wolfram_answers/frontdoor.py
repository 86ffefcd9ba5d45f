"""Scenario-first convenience helpers: ask a question, get one answer.

These wrap the clients and the extraction engine without changing their
behavior.
"""

from __future__ import annotations

from .client import AsyncWolframClient, WolframClient
from .config import FrozenConfig, resolve_config
from .core import Document
from .extraction import AnswerExtractor


def _answer(document: Document, cfg: FrozenConfig, *, keep_interpretation: bool) -> str:
    if not keep_interpretation:
        document.remove_input_interpretation()
    return AnswerExtractor.from_config(cfg).answer(document)


def ask(
    query: str,
    *,
    cfg: FrozenConfig | None = None,
    keep_interpretation: bool = False,
) -> str:
    """Query Wolfram|Alpha and return the best answer.

    Args:
        query: Natural-language query, e.g. ``"distance to the moon"``.
        cfg: Optional frozen configuration. If omitted, `resolve_config()` is used.
        keep_interpretation: Keep the "Input interpretation" section as an
            answer candidate.

    Returns:
        The numerical answer as ``"<value> <unit>"`` when there is one,
        otherwise the longest answer text.

    Raises:
        MissingKeyError: If no app id is configured.
        NetworkError: If the request fails.
        InvalidFormatError: If the response cannot be decoded.
        NoSectionsError: If Wolfram|Alpha returned no sections.

    Example:
        ```python
        from wolfram_answers import ask

        print(ask("population of France"))
        ```
    """
    final_cfg = cfg or resolve_config().to_frozen()
    with WolframClient(final_cfg) as client:
        document = client.query(query)
    return _answer(document, final_cfg, keep_interpretation=keep_interpretation)


async def ask_async(
    query: str,
    *,
    cfg: FrozenConfig | None = None,
    keep_interpretation: bool = False,
) -> str:
    """Async variant of `ask()` with the same arguments and errors."""
    final_cfg = cfg or resolve_config().to_frozen()
    async with AsyncWolframClient(final_cfg) as client:
        document = await client.query(query)
    return _answer(document, final_cfg, keep_interpretation=keep_interpretation)
