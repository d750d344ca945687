from __future__ import annotations

from typing_extensions import Protocol


class SupportsLen(Protocol):
    def __len__(self) -> int:
        ...


def pluralize(word: str, count: int | SupportsLen, plural: str | None = None) -> str:
    """Returns *word* if *count* is one, otherwise *plural* (which defaults to *word* with an appended "s")."""

    if not isinstance(count, int):
        count = len(count)
    if count == 1:
        return word
    return plural if plural is not None else f"{word}s"


def safe_repr(value: object, max_length: int = 80) -> str:
    """Like :func:`repr`, but never raises and truncates long representations."""

    try:
        result = repr(value)
    except Exception:
        return f"<... {type(value).__name__} ...>"
    if len(result) > max_length:
        result = result[: max_length - 3] + "..."
    return result
