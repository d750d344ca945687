from __future__ import annotations

from typing import Any, Sequence

from orderedmap.util.repr import SafeStr
from orderedmap.util.text import pluralize, safe_repr


class OrderedMapError(Exception):
    """Base class for all errors raised by this package."""


class KeyNotFound(SafeStr, OrderedMapError, KeyError):
    """Raised by key based lookups when the key is not present."""

    def __init__(self, key: Any, size: int) -> None:
        super().__init__(key)
        self.key = key
        self.size = size

    def __safe_str__(self) -> str:
        entries = pluralize("entry", self.size, "entries")
        return f"key {safe_repr(self.key)} not found in OrderedDict with {self.size} {entries}"


class IndexOutOfRange(SafeStr, OrderedMapError, IndexError):
    """Raised by position based lookups when the index is negative or not less than the size."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(index)
        self.index = index
        self.size = size

    def __safe_str__(self) -> str:
        if self.size == 0:
            return f"index {self.index} out of range for empty OrderedDict"
        return f"index {self.index} out of range [0, {self.size - 1}]"


class InvariantViolation(SafeStr, OrderedMapError, AssertionError):
    """Raised when the order sequence and the mapping of an OrderedDict disagree."""

    def __init__(self, problems: Sequence[str]) -> None:
        super().__init__(*problems)
        self.problems = list(problems)

    def __safe_str__(self) -> str:
        message_parts = [f"OrderedDict invariants violated ({len(self.problems)} {pluralize('problem', self.problems)}):"]
        message_parts += [f"  - {problem}" for problem in self.problems]
        return "\n".join(message_parts)
