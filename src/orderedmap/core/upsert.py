""" Variants passed to the handler of :meth:`OrderedDict.upsert() <orderedmap.core.ordered_dict.OrderedDict.upsert>`.

The handler receives exactly one of :class:`Update` (the key exists) or :class:`Insert` (it does not) and returns
whatever the variant's :meth:`apply` method produces. Because the two variants carry different continuations, a
handler cannot update a missing key or insert an existing one by mistake.

.. code:: Example

    def increment(op: Upsert[str, int]) -> OrderedDict[str, int]:
        if isinstance(op, Update):
            return op.apply(op.value + 1)
        return op.apply(Start(), 1)

    counts = counts.upsert("hits", increment)
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Callable, Generic, TypeVar, Union

if TYPE_CHECKING:
    from orderedmap.core.ordered_dict import OrderedDict

K = TypeVar("K")
V = TypeVar("V")


@dataclasses.dataclass(frozen=True)
class Start:
    """Insert before the first entry."""


@dataclasses.dataclass(frozen=True)
class End:
    """Insert after the last entry."""


@dataclasses.dataclass(frozen=True)
class Index:
    """Insert at the given position. Values `<= 0` behave like :class:`Start`, values past the end like :class:`End`."""

    index: int


Position = Union[Start, End, Index]


@dataclasses.dataclass(frozen=True)
class Update(Generic[K, V]):
    """The key is present. :meth:`apply` stores a new value at the key's current position."""

    key: K
    value: V
    _replace: Callable[[V], OrderedDict[K, V]] = dataclasses.field(repr=False, compare=False)

    def apply(self, value: V) -> OrderedDict[K, V]:
        return self._replace(value)


@dataclasses.dataclass(frozen=True)
class Insert(Generic[K, V]):
    """The key is absent. :meth:`apply` stores the value at the given position."""

    key: K
    _insert: Callable[[Position, V], OrderedDict[K, V]] = dataclasses.field(repr=False, compare=False)

    def apply(self, position: Position, value: V) -> OrderedDict[K, V]:
        return self._insert(position, value)


Upsert = Union[Update[K, V], Insert[K, V]]
