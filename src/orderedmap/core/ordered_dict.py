""" This module provides the :class:`OrderedDict`, an immutable mapping that keeps its keys in an explicit, caller
controlled order and supports positional inserts, deletes and moves.

Every operation that "changes" an :class:`OrderedDict` returns a new instance; the receiver is never modified. """

from __future__ import annotations

import copy
import logging
from typing import (
    Any,
    Callable,
    Dict,
    Iterable,
    Iterator,
    List,
    Mapping,
    Tuple,
    TypeVar,
    Union,
    overload,
)

from orderedmap.core.exceptions import IndexOutOfRange, InvariantViolation, KeyNotFound
from orderedmap.core.options import get_options
from orderedmap.core.upsert import End, Index, Insert, Position, Start, Update, Upsert
from orderedmap.util.asciitable import AsciiTable
from orderedmap.util.helpers import NotSet, clamp
from orderedmap.util.repr import SafeRepr
from orderedmap.util.text import safe_repr

K = TypeVar("K")
V = TypeVar("V")
U = TypeVar("U")
T = TypeVar("T")
A = TypeVar("A")

logger = logging.getLogger(__name__)

Pairs = Union[Mapping[K, V], Iterable[Tuple[K, V]]]


def _iter_pairs(pairs: Pairs[K, V]) -> Iterable[Tuple[K, V]]:
    if isinstance(pairs, Mapping):
        return pairs.items()
    return pairs


class OrderedDict(SafeRepr, Mapping[K, V]):
    """An immutable mapping with an explicit key order.

    The instance consists of a dictionary from key to value and a tuple of keys that defines the iteration order.
    The tuple contains every key of the dictionary exactly once. All public methods preserve that, in particular
    inserting a key that is already present moves it instead of adding a second order entry.

    Constructing from pairs folds them left to right. A repeated key takes the value *and the position* of its last
    occurrence:

    >>> OrderedDict([(1, 0), (2, 1), (1, 2)]).to_sequence()
    [(2, 1), (1, 2)]
    """

    _entries: Dict[K, V]
    _order: Tuple[K, ...]
    _hash: int | None

    def __init__(self, pairs: Pairs[K, V] = ()) -> None:
        entries: Dict[K, V] = {}
        for key, value in _iter_pairs(pairs):
            # Removing the key first moves it to the end of the dict's insertion order.
            entries.pop(key, None)
            entries[key] = value
        self._entries = entries
        self._order = tuple(entries)
        self._hash = None
        self._after_create()

    @classmethod
    def _create(cls, entries: Dict[K, V], order: Tuple[K, ...]) -> OrderedDict[K, V]:
        """Private constructor. The caller hands over ownership of *entries* and guarantees the invariants."""

        instance: OrderedDict[K, V] = cls.__new__(cls)
        instance._entries = entries
        instance._order = order
        instance._hash = None
        instance._after_create()
        return instance

    def _after_create(self) -> None:
        if get_options().check_invariants:
            self.check_invariants()

    @classmethod
    def empty(cls) -> OrderedDict[K, V]:
        return cls()

    @classmethod
    def from_sequence(cls, pairs: Pairs[K, V]) -> OrderedDict[K, V]:
        """Create an instance from (key, value) pairs. See the class documentation for repeated keys."""

        return cls(pairs)

    # Mapping protocol

    def __getitem__(self, key: K) -> V:
        try:
            return self._entries[key]
        except KeyError:
            raise KeyNotFound(key, len(self._order)) from None

    def __iter__(self) -> Iterator[K]:
        entries = self._entries
        return (key for key in self._order if key in entries)

    def __reversed__(self) -> Iterator[K]:
        entries = self._entries
        return (key for key in reversed(self._order) if key in entries)

    def __len__(self) -> int:
        return len(self._order)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedDict):
            return NotImplemented
        if self is other:
            return True
        if len(self._order) != len(other._order) or self._order != other._order:
            return False
        return all(self._entries[key] == other._entries[key] for key in self._order)

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash((OrderedDict, tuple(self.to_sequence())))
        return self._hash

    def __safe_repr__(self) -> str:
        return f"{type(self).__name__}({self.to_sequence()!r})"

    def __copy__(self) -> OrderedDict[K, V]:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> OrderedDict[K, V]:
        pairs = copy.deepcopy(self.to_sequence(), memo)
        return self._create(dict(pairs), tuple(key for key, _ in pairs))

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.to_sequence(),))

    @overload
    def get(self, key: K) -> V | None:
        ...

    @overload
    def get(self, key: K, default: T) -> V | T:
        ...

    def get(self, key: K, default: Any = None) -> Any:
        return self._entries.get(key, default)

    # Size

    def size(self) -> int:
        """Number of entries, O(1)."""

        return len(self._order)

    def is_empty(self) -> bool:
        return not self._order

    def has_key(self, key: K) -> bool:
        return key in self._entries

    # Positional reads

    @overload
    def get_index_of(self, key: K) -> int:
        ...

    @overload
    def get_index_of(self, key: K, default: T) -> int | T:
        ...

    def get_index_of(self, key: K, default: Any = NotSet.Value) -> Any:
        """Return the position of *key*. Raises :class:`KeyNotFound` if it is absent and no *default* is given."""

        if key in self._entries:
            try:
                return self._order.index(key)
            except ValueError:
                logger.debug("Key %r is in the mapping but not in the order sequence", key)
        if default is NotSet.Value:
            raise KeyNotFound(key, len(self._order))
        return default

    def _key_at(self, index: int) -> K | NotSet:
        if 0 <= index < len(self._order):
            return self._order[index]
        return NotSet.Value

    @overload
    def get_key_at(self, index: int) -> K:
        ...

    @overload
    def get_key_at(self, index: int, default: T) -> K | T:
        ...

    def get_key_at(self, index: int, default: Any = NotSet.Value) -> Any:
        """Return the key at *index*. Negative indices are not wrapped around; they are out of range like indices
        past the end. Raises :class:`IndexOutOfRange` unless a *default* is given."""

        key = self._key_at(index)
        if key is not NotSet.Value:
            return key
        if default is NotSet.Value:
            raise IndexOutOfRange(index, len(self._order))
        return default

    @overload
    def get_value_at(self, index: int) -> V:
        ...

    @overload
    def get_value_at(self, index: int, default: T) -> V | T:
        ...

    def get_value_at(self, index: int, default: Any = NotSet.Value) -> Any:
        key = self._key_at(index)
        if key is NotSet.Value or key not in self._entries:
            if default is NotSet.Value:
                raise IndexOutOfRange(index, len(self._order))
            return default
        return self._entries[key]

    @overload
    def get_entry_at(self, index: int) -> tuple[K, V]:
        ...

    @overload
    def get_entry_at(self, index: int, default: T) -> tuple[K, V] | T:
        ...

    def get_entry_at(self, index: int, default: Any = NotSet.Value) -> Any:
        key = self._key_at(index)
        if key is NotSet.Value or key not in self._entries:
            if default is NotSet.Value:
                raise IndexOutOfRange(index, len(self._order))
            return default
        return key, self._entries[key]

    def first(self) -> tuple[K, V]:
        return self.get_entry_at(0)

    def last(self) -> tuple[K, V]:
        return self.get_entry_at(len(self._order) - 1)

    # Positional inserts

    def _without_key(self, key: K) -> Tuple[K, ...]:
        """Return the order sequence with *key* removed (if it is present)."""

        if key not in self._entries:
            return self._order
        position = self._order.index(key)
        return self._order[:position] + self._order[position + 1 :]

    def _insert(self, index: int, key: K, value: V) -> OrderedDict[K, V]:
        entries = dict(self._entries)
        entries[key] = value
        order = self._without_key(key)
        index = clamp(index, 0, len(order))
        return self._create(entries, order[:index] + (key,) + order[index:])

    def prepend(self, key: K, value: V) -> OrderedDict[K, V]:
        """Store *value* for *key* and move the key to the first position."""

        return self._insert(0, key, value)

    def append(self, key: K, value: V) -> OrderedDict[K, V]:
        """Store *value* for *key* and move the key to the last position."""

        return self._insert(len(self._order), key, value)

    def insert_at(self, index: int, key: K, value: V) -> OrderedDict[K, V]:
        """Store *value* for *key* and move the key to *index*.

        If the key is already present it is removed from its old position first, and *index* refers to the
        positions of the remaining keys. An *index* at or past the end appends, a negative *index* prepends."""

        if index < 0 or index > len(self._order):
            logger.debug("Clamping insert index %d for OrderedDict of size %d", index, len(self._order))
        return self._insert(index, key, value)

    def set(self, key: K, value: V) -> OrderedDict[K, V]:
        """Store *value* for *key*. An existing key keeps its position, a new key is appended."""

        if key not in self._entries:
            return self._insert(len(self._order), key, value)
        return self._replace(key, value)

    def merge(self, other: Pairs[K, V]) -> OrderedDict[K, V]:
        """Apply :meth:`set` for every pair in *other*, in order. Returns an instance with the existing keys at their
        positions and the new keys appended in the order they first appear in *other*."""

        entries = dict(self._entries)
        appended: Dict[K, None] = {}
        changed = False
        for key, value in _iter_pairs(other):
            if key not in self._entries:
                appended[key] = None
            entries[key] = value
            changed = True
        if not changed:
            return self
        return self._create(entries, self._order + tuple(appended))

    def _replace(self, key: K, value: V) -> OrderedDict[K, V]:
        entries = dict(self._entries)
        entries[key] = value
        return self._create(entries, self._order)

    # Deletion

    def delete(self, key: K) -> OrderedDict[K, V]:
        """Remove *key*. Returns the instance unchanged if the key is absent."""

        if key not in self._entries:
            logger.debug("Not deleting absent key %r", key)
            return self
        entries = dict(self._entries)
        del entries[key]
        return self._create(entries, self._without_key(key))

    def delete_at(self, index: int) -> OrderedDict[K, V]:
        """Remove the key at *index*. Returns the instance unchanged if *index* is out of range."""

        key = self._key_at(index)
        if key is NotSet.Value:
            logger.debug("Not deleting at index %d, OrderedDict has size %d", index, len(self._order))
            return self
        return self.delete(key)

    def delete_at_if_key(self, index: int, key: K) -> OrderedDict[K, V]:
        """Remove the entry at *index* only if that entry's key is *key*."""

        if self._key_at(index) != key:
            logger.debug("Not deleting at index %d, the key there is not %r", index, key)
            return self
        return self.delete(key)

    def take(self, keys: Iterable[K]) -> OrderedDict[K, V]:
        """Keep only the entries whose key is in *keys*, in their current order."""

        wanted = keys if isinstance(keys, (set, frozenset)) else set(keys)
        return self._select(lambda key: key in wanted)

    def drop(self, keys: Iterable[K]) -> OrderedDict[K, V]:
        """Remove the entries whose key is in *keys*."""

        unwanted = keys if isinstance(keys, (set, frozenset)) else set(keys)
        return self._select(lambda key: key not in unwanted)

    def _select(self, predicate: Callable[[K], bool]) -> OrderedDict[K, V]:
        order = tuple(key for key in self._order if key in self._entries and predicate(key))
        if len(order) == len(self._order):
            return self
        return self._create({key: self._entries[key] for key in order}, order)

    def index_range(self, start: int, stop: int | None = None) -> OrderedDict[K, V]:
        """Return the entries at positions `start .. stop-1`. Out of range bounds are clamped like slice bounds,
        except that negative bounds count as zero."""

        size = len(self._order)
        start = clamp(start, 0, size)
        stop = size if stop is None else clamp(stop, start, size)
        if start == 0 and stop == size:
            return self
        order = self._order[start:stop]
        return self._create({key: self._entries[key] for key in order}, order)

    # Reordering

    def reorder(self, old_index: int, new_index: int) -> OrderedDict[K, V]:
        """Move the entry at *old_index* to *new_index*. The entries in between shift by one position towards the
        old index; all other entries keep their position.

        Both indices are clamped into the valid range, and moving an entry onto itself returns the instance
        unchanged.

        >>> list(OrderedDict.from_sequence(zip("abcdef", range(6))).reorder(1, 3))
        ['a', 'c', 'd', 'b', 'e', 'f']
        """

        size = len(self._order)
        if size == 0:
            return self
        if not 0 <= old_index < size or not 0 <= new_index < size:
            logger.debug("Clamping reorder(%d, %d) for OrderedDict of size %d", old_index, new_index, size)
        old_index = clamp(old_index, 0, size - 1)
        new_index = clamp(new_index, 0, size - 1)
        if old_index == new_index:
            return self

        order = self._order
        moved = order[old_index : old_index + 1]
        if old_index < new_index:
            # The gap segment slides left, the moved key lands after it.
            gap = order[old_index + 1 : new_index + 1]
            result = order[:old_index] + gap + moved + order[new_index + 1 :]
        else:
            # The gap segment slides right, the moved key lands before it.
            gap = order[new_index:old_index]
            result = order[:new_index] + moved + gap + order[old_index + 1 :]
        return self._create(self._entries, result)

    # Derived sequences

    def to_sequence(self) -> List[Tuple[K, V]]:
        entries = self._entries
        return [(key, entries[key]) for key in self._order if key in entries]

    def to_indexed_sequence(self) -> List[Tuple[int, K, V]]:
        """Like :meth:`to_sequence`, with each entry's position in the order sequence, so the indices agree with
        :meth:`get_index_of` and :meth:`get_key_at`."""

        entries = self._entries
        return [(index, key, entries[key]) for index, key in enumerate(self._order) if key in entries]

    def fold(self, initial: A, func: Callable[[A, K, V, int], A]) -> A:
        """Left fold over the entries. *func* receives the accumulator, the key, the value and the index."""

        acc = initial
        for index, key, value in self.to_indexed_sequence():
            acc = func(acc, key, value, index)
        return acc

    def each(self, func: Callable[[K, V, int], Any]) -> None:
        """Call *func* with the key, value and index of every entry, in order."""

        def _step(acc: None, key: K, value: V, index: int) -> None:
            func(key, value, index)

        self.fold(None, _step)

    def map_values(self, func: Callable[[K, V, int], U]) -> OrderedDict[K, U]:
        """Return an instance with the same keys in the same order and values replaced by the result of *func*."""

        entries: Dict[K, U] = {key: func(key, value, index) for index, key, value in self.to_indexed_sequence()}
        return type(self)._create(entries, tuple(entries))  # type: ignore[arg-type,return-value]

    def filter(self, predicate: Callable[[K, V, int], bool]) -> OrderedDict[K, V]:
        """Keep the entries for which *predicate* returns `True`."""

        entries = {key: value for index, key, value in self.to_indexed_sequence() if predicate(key, value, index)}
        if len(entries) == len(self._order):
            return self
        return self._create(entries, tuple(entries))

    # Upsert

    def upsert(self, key: K, handler: Callable[[Upsert[K, V]], OrderedDict[K, V]]) -> OrderedDict[K, V]:
        """Update or insert *key* through a single callback.

        *handler* is called exactly once, with an :class:`~orderedmap.core.upsert.Update` if the key is present or
        an :class:`~orderedmap.core.upsert.Insert` if it is absent, and its return value is returned. See
        :mod:`orderedmap.core.upsert` for an example."""

        if key in self._entries:
            return handler(Update(key, self._entries[key], lambda value: self._replace(key, value)))
        return handler(Insert(key, lambda position, value: self._insert_at_position(position, key, value)))

    def _insert_at_position(self, position: Position, key: K, value: V) -> OrderedDict[K, V]:
        if isinstance(position, Start):
            return self.prepend(key, value)
        elif isinstance(position, End):
            return self.append(key, value)
        elif isinstance(position, Index):
            if position.index <= 0:
                return self.prepend(key, value)
            return self.insert_at(position.index, key, value)
        else:
            raise TypeError(f"expected Start, End or Index, got {type(position).__name__}")

    # Diagnostics

    def check_invariants(self) -> None:
        """Raise :class:`InvariantViolation` if the order sequence and the mapping disagree."""

        problems: list[str] = []
        seen: set[Any] = set()
        for index, key in enumerate(self._order):
            if key in seen:
                problems.append(f"key {safe_repr(key)} appears more than once in the order (again at {index})")
            elif key not in self._entries:
                problems.append(f"key {safe_repr(key)} at index {index} has no value")
            seen.add(key)
        for key in self._entries:
            if key not in seen:
                problems.append(f"key {safe_repr(key)} has a value but no position")
        if problems:
            raise InvariantViolation(problems)

    def to_table(self) -> AsciiTable:
        table = AsciiTable(["index", "key", "value"])
        for index, key, value in self.to_indexed_sequence():
            table.add_row(index, safe_repr(key), safe_repr(value))
        return table
