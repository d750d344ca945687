from __future__ import annotations

from typing import Any, Callable, Iterable, List

import pytest

from orderedmap import End, Index, Insert, OrderedDict, Start, Update, Upsert
from orderedmap.testing import assert_invariants

Factory = Callable[[Iterable[Any]], "OrderedDict[Any, int]"]


def _increment_or_insert(position: Any) -> Callable[[Upsert[str, int]], OrderedDict[str, int]]:
    def handler(op: Upsert[str, int]) -> OrderedDict[str, int]:
        if isinstance(op, Update):
            return op.apply(op.value + 100)
        return op.apply(position, -1)

    return handler


def test__OrderedDict__upsert_updates_existing_key_in_place(odict_factory: Factory) -> None:
    odict = odict_factory("abc")
    result = odict.upsert("b", _increment_or_insert(Start()))
    assert result.to_sequence() == [("a", 0), ("b", 101), ("c", 2)]
    assert_invariants(result)


@pytest.mark.parametrize(
    "position,expected",
    [
        (Start(), "zabc"),
        (End(), "abcz"),
        (Index(0), "zabc"),
        (Index(-4), "zabc"),
        (Index(1), "azbc"),
        (Index(3), "abcz"),
        (Index(99), "abcz"),
    ],
)
def test__OrderedDict__upsert_inserts_missing_key(odict_factory: Factory, position: Any, expected: str) -> None:
    odict = odict_factory("abc")
    result = odict.upsert("z", _increment_or_insert(position))
    assert "".join(result) == expected
    assert result["z"] == -1
    assert_invariants(result)


def test__OrderedDict__upsert_calls_handler_exactly_once(odict_factory: Factory) -> None:
    odict = odict_factory("abc")
    calls: List[Upsert[str, int]] = []

    def handler(op: Upsert[str, int]) -> OrderedDict[str, int]:
        calls.append(op)
        if isinstance(op, Update):
            return op.apply(op.value)
        return op.apply(End(), 0)

    odict.upsert("a", handler)
    odict.upsert("q", handler)
    assert len(calls) == 2
    assert isinstance(calls[0], Update)
    assert calls[0].key == "a"
    assert calls[0].value == 0
    assert isinstance(calls[1], Insert)
    assert calls[1].key == "q"


def test__OrderedDict__upsert_handler_decides_result(odict_factory: Factory) -> None:
    """The handler may also return the receiver itself, leaving the structure unchanged."""

    odict = odict_factory("abc")
    assert odict.upsert("z", lambda op: odict) is odict


def test__OrderedDict__upsert_counts_words() -> None:
    def count(op: Upsert[str, int]) -> OrderedDict[str, int]:
        if isinstance(op, Update):
            return op.apply(op.value + 1)
        return op.apply(End(), 1)

    counts: OrderedDict[str, int] = OrderedDict()
    for word in "the cat saw the other cat near the door".split():
        counts = counts.upsert(word, count)
    assert counts.to_sequence() == [("the", 3), ("cat", 2), ("saw", 1), ("other", 1), ("near", 1), ("door", 1)]


def test__OrderedDict__upsert_does_not_change_receiver(odict_factory: Factory) -> None:
    odict = odict_factory("abc")
    odict.upsert("a", _increment_or_insert(End()))
    odict.upsert("z", _increment_or_insert(Start()))
    assert odict.to_sequence() == [("a", 0), ("b", 1), ("c", 2)]


def test__Insert__rejects_unknown_position(odict_factory: Factory) -> None:
    odict = odict_factory("abc")
    with pytest.raises(TypeError):
        odict.upsert("z", lambda op: op.apply("start", 1))  # type: ignore[arg-type,call-arg,union-attr]
