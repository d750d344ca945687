""" Pytest helpers for code that uses :class:`~orderedmap.core.ordered_dict.OrderedDict`. Register them from a
`conftest.py` with `from orderedmap.testing import *  # noqa: F401,F403`. """

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Iterator

import pytest

from orderedmap.core.options import Options, options_override
from orderedmap.core.ordered_dict import OrderedDict

logger = logging.getLogger(__name__)

__all__ = ["assert_invariants", "odict_factory", "strict_invariants"]


def assert_invariants(odict: OrderedDict[Any, Any]) -> None:
    """Checks the invariants of *odict* and that its size agrees with everything that can be read from it."""

    odict.check_invariants()
    keys = list(odict.keys())
    assert len(keys) == len(set(keys)) == odict.size() == len(odict)
    assert [odict.get_index_of(key) for key in keys] == list(range(len(keys)))
    assert odict.is_empty() == (odict.size() == 0)


def make_odict(keys: Iterable[Any]) -> OrderedDict[Any, int]:
    """Returns an OrderedDict that maps every key to its position, e.g. `make_odict("abc")` gives
    `{a: 0, b: 1, c: 2}`."""

    return OrderedDict.from_sequence((key, index) for index, key in enumerate(keys))


@pytest.fixture(name="odict_factory")
def odict_factory() -> Callable[[Iterable[Any]], OrderedDict[Any, int]]:
    return make_odict


@pytest.fixture(name="strict_invariants")
def strict_invariants() -> Iterator[Options]:
    """Enables invariant checking on every OrderedDict created while the test runs."""

    with options_override(check_invariants=True) as options:
        logger.debug("Invariant checking enabled")
        yield options
