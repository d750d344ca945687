from __future__ import annotations

import logging

import pytest

from orderedmap import Options, configure_logging, get_options, options_override, set_options


def test__Options__from_env() -> None:
    assert Options.from_env({}) == Options(check_invariants=False, log_level=logging.WARNING)
    options = Options.from_env({"ORDEREDMAP_CHECK_INVARIANTS": "1", "ORDEREDMAP_LOG_LEVEL": "debug"})
    assert options == Options(check_invariants=True, log_level=logging.DEBUG)
    assert not Options.from_env({"ORDEREDMAP_CHECK_INVARIANTS": "yes"}).check_invariants


def test__Options__from_env_ignores_unknown_log_level(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="orderedmap.core.options"):
        assert Options.from_env({"ORDEREDMAP_LOG_LEVEL": "chatty"}).log_level == logging.WARNING
    assert "Ignoring unknown log level" in caplog.text


def test__options_override_restores_previous_options() -> None:
    previous = get_options()
    with options_override(check_invariants=not previous.check_invariants) as current:
        assert get_options() is current
        assert current.check_invariants != previous.check_invariants
    assert get_options() is previous


def test__set_options_returns_previous() -> None:
    previous = get_options()
    try:
        assert set_options(Options(log_level=logging.ERROR)) is previous
        assert get_options().log_level == logging.ERROR
    finally:
        set_options(previous)


@pytest.mark.parametrize(
    "verbosity,level",
    [(None, logging.ERROR), (-1, logging.ERROR), (0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG)],
)
def test__configure_logging__maps_verbosity_to_level(
    monkeypatch: pytest.MonkeyPatch, verbosity: int | None, level: int
) -> None:
    calls: list[dict[str, object]] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    with options_override(log_level=logging.ERROR):
        configure_logging(verbosity)
    assert len(calls) == 1
    assert calls[0]["level"] == level
    assert "%(message)s" in str(calls[0]["format"])
