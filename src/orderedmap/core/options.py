""" Process wide configuration of the :mod:`orderedmap` package, and a helper to set up logging for scripts that
use it. """

from __future__ import annotations

import contextlib
import dataclasses
import logging
import os
from typing import Any, Iterator, Mapping

from termcolor import colored

ENV_CHECK_INVARIANTS = "ORDEREDMAP_CHECK_INVARIANTS"
ENV_LOG_LEVEL = "ORDEREDMAP_LOG_LEVEL"

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class Options:
    #: Validate the order sequence against the mapping whenever a new OrderedDict is created. This turns every
    #: operation into at least O(n), so it is meant for tests and debugging.
    check_invariants: bool = False

    #: The level that :func:`configure_logging` uses when it is called without a verbosity.
    log_level: int = logging.WARNING

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Options:
        if environ is None:
            environ = os.environ
        log_level = cls.log_level
        level_name = environ.get(ENV_LOG_LEVEL, "").strip().upper()
        if level_name:
            value = logging.getLevelName(level_name)
            if isinstance(value, int):
                log_level = value
            else:
                logger.warning("Ignoring unknown log level %s=%r", ENV_LOG_LEVEL, level_name)
        return cls(
            check_invariants=environ.get(ENV_CHECK_INVARIANTS) == "1",
            log_level=log_level,
        )


_options: Options | None = None


def get_options() -> Options:
    """Returns the current options. They are read from the environment on first access."""

    global _options
    if _options is None:
        _options = Options.from_env()
    return _options


def set_options(options: Options) -> Options | None:
    """Replaces the current options and returns the previous ones (`None` if they were never read)."""

    global _options
    previous, _options = _options, options
    return previous


@contextlib.contextmanager
def options_override(**changes: Any) -> Iterator[Options]:
    """Temporarily replace fields of the current options."""

    previous = get_options()
    current = dataclasses.replace(previous, **changes)
    set_options(current)
    try:
        yield current
    finally:
        set_options(previous)


def configure_logging(verbosity: int | None = None) -> None:
    """Installs a colored stream handler on the root logger.

    :param verbosity: `0` for warnings, `1` for info, `2` and above for debug, negative values for errors only.
        If not specified, the level from :attr:`Options.log_level` is used.
    """

    if verbosity is None:
        level = get_options().log_level
    elif verbosity > 1:
        level = logging.DEBUG
    elif verbosity > 0:
        level = logging.INFO
    elif verbosity == 0:
        level = logging.WARNING
    else:
        level = logging.ERROR
    logging.basicConfig(
        level=level,
        format=f"{colored('%(levelname)-7s', 'magenta')} | {colored('%(name)-24s', 'blue')} | "
        f"{colored('%(message)s', 'cyan')}",
    )
