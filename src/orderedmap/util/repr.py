from __future__ import annotations

import abc
import logging
import threading

logger = logging.getLogger(__name__)

_active = threading.local()


def _placeholder(obj: object) -> str:
    return f"<... {type(obj).__qualname__} ...>"


class SafeRepr:
    """Mixin that turns exceptions raised while building a `repr()` into a placeholder and a logged traceback.

    Containers hold arbitrary objects whose `__repr__` may fail or may refer back to the container itself. Neither
    case is allowed to break the container's own representation."""

    def __repr__(self) -> str:
        active: set[int] = _active.__dict__.setdefault("ids", set())
        if id(self) in active:
            return _placeholder(self)
        active.add(id(self))
        try:
            return self.__safe_repr__()
        except Exception:
            logger.exception(
                "An unhandled exception occurred converting object of type `%s` to string.",
                type(self).__qualname__,
            )
            return _placeholder(self)
        finally:
            active.discard(id(self))

    @abc.abstractmethod
    def __safe_repr__(self) -> str:
        ...


class SafeStr:
    """Mixin for exceptions whose message embeds user supplied keys."""

    def __str__(self) -> str:
        try:
            return self.__safe_str__()
        except Exception:
            logger.exception(
                "An unhandled exception occurred converting object of type `%s` to string.",
                type(self).__qualname__,
            )
            return _placeholder(self)

    @abc.abstractmethod
    def __safe_str__(self) -> str:
        ...
