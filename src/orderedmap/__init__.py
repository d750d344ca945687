__version__ = "0.1.0"

from orderedmap.core import (
    End,
    Index,
    IndexOutOfRange,
    Insert,
    InvariantViolation,
    KeyNotFound,
    OrderedDict,
    OrderedMapError,
    Options,
    Position,
    Start,
    Update,
    Upsert,
    configure_logging,
    get_options,
    options_override,
    set_options,
)

__all__ = [
    "End",
    "Index",
    "IndexOutOfRange",
    "Insert",
    "InvariantViolation",
    "KeyNotFound",
    "Options",
    "OrderedDict",
    "OrderedMapError",
    "Position",
    "Start",
    "Update",
    "Upsert",
    "configure_logging",
    "get_options",
    "options_override",
    "set_options",
]
