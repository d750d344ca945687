from orderedmap.core.exceptions import IndexOutOfRange, InvariantViolation, KeyNotFound, OrderedMapError
from orderedmap.core.options import Options, configure_logging, get_options, options_override, set_options
from orderedmap.core.ordered_dict import OrderedDict
from orderedmap.core.upsert import End, Index, Insert, Position, Start, Update, Upsert

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
