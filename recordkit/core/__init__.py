from .collection import dedupe, filter, for_each, map, merge, omit, sort
from .config import Settings, load_settings
from .errors import RecordkitError, RecordUpdateError
from .model import (
    add,
    add_or_move,
    first,
    get,
    get_index,
    get_random,
    has,
    last,
    move,
    move_by_index,
    move_to_end,
    remove,
    reset_random,
    update,
)
from .sorting import sort_by

__all__ = [
    "add",
    "add_or_move",
    "dedupe",
    "filter",
    "first",
    "for_each",
    "get",
    "get_index",
    "get_random",
    "has",
    "last",
    "load_settings",
    "map",
    "merge",
    "move",
    "move_by_index",
    "move_to_end",
    "omit",
    "RecordkitError",
    "RecordUpdateError",
    "remove",
    "reset_random",
    "Settings",
    "sort",
    "sort_by",
    "update",
]
