"""Model accessors: identity-based lookup and mutation of one ordered list.

Every function takes the caller's list and mutates it in place where it
mutates at all. "Not found" is reported as ``None``, except ``get_index``
which reports ``-1``.
"""

from __future__ import annotations

import logging
import random
from typing import Any, List, Optional

from .config import load_settings
from .records import assign_fields, read_field, same_identity
from .types import Key, Record, Records

log = logging.getLogger("recordkit.model")

_RNG: Optional[random.Random] = None


def _rng() -> random.Random:
    global _RNG
    if _RNG is None:
        _RNG = random.Random(load_settings().random_seed)
    return _RNG


def reset_random() -> None:
    """Drop the module RNG so the next ``get_random`` re-reads its seed."""
    global _RNG
    _RNG = None


def first(models: Records) -> Optional[Record]:
    return models[0] if models else None


def last(models: Records) -> Optional[Record]:
    return models[-1] if models else None


def get(models: Records, id: Any, key: Key = "id") -> Optional[Record]:
    """
    Return the first record whose identity equals ``id``.

    A ``None`` id never matches, so a forgotten id cannot select a record
    that merely lacks the key field.
    """
    if id is None:
        return None
    for model in models:
        if same_identity(read_field(model, key), id):
            return model
    return None


def has(models: Records, id: Any, key: Key = "id") -> bool:
    return get(models, id, key) is not None


def get_index(models: Records, id: Any, key: Key = "id") -> int:
    for index, model in enumerate(models):
        if same_identity(read_field(model, key), id):
            return index
    return -1


def get_random(models: Records, rng: Optional[random.Random] = None) -> Optional[Record]:
    if not models:
        return None
    index = int((rng or _rng()).random() * len(models))
    return models[index]


def add(models: Records, model: Record, index: int = -1, key: Key = "id") -> Optional[Record]:
    """
    Add ``model`` to ``models``.

    If a record with the same identity exists its fields are updated from
    ``model`` and the existing record is returned; it keeps its position.
    Otherwise ``model`` is inserted at ``index`` when that is a valid
    position, or appended.
    """
    id = read_field(model, key)
    if get(models, id, key) is not None:
        return update(models, id, model, key)
    if -1 < index < len(models):
        models.insert(index, model)
    else:
        models.append(model)
    return model


def add_or_move(models: Records, model: Record, index: int = -1, key: Key = "id") -> Optional[Record]:
    """
    Add ``model``, or move the existing record with its identity to ``index``.

    As with ``add``, an index outside the list means the end of the list, so
    an existing record is always placed and returned.
    """
    id = read_field(model, key)
    if get(models, id, key) is not None:
        if not -1 < index < len(models):
            index = len(models) - 1
        return move(models, id, index, models, key)
    return add(models, model, index, key)


def update(models: Records, id: Any, values: Any, key: Key = "id") -> Optional[Record]:
    model = get(models, id, key)
    if model is None:
        log.debug("update: no record with identity %r", id)
        return None
    return assign_fields(model, values)


def move_by_index(
    from_arr: Records,
    from_index: int,
    to_index: int,
    to_arr: Optional[Records] = None,
) -> Optional[Record]:
    """
    Move one element from ``from_arr[from_index]`` to ``to_arr[to_index]``.

    The element is taken out first, so within a single list ``to_index``
    addresses the list after removal. Slice assignment keeps splice
    semantics at the edges: a ``from_index`` past the end moves nothing and a
    ``to_index`` past the end appends.
    """
    if to_arr is None:
        to_arr = from_arr
    if from_index < 0 or to_index < 0:
        return None

    moved: List[Any] = from_arr[from_index:from_index + 1]
    del from_arr[from_index:from_index + 1]
    to_arr[to_index:to_index] = moved
    log.debug("moved %d record(s) from index %d to index %d", len(moved), from_index, to_index)
    return to_arr[to_index] if to_index < len(to_arr) else None


def move(
    from_arr: Records,
    id: Any,
    to_index: int,
    to_arr: Optional[Records] = None,
    key: Key = "id",
) -> Optional[Record]:
    from_index = get_index(from_arr, id, key)
    if from_index < 0:
        log.debug("move: no record with identity %r", id)
        return None
    return move_by_index(from_arr, from_index, to_index, to_arr)


def move_to_end(
    from_arr: Records,
    id: Any,
    to_arr: Optional[Records] = None,
    key: Key = "id",
) -> Optional[Record]:
    # target index is taken from the length before the move
    if to_arr is None:
        to_arr = from_arr
    return move(from_arr, id, len(to_arr) - 1, to_arr, key)


def remove(models: Records, id: Any, key: Key = "id") -> Optional[Record]:
    index = get_index(models, id, key)
    if index < 0:
        log.debug("remove: no record with identity %r", id)
        return None
    return models.pop(index)
