"""Collection operators: whole-list iteration, filtering, dedupe and merge.

``for_each``, ``map`` and ``sort`` hand back the list they were given;
``filter``, ``omit``, ``dedupe`` and ``merge`` build new lists and leave their
inputs untouched. Callbacks are called as ``(item, index, models)``.
"""

from __future__ import annotations

import functools
import logging
from typing import Any, List, Set

from .model import get
from .records import identity_token, read_field, same_identity
from .sorting import sort_by
from .types import Callback, Key, Records

log = logging.getLogger("recordkit.collection")


def for_each(models: Records, callback: Callback) -> Records:
    for index, model in enumerate(models):
        callback(model, index, models)
    return models


def map(models: Records, callback: Callback) -> Records:
    for index, model in enumerate(models):
        models[index] = callback(model, index, models)
    return models


def _matches(predicate: Any, item: Any, index: int, models: Records, key: Key) -> bool:
    if callable(predicate):
        return bool(predicate(item, index, models))
    return same_identity(read_field(item, key), predicate)


def filter(models: Records, predicate: Any, key: Key = "id") -> Records:
    """Records matching ``predicate``: a callable, or a value compared against ``key``."""
    return [item for index, item in enumerate(models) if _matches(predicate, item, index, models, key)]


def omit(models: Records, predicate: Any, key: Key = "id") -> Records:
    """Records *not* matching ``predicate``; the complement of ``filter``."""
    return [item for index, item in enumerate(models) if not _matches(predicate, item, index, models, key)]


def dedupe(models: Records, key: Key = "id") -> Records:
    """Keep the first record per identity value, preserving order."""
    seen: Set[Any] = set()
    seen_unhashable: List[Any] = []
    output: Records = []

    for model in models:
        value = read_field(model, key)
        try:
            token = identity_token(value)
        except TypeError:
            if any(same_identity(value, other) for other in seen_unhashable):
                continue
            seen_unhashable.append(value)
        else:
            if token in seen:
                continue
            seen.add(token)
        output.append(model)

    if len(output) != len(models):
        log.debug("dedupe: dropped %d record(s)", len(models) - len(output))
    return output


def merge(a: Records, b: Records, key: Key = "id") -> Records:
    """
    Return ``a`` followed by the records of ``b`` whose identity is not in ``a``.

    Only the original ``a`` is consulted, so duplicates within ``b`` are all
    appended.
    """
    output = list(a)
    for model in b:
        if get(a, read_field(model, key), key) is None:
            output.append(model)
    return output


def sort(models: Records, key: Key, asc: bool = True, numeric: bool = False) -> Records:
    models.sort(key=functools.cmp_to_key(sort_by(key, asc, numeric)))
    return models
