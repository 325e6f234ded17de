"""Field access and identity comparison over any record shape.

Records may be mappings (read by subscript, written with ``update``) or plain
attribute-bearing objects such as dataclasses and pydantic models (read with
``getattr``, written with ``setattr``). A missing field reads as ``None``.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping, MutableMapping
from numbers import Number
from typing import Any, Dict, List, Tuple

from .errors import RecordUpdateError
from .types import Key, Record

_log = logging.getLogger("recordkit.records")


def read_field(record: Record, key: Key) -> Any:
    """Return the identity value of ``record`` under ``key`` (``None`` if absent)."""
    if callable(key):
        return key(record)
    if isinstance(record, Mapping):
        return record.get(key)
    return getattr(record, key, None)


def _is_number(value: Any) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


def same_identity(a: Any, b: Any) -> bool:
    """
    Strict equality: no coercion across kinds.

    ints and floats are one "number" kind; bools, strings and every other
    type only ever equal values of exactly the same type.
    """
    if _is_number(a) and _is_number(b):
        return a == b
    if type(a) is not type(b):
        return False
    return bool(a == b)


def identity_token(value: Any) -> Any:
    """Hashable token such that equal tokens imply ``same_identity``.

    Raises TypeError for unhashable values.
    """
    if _is_number(value):
        token = ("number", value)
    else:
        token = (type(value), value)
    hash(token)
    return token


def field_items(values: Any) -> Dict[str, Any]:
    """Shallow field dict of an update payload."""
    if isinstance(values, Mapping):
        return dict(values)
    if hasattr(values, "model_fields_set"):
        # pydantic: iterating a model yields (name, value) pairs without recursing
        return {name: value for name, value in values}
    if dataclasses.is_dataclass(values) and not isinstance(values, type):
        return {f.name: getattr(values, f.name) for f in dataclasses.fields(values)}
    return dict(vars(values))


_UNSET = object()


def _restore(record: Record, applied: List[Tuple[str, Any]]) -> None:
    for name, previous in reversed(applied):
        if previous is _UNSET:
            delattr(record, name)
        else:
            setattr(record, name, previous)


def assign_fields(record: Record, values: Any) -> Record:
    """
    Shallow-merge ``values`` into ``record`` in place and return ``record``.

    All or nothing: if one field is refused, fields already written are put
    back before RecordUpdateError is raised.
    """
    items = field_items(values)
    if isinstance(record, MutableMapping):
        record.update(items)
        return record

    applied: List[Tuple[str, Any]] = []
    for name, value in items.items():
        previous = getattr(record, name, _UNSET)
        try:
            setattr(record, name, value)
        except (AttributeError, TypeError, ValueError) as exc:
            _restore(record, applied)
            _log.error("Refused update of %s.%s: %s", type(record).__name__, name, exc)
            raise RecordUpdateError(record=record, field=name, reason=str(exc)) from exc
        applied.append((name, previous))
    return record
