from __future__ import annotations

import random
from typing import Any, Iterable, Iterator, Optional

from recordkit.core import collection, model
from recordkit.core.config import load_settings
from recordkit.core.types import Key, Record, Records


class KeyedCollection:
    """
    A list of records bound to one identity key.

    Wraps (not copies) the list it is given, so changes made through the
    collection are visible to whoever else holds that list. Operations that
    build new lists return new ``KeyedCollection`` instances with the same key.

    Example (a window stack keyed on ``window_id``, newest on top):

        windows = KeyedCollection(key="window_id")
        windows.add({"window_id": 1, "content": "a"}, 0)
        windows.add({"window_id": 2, "content": "b"}, 0)
        windows.move(1, 0)      # focus window 1
    """

    def __init__(self, items: Optional[Records] = None, *, key: Optional[Key] = None):
        self.items: Records = items if items is not None else []
        self.key: Key = key if key is not None else load_settings().default_key

    def _wrap(self, items: Records) -> "KeyedCollection":
        return KeyedCollection(items, key=self.key)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.items)

    def __contains__(self, id: Any) -> bool:
        return model.has(self.items, id, self.key)

    def __repr__(self) -> str:
        return f"KeyedCollection(key={self.key!r}, items={self.items!r})"

    def first(self) -> Optional[Record]:
        return model.first(self.items)

    def last(self) -> Optional[Record]:
        return model.last(self.items)

    def get(self, id: Any) -> Optional[Record]:
        return model.get(self.items, id, self.key)

    def has(self, id: Any) -> bool:
        return model.has(self.items, id, self.key)

    def index_of(self, id: Any) -> int:
        return model.get_index(self.items, id, self.key)

    def random(self, rng: Optional[random.Random] = None) -> Optional[Record]:
        return model.get_random(self.items, rng)

    def add(self, record: Record, index: int = -1) -> Optional[Record]:
        return model.add(self.items, record, index, self.key)

    def add_or_move(self, record: Record, index: int = -1) -> Optional[Record]:
        return model.add_or_move(self.items, record, index, self.key)

    def update(self, id: Any, values: Any) -> Optional[Record]:
        return model.update(self.items, id, values, self.key)

    def move(self, id: Any, to_index: int, to: Optional["KeyedCollection"] = None) -> Optional[Record]:
        to_arr = to.items if to is not None else None
        return model.move(self.items, id, to_index, to_arr, self.key)

    def move_to_end(self, id: Any, to: Optional["KeyedCollection"] = None) -> Optional[Record]:
        to_arr = to.items if to is not None else None
        return model.move_to_end(self.items, id, to_arr, self.key)

    def remove(self, id: Any) -> Optional[Record]:
        return model.remove(self.items, id, self.key)

    def filter(self, predicate: Any, key: Optional[Key] = None) -> "KeyedCollection":
        return self._wrap(collection.filter(self.items, predicate, key if key is not None else self.key))

    def omit(self, predicate: Any, key: Optional[Key] = None) -> "KeyedCollection":
        return self._wrap(collection.omit(self.items, predicate, key if key is not None else self.key))

    def dedupe(self) -> "KeyedCollection":
        return self._wrap(collection.dedupe(self.items, self.key))

    def merge(self, other: Iterable[Record]) -> "KeyedCollection":
        others = other.items if isinstance(other, KeyedCollection) else list(other)
        return self._wrap(collection.merge(self.items, others, self.key))

    def sort(self, key: Optional[Key] = None, asc: bool = True, numeric: bool = False) -> "KeyedCollection":
        collection.sort(self.items, key if key is not None else self.key, asc, numeric)
        return self
