from __future__ import annotations

from typing import Any, Callable, List, Union

# A record is any mapping or attribute-bearing object.
Record = Any
Records = List[Any]

# Either a field name or an accessor returning the identity value.
Key = Union[str, Callable[[Any], Any]]

# Called as (item, index, models).
Callback = Callable[[Any, int, List[Any]], Any]
