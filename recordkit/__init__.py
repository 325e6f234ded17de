"""
recordkit: CRUD-style helpers for in-memory lists of keyed records.

Records are dicts or attribute objects (dataclasses, pydantic models)
identified by a key field, "id" unless another key is passed.
"""
from .core import *  # noqa: F401,F403
from .core import __all__ as _core_all
from .keyed import KeyedCollection

__version__ = "1.0.0"

__all__ = [*_core_all, "KeyedCollection"]
