"""Exceptions raised by recordkit.

Lookups never raise; absence is reported with ``None`` (or ``-1`` from
``get_index``). The only failure surfaced as an exception is a record that
refuses a field update.
"""

from __future__ import annotations

from typing import Any, Optional


class RecordkitError(Exception):
    pass


class RecordUpdateError(RecordkitError, TypeError):
    def __init__(self, *, record: Any, field: Optional[str], reason: str):
        self.record = record
        self.field = field
        self.reason = reason
        super().__init__(
            f"cannot update {type(record).__name__} record"
            + (f" field={field!r}" if field is not None else "")
            + f": {reason}"
        )
