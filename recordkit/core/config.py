"""
Runtime settings for recordkit.

Environment variables:
    RECORDKIT_DEFAULT_KEY: identity field used by KeyedCollection when no key
                           is given (default: "id").
    RECORDKIT_RANDOM_SEED: integer seed for the RNG behind get_random
                           (default: unset, system entropy).

Bad values are logged and replaced by the defaults; loading never raises.
"""
from __future__ import annotations

import logging
import os
from typing import Optional

from pydantic import BaseModel

_log = logging.getLogger("recordkit.config")

_DEFAULT_KEY = "id"


class Settings(BaseModel):
    default_key: str = _DEFAULT_KEY
    random_seed: Optional[int] = None


def _default_key() -> str:
    raw = os.getenv("RECORDKIT_DEFAULT_KEY")
    if raw is None:
        return _DEFAULT_KEY
    key = raw.strip()
    if not key:
        _log.warning("Ignoring blank RECORDKIT_DEFAULT_KEY; using %r", _DEFAULT_KEY)
        return _DEFAULT_KEY
    return key


def _random_seed() -> Optional[int]:
    raw = (os.getenv("RECORDKIT_RANDOM_SEED") or "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except (TypeError, ValueError):
        _log.warning("Ignoring invalid RECORDKIT_RANDOM_SEED=%r (expected an integer)", raw)
        return None


def load_settings() -> Settings:
    return Settings(default_key=_default_key(), random_seed=_random_seed())
