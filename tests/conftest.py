import itertools

import pytest

from recordkit.core.model import reset_random


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    # Keep settings deterministic regardless of the developer's shell
    monkeypatch.delenv("RECORDKIT_DEFAULT_KEY", raising=False)
    monkeypatch.delenv("RECORDKIT_RANDOM_SEED", raising=False)
    reset_random()
    yield
    reset_random()


@pytest.fixture()
def make_person():
    """
    Person factory; ids continue after the ``people`` fixture (4, 5, ...).
    """
    ids = itertools.count(4)

    def _make(name, id=None):
        return {"id": next(ids) if id is None else id, "name": name}

    return _make


@pytest.fixture()
def people():
    return [
        {"id": 1, "name": "tom"},
        {"id": 2, "name": "dick"},
        {"id": 3, "name": "harry"},
    ]


@pytest.fixture()
def beatles():
    return [
        {"id": 1, "name": "john", "alive": True},
        {"id": 2, "name": "paul", "alive": True},
        {"id": 3, "name": "george", "alive": True},
        {"id": 4, "name": "pete", "alive": True},
    ]
