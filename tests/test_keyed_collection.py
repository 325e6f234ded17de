import random

from recordkit import KeyedCollection


def _ids(items, key="id"):
    return [item[key] for item in items]


def test_wraps_the_given_list(people):
    c = KeyedCollection(people)
    c.remove(2)
    assert _ids(people) == [1, 3]
    assert len(c) == 2


def test_lookup(people):
    c = KeyedCollection(people)
    assert c.first()["name"] == "tom"
    assert c.last()["name"] == "harry"
    assert c.get(2)["name"] == "dick"
    assert c.has(3)
    assert 3 in c
    assert 99 not in c
    assert c.index_of(3) == 2
    assert c.random(random.Random(1)) in people


def test_window_stack():
    windows = KeyedCollection(key="window_id")
    for window_id in (1, 2, 3):
        windows.add({"window_id": window_id, "content": f"window {window_id}"}, 0)
    assert _ids(windows, "window_id") == [3, 2, 1]

    windows.move(1, 0)
    assert _ids(windows, "window_id") == [1, 3, 2]

    windows.remove(3)
    assert _ids(windows, "window_id") == [1, 2]


def test_add_or_move_and_update(people):
    c = KeyedCollection(people)
    c.add_or_move({"id": 3, "name": "harry"}, 0)
    assert _ids(c) == [3, 1, 2]
    c.update(1, {"name": "thomas"})
    assert c.get(1)["name"] == "thomas"


def test_move_between_collections(beatles):
    band = KeyedCollection(beatles)
    ex_band = KeyedCollection()
    pete = band.filter("pete", "name").first()

    band.move(pete["id"], 0, ex_band)
    assert len(band) == 3
    assert ex_band.items == [pete]

    band.move_to_end(1)
    assert _ids(band) == [2, 3, 1]


def test_new_list_operations_keep_key():
    c = KeyedCollection([{"sku": "a"}, {"sku": "b"}, {"sku": "a"}], key="sku")
    deduped = c.dedupe()
    assert isinstance(deduped, KeyedCollection)
    assert deduped.key == "sku"
    assert len(deduped) == 2
    assert len(c) == 3

    merged = deduped.merge([{"sku": "b"}, {"sku": "c"}])
    assert [r["sku"] for r in merged] == ["a", "b", "c"]

    assert len(c.omit("a")) == 1


def test_sort_in_place(people):
    c = KeyedCollection(people)
    assert c.sort("name") is c
    assert [p["name"] for p in people] == ["dick", "harry", "tom"]
    c.sort(asc=False)
    assert _ids(people) == [3, 2, 1]
