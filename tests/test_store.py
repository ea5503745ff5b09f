import threading
from dataclasses import dataclass, replace

import pytest

from supply_store.state.store import EntityStore


@dataclass
class Item:
    id: int
    name: str


def make_store(*items):
    return EntityStore("items", "id", items)


@pytest.fixture
def store():
    return make_store(Item(1, "A"), Item(2, "B"))


def test_list_reflects_mutation_order(store):
    store.insert(Item(3, "C"))
    assert [i.id for i in store.list()] == [1, 2, 3]
    store.remove(2)
    assert [i.id for i in store.list()] == [1, 3]


def test_list_returns_a_copy(store):
    snapshot = store.list()
    snapshot.append(Item(9, "Z"))
    assert len(store) == 2


def test_get_miss_returns_none(store):
    assert store.get(999) is None
    assert 999 not in store


def test_replace_preserves_position(store):
    b2 = Item(2, "B'")
    assert store.replace(2, b2) is b2
    assert store.list() == [Item(1, "A"), Item(2, "B'")]


def test_replace_miss_leaves_collection_unchanged(store):
    assert store.replace(42, Item(42, "X")) is None
    assert store.list() == [Item(1, "A"), Item(2, "B")]


def test_remove_shrinks_by_one(store):
    removed = store.remove(1)
    assert removed == Item(1, "A")
    assert len(store) == 1
    assert store.get(1) is None


def test_remove_miss_leaves_collection_unchanged(store):
    assert store.remove(7) is None
    assert len(store) == 2


def test_insert_accepts_duplicate_ids_first_match_wins():
    store = make_store(Item(1, "first"), Item(1, "second"))
    assert store.get(1).name == "first"

    store.replace(1, Item(1, "first'"))
    assert [i.name for i in store.list()] == ["first'", "second"]

    store.remove(1)
    assert store.list() == [Item(1, "second")]


def test_insert_returns_record_and_appends(store):
    c = Item(3, "C")
    assert store.insert(c) is c
    assert store.list()[-1] is c


def test_insert_without_identifier_raises(store):
    with pytest.raises(AttributeError):
        store.insert(object())
    assert len(store) == 2


def test_reset_restores_seed_after_any_mutations(store):
    store.insert(Item(3, "C"))
    store.replace(1, Item(1, "A'"))
    store.remove(2)
    store.reset()
    assert store.list() == [Item(1, "A"), Item(2, "B")]


def test_reset_undoes_in_place_edits_of_returned_records(store):
    store.get(1).name = "mutated"
    store.reset()
    assert store.get(1).name == "A"


def test_seed_is_copied_at_construction():
    seed = [Item(1, "A")]
    store = EntityStore("items", "id", seed)
    seed[0].name = "changed"
    seed.append(Item(2, "B"))
    store.reset()
    assert store.list() == [Item(1, "A")]


def test_end_to_end_scenario():
    store = make_store(Item(1, "Widget"))
    store.insert(Item(2, "Gadget"))
    assert store.list() == [Item(1, "Widget"), Item(2, "Gadget")]

    store.replace(1, replace(store.get(1), name="Widget Pro"))
    assert store.get(1) == Item(1, "Widget Pro")

    store.remove(2)
    assert store.list() == [Item(1, "Widget Pro")]

    store.reset()
    assert store.list() == [Item(1, "Widget")]


def test_concurrent_inserts_are_not_lost():
    store = make_store()

    def worker(base):
        for n in range(200):
            store.insert(Item(base + n, "x"))

    threads = [threading.Thread(target=worker, args=(i * 1000,)) for i in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(store) == 1600
