from __future__ import annotations

import json

from catalog.favorites import FavoritesStore
from storage.local_store import LocalStore, MemoryStore


def test_toggle_adds_then_removes_and_persists(tmp_path):
    store = LocalStore(tmp_path / "store.json")
    favs = FavoritesStore(store)

    assert favs.toggle("USA") is True
    assert favs.codes == ["USA"]
    assert json.loads(LocalStore(tmp_path / "store.json").get("favorites")) == ["USA"]

    assert favs.toggle("USA") is False
    assert favs.codes == []
    assert json.loads(LocalStore(tmp_path / "store.json").get("favorites")) == []


def test_favorites_survive_a_restart(tmp_path):
    path = tmp_path / "store.json"
    FavoritesStore(LocalStore(path)).add("FRA")
    reloaded = FavoritesStore(LocalStore(path))
    assert reloaded.is_favorite("FRA")
    assert "FRA" in reloaded
    assert len(reloaded) == 1


def test_add_is_idempotent_but_still_saves_and_notifies():
    messages = []
    store = MemoryStore()
    favs = FavoritesStore(store, notify=messages.append)
    favs.add("DEU")
    favs.add("DEU")
    assert favs.codes == ["DEU"]
    assert messages == ["Added to favorites", "Added to favorites"]
    assert store.get("favorites") == '["DEU"]'


def test_remove_missing_code_is_harmless():
    messages = []
    favs = FavoritesStore(MemoryStore(), notify=messages.append)
    favs.remove("XXX")
    assert favs.codes == []
    assert messages == ["Removed from favorites"]


def test_corrupt_or_wrong_typed_value_loads_empty():
    assert FavoritesStore(MemoryStore({"favorites": "{not json"})).codes == []
    assert FavoritesStore(MemoryStore({"favorites": '{"USA": true}'})).codes == []


def test_codes_need_not_be_loaded_countries():
    favs = FavoritesStore(MemoryStore({"favorites": '["ZZZ", "USA", "ZZZ"]'}))
    assert favs.codes == ["ZZZ", "USA"]


def test_corrupt_store_file_starts_empty(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("[1, 2", encoding="utf-8")
    store = LocalStore(path)
    assert store.get("favorites") is None
    store.set("theme", "dark")
    assert json.loads(path.read_text(encoding="utf-8")) == {"theme": "dark"}


def test_store_remove(tmp_path):
    store = LocalStore(tmp_path / "nested" / "store.json")
    store.set("theme", "dark")
    assert "theme" in store
    store.remove("theme")
    assert LocalStore(tmp_path / "nested" / "store.json").get("theme") is None
