from concurrent.futures import ThreadPoolExecutor

import pytest

from todo_api.repositories import ErrorKind, InMemoryTodoStore, build_store


class TestCreate:
    @pytest.mark.parametrize("title", ["Buy milk", "  padded  ", "\tTab\n", "ñandú"])
    def test_valid_titles(self, store, title):
        previous = store.create("seed").value["id"]
        result = store.create(title)
        assert result.ok
        todo = result.value
        assert todo["title"] == title.strip()
        assert todo["completed"] is False
        assert todo["id"] > previous
        assert todo["updated_at"] is None
        assert todo["created_at"].tzinfo is not None

    @pytest.mark.parametrize("title", ["", "   ", None])
    def test_invalid_titles(self, store, title):
        result = store.create(title)
        assert not result.ok
        assert result.error is ErrorKind.VALIDATION
        assert result.value is None
        assert store.list() == []

    def test_ids_increase(self, store):
        ids = [store.create(f"t{i}").value["id"] for i in range(5)]
        assert ids == [1, 2, 3, 4, 5]


class TestGet:
    def test_missing(self, store):
        assert store.get(1).error is ErrorKind.NOT_FOUND
        assert store.get(None).error is ErrorKind.NOT_FOUND

    def test_returns_copy(self, store):
        tid = store.create("original").value["id"]
        fetched = store.get(tid).value
        fetched["title"] = "mutated outside"
        assert store.get(tid).value["title"] == "original"


class TestUpdate:
    def test_title_only(self, store):
        created = store.create("old").value
        result = store.update(created["id"], {"title": "  new "})
        assert result.ok
        updated = result.value
        assert updated["title"] == "new"
        assert updated["completed"] is False
        assert updated["created_at"] == created["created_at"]
        assert updated["updated_at"] is not None

    def test_completed_only(self, store):
        tid = store.create("task").value["id"]
        updated = store.update(tid, {"completed": True}).value
        assert updated["completed"] is True
        assert updated["title"] == "task"

    def test_none_fields_are_ignored(self, store):
        tid = store.create("task").value["id"]
        updated = store.update(tid, {"title": None, "completed": None}).value
        assert updated["title"] == "task"
        assert updated["completed"] is False
        assert updated["updated_at"] is not None

    def test_updated_at_refreshes(self, store):
        tid = store.create("task").value["id"]
        first = store.update(tid, {}).value["updated_at"]
        second = store.update(tid, {}).value["updated_at"]
        assert second >= first

    def test_blank_title_leaves_record_untouched(self, store):
        tid = store.create("keep").value["id"]
        result = store.update(tid, {"title": "  ", "completed": True})
        assert result.error is ErrorKind.VALIDATION
        stored = store.get(tid).value
        assert stored["title"] == "keep"
        assert stored["completed"] is False
        assert stored["updated_at"] is None

    def test_missing(self, store):
        store.create("a")
        before = store.list()
        assert store.update(42, {"title": "x"}).error is ErrorKind.NOT_FOUND
        assert store.list() == before


class TestDelete:
    def test_delete_returns_record(self, store):
        created = store.create("gone").value
        result = store.delete(created["id"])
        assert result.ok
        assert result.value == created
        assert store.get(created["id"]).error is ErrorKind.NOT_FOUND

    def test_missing(self, store):
        store.create("a")
        before = store.list()
        assert store.delete(99).error is ErrorKind.NOT_FOUND
        assert store.delete(None).error is ErrorKind.NOT_FOUND
        assert store.list() == before

    def test_ids_never_reused(self, store):
        tid = store.create("a").value["id"]
        store.delete(tid)
        assert store.create("b").value["id"] == tid + 1


class TestList:
    def test_order_and_count_after_deletes(self, store):
        ids = [store.create(t).value["id"] for t in "abcde"]
        store.delete(ids[0])
        store.delete(ids[3])
        items = store.list()
        assert len(items) == 3
        assert [t["id"] for t in items] == [ids[1], ids[2], ids[4]]
        assert [t["title"] for t in items] == ["b", "c", "e"]

    def test_update_keeps_position(self, store):
        ids = [store.create(t).value["id"] for t in "abc"]
        store.update(ids[0], {"title": "A"})
        assert [t["title"] for t in store.list()] == ["A", "b", "c"]


class TestConcurrency:
    def test_parallel_creates_get_unique_ids(self):
        store = InMemoryTodoStore()
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda i: store.create(f"task {i}"), range(200)))
        ids = [r.value["id"] for r in results]
        assert sorted(ids) == list(range(1, 201))
        listed = [t["id"] for t in store.list()]
        assert listed == sorted(listed)


class TestBuildStore:
    def test_unseeded(self):
        assert build_store().list() == []

    def test_seeded(self):
        store = build_store(seed=True)
        assert [(t["id"], t["title"]) for t in store.list()] == [
            (1, "Aprender CI/CD"),
            (2, "Configurar pipeline"),
        ]
        assert store.create("next").value["id"] == 3
