from __future__ import annotations

from data.errors import DeleteError, FetchError, StoreError
from data.mock_data import MockStore
from data.service import delete_by_id, fetch_recent, get_store, store_label
from data.connection import StoreClient


class _RecordingStore:
    def __init__(self, rows=None, error=None):
        self.rows = rows or []
        self.error = error
        self.calls = []

    def select(self, table, params):
        self.calls.append(("select", table, params))
        if self.error:
            raise self.error
        return self.rows

    def delete(self, table, filters):
        self.calls.append(("delete", table, filters))
        if self.error:
            raise self.error


def test_fetch_recent_issues_single_joined_query(raw_rows):
    store = _RecordingStore(rows=raw_rows)

    result = fetch_recent(store, limit=50)

    assert result.ok
    assert [r.id for r in result.records] == ["v3", "v2", "v1"]
    assert len(store.calls) == 1
    kind, table, params = store.calls[0]
    assert (kind, table) == ("select", "voicings")
    assert params["order"] == "created_at.desc"
    assert params["limit"] == "50"
    assert "layer:layers(word)" in params["select"]
    assert "essences(content,images(image_url))" in params["select"]


def test_fetch_recent_converts_store_error():
    result = fetch_recent(_RecordingStore(error=StoreError("JWT expired", status_code=401)), limit=50)

    assert not result.ok
    assert isinstance(result.error, FetchError)
    assert str(result.error) == "JWT expired"
    assert result.records == ()


def test_fetch_recent_converts_malformed_rows():
    result = fetch_recent(_RecordingStore(rows=["not-a-row"]), limit=50)
    assert isinstance(result.error, FetchError)


def test_delete_by_id_targets_one_row():
    store = _RecordingStore()

    result = delete_by_id(store, "v2")

    assert result.ok
    assert result.voicing_id == "v2"
    assert store.calls == [("delete", "voicings", {"id": "eq.v2"})]


def test_delete_by_id_converts_store_error():
    result = delete_by_id(_RecordingStore(error=StoreError("row is referenced")), "v2")

    assert not result.ok
    assert isinstance(result.error, DeleteError)
    assert str(result.error) == "row is referenced"


def test_delete_of_missing_id_is_left_to_the_store(store):
    assert delete_by_id(store, "does-not-exist").ok


def test_get_store_picks_mock_or_client(cfg):
    mock = MockStore(rows=[])
    assert get_store(cfg, use_mock=True, mock_store=mock) is mock
    assert isinstance(get_store(cfg, use_mock=True), MockStore)
    assert isinstance(get_store(cfg, use_mock=False), StoreClient)
    assert store_label(True) == "mock"
    assert store_label(False) == "supabase"
