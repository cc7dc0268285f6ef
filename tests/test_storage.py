# tests/test_storage.py

from quotebox.storage.kv import DurableStore, SessionStore


def test_durable_store_round_trip(durable, db_path):
    assert durable.get("missing") is None

    durable.set("k", "v1")
    durable.set("k", "v2")

    assert DurableStore(db_path).get("k") == "v2"

    durable.remove("k")
    assert durable.get("k") is None


def test_session_store_is_not_shared():
    first = SessionStore()
    first.set("lastQuote", "{}")

    assert first.get("lastQuote") == "{}"
    assert SessionStore().get("lastQuote") is None

    first.remove("lastQuote")
    first.remove("lastQuote")
    assert first.get("lastQuote") is None
