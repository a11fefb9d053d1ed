"""Unit tests for chat session stores and the session manager."""

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest

from memory.session_store import (
    InMemorySessionStore,
    JSONSessionStore,
    SessionManager,
    build_session_store,
)


def test_json_session_store_roundtrip(tmp_path: Path) -> None:
    store = JSONSessionStore(base_dir=tmp_path)
    session_id = store.create_session("user-123")

    store.append_turn(session_id, role="user", content="hello")

    assert store.session_exists(session_id)
    assert store.turn_count(session_id) == 1
    turns = store.get_recent_turns(session_id)
    assert turns[0]["content"] == "hello"
    assert (tmp_path / f"{session_id}.json").exists()


def test_in_memory_store_rejects_unknown_session() -> None:
    store = InMemorySessionStore()
    with pytest.raises(ValueError):
        store.append_turn("missing", role="user", content="hi")


def test_session_manager_trims_history() -> None:
    manager = SessionManager(store=InMemorySessionStore(), history_keep=2)
    session_id = manager.start_session("user-456")

    for i in range(5):
        manager.record_turn(session_id, role="user", content=f"message {i}")

    history = manager.get_history(session_id)
    assert [turn["content"] for turn in history] == ["message 3", "message 4"]
    assert manager.store.turn_count(session_id) == 2


def test_session_manager_unknown_session() -> None:
    manager = SessionManager(store=InMemorySessionStore())
    with pytest.raises(ValueError):
        manager.get_history("nope")


def test_build_session_store(tmp_path: Path) -> None:
    assert isinstance(build_session_store("memory"), InMemorySessionStore)
    assert isinstance(build_session_store("JSON", str(tmp_path)), JSONSessionStore)
    with pytest.raises(ValueError):
        build_session_store("redis")


def test_json_session_store_keeps_concurrent_turns(tmp_path: Path) -> None:
    store = JSONSessionStore(base_dir=tmp_path)
    session_id = store.create_session("user-789")

    with ThreadPoolExecutor(max_workers=8) as pool:
        for i in range(40):
            pool.submit(store.append_turn, session_id, "user", f"message {i}")

    assert store.turn_count(session_id) == 40
    contents = {turn["content"] for turn in store.get_recent_turns(session_id, limit=40)}
    assert contents == {f"message {i}" for i in range(40)}
