"""Chat session stores and a manager for conversational history."""
from __future__ import annotations

import json
import threading
import time
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List
from uuid import uuid4


@dataclass
class ChatTurn:
    """Represents one conversational turn."""

    role: str
    content: str
    created_at: float = field(default_factory=lambda: time.time())


class SessionStore:
    """Interface for chat session persistence."""

    def create_session(self, user_id: str, metadata: Dict[str, Any] | None = None) -> str:
        raise NotImplementedError

    def session_exists(self, session_id: str) -> bool:
        raise NotImplementedError

    def append_turn(self, session_id: str, role: str, content: str) -> None:
        raise NotImplementedError

    def get_recent_turns(self, session_id: str, limit: int = 10) -> List[Dict[str, Any]]:
        raise NotImplementedError

    def turn_count(self, session_id: str) -> int:
        raise NotImplementedError

    def trim_turns(self, session_id: str, keep: int = 20) -> None:
        raise NotImplementedError


def _new_record(user_id: str, metadata: Dict[str, Any] | None) -> Dict[str, Any]:
    return {
        "session_id": str(uuid4()),
        "user_id": user_id,
        "created_at": time.time(),
        "metadata": metadata or {},
        "turns": [],
    }


class InMemorySessionStore(SessionStore):
    """Process-local store; history is lost on restart."""

    def __init__(self) -> None:
        self._sessions: Dict[str, Dict[str, Any]] = {}
        self._lock = threading.Lock()

    def _record(self, session_id: str) -> Dict[str, Any]:
        try:
            return self._sessions[session_id]
        except KeyError:
            raise ValueError(f"Unknown session_id {session_id}") from None

    def create_session(self, user_id: str, metadata: Dict[str, Any] | None = None) -> str:
        record = _new_record(user_id, metadata)
        with self._lock:
            self._sessions[record["session_id"]] = record
        return record["session_id"]

    def session_exists(self, session_id: str) -> bool:
        return session_id in self._sessions

    def append_turn(self, session_id: str, role: str, content: str) -> None:
        with self._lock:
            self._record(session_id)["turns"].append(asdict(ChatTurn(role=role, content=content)))

    def get_recent_turns(self, session_id: str, limit: int = 10) -> List[Dict[str, Any]]:
        with self._lock:
            turns = self._record(session_id)["turns"]
            return [dict(turn) for turn in turns[-limit:]] if limit > 0 else []

    def turn_count(self, session_id: str) -> int:
        with self._lock:
            return len(self._record(session_id)["turns"])

    def trim_turns(self, session_id: str, keep: int = 20) -> None:
        with self._lock:
            record = self._record(session_id)
            record["turns"] = record["turns"][-keep:] if keep > 0 else []


class JSONSessionStore(SessionStore):
    """JSON-file-backed SessionStore suitable for local runs.

    Read-modify-write cycles are serialised by a per-store lock, so one process
    may share a store across threads. Separate processes must not share a
    directory.
    """

    def __init__(self, base_dir: str | Path = "data/sessions") -> None:
        self.base_dir = Path(base_dir)
        self.base_dir.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()

    def _path(self, session_id: str) -> Path:
        return self.base_dir / f"{session_id}.json"

    def _load(self, session_id: str) -> Dict[str, Any]:
        path = self._path(session_id)
        if not path.exists():
            raise ValueError(f"Unknown session_id {session_id}")
        return json.loads(path.read_text())

    def _save(self, session_id: str, payload: Dict[str, Any]) -> None:
        self._path(session_id).write_text(json.dumps(payload, indent=2))

    def create_session(self, user_id: str, metadata: Dict[str, Any] | None = None) -> str:
        record = _new_record(user_id, metadata)
        self._save(record["session_id"], record)
        return record["session_id"]

    def session_exists(self, session_id: str) -> bool:
        return self._path(session_id).exists()

    def append_turn(self, session_id: str, role: str, content: str) -> None:
        with self._lock:
            record = self._load(session_id)
            record["turns"].append(asdict(ChatTurn(role=role, content=content)))
            self._save(session_id, record)

    def get_recent_turns(self, session_id: str, limit: int = 10) -> List[Dict[str, Any]]:
        with self._lock:
            turns = self._load(session_id)["turns"]
        return turns[-limit:] if limit > 0 else []

    def turn_count(self, session_id: str) -> int:
        with self._lock:
            return len(self._load(session_id)["turns"])

    def trim_turns(self, session_id: str, keep: int = 20) -> None:
        with self._lock:
            record = self._load(session_id)
            record["turns"] = record["turns"][-keep:] if keep > 0 else []
            self._save(session_id, record)


class SessionManager:
    """Coordinates session creation, turn recording and history trimming."""

    def __init__(self, store: SessionStore, history_keep: int = 20) -> None:
        self.store = store
        self.history_keep = history_keep

    def start_session(self, user_id: str, metadata: Dict[str, Any] | None = None) -> str:
        return self.store.create_session(user_id=user_id, metadata=metadata)

    def session_exists(self, session_id: str) -> bool:
        return self.store.session_exists(session_id)

    def record_turn(self, session_id: str, role: str, content: str) -> None:
        if not self.store.session_exists(session_id):
            raise ValueError(f"Unknown session {session_id}")
        self.store.append_turn(session_id=session_id, role=role, content=content)
        if self.store.turn_count(session_id) > self.history_keep:
            self.store.trim_turns(session_id=session_id, keep=self.history_keep)

    def get_history(self, session_id: str) -> List[Dict[str, Any]]:
        if not self.store.session_exists(session_id):
            raise ValueError(f"Unknown session {session_id}")
        return self.store.get_recent_turns(session_id=session_id, limit=self.history_keep)


def build_session_store(backend: str, path: str | None = None) -> SessionStore:
    """Create the store named by configuration."""

    if backend.lower() == "json":
        return JSONSessionStore(path or "data/sessions")
    if backend.lower() == "memory":
        return InMemorySessionStore()
    raise ValueError(f"Unsupported session store backend '{backend}'")


__all__ = [
    "ChatTurn",
    "InMemorySessionStore",
    "JSONSessionStore",
    "SessionManager",
    "SessionStore",
    "build_session_store",
]
