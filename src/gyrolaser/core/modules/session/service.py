import threading

import structlog

from gyrolaser.core.modules.session.models import Session
from gyrolaser.core.modules.session.utils import generate_room_id, normalize_room_id, now_ms
from gyrolaser.errors import NotFoundError, ValidationError

logger = structlog.get_logger(__name__)


class SessionService:
    """In-memory registry of created sessions, kept in insertion order."""

    def __init__(self) -> None:
        self._sessions: list[Session] = []
        self._lock = threading.Lock()
        self._last_created_at = 0

    async def on_start(self) -> None:
        logger.info("session_registry_started")

    async def on_stop(self) -> None:
        logger.info("session_registry_stopped", sessions=self.count())

    def list_sessions(self) -> list[Session]:
        """Get a snapshot of all sessions in creation order."""
        with self._lock:
            return list(self._sessions)

    def create_session(self) -> Session:
        """Create a session with a fresh room code and register it."""
        room_id = generate_room_id()
        with self._lock:
            # Timestamps never go backwards, even if the wall clock does
            created_at = max(now_ms(), self._last_created_at)
            self._last_created_at = created_at
            session = Session(room_id=room_id, created_at=created_at)
            self._sessions.append(session)
        logger.info("session_created", room_id=room_id, created_at=created_at)
        return session

    def get_session(self, room_id: str) -> Session:
        """Get the earliest session with the given room code."""
        normalized = normalize_room_id(room_id)
        if normalized is None:
            raise ValidationError(f"Invalid room ID '{room_id}'")
        with self._lock:
            session = next((s for s in self._sessions if s.room_id == normalized), None)
        if session is None:
            raise NotFoundError(f"Session '{normalized}' not found")
        return session

    def count(self) -> int:
        with self._lock:
            return len(self._sessions)
