import asyncio
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from gyrolaser.config import Config
from gyrolaser.core.core import Core
from gyrolaser.core.modules.session.models import Session
from gyrolaser.core.modules.session.qr import build_join_url, render_qr_png
from gyrolaser.core.modules.session.utils import normalize_room_id
from gyrolaser.errors import ValidationError


class App:
    """Facade for all application operations, the only entry point the web layer uses."""

    def __init__(self, config: Config) -> None:
        self._core = Core(config)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Application lifespan management - delegates to Core."""
        async with self._core.lifespan():
            yield

    async def list_sessions(self) -> list[Session]:
        """Get all sessions in creation order."""
        return self._core.services.session.list_sessions()

    async def create_session(self) -> Session:
        """Create a new session with a random room code."""
        return self._core.services.session.create_session()

    async def get_session(self, room_id: str) -> Session:
        """Get session by room code (case-insensitive)."""
        return self._core.services.session.get_session(room_id)

    async def get_session_qrcode(self, room_id: str) -> bytes:
        """Render a PNG QR code of the phone join URL for a room code.

        Only the code format is checked; the room does not have to exist yet."""
        normalized = normalize_room_id(room_id)
        if normalized is None:
            raise ValidationError(f"Invalid room ID '{room_id}'")
        join_url = build_join_url(self._core.config.mobile_url, normalized)
        return await asyncio.to_thread(render_qr_png, join_url)
