from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from gyrolaser.config import Config
from gyrolaser.core.modules.session.service import SessionService


class Services:
    """Service registry, started in declaration order and stopped in reverse."""

    session: SessionService

    def __init__(self) -> None:
        self.session = SessionService()
        self._services = [self.session]

    async def start_all(self) -> None:
        for service in self._services:
            await service.on_start()

    async def stop_all(self) -> None:
        for service in reversed(self._services):
            await service.on_stop()


class Core:
    """Container providing config and all service instances."""

    config: Config
    services: Services

    def __init__(self, config: Config) -> None:
        self.config = config
        self.services = Services()

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Manage application lifecycle - startup and shutdown."""
        await self.on_start()
        try:
            yield
        finally:
            await self.on_stop()

    async def on_start(self) -> None:
        await self.services.start_all()

    async def on_stop(self) -> None:
        await self.services.stop_all()
