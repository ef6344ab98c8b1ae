"""Tests for the core container and facade wiring."""

import asyncio

from gyrolaser import app as app_module
from gyrolaser.app import App
from gyrolaser.core.core import Core
from gyrolaser.core.modules.session.service import SessionService


class TestCore:
    """Tests for Core and its service registry."""

    def test_builds_session_service(self, config):
        core = Core(config)
        assert core.config is config
        assert isinstance(core.services.session, SessionService)
        assert core.services.session.list_sessions() == []

    def test_lifespan_starts_and_stops_services(self, config, monkeypatch):
        """Test that entering and leaving the lifespan runs the service hooks in order."""
        core = Core(config)
        calls = []

        async def on_start():
            calls.append("start")

        async def on_stop():
            calls.append("stop")

        monkeypatch.setattr(core.services.session, "on_start", on_start)
        monkeypatch.setattr(core.services.session, "on_stop", on_stop)

        async def run():
            async with core.lifespan():
                calls.append("running")

        asyncio.run(run())
        assert calls == ["start", "running", "stop"]


class TestAppQrCode:
    """Tests for App.get_session_qrcode."""

    def test_encodes_configured_mobile_url(self, config, monkeypatch):
        """Test that the QR code points at the configured controller page with the normalized code."""
        encoded = []
        monkeypatch.setattr(app_module, "render_qr_png", lambda data: encoded.append(data) or b"png")
        custom = config.model_copy(update={"mobile_url": "https://presenter.example/mobile"})

        result = asyncio.run(App(custom).get_session_qrcode(" a3x9k2 "))

        assert result == b"png"
        assert encoded == ["https://presenter.example/mobile?room=A3X9K2"]
