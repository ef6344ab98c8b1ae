"""Tests for configuration loading."""

from gyrolaser.config import Config


class TestConfig:
    """Tests for environment-driven configuration."""

    def test_defaults(self, monkeypatch):
        for name in ("GYROLASER_HOST", "GYROLASER_PORT", "GYROLASER_DEBUG", "GYROLASER_CORS_ORIGINS"):
            monkeypatch.delenv(name, raising=False)
        config = Config(_env_file=None)
        assert config.host == "127.0.0.1"
        assert config.port == 3000
        assert config.debug is False
        assert config.cors_origins == []

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("GYROLASER_PORT", "8080")
        monkeypatch.setenv("GYROLASER_DEBUG", "true")
        monkeypatch.setenv("GYROLASER_CORS_ORIGINS", '["https://presenter.example"]')
        config = Config(_env_file=None)
        assert config.port == 8080
        assert config.debug is True
        assert config.cors_origins == ["https://presenter.example"]
