from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    host: str = "127.0.0.1"
    port: int = 3000
    debug: bool = False
    cors_origins: list[str] = []  # Presenter front-ends allowed to call the API
    mobile_url: str = "http://localhost:3000/mobile"  # Controller page encoded in join QR codes

    model_config = {
        "env_file": [".env"],
        "env_prefix": "GYROLASER_",
        "extra": "ignore",
    }
