"""Application entry point for GyroLaser session registry."""

from gyrolaser.app import App
from gyrolaser.config import Config
from gyrolaser.logging import setup_logging
from gyrolaser.web.runner import run_server


def main() -> None:
    config = Config()
    setup_logging(config.debug)
    app = App(config)
    run_server(app, config)


if __name__ == "__main__":
    main()
