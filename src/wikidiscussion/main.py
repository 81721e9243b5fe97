"""Application entry point for the wikidiscussion server."""

from wikidiscussion.app import App
from wikidiscussion.config import Config
from wikidiscussion.logging import setup_logging
from wikidiscussion.web.runner import run_server


def main() -> None:
    config = Config()
    setup_logging(config.debug)
    app = App(config)
    run_server(app, config)


if __name__ == "__main__":
    main()
