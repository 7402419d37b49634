"""Main entry point for the SaaS Starter dashboard."""

import logging
import os
import sys

from saasapp.ui.application import create_application

#: Environment variable overriding the log level
LOG_LEVEL_ENV = "SAAS_LOG_LEVEL"


def configure_logging(level: str | None = None) -> None:
    """
    Send log records to stderr.

    Keyword Args:
        level: Level name (default: ``$SAAS_LOG_LEVEL``, else ``INFO``)

    """
    level = (level or os.environ.get(LOG_LEVEL_ENV) or "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main():
    """
    Run the SaaS Starter dashboard.
    """
    configure_logging()
    app, _window = create_application()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
