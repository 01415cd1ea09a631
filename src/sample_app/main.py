"""Application startup for the model layer."""

import asyncio
import logging

from sample_app import __version__
from sample_app.config import get_settings
from sample_app.database import engine, init_db

logger = logging.getLogger(__name__)


def configure_logging(debug: bool = False) -> None:
    """Configure root logging for the application."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


async def init_app() -> None:
    """Run startup: configure logging, report configuration, create tables."""
    settings = get_settings()
    configure_logging(settings.debug)

    logger.info("Starting %s v%s", settings.app_name, __version__)
    logger.info("Debug mode: %s", settings.debug)
    logger.info("Database: %s", settings.database_url.split("///")[-1])  # Hide path details

    # Validate and log warnings
    warnings = settings.validate_runtime_config()
    if warnings:
        logger.warning("Configuration warnings:")
        for warning in warnings:
            logger.warning("  - %s", warning)
    else:
        logger.info("Configuration validation passed - no warnings")

    await init_db(engine)
    logger.info("Application startup complete")


def main() -> None:
    """Console entry point: create the schema and exit."""
    asyncio.run(init_app())


if __name__ == "__main__":
    main()
