#!/usr/bin/env python3
"""Start the AskAbout API with Logfire error tracking for startup errors."""

import sys
import logfire
import uvicorn

from askabout.config import DEFAULT_JWT_SECRET, Settings
from askabout.util.error import ConfigurationError
from askabout.util.logging import setup_logging
from askabout.util.observability import configure_logfire


def check_settings(settings: Settings) -> None:
    """Refuse to start a deployed environment with the development JWT secret.

    Raises:
        ConfigurationError: If AUTH__JWT_SECRET was not overridden
    """
    if settings.environment in ("staging", "production") and (
        settings.auth.jwt_secret == DEFAULT_JWT_SECRET
    ):
        raise ConfigurationError("AUTH__JWT_SECRET", settings.environment)


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    setup_logging(settings)
    # Configure Logfire early to catch startup errors
    configure_logfire(settings)

    try:
        check_settings(settings)
        logfire.info("Starting AskAbout API", git_sha=settings.git_sha)

        uvicorn.run(
            "askabout.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )

        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
