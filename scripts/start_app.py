#!/usr/bin/env python3
"""Start the FastAPI application with Logfire error tracking for startup errors."""

import sys
import logfire
import uvicorn

from murmur.config import Settings
from murmur.util.observability import configure_logfire


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    # Configure Logfire early to catch startup errors
    configure_logfire(settings)

    try:
        logfire.info("Starting murmur", port=settings.port)

        # proxy_headers lets client addresses come from X-Forwarded-For
        # when running behind the blog's reverse proxy
        uvicorn.run(
            "murmur.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="info",
            proxy_headers=True,
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
