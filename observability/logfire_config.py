"""
Logfire configuration and initialization.

Logfire provides structured logging and tracing for the API, the
generation pipeline and the pydantic-ai agent calls.

Environment Variables:
    LOGFIRE_TOKEN: Logfire project token (optional; without it spans stay local)
    ENVIRONMENT: deployment environment (development, staging, production)
"""
import os
from typing import Optional

import logfire


class LogfireConfig:
    """
    Logfire configuration singleton.

    Ensures Logfire is initialized only once. Without a token Logfire still
    records spans locally, so the service keeps running in development.
    """

    _initialized = False

    @classmethod
    def initialize(
        cls,
        token: Optional[str] = None,
        environment: Optional[str] = None,
        console: bool = True,
    ) -> None:
        """
        Initialize Logfire with project token.

        Args:
            token: Logfire project token (or set LOGFIRE_TOKEN env var)
            environment: Deployment environment name (or set ENVIRONMENT env var)
            console: Also print log records to the console
        """
        if cls._initialized:
            return

        token = token or os.getenv("LOGFIRE_TOKEN") or None

        logfire.configure(
            token=token,
            service_name="quill-email-generator",
            environment=environment or os.getenv("ENVIRONMENT", "development"),
            send_to_logfire="if-token-present",
            console=None if console else False,
        )

        # Record prompts, responses and token usage of every generation call
        logfire.instrument_pydantic_ai()

        cls._initialized = True

    @classmethod
    def is_initialized(cls) -> bool:
        """
        Check if Logfire has been initialized.

        Returns:
            True if initialized, False otherwise
        """
        return cls._initialized
