"""
Environment-specific configuration settings.

Ticket prices and the per-purchase limit are business rules and live in the
ticket service, not here.
"""

from dataclasses import dataclass
import os


@dataclass
class Settings:
    """Runtime settings for the purchase entrypoint."""

    environment: str = "dev"
    service_name: str = "cinema-tickets"
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Settings":
        """Load settings from environment variables."""
        return cls(
            environment=os.environ.get("ENVIRONMENT", "dev"),
            service_name=os.environ.get("SERVICE_NAME", "cinema-tickets"),
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        )
