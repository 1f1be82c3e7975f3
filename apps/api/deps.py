"""FastAPI dependencies shared by the routers.

Both are overridable through app.dependency_overrides, which is how the
tests pin configuration and the date fallback.
"""

from apps.api.core.config import Settings, get_settings
from packages.receipt_extraction.clock import Clock, system_clock


def get_app_settings() -> Settings:
    return get_settings()


def get_clock() -> Clock:
    """Production wiring: the system clock."""
    return system_clock
