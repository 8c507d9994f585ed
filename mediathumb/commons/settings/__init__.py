"""Settings management module."""

from mediathumb.commons.settings.loader import (
    SettingsLoader,
    get_settings,
    reset_settings,
)
from mediathumb.commons.settings.models import (
    AppSettings,
    ImageSettings,
    Settings,
    TelemetrySettings,
    VideoSettings,
)

__all__ = [
    # Loader
    "SettingsLoader",
    "get_settings",
    "reset_settings",
    # Models
    "Settings",
    "AppSettings",
    "ImageSettings",
    "VideoSettings",
    "TelemetrySettings",
]
