"""Pydantic settings models for pipeline configuration."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseModel):
    """Application-level settings."""

    name: str = "mediathumb"
    version: str = "0.1.0"
    environment: Literal["dev", "staging", "prod"] = "dev"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


class ImageSettings(BaseModel):
    """Defaults for still-image compression."""

    max_width: int = Field(default=400, ge=1)
    max_height: int = Field(default=300, ge=1)
    quality: float = Field(default=0.8, ge=0, le=1)


class VideoSettings(BaseModel):
    """Video frame sampling settings."""

    time_offset_seconds: float = Field(default=1.0, ge=0)
    capture_quality: float = Field(default=0.8, ge=0, le=1)
    thumbnail_max_width: int = Field(default=400, ge=1)
    thumbnail_max_height: int = Field(default=300, ge=1)
    thumbnail_quality: float = Field(default=0.8, ge=0, le=1)
    ffmpeg_path: str = "ffmpeg"
    ffprobe_path: str = "ffprobe"
    temp_dir: Path | None = None


class TelemetrySettings(BaseModel):
    """Logging settings."""

    log_format: Literal["json", "text"] = "json"
    log_level: str = "INFO"


class Settings(BaseSettings):
    """Root settings container with environment loading."""

    app: AppSettings = Field(default_factory=AppSettings)
    image: ImageSettings = Field(default_factory=ImageSettings)
    video: VideoSettings = Field(default_factory=VideoSettings)
    telemetry: TelemetrySettings = Field(default_factory=TelemetrySettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MEDIATHUMB__",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )
