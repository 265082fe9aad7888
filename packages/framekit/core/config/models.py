"""Configuration models for framekit."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="forbid")

    level: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Log level",
    )
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format string (ignored when structured=True)",
    )
    structured: bool = Field(default=False, description="Emit JSON log lines")
    filename: str | None = Field(default=None, description="Log file path (stdout if None)")


class VideoConfig(BaseModel):
    """Frame rate, canvas size and length of a rendered visual.

    Example:
        >>> video = VideoConfig()
        >>> video.fps, video.width, video.height
        (30, 1920, 1080)
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    fps: int = Field(default=30, gt=0, description="Frames per second")
    width: int = Field(default=1920, gt=0, description="Canvas width in pixels")
    height: int = Field(default=1080, gt=0, description="Canvas height in pixels")
    duration_in_frames: int = Field(default=150, gt=0, description="Total frame count")

    @property
    def center(self) -> tuple[float, float]:
        return (self.width / 2, self.height / 2)


class AppConfig(BaseModel):
    """Application-level configuration."""

    model_config = ConfigDict(extra="forbid")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    video: VideoConfig = Field(default_factory=VideoConfig)
