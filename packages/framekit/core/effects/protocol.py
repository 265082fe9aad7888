"""Effect protocol and evaluation context.

An effect is built once from a validated config and a VideoConfig (static
geometry is computed at construction) and then evaluated per frame with
``frame_state(frame)``. Frame states are frozen pydantic models; callers
hand ``model_dump()`` output to the rendering collaborator.
"""

from __future__ import annotations

from typing import ClassVar, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

from framekit.core.config.models import VideoConfig


class FrameContext(BaseModel):
    """One evaluation request from the composition layer.

    Attributes:
        frame: Global frame index (>= 0).
        video: Frame rate, canvas size and duration of the composition.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    frame: int = Field(ge=0, description="Global frame index")
    video: VideoConfig = Field(default_factory=VideoConfig)


@runtime_checkable
class Effect(Protocol):
    """Protocol for frame-evaluated visual effects.

    Implementations declare ``effect_type`` (registry key) and
    ``config_model`` (pydantic model with ``extra="forbid"``), and are
    constructed as ``Effect(config, video)``.
    """

    effect_type: ClassVar[str]
    config_model: ClassVar[type[BaseModel]]

    def frame_state(self, frame: int) -> BaseModel:
        """Visual state at ``frame``; a pure function of frame and config."""
        ...
