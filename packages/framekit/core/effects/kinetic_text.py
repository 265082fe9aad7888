"""Kinetic text stack effect.

Lines enter one after another on a fixed interval, each sliding up on a
spring with a brief glitch, flash and impact underline on entry.
"""

from __future__ import annotations

import math
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from framekit.core.config.models import VideoConfig
from framekit.core.motion.easing import BreakpointSet, Extrapolate
from framekit.core.motion.spring import SpringConfig, spring_progress
from framekit.core.motion.timeline import ItemClock, Timeline, linear_stagger

SLIDE_DISTANCE = 30.0
FADE_IN = BreakpointSet((0.0, 8.0), (0.0, 1.0))

GLITCH_FRAMES = 4
GLITCH_FREQUENCY = 40
GLITCH_AMPLITUDE = 3

FLASH_FRAMES = 3
FLASH = BreakpointSet((0.0, 3.0), (0.4, 0.0))
FLASH_BLUR = 40

IMPACT_FRAMES = 6
IMPACT_WIDTH = BreakpointSet((0.0, 6.0), (0.0, 100.0))
IMPACT_FADE = BreakpointSet((3.0, 6.0), (1.0, 0.0))


class KineticTextConfig(BaseModel):
    """Options for the kinetic text stack."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    lines: tuple[str, ...] = Field(default=("our apps.", "our platforms.", "our data."))
    color: str = Field(default="#ffffff", description="CSS text color")
    interval_frames: int = Field(
        default=30, gt=0, strict=True, description="Frames between line entries"
    )
    spring: SpringConfig = Field(
        default_factory=lambda: SpringConfig(damping=20, stiffness=100, mass=0.8)
    )


class ImpactLineVisual(BaseModel):
    model_config = ConfigDict(frozen=True)

    width_pct: float
    opacity: float


class LineVisual(BaseModel):
    """A drawn text line.

    Attributes:
        translate_y: Vertical offset in pixels (slides to 0).
        translate_x: Horizontal glitch offset in pixels.
        glow_blur: Text-shadow blur radius of the entry flash.
        impact_fired: True only on the line's entry frame.
    """

    model_config = ConfigDict(frozen=True)

    index: int
    text: str
    opacity: float
    translate_y: float
    translate_x: float
    flash_opacity: float
    glow_blur: float
    impact_line: ImpactLineVisual | None = None
    impact_fired: bool = False


class KineticTextFrame(BaseModel):
    model_config = ConfigDict(frozen=True)

    frame: int
    color: str
    lines: tuple[LineVisual, ...]


class KineticTextEffect:
    effect_type: ClassVar[str] = "kinetic_text"
    config_model: ClassVar[type[BaseModel]] = KineticTextConfig

    def __init__(self, config: KineticTextConfig, video: VideoConfig) -> None:
        self._config = config
        self._video = video
        self._timeline = Timeline(
            linear_stagger(len(config.lines), config.interval_frames),
            video.duration_in_frames,
        )

    def frame_state(self, frame: int) -> KineticTextFrame:
        fired = set(self._timeline.crossed(frame))

        def line_state(clock: ItemClock) -> LineVisual:
            local = clock.local_frame
            slide = spring_progress(local, self._config.spring, self._video.fps)

            glitch = 0.0
            if local < GLITCH_FRAMES:
                decay = (GLITCH_FRAMES - local) * GLITCH_AMPLITUDE
                glitch = math.sin(local * GLITCH_FREQUENCY) * decay

            flash = 0.0
            if local < FLASH_FRAMES:
                flash = FLASH.map(local, above=Extrapolate.CLAMP)

            impact = None
            if local < IMPACT_FRAMES:
                impact = ImpactLineVisual(
                    width_pct=IMPACT_WIDTH.map(local, above=Extrapolate.CLAMP),
                    opacity=IMPACT_FADE.map(local, Extrapolate.CLAMP, Extrapolate.CLAMP),
                )

            return LineVisual(
                index=clock.index,
                text=self._config.lines[clock.index],
                opacity=FADE_IN.map(local, above=Extrapolate.CLAMP),
                translate_y=(1 - slide) * SLIDE_DISTANCE,
                translate_x=glitch,
                flash_opacity=flash,
                glow_blur=flash * FLASH_BLUR,
                impact_line=impact,
                impact_fired=clock.index in fired,
            )

        return KineticTextFrame(
            frame=frame,
            color=self._config.color,
            lines=self._timeline.render(frame, line_state).states,
        )
