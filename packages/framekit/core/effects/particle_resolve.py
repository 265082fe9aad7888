"""Particle resolve effect.

Seeded particles start on a wide ring around the canvas center and converge
with an ease-out; the logo then scales in on a spring behind an outward
pulse ring.
"""

from __future__ import annotations

import logging
import math
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from framekit.core.config.models import VideoConfig
from framekit.core.effects.palette import BACKGROUND_COLOR, hsla
from framekit.core.motion.easing import BreakpointSet, Extrapolate, ease_out_cubic
from framekit.core.motion.random import MAX_SEED, DeterministicSequence
from framekit.core.motion.spring import SpringConfig, spring_progress
from framekit.core.utils.math import lerp

logger = logging.getLogger(__name__)

CONVERGE = BreakpointSet((0.0, 60.0), (0.0, 1.0))
FADE_OUT_START = 0.9
PARTICLE_FADE_IN = BreakpointSet((0.0, 0.3), (0.0, 0.8))
PARTICLE_FADE_OUT = BreakpointSet((0.9, 1.0), (0.8, 0.0))
TRAIL_LENGTH = 20
TRAIL_MIN_LENGTH = 2
TRAIL_SCALE = 0.02
SETTLED_FRAME = 90

LOGO_DELAY = 50
LOGO_FADE = BreakpointSet((50.0, 75.0), (0.0, 1.0))
LOGO_BASE_SCALE = 0.8
TAGLINE_FADE = BreakpointSet((80.0, 100.0), (0.0, 1.0))

PULSE_DELAY = 75
PULSE_SPEED = 8
PULSE_FADE = BreakpointSet((0.0, 40.0), (0.4, 0.0))


class ParticleResolveConfig(BaseModel):
    """Options for the particle resolve effect."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    particle_count: int = Field(default=60, ge=0, strict=True)
    seed: int = Field(default=99, ge=1, le=MAX_SEED, strict=True)
    min_distance: float = Field(default=400.0, ge=0.0, description="Inner start radius")
    distance_spread: float = Field(default=600.0, ge=0.0)
    title: str = "POWERHOUSE"
    tagline: str = "OPEN FRAMEWORK FOR A BETTER INTERNET"
    logo_spring: SpringConfig = Field(
        default_factory=lambda: SpringConfig(damping=20, stiffness=80, mass=1)
    )


class Particle(BaseModel):
    """Static per-particle parameters drawn once from the seeded stream."""

    model_config = ConfigDict(frozen=True)

    start_x: float
    start_y: float
    speed: float
    size: float
    hue: float


class TrailVisual(BaseModel):
    model_config = ConfigDict(frozen=True)

    x2: float
    y2: float
    color: str


class ParticleVisual(BaseModel):
    model_config = ConfigDict(frozen=True)

    index: int
    x: float
    y: float
    radius: float
    opacity: float
    color: str
    trail: TrailVisual | None = None


class PulseRingVisual(BaseModel):
    model_config = ConfigDict(frozen=True)

    radius: float
    opacity: float


class LogoVisual(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    tagline: str
    opacity: float
    scale: float
    tagline_opacity: float


class ParticleResolveFrame(BaseModel):
    model_config = ConfigDict(frozen=True)

    frame: int
    background: str = BACKGROUND_COLOR
    center_x: float
    center_y: float
    particles: tuple[ParticleVisual, ...]
    pulse: PulseRingVisual | None = None
    logo: LogoVisual
    settled: bool


class ParticleResolveEffect:
    effect_type: ClassVar[str] = "particle_resolve"
    config_model: ClassVar[type[BaseModel]] = ParticleResolveConfig

    def __init__(self, config: ParticleResolveConfig, video: VideoConfig) -> None:
        self._config = config
        self._video = video
        self._center = video.center
        self._particles = self._spawn()
        logger.debug("Spawned %d particles (seed=%d)", len(self._particles), config.seed)

    def _spawn(self) -> tuple[Particle, ...]:
        cx, cy = self._center
        cfg = self._config
        rand = DeterministicSequence(cfg.seed)
        particles = []
        for _ in range(cfg.particle_count):
            angle = rand.next() * math.pi * 2
            dist = cfg.min_distance + rand.next() * cfg.distance_spread
            particles.append(
                Particle(
                    start_x=cx + math.cos(angle) * dist,
                    start_y=cy + math.sin(angle) * dist,
                    speed=0.8 + rand.next() * 0.4,
                    size=2 + rand.next() * 3,
                    hue=rand.next() * 360,
                )
            )
        return tuple(particles)

    @property
    def particles(self) -> tuple[Particle, ...]:
        return self._particles

    def frame_state(self, frame: int) -> ParticleResolveFrame:
        cx, cy = self._center
        converge = CONVERGE.map(frame, above=Extrapolate.CLAMP)
        settled = frame > SETTLED_FRAME

        visuals = []
        for i, p in enumerate(self._particles):
            progress = min(converge * p.speed, 1.0)
            if settled and progress >= 1:
                continue
            eased = ease_out_cubic(progress)

            if progress > FADE_OUT_START:
                opacity = PARTICLE_FADE_OUT.map(progress)
            else:
                opacity = PARTICLE_FADE_IN.map(progress, above=Extrapolate.CLAMP)

            x = lerp(p.start_x, cx, eased)
            y = lerp(p.start_y, cy, eased)

            trail = None
            if TRAIL_LENGTH * (1 - eased) > TRAIL_MIN_LENGTH:
                trail = TrailVisual(
                    x2=x + (p.start_x - cx) * TRAIL_SCALE * (1 - eased),
                    y2=y + (p.start_y - cy) * TRAIL_SCALE * (1 - eased),
                    color=hsla(p.hue, 70, 60, opacity * 0.5),
                )

            visuals.append(
                ParticleVisual(
                    index=i,
                    x=x,
                    y=y,
                    radius=p.size * (1 - eased * 0.5),
                    opacity=opacity,
                    color=hsla(p.hue, 70, 60, opacity),
                    trail=trail,
                )
            )

        pulse = None
        pulse_frame = frame - PULSE_DELAY
        if pulse_frame > 0:
            pulse_opacity = PULSE_FADE.map(pulse_frame, above=Extrapolate.CLAMP)
            if pulse_opacity > 0:
                pulse = PulseRingVisual(radius=pulse_frame * PULSE_SPEED, opacity=pulse_opacity)

        logo_spring = spring_progress(
            max(0, frame - LOGO_DELAY), self._config.logo_spring, self._video.fps
        )
        logo = LogoVisual(
            title=self._config.title,
            tagline=self._config.tagline,
            opacity=LOGO_FADE.map(frame, Extrapolate.CLAMP, Extrapolate.CLAMP),
            scale=LOGO_BASE_SCALE + logo_spring * (1 - LOGO_BASE_SCALE),
            tagline_opacity=TAGLINE_FADE.map(frame, Extrapolate.CLAMP, Extrapolate.CLAMP),
        )

        return ParticleResolveFrame(
            frame=frame,
            center_x=cx,
            center_y=cy,
            particles=tuple(visuals),
            pulse=pulse,
            logo=logo,
            settled=settled,
        )
