"""Module assembly effect.

Labelled modules fly in from scattered positions and spring into an
assembled arrangement around the canvas center. Each module flashes once it
snaps into place; nearby modules are then linked by faint lines.
"""

from __future__ import annotations

import math
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from framekit.core.config.models import VideoConfig
from framekit.core.layout import Edge, proximity_edges
from framekit.core.motion.easing import BreakpointSet, Extrapolate
from framekit.core.motion.spring import SpringConfig, spring_progress
from framekit.core.motion.timeline import ItemClock, Timeline, TimelineItem, linear_stagger
from framekit.core.utils.math import lerp

FADE_IN = BreakpointSet((0.0, 10.0), (0.0, 1.0))

SNAP_PROGRESS = 0.95
SNAP_FLASH_DELAY = 30
SNAP_FLASH = BreakpointSet((0.0, 8.0), (0.6, 0.0))

GLOW_BASE = 0.4
GLOW_RATE = 0.06
GLOW_AMOUNT = 0.1

LINK_DELAY = 35
LINK_FADE = BreakpointSet((0.0, 15.0), (0.0, 0.15))


class ModuleSpec(BaseModel):
    """One module: label, icon and assembled/scattered offsets from the center."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    label: str
    icon: str = ""
    x: float
    y: float
    scatter_x: float
    scatter_y: float


DEFAULT_MODULES: tuple[ModuleSpec, ...] = (
    ModuleSpec(label="sync", icon="⟲", x=-320, y=-120, scatter_x=-600, scatter_y=-400),
    ModuleSpec(label="auth", icon="🔑", x=320, y=-120, scatter_x=700, scatter_y=-350),
    ModuleSpec(label="data", icon="◆", x=-320, y=120, scatter_x=-500, scatter_y=450),
    ModuleSpec(label="API", icon="⟷", x=320, y=120, scatter_x=650, scatter_y=400),
    ModuleSpec(label="docs", icon="📄", x=0, y=-200, scatter_x=-100, scatter_y=-500),
    ModuleSpec(label="validate", icon="✓", x=0, y=200, scatter_x=150, scatter_y=550),
)


class ModuleAssemblyConfig(BaseModel):
    """Options for the module assembly effect."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    modules: tuple[ModuleSpec, ...] = DEFAULT_MODULES
    stagger_interval: int = Field(
        default=15, gt=0, strict=True, description="Frames between module entries"
    )
    spring: SpringConfig = Field(
        default_factory=lambda: SpringConfig(damping=14, stiffness=40, mass=1.2)
    )
    link_distance: float = Field(default=400.0, gt=0.0, description="Max link length (inclusive)")
    module_width: float = Field(default=180.0, gt=0.0)
    module_height: float = Field(default=100.0, gt=0.0)


class ModuleVisual(BaseModel):
    """A drawn module box. ``x``/``y`` are its center in canvas pixels."""

    model_config = ConfigDict(frozen=True)

    index: int
    label: str
    icon: str
    x: float
    y: float
    left: float
    top: float
    width: float
    height: float
    opacity: float
    progress: float
    snapped: bool
    snap_flash: float
    glow_intensity: float


class LinkVisual(BaseModel):
    model_config = ConfigDict(frozen=True)

    source: int
    target: int
    x1: float
    y1: float
    x2: float
    y2: float
    opacity: float


class ModuleAssemblyFrame(BaseModel):
    model_config = ConfigDict(frozen=True)

    frame: int
    modules: tuple[ModuleVisual, ...]
    links: tuple[LinkVisual, ...]


class ModuleAssemblyEffect:
    effect_type: ClassVar[str] = "module_assembly"
    config_model: ClassVar[type[BaseModel]] = ModuleAssemblyConfig

    def __init__(self, config: ModuleAssemblyConfig, video: VideoConfig) -> None:
        self._config = config
        self._video = video
        self._center = video.center

        stagger = linear_stagger(len(config.modules), config.stagger_interval)
        self._timeline = Timeline(stagger, video.duration_in_frames)

        self._links: tuple[Edge, ...] = proximity_edges(
            [(m.x, m.y) for m in config.modules], config.link_distance, inclusive=True
        )
        self._link_timeline = Timeline(
            (
                TimelineItem(
                    index=i,
                    entry_delay_frames=max(
                        stagger[link.source].entry_delay_frames,
                        stagger[link.target].entry_delay_frames,
                    )
                    + LINK_DELAY,
                )
                for i, link in enumerate(self._links)
            ),
            video.duration_in_frames,
        )

    @property
    def links(self) -> tuple[Edge, ...]:
        return self._links

    def frame_state(self, frame: int) -> ModuleAssemblyFrame:
        cx, cy = self._center
        cfg = self._config

        def module_state(clock: ItemClock) -> ModuleVisual:
            module = cfg.modules[clock.index]
            local = clock.local_frame
            progress = spring_progress(local, cfg.spring, self._video.fps)

            x = cx + lerp(module.scatter_x, module.x, progress)
            y = cy + lerp(module.scatter_y, module.y, progress)

            snapped = progress > SNAP_PROGRESS
            snap_flash = 0.0
            glow = 0.0
            if snapped:
                snap_flash = SNAP_FLASH.map(
                    local - SNAP_FLASH_DELAY, Extrapolate.CLAMP, Extrapolate.CLAMP
                )
                glow = GLOW_BASE + math.sin(frame * GLOW_RATE + clock.index) * GLOW_AMOUNT

            return ModuleVisual(
                index=clock.index,
                label=module.label,
                icon=module.icon,
                x=x,
                y=y,
                left=x - cfg.module_width / 2,
                top=y - cfg.module_height / 2,
                width=cfg.module_width,
                height=cfg.module_height,
                opacity=FADE_IN.map(local, above=Extrapolate.CLAMP),
                progress=progress,
                snapped=snapped,
                snap_flash=snap_flash,
                glow_intensity=glow,
            )

        def link_state(clock: ItemClock) -> LinkVisual | None:
            opacity = LINK_FADE.map(clock.local_frame, above=Extrapolate.CLAMP)
            if opacity <= 0:
                return None
            link = self._links[clock.index]
            a = cfg.modules[link.source]
            b = cfg.modules[link.target]
            return LinkVisual(
                source=link.source,
                target=link.target,
                x1=cx + a.x,
                y1=cy + a.y,
                x2=cx + b.x,
                y2=cy + b.y,
                opacity=opacity,
            )

        return ModuleAssemblyFrame(
            frame=frame,
            modules=self._timeline.render(frame, module_state).states,
            links=self._link_timeline.render(frame, link_state).states,
        )
