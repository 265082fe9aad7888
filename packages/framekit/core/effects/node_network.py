"""Node network effect.

Nodes pop in on a spring as their entry frame arrives, then breathe.
Edges between nearby nodes fade in once both ends are present and carry a
looping data pulse.
"""

from __future__ import annotations

import logging
import math
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from framekit.core.config.models import VideoConfig
from framekit.core.effects.palette import BACKGROUND_COLOR, ColorScheme, glow_color, node_color
from framekit.core.layout import (
    DEFAULT_LAYOUT_SEED,
    GraphLayout,
    LayoutThresholds,
    PlacementMode,
    build_layout,
)
from framekit.core.motion.easing import BreakpointSet, Extrapolate
from framekit.core.motion.random import MAX_SEED
from framekit.core.motion.spring import SpringConfig, spring_progress
from framekit.core.motion.timeline import ItemClock, Timeline, TimelineItem

logger = logging.getLogger(__name__)

# Nodes with spring scale at or below this are not drawn
VISIBLE_SCALE = 0.01

EDGE_ENTRY_DELAY = 5
EDGE_FADE = BreakpointSet((0.0, 15.0), (0.0, 0.3))
PULSE_DELAY = 20
PULSE_PERIOD = 60
PULSE_RADIUS = 2.0
PULSE_OPACITY = 0.8

BREATHE_RATE = 0.05
BREATHE_AMOUNT = 0.1


class NodeNetworkConfig(BaseModel):
    """Options for the node network effect."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    node_count: int = Field(default=12, ge=0, strict=True, description="Number of nodes")
    center_node: bool = Field(default=False, description="Pin node 0 at the center (radial)")
    color_scheme: ColorScheme = ColorScheme.CYAN
    seed: int = Field(default=DEFAULT_LAYOUT_SEED, ge=1, le=MAX_SEED, strict=True)
    spring: SpringConfig = Field(
        default_factory=lambda: SpringConfig(damping=15, stiffness=80, mass=0.5)
    )
    thresholds: LayoutThresholds = Field(default_factory=LayoutThresholds)


class NodeVisual(BaseModel):
    """A drawn node: glow, core and bright center circles."""

    model_config = ConfigDict(frozen=True)

    id: int
    x: float
    y: float
    color: str
    scale: float
    radius: float
    glow_radius: float
    center_radius: float
    opacity: float
    glow_opacity: float
    center_opacity: float


class PulseVisual(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    progress: float
    radius: float = PULSE_RADIUS
    opacity: float = PULSE_OPACITY


class EdgeVisual(BaseModel):
    """A drawn edge line, optionally with its traveling pulse."""

    model_config = ConfigDict(frozen=True)

    source: int
    target: int
    x1: float
    y1: float
    x2: float
    y2: float
    color: str
    opacity: float
    pulse: PulseVisual | None = None


class NodeNetworkFrame(BaseModel):
    model_config = ConfigDict(frozen=True)

    frame: int
    background: str = BACKGROUND_COLOR
    glow_color: str
    edges: tuple[EdgeVisual, ...]
    nodes: tuple[NodeVisual, ...]


class NodeNetworkEffect:
    """Node network built once, evaluated per frame.

    Example:
        >>> config = NodeNetworkConfig(node_count=6, center_node=True)
        >>> effect = NodeNetworkEffect(config, VideoConfig())
        >>> state = effect.frame_state(45)
    """

    effect_type: ClassVar[str] = "node_network"
    config_model: ClassVar[type[BaseModel]] = NodeNetworkConfig

    def __init__(self, config: NodeNetworkConfig, video: VideoConfig) -> None:
        self._config = config
        self._video = video
        self._layout = build_layout(
            config.node_count,
            video.width,
            video.height,
            seed=config.seed,
            mode=PlacementMode.RADIAL if config.center_node else PlacementMode.SCATTER,
            thresholds=config.thresholds,
        )
        nodes = self._layout.nodes
        self._node_timeline = Timeline(
            (TimelineItem(index=n.id, entry_delay_frames=n.entry_frame) for n in nodes),
            video.duration_in_frames,
        )
        self._edge_timeline = Timeline(
            (
                TimelineItem(
                    index=i,
                    entry_delay_frames=max(nodes[e.source].entry_frame, nodes[e.target].entry_frame)
                    + EDGE_ENTRY_DELAY,
                )
                for i, e in enumerate(self._layout.edges)
            ),
            video.duration_in_frames,
        )
        logger.debug(
            "Node network ready: scheme=%s, %d nodes, %d edges",
            config.color_scheme.value,
            len(nodes),
            len(self._layout.edges),
        )

    @property
    def layout(self) -> GraphLayout:
        return self._layout

    def frame_state(self, frame: int) -> NodeNetworkFrame:
        total = len(self._layout.nodes)
        scheme = self._config.color_scheme

        def edge_state(clock: ItemClock) -> EdgeVisual | None:
            opacity = EDGE_FADE.map(clock.local_frame, Extrapolate.CLAMP, Extrapolate.CLAMP)
            if opacity <= 0:
                return None

            edge = self._layout.edges[clock.index]
            a = self._layout.nodes[edge.source]
            b = self._layout.nodes[edge.target]

            pulse = None
            if clock.local_frame > PULSE_DELAY:
                progress = ((clock.local_frame - PULSE_DELAY) % PULSE_PERIOD) / PULSE_PERIOD
                pulse = PulseVisual(
                    x=a.x + (b.x - a.x) * progress,
                    y=a.y + (b.y - a.y) * progress,
                    progress=progress,
                )

            return EdgeVisual(
                source=edge.source,
                target=edge.target,
                x1=a.x,
                y1=a.y,
                x2=b.x,
                y2=b.y,
                color=node_color(scheme, edge.source, total),
                opacity=opacity,
                pulse=pulse,
            )

        def node_state(clock: ItemClock) -> NodeVisual | None:
            scale = spring_progress(clock.local_frame, self._config.spring, self._video.fps)
            if scale <= VISIBLE_SCALE:
                return None

            node = self._layout.nodes[clock.index]
            breathe = 1 + math.sin(frame * BREATHE_RATE + node.id) * BREATHE_AMOUNT
            radius = node.size * scale * breathe

            return NodeVisual(
                id=node.id,
                x=node.x,
                y=node.y,
                color=node_color(scheme, node.id, total),
                scale=scale,
                radius=radius,
                glow_radius=radius * 3,
                center_radius=radius * 0.4,
                opacity=0.9 * scale,
                glow_opacity=0.1 * scale,
                center_opacity=0.6 * scale,
            )

        return NodeNetworkFrame(
            frame=frame,
            glow_color=glow_color(scheme),
            edges=self._edge_timeline.render(frame, edge_state).states,
            nodes=self._node_timeline.render(frame, node_state).states,
        )
