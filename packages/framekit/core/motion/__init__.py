"""Deterministic animation primitives."""

from framekit.core.motion.easing import (
    BreakpointSet,
    Extrapolate,
    ease_in_cubic,
    ease_in_out_cubic,
    ease_out_cubic,
    fade,
    interpolate,
    linear,
)
from framekit.core.motion.random import DeterministicSequence
from framekit.core.motion.spring import SpringConfig, settle_frames, spring_progress
from framekit.core.motion.timeline import (
    FrameState,
    ItemClock,
    Timeline,
    TimelineItem,
    linear_stagger,
    ordered_stagger,
    paired_stagger,
    proportional_stagger,
    radial_order,
)

__all__ = [
    "BreakpointSet",
    "DeterministicSequence",
    "Extrapolate",
    "FrameState",
    "ItemClock",
    "SpringConfig",
    "Timeline",
    "TimelineItem",
    "ease_in_cubic",
    "ease_in_out_cubic",
    "ease_out_cubic",
    "fade",
    "interpolate",
    "linear",
    "linear_stagger",
    "ordered_stagger",
    "paired_stagger",
    "proportional_stagger",
    "radial_order",
    "settle_frames",
    "spring_progress",
]
