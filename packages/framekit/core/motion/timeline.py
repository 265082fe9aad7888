"""Stagger composition.

A timeline is a fixed set of items, each entering after its own delay. For a
global frame every item gets a local clock; callers evaluate primitives
(springs, interpolation) on that local clock and aggregate the results into
one frame's state. Items that have not entered yet contribute nothing.

Stagger order is always explicit: each item carries its own index and delay,
and results are reported in index order regardless of how items were stored.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
import math
from typing import Generic, TypeVar

from framekit.core.errors import InvalidConfiguration
from framekit.core.utils.math import distance

T = TypeVar("T")


@dataclass(frozen=True)
class TimelineItem:
    """One staggered item.

    Attributes:
        index: Caller-defined item identity (unique within a timeline).
        entry_delay_frames: Global frame at which the item enters (>= 0).
    """

    index: int
    entry_delay_frames: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.entry_delay_frames) or self.entry_delay_frames < 0:
            raise InvalidConfiguration(
                f"entry_delay_frames must be finite and >= 0, got {self.entry_delay_frames} "
                f"(item {self.index})"
            )

    def clock(self, global_frame: float) -> ItemClock:
        """Local clock of this item at ``global_frame``."""
        raw = global_frame - self.entry_delay_frames
        return ItemClock(
            index=self.index,
            local_frame=max(0.0, raw),
            has_entered=global_frame >= self.entry_delay_frames,
        )

    def crosses(self, global_frame: float, threshold: float = 0.0) -> bool:
        """True only on the frame whose local clock first reaches ``threshold``.

        Over consecutive integer global frames this fires exactly once per
        item, which gates one-shot effects such as an entry flash.
        """
        raw = global_frame - self.entry_delay_frames
        return raw >= threshold and raw - 1 < threshold


@dataclass(frozen=True)
class ItemClock:
    """Per-frame derived state of a timeline item."""

    index: int
    local_frame: float
    has_entered: bool


@dataclass(frozen=True)
class FrameState(Generic[T]):
    """Aggregated state of all entered items for one frame."""

    frame: float
    states: tuple[T, ...]


class Timeline:
    """Fixed set of staggered items over a known number of frames.

    Args:
        items: Timeline items; indices must be unique.
        duration_frames: Total frame count of the timeline (> 0).

    Raises:
        InvalidConfiguration: If indices repeat or the duration is not positive.

    Example:
        >>> timeline = Timeline.from_delays([0, 30, 60], duration_frames=150)
        >>> [c.has_entered for c in timeline.evaluate(45)]
        [True, True, False]
    """

    def __init__(self, items: Iterable[TimelineItem], duration_frames: int) -> None:
        if duration_frames <= 0:
            raise InvalidConfiguration(f"duration_frames must be > 0, got {duration_frames}")

        ordered = sorted(items, key=lambda item: item.index)
        seen: set[int] = set()
        for item in ordered:
            if item.index in seen:
                raise InvalidConfiguration(f"duplicate timeline item index {item.index}")
            seen.add(item.index)

        self._items: tuple[TimelineItem, ...] = tuple(ordered)
        self._duration_frames = duration_frames

    @classmethod
    def from_delays(cls, delays: Sequence[float], duration_frames: int) -> Timeline:
        """Build a timeline whose item i enters at delays[i]."""
        return cls(
            (TimelineItem(index=i, entry_delay_frames=d) for i, d in enumerate(delays)),
            duration_frames,
        )

    @property
    def items(self) -> tuple[TimelineItem, ...]:
        return self._items

    @property
    def duration_frames(self) -> int:
        return self._duration_frames

    def __len__(self) -> int:
        return len(self._items)

    def item(self, index: int) -> TimelineItem:
        for item in self._items:
            if item.index == index:
                return item
        raise KeyError(index)

    def evaluate(self, global_frame: float) -> list[ItemClock]:
        """Local clocks of every item, in index order."""
        return [item.clock(global_frame) for item in self._items]

    def entered(self, global_frame: float) -> list[ItemClock]:
        """Local clocks of items that have entered, in index order."""
        return [clock for clock in self.evaluate(global_frame) if clock.has_entered]

    def crossed(self, global_frame: float, threshold: float = 0.0) -> list[int]:
        """Indices of items whose local clock reaches ``threshold`` on this frame."""
        return [item.index for item in self._items if item.crosses(global_frame, threshold)]

    def is_complete(self, global_frame: float) -> bool:
        return global_frame >= self._duration_frames

    def render(
        self,
        global_frame: float,
        state_fn: Callable[[ItemClock], T | None],
    ) -> FrameState[T]:
        """Aggregate per-item state for one frame.

        ``state_fn`` is called once per entered item; returning None hides
        the item for this frame.
        """
        states = []
        for clock in self.entered(global_frame):
            state = state_fn(clock)
            if state is not None:
                states.append(state)
        return FrameState(frame=global_frame, states=tuple(states))


def linear_stagger(count: int, interval: float, offset: float = 0.0) -> list[TimelineItem]:
    """Item i enters at ``offset + i * interval``."""
    _validate_count(count)
    return [TimelineItem(index=i, entry_delay_frames=offset + i * interval) for i in range(count)]


def paired_stagger(
    count: int,
    interval: float,
    offset: float = 0.0,
    group_size: int = 2,
) -> list[TimelineItem]:
    """Items enter in groups: item i at ``offset + (i // group_size) * interval``."""
    _validate_count(count)
    if group_size < 1:
        raise InvalidConfiguration(f"group_size must be >= 1, got {group_size}")
    return [
        TimelineItem(index=i, entry_delay_frames=offset + (i // group_size) * interval)
        for i in range(count)
    ]


def proportional_stagger(count: int, span: float) -> list[TimelineItem]:
    """Spread entries evenly over ``span`` frames: item i at ``i / count * span``."""
    _validate_count(count)
    return [TimelineItem(index=i, entry_delay_frames=(i / count) * span) for i in range(count)]


def ordered_stagger(
    order: Sequence[int], interval: float, offset: float = 0.0
) -> list[TimelineItem]:
    """Stagger items in an explicit order.

    ``order[k]`` is the index of the k-th item to enter, at
    ``offset + k * interval``.
    """
    if len(set(order)) != len(order):
        raise InvalidConfiguration("stagger order contains duplicate indices")
    return [
        TimelineItem(index=index, entry_delay_frames=offset + k * interval)
        for k, index in enumerate(order)
    ]


def radial_order(points: Sequence[tuple[float, float]], center: tuple[float, float]) -> list[int]:
    """Point indices ordered by distance from ``center``, ties broken by index."""
    cx, cy = center
    return sorted(
        range(len(points)),
        key=lambda i: (distance(points[i][0], points[i][1], cx, cy), i),
    )


def _validate_count(count: int) -> None:
    if count < 0:
        raise InvalidConfiguration(f"item count must be >= 0, got {count}")
