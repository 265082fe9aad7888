"""Clamped piecewise-linear interpolation.

Maps a frame (or any scalar) through an ordered breakpoint set to an output
value, with an explicit extrapolation policy on each side of the range.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
import math

from framekit.core.errors import InvalidConfiguration

EasingFunction = Callable[[float], float]


class Extrapolate(str, Enum):
    """Behavior for inputs outside the breakpoint range.

    Attributes:
        CLAMP: Hold the nearest end breakpoint's output.
        EXTEND: Continue linearly with the slope of the end segment.
    """

    CLAMP = "clamp"
    EXTEND = "extend"


def linear(t: float) -> float:
    return t


def ease_in_cubic(t: float) -> float:
    return t * t * t


def ease_out_cubic(t: float) -> float:
    return 1 - (1 - t) ** 3


def ease_in_out_cubic(t: float) -> float:
    if t < 0.5:
        return 4 * t * t * t
    return 1 - (-2 * t + 2) ** 3 / 2


@dataclass(frozen=True)
class BreakpointSet:
    """Ordered (input, output) control points of an interpolation curve.

    Inputs must be strictly increasing. A single breakpoint is allowed and
    maps every input to its output.

    Attributes:
        inputs: Breakpoint inputs, strictly increasing.
        outputs: Breakpoint outputs, same length as inputs.

    Raises:
        InvalidConfiguration: If empty, mismatched in length, non-finite or
            not strictly increasing.

    Example:
        >>> ramp = BreakpointSet.from_pairs([(0, 0), (10, 100)])
        >>> ramp.map(5)
        50.0
    """

    inputs: tuple[float, ...]
    outputs: tuple[float, ...]

    def __post_init__(self) -> None:
        if len(self.inputs) == 0:
            raise InvalidConfiguration("breakpoint set requires at least one breakpoint")
        if len(self.inputs) != len(self.outputs):
            raise InvalidConfiguration(
                f"input and output ranges differ in length "
                f"({len(self.inputs)} != {len(self.outputs)})"
            )
        for x, y in zip(self.inputs, self.outputs, strict=True):
            if not (math.isfinite(x) and math.isfinite(y)):
                raise InvalidConfiguration(f"breakpoint ({x}, {y}) is not finite")
        for prev, cur in zip(self.inputs, self.inputs[1:]):
            if not cur > prev:
                raise InvalidConfiguration(
                    f"breakpoint inputs must be strictly increasing, got {prev} then {cur}"
                )

    @classmethod
    def from_ranges(
        cls, input_range: Sequence[float], output_range: Sequence[float]
    ) -> BreakpointSet:
        return cls(tuple(input_range), tuple(output_range))

    @classmethod
    def from_pairs(cls, pairs: Sequence[Sequence[float]]) -> BreakpointSet:
        for pair in pairs:
            if len(pair) != 2:
                raise InvalidConfiguration(
                    f"breakpoint must be an (input, output) pair, got {pair!r}"
                )
        return cls(tuple(p[0] for p in pairs), tuple(p[1] for p in pairs))

    def map(
        self,
        value: float,
        below: Extrapolate = Extrapolate.EXTEND,
        above: Extrapolate = Extrapolate.EXTEND,
        easing: EasingFunction | None = None,
    ) -> float:
        """Map value through the breakpoints.

        An input equal to a breakpoint input returns that breakpoint's output
        exactly. Inside the range, the bracketing segment is found by a single
        ordered scan and interpolated linearly; ``easing`` reshapes the
        normalized position within the segment. Outside the range, ``below`` /
        ``above`` pick between holding the end output and extending the end
        segment's slope (extrapolation is always linear).

        Args:
            value: Input value (typically a frame index).
            below: Policy for value < first input.
            above: Policy for value > last input.
            easing: Optional easing applied to the in-segment position.

        Returns:
            Output value.
        """
        xs = self.inputs
        ys = self.outputs
        last = len(xs) - 1

        if last == 0:
            return float(ys[0])

        if value < xs[0]:
            if below is Extrapolate.CLAMP:
                return float(ys[0])
            return _segment(value, xs[0], xs[1], ys[0], ys[1])

        if value > xs[last]:
            if above is Extrapolate.CLAMP:
                return float(ys[last])
            return _segment(value, xs[last - 1], xs[last], ys[last - 1], ys[last])

        for i in range(last):
            x0, x1 = xs[i], xs[i + 1]
            if value == x0:
                return float(ys[i])
            if value == x1:
                return float(ys[i + 1])
            if x0 < value < x1:
                t = (value - x0) / (x1 - x0)
                if easing is not None:
                    t = easing(t)
                return float(ys[i]) + (float(ys[i + 1]) - float(ys[i])) * t

        # NaN compares false everywhere and lands here
        return math.nan


def _segment(value: float, x0: float, x1: float, y0: float, y1: float) -> float:
    slope = (float(y1) - float(y0)) / (float(x1) - float(x0))
    return float(y0) + (value - x0) * slope


def interpolate(
    value: float,
    input_range: Sequence[float],
    output_range: Sequence[float],
    below: Extrapolate = Extrapolate.EXTEND,
    above: Extrapolate = Extrapolate.EXTEND,
    easing: EasingFunction | None = None,
) -> float:
    """Interpolate value across paired input/output ranges.

    Convenience wrapper that validates the ranges on every call. Use a
    prebuilt :class:`BreakpointSet` for breakpoints evaluated every frame.

    Example:
        >>> interpolate(10, [0, 10], [0, 100], Extrapolate.CLAMP, Extrapolate.CLAMP)
        100.0
        >>> interpolate(-5, [0, 10], [0, 100], Extrapolate.CLAMP, Extrapolate.CLAMP)
        0.0
    """
    return BreakpointSet.from_ranges(input_range, output_range).map(
        value, below=below, above=above, easing=easing
    )


def fade(
    value: float,
    input_range: Sequence[float],
    output_range: Sequence[float],
) -> float:
    """Interpolate with clamping on both ends."""
    return interpolate(value, input_range, output_range, Extrapolate.CLAMP, Extrapolate.CLAMP)
