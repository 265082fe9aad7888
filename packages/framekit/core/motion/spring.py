"""Closed-form damped spring progress.

Models the unit step response of a damped harmonic oscillator starting at
rest at 0 and settling at 1:

    omega = sqrt(stiffness / mass)
    zeta  = damping / (2 * sqrt(stiffness * mass))

with time t = elapsed_frames / fps seconds. The response is evaluated in
closed form, so every call is independent of every other call and frames
can be evaluated in any order.

Output bound: underdamped configs (zeta < 1) overshoot by at most
exp(-zeta * pi / sqrt(1 - zeta**2)). Output is clamped to
[0, 1 + OVERSHOOT_BOUND], or to [0, 1] when ``overshoot_clamping`` is set.
Critically damped and overdamped configs (zeta >= 1) never overshoot.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field

from framekit.core.errors import ConvergenceAssumptionViolated, InvalidConfiguration
from framekit.core.utils.math import clamp

OVERSHOOT_BOUND = 0.25

# |zeta - 1| within this tolerance uses the critically damped form
CRITICAL_TOLERANCE = 1e-9

DEFAULT_SETTLE_TOLERANCE = 1e-3
MAX_SETTLE_FRAMES = 100_000


class SpringConfig(BaseModel):
    """Physical parameters of a spring animation.

    Attributes:
        damping: Damping coefficient (> 0).
        stiffness: Spring stiffness (> 0).
        mass: Mass (> 0).
        overshoot_clamping: Clamp output to [0, 1] instead of the overshoot band.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    damping: float = Field(default=10.0, gt=0.0, allow_inf_nan=False)
    stiffness: float = Field(default=100.0, gt=0.0, allow_inf_nan=False)
    mass: float = Field(default=1.0, gt=0.0, allow_inf_nan=False)
    overshoot_clamping: bool = False

    @property
    def natural_frequency(self) -> float:
        """Undamped angular frequency omega in rad/s."""
        return math.sqrt(self.stiffness / self.mass)

    @property
    def damping_ratio(self) -> float:
        """Dimensionless damping ratio zeta."""
        return self.damping / (2.0 * math.sqrt(self.stiffness * self.mass))

    @property
    def is_underdamped(self) -> bool:
        return self.damping_ratio < 1.0 - CRITICAL_TOLERANCE


def _validate_fps(fps: float) -> None:
    if not (math.isfinite(fps) and fps > 0):
        raise InvalidConfiguration(f"fps must be a positive finite number, got {fps}")


def _step_response(t: float, omega: float, zeta: float) -> float:
    if zeta < 1.0 - CRITICAL_TOLERANCE:
        omega_d = omega * math.sqrt(1.0 - zeta * zeta)
        envelope = math.exp(-zeta * omega * t)
        return 1.0 - envelope * (
            math.cos(omega_d * t) + (zeta * omega / omega_d) * math.sin(omega_d * t)
        )

    if zeta <= 1.0 + CRITICAL_TOLERANCE:
        wt = omega * t
        return 1.0 - math.exp(-wt) * (1.0 + wt)

    root = math.sqrt(zeta * zeta - 1.0)
    # zeta - root == 1 / (zeta + root), without cancellation for large zeta
    r1 = -omega / (zeta + root)
    r2 = -omega * (zeta + root)
    return 1.0 + (r2 * math.exp(r1 * t) - r1 * math.exp(r2 * t)) / (r1 - r2)


def spring_progress(elapsed_frames: float, config: SpringConfig, fps: float) -> float:
    """Normalized spring progress after ``elapsed_frames`` frames.

    Args:
        elapsed_frames: Frames since the spring started. Values <= 0 return 0.
        config: Spring physical parameters.
        fps: Frames per second of the timeline.

    Returns:
        Progress, 0 at the start and converging to 1.

    Raises:
        InvalidConfiguration: If fps is not positive.
        ConvergenceAssumptionViolated: If evaluation produces a non-finite value.

    Example:
        >>> cfg = SpringConfig(damping=15, stiffness=80, mass=0.5)
        >>> spring_progress(0, cfg, 30)
        0.0
    """
    _validate_fps(fps)

    if elapsed_frames <= 0:
        return 0.0
    if math.isinf(elapsed_frames):
        return 1.0

    t = elapsed_frames / fps
    value = _step_response(t, config.natural_frequency, config.damping_ratio)

    if not math.isfinite(value):
        raise ConvergenceAssumptionViolated(
            f"spring produced non-finite progress {value} at frame {elapsed_frames} "
            f"(damping={config.damping}, stiffness={config.stiffness}, mass={config.mass})"
        )

    upper = 1.0 if config.overshoot_clamping else 1.0 + OVERSHOOT_BOUND
    return clamp(value, 0.0, upper)


def settle_frames(
    config: SpringConfig,
    fps: float,
    tolerance: float = DEFAULT_SETTLE_TOLERANCE,
) -> int:
    """Frames after which progress stays within ``tolerance`` of 1.

    For zeta >= 1 the response is monotonic, so the first frame inside the
    tolerance is the answer. For zeta < 1 the decay envelope
    exp(-zeta * omega * t) / sqrt(1 - zeta**2) bounds the ringing, and the
    first frame where the envelope is inside the tolerance is returned.

    Args:
        config: Spring physical parameters.
        fps: Frames per second.
        tolerance: Allowed distance from 1.

    Returns:
        Frame count (elapsed frames) at which the spring is settled.

    Raises:
        InvalidConfiguration: If fps or tolerance is not positive.
        ConvergenceAssumptionViolated: If no settle point exists within
            MAX_SETTLE_FRAMES.
    """
    _validate_fps(fps)
    if not tolerance > 0:
        raise InvalidConfiguration(f"tolerance must be > 0, got {tolerance}")

    omega = config.natural_frequency
    zeta = config.damping_ratio

    if zeta < 1.0 - CRITICAL_TOLERANCE:
        scale = 1.0 / math.sqrt(1.0 - zeta * zeta)
        # Smallest t with scale * exp(-zeta * omega * t) < tolerance
        t = math.log(scale / tolerance) / (zeta * omega)
        frames = max(0, math.ceil(t * fps))
        while scale * math.exp(-zeta * omega * frames / fps) >= tolerance:
            frames += 1
        if frames > MAX_SETTLE_FRAMES:
            raise ConvergenceAssumptionViolated(
                f"spring does not settle within {MAX_SETTLE_FRAMES} frames"
            )
        return frames

    for frame in range(MAX_SETTLE_FRAMES + 1):
        if 1.0 - spring_progress(frame, config, fps) < tolerance:
            return frame

    raise ConvergenceAssumptionViolated(f"spring does not settle within {MAX_SETTLE_FRAMES} frames")
