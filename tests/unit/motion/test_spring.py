"""Tests for closed-form spring progress."""

from __future__ import annotations

import math

from pydantic import ValidationError
import pytest

from framekit.core.errors import ConvergenceAssumptionViolated, InvalidConfiguration
from framekit.core.motion.spring import (
    OVERSHOOT_BOUND,
    SpringConfig,
    _step_response,
    settle_frames,
    spring_progress,
)

FPS = 30


class TestSpringConfig:
    """Tests for SpringConfig validation and derived values."""

    def test_defaults(self) -> None:
        cfg = SpringConfig()
        assert (cfg.damping, cfg.stiffness, cfg.mass) == (10.0, 100.0, 1.0)
        assert cfg.overshoot_clamping is False

    @pytest.mark.parametrize("field", ["damping", "stiffness", "mass"])
    @pytest.mark.parametrize("value", [0.0, -1.0, math.inf, math.nan])
    def test_rejects_non_positive_or_non_finite(self, field: str, value: float) -> None:
        with pytest.raises(ValidationError):
            SpringConfig(**{field: value})

    def test_rejects_unknown_fields(self) -> None:
        with pytest.raises(ValidationError):
            SpringConfig(bounciness=2.0)  # type: ignore[call-arg]

    def test_damping_ratio(self, critical_spring, overdamped_spring, underdamped_spring) -> None:
        assert critical_spring.damping_ratio == pytest.approx(1.0)
        assert overdamped_spring.damping_ratio == pytest.approx(2.0)
        assert underdamped_spring.damping_ratio == pytest.approx(0.5)
        assert underdamped_spring.is_underdamped
        assert not critical_spring.is_underdamped

    def test_natural_frequency(self) -> None:
        assert SpringConfig(stiffness=80, mass=0.5).natural_frequency == pytest.approx(math.sqrt(160))


class TestSpringProgress:
    """Tests for spring_progress."""

    @pytest.mark.parametrize("frames", [0, -1, -100])
    def test_zero_at_start(self, frames: int, underdamped_spring) -> None:
        """progress(<= 0) is exactly 0."""
        assert spring_progress(frames, underdamped_spring, FPS) == 0.0

    def test_infinite_time_is_one(self, critical_spring) -> None:
        assert spring_progress(math.inf, critical_spring, FPS) == 1.0

    @pytest.mark.parametrize(
        "cfg",
        [
            SpringConfig(damping=20, stiffness=100, mass=1),
            SpringConfig(damping=40, stiffness=100, mass=1),
            SpringConfig(damping=15, stiffness=80, mass=0.5),
            SpringConfig(damping=14, stiffness=40, mass=1.2),
            SpringConfig(damping=20, stiffness=100, mass=0.8),
            SpringConfig(damping=200, stiffness=1, mass=1),
        ],
    )
    def test_monotone_for_zeta_at_least_one(self, cfg: SpringConfig) -> None:
        """Critically and overdamped springs never decrease and stay in [0, 1]."""
        assert cfg.damping_ratio >= 1.0 - 1e-9
        values = [spring_progress(f, cfg, FPS) for f in range(0, 600)]
        assert all(b >= a for a, b in zip(values, values[1:]))
        assert all(0.0 <= v <= 1.0 for v in values)

    def test_converges_to_one(self, critical_spring) -> None:
        assert spring_progress(300, critical_spring, FPS) == pytest.approx(1.0, abs=1e-6)

    def test_underdamped_overshoots_within_bound(self, underdamped_spring) -> None:
        values = [spring_progress(f, underdamped_spring, FPS) for f in range(0, 120)]
        peak = max(values)
        expected = 1.0 + math.exp(-0.5 * math.pi / math.sqrt(1 - 0.25))
        assert peak > 1.0
        assert peak <= expected + 1e-9
        assert peak <= 1.0 + OVERSHOOT_BOUND

    def test_large_overshoot_is_clamped(self) -> None:
        """Lightly damped ringing is clamped to the overshoot band."""
        cfg = SpringConfig(damping=1, stiffness=100, mass=1)
        values = [spring_progress(f, cfg, FPS) for f in range(0, 300)]
        assert max(values) == 1.0 + OVERSHOOT_BOUND
        assert min(values) >= 0.0

    def test_overshoot_clamping(self, underdamped_spring) -> None:
        cfg = underdamped_spring.model_copy(update={"overshoot_clamping": True})
        values = [spring_progress(f, cfg, FPS) for f in range(0, 120)]
        assert max(values) == 1.0

    def test_fractional_frames(self, critical_spring) -> None:
        """Fractional elapsed frames interpolate between integer frames."""
        a = spring_progress(10, critical_spring, FPS)
        b = spring_progress(10.5, critical_spring, FPS)
        c = spring_progress(11, critical_spring, FPS)
        assert a < b < c

    def test_fps_scales_time(self, critical_spring) -> None:
        """Same wall time at different fps gives the same progress."""
        assert spring_progress(30, critical_spring, 30) == pytest.approx(
            spring_progress(60, critical_spring, 60)
        )

    @pytest.mark.parametrize("fps", [0, -30, math.inf, math.nan])
    def test_rejects_bad_fps(self, fps: float, critical_spring) -> None:
        with pytest.raises(InvalidConfiguration, match="fps"):
            spring_progress(10, critical_spring, fps)

    def test_order_independent(self, underdamped_spring) -> None:
        """Evaluating frames backwards gives the same values as forwards."""
        forward = [spring_progress(f, underdamped_spring, FPS) for f in range(60)]
        backward = [spring_progress(f, underdamped_spring, FPS) for f in reversed(range(60))]
        assert forward == list(reversed(backward))

    def test_step_response_regimes_agree_near_critical(self) -> None:
        """The three closed forms meet continuously around zeta == 1."""
        omega, t = 10.0, 0.2
        critical = _step_response(t, omega, 1.0)
        assert _step_response(t, omega, 1.0 - 1e-6) == pytest.approx(critical, abs=1e-5)
        assert _step_response(t, omega, 1.0 + 1e-6) == pytest.approx(critical, abs=1e-5)

    def test_non_finite_result_raises(self, critical_spring, monkeypatch) -> None:
        """A non-finite evaluation is reported, not clamped away."""
        import framekit.core.motion.spring as spring_module

        monkeypatch.setattr(spring_module, "_step_response", lambda t, omega, zeta: math.nan)
        with pytest.raises(ConvergenceAssumptionViolated):
            spring_module.spring_progress(10, critical_spring, FPS)


class TestSettleFrames:
    """Tests for settle_frames."""

    @pytest.mark.parametrize(
        "cfg",
        [
            SpringConfig(damping=20, stiffness=100, mass=1),
            SpringConfig(damping=40, stiffness=100, mass=1),
            SpringConfig(damping=15, stiffness=80, mass=0.5),
            SpringConfig(damping=10, stiffness=100, mass=1),
        ],
    )
    def test_stays_settled_after(self, cfg: SpringConfig) -> None:
        """From the settle frame on, progress is within tolerance of 1."""
        frames = settle_frames(cfg, FPS)
        assert frames > 0
        for f in range(frames, frames + 300):
            assert abs(1.0 - spring_progress(f, cfg, FPS)) < 1e-3

    def test_monotone_settle_is_first_crossing(self, critical_spring) -> None:
        frames = settle_frames(critical_spring, FPS)
        assert 1.0 - spring_progress(frames - 1, critical_spring, FPS) >= 1e-3

    def test_stiffer_settles_sooner(self) -> None:
        soft = SpringConfig(damping=2 * math.sqrt(50), stiffness=50, mass=1)
        stiff = SpringConfig(damping=2 * math.sqrt(400), stiffness=400, mass=1)
        assert settle_frames(stiff, FPS) < settle_frames(soft, FPS)

    def test_rejects_bad_tolerance(self, critical_spring) -> None:
        with pytest.raises(InvalidConfiguration, match="tolerance"):
            settle_frames(critical_spring, FPS, tolerance=0)

    def test_unreachable_settle_raises(self) -> None:
        """A spring too slow to settle within the frame cap is reported."""
        cfg = SpringConfig(damping=1000, stiffness=0.001, mass=1)
        with pytest.raises(ConvergenceAssumptionViolated):
            settle_frames(cfg, FPS)
