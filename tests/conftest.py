"""Shared pytest fixtures for framekit tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from framekit.core.config.models import VideoConfig
from framekit.core.effects.registry import EffectRegistry, build_default_registry
from framekit.core.motion.spring import SpringConfig

# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def project_root() -> Path:
    """Get project root directory."""
    return Path(__file__).parent.parent


# ============================================================================
# Video Fixtures
# ============================================================================


@pytest.fixture
def video() -> VideoConfig:
    """Default 1920x1080 @ 30 fps, 150 frames."""
    return VideoConfig()


@pytest.fixture
def small_video() -> VideoConfig:
    """Small 640x360 canvas @ 30 fps for quick layouts."""
    return VideoConfig(width=640, height=360, duration_in_frames=90)


# ============================================================================
# Spring Fixtures
# ============================================================================


@pytest.fixture
def critical_spring() -> SpringConfig:
    """Critically damped spring (zeta == 1)."""
    return SpringConfig(damping=20.0, stiffness=100.0, mass=1.0)


@pytest.fixture
def overdamped_spring() -> SpringConfig:
    """Overdamped spring (zeta == 2)."""
    return SpringConfig(damping=40.0, stiffness=100.0, mass=1.0)


@pytest.fixture
def underdamped_spring() -> SpringConfig:
    """Underdamped spring (zeta == 0.5)."""
    return SpringConfig(damping=10.0, stiffness=100.0, mass=1.0)


# ============================================================================
# Registry Fixtures
# ============================================================================


@pytest.fixture
def registry() -> EffectRegistry:
    """Registry with every built-in effect."""
    return build_default_registry()
