"""Frame-evaluated visual effects."""

from framekit.core.effects.kinetic_text import KineticTextConfig, KineticTextEffect
from framekit.core.effects.module_assembly import (
    ModuleAssemblyConfig,
    ModuleAssemblyEffect,
    ModuleSpec,
)
from framekit.core.effects.node_network import NodeNetworkConfig, NodeNetworkEffect
from framekit.core.effects.palette import ColorScheme, node_color
from framekit.core.effects.particle_resolve import ParticleResolveConfig, ParticleResolveEffect
from framekit.core.effects.protocol import Effect, FrameContext
from framekit.core.effects.registry import EffectRegistry, build_default_registry
from framekit.core.effects.terminal_typing import TerminalTypingConfig, TerminalTypingEffect

__all__ = [
    "ColorScheme",
    "Effect",
    "EffectRegistry",
    "FrameContext",
    "KineticTextConfig",
    "KineticTextEffect",
    "ModuleAssemblyConfig",
    "ModuleAssemblyEffect",
    "ModuleSpec",
    "NodeNetworkConfig",
    "NodeNetworkEffect",
    "ParticleResolveConfig",
    "ParticleResolveEffect",
    "TerminalTypingConfig",
    "TerminalTypingEffect",
    "build_default_registry",
    "node_color",
]
