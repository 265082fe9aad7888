"""Effect registry.

Maps effect type names to effect classes and builds effects from raw option
mappings, so compositions can be described as data.
"""

from __future__ import annotations

import logging
from typing import Any

from framekit.core.config.loader import validate_options
from framekit.core.config.models import VideoConfig
from framekit.core.effects.kinetic_text import KineticTextEffect
from framekit.core.effects.module_assembly import ModuleAssemblyEffect
from framekit.core.effects.node_network import NodeNetworkEffect
from framekit.core.effects.particle_resolve import ParticleResolveEffect
from framekit.core.effects.protocol import Effect, FrameContext
from framekit.core.effects.terminal_typing import TerminalTypingEffect
from framekit.core.errors import InvalidConfiguration

logger = logging.getLogger(__name__)


class EffectRegistry:
    """Registry of effect classes keyed by ``effect_type``.

    Example:
        >>> registry = build_default_registry()
        >>> effect = registry.create("node_network", {"node_count": 6})
        >>> state = effect.frame_state(30)
    """

    def __init__(self) -> None:
        self._effects: dict[str, type[Effect]] = {}
        self._built: dict[tuple[str, str, str], Effect] = {}

    def register(self, effect_cls: type[Effect]) -> None:
        """Register an effect class.

        Args:
            effect_cls: Class implementing the Effect protocol.
        """
        effect_type = effect_cls.effect_type
        if effect_type in self._effects:
            logger.warning(
                "Overwriting effect type '%s' (old=%s, new=%s)",
                effect_type,
                self._effects[effect_type].__name__,
                effect_cls.__name__,
            )
        self._effects[effect_type] = effect_cls
        self._built = {k: v for k, v in self._built.items() if k[0] != effect_type}
        logger.debug("Registered effect '%s' for type '%s'", effect_cls.__name__, effect_type)

    def get(self, effect_type: str) -> type[Effect] | None:
        return self._effects.get(effect_type)

    def _resolve(self, effect_type: str) -> type[Effect]:
        effect_cls = self._effects.get(effect_type)
        if effect_cls is None:
            raise InvalidConfiguration(
                f"Unknown effect type '{effect_type}' "
                f"(registered: {', '.join(self.registered_types) or 'none'})"
            )
        return effect_cls

    def create(
        self,
        effect_type: str,
        options: dict[str, Any] | None = None,
        video: VideoConfig | None = None,
    ) -> Effect:
        """Validate options and build an effect.

        Args:
            effect_type: Registered effect type name.
            options: Raw options for the effect's config model.
            video: Video settings (defaults to VideoConfig()).

        Returns:
            Constructed effect, ready for frame evaluation.

        Raises:
            InvalidConfiguration: If the type is unknown or options are invalid.
        """
        effect_cls = self._resolve(effect_type)
        config = validate_options(effect_cls.config_model, options)
        return effect_cls(config, video or VideoConfig())

    def evaluate(
        self,
        effect_type: str,
        options: dict[str, Any] | None,
        ctx: FrameContext,
    ) -> dict[str, Any]:
        """Return an effect's frame state as plain data.

        Effects are built once per distinct (type, validated options, video)
        and reused, so static geometry such as a node layout is not rebuilt
        on every frame.
        """
        effect_cls = self._resolve(effect_type)
        config = validate_options(effect_cls.config_model, options)
        key = (effect_type, config.model_dump_json(), ctx.video.model_dump_json())
        effect = self._built.get(key)
        if effect is None:
            effect = effect_cls(config, ctx.video)
            self._built[key] = effect
        return effect.frame_state(ctx.frame).model_dump()

    @property
    def registered_types(self) -> list[str]:
        """List all registered effect types."""
        return sorted(self._effects.keys())

    def __contains__(self, effect_type: object) -> bool:
        return effect_type in self._effects

    def __len__(self) -> int:
        return len(self._effects)


def build_default_registry() -> EffectRegistry:
    """Registry with every built-in effect."""
    registry = EffectRegistry()
    for effect_cls in (
        NodeNetworkEffect,
        KineticTextEffect,
        ModuleAssemblyEffect,
        TerminalTypingEffect,
        ParticleResolveEffect,
    ):
        registry.register(effect_cls)
    return registry


__all__ = [
    "EffectRegistry",
    "build_default_registry",
]
