"""Sound effects registry: get_effect, list_effects, parse_chain."""

from __future__ import annotations

from typing import Callable

from soundstate.effects.base import EffectChain, SoundSource

EffectWrapper = Callable[[EffectChain], EffectChain]

_REGISTRY: dict[str, EffectWrapper] = {}


def register_effect(name: str, wrapper: EffectWrapper) -> None:
    """Register an effect wrapper by name."""
    _REGISTRY[name] = wrapper


def get_effect(name: str) -> EffectWrapper:
    """Return the named effect wrapper. Raises KeyError if unknown."""
    if name not in _REGISTRY:
        raise KeyError(f"Unknown effect: '{name}'. Available: {', '.join(_REGISTRY)}")
    return _REGISTRY[name]


def list_effects() -> list[str]:
    """Return sorted list of registered effect names."""
    return sorted(_REGISTRY.keys())


def evaluate(chain: SoundSource) -> str:
    """Return the sound description produced by chain."""
    return chain.evaluate()


def parse_chain(spec: str) -> EffectChain:
    """Parse an effect chain string into an EffectChain.

    Names are applied left to right on top of the base sound.
    Examples:
        '' -> Basic sound
        'echo' -> Basic sound + Echo
        'echo,bass_boost' -> Basic sound + Echo + Bass Boost
    """
    chain = build_base()
    if not spec or not spec.strip():
        return chain

    for part in spec.split(","):
        part = part.strip()
        if not part:
            continue
        chain = get_effect(part)(chain)
    return chain


# Register built-in effects
from soundstate.effects.builtin import (  # noqa: E402
    build_base,
    wrap_bass_boost,
    wrap_echo,
)

register_effect("echo", wrap_echo)
register_effect("bass_boost", wrap_bass_boost)
