"""Built-in sound effects."""

from __future__ import annotations

from soundstate.effects.base import BASE_DESCRIPTION, EffectChain

ECHO = "Echo"
BASS_BOOST = "Bass Boost"


def build_base() -> EffectChain:
    return EffectChain(label=BASE_DESCRIPTION)


def wrap_echo(inner: EffectChain) -> EffectChain:
    """Add an echo on top of inner."""
    return inner.wrap(ECHO)


def wrap_bass_boost(inner: EffectChain) -> EffectChain:
    """Add a bass boost on top of inner."""
    return inner.wrap(BASS_BOOST)
