"""Scripted scenarios: a list of signals and effect changes run against a Player."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from soundstate.effects import parse_chain
from soundstate.player import PlaybackState, Player, Signal
from soundstate.ui import ScenarioSummary

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Step:
    """One scripted action: press a signal, or swap in a new effect chain."""

    signal: Signal | None = None
    effects: str | None = None

    def __post_init__(self):
        if (self.signal is None) == (self.effects is None):
            raise ValueError("A step needs exactly one of signal or effects")

    def apply(self, player: Player) -> None:
        if self.signal is not None:
            player.press(self.signal)
        else:
            player.set_effect_chain(parse_chain(self.effects))


def parse_step(raw) -> Step:
    """Parse one step from a preset.

    Accepts a signal name ('play') or a mapping {'effects': 'echo,bass_boost'}.
    Effect names are checked here so a bad script fails before it starts.
    """
    if isinstance(raw, str):
        return Step(signal=Signal.from_string(raw))
    if isinstance(raw, dict) and set(raw) == {"effects"}:
        spec = raw["effects"]
        if spec is None:
            spec = ""
        if not isinstance(spec, str):
            raise ValueError(f"effects must be a string, got {spec!r}")
        parse_chain(spec)
        return Step(effects=spec)
    raise ValueError(
        f"Invalid step: {raw!r}. Use a signal name or a mapping like {{effects: echo}}."
    )


def parse_steps(raw) -> list[Step]:
    """Parse a list of raw steps. Raises ValueError on malformed input."""
    if not isinstance(raw, list):
        raise ValueError(f"steps must be a list, got {type(raw).__name__}")
    return [parse_step(item) for item in raw]


def run_scenario(
    player: Player,
    steps: list[Step],
    summary: ScenarioSummary | None = None,
) -> PlaybackState:
    """Apply steps in order and return the final playback state."""
    for i, step in enumerate(steps):
        logger.debug("Step %d: %s", i + 1, step)
        step.apply(player)
        if summary is not None:
            if step.signal is not None:
                summary.record_signal(step.signal.value)
            else:
                summary.record_effect_change(player.effect_chain.evaluate())
    if summary is not None:
        summary.final_state = player.state.value
    return player.state
