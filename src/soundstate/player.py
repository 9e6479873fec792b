"""Playback state machine: states, signals, the transition table and the Player."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Protocol

from soundstate.effects import build_base
from soundstate.effects.base import SoundSource

logger = logging.getLogger(__name__)


class PlaybackState(enum.Enum):
    """Where the player currently is."""

    STOPPED = "stopped"
    PLAYING = "playing"
    PAUSED = "paused"


class Signal(enum.Enum):
    """The buttons a player accepts."""

    PLAY = "play"
    PAUSE = "pause"
    STOP = "stop"

    @classmethod
    def from_string(cls, value: str) -> Signal:
        """Parse a signal name such as 'play' or 'PAUSE'."""
        try:
            return cls(value.strip().lower())
        except (AttributeError, ValueError):
            raise ValueError(
                f"Invalid signal: '{value}'. "
                f"Use one of: {', '.join(s.value for s in cls)}."
            )


@dataclass(frozen=True)
class Transition:
    next_state: PlaybackState
    message: str


TRANSITIONS: dict[tuple[PlaybackState, Signal], Transition] = {
    (PlaybackState.STOPPED, Signal.PLAY): Transition(
        PlaybackState.PLAYING, "Starting playback."),
    (PlaybackState.STOPPED, Signal.PAUSE): Transition(
        PlaybackState.STOPPED, "Cannot pause. Player is stopped."),
    (PlaybackState.STOPPED, Signal.STOP): Transition(
        PlaybackState.STOPPED, "Already stopped."),
    (PlaybackState.PLAYING, Signal.PLAY): Transition(
        PlaybackState.PLAYING, "Already playing."),
    (PlaybackState.PLAYING, Signal.PAUSE): Transition(
        PlaybackState.PAUSED, "Paused."),
    (PlaybackState.PLAYING, Signal.STOP): Transition(
        PlaybackState.STOPPED, "Stopped."),
    (PlaybackState.PAUSED, Signal.PLAY): Transition(
        PlaybackState.PLAYING, "Resuming playback."),
    (PlaybackState.PAUSED, Signal.PAUSE): Transition(
        PlaybackState.PAUSED, "Already paused."),
    (PlaybackState.PAUSED, Signal.STOP): Transition(
        PlaybackState.STOPPED, "Stopped from pause."),
}


def transition(state: PlaybackState, signal: Signal) -> Transition:
    """Look up what happens when signal arrives in state."""
    return TRANSITIONS[(state, signal)]


class Sink(Protocol):
    def log(self, message: str) -> None:
        ...

    def play_sound(self, sound: str) -> None:
        ...


class Player:
    """Holds the current playback state and effect chain.

    Every message goes to the injected sink. Whenever a Play signal leaves
    the player in PLAYING, including when it was already playing, the
    current chain is evaluated and sent as a playback notification.
    """

    def __init__(self, engine: Sink, effect_chain: SoundSource | None = None):
        self._engine = engine
        self._state = PlaybackState.STOPPED
        self._effect_chain = effect_chain if effect_chain is not None else build_base()

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def effect_chain(self) -> SoundSource:
        return self._effect_chain

    def press(self, signal: Signal) -> PlaybackState:
        """Handle one signal and return the resulting state."""
        step = transition(self._state, signal)
        logger.debug(
            "%s + %s -> %s", self._state.value, signal.value, step.next_state.value
        )
        self._state = step.next_state
        self._engine.log(step.message)
        if signal is Signal.PLAY and self._state is PlaybackState.PLAYING:
            self._engine.play_sound(self._effect_chain.evaluate())
        return self._state

    def press_play(self) -> PlaybackState:
        return self.press(Signal.PLAY)

    def press_pause(self) -> PlaybackState:
        return self.press(Signal.PAUSE)

    def press_stop(self) -> PlaybackState:
        return self.press(Signal.STOP)

    def set_effect_chain(self, chain: SoundSource, announce: bool = True) -> None:
        """Replace the effect chain; used from the next Play on."""
        self._effect_chain = chain
        logger.debug("Effect chain replaced: %r", chain)
        if announce:
            self._engine.log("Effect added.")
