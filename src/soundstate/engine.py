"""Audio engine: the single process-wide sink for playback text."""

from __future__ import annotations

import logging
from typing import Callable

import click

logger = logging.getLogger(__name__)

PLAYING_PREFIX = "[Playing sound]: "


class AudioEngine:
    """Makes player messages and playback notifications observable.

    By default every line goes to standard output through click.echo.
    """

    def __init__(self, echo: Callable[[str], None] | None = None):
        self._echo = echo if echo is not None else click.echo
        logger.info("Audio engine initialized")

    def log(self, message: str) -> None:
        self._echo(message)

    def play_sound(self, sound: str) -> None:
        logger.debug("Playing: %s", sound)
        self.log(f"{PLAYING_PREFIX}{sound}")


_instance: AudioEngine | None = None


def get_engine() -> AudioEngine:
    """Return the process-wide engine, creating it on first use."""
    global _instance
    if _instance is None:
        _instance = AudioEngine()
    return _instance


def reset_engine() -> None:
    """Forget the process-wide engine so the next get_engine() builds a new one."""
    global _instance
    _instance = None
