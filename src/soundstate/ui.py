"""UI module: console status output and scenario summaries."""

from __future__ import annotations

import sys
from collections import Counter
from dataclasses import dataclass, field


@dataclass
class ScenarioSummary:
    """Tracks what a scenario run did to the player."""

    name: str
    _signals: Counter = field(default_factory=Counter)
    _effect_changes: list[str] = field(default_factory=list)
    final_state: str | None = None

    def record_signal(self, signal: str) -> None:
        self._signals[signal] += 1

    def record_effect_change(self, description: str) -> None:
        self._effect_changes.append(description)

    def count(self, signal: str) -> int:
        return self._signals[signal]

    @property
    def signals(self) -> int:
        return sum(self._signals.values())

    @property
    def effect_changes(self) -> int:
        return len(self._effect_changes)

    @property
    def total(self) -> int:
        return self.signals + self.effect_changes

    def render(self) -> str:
        counts = ", ".join(f"{name}={n}" for name, n in sorted(self._signals.items()))
        return (
            f"{self.name}: "
            f"{self.signals} signals ({counts or 'none'}), "
            f"{self.effect_changes} effect changes, "
            f"final state {self.final_state or 'unknown'} "
            f"({self.total} steps)"
        )


class Console:
    """Output wrapper that respects quiet/verbose modes."""

    def __init__(self, quiet: bool = False, verbose: bool = False):
        self._quiet = quiet
        self._verbose = verbose

    def info(self, message: str, file=None) -> None:
        if self._quiet:
            return
        dest = file if file is not None else sys.stderr
        print(message, file=dest)

    def debug(self, message: str, file=None) -> None:
        if not self._verbose:
            return
        dest = file if file is not None else sys.stderr
        print(message, file=dest)
