"""Base protocol and chain node for sound effects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


BASE_DESCRIPTION = "Basic sound"
DELIMITER = " + "


@runtime_checkable
class SoundSource(Protocol):
    """Anything the player can evaluate into a sound description."""

    def evaluate(self) -> str:
        ...


@dataclass(frozen=True, repr=False, eq=False)
class EffectChain:
    """One node of an effect chain: a label wrapped around an optional inner chain.

    Only the base sound has no inner chain. Chains are built bottom-up and
    never mutated; wrapping returns a new node. Equality, hashing and repr
    walk the labels, so chains of any depth compare and print safely.
    """

    label: str = BASE_DESCRIPTION
    inner: EffectChain | None = None

    def __post_init__(self):
        if not isinstance(self.label, str) or not self.label:
            raise ValueError(f"label must be a non-empty string, got {self.label!r}")
        if self.inner is None and self.label != BASE_DESCRIPTION:
            raise ValueError(
                f"Only the base node may stand alone; wrap '{self.label}' around a chain"
            )

    def evaluate(self) -> str:
        """Return the description of this chain, base first."""
        return DELIMITER.join(self.labels)

    def wrap(self, label: str) -> EffectChain:
        """Return a new chain with this one as its inner chain."""
        return EffectChain(label=label, inner=self)

    @property
    def labels(self) -> list[str]:
        """Labels from the base node up to this one."""
        result = []
        node: EffectChain | None = self
        while node is not None:
            result.append(node.label)
            node = node.inner
        result.reverse()
        return result

    @property
    def depth(self) -> int:
        """Number of effect layers above the base."""
        return len(self.labels) - 1

    def __eq__(self, other):
        if not isinstance(other, EffectChain):
            return NotImplemented
        return self.labels == other.labels

    def __hash__(self):
        return hash(tuple(self.labels))

    def __repr__(self):
        labels = self.labels[1:]
        if len(labels) > 8:
            labels = labels[:3] + [f"... {len(labels) - 6} more ..."] + labels[-3:]
        return f"EffectChain(depth={self.depth}, effects={labels!r})"
