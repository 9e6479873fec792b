"""Scenario presets: YAML files naming an initial effect chain and a list of steps.

A preset looks like::

    description: Play, add echo, stop.
    effects: echo            # optional initial chain, set before the first step
    steps:
      - play
      - effects: echo,bass_boost
      - stop

User directories are searched before the presets bundled with the package.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

from soundstate.effects import parse_chain
from soundstate.effects.base import EffectChain
from soundstate.scenario import Step, parse_steps


_BUNDLED_DIR = Path(__file__).parent / "presets"


@dataclass(frozen=True)
class Scenario:
    """A validated preset, ready to run."""

    name: str
    steps: list[Step]
    effect_chain: EffectChain | None = None
    description: str = ""


def _search_path(search_dirs: list[Path] | None) -> list[Path]:
    return [Path(d) for d in search_dirs or []] + [_BUNDLED_DIR]


def load_preset(name: str, search_dirs: list[Path] | None = None) -> dict:
    """Return the raw mapping stored in <name>.yaml.

    Raises FileNotFoundError if no directory has the preset, ValueError if
    the file does not hold a mapping.
    """
    dirs = _search_path(search_dirs)
    for d in dirs:
        path = d / f"{name}.yaml"
        if path.is_file():
            data = yaml.safe_load(path.read_text()) or {}
            if not isinstance(data, dict):
                raise ValueError(f"Preset '{name}' must be a mapping, got {type(data).__name__}")
            return data
    raise FileNotFoundError(
        f"Preset '{name}' not found. Searched: {', '.join(str(d) for d in dirs)}"
    )


def merge_config(preset: dict, overrides: dict) -> dict:
    """Merge preset config with CLI overrides. None values in overrides are ignored."""
    return {**preset, **{k: v for k, v in overrides.items() if v is not None}}


def build_scenario(name: str, cfg: dict) -> Scenario:
    """Validate a preset mapping and parse its steps and initial chain.

    Raises ValueError for missing or malformed keys and KeyError for
    unknown effect names.
    """
    if cfg.get("steps") is None:
        raise ValueError(f"Scenario '{name}' has no steps.")
    effects = cfg.get("effects")
    if effects is not None and not isinstance(effects, str):
        raise ValueError(f"effects must be a string, got {effects!r}")
    return Scenario(
        name=name,
        steps=parse_steps(cfg["steps"]),
        effect_chain=parse_chain(effects) if effects else None,
        description=str(cfg.get("description") or ""),
    )


def load_scenario(
    name: str,
    search_dirs: list[Path] | None = None,
    overrides: dict | None = None,
) -> Scenario:
    """Load preset <name>, apply overrides, and build a Scenario from it."""
    cfg = merge_config(load_preset(name, search_dirs), overrides or {})
    return build_scenario(name, cfg)


def list_presets(search_dirs: list[Path] | None = None) -> list[str]:
    """List available preset names from bundled and user directories."""
    return sorted({
        f.stem
        for d in _search_path(search_dirs)
        if d.is_dir()
        for f in d.glob("*.yaml")
    })
