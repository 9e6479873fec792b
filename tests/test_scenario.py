"""Tests for scripted scenarios."""

import pytest

from soundstate.config import load_preset
from soundstate.player import PlaybackState, Player, Signal
from soundstate.scenario import Step, parse_step, parse_steps, run_scenario
from soundstate.ui import ScenarioSummary


class ListSink:
    def __init__(self):
        self.lines = []

    def log(self, message):
        self.lines.append(message)

    def play_sound(self, sound):
        self.lines.append(f"[Playing sound]: {sound}")


CANONICAL_OUTPUT = [
    "Starting playback.",
    "[Playing sound]: Basic sound",
    "Effect added.",
    "Paused.",
    "Resuming playback.",
    "[Playing sound]: Basic sound + Echo + Bass Boost",
    "Stopped.",
    "Cannot pause. Player is stopped.",
]


def test_parse_signal_step():
    assert parse_step("play") == Step(signal=Signal.PLAY)


def test_parse_effects_step():
    assert parse_step({"effects": "echo"}) == Step(effects="echo")


def test_parse_empty_effects_step():
    assert parse_step({"effects": None}) == Step(effects="")


@pytest.mark.parametrize("raw", [
    "rewind",
    {"effect": "echo"},
    {"effects": "echo", "extra": 1},
    {"effects": 3},
    42,
])
def test_parse_invalid_step(raw):
    with pytest.raises(ValueError):
        parse_step(raw)


def test_parse_unknown_effect_fails_early():
    with pytest.raises(KeyError):
        parse_step({"effects": "flanger"})


def test_parse_steps_requires_list():
    with pytest.raises(ValueError, match="list"):
        parse_steps("play")


def test_step_needs_exactly_one_action():
    with pytest.raises(ValueError):
        Step()
    with pytest.raises(ValueError):
        Step(signal=Signal.PLAY, effects="echo")


def test_demo_preset_reproduces_canonical_output():
    sink = ListSink()
    player = Player(sink)
    steps = parse_steps(load_preset("demo")["steps"])
    final = run_scenario(player, steps)
    assert final is PlaybackState.STOPPED
    assert sink.lines == CANONICAL_OUTPUT


def test_run_scenario_records_summary():
    sink = ListSink()
    summary = ScenarioSummary("demo")
    steps = parse_steps(["play", {"effects": "echo"}, "play", "stop"])
    run_scenario(Player(sink), steps, summary=summary)
    assert summary.count("play") == 2
    assert summary.count("stop") == 1
    assert summary.effect_changes == 1
    assert summary.final_state == "stopped"


def test_empty_scenario_leaves_player_stopped():
    sink = ListSink()
    assert run_scenario(Player(sink), []) is PlaybackState.STOPPED
    assert sink.lines == []
