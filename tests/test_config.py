"""Tests for the scenario preset system."""

import pytest
import yaml


def test_load_bundled_preset():
    """Loading a bundled preset by name returns a dict with steps."""
    from soundstate.config import load_preset

    preset = load_preset("default")
    assert isinstance(preset, dict)
    assert isinstance(preset["steps"], list)


def test_demo_preset_steps():
    from soundstate.config import load_preset

    preset = load_preset("demo")
    assert preset["steps"] == [
        "play", {"effects": "echo,bass_boost"}, "pause", "play", "stop", "pause",
    ]


def test_load_missing_preset_raises():
    """Loading a nonexistent preset raises FileNotFoundError."""
    from soundstate.config import load_preset

    with pytest.raises(FileNotFoundError, match="nonexistent"):
        load_preset("nonexistent")


def test_load_non_mapping_preset_raises(tmp_path):
    from soundstate.config import load_preset

    (tmp_path / "broken.yaml").write_text("- play\n- stop\n")
    with pytest.raises(ValueError, match="mapping"):
        load_preset("broken", search_dirs=[tmp_path])


def test_merge_preset_with_overrides():
    """CLI overrides take precedence over preset values."""
    from soundstate.config import merge_config

    preset = {"effects": "echo", "steps": ["play"]}
    overrides = {"effects": "bass_boost"}
    result = merge_config(preset, overrides)
    assert result["effects"] == "bass_boost"
    assert result["steps"] == ["play"]


def test_merge_config_ignores_none_overrides():
    """None values in overrides don't replace preset values."""
    from soundstate.config import merge_config

    preset = {"effects": "echo", "steps": ["play"]}
    result = merge_config(preset, {"effects": None, "steps": None})
    assert result == preset


def test_user_preset_shadows_bundled(tmp_path):
    """User directories are searched before bundled presets."""
    from soundstate.config import load_preset

    (tmp_path / "demo.yaml").write_text(yaml.dump({"steps": ["stop"]}))
    preset = load_preset("demo", search_dirs=[tmp_path])
    assert preset["steps"] == ["stop"]


def test_list_presets_includes_bundled_and_user(tmp_path):
    from soundstate.config import list_presets

    (tmp_path / "mine.yaml").write_text(yaml.dump({"steps": ["play"]}))
    names = list_presets(search_dirs=[tmp_path])
    assert {"default", "demo", "stress", "mine"} <= set(names)
    assert names == sorted(names)


def test_load_scenario_parses_steps_and_chain():
    from soundstate.config import load_scenario
    from soundstate.player import Signal

    scenario = load_scenario("stress")
    assert scenario.name == "stress"
    assert scenario.steps[0].signal is Signal.STOP
    assert scenario.effect_chain.evaluate() == "Basic sound + Echo"
    assert scenario.description


def test_load_scenario_without_initial_chain():
    from soundstate.config import load_scenario

    assert load_scenario("demo").effect_chain is None
    assert load_scenario("default").effect_chain is None


def test_load_scenario_overrides_win():
    from soundstate.config import load_scenario
    from soundstate.player import Signal

    scenario = load_scenario("demo", overrides={"steps": ["stop"], "effects": "bass_boost"})
    assert [step.signal for step in scenario.steps] == [Signal.STOP]
    assert scenario.effect_chain.evaluate() == "Basic sound + Bass Boost"


def test_build_scenario_requires_steps():
    from soundstate.config import build_scenario

    with pytest.raises(ValueError, match="no steps"):
        build_scenario("empty", {"description": "nothing"})


def test_build_scenario_rejects_bad_effects():
    from soundstate.config import build_scenario

    with pytest.raises(ValueError, match="effects"):
        build_scenario("bad", {"steps": ["play"], "effects": ["echo"]})
    with pytest.raises(KeyError):
        build_scenario("bad", {"steps": ["play"], "effects": "flanger"})


def test_build_scenario_rejects_bad_steps():
    from soundstate.config import build_scenario

    with pytest.raises(ValueError, match="rewind"):
        build_scenario("bad", {"steps": ["play", "rewind"]})
