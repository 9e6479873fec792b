import click


def _error_message(e: Exception) -> str:
    """Message text of e; KeyError's str() would add quotes."""
    return str(e.args[0]) if e.args else str(e)


class _MutuallyExclusiveOption(click.Option):
    """Click option that is mutually exclusive with another option."""

    def __init__(self, *args, **kwargs):
        self.mutually_exclusive = set(kwargs.pop("mutually_exclusive", []))
        super().__init__(*args, **kwargs)

    def handle_parse_result(self, ctx, opts, args):
        for name in self.mutually_exclusive:
            if name in opts and self.name in opts:
                raise click.UsageError(
                    f"--{self.name} and --{name} are mutually exclusive."
                )
        return super().handle_parse_result(ctx, opts, args)


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Show debug output.", cls=_MutuallyExclusiveOption, mutually_exclusive=["quiet"])
@click.option("--quiet", "-q", is_flag=True, default=False, help="Suppress status output.", cls=_MutuallyExclusiveOption, mutually_exclusive=["verbose"])
@click.option("--log-file", default=None, type=click.Path(), help="Write log entries to file.")
@click.pass_context
def cli(ctx, verbose, quiet, log_file):
    """Toy audio player: effect chains and a playback state machine."""
    from soundstate.ui import Console
    from soundstate.logging_config import setup_logging

    ctx.ensure_object(dict)
    ctx.obj["console"] = Console(quiet=quiet, verbose=verbose)
    ctx.obj["logger"] = setup_logging(verbose=verbose, quiet=quiet, log_file=log_file)


def _play(ctx, scenario):
    """Run a scenario on a fresh player wired to the process-wide engine."""
    from soundstate.engine import get_engine
    from soundstate.player import Player
    from soundstate.scenario import run_scenario
    from soundstate.ui import ScenarioSummary

    player = Player(get_engine())
    if scenario.effect_chain is not None:
        player.set_effect_chain(scenario.effect_chain, announce=False)
    summary = ScenarioSummary(scenario.name)
    final = run_scenario(player, scenario.steps, summary=summary)
    ctx.obj["logger"].info(
        "Scenario '%s' finished in state %s after %d steps",
        scenario.name, final.value, summary.total,
    )
    ctx.obj["console"].debug(summary.render())


@cli.command()
@click.pass_context
def demo(ctx):
    """Run the canonical play/effect/pause/play/stop/pause scenario."""
    from soundstate.config import load_scenario

    _play(ctx, load_scenario("demo"))


@cli.command()
@click.option("--preset", "-p", default=None, help="Load a scenario preset (e.g. demo, default, stress).")
@click.option("--preset-dir", multiple=True, type=click.Path(file_okay=False), help="Extra directory to search for presets. Repeatable.")
@click.option("--effects", "-e", default=None, help="Initial effect chain (e.g. 'echo,bass_boost').")
@click.option("--signal", "-s", "signals", multiple=True, help="Signal to send (play, pause, stop). Repeatable; overrides preset steps.")
@click.pass_context
def run(ctx, preset, preset_dir, effects, signals):
    """Run a scenario from a preset or from --signal flags."""
    from pathlib import Path
    from soundstate.config import build_scenario, load_scenario

    if not preset and not signals:
        raise click.UsageError("Provide --preset or at least one --signal.")

    console = ctx.obj["console"]
    overrides = {
        "effects": effects,
        "steps": list(signals) if signals else None,
    }
    try:
        if preset:
            scenario = load_scenario(
                preset, search_dirs=[Path(d) for d in preset_dir], overrides=overrides
            )
            console.info(f"Loaded preset '{preset}' ({len(scenario.steps)} steps)")
            if scenario.description:
                console.debug(f"  {scenario.description}")
        else:
            scenario = build_scenario("signals", overrides)
    except (FileNotFoundError, ValueError, KeyError) as e:
        raise click.ClickException(_error_message(e))
    _play(ctx, scenario)


@cli.command()
def effects():
    """List available effects."""
    from soundstate.effects import list_effects

    for name in list_effects():
        click.echo(name)


@cli.command()
@click.argument("spec", default="")
def chain(spec):
    """Print the description of an effect chain (e.g. 'echo,bass_boost')."""
    from soundstate.effects import evaluate, parse_chain

    try:
        result = parse_chain(spec)
    except KeyError as e:
        raise click.BadParameter(_error_message(e), param_hint="'SPEC'")
    click.echo(evaluate(result))


@cli.command()
def table():
    """Print the playback transition table."""
    from soundstate.player import TRANSITIONS

    for (state, signal), step in TRANSITIONS.items():
        click.echo(f"{state.value:<8} {signal.value:<6} -> {step.next_state.value:<8} {step.message}")


@cli.command()
@click.option("--preset-dir", multiple=True, type=click.Path(file_okay=False), help="Extra directory to search for presets. Repeatable.")
def presets(preset_dir):
    """List available scenario presets."""
    from pathlib import Path
    from soundstate.config import list_presets

    for name in list_presets(search_dirs=[Path(d) for d in preset_dir]):
        click.echo(name)


if __name__ == "__main__":
    cli()
