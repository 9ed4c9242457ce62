"""CLI entry point for sampling episode names."""

import json
import logging
import random
from pathlib import Path

import click

from .constants.config import ALL_SELECTOR, DEFAULT_LANGUAGE
from .errors import EpisodeNamesError


seed_option = click.option(
    "--seed",
    type=int,
    default=None,
    help="Seed the random source for reproducible output"
)


def selection_options(f):
    """Options shared by every command that builds a selection."""
    f = click.option(
        "--season", "-s",
        multiple=True,
        help="Season to select (accepted, currently not used for filtering)"
    )(f)
    f = click.option(
        "--episode", "-e",
        multiple=True,
        help="Episode identifier to select (can specify multiple, default: all)"
    )(f)
    f = click.option(
        "--language", "-l",
        default=DEFAULT_LANGUAGE,
        show_default=True,
        help="Language tag of the dataset to load"
    )(f)
    return f


def build_episodes(
    ctx: click.Context,
    language: str,
    episode: tuple[str, ...],
    season: tuple[str, ...],
    seed: int | None = None,
):
    """Construct an Episodes selection from CLI options."""
    from .episodes import Episodes

    try:
        return Episodes(
            episode=list(episode) if episode else ALL_SELECTOR,
            season=list(season) if season else ALL_SELECTOR,
            language=language,
            data_dir=ctx.obj["data_dir"],
            rng=random.Random(seed) if seed is not None else None,
        )
    except EpisodeNamesError as e:
        raise click.ClickException(str(e)) from e


def echo_names(names: list[str], as_json: bool) -> None:
    if as_json:
        click.echo(json.dumps(names, ensure_ascii=False))
    else:
        for name in names:
            click.echo(name)


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Directory holding <language>-episodes.json files (default: bundled data)"
)
@click.option("--verbose", "-v", is_flag=True, help="Log dataset loading to stderr")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None, verbose: bool):
    """Episode names - pick random names from episode datasets."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    ctx.ensure_object(dict)
    ctx.obj["data_dir"] = data_dir


@cli.command("random")
@selection_options
@seed_option
@click.pass_context
def random_name(
    ctx: click.Context,
    language: str,
    episode: tuple[str, ...],
    season: tuple[str, ...],
    seed: int | None,
):
    """Print one random name.

    Examples:

        episode-names random

        episode-names random -l en -e 1 -e 2
    """
    episodes = build_episodes(ctx, language, episode, season, seed)
    try:
        click.echo(episodes.random())
    except EpisodeNamesError as e:
        raise click.ClickException(str(e)) from e


@cli.command("all")
@selection_options
@click.option("--json", "as_json", is_flag=True, help="Print a JSON array instead of one name per line")
@click.pass_context
def all_names(
    ctx: click.Context,
    language: str,
    episode: tuple[str, ...],
    season: tuple[str, ...],
    as_json: bool,
):
    """Print every selected name in first-seen order.

    Examples:

        episode-names all -l en

        episode-names all -e 9 --json
    """
    episodes = build_episodes(ctx, language, episode, season)
    echo_names(episodes.all(), as_json)


@cli.command("get")
@click.argument("count", type=int)
@selection_options
@seed_option
@click.option("--json", "as_json", is_flag=True, help="Print a JSON array instead of one name per line")
@click.pass_context
def get_names(
    ctx: click.Context,
    count: int,
    language: str,
    episode: tuple[str, ...],
    season: tuple[str, ...],
    seed: int | None,
    as_json: bool,
):
    """Print COUNT distinct random names.

    Examples:

        episode-names get 3

        episode-names get 2 -l en -e 24 --seed 42
    """
    episodes = build_episodes(ctx, language, episode, season, seed)
    try:
        names = episodes.get(count)
    except EpisodeNamesError as e:
        raise click.ClickException(str(e)) from e
    echo_names(names, as_json)


@cli.command("languages")
@click.pass_context
def languages(ctx: click.Context):
    """List the language tags that have a dataset."""
    from .utils.datasets import get_available_languages

    tags = get_available_languages(ctx.obj["data_dir"])
    if not tags:
        click.echo("No datasets found", err=True)
        return
    for tag in tags:
        click.echo(tag)
