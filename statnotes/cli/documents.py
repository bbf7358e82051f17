# -*- coding: utf-8 -*-
# License: BSD-3-Clause
# Author: LKouadio <etanoyau@gmail.com>
import sys

import click

import statnotes as sn
from statnotes.exceptions import TutorialNotFoundError
from statnotes.tutorials import get_tutorial, list_tutorials, run_all, run_tutorial


@click.group(context_settings={'help_option_names': ('-h', '--help')})
def cli():
    """The statnotes command line interface."""
    pass


@cli.command()
@click.option('--show', is_flag=True, help='Show statnotes version and dependencies')
def version(show):
    """Display the installed version of statnotes."""
    if show:
        click.echo(sn.show_versions())
    else:
        click.echo(f"statnotes {sn.__version__}")


@cli.command(name='list')
@click.option('--tag', default=None, help='Only list the tutorials carrying this tag.')
def list_(tag):
    """List the available tutorials."""
    tutorials = list_tutorials(tag=tag)
    if not tutorials:
        click.echo(f"No tutorial tagged {tag!r}.")
        return
    width = max(len(t.name) for t in tutorials)
    title_width = max(len(t.title) for t in tutorials)
    for t in tutorials:
        click.echo(
            f"{t.name:<{width}}  {t.title:<{title_width}}  {', '.join(t.tags)}")


def _resolve(name):
    try:
        return get_tutorial(name)
    except TutorialNotFoundError as e:
        click.echo(f"Error: {e.args[0]}", err=True)
        sys.exit(2)


@cli.command()
@click.argument('name')
@click.option('--output-dir', '-o', type=click.Path(file_okay=False), default=None,
              help='Directory receiving the Markdown file and its figures.')
@click.option('--seed', type=click.IntRange(min=0), default=None,
              help='Seed of the simulations, splits and estimators.')
@click.option('--print', 'print_', is_flag=True,
              help='Echo the rendered Markdown to stdout.')
def run(name, output_dir, seed, print_):
    """Render the tutorial NAME."""
    _resolve(name)
    if output_dir is None and not print_:
        output_dir = sn.get_config().output_dir
    doc = run_tutorial(name, output_dir=output_dir, seed=seed)
    if print_:
        click.echo(doc.to_markdown())
    if output_dir is not None:
        click.echo(f"Saved {name} to {output_dir}", err=print_)


@cli.command(name='run-all')
@click.option('--output-dir', '-o', type=click.Path(file_okay=False), default=None,
              help='Directory receiving the Markdown files and their figures.')
@click.option('--jobs', '-j', type=int, default=1,
              help='Number of parallel workers; -1 uses every core.')
@click.option('--seed', type=click.IntRange(min=0), default=None,
              help='Seed of the simulations, splits and estimators.')
@click.option('--tag', default=None, help='Only render the tutorials carrying this tag.')
def run_all_(output_dir, jobs, seed, tag):
    """Render every tutorial."""
    names = [t.name for t in list_tutorials(tag=tag)]
    paths = run_all(output_dir=output_dir, names=names, n_jobs=jobs, seed=seed)
    for name, path in paths.items():
        click.echo(f"{name}: {path}")
