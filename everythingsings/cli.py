"""Command-line interface for the profile generator.

This module defines the CLI using the Click framework.

Commands:
- generate: Render the profile page and copy static assets into the output directory.

Running without a command prints usage to stderr and exits with status 1.
"""

from __future__ import annotations

from pathlib import Path

import click

from . import __version__


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="everythingsings")
@click.pass_context
def cli(ctx: click.Context):
    """EverythingSings static profile site generator."""
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help(), err=True)
        ctx.exit(1)


@cli.command()
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    required=False,
    help="Directory to write the site to (overrides everythingsings.yaml)",
)
@click.option("--clean", is_flag=True, help="Empty the output directory first")
def generate(output_dir: Path | None, clean: bool):
    """Generate the static site."""
    project_root = Path.cwd()
    from .build import BuildError, build_site
    from .config import ConfigError, load_config
    from .content import ContentError

    try:
        config = load_config(project_root)
        result = build_site(
            project_root,
            config=config,
            output_dir_override=output_dir,
            clean_output=clean,
        )
    except (ConfigError, ContentError) as exc:
        click.echo(click.style("Invalid site content:", fg="red", bold=True), err=True)
        click.echo(click.style(f"  Error: {exc}", fg="white"), err=True)
        raise SystemExit(1) from None
    except BuildError as exc:
        click.echo(click.style("Build failed:", fg="red", bold=True), err=True)
        click.echo(click.style(f"  Path: {exc.path}", fg="yellow"), err=True)
        click.echo(click.style(f"  Error: {exc.message}", fg="white"), err=True)
        raise SystemExit(1) from None

    click.echo(f"Generated: {result.index_path}")
    if result.assets:
        click.echo(f"Copied {len(result.assets)} static assets to {result.output_dir}")
    for path in result.generated:
        click.echo(f"Generated: {path}")
    click.echo(f"\nStatic site generated at: {result.output_dir}")


def main():
    """Entry point for the CLI application."""
    cli()
