#!/usr/bin/env python3
"""
WebWeaver CLI
-------------

Command-line interface for the publishing pipeline.

The input directory must sit below a `.content` anchor directory; its
position there gives the category lineage (and an optional `.author`
marker):

    weave build path/to/.content/blog
    weave build path/to/.content/.alice/blog -o public --feed public/rss.xml
    weave index path/to/.content/blog

On success the rendered index is printed on stdout; progress and errors
go to stderr.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from webweaver.core.cli import setup_logger
from webweaver.core.logging_manager import WeaverLogger, handle_cli_error
from webweaver.core.paths import CONTENT_ANCHOR, DEFAULT_LOG_DIR, DEFAULT_OUTPUT_DIR
from webweaver.pipeline.build import run_build, run_index
from webweaver.pipeline.feed import load_channel_settings
from webweaver.pipeline.layout import Configuration


@click.group()
@click.option(
    "--log-dir",
    type=click.Path(file_okay=False),
    default=str(DEFAULT_LOG_DIR),
    show_default=True,
    help="Directory for log files",
)
@click.option("-v", "--verbose", is_flag=True, help="Show tracebacks on errors")
@click.pass_context
def cli(ctx: click.Context, log_dir: str, verbose: bool) -> None:
    """WebWeaver Content Publishing Pipeline"""
    ctx.ensure_object(dict)
    ctx.obj["log_dir"] = Path(log_dir)
    ctx.obj["verbose"] = verbose
    ctx.obj["logger"] = setup_logger(Path(log_dir), "pipeline")


@cli.command()
@click.argument("input_dir", type=click.Path(file_okay=True, dir_okay=True))
@click.option(
    "-o",
    "--output",
    type=click.Path(file_okay=False),
    default=str(DEFAULT_OUTPUT_DIR),
    show_default=True,
    help="Root of the generated content tree",
)
@click.option(
    "--feed",
    "feed_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the RSS 2.0 feed to this file",
)
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="YAML file with feed channel settings",
)
@click.option(
    "--anchor",
    default=CONTENT_ANCHOR,
    show_default=True,
    help="Anchor directory the category lineage is read from",
)
@click.option("--dry-run", is_flag=True, help="List output files without writing them")
@click.pass_context
def build(
    ctx: click.Context,
    input_dir: str,
    output: str,
    feed_path: Optional[str],
    config_path: Optional[str],
    anchor: str,
    dry_run: bool,
) -> None:
    """
    Materialize INPUT_DIR into the output tree and print its index.
    """
    logger: WeaverLogger = ctx.obj["logger"]

    try:
        config = Configuration.from_input_path(Path(input_dir), Path(output), anchor)

        if dry_run:
            result = run_index(config, logger)
            click.echo("🧵 Building content (DRY RUN - no files will be written)...", err=True)
            click.echo(f"Category: {config.category or '(none)'}", err=True)
            click.echo(f"Output root: {config.output_root}", err=True)
            click.echo(f"Would write {result.stats.index_entries} files:", err=True)
            for entries in result.by_year.values():
                for meta in entries:
                    click.echo(f"  • {meta.output_file}", err=True)
            return

        settings = load_channel_settings(
            Path(config_path) if config_path else None, config.category
        )
        result = run_build(
            config,
            settings,
            feed_path=Path(feed_path) if feed_path else None,
            logger=logger,
        )
    except Exception as e:
        handle_cli_error(
            ctx,
            e,
            "build",
            additional_context={"input": input_dir, "output": output},
        )
        return

    click.echo(result.index, nl=False)
    click.echo("\n✅ Build complete:", err=True)
    click.echo(f"  Files discovered: {result.stats.files_discovered}", err=True)
    click.echo(f"  Files written: {result.stats.units_materialized}", err=True)
    if feed_path:
        click.echo(f"  Feed: {feed_path} ({result.stats.feed_items} items)", err=True)
    click.echo(f"  Duration: {result.stats.duration():.2f}s", err=True)


@cli.command()
@click.argument("input_dir", type=click.Path(file_okay=True, dir_okay=True))
@click.option(
    "--anchor",
    default=CONTENT_ANCHOR,
    show_default=True,
    help="Anchor directory the category lineage is read from",
)
@click.pass_context
def index(ctx: click.Context, input_dir: str, anchor: str) -> None:
    """
    Print the index of INPUT_DIR without writing any files.
    """
    logger: WeaverLogger = ctx.obj["logger"]

    try:
        config = Configuration.from_input_path(Path(input_dir), anchor=anchor)
        result = run_index(config, logger)
    except Exception as e:
        handle_cli_error(ctx, e, "index", additional_context={"input": input_dir})
        return

    click.echo(result.index, nl=False)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
