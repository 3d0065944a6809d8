"""CLI: click-based command-line interface."""

from __future__ import annotations

import logging
import sys

import click
import yaml

import mdparse
from mdparse.config import load_config
from mdparse.core import MarkdownParser
from mdparse.exceptions import MdparseError
from mdparse.files import write_file
from mdparse.output import render_json, render_toc_text


@click.group()
@click.version_option(mdparse.__version__, prog_name="mdparse")
@click.option("-v", "--verbose", is_flag=True, default=False,
              help="Log debug messages to stderr.")
def main(verbose: bool) -> None:
    """mdparse: convert markdown to a node list, HTML or a TOC."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# ───────────────────────────────────────────────────────────────────
# convert
# ───────────────────────────────────────────────────────────────────

@main.command()
@click.argument("input_path", metavar="INPUT", type=click.Path(dir_okay=False))
@click.argument("output_path", metavar="[OUTPUT]", required=False,
                type=click.Path(dir_okay=False))
@click.option("--html", "as_html", is_flag=True, default=False,
              help="Output rendered HTML.")
@click.option("--toc", "as_toc", is_flag=True, default=False,
              help="Print the table of contents.")
@click.option("--gfm/--no-gfm", "gfm", default=None,
              help="Tables and strikethrough (default: on).")
@click.option("--breaks/--no-breaks", "breaks", default=None,
              help="Join paragraph lines with <br> (default: off).")
@click.option("--sanitize/--no-sanitize", "sanitize", default=None,
              help="HTML-escape inline text (default: on).")
@click.option("--linkify/--no-linkify", "linkify", default=None,
              help="Wrap bare URLs in links (default: on).")
@click.option("--config", "config_path", default=None, type=click.Path(),
              help="Config file to use instead of .mdparse.yml lookup.")
def convert(
    input_path: str,
    output_path: str | None,
    as_html: bool,
    as_toc: bool,
    gfm: bool | None,
    breaks: bool | None,
    sanitize: bool | None,
    linkify: bool | None,
    config_path: str | None,
) -> None:
    """Parse INPUT and write JSON nodes (default), HTML or a TOC."""
    try:
        cfg = load_config(source_path=input_path, config_path=config_path)

        # CLI flags override config values
        options = cfg.parse.merged(
            gfm=gfm, breaks=breaks, sanitize=sanitize, linkify=linkify,
        )
        if as_toc:
            fmt = "toc"
        elif as_html:
            fmt = "html"
        else:
            fmt = cfg.output.format

        parser = MarkdownParser(options)
        nodes = parser.parse_file(input_path)

        if fmt == "toc":
            click.echo(render_toc_text(parser.table_of_contents(nodes)))
            return

        if fmt == "html":
            output = parser.render(nodes)
        else:
            output = render_json(nodes, indent=cfg.output.indent)

        if output_path:
            write_file(output_path, output)
            click.echo(f"Output written to {output_path}", err=True)
        else:
            click.echo(output)
    except (MdparseError, OSError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)


# ───────────────────────────────────────────────────────────────────
# config
# ───────────────────────────────────────────────────────────────────

@main.command("config")
@click.argument("path", required=False, type=click.Path())
@click.option("--config", "config_path", default=None, type=click.Path(),
              help="Config file to show instead of .mdparse.yml lookup.")
def show_config(path: str | None, config_path: str | None) -> None:
    """Show the effective configuration for PATH."""
    try:
        cfg = load_config(source_path=path, config_path=config_path)
    except MdparseError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False).rstrip())
    click.echo(f"# project: {cfg.project_config_path or '-'}")
    click.echo(f"# user:    {cfg.user_config_path or '-'}")
