"""Click CLI entry point for vfdwrap."""

from __future__ import annotations

import logging

import click

from vfdwrap._version import __version__


@click.group()
@click.version_option(version=__version__, prog_name="vfdwrap")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def cli(debug: bool):
    """vfdwrap - toNative wrapping for vue-facing-decorator components.

    Find class-style components and wrap their compiled default export.
    """
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


# Import and register subcommands
from vfdwrap.cli.scan_cmd import scan  # noqa: E402
from vfdwrap.cli.transform_cmd import transform  # noqa: E402
from vfdwrap.cli.undo_cmd import undo  # noqa: E402

cli.add_command(scan)
cli.add_command(transform)
cli.add_command(undo)


if __name__ == "__main__":
    cli()
