"""Command-line interface for hdfs-tools.

Commands:
    - ls: List HDFS files and directories

The namenode is taken from hdfs:// URLs in the paths, HADOOP_NAMENODE, or
the Hadoop configuration in HADOOP_CONF_DIR. Set HADOOP_KEYTAB (and
optionally HADOOP_KRB_CONF and HADOOP_SNAME) for Kerberized clusters.
"""

from typing import Annotated, Optional

import typer

from . import __version__
from .cli_params import (
    all_option,
    human_readable_option,
    json_option,
    long_option,
    paths_argument,
)
from .listing import list_paths
from .schemas import ListingOptions

app = typer.Typer(
    name="hdfs-tools",
    help="POSIX-style command-line tools for HDFS.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["--help"]},
)


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        typer.echo(f"hdfs-tools {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", "-v", callback=version_callback, help="Show version."),
    ] = None,
) -> None:
    """
    hdfs-tools: list HDFS entries like POSIX ls.
    """
    pass


@app.command("ls")
def ls_cmd(
    paths: Annotated[Optional[list[str]], paths_argument()] = None,
    long: Annotated[bool, long_option()] = False,
    show_all: Annotated[bool, all_option()] = False,
    human_readable: Annotated[bool, human_readable_option()] = False,
    json_output: Annotated[bool, json_option()] = False,
) -> None:
    """
    List files and directories.

    Explicit files are listed first, then the contents of each directory.

    Examples:
        hdfs-tools ls
        hdfs-tools ls -lah /data /logs
        hdfs-tools ls --json -l hdfs://namenode:9870/data
    """
    options = ListingOptions(
        long=long,
        show_all=show_all,
        human_readable=human_readable,
        json_output=json_output,
    )

    try:
        list_paths(paths or [], options)
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
