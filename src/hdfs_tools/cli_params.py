"""Shared CLI parameter definitions.

The parameter functions return Typer option and argument objects that are
used inside ``Annotated`` signatures, so flag names and help text live in
one place:

    @app.command()
    def ls(long: Annotated[bool, long_option()] = False):
        pass

Flags follow POSIX ``ls``. ``-h`` selects human-readable sizes, so the
application moves help to ``--help`` only.
"""

from typing import Annotated, Optional

import typer


def paths_argument() -> Annotated[Optional[list[str]], typer.Argument]:
    """Remote paths argument."""
    return typer.Argument(
        help="HDFS paths or hdfs://namenode:port/path URLs. "
        "Defaults to your home directory."
    )


def long_option() -> Annotated[bool, typer.Option]:
    """Long listing option."""
    return typer.Option("--long", "-l", help="Use a long listing format.")


def all_option() -> Annotated[bool, typer.Option]:
    """Show hidden entries option."""
    return typer.Option(
        "--all", "-a", help="Do not ignore entries starting with '.'."
    )


def human_readable_option() -> Annotated[bool, typer.Option]:
    """Human-readable sizes option."""
    return typer.Option(
        "--human-readable",
        "-h",
        help="With -l, print sizes like 1.5K, 234M, 2.0G.",
    )


def json_option() -> Annotated[bool, typer.Option]:
    """JSON output option."""
    return typer.Option("--json", help="Print entries as a JSON array.")
