"""Rendering of listing records as plain names, aligned rows or JSON.

All three encodings share the same size and date rules, and one
``OutputFormatter`` is used for a whole invocation so that the JSON array
and its comma placement span every directory listed.
"""

import json
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime
from typing import Iterator, Optional, TextIO

import typer

from hdfs_tools.listing.aligner import ColumnAligner
from hdfs_tools.schemas import EntryRecord, ListingOptions

MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

_BINARY_UNITS = ("K", "M", "G", "T", "P", "E")


def format_bytes(size: int) -> str:
    """Format a byte count with binary magnitude suffixes.

    >>> format_bytes(0)
    '0B'
    >>> format_bytes(1536)
    '1.5K'
    >>> format_bytes(1048576)
    '1.0M'
    """
    if size < 1024:
        return f"{size}B"

    value = float(size)
    for unit in _BINARY_UNITS:
        value /= 1024
        if value < 1024:
            break
    return f"{value:.1f}{unit}"


def format_size(size: int, human_readable: bool) -> str:
    if human_readable:
        return format_bytes(size)
    return str(size)


def format_date(modified_at: datetime, now: datetime) -> tuple[str, str]:
    """Return the (date, time-or-year) columns for a modification time.

    The date is ``Mon _D``. Entries from the current year get ``HH:MM``,
    older or future ones get the year.
    """
    date = f"{MONTHS[modified_at.month - 1]} {modified_at.day:>2}"
    if modified_at.year == now.year:
        return date, f"{modified_at.hour:02d}:{modified_at.minute:02d}"
    return date, f"{modified_at.year:04d}"


def format_mod_time(modified_at: datetime) -> str:
    """Format a timestamp as ``YYYY-MM-DD HH:MM:SS[.frac] +zzzz TZ``."""
    text = modified_at.strftime("%Y-%m-%d %H:%M:%S")
    if modified_at.microsecond:
        text += f".{modified_at.microsecond:06d}".rstrip("0")
    return f"{text} {modified_at.strftime('%z %Z')}".rstrip()


def join_parent(parent: str, name: str) -> str:
    return f"{parent.rstrip('/')}/{name}"


@dataclass
class RenderState:
    """Mutable state for one invocation."""

    first_record: bool = True
    first_section: bool = True
    aligner: Optional[ColumnAligner] = None


class OutputFormatter:
    """Writes records in the encoding selected by the listing options."""

    def __init__(
        self,
        options: ListingOptions,
        stream: Optional[TextIO] = None,
        now: Optional[datetime] = None,
    ):
        self.options = options
        self.stream = stream or sys.stdout
        self.now = now
        self.state = RenderState()

    def write_line(self, text: str) -> None:
        typer.echo(text, file=self.stream)

    # JSON envelope

    def open_array(self) -> None:
        typer.echo("[", file=self.stream, nl=False)

    def close_array(self) -> None:
        typer.echo("\n]", file=self.stream)

    def _emit_json(self, record: dict) -> None:
        separator = "" if self.state.first_record else ","
        typer.echo(f"{separator}\n    {json.dumps(record)}", file=self.stream, nl=False)
        self.state.first_record = False

    # Aligned blocks

    def begin_block(self) -> None:
        if self.options.long and not self.options.json_output:
            self.state.aligner = ColumnAligner(self.stream)

    def end_block(self) -> None:
        if self.state.aligner is not None:
            self.state.aligner.flush()
            self.state.aligner = None

    @contextmanager
    def block(self) -> Iterator[None]:
        """Scope one aligned block; buffered rows are written on any exit."""
        self.begin_block()
        try:
            yield
        finally:
            self.end_block()

    def section_header(self, directory: str) -> None:
        """Write the separator and ``<dir>/:`` header of a directory section."""
        if self.options.json_output:
            return
        if not self.state.first_section:
            self.write_line("")
        self.write_line(f"{directory.rstrip('/')}/:")
        self.state.first_section = False

    # Records

    def render_short(self, name: str, parent: Optional[str] = None) -> None:
        """Render a name-only record.

        In JSON mode a record from a directory listing carries its parent
        path so each element locates itself.
        """
        if self.options.json_output:
            if parent is not None:
                name = join_parent(parent, name)
            self._emit_json({"name": name})
        else:
            self.write_line(name)
            self.state.first_record = False

    def render_long(self, display_name: str, parent: str, entry: EntryRecord) -> None:
        """Render a detailed record.

        Args:
            display_name: Name shown in the last tabular column
            parent: Directory the entry belongs to, used for the JSON name
            entry: Record to render
        """
        if self.options.json_output:
            self._emit_json(
                {
                    "mode": entry.permission_mode,
                    "owner": entry.owner,
                    "group": entry.group,
                    "size": entry.size_bytes,
                    "modTime": format_mod_time(entry.modified_at),
                    "name": join_parent(parent, entry.name),
                }
            )
            return

        now = self.now or datetime.now(entry.modified_at.tzinfo)
        date, time_or_year = format_date(entry.modified_at, now)
        size = format_size(entry.size_bytes, self.options.human_readable)
        cells = [
            f"{entry.permission_mode} ",
            f"{entry.owner} ",
            f" {entry.group} ",
            f" {size} ",
            f"{date} ",
            f"{time_or_year} ",
        ]

        if self.state.aligner is None:
            # Rows outside an explicit block are aligned on their own
            with ColumnAligner(self.stream) as aligner:
                aligner.add_row(cells, display_name)
        else:
            self.state.aligner.add_row(cells, display_name)
        self.state.first_record = False
