"""Listing engine: classification, paging, filtering and rendering."""

from .aligner import ColumnAligner
from .arguments import ClassifiedArguments, classify_arguments
from .filters import filter_batch, should_show, synthetic_entries
from .formatter import (
    OutputFormatter,
    RenderState,
    format_bytes,
    format_date,
    format_mod_time,
    format_size,
)
from .orchestrator import ListingOrchestrator, list_paths
from .pager import DEFAULT_BATCH_SIZE, DirectoryPager

__all__ = [
    "ColumnAligner",
    "ClassifiedArguments",
    "classify_arguments",
    "filter_batch",
    "should_show",
    "synthetic_entries",
    "OutputFormatter",
    "RenderState",
    "format_bytes",
    "format_date",
    "format_mod_time",
    "format_size",
    "ListingOrchestrator",
    "list_paths",
    "DEFAULT_BATCH_SIZE",
    "DirectoryPager",
]
