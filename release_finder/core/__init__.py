"""Core business logic for latest release detection."""

from .result_types import (
    FileRecord, SkippedArchive, InspectionResult, PipelineResult
)
from .locator import is_archive_file, locate_archives
from .inspector import inspect_archive
from .resolver import resolve_latest
from .report import format_header, format_row, write_report
from .pipeline import LatestReleasePipeline

__all__ = [
    'FileRecord',
    'SkippedArchive',
    'InspectionResult',
    'PipelineResult',
    'is_archive_file',
    'locate_archives',
    'inspect_archive',
    'resolve_latest',
    'format_header',
    'format_row',
    'write_report',
    'LatestReleasePipeline',
]
