"""Utility functions for the latest release finder."""

from .formatters import format_timestamp, truncate_name
from .cli_helpers import print_error, print_warning, print_info

__all__ = [
    'format_timestamp',
    'truncate_name',
    'print_error',
    'print_warning',
    'print_info',
]
