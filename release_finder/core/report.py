"""Fixed-width text report of the latest releases."""

import logging
from pathlib import Path

from ..config import WriteError
from ..utils import format_timestamp, truncate_name
from .result_types import FileRecord

logger = logging.getLogger(__name__)

NAME_WIDTH = 50
DATE_WIDTH = 20
SIZE_WIDTH = 10


def format_header() -> tuple[str, str]:
    """Return the header line and the dash divider of the same length."""
    header = f"{'Name':<{NAME_WIDTH}} {'Release date':<{DATE_WIDTH}} {'Size':<{SIZE_WIDTH}} Archive"
    return header, "-" * len(header)


def format_row(record: FileRecord) -> str:
    """Render one record as a report line (without newline)."""
    return (
        f"{truncate_name(record.name, NAME_WIDTH):<{NAME_WIDTH}} "
        f"{format_timestamp(record.mod_time):<{DATE_WIDTH}} "
        f"{record.size:<{SIZE_WIDTH}d} "
        f"{record.archive_name}"
    )


def write_report(output_path: Path, resolved: dict[str, FileRecord]) -> None:
    """Write the resolved records to output_path, one row per name.

    Rows are ordered by entry name. The file is truncated first; on failure
    whatever was written so far stays on disk.

    Raises:
        WriteError: If the file cannot be created or written
    """
    output_path = Path(output_path)
    header, divider = format_header()

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with output_path.open('w', encoding='utf-8') as out_f:
            out_f.write(header + "\n")
            out_f.write(divider + "\n")
            for name in sorted(resolved):
                out_f.write(format_row(resolved[name]) + "\n")
    except OSError as e:
        raise WriteError(f"Cannot write report '{output_path}': {e}") from e

    logger.info("Report written: %s (%d rows)", output_path, len(resolved))
