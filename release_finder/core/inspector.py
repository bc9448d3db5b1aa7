"""ZIP archive inventory."""

import logging
import zipfile
from datetime import datetime
from pathlib import Path

from ..config import OpenError
from .result_types import FileRecord

logger = logging.getLogger(__name__)


def inspect_archive(archive_path: Path) -> list[FileRecord]:
    """List the file entries of a ZIP archive as FileRecords.

    Directory entries are skipped. Entry timestamps stored inside the archive
    are ignored: every record gets the archive's own mtime.

    Args:
        archive_path: Path to ZIP archive

    Returns:
        Records in central directory order

    Raises:
        OpenError: If the archive cannot be stat'ed, opened or parsed
    """
    archive_path = Path(archive_path)
    try:
        mod_time = datetime.fromtimestamp(archive_path.stat().st_mtime)
    except OSError as e:
        raise OpenError(archive_path, e.strerror or str(e)) from e

    records = []
    try:
        with zipfile.ZipFile(archive_path, 'r') as z:
            for info in z.infolist():
                if info.is_dir() or not info.filename:
                    continue

                records.append(FileRecord(
                    name=info.filename,
                    mod_time=mod_time,
                    archive_path=archive_path,
                    archive_name=archive_path.name,
                    size=info.file_size,
                ))
    except zipfile.BadZipFile as e:
        raise OpenError(archive_path, str(e)) from e
    except OSError as e:
        raise OpenError(archive_path, e.strerror or str(e)) from e
    except ValueError as e:
        # undecodable entry names, malformed extra fields
        raise OpenError(archive_path, str(e)) from e

    logger.debug("%s: %d files", archive_path.name, len(records))
    return records
