"""Result types for pipeline data transfer between stages."""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path


@dataclass(frozen=True)
class FileRecord:
    """One occurrence of a named entry inside one archive.

    mod_time is the archive's own filesystem mtime, so every record taken
    from the same archive carries the same value.
    """
    name: str
    mod_time: datetime
    archive_path: Path
    archive_name: str
    size: int


@dataclass
class SkippedArchive:
    """Archive that could not be inspected."""
    path: Path
    reason: str


@dataclass
class InspectionResult:
    """Records accumulated over all archives, grouped by entry name."""
    grouped: dict[str, list[FileRecord]] = field(default_factory=dict)
    contributing_archives: int = 0
    skipped: list[SkippedArchive] = field(default_factory=list)

    def add(self, records: list[FileRecord]) -> None:
        """Append one archive's records to their name groups."""
        for record in records:
            self.grouped.setdefault(record.name, []).append(record)
        if records:
            self.contributing_archives += 1


@dataclass
class PipelineResult:
    """Complete result of one latest release scan."""
    archives: list[Path]
    inspection: InspectionResult
    resolved: dict[str, FileRecord]
    output_path: Path

    @property
    def archives_found(self) -> int:
        return len(self.archives)

    @property
    def archives_processed(self) -> int:
        return self.inspection.contributing_archives

    @property
    def unique_files(self) -> int:
        return len(self.resolved)
