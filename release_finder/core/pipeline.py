"""Event-driven pipeline for finding the latest file releases.

This pipeline runs the whole scan from input directory to report file,
emitting events at each stage for progress tracking and presentation.
"""

import logging
from pathlib import Path
from typing import Optional

from ..config import NoArchivesFound, OpenError, ScanConfig
from ..utils.events import SimpleEmitter
from .inspector import inspect_archive
from .locator import locate_archives
from .report import write_report
from .resolver import resolve_latest
from .result_types import InspectionResult, PipelineResult, SkippedArchive

logger = logging.getLogger(__name__)


class LatestReleasePipeline:
    """Event-driven pipeline for latest release detection.

    The pipeline runs four stages, strictly one after another:
    1. Locate - Find archives under the input directory
    2. Inspect - List the files of every archive
    3. Resolve - Pick the newest copy of every file name
    4. Report - Write the fixed-width report

    Events emitted:
    - 'stage:start' - Stage beginning
    - 'stage:complete' - Stage completion
    - 'archive:inspected' - One archive listed
    - 'archive:skipped' - One archive could not be read

    An unreadable archive is skipped; every other failure aborts the run.

    Example:
        emitter = SimpleEmitter()
        emitter.on('archive:skipped', lambda **kw: print(kw['reason']))

        pipeline = LatestReleasePipeline(config.scan, emitter)
        result = pipeline.run()
    """

    def __init__(self, config: ScanConfig, emitter: Optional[SimpleEmitter] = None):
        """Initialize pipeline with scan configuration and optional event emitter.

        Args:
            config: Input directory and output file
            emitter: Event emitter for progress tracking (optional, defaults to silent)
        """
        self.config = config
        self.emitter = emitter or SimpleEmitter()

    def run(self) -> PipelineResult:
        """Execute complete pipeline: directory → report.

        Returns:
            PipelineResult with counts and the resolved records

        Raises:
            TraversalError: If the input directory cannot be walked
            NoArchivesFound: If the walk found no archive
            WriteError: If the report cannot be written
        """
        # Stage 1: Locate archives
        self.emitter.emit('stage:start', stage='locate',
                          message=f'Searching archives in {self.config.input_dir}...')
        archives = locate_archives(self.config.input_dir)
        if not archives:
            raise NoArchivesFound(f"No archives found in '{self.config.input_dir}'")
        self.emitter.emit('stage:complete', stage='locate', archives_count=len(archives))

        # Stage 2: Inspect every archive
        self.emitter.emit('stage:start', stage='inspect', message='Reading archives...')
        inspection = self._inspect(archives)
        self.emitter.emit('stage:complete', stage='inspect',
                          processed=inspection.contributing_archives,
                          skipped=len(inspection.skipped))

        # Stage 3: Resolve latest copies
        self.emitter.emit('stage:start', stage='resolve', message='Selecting latest releases...')
        resolved = resolve_latest(inspection.grouped)
        self.emitter.emit('stage:complete', stage='resolve', files_count=len(resolved))

        # Stage 4: Write report
        self.emitter.emit('stage:start', stage='report', message='Writing report...')
        write_report(self.config.output_file, resolved)
        self.emitter.emit('stage:complete', stage='report', path=self.config.output_file)

        return PipelineResult(
            archives=archives,
            inspection=inspection,
            resolved=resolved,
            output_path=self.config.output_file
        )

    def _inspect(self, archives: list[Path]) -> InspectionResult:
        """Stage 2: List archives in discovery order, skipping unreadable ones."""
        inspection = InspectionResult()

        for archive_path in archives:
            try:
                records = inspect_archive(archive_path)
            except OpenError as e:
                logger.warning("Skipping archive %s: %s", archive_path, e.reason)
                inspection.skipped.append(SkippedArchive(path=archive_path, reason=e.reason))
                self.emitter.emit('archive:skipped', path=archive_path, reason=e.reason)
                continue

            inspection.add(records)
            self.emitter.emit('archive:inspected', path=archive_path, files_count=len(records))

        return inspection
