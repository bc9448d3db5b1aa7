"""CLI presentation layer for the latest release finder.

This module handles all visual feedback in the CLI using Halo spinners
and subscribes to pipeline events for progress tracking.
"""

from halo import Halo
from typing import Optional

from ...utils.events import SimpleEmitter


class CLIPresenter:
    """Displays pipeline progress in CLI with spinners.

    Subscribes to pipeline events and provides visual feedback:
    - Halo spinners for stages
    - Running archive counter while archives are read
    - Skipped archive count (the warning itself goes through logging)

    Example:
        emitter = SimpleEmitter()
        presenter = CLIPresenter()
        presenter.attach_to_pipeline(emitter)

        pipeline = LatestReleasePipeline(config.scan, emitter)
        result = pipeline.run()
    """

    def __init__(self):
        self.current_spinner: Optional[Halo] = None
        self._inspected = 0
        self._skipped = 0

    def attach_to_pipeline(self, emitter: SimpleEmitter):
        """Subscribe to pipeline events.

        Args:
            emitter: Event emitter from pipeline
        """
        emitter.on('stage:start', self._on_stage_start)
        emitter.on('stage:complete', self._on_stage_complete)
        emitter.on('archive:inspected', self._on_archive_inspected)
        emitter.on('archive:skipped', self._on_archive_skipped)

    def stop(self):
        """Stop a spinner left running by a failed stage."""
        if self.current_spinner:
            self.current_spinner.fail()
            self.current_spinner = None

    def _on_stage_start(self, stage: str, message: str, **_):
        if self.current_spinner:
            self.current_spinner.stop()

        self._inspected = 0
        self._skipped = 0
        self.current_spinner = Halo(text=message, spinner='dots')
        self.current_spinner.start()

    def _on_stage_complete(self, stage: str, **data):
        if not self.current_spinner:
            return

        success_msg = self._format_success_message(stage, data)
        self.current_spinner.succeed(success_msg)
        self.current_spinner = None

    def _on_archive_inspected(self, path, files_count: int, **_):
        self._inspected += 1
        self._update_progress(path)

    def _on_archive_skipped(self, path, reason: str, **_):
        self._skipped += 1
        self._update_progress(path)

    def _update_progress(self, path):
        if not self.current_spinner:
            return
        text = f'Reading archives... {self._inspected} done'
        if self._skipped:
            text += f', {self._skipped} skipped'
        self.current_spinner.text = f'{text} ({path.name})'

    def _format_success_message(self, stage: str, data: dict) -> str:
        """Format success message based on stage and data.

        Args:
            stage: Stage name
            data: Stage-specific data

        Returns:
            Formatted success message
        """
        if stage == 'locate':
            return f"Found {data.get('archives_count', 0)} archives"

        if stage == 'inspect':
            processed = data.get('processed', 0)
            skipped = data.get('skipped', 0)
            if skipped:
                return f'Read {processed} archives ({skipped} skipped)'
            return f'Read {processed} archives'

        if stage == 'resolve':
            return f"Resolved {data.get('files_count', 0)} unique files"

        if stage == 'report':
            return f"Report saved: {data.get('path')}"

        return f'{stage.capitalize()} complete'
