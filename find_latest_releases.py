#!/usr/bin/env python3
"""Latest release finder.

Scans a directory tree for ZIP archives, lists the files inside each one and
reports, for every file name, the archive holding its most recent copy. The
archive's own modification time decides which copy is the newest.

Usage:
    find_latest_releases.py [config.yaml]
"""

import logging
import sys
from pathlib import Path

from release_finder.config import DEFAULT_CONFIG_PATH, AppConfig, LoggingConfig, ReleaseFinderError
from release_finder.core import LatestReleasePipeline, PipelineResult
from release_finder.interfaces.cli import CLIPresenter
from release_finder.utils import print_error, print_info, print_warning
from release_finder.utils.events import SimpleEmitter

# Logger will be configured in main() after loading config
logger = logging.getLogger(__name__)


def setup_logging(config: LoggingConfig) -> None:
    """Configure logging with console and optional file handlers."""
    log_level = getattr(logging, config.level.upper(), logging.INFO)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(levelname)s - %(funcName)s - %(message)s',
        datefmt='%H:%M:%S'
    ))
    handlers = [console_handler]

    if config.log_file:
        file_handler = logging.FileHandler(config.log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter('%(asctime)s - %(levelname)s - %(funcName)s - %(message)s')
        )
        handlers.append(file_handler)

    logging.basicConfig(
        level=logging.DEBUG,
        handlers=handlers,
        force=True
    )


def print_summary(result: PipelineResult) -> None:
    """Print discovery and processing counts."""
    print_info(f"Archives found: {result.archives_found}")
    print_info(f"Archives processed: {result.archives_processed}")
    if result.inspection.skipped:
        print_warning(f"Archives skipped: {len(result.inspection.skipped)}", indent=2)
    print_info(f"Results saved to: {result.output_path}")
    print_info(f"Unique files processed: {result.unique_files}")


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the latest release finder."""
    args = sys.argv[1:] if argv is None else argv
    config_path = Path(args[0]) if args else DEFAULT_CONFIG_PATH

    presenter = CLIPresenter()
    try:
        config = AppConfig.load(config_path)
        setup_logging(config.logging)
        print_info(f"Searching archives in: {config.scan.input_dir}")

        emitter = SimpleEmitter()
        presenter.attach_to_pipeline(emitter)
        result = LatestReleasePipeline(config.scan, emitter).run()

        print_summary(result)

    except ReleaseFinderError as e:
        presenter.stop()
        print_error(f"Error: {e}")
        sys.exit(1)
    except Exception as e:
        presenter.stop()
        print_error(f"Unexpected Error: {e}")
        logger.debug("Unexpected error occurred", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
