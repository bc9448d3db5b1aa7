"""Configuration package for the latest release finder."""

from .models import (
    ARCHIVE_EXTENSIONS,
    DEFAULT_CONFIG_PATH,
    AppConfig,
    ScanConfig,
    LoggingConfig,
    ReleaseFinderError,
    ConfigError,
    TraversalError,
    OpenError,
    WriteError,
    NoArchivesFound,
    safe_load_dataclass,
)

__all__ = [
    'ARCHIVE_EXTENSIONS',
    'DEFAULT_CONFIG_PATH',
    'AppConfig',
    'ScanConfig',
    'LoggingConfig',
    'ReleaseFinderError',
    'ConfigError',
    'TraversalError',
    'OpenError',
    'WriteError',
    'NoArchivesFound',
    'safe_load_dataclass',
]
