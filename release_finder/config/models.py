"""Configuration models for the latest release finder."""

import logging
from dataclasses import dataclass, fields
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

# Archive types picked up by the scan (compared against lower-cased suffixes)
ARCHIVE_EXTENSIONS = frozenset({'.zip'})

DEFAULT_CONFIG_PATH = Path("config.yaml")
DEFAULT_OUTPUT_FILE = "./latest_releases.txt"


# --- CUSTOM EXCEPTIONS ---

class ReleaseFinderError(Exception):
    """Base exception for release finder errors."""


class ConfigError(ReleaseFinderError):
    """Configuration loading error."""


class TraversalError(ReleaseFinderError):
    """Input directory is missing or could not be walked completely."""


class OpenError(ReleaseFinderError):
    """A single archive could not be opened or read."""

    def __init__(self, archive_path: Path, reason: str):
        super().__init__(f"Cannot read archive '{archive_path}': {reason}")
        self.archive_path = archive_path
        self.reason = reason


class WriteError(ReleaseFinderError):
    """Report file could not be created or written."""


class NoArchivesFound(ReleaseFinderError):
    """The scan finished without finding any archive."""


# --- CONFIGURATION DATACLASSES ---

@dataclass
class ScanConfig:
    """Input directory and report destination."""
    input_dir: Path
    output_file: Path = Path(DEFAULT_OUTPUT_FILE)

    def __post_init__(self):
        self.input_dir = Path(self.input_dir)
        self.output_file = Path(self.output_file)


@dataclass
class LoggingConfig:
    """Configuration for logging behavior."""
    level: str = "INFO"
    log_file: str | None = None


# --- HELPER FUNCTIONS ---

def safe_load_dataclass(dclass_type, data: dict, section_name: str):
    """Safely load a dataclass from a dictionary.

    Ignores unknown keys and logs warnings for them.

    Args:
        dclass_type: Dataclass type to instantiate
        data: Dictionary with configuration data
        section_name: Name of config section (for logging)

    Returns:
        Instance of dclass_type with filtered data

    Raises:
        ConfigError: If a required key is missing
    """
    valid_keys = {f.name for f in fields(dclass_type)}
    filtered_data = {}

    for k, v in data.items():
        if k in valid_keys:
            filtered_data[k] = v
        else:
            logger.warning(
                "Config warning: Unknown key '%s' in section '%s' ignored.",
                k, section_name
            )

    try:
        return dclass_type(**filtered_data)
    except TypeError as e:
        raise ConfigError(f"Invalid section '{section_name}': {e}") from e


@dataclass
class AppConfig:
    """Main application configuration container."""
    scan: ScanConfig
    logging: LoggingConfig

    @classmethod
    def load(cls, config_path: Path | str = DEFAULT_CONFIG_PATH) -> 'AppConfig':
        """Load application configuration from a YAML file.

        Args:
            config_path: Path to config.yaml file

        Returns:
            AppConfig instance with loaded configuration

        Raises:
            ConfigError: If file not found, YAML parsing fails or the
                scan section is incomplete
        """
        path = Path(config_path)
        if not path.exists():
            raise ConfigError(f"Configuration file '{path}' not found.")

        try:
            with path.open('r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Error parsing YAML: {e}") from e

        if not isinstance(data, dict) or not isinstance(data.get('scan'), dict):
            raise ConfigError(f"Section 'scan' is missing in '{path}'.")

        return cls(
            scan=safe_load_dataclass(ScanConfig, data['scan'], 'scan'),
            logging=safe_load_dataclass(
                LoggingConfig, data.get('logging') or {}, 'logging'
            )
        )
