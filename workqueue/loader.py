"""Queue configuration loader with strict YAML validation."""

import logging
from pathlib import Path
from typing import Any, Dict, List, Union
import yaml

from workqueue.exceptions import ValidationError, QueueConfigError
from workqueue.queue.factory import QueueConfig
from workqueue.queue.types import Convention

logger = logging.getLogger(__name__)


class QueueConfigLoader:
    """Loads and validates queue configuration YAML."""

    SUPPORTED_VERSIONS = {"1"}
    KNOWN_FIELDS = {'version', 'convention', 'frozen', 'freeze_during_splice'}

    def __init__(self):
        self.errors: List[ValidationError] = []

    def load(self, config_path: Union[str, Path]) -> QueueConfig:
        """Load and validate a queue configuration file."""
        self.errors = []
        try:
            with open(config_path, 'r') as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            self._add_error(f"Failed to load queue config: {e}")
            self._raise_validation_errors()

        config = self.load_dict(data)
        logger.debug(f"Loaded queue config from {config_path}: {config}")
        return config

    def load_dict(self, data: Any) -> QueueConfig:
        """Validate an already parsed configuration mapping."""
        self.errors = []

        if data is None or not isinstance(data, dict):
            self._add_error("Queue config must be a YAML object/dictionary")
            self._raise_validation_errors()

        self._validate_version(data)

        for key in data.keys():
            if key not in self.KNOWN_FIELDS:
                self._add_error(f"Unknown field '{key}'", str(key))

        convention = self._validate_convention(data.get('convention', Convention.RESULT.value))

        for flag in ('frozen', 'freeze_during_splice'):
            if flag in data and not isinstance(data[flag], bool):
                self._add_error(
                    f"'{flag}' must be a boolean, got {type(data[flag]).__name__}", flag
                )

        if self.errors:
            self._raise_validation_errors()

        return QueueConfig(
            convention=convention,
            frozen=data.get('frozen', False),
            freeze_during_splice=data.get('freeze_during_splice'),
        )

    def _validate_version(self, data: Dict[str, Any]):
        version = data.get('version')
        if version is None:
            self._add_error("'version' field is required", 'version')
        elif not isinstance(version, str):
            self._add_error(
                f"'version' field must be a string, got {type(version).__name__}", 'version'
            )
        elif version not in self.SUPPORTED_VERSIONS:
            self._add_error(
                f"Unsupported version '{version}'. Supported: {sorted(self.SUPPORTED_VERSIONS)}",
                'version'
            )

    def _validate_convention(self, value: Any) -> Convention:
        try:
            return Convention(value)
        except ValueError:
            choices = [c.value for c in Convention]
            self._add_error(f"Unknown convention '{value}'. Expected one of {choices}", 'convention')
            return Convention.RESULT

    def _add_error(self, message: str, path: str = ""):
        self.errors.append(ValidationError(message, path))

    def _raise_validation_errors(self):
        raise QueueConfigError(self.errors)


def load_queue_config(config_path: Union[str, Path]) -> QueueConfig:
    """Convenience function to load a queue configuration file.

    Args:
        config_path: Path to the YAML file

    Returns:
        Validated QueueConfig

    Raises:
        QueueConfigError: If the file cannot be read or fails validation
    """
    return QueueConfigLoader().load(config_path)
