"""Tests for queue configuration loading and strict validation."""

import shutil
import tempfile
from pathlib import Path

import pytest
import yaml

from workqueue import (
    QueueConfigLoader,
    QueueConfigError,
    Convention,
    ResultQueue,
    BasicQueue,
    create_queue,
    load_queue_config,
)


class TestQueueConfigLoader:
    """Test strict YAML validation in the loader."""

    def setup_method(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()
        self.workspace = Path(self.temp_dir)
        self.loader = QueueConfigLoader()

    def teardown_method(self):
        shutil.rmtree(self.temp_dir)

    def write_config(self, content) -> Path:
        """Helper to write config YAML."""
        path = self.workspace / "queue.yml"
        with open(path, 'w') as f:
            yaml.dump(content, f)
        return path

    def test_load_full_config(self):
        path = self.write_config({
            "version": "1",
            "convention": "boolean",
            "frozen": True,
            "freeze_during_splice": True,
        })

        config = self.loader.load(path)

        assert config.convention == Convention.BOOLEAN
        assert config.frozen is True
        assert config.freeze_during_splice is True

    def test_load_minimal_config_uses_defaults(self):
        config = self.loader.load(self.write_config({"version": "1"}))

        assert config.convention == Convention.RESULT
        assert config.frozen is False
        assert config.freeze_during_splice is None

    def test_loaded_config_builds_queue(self):
        config = load_queue_config(self.write_config({"version": "1", "convention": "result"}))
        assert isinstance(create_queue(config=config), ResultQueue)

        config = load_queue_config(self.write_config({"version": "1", "convention": "boolean"}))
        assert isinstance(create_queue(config=config), BasicQueue)

    def test_missing_version_rejected(self):
        with pytest.raises(QueueConfigError) as exc_info:
            self.loader.load(self.write_config({"convention": "result"}))

        assert any("'version' field is required" in err.message
                   for err in exc_info.value.errors)

    def test_unsupported_version_rejected(self):
        with pytest.raises(QueueConfigError) as exc_info:
            self.loader.load(self.write_config({"version": "2"}))

        assert any("Unsupported version '2'" in err.message
                   for err in exc_info.value.errors)

    def test_non_string_version_rejected(self):
        with pytest.raises(QueueConfigError) as exc_info:
            self.loader.load(self.write_config({"version": 1}))

        assert any("must be a string" in err.message for err in exc_info.value.errors)

    def test_unknown_field_rejected(self):
        with pytest.raises(QueueConfigError) as exc_info:
            self.loader.load(self.write_config({"version": "1", "capacity": 10}))

        errors = exc_info.value.errors
        assert errors[0].path == "capacity"
        assert "Unknown field 'capacity'" in errors[0].message

    def test_unknown_convention_rejected(self):
        with pytest.raises(QueueConfigError) as exc_info:
            self.loader.load(self.write_config({"version": "1", "convention": "lifo"}))

        assert any(err.path == "convention" for err in exc_info.value.errors)

    def test_non_boolean_flags_rejected(self):
        path = self.write_config({"version": "1", "frozen": "yes", "freeze_during_splice": 0})

        with pytest.raises(QueueConfigError) as exc_info:
            self.loader.load(path)

        paths = {err.path for err in exc_info.value.errors}
        assert paths == {"frozen", "freeze_during_splice"}

    def test_errors_are_collected(self):
        path = self.write_config({"convention": "lifo", "extra": True})

        with pytest.raises(QueueConfigError) as exc_info:
            self.loader.load(path)

        assert len(exc_info.value.errors) == 3

    def test_non_mapping_rejected(self):
        with pytest.raises(QueueConfigError) as exc_info:
            self.loader.load(self.write_config(["version", "1"]))

        assert "must be a YAML object" in str(exc_info.value)

    def test_empty_file_rejected(self):
        path = self.workspace / "empty.yml"
        path.write_text("")

        with pytest.raises(QueueConfigError):
            self.loader.load(path)

    def test_missing_file_rejected(self):
        with pytest.raises(QueueConfigError) as exc_info:
            self.loader.load(self.workspace / "missing.yml")

        assert "Failed to load queue config" in str(exc_info.value)

    def test_invalid_yaml_rejected(self):
        path = self.workspace / "broken.yml"
        path.write_text("version: [unterminated\n")

        with pytest.raises(QueueConfigError):
            self.loader.load(path)

    def test_loader_resets_errors_between_loads(self):
        with pytest.raises(QueueConfigError):
            self.loader.load(self.write_config({"version": "9"}))

        config = self.loader.load(self.write_config({"version": "1"}))
        assert config.convention == Convention.RESULT
