"""
Unit Tests for ConfigLoader.

Test Aspects Covered:
    ✅ Business Logic: Config loading and merging
    ✅ Error Handling: Invalid YAML, missing files
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from scan_report.config.loader import ConfigLoader, load_config
from scan_report.config.models import ScanReportConfig


class TestConfigLoader:
    """Test cases for ConfigLoader."""

    def test_loads_sample_config(self, sample_config_path: Path) -> None:
        """
        SCENARIO: Bundled sample configuration
        EXPECTED: ScanReportConfig with the file's values
        """
        # Act
        config = load_config(sample_config_path)

        # Assert
        assert isinstance(config, ScanReportConfig)
        assert config.metrics.enabled is True
        assert config.metrics.include_untouched is False
        assert config.serialization.pretty is True

    def test_loads_relative_to_base_path(self, tmp_path: Path) -> None:
        """
        SCENARIO: Relative path with a base path
        EXPECTED: File resolved against the base path
        """
        # Arrange
        (tmp_path / "config.yaml").write_text("metrics:\n  enabled: false\n")
        loader = ConfigLoader(base_path=tmp_path)

        # Act
        config = loader.load("config.yaml")

        # Assert
        assert config.metrics.enabled is False
        assert config.metrics.include_untouched is True  # Default

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        # Arrange
        (tmp_path / "empty.yaml").write_text("")

        # Act
        config = ConfigLoader(base_path=tmp_path).load("empty.yaml")

        # Assert
        assert config == ScanReportConfig()

    def test_overrides_merged_over_file(self, sample_config_path: Path) -> None:
        """
        SCENARIO: Override one nested key
        EXPECTED: Override wins, sibling keys kept from the file
        """
        # Act
        config = load_config(sample_config_path, overrides={"metrics": {"enabled": False}})

        # Assert
        assert config.metrics.enabled is False
        assert config.metrics.include_untouched is False

    def test_validates_invalid_config(self, tmp_path: Path) -> None:
        """
        SCENARIO: Config with a non-boolean flag
        EXPECTED: ValidationError raised
        """
        # Arrange
        (tmp_path / "invalid.yaml").write_text("serialization:\n  pretty: [1, 2]\n")
        loader = ConfigLoader(base_path=tmp_path)

        # Act & Assert
        with pytest.raises(ValidationError):
            loader.load("invalid.yaml")

    def test_file_not_found(self, tmp_path: Path) -> None:
        """
        SCENARIO: Config path doesn't exist
        EXPECTED: FileNotFoundError raised
        """
        # Arrange
        loader = ConfigLoader(base_path=tmp_path)

        # Act & Assert
        with pytest.raises(FileNotFoundError):
            loader.load("nonexistent.yaml")

    def test_merges_configs(self) -> None:
        """
        SCENARIO: Two configs merged together
        EXPECTED: Overlay values override base values
        """
        # Arrange
        loader = ConfigLoader()
        base = {"version": "1.0", "metrics": {"enabled": True, "include_untouched": True}}
        overlay = {"metrics": {"include_untouched": False}}

        # Act
        merged = loader._merge_configs(base, overlay)

        # Assert
        assert merged["metrics"]["enabled"] is True  # From base
        assert merged["metrics"]["include_untouched"] is False  # From overlay
        assert base["metrics"]["include_untouched"] is True

    def test_overrides_add_missing_sections(self, tmp_path: Path) -> None:
        """
        SCENARIO: File without a serialization section, override supplies it
        EXPECTED: Override applied, other sections defaulted
        """
        # Arrange
        (tmp_path / "config.yaml").write_text("version: \"2.0\"\n")

        # Act
        config = load_config(
            "config.yaml",
            overrides={"serialization": {"pretty": True}},
            base_path=tmp_path,
        )

        # Assert
        assert config.version == "2.0"
        assert config.serialization.pretty is True
        assert config.metrics.enabled is True  # Default
