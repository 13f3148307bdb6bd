"""
Configuration Loader - YAML settings for scan reporting.

Reads a YAML file, deep-merges caller overrides over it and validates the
result as a ScanReportConfig. Missing sections fall back to model defaults.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from scan_report.config.models import ScanReportConfig

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Loads ScanReportConfig from YAML files relative to a base path."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        self._base_path = base_path or Path(".")

    def load(
        self,
        config_path: Union[str, Path],
        overrides: Optional[Dict[str, Any]] = None,
    ) -> ScanReportConfig:
        """
        Load and validate a configuration file.

        Args:
            config_path: YAML file, absolute or relative to the base path
            overrides: Values deep-merged over the file contents

        Returns:
            Validated ScanReportConfig

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValidationError: If a setting has the wrong type
        """
        path = self._resolve_path(config_path)
        with open(path, encoding="utf-8") as f:
            settings = yaml.safe_load(f) or {}

        if overrides:
            settings = self._merge_configs(settings, overrides)

        logger.debug(f"Loaded scan report configuration from {path}")
        return ScanReportConfig.model_validate(settings)

    def _resolve_path(self, path: Union[str, Path]) -> Path:
        p = Path(path)
        return p if p.is_absolute() else self._base_path / p

    def _merge_configs(
        self,
        base: Dict[str, Any],
        overlay: Dict[str, Any],
    ) -> Dict[str, Any]:
        """Deep merge overlay into a copy of base."""
        result = dict(base)
        for key, value in overlay.items():
            if isinstance(result.get(key), dict) and isinstance(value, dict):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value
        return result


def load_config(
    config_path: Union[str, Path],
    overrides: Optional[Dict[str, Any]] = None,
    base_path: Optional[Path] = None,
) -> ScanReportConfig:
    """Load configuration with a one-off ConfigLoader."""
    return ConfigLoader(base_path=base_path).load(config_path, overrides)
