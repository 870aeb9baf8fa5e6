"""Configuration adapter implementation."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from azwrap.domain.exceptions import ConfigurationError
from azwrap.domain.models import AzOptions

ENV_PREFIX = "AZWRAP_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class ConfigurationAdapter:
    """Adapter that loads AzOptions from files and environment variables."""

    def load_file(self, path: str) -> dict[str, Any]:
        """Read a YAML or JSON configuration file.

        Args:
            path: Path to the configuration file

        Returns:
            Raw configuration dictionary

        Raises:
            ConfigurationError: If the file is missing or cannot be parsed
        """
        config_path = Path(path)

        if not config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {path}")

        try:
            content = config_path.read_text()

            if config_path.suffix == ".json":
                data = json.loads(content)
            else:
                # YAML is the default format
                data = yaml.safe_load(content) or {}
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Invalid configuration file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Invalid configuration file {path}: top level must be a mapping"
            )
        return data

    def load_environment(self, environ: Mapping[str, str] | None = None) -> dict[str, Any]:
        """Collect ``AZWRAP_<FIELD>`` overrides from the environment."""
        environ = os.environ if environ is None else environ
        overrides: dict[str, Any] = {}

        for name, field in AzOptions.model_fields.items():
            raw = environ.get(f"{ENV_PREFIX}{name.upper()}")
            if raw is None:
                continue
            if field.annotation is bool:
                overrides[name] = self._parse_bool(name, raw)
            else:
                overrides[name] = raw
        return overrides

    def load_options(
        self, path: str | None = None, environ: Mapping[str, str] | None = None
    ) -> AzOptions:
        """Build AzOptions from an optional file overlaid with environment overrides.

        Raises:
            ConfigurationError: If loading or validation fails
        """
        data: dict[str, Any] = self.load_file(path) if path else {}
        data.update(self.load_environment(environ))

        try:
            return AzOptions.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid azwrap options: {e.error_count()} validation error(s)",
                details={"errors": e.errors(include_url=False)},
            ) from e

    def _parse_bool(self, name: str, raw: str) -> bool:
        value = raw.strip().lower()
        if value in _TRUE_VALUES:
            return True
        if value in _FALSE_VALUES:
            return False
        raise ConfigurationError(f"Invalid boolean for {ENV_PREFIX}{name.upper()}: {raw!r}")
