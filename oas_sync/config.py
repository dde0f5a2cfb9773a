# Copyright 2025 ATP Project Contributors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
OAS Sync Configuration

Invocation settings. Values come from explicit arguments first, then from
GitHub Actions inputs (INPUT_*), then from plain environment variables.
"""

import logging
import os
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlparse

from .exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://app.brainfi.sh"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# field -> (action input variable, plain environment variable)
ENV_MAPPING = {
    "api_token": ("INPUT_BRAINFISH_API_TOKEN", "BRAINFISH_API_TOKEN"),
    "catalog_id": ("INPUT_CATALOG_ID", "BRAINFISH_CATALOG_ID"),
    "oas_file_path": ("INPUT_OAS_FILE_PATH", "OAS_FILE_PATH"),
    "base_url": ("INPUT_BASE_URL", "BRAINFISH_BASE_URL"),
}


def _env(*names: str) -> str | None:
    """Return the first non-blank value among the given environment variables."""
    for name in names:
        value = os.getenv(name)
        if value and value.strip():
            return value.strip()
    return None


@dataclass
class SyncConfig:
    """Configuration for one OAS sync invocation."""

    api_token: str | None = None
    catalog_id: str | None = None
    oas_file_path: str | None = None
    base_url: str | None = None
    log_level: str | None = None

    def __post_init__(self):
        """Post-initialization validation and environment variable loading."""
        self._load_from_environment()
        self._validate_config()

    def _coerce_values(self):
        """Convert scalar values (e.g. numeric catalog IDs from YAML) to strings."""
        for key in self.__dataclass_fields__:
            value = getattr(self, key)
            if value is None or isinstance(value, str):
                continue
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigurationError(f"{key} must be a string, got {type(value).__name__}")
            setattr(self, key, str(value))

    def _load_from_environment(self):
        """Load configuration from environment variables."""
        self._coerce_values()

        for key, names in ENV_MAPPING.items():
            if not getattr(self, key):
                setattr(self, key, _env(*names))

        if not self.base_url:
            self.base_url = DEFAULT_BASE_URL

        if not self.log_level:
            self.log_level = _env("OAS_SYNC_LOG_LEVEL") or "INFO"
        self.log_level = self.log_level.upper()

    def _validate_config(self):
        """Validate configuration values."""
        if not self.api_token:
            raise ConfigurationError("brainfish_api_token is required")

        if not self.catalog_id:
            raise ConfigurationError("catalog_id is required")

        if not self.oas_file_path:
            raise ConfigurationError("oas_file_path is required")

        parsed = urlparse(self.base_url)
        if parsed.scheme not in ("http", "https") or not parsed.hostname:
            raise ConfigurationError(f"Invalid base_url: {self.base_url}")

        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(f"Log level must be one of: {', '.join(LOG_LEVELS)}")

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_file(cls, config_file: str, **overrides: Any) -> "SyncConfig":
        """Load configuration from a YAML or JSON file.

        Keyword overrides that are not None take precedence over file values.
        """
        import json

        import yaml

        try:
            with open(config_file, encoding="utf-8") as f:
                if config_file.endswith(".json"):
                    config_data = json.load(f)
                elif config_file.endswith((".yml", ".yaml")):
                    config_data = yaml.safe_load(f) or {}
                else:
                    raise ConfigurationError(f"Unsupported config file format: {config_file}")
        except FileNotFoundError:
            raise ConfigurationError(f"Configuration file not found: {config_file}")
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file {config_file}: {e}")
        except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Invalid configuration file format: {e}")

        if not isinstance(config_data, dict):
            raise ConfigurationError(f"Configuration file must contain a mapping: {config_file}")

        unknown = set(config_data) - set(cls.__dataclass_fields__)
        if unknown:
            raise ConfigurationError(f"Unknown configuration parameter: {', '.join(sorted(unknown))}")

        config_data.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**config_data)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "api_token": "***" if self.api_token else None,  # Mask API token
            "catalog_id": self.catalog_id,
            "oas_file_path": self.oas_file_path,
            "base_url": self.base_url,
            "log_level": self.log_level,
        }
