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
OAS Sync Exceptions

Error types raised by the sync pipeline. Every error is terminal: nothing in
the pipeline retries or falls back.
"""

from typing import Any


class OASSyncError(Exception):
    """Base exception for OAS sync errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self):
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ConfigurationError(OASSyncError):
    """Raised when a required input is missing or invalid."""

    pass


class OASFileNotFoundError(OASSyncError):
    """Raised when the OAS file path does not resolve to an existing file."""

    def __init__(self, path: str, details: dict[str, Any] | None = None):
        super().__init__(f"OAS file not found at path: {path}", details)
        self.path = path


class InvalidEncodingError(OASSyncError):
    """Raised when the OAS file is not UTF-8 text."""

    pass


class InvalidYamlError(OASSyncError):
    """Raised when a YAML document cannot be parsed or represented as JSON."""

    pass


class InvalidJsonError(OASSyncError):
    """Raised when a JSON document is not well-formed."""

    pass


class UnsupportedFormatError(OASSyncError):
    """Raised when the file extension is not a recognized OAS format."""

    def __init__(self, extension: str, supported: tuple[str, ...], details: dict[str, Any] | None = None):
        super().__init__(
            f"Unsupported file format: {extension}. Supported formats: {', '.join(supported)}",
            details,
        )
        self.extension = extension
        self.supported = supported


class UploadFailedError(OASSyncError):
    """Raised when the catalog upload returns a non-2xx status or the request fails."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, details)
        self.status_code = status_code
        self.response_body = response_body
