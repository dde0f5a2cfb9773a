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
OAS Sync

Reads an OpenAPI document, normalizes it to JSON and uploads it to a
Brainfish catalog. Runs as a GitHub Action or from the command line.
"""

__version__ = "1.0.0"

from .config import DEFAULT_BASE_URL, SyncConfig
from .exceptions import (
    ConfigurationError,
    InvalidEncodingError,
    InvalidJsonError,
    InvalidYamlError,
    OASFileNotFoundError,
    OASSyncError,
    UnsupportedFormatError,
    UploadFailedError,
)
from .loader import read_oas_file
from .models import FileRecord, NormalizedPayload, SyncResult, UploadResult
from .multipart import build_multipart_body
from .normalizer import SUPPORTED_EXTENSIONS, normalize
from .pipeline import sync_oas_file
from .uploader import CatalogUploader

__all__ = [
    # Pipeline
    "read_oas_file",
    "normalize",
    "CatalogUploader",
    "sync_oas_file",
    "build_multipart_body",
    # Models
    "FileRecord",
    "NormalizedPayload",
    "UploadResult",
    "SyncResult",
    # Configuration
    "SyncConfig",
    "DEFAULT_BASE_URL",
    "SUPPORTED_EXTENSIONS",
    # Exceptions
    "OASSyncError",
    "ConfigurationError",
    "OASFileNotFoundError",
    "InvalidEncodingError",
    "InvalidYamlError",
    "InvalidJsonError",
    "UnsupportedFormatError",
    "UploadFailedError",
]
