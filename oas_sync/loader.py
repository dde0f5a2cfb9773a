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

"""Reads OAS documents from disk."""

import logging
from pathlib import Path

from .exceptions import InvalidEncodingError, OASFileNotFoundError, OASSyncError
from .models import FileRecord

logger = logging.getLogger(__name__)


def read_oas_file(file_path: str) -> FileRecord:
    """Read and validate the OAS file at ``file_path``.

    The file is read as bytes and decoded as UTF-8 without newline
    translation so JSON documents can be uploaded byte for byte.
    """
    logger.info(f"Reading OAS file from: {file_path}")

    path = Path(file_path)
    if not path.is_file():
        raise OASFileNotFoundError(file_path)

    try:
        raw = path.read_bytes()
    except OSError as e:
        raise OASSyncError(f"Failed to read OAS file {file_path}: {e}")

    try:
        content = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidEncodingError(f"OAS file is not valid UTF-8: {e}")

    record = FileRecord(
        path=file_path,
        content=content,
        extension=path.suffix,
        file_name=path.name,
        size=len(raw),
    )

    logger.info(f"File found: {record.file_name} ({record.size} bytes, {record.extension})")
    return record
