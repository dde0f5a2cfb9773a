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
OAS Format Normalizer

Turns a FileRecord into a JSON payload. YAML documents are parsed and
re-serialized as indented JSON; JSON documents are validated and passed
through untouched.
"""

import json
import logging
import re
from datetime import date, datetime
from typing import Any

import yaml

from .exceptions import InvalidJsonError, InvalidYamlError, UnsupportedFormatError
from .models import FileRecord, NormalizedPayload

logger = logging.getLogger(__name__)

YAML_EXTENSIONS = (".yaml", ".yml")
JSON_EXTENSIONS = (".json",)
SUPPORTED_EXTENSIONS = YAML_EXTENSIONS + JSON_EXTENSIONS

JSON_INDENT = 2

_YAML_SUFFIX = re.compile(r"\.(yaml|yml)$", re.IGNORECASE)


def _json_default(value: Any) -> Any:
    # YAML timestamps load as date/datetime objects
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def yaml_to_json(yaml_content: str) -> str:
    """Convert a single YAML document to indented JSON text.

    Output is deterministic: key order follows the source document and the
    same input always produces the same bytes. A stream with no document
    at all is rejected, while an explicit ``null`` document becomes ``null``.
    """
    try:
        documents = list(yaml.safe_load_all(yaml_content))
    except yaml.YAMLError as e:
        raise InvalidYamlError(f"Failed to parse YAML content: {e}")

    if not documents:
        raise InvalidYamlError("Failed to parse YAML content: document is empty")
    if len(documents) > 1:
        raise InvalidYamlError(f"Failed to parse YAML content: expected a single document, found {len(documents)}")
    parsed = documents[0]

    try:
        return json.dumps(parsed, indent=JSON_INDENT, ensure_ascii=False, allow_nan=False, default=_json_default)
    except (TypeError, ValueError) as e:
        raise InvalidYamlError(f"Failed to parse YAML content: {e}")


def validate_json(json_content: str) -> Any:
    """Parse JSON strictly, rejecting NaN and Infinity literals."""
    try:
        return json.loads(json_content, parse_constant=_reject_constant)
    except ValueError as e:
        raise InvalidJsonError(f"Invalid JSON format: {e}")


def json_file_name(file_name: str) -> str:
    """Replace a trailing .yaml/.yml suffix with .json."""
    return _YAML_SUFFIX.sub(".json", file_name)


def normalize(record: FileRecord) -> NormalizedPayload:
    """Normalize an OAS file record to a JSON payload."""
    if record.extension in YAML_EXTENSIONS:
        logger.info("Converting YAML to JSON format")
        return NormalizedPayload(content=yaml_to_json(record.content), file_name=json_file_name(record.file_name))

    if record.extension in JSON_EXTENSIONS:
        logger.info("File is already in JSON format")
        validate_json(record.content)
        return NormalizedPayload(content=record.content, file_name=record.file_name)

    raise UnsupportedFormatError(record.extension, SUPPORTED_EXTENSIONS)
