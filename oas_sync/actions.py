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
GitHub Actions Runtime

Inputs, outputs, workflow commands and the action entry point.

Inputs arrive as INPUT_<NAME> environment variables. Outputs are appended to
the file named by GITHUB_OUTPUT; older runners without it get the legacy
``::set-output`` command instead.
"""

import logging
import os
import sys
import uuid
from typing import TextIO

import httpx

from .config import SyncConfig
from .exceptions import ConfigurationError
from .pipeline import sync_oas_file

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def escape_data(value: str) -> str:
    """Escape a workflow command message."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(value: str) -> str:
    """Escape a workflow command property value."""
    return escape_data(value).replace(":", "%3A").replace(",", "%2C")


def issue_command(
    command: str,
    message: str = "",
    properties: dict[str, str] | None = None,
    stream: TextIO | None = None,
):
    """Write a ``::command props::message`` line to stdout."""
    stream = stream or sys.stdout
    line = f"::{command}"
    if properties:
        line += " " + ",".join(f"{k}={escape_property(v)}" for k, v in properties.items())
    line += f"::{escape_data(message)}"
    stream.write(line + "\n")
    stream.flush()


def get_input(name: str, required: bool = False) -> str:
    """Read an action input, returning an empty string when it is unset."""
    value = os.getenv(f"INPUT_{name.replace(' ', '_').upper()}", "").strip()
    if required and not value:
        raise ConfigurationError(f"{name} is required")
    return value


def set_output(name: str, value: str):
    """Set a step output."""
    output_file = os.getenv("GITHUB_OUTPUT")
    if not output_file:
        sys.stdout.write("\n")
        issue_command("set-output", value, {"name": name})
        return

    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    if delimiter in name or delimiter in value:
        raise ValueError(f"Unexpected input: name and value must not contain the delimiter {delimiter}")

    with open(output_file, "a", encoding="utf-8") as f:
        f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")


def set_failed(message: str):
    """Report the step as failed with ``message`` as the error annotation."""
    issue_command("error", message)


class ActionsLogHandler(logging.StreamHandler):
    """Logging handler that renders records as workflow commands.

    INFO lines are written as-is; DEBUG, WARNING and ERROR become ``::debug::``,
    ``::warning::`` and ``::error::`` commands.
    """

    def __init__(self, stream: TextIO | None = None):
        super().__init__(stream or sys.stdout)

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if record.levelno >= logging.ERROR:
            return f"::error::{escape_data(message)}"
        if record.levelno >= logging.WARNING:
            return f"::warning::{escape_data(message)}"
        if record.levelno < logging.INFO:
            return f"::debug::{escape_data(message)}"
        return message


def configure_action_logging(level: int = logging.INFO, stream: TextIO | None = None) -> logging.Handler:
    """Route ``oas_sync`` logging through an ActionsLogHandler."""
    handler = ActionsLogHandler(stream)
    handler.setFormatter(logging.Formatter("%(message)s"))

    package_logger = logging.getLogger("oas_sync")
    for existing in list(package_logger.handlers):
        if isinstance(existing, ActionsLogHandler):
            package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False
    return handler


def run_action(transport: httpx.BaseTransport | None = None) -> int:
    """Run the sync as a GitHub Action step and return the process exit code."""
    configure_action_logging()

    try:
        config = SyncConfig(
            api_token=get_input("brainfish_api_token") or None,
            catalog_id=get_input("catalog_id") or None,
            oas_file_path=get_input("oas_file_path") or None,
            base_url=get_input("base_url") or None,
        )
        level = logging.DEBUG if os.getenv("RUNNER_DEBUG") == "1" else config.log_level_value
        logging.getLogger("oas_sync").setLevel(level)

        result = sync_oas_file(config, transport=transport)

        set_output("status", result.status)
        set_output("uploaded_file", result.uploaded_file)
    except Exception as e:
        logger.error(f"❌ Error: {e}")
        set_failed(str(e))
        return EXIT_FAILURE

    return EXIT_SUCCESS
