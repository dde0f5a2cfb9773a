"""Pytest configuration and shared fixtures for the OAS sync tests."""

# Ensure project root on sys.path for imports
import logging
import os
import sys

import httpx
import pytest

root = os.path.dirname(os.path.abspath(__file__))
proj = os.path.abspath(os.path.join(root, ".."))
if proj not in sys.path:
    sys.path.insert(0, proj)

SYNC_ENV_VARS = (
    "INPUT_BRAINFISH_API_TOKEN",
    "INPUT_CATALOG_ID",
    "INPUT_OAS_FILE_PATH",
    "INPUT_BASE_URL",
    "BRAINFISH_API_TOKEN",
    "BRAINFISH_CATALOG_ID",
    "OAS_FILE_PATH",
    "BRAINFISH_BASE_URL",
    "OAS_SYNC_LOG_LEVEL",
    "GITHUB_OUTPUT",
    "RUNNER_DEBUG",
)

OAS_YAML = """\
openapi: 3.0.3
info:
  title: Pet Store
  version: 1.0.0
  description: "Café API"
paths:
  /pets:
    get:
      operationId: listPets
      parameters:
        - name: limit
          in: query
          required: false
          schema:
            type: integer
            format: int32
      responses:
        "200":
          description: A list of pets
components:
  schemas:
    Pet:
      type: object
      required: [id, name]
      properties:
        id: {type: integer}
        name: {type: string}
        tag: {type: string, nullable: true}
"""

# CRLF line endings and uneven spacing are kept as-is on upload
OAS_JSON = '{\r\n  "openapi": "3.0.3",\r\n  "info": {"title": "Pet Store",   "version": "1.0.0"},\r\n  "paths": {}\r\n}\r\n'


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Isolate tests from sync settings in the outer environment."""
    for name in SYNC_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo handler changes made by the CLI and action entry points."""
    package_logger = logging.getLogger("oas_sync")
    handlers, level, propagate = list(package_logger.handlers), package_logger.level, package_logger.propagate
    yield
    package_logger.handlers = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate


@pytest.fixture
def yaml_file(tmp_path):
    path = tmp_path / "petstore.yaml"
    path.write_text(OAS_YAML, encoding="utf-8")
    return path


@pytest.fixture
def json_file(tmp_path):
    path = tmp_path / "petstore.json"
    path.write_bytes(OAS_JSON.encode("utf-8"))
    return path


class MockCatalog:
    """Stand-in for the catalog upload endpoint; records every request."""

    def __init__(self, status_code: int = 201, body: str = '{"ok": true}') -> None:
        self.status_code = status_code
        self.body = body
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


def extract_file_part(request: httpx.Request) -> bytes:
    """Return the content of the single file part in a multipart request."""
    boundary = request.headers["Content-Type"].split("boundary=", 1)[1].encode("ascii")
    body = request.content
    closing = b"\r\n--" + boundary + b"--\r\n"
    assert body.endswith(closing)
    part = body[: -len(closing)]
    return part.split(b"\r\n\r\n", 1)[1]


@pytest.fixture
def mock_catalog():
    return MockCatalog()
