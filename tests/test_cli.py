"""Tests for the oas-sync command-line interface."""

import json
from pathlib import Path

import pytest
import yaml
from typer.testing import CliRunner

from oas_sync import __version__
from oas_sync import cli
from oas_sync.pipeline import sync_oas_file

from conftest import OAS_YAML, MockCatalog

runner = CliRunner()


@pytest.fixture
def catalog(monkeypatch):
    """Route CLI uploads to a mock catalog."""
    catalog = MockCatalog(status_code=201)
    monkeypatch.setattr(cli, "sync_oas_file", lambda config: sync_oas_file(config, transport=catalog.transport))
    return catalog


class TestUploadCommand:
    def test_upload_yaml(self, catalog, yaml_file):
        result = runner.invoke(
            cli.app,
            ["upload", "--file", str(yaml_file), "--catalog-id", "cat_42", "--api-token", "tok_123"],
        )

        assert result.exit_code == 0, result.output
        assert "petstore.json" in result.output
        assert "successfully synced" in result.output
        assert catalog.requests[0].headers["Authorization"] == "Bearer tok_123"

    def test_options_fall_back_to_environment(self, catalog, yaml_file, monkeypatch):
        monkeypatch.setenv("BRAINFISH_API_TOKEN", "tok_env")
        monkeypatch.setenv("BRAINFISH_CATALOG_ID", "cat_env")

        result = runner.invoke(cli.app, ["upload", "--file", str(yaml_file)])

        assert result.exit_code == 0, result.output
        request = catalog.requests[0]
        assert request.headers["Authorization"] == "Bearer tok_env"
        assert request.url.params["catalogId"] == "cat_env"

    def test_config_file(self, catalog, yaml_file, tmp_path):
        config_file = tmp_path / "oas-sync.yaml"
        config_file.write_text(
            yaml.safe_dump({"api_token": "tok_file", "catalog_id": "cat_file", "oas_file_path": str(yaml_file)})
        )

        result = runner.invoke(cli.app, ["upload", "--config", str(config_file), "--catalog-id", "cat_cli"])

        assert result.exit_code == 0, result.output
        request = catalog.requests[0]
        assert request.headers["Authorization"] == "Bearer tok_file"
        assert request.url.params["catalogId"] == "cat_cli"

    def test_missing_token(self, catalog, yaml_file):
        result = runner.invoke(cli.app, ["upload", "--file", str(yaml_file), "--catalog-id", "cat_42"])

        assert result.exit_code == 1
        assert "brainfish_api_token is required" in result.output
        assert catalog.requests == []

    def test_missing_file(self, catalog, tmp_path):
        result = runner.invoke(
            cli.app,
            ["upload", "--file", str(tmp_path / "missing.yaml"), "--catalog-id", "cat", "--api-token", "tok"],
        )

        assert result.exit_code == 1
        assert "OAS file not found" in result.output
        assert catalog.requests == []

    def test_server_error(self, monkeypatch, yaml_file):
        failing = MockCatalog(status_code=500, body="server error")
        monkeypatch.setattr(cli, "sync_oas_file", lambda config: sync_oas_file(config, transport=failing.transport))

        result = runner.invoke(
            cli.app, ["upload", "--file", str(yaml_file), "--catalog-id", "cat", "--api-token", "tok"]
        )

        assert result.exit_code == 1
        assert "Upload failed with status 500" in result.output

    def test_numeric_catalog_id_in_config_file(self, catalog, yaml_file, tmp_path):
        config_file = tmp_path / "oas-sync.yaml"
        config_file.write_text(f"api_token: tok\ncatalog_id: 12345\noas_file_path: {yaml_file}\n")

        result = runner.invoke(cli.app, ["upload", "--config", str(config_file)])

        assert result.exit_code == 0, result.output
        assert "Catalog: 12345" in result.output
        assert len(catalog.requests) == 1

    def test_config_path_is_directory(self, catalog, tmp_path):
        result = runner.invoke(cli.app, ["upload", "--config", str(tmp_path)])

        assert result.exit_code == 1
        assert "Cannot read configuration file" in result.output
        assert catalog.requests == []

    def test_non_utf8_config_file(self, catalog, tmp_path):
        config_file = tmp_path / "oas-sync.yaml"
        config_file.write_bytes(b"api_token: \xff\xfe\n")

        result = runner.invoke(cli.app, ["upload", "--config", str(config_file)])

        assert result.exit_code == 1
        assert "Invalid configuration file format" in result.output


class TestConvertCommand:
    def test_convert_to_stdout(self, yaml_file):
        result = runner.invoke(cli.app, ["convert", str(yaml_file)])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == yaml.safe_load(OAS_YAML)

    def test_convert_to_file(self, yaml_file, tmp_path):
        output = tmp_path / "out.json"
        result = runner.invoke(cli.app, ["convert", str(yaml_file), "--output", str(output)])

        assert result.exit_code == 0, result.output
        assert json.loads(output.read_text(encoding="utf-8")) == yaml.safe_load(OAS_YAML)

    def test_convert_rejects_unsupported_format(self, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("hello")

        result = runner.invoke(cli.app, ["convert", str(path)])
        assert result.exit_code == 1
        assert "Unsupported file format" in result.output

    def test_convert_output_not_writable(self, yaml_file, tmp_path):
        output = tmp_path / "missing-dir" / "out.json"
        result = runner.invoke(cli.app, ["convert", str(yaml_file), "--output", str(output)])

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert not output.exists()

    def test_convert_unreadable_file(self, yaml_file, monkeypatch):
        def deny(self):
            raise PermissionError(13, "Permission denied", str(self))

        monkeypatch.setattr(Path, "read_bytes", deny)
        result = runner.invoke(cli.app, ["convert", str(yaml_file)])

        assert result.exit_code == 1
        assert "Failed to read OAS file" in result.output


class TestOtherCommands:
    def test_version(self):
        result = runner.invoke(cli.app, ["version"])
        assert result.exit_code == 0
        assert f"oas-sync {__version__}" in result.output

    def test_action_without_inputs(self):
        result = runner.invoke(cli.app, ["action"])
        assert result.exit_code == 1
        assert "::error::brainfish_api_token is required" in result.output
