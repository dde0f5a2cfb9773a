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
OAS Sync CLI (oas-sync)
Command-line interface for syncing OpenAPI documents to a Brainfish catalog.
"""

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel

from . import __version__
from .actions import run_action
from .config import SyncConfig
from .loader import read_oas_file
from .normalizer import normalize
from .pipeline import sync_oas_file

app = typer.Typer(name="oas-sync", help="Sync OpenAPI documents to a Brainfish catalog", no_args_is_help=True)

console = Console()
err_console = Console(stderr=True)


def configure_logging(level: str = "INFO"):
    """Send ``oas_sync`` logs to stderr through rich."""
    handler = RichHandler(console=err_console, show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s"))

    package_logger = logging.getLogger("oas_sync")
    package_logger.handlers = [handler]
    package_logger.setLevel(level.upper())
    package_logger.propagate = False


def _fail(error: Exception):
    logging.getLogger(__name__).error(f"❌ Error: {error}")
    err_console.print(f"[red]Error: {escape(str(error))}[/red]", highlight=False)
    raise typer.Exit(1)


@app.command()
def upload(
    file: str | None = typer.Option(None, "--file", "-f", help="Path to the OAS file (.yaml, .yml or .json)"),
    catalog_id: str | None = typer.Option(None, "--catalog-id", help="Target Brainfish catalog ID"),
    api_token: str | None = typer.Option(None, "--api-token", help="Brainfish API token", show_default=False),
    base_url: str | None = typer.Option(None, "--base-url", help="Brainfish base URL"),
    config_file: str | None = typer.Option(None, "--config", "-c", help="Path to a YAML or JSON configuration file"),
    log_level: str | None = typer.Option(None, "--log-level", help="Log level (DEBUG, INFO, WARNING, ERROR)"),
):
    """Upload an OAS file to a Brainfish catalog."""
    configure_logging()

    settings = {
        "api_token": api_token,
        "catalog_id": catalog_id,
        "oas_file_path": file,
        "base_url": base_url,
        "log_level": log_level,
    }

    try:
        if config_file:
            config = SyncConfig.from_file(config_file, **settings)
        else:
            config = SyncConfig(**settings)
        configure_logging(config.log_level)

        result = sync_oas_file(config)
    except Exception as e:
        _fail(e)

    console.print(
        Panel(
            f"{result.status}\n\n"
            f"Uploaded file: [bold]{escape(result.uploaded_file)}[/bold]\n"
            f"Catalog: {escape(result.catalog_id)}\n"
            f"HTTP status: {result.status_code}",
            title="OAS Sync",
            border_style="green",
        )
    )


@app.command()
def convert(
    path: str = typer.Argument(..., help="Path to the OAS file (.yaml, .yml or .json)"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write the JSON payload to this file"),
):
    """Normalize an OAS file to JSON without uploading it."""
    configure_logging("WARNING")

    try:
        payload = normalize(read_oas_file(path))
    except Exception as e:
        _fail(e)

    if output:
        try:
            output.write_bytes(payload.as_bytes())
        except OSError as e:
            _fail(e)
        err_console.print(f"[green]Wrote {escape(payload.file_name)} payload to {escape(str(output))}[/green]")
    else:
        typer.echo(payload.content)


@app.command()
def action():
    """Run as a GitHub Actions step, reading INPUT_* variables."""
    raise typer.Exit(run_action())


@app.command()
def version():
    """Show version information."""
    console.print(f"oas-sync {__version__}")


def main():
    app()


if __name__ == "__main__":
    main()
