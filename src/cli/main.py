"""CLI entry point (Typer).

Commands stay thin: they load settings, delegate fetching to
`core.services.import_pipeline` and writing to `adapters.terraform_exporter`,
and translate failures into a red message plus exit code 1.
"""

from __future__ import annotations

import asyncio

import httpx
import typer
from jinja2 import TemplateError
from pydantic import ValidationError
from rich.console import Console

from adapters.management_api import ManagementAPI, build_management_client
from adapters.terraform_exporter import generate_terraform_config_files
from cli.ui_components import build_import_table, print_error, print_generation_success
from core.config import AppSettings
from core.domain.models import ImportDataList
from core.errors import Auth0CLIError
from core.logging_utils import configure_logging, get_logger
from core.services.import_pipeline import (
    build_resource_fetchers,
    fetch_import_data,
    select_resource_types,
    supported_resource_types,
)

logger = get_logger(__name__)

app = typer.Typer(no_args_is_help=True, help="Manage and export your Auth0 tenant.")

terraform_app = typer.Typer(
    no_args_is_help=True,
    help=(
        "Manage terraform configuration for your Auth0 Tenant. "
        "Facilitates the integration of Auth0 with Terraform, an Infrastructure as Code tool."
    ),
)
app.add_typer(terraform_app, name="terraform")
app.add_typer(terraform_app, name="tf", hidden=True)

_console = Console()
_err_console = Console(stderr=True)

_HANDLED_ERRORS = (Auth0CLIError, httpx.HTTPError, ValidationError, OSError, TemplateError)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    ctx.obj = {"verbose": verbose}
    configure_logging("DEBUG" if verbose else "WARNING")


async def _collect_import_data(settings: AppSettings, resource_types: list[str]) -> ImportDataList:
    async with build_management_client(settings) as client:
        api = ManagementAPI(client, page_size=settings.page_size)
        fetchers = build_resource_fetchers(api, resource_types)
        return await fetch_import_data(*fetchers)


def generate(
    ctx: typer.Context,
    output_dir: str = typer.Option(
        "./",
        "--output-dir",
        "-o",
        help=(
            "Output directory for the generated Terraform config files. If not provided, "
            "the files will be saved in the current working directory."
        ),
    ),
    resources: list[str] | None = typer.Option(
        None,
        "--resources",
        "-r",
        help=f"Resource types to export (repeatable). Default: all ({', '.join(supported_resource_types())}).",
    ),
) -> None:
    """Generate terraform configuration for your Auth0 Tenant.

    Scans the tenant and writes `main.tf` plus `auth0_import.tf` (HCL import
    blocks for every existing resource) into the output directory.
    """

    verbose = bool((ctx.obj or {}).get("verbose"))
    try:
        resource_types = select_resource_types(resources)
        settings = AppSettings()
        if not verbose:
            configure_logging(settings.log_level)
        data = asyncio.run(_collect_import_data(settings, resource_types))
        paths = generate_terraform_config_files(output_dir, data)
    except _HANDLED_ERRORS as exc:
        logger.debug("terraform generate failed", exc_info=True)
        print_error(_err_console, exc)
        raise typer.Exit(code=1) from exc

    if verbose:
        _console.print(build_import_table(data, paths))
    print_generation_success(_console)


terraform_app.command(name="generate")(generate)
# Aliases.
terraform_app.command(name="gen", hidden=True)(generate)
terraform_app.command(name="export", hidden=True)(generate)


def run() -> None:
    app(prog_name="auth0")
