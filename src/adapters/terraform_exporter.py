"""Terraform configuration export.

Why it lives in adapters:
- Writing HCL files is an infrastructure detail (filesystem + Jinja2).
- The Core only knows the list of `ImportRecord` to export.

Output is two files in the target directory:
- `main.tf`: static provider/version declaration.
- `auth0_import.tf`: one `import { ... }` block per record, in order.

Writes are not atomic: if `auth0_import.tf` fails, `main.tf` stays behind.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from core.domain.models import ImportRecord
from core.errors import NoImportDataError
from core.logging_utils import get_logger

logger = get_logger(__name__)

MAIN_FILE_NAME = "main.tf"
IMPORT_FILE_NAME = "auth0_import.tf"

_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
_DIR_MODE = 0o755


def _get_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )


def render_main_file() -> str:
    """Static `main.tf` content (no substitution)."""

    return _get_env().get_template(f"{MAIN_FILE_NAME}.j2").render()


def render_import_file(records: Sequence[ImportRecord]) -> str:
    """`auth0_import.tf` content: header comment plus one block per record."""

    template = _get_env().get_template(f"{IMPORT_FILE_NAME}.j2")
    return template.render(records=records)


def generate_terraform_config_files(
    output_dir: str | Path,
    data: Sequence[ImportRecord],
) -> tuple[Path, Path]:
    """Write `main.tf` and `auth0_import.tf` into `output_dir`.

    - Empty `data` raises `NoImportDataError` before touching the filesystem.
    - `output_dir` and missing parents are created; an existing directory is fine.
    - Any `OSError` or Jinja2 `TemplateError` propagates unchanged.

    Returns the paths of both written files.
    """

    if not data:
        raise NoImportDataError()

    out = Path(output_dir)
    out.mkdir(mode=_DIR_MODE, parents=True, exist_ok=True)

    main_path = out / MAIN_FILE_NAME
    main_path.write_text(render_main_file(), encoding="utf-8", newline="\n")
    logger.info("Wrote %s", main_path)

    import_path = out / IMPORT_FILE_NAME
    import_path.write_text(render_import_file(data), encoding="utf-8", newline="\n")
    logger.info("Wrote %s (%d import block(s))", import_path, len(data))

    return main_path, import_path
