from __future__ import annotations

import httpx
import pytest
from typer.testing import CliRunner

import cli.main as cli_main
from adapters.management_api import build_management_client
from adapters.terraform_exporter import IMPORT_FILE_NAME, MAIN_FILE_NAME

runner = CliRunner()


def _install_transport(monkeypatch, handler) -> None:
    monkeypatch.setenv("AUTH0_DOMAIN", "tenant.auth0.com")
    monkeypatch.setenv("AUTH0_ACCESS_TOKEN", "tok")
    monkeypatch.setattr(
        cli_main,
        "build_management_client",
        lambda settings: build_management_client(settings, transport=httpx.MockTransport(handler)),
    )


def _clients_handler(clients: list[dict]):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={"clients": clients, "start": 0, "limit": 50, "total": len(clients)},
        )

    return handler


@pytest.mark.parametrize("group, command", [("terraform", "generate"), ("tf", "gen"), ("terraform", "export")])
def test_generate_writes_both_files(monkeypatch, tmp_path, group, command) -> None:
    _install_transport(monkeypatch, _clients_handler([{"client_id": "auth0|123", "name": "My App"}]))
    out = tmp_path / "tf"

    result = runner.invoke(cli_main.app, [group, command, "--output-dir", str(out)])

    assert result.exit_code == 0, result.output
    assert "generated successfully" in result.output
    assert (out / MAIN_FILE_NAME).is_file()
    content = (out / IMPORT_FILE_NAME).read_text(encoding="utf-8")
    assert 'id = "auth0|123"' in content
    assert "to = auth0_client.my_app" in content


def test_generate_defaults_to_current_directory(monkeypatch, tmp_path) -> None:
    _install_transport(monkeypatch, _clients_handler([{"client_id": "c1", "name": "One"}]))

    result = runner.invoke(cli_main.app, ["terraform", "generate"])

    assert result.exit_code == 0, result.output
    assert (tmp_path / IMPORT_FILE_NAME).is_file()


def test_generate_fails_without_resources(monkeypatch, tmp_path) -> None:
    _install_transport(monkeypatch, _clients_handler([]))

    result = runner.invoke(cli_main.app, ["terraform", "generate", "-o", str(tmp_path / "out")])

    assert result.exit_code == 1
    assert "no import data available" in result.output
    assert not (tmp_path / "out").exists()


def test_generate_surfaces_api_errors(monkeypatch, tmp_path) -> None:
    _install_transport(monkeypatch, lambda request: httpx.Response(403, json={"error": "Forbidden"}))

    result = runner.invoke(cli_main.app, ["terraform", "generate", "-o", str(tmp_path / "out")])

    assert result.exit_code == 1
    assert "403" in result.output
    assert not (tmp_path / "out").exists()


def test_generate_requires_configuration(tmp_path) -> None:
    result = runner.invoke(cli_main.app, ["terraform", "generate", "-o", str(tmp_path / "out")])

    assert result.exit_code == 1
    assert "AUTH0_DOMAIN" in result.output


def test_generate_rejects_unknown_resource_types(monkeypatch, tmp_path) -> None:
    _install_transport(monkeypatch, _clients_handler([{"client_id": "c1", "name": "One"}]))

    result = runner.invoke(cli_main.app, ["terraform", "generate", "-r", "auth0_widget", "-o", str(tmp_path)])

    assert result.exit_code == 1
    assert "auth0_widget" in result.output


def test_generate_rejects_unknown_resource_types_before_configuration(tmp_path) -> None:
    result = runner.invoke(cli_main.app, ["terraform", "generate", "-r", "auth0_widget", "-o", str(tmp_path / "out")])

    assert result.exit_code == 1
    assert "auth0_widget" in result.output
    assert "AUTH0_DOMAIN" not in result.output


def test_generate_surfaces_malformed_payloads(monkeypatch, tmp_path) -> None:
    _install_transport(monkeypatch, _clients_handler([{"name": "no id"}]))

    result = runner.invoke(cli_main.app, ["terraform", "generate", "-o", str(tmp_path / "out")])

    assert result.exit_code == 1
    assert "validation error" in result.output
    assert not (tmp_path / "out").exists()


def test_generate_surfaces_filesystem_errors(monkeypatch, tmp_path) -> None:
    _install_transport(monkeypatch, _clients_handler([{"client_id": "c1", "name": "One"}]))
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    result = runner.invoke(cli_main.app, ["terraform", "generate", "-o", str(blocker)])

    assert result.exit_code == 1
    assert "Error:" in result.output
    assert blocker.is_file()
    assert not (tmp_path / MAIN_FILE_NAME).exists()
