"""Tests for the Typer CLI."""

import json

import pytest
import typer
from typer.testing import CliRunner

from starbuero import StarbueroClient
from starbuero.cli import doctor
from starbuero.cli import main as cli_main
from starbuero.cli.main import app, parse_assignments

runner = CliRunner()


@pytest.fixture
def fake_client(monkeypatch, service):
    def _build(debug):
        return StarbueroClient("cli-token", debug, transport=service.transport)

    monkeypatch.setattr(cli_main, "build_client", _build)
    return service


def test_parse_assignments_decodes_json_values():
    parsed = parse_assignments(
        ["page=1", "vip=false", 'mail_cc=["a@b.de"]', "name=Max Mustermann", "start=2022-01-01T13:37:00"]
    )
    assert parsed == {
        "page": 1,
        "vip": False,
        "mail_cc": ["a@b.de"],
        "name": "Max Mustermann",
        "start": "2022-01-01T13:37:00",
    }


def test_parse_assignments_rejects_missing_equals():
    with pytest.raises(typer.BadParameter):
        parse_assignments(["page"])


def test_operations_lists_catalogue(monkeypatch):
    monkeypatch.setattr(cli_main._console, "width", 240)

    result = runner.invoke(app, ["operations"])
    assert result.exit_code == 0
    assert "list_contacts" in result.stdout
    assert "delete_recurring_appointment" in result.stdout


def test_call_prints_payload(fake_client):
    fake_client.respond(200, json={"items": [{"id": 1}]})

    result = runner.invoke(app, ["call", "list_employees", "page=1", "limit=10"])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == {"items": [{"id": 1}]}
    sent = fake_client.requests[0]
    assert sent.url.params["page"] == "1"
    assert sent.headers["Authorization"] == "Bearer cli-token"


def test_call_validation_error_exits_without_request(fake_client):
    result = runner.invoke(app, ["call", "get_contact"])

    assert result.exit_code == 1
    assert fake_client.requests == []


def test_call_remote_failure_exits_1(fake_client):
    fake_client.respond(500, json={"error": "boom"})

    result = runner.invoke(app, ["call", "get_company_info"])

    assert result.exit_code == 1


def test_call_unknown_operation():
    result = runner.invoke(app, ["call", "drop_everything"])
    assert result.exit_code == 2


def test_call_unknown_argument(fake_client):
    result = runner.invoke(app, ["call", "get_contact", "contact=4"])
    assert result.exit_code == 2
    assert fake_client.requests == []


def test_doctor_run_reports_missing_token(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("STARBUERO_API_TOKEN", "")

    result = runner.invoke(app, ["doctor", "run"])

    assert result.exit_code == 1
    assert "MISSING" in result.stdout


def test_doctor_run_probes_api(monkeypatch, tmp_path, service):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("STARBUERO_API_TOKEN", "doctor-token-1234")
    monkeypatch.setattr(
        doctor,
        "build_client",
        lambda settings: StarbueroClient(settings.api_token, transport=service.transport),
    )

    result = runner.invoke(app, ["doctor", "run"])

    assert result.exit_code == 0
    assert service.requests[0].headers["Authorization"] == "Bearer doctor-token-1234"


def test_doctor_setup_writes_user_env(monkeypatch, tmp_path):
    env_file = tmp_path / "starbuero" / ".env"
    monkeypatch.setattr(
        doctor,
        "write_user_env_vars",
        lambda values: _write(values, env_file),
    )

    result = runner.invoke(app, ["doctor", "setup"], input="secret-token\n\n")

    assert result.exit_code == 0
    content = env_file.read_text(encoding="utf-8")
    assert "STARBUERO_API_TOKEN=secret-token" in content
    assert "STARBUERO_BASE_URL=https://backend.starbuero.de/external/api/v1" in content


def _write(values, env_file):
    from starbuero.core.config import write_user_env_vars

    return write_user_env_vars(values, env_path=env_file)
