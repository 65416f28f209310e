"""Tests for the Typer CLI."""

import json
import sys

import httpx
import pytest
from typer.testing import CliRunner

import cli.doctor
from adapters.http_client import build_async_client
from cli.main import app
from cli.ui_components import render_state
from core.domain.exceptions import SoapCallError
from core.domain.state import Empty, Error, Loading, Success

runner = CliRunner()


class TestRenderState:
    """Test state rendering."""

    def test_empty_renders_nothing(self):
        assert render_state(Empty()) is None

    def test_loading(self):
        assert render_state(Loading()).plain == "Loading..."

    def test_success_shows_text_verbatim(self):
        assert render_state(Success(celsius_text="37.0000")).plain == "Result: 37.0000 °C"

    def test_error(self):
        assert render_state(Error(message="offline")).plain == "Error: offline"

    def test_markup_in_payload_is_not_interpreted(self):
        assert render_state(Success(celsius_text="[bold]x[/bold]")).plain == "Result: [bold]x[/bold] °C"


class TestConvertCommand:
    """Test `tempconvert convert`."""

    def test_success_shows_loading_then_result(self, fake_client):
        fake_client.queue("37")

        result = runner.invoke(app, ["convert", "98.6"])

        assert result.exit_code == 0, result.output
        assert "Loading..." in result.output
        assert "Result: 37 °C" in result.output
        assert result.output.index("Loading...") < result.output.index("Result: 37 °C")
        assert fake_client.calls == ["98.6"]

    def test_raw_prints_only_payload(self, fake_client):
        fake_client.queue("37")

        result = runner.invoke(app, ["convert", "98.6", "--raw"])

        assert result.exit_code == 0
        assert result.stdout == "37\n"

    def test_json_prints_final_state(self, fake_client):
        fake_client.queue("37")

        result = runner.invoke(app, ["convert", "98.6", "--json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {"kind": "success", "celsius_text": "37"}

    def test_failure_exits_with_error(self, fake_client):
        fake_client.queue(SoapCallError("Connection refused"))

        result = runner.invoke(app, ["convert", "98.6"])

        assert result.exit_code == 1
        assert "Error: Connection refused" in result.output

    def test_blank_value_is_not_submitted(self, fake_client):
        result = runner.invoke(app, ["convert", "   "])

        assert result.exit_code == 2
        assert fake_client.calls == []

    def test_invalid_log_level(self, fake_client):
        result = runner.invoke(app, ["--log-level", "trace", "convert", "98.6"])

        assert result.exit_code == 2
        assert fake_client.calls == []

    def test_invalid_env_setting_is_not_blamed_on_log_level(self, fake_client, monkeypatch):
        """Test a bad TEMPCONVERT_* variable reports the offending field."""
        monkeypatch.setenv("TEMPCONVERT_BLOCKING_IO_WORKERS", "0")

        result = runner.invoke(app, ["convert", "98.6"])

        assert result.exit_code == 2
        assert "blocking_io_workers" in result.output
        assert "--log-level" not in result.output
        assert fake_client.calls == []


class TestInteractiveCommand:
    """Test `tempconvert interactive`."""

    def test_converts_until_quit_and_ignores_blank(self, fake_client):
        fake_client.queue("37")
        fake_client.queue("0")

        result = runner.invoke(app, ["interactive"], input="98.6\n\n32\nquit\n")

        assert result.exit_code == 0, result.output
        assert fake_client.calls == ["98.6", "32"]
        assert "Result: 37 °C" in result.output
        assert "Result: 0 °C" in result.output

    def test_stops_on_eof(self, fake_client):
        fake_client.queue(SoapCallError("offline"))

        result = runner.invoke(app, ["interactive"], input="98.6\n")

        assert result.exit_code == 0, result.output
        assert "Error: offline" in result.output


def _mock_http(monkeypatch, response: httpx.Response | Exception) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if isinstance(response, Exception):
            raise response
        return response

    def _build(settings=None, **kwargs):
        return build_async_client(settings, transport=httpx.MockTransport(handler))

    monkeypatch.setattr(cli.doctor, "build_async_client", _build)


class TestDoctorCommand:
    """Test `tempconvert doctor`."""

    def test_run_ok(self, fake_client, monkeypatch):
        _mock_http(monkeypatch, httpx.Response(200, text="ok"))

        result = runner.invoke(app, ["doctor", "run"])

        assert result.exit_code == 0, result.output
        assert "HTTP 200" in result.output

    def test_run_connectivity_failure(self, fake_client, monkeypatch):
        _mock_http(monkeypatch, httpx.ConnectError("unreachable"))

        result = runner.invoke(app, ["doctor", "run"])

        assert result.exit_code == 1
        assert "FAIL" in result.output

    def test_run_live_conversion(self, fake_client, monkeypatch):
        _mock_http(monkeypatch, httpx.Response(200, text="ok"))
        fake_client.queue("0")

        result = runner.invoke(app, ["doctor", "run", "--live"])

        assert result.exit_code == 0, result.output
        assert fake_client.calls == ["32"]

    @pytest.mark.skipif(
        sys.platform.startswith("win") or sys.platform == "darwin",
        reason="XDG config dir is only used on Linux",
    )
    def test_setup_writes_user_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        result = runner.invoke(app, ["doctor", "setup"], input="7\n2\ninfo\n")

        assert result.exit_code == 0, result.output
        text = (tmp_path / "tempconvert" / ".env").read_text(encoding="utf-8")
        assert "TEMPCONVERT_HTTP_TIMEOUT_SECONDS=7" in text
        assert "TEMPCONVERT_BLOCKING_IO_WORKERS=2" in text
        assert "TEMPCONVERT_LOG_LEVEL=INFO" in text
