"""
Unit-тесты клиента healthctl, CLI и probe-цикла (без сети: подставляем фейковую сессию).
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import pytest
import requests

import probe
from healthctl.cli import main
from healthctl.client import HealthClient, HealthClientError
from scripts.check_env_templates import check_template, parse_env

ROOT = Path(__file__).resolve().parents[1]


class FakeResponse:
    def __init__(self, status_code: int, text: str = "") -> None:
        self.status_code = status_code
        self.text = text


class FakeSession:
    def __init__(self, response: Optional[FakeResponse] = None, error: Optional[Exception] = None) -> None:
        self.response = response
        self.error = error
        self.calls: list[tuple[str, str, dict]] = []

    def _do(self, method: str, url: str, **kwargs) -> FakeResponse:
        self.calls.append((method, url, kwargs))
        if self.error is not None:
            raise self.error
        assert self.response is not None
        return self.response

    def head(self, url: str, **kwargs) -> FakeResponse:
        return self._do("HEAD", url, **kwargs)

    def post(self, url: str, **kwargs) -> FakeResponse:
        return self._do("POST", url, **kwargs)

    def get(self, url: str, **kwargs) -> FakeResponse:
        return self._do("GET", url, **kwargs)


def test_check_ok_sends_request_id() -> None:
    session = FakeSession(FakeResponse(200))
    client = HealthClient("http://web:8000/", session=session)

    res = client.check()
    assert res.ok is True
    assert res.status == 200
    method, url, kwargs = session.calls[0]
    assert (method, url) == ("HEAD", "http://web:8000/health")
    assert kwargs["headers"]["X-Request-ID"] == res.request_id


def test_check_503_is_not_ok() -> None:
    res = HealthClient("http://web:8000", session=FakeSession(FakeResponse(503))).check()
    assert res.ok is False
    assert res.status == 503
    assert res.error is None


def test_check_network_error_does_not_raise() -> None:
    session = FakeSession(error=requests.ConnectionError("refused"))
    res = HealthClient("http://web:8000", session=session).check()
    assert res.ok is False
    assert res.status is None
    assert "refused" in (res.error or "")


def test_disable_changed_and_noop() -> None:
    client = HealthClient("http://web:8000", session=FakeSession(FakeResponse(200, "DISABLING the server\n")))
    res = client.disable()
    assert res.changed is True
    assert res.message == "DISABLING the server"

    client = HealthClient("http://web:8000", session=FakeSession(FakeResponse(200, "NoOp, already enabled\n")))
    assert client.enable().changed is False


def test_toggle_errors_raise() -> None:
    client = HealthClient("http://web:8000", session=FakeSession(FakeResponse(405)))
    with pytest.raises(HealthClientError):
        client.enable()

    client = HealthClient("http://web:8000", session=FakeSession(error=requests.Timeout("slow")))
    with pytest.raises(HealthClientError):
        client.disable()


def test_cli_status_exit_codes(capsys) -> None:
    assert main(["status"], client=HealthClient("http://x", session=FakeSession(FakeResponse(200)))) == 0
    assert main(["status"], client=HealthClient("http://x", session=FakeSession(FakeResponse(503)))) == 2
    err_client = HealthClient("http://x", session=FakeSession(error=requests.ConnectionError("down")))
    assert main(["status"], client=err_client) == 1
    assert "ERROR" in capsys.readouterr().err


def test_cli_disable_prints_message(capsys) -> None:
    client = HealthClient("http://x", session=FakeSession(FakeResponse(200, "DISABLING the server\n")))
    assert main(["disable"], client=client) == 0
    assert capsys.readouterr().out == "DISABLING the server\n"


def test_probe_run_counts_ok() -> None:
    client = HealthClient("http://x", session=FakeSession(FakeResponse(200)))
    assert probe.run(client, interval_s=0, max_iterations=3) == 3

    client = HealthClient("http://x", session=FakeSession(FakeResponse(503)))
    assert probe.run(client, interval_s=0, max_iterations=2) == 0


def test_env_templates_in_repo_are_valid() -> None:
    for name in (".env.blue.example", ".env.green.example"):
        assert check_template(ROOT / ".envs" / name) == []


def test_env_template_missing_keys(tmp_path: Path) -> None:
    p = tmp_path / ".env.example"
    p.write_text("# comment\nZONE=red\n", encoding="utf-8")
    errors = check_template(p)
    assert any("missing keys" in e for e in errors)
    assert any("ZONE must be blue or green" in e for e in errors)


def test_parse_env_skips_comments_and_junk() -> None:
    values = parse_env("# ZONE=green\n\nnot a pair\nZONE = blue \nSECRET_KEY=a=b\n")
    assert values == {"ZONE": "blue", "SECRET_KEY": "a=b"}
