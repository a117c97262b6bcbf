from __future__ import annotations

from typing import Any

import httpx
import pytest
from fastapi.testclient import TestClient

from glot_run.core.config import Config
from glot_run.core.errors import ResponseNotOkError
from glot_run.models.schemas import RunResult
from glot_run.services.runner import RunClient

from tests.test_runner import _fake_run_service, _hello_request


def test_run_client_delegates_to_run() -> None:
    seen: list[dict[str, Any]] = []
    http = TestClient(_fake_run_service(200, {"stdout": "hi", "stderr": "", "error": ""}, seen))
    client = RunClient(Config(base_url="http://glot.test", access_token="abc"), client=http)

    assert client.run(_hello_request()) == RunResult(stdout="hi", stderr="", error="")
    assert client.run(_hello_request()).stdout == "hi"
    assert len(seen) == 2
    assert all(s["headers"]["x-access-token"] == "abc" for s in seen)


def test_run_client_surfaces_errors() -> None:
    seen: list[dict[str, Any]] = []
    http = TestClient(_fake_run_service(404, {"message": "image not found"}, seen))
    client = RunClient(Config(base_url="http://glot.test", access_token="abc"), client=http)

    with pytest.raises(ResponseNotOkError, match="image not found"):
        client.run(_hello_request())


def test_context_manager_closes_only_its_own_client() -> None:
    config = Config(base_url="http://glot.test", access_token="abc")

    with RunClient(config) as owned:
        inner = owned._client
        assert isinstance(inner, httpx.Client)
    assert inner.is_closed
    assert owned._client is None

    shared = httpx.Client()
    with RunClient(config, client=shared):
        pass
    assert not shared.is_closed
    shared.close()


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GLOT_RUN_BASE_URL", "http://glot.local/")
    monkeypatch.setenv("GLOT_RUN_ACCESS_TOKEN", "token-123")
    monkeypatch.delenv("GLOT_RUN_TIMEOUT_SEC", raising=False)

    client = RunClient.from_env()

    assert client.config.run_url() == "http://glot.local/run"
    assert client.config.timeout_sec == 300
