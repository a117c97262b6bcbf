from __future__ import annotations

import logging
from types import TracebackType

import httpx

from glot_run.core.config import Config
from glot_run.core.errors import SerializeRequestError
from glot_run.models.schemas import Language, RunRequest, RunResult
from glot_run.services.admin import create_language
from glot_run.services.transport import check_response, parse_body, send


logger = logging.getLogger(__name__)


def run(config: Config, request: RunRequest, *, client: httpx.Client | None = None) -> RunResult:
    """Execute ``request`` on the run service described by ``config``.

    Exactly one HTTP request is made; nothing is retried. When ``client`` is
    given it is used as-is and left open, otherwise a client is created for
    this call only.

    Raises a :class:`~glot_run.core.errors.RunError` subclass naming the stage
    that failed.
    """
    body = _serialize(request)
    logger.debug(
        "Running %s program (%d files) in %s",
        request.payload.language,
        len(request.payload.files),
        request.image,
    )

    if client is None:
        with httpx.Client(timeout=config.timeout_sec) as owned:
            response = _post(owned, config, body)
    else:
        response = _post(client, config, body)

    return parse_body(check_response(response), RunResult)


def _serialize(request: RunRequest) -> bytes:
    try:
        return request.model_dump_json().encode("utf-8")
    except ValueError as exc:  # PydanticSerializationError, UnicodeEncodeError
        raise SerializeRequestError(exc) from exc


def _post(client: httpx.Client, config: Config, body: bytes) -> httpx.Response:
    return send(
        client,
        "POST",
        config.run_url(),
        headers={
            "X-Access-Token": config.access_token,
            "Content-Type": "application/json",
        },
        body=body,
        timeout=config.timeout_sec,
    )


class RunClient:
    """A :class:`Config` bound to an optional shared ``httpx.Client``."""

    def __init__(self, config: Config, client: httpx.Client | None = None) -> None:
        self.config = config
        self._client = client
        self._owns_client = False

    @classmethod
    def from_env(cls) -> "RunClient":
        return cls(Config.from_env())

    def run(self, request: RunRequest) -> RunResult:
        return run(self.config, request, client=self._client)

    def create_language(self, language: Language) -> Language:
        return create_language(self.config, language, client=self._client)

    def close(self) -> None:
        if self._owns_client and self._client is not None:
            self._client.close()
            self._client = None
            self._owns_client = False

    def __enter__(self) -> "RunClient":
        if self._client is None:
            self._client = httpx.Client(timeout=self.config.timeout_sec)
            self._owns_client = True
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
