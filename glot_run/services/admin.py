"""Language management on the run service's admin API."""

from __future__ import annotations

import logging

import httpx

from glot_run.core.config import Config
from glot_run.core.errors import SerializeRequestError
from glot_run.models.schemas import Language
from glot_run.services.transport import check_response, parse_body, send


logger = logging.getLogger(__name__)


def create_language(config: Config, language: Language, *, client: httpx.Client | None = None) -> Language:
    """Register ``language`` (name, version, image) with the run service.

    Requires ``config.admin_token``; the service answers with the stored
    language. Failures are classified exactly like :func:`~glot_run.services.runner.run`.
    """
    if config.admin_token is None:
        raise ValueError("admin_token is required to manage languages")

    try:
        body = language.model_dump_json(include={"name", "version", "image"}).encode("utf-8")
    except ValueError as exc:
        raise SerializeRequestError(exc) from exc

    logger.debug("Registering %s:%s -> %s", language.name, language.version, language.image)

    headers = {
        "Authorization": f"Token {config.admin_token}",
        "Content-Type": "application/json",
    }
    if client is None:
        with httpx.Client(timeout=config.timeout_sec) as owned:
            response = send(owned, "PUT", config.languages_url(), headers=headers, body=body, timeout=config.timeout_sec)
    else:
        response = send(client, "PUT", config.languages_url(), headers=headers, body=body, timeout=config.timeout_sec)

    return parse_body(check_response(response), Language)
