"""Request/response handling shared by the run and admin endpoints.

One HTTP request per call. A response is only handed back once its body has
been read, so failures while decoding the body keep the status code.
"""

from __future__ import annotations

import logging
from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from glot_run.core.errors import (
    DeserializeErrorResponseError,
    DeserializeResponseError,
    EmptyResponseError,
    RequestError,
    ResponseNotOkError,
)
from glot_run.models.schemas import ErrorBody, ErrorResponse


logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def send(
    client: httpx.Client,
    method: str,
    url: str,
    *,
    headers: dict[str, str],
    body: bytes,
    timeout: float,
) -> httpx.Response:
    request = client.build_request(method, url, content=body, headers=headers, timeout=timeout)
    logger.debug("%s %s (%d bytes)", method, url, len(body))

    try:
        response = client.send(request, stream=True)
    except httpx.DecodingError as exc:
        # transport decoded the body eagerly; the status never reached us
        raise DeserializeResponseError(None, exc) from exc
    except (httpx.TransportError, httpx.TooManyRedirects) as exc:
        logger.warning("%s %s failed: %s", method, url, exc)
        raise RequestError(exc) from exc

    if not isinstance(response, httpx.Response):
        raise EmptyResponseError()

    status_code = response.status_code
    try:
        response.read()
    except httpx.DecodingError as exc:
        logger.warning("%s %s -> HTTP %d with an undecodable body", method, url, status_code)
        if response.is_success:
            raise DeserializeResponseError(status_code, exc) from exc
        raise DeserializeErrorResponseError(status_code, exc) from exc
    except httpx.TransportError as exc:
        logger.warning("%s %s failed while reading the body: %s", method, url, exc)
        raise RequestError(exc) from exc
    finally:
        response.close()

    logger.debug("%s %s -> HTTP %d", method, url, status_code)
    return response


def check_response(response: httpx.Response) -> httpx.Response:
    if response.is_success:
        return response

    status_code = response.status_code
    try:
        error_body = ErrorBody.model_validate_json(response.content)
    except ValidationError as exc:
        logger.warning("Service answered HTTP %d with an unreadable body", status_code)
        raise DeserializeErrorResponseError(status_code, exc) from exc

    logger.warning("Service answered HTTP %d: %s", status_code, error_body.message)
    raise ResponseNotOkError(ErrorResponse(status_code=status_code, body=error_body))


def parse_body(response: httpx.Response, model: type[ModelT]) -> ModelT:
    try:
        return model.model_validate_json(response.content)
    except ValidationError as exc:
        raise DeserializeResponseError(response.status_code, exc) from exc
