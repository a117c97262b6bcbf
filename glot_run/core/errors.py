"""Failures raised by the run client.

Every failure derives from :class:`RunError`. Each subclass names the stage
that failed; the underlying exception, when there is one, is chained as
``__cause__`` and its text is included in the message.
"""

from __future__ import annotations

from glot_run.models.schemas import ErrorResponse


class RunError(RuntimeError):
    """Base error for run client failures."""


class SerializeRequestError(RunError):
    def __init__(self, detail: object) -> None:
        super().__init__(f"Failed to serialize request body: {detail}")


class RequestError(RunError):
    """No HTTP response was obtained (connection, DNS, timeout, TLS)."""

    def __init__(self, detail: object) -> None:
        super().__init__(f"Request error: {detail}")


class DeserializeResponseError(RunError):
    """A response arrived but its body could not be read.

    ``status_code`` is ``None`` when the transport failed to decode the body
    before handing over the response.
    """

    def __init__(self, status_code: int | None, detail: object) -> None:
        self.status_code = status_code
        super().__init__(f"Failed to deserialize response body: {detail}")


class DeserializeErrorResponseError(RunError):
    def __init__(self, status_code: int, detail: object) -> None:
        self.status_code = status_code
        super().__init__(f"Failed to deserialize error response body (HTTP {status_code}): {detail}")


class EmptyResponseError(RunError):
    """The HTTP transport produced neither a response nor an error.

    This points at a defect in the transport binding, not at the run service.
    """

    def __init__(self) -> None:
        super().__init__("Transport returned neither a response nor an error (programming error)")


class ResponseNotOkError(RunError):
    def __init__(self, response: ErrorResponse) -> None:
        self.response = response
        super().__init__(f"Response not ok (HTTP {response.status_code}): {response.body.message}")

    @property
    def status_code(self) -> int:
        return self.response.status_code

    @property
    def message(self) -> str:
        return self.response.body.message
