from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr


class File(BaseModel):
    name: StrictStr = Field(..., description="File name inside the sandbox working directory.")
    content: StrictStr = Field(..., description="File contents.")


class RunRequestPayload(BaseModel):
    language: StrictStr = Field(..., description="Language name understood by the run service.")
    files: list[File] = Field(
        default_factory=list,
        description="Source files, in the order the sandbox should see them.",
    )
    stdin: StrictStr | None = Field(None, description="Optional stdin passed to the program.")
    command: StrictStr | None = Field(None, description="Optional command overriding the language default.")


class RunRequest(BaseModel):
    image: StrictStr = Field(..., description="Container image to run the payload in.")
    payload: RunRequestPayload


class RunResult(BaseModel):
    stdout: StrictStr
    stderr: StrictStr
    error: StrictStr


class ErrorBody(BaseModel):
    model_config = ConfigDict(extra="allow")

    message: StrictStr


class ErrorResponse(BaseModel):
    status_code: StrictInt
    body: ErrorBody


class Language(BaseModel):
    """A language registered with the run service, mapped to the image that runs it."""

    model_config = ConfigDict(extra="allow")

    name: StrictStr = Field(..., description="Language name used in run payloads.")
    version: StrictStr = Field(..., description="Language version, e.g. 'latest'.")
    image: StrictStr = Field(..., description="Container image running this language.")
