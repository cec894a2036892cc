"""Result envelope returned by every dashboard endpoint.

Every outcome, success or failure, is sent with HTTP 200; the outcome is
carried in-band by status. Build envelopes only through success() and error().
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from app.shared.enums import ResultStatus


class ResultEnvelope(BaseModel):
    """Uniform {status, message, data} wrapper. ERROR envelopes never carry data."""

    model_config = ConfigDict(frozen=True)

    status: ResultStatus = Field(..., description="SUCCESS or ERROR")
    message: str = Field(..., description="Human-readable outcome")
    data: Any = Field(default=None, description="Payload on success; null on error")


def success(message: str, data: Any = None) -> ResultEnvelope:
    """Build a SUCCESS envelope with an optional payload."""
    return ResultEnvelope(status=ResultStatus.SUCCESS, message=message, data=data)


def error(message: str) -> ResultEnvelope:
    """Build an ERROR envelope (no payload)."""
    return ResultEnvelope(status=ResultStatus.ERROR, message=message)
