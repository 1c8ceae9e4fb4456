"""Adapts lockbox results and errors to whatever transport serves them."""

from dataclasses import dataclass
from urllib.parse import quote

from lockbox.exceptions import (
    EncryptionError,
    LockboxError,
    PasswordPolicyError,
    ValidationError,
)
from lockbox.pipeline.models import EncryptionResult

PASSWORD_HEADER = "X-Secure-Password"

GENERIC_CLIENT_MESSAGE = "Invalid request data"
GENERIC_SERVER_MESSAGE = "Unable to encrypt file"


@dataclass(frozen=True)
class ErrorResponse:
    status_code: int
    message: str


def content_disposition(filename: str) -> str:
    """Build an attachment Content-Disposition value for the given filename."""
    fallback = filename.encode("ascii", "replace").decode("ascii")
    fallback = fallback.replace("\\", "\\\\").replace('"', '\\"')
    value = f'attachment; filename="{fallback}"'
    if fallback != filename:
        value += f"; filename*=UTF-8''{quote(filename, safe='')}"
    return value


def attachment_headers(result: EncryptionResult) -> dict[str, str]:
    """Response headers for a successful lock; the body is result.stream."""
    return {
        "Content-Type": result.content_type,
        "Content-Disposition": content_disposition(result.filename),
        PASSWORD_HEADER: result.password,
    }


def error_response(exc: LockboxError, expose_details: bool) -> ErrorResponse:
    """Map a lockbox error to a status code and a disclosure-safe message."""
    if isinstance(exc, (ValidationError, PasswordPolicyError)):
        message = str(exc) if expose_details else GENERIC_CLIENT_MESSAGE
        return ErrorResponse(status_code=400, message=message)
    if isinstance(exc, EncryptionError) and expose_details:
        return ErrorResponse(status_code=500, message=str(exc))
    return ErrorResponse(status_code=500, message=GENERIC_SERVER_MESSAGE)
