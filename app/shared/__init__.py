"""Shared utilities: request context, enums, telemetry, and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from app.shared.context import get_request_id, reset_request_id, set_request_id
from app.shared.enums import ResultStatus
from app.shared.utils import ensure_utc, generate_cuid

__all__ = [
    "set_request_id",
    "reset_request_id",
    "get_request_id",
    "ResultStatus",
    "generate_cuid",
    "ensure_utc",
]
