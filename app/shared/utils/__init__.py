"""Shared utilities: datetime and id generation."""

from app.shared.utils.datetime import ensure_utc
from app.shared.utils.generators import RECORD_ID_MAX_LENGTH, generate_cuid

__all__ = [
    "RECORD_ID_MAX_LENGTH",
    "generate_cuid",
    "ensure_utc",
]
