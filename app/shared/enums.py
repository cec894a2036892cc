"""Shared enumerations for the dashboard admin application.

Cross-cutting enums used by the schemas and the handler layer.
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class ResultStatus(_ValuesMixin, str, Enum):
    """Outcome carried inside every result envelope (transport status is always 200)."""

    SUCCESS = "SUCCESS"
    ERROR = "ERROR"
