"""Shared telemetry: logging setup."""

from app.shared.telemetry.logging import RequestIdFilter, setup_logging

__all__ = [
    "setup_logging",
    "RequestIdFilter",
]
