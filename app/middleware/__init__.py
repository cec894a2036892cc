"""ASGI middleware applied in app.main.create_app."""

from app.middleware.request_id import RequestIDMiddleware

__all__ = ["RequestIDMiddleware"]
