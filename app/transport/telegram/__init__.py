"""Telegram transport layer."""

from app.transport.telegram.middleware import DIMiddleware
from app.transport.telegram.router import setup_routers

__all__ = ["DIMiddleware", "setup_routers"]
