"""Middleware for dependency injection."""

import logging
from typing import Any, Awaitable, Callable, Dict

from aiogram import BaseMiddleware
from aiogram.types import TelegramObject

from app.providers import DIContainer

logger = logging.getLogger(__name__)


class DIMiddleware(BaseMiddleware):
    """Middleware to inject DI container into handler context."""

    def __init__(self, container: DIContainer):
        self.container = container

    async def __call__(
        self,
        handler: Callable[[TelegramObject, Dict[str, Any]], Awaitable[Any]],
        event: TelegramObject,
        data: Dict[str, Any],
    ) -> Any:
        """Inject container into handler data."""
        data["container"] = self.container
        try:
            return await handler(event, data)
        except Exception:
            # logged here with the event type, aiogram still sees the error
            logger.exception(f"Handler failed for {type(event).__name__}")
            raise
