"""Telegram API utilities."""

import asyncio
import logging
from typing import Any, Callable

from aiogram.exceptions import TelegramRetryAfter

logger = logging.getLogger(__name__)


async def safe_call(func: Callable, *args: Any, **kwargs: Any) -> Any:
    """Call Telegram API function, retrying once after a rate limit."""
    try:
        return await func(*args, **kwargs)
    except TelegramRetryAfter as exc:
        logger.warning(f"Rate limited, retrying in {exc.retry_after}s")
        await asyncio.sleep(exc.retry_after)
        return await func(*args, **kwargs)
