#!/usr/bin/env python3
"""Main application entry point."""

import argparse
import asyncio
import logging
import sys

from aiogram import Bot, Dispatcher
from aiogram.exceptions import TelegramConflictError
from aiogram.fsm.storage.memory import MemoryStorage

from app.providers import DIContainer
from app.transport.telegram import setup_routers
from config import BOT_TOKEN, LOG_FILE, LOG_LEVEL
from core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def setup_logging() -> None:
    """Configure root logging once at start-up."""
    handlers = [logging.StreamHandler(sys.stdout)]
    if LOG_FILE:
        handlers.append(logging.FileHandler(LOG_FILE))
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
    )


async def main(use_polling: bool = True) -> None:
    """Main application function."""
    if not BOT_TOKEN:
        raise ConfigurationError("BOT_TOKEN is not set", error_code="missing_token")

    bot = Bot(token=BOT_TOKEN)
    dp = Dispatcher(storage=MemoryStorage())
    container = DIContainer()
    setup_routers(dp, container)

    if use_polling:
        logger.info("✅ Bot is polling. Waiting for messages...")
        try:
            await dp.start_polling(bot, allowed_updates=dp.resolve_used_update_types())
        except TelegramConflictError:
            logger.error("⚠️ Another bot instance is already polling; stop it or use --no-poll")
            raise
        finally:
            await bot.session.close()
    else:
        logger.info("✅ Bot launched without polling (assumed secondary instance). Staying idle...")
        await asyncio.Future()


def run() -> None:
    """Console entry point."""
    parser = argparse.ArgumentParser(description="Planning Poker bot")
    parser.add_argument(
        "--no-poll",
        action="store_true",
        help="Do not start polling (for a duplicate instance under supervisord/systemd)",
    )
    args = parser.parse_args()
    setup_logging()
    asyncio.run(main(use_polling=not args.no_poll))


if __name__ == "__main__":
    run()
