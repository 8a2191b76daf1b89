"""Helpers shared by Telegram handlers."""

import logging
from typing import Union

from aiogram import types
from aiogram.exceptions import TelegramBadRequest

from app.keyboards import build_board_keyboard
from app.providers import DIContainer
from app.rendering import render_board
from app.utils.context import extract_context, session_key
from app.utils.telegram import safe_call
from core.state_machine import SessionStateMachine, TransitionResult
from domain.enums import TransitionReason

logger = logging.getLogger(__name__)

REASON_TEXTS = {
    TransitionReason.NO_SESSION: "❌ Сессия не создана. Используйте /start",
    TransitionReason.NO_CURRENT_TASK: "❌ Нет текущей задачи",
    TransitionReason.TASK_NOT_FOUND: "❌ Задача не найдена",
    TransitionReason.ALREADY_REVEALED: "🔒 Голоса уже открыты. Ведущий может начать заново",
    TransitionReason.INVALID_VOTE_VALUE: "❌ Недопустимая оценка",
    TransitionReason.INVALID_INPUT: "❌ Пустое значение",
    TransitionReason.FACILITATOR_TAKEN: "👑 Ведущий уже выбран",
    TransitionReason.NOT_FACILITATOR: "❌ Только ведущий может это сделать",
}

NOT_JOINED_TEXT = "⚠️ Сначала присоединитесь: /join Имя"


def describe(result: TransitionResult) -> str:
    """Human-readable text for a rejected transition."""
    if result.reason is None:
        return "Ничего не изменилось"
    return REASON_TEXTS.get(result.reason, "Ничего не изменилось")


def machine_for(
    entity: Union[types.Message, types.CallbackQuery], container: DIContainer
) -> SessionStateMachine:
    """State machine of the chat/topic, created on first use."""
    chat_id, topic_id = extract_context(entity)
    return container.registry.get_or_create(session_key(chat_id, topic_id))


def display_name(entity: Union[types.Message, types.CallbackQuery]) -> str:
    user = entity.from_user
    return user.full_name or user.username or str(user.id)


async def send_board(msg: types.Message, machine: SessionStateMachine, user_id: str) -> None:
    """Reply with a fresh board message."""
    await safe_call(
        msg.answer,
        render_board(machine),
        reply_markup=build_board_keyboard(machine, user_id),
        parse_mode=None,
    )


async def refresh_board(callback: types.CallbackQuery, machine: SessionStateMachine, user_id: str) -> None:
    """Edit the board message the callback came from."""
    if callback.message is None:
        return
    try:
        await safe_call(
            callback.message.edit_text,
            render_board(machine),
            reply_markup=build_board_keyboard(machine, user_id),
            parse_mode=None,
        )
    except TelegramBadRequest as exc:
        # "message is not modified" when nothing visible changed
        logger.debug(f"Board not refreshed: {exc}")
