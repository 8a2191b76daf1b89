"""Callback query handlers."""

import logging

from aiogram import F, Router, types
from aiogram.fsm.context import FSMContext

from app.keyboards import get_back_keyboard, get_tasks_keyboard
from app.providers import DIContainer
from app.transport.telegram.handlers.common import (
    NOT_JOINED_TEXT,
    describe,
    display_name,
    machine_for,
    refresh_board,
)
from app.utils.audit import audit_log
from app.utils.context import caller_id
from app.utils.telegram import safe_call
from config import PokerStates
from core.exceptions import PlanningPokerError
from core.validators import clean_name, clean_vote

logger = logging.getLogger(__name__)

router = Router()


@router.callback_query(F.data.startswith("vote:"))
async def handle_vote(callback: types.CallbackQuery, container: DIContainer) -> None:
    """Handle vote button press."""
    machine = machine_for(callback, container)
    user_id = caller_id(callback)

    if machine.session is None or not machine.session.has_joined(user_id):
        await callback.answer(NOT_JOINED_TEXT, show_alert=True)
        return

    try:
        value = clean_vote(callback.data.split(":", 1)[1])
    except PlanningPokerError as e:
        await callback.answer(f"❌ {e.message}", show_alert=True)
        return

    async with container.registry.lock(machine.session_id):
        result = machine.vote(user_id, value)

    if not result:
        await callback.answer(describe(result), show_alert=True)
        return
    await callback.answer(f"✅ Ваш голос: {value}")
    await refresh_board(callback, machine, user_id)


@router.callback_query(F.data.startswith("select:"))
async def handle_select_task(callback: types.CallbackQuery, container: DIContainer) -> None:
    """Restart voting on a previous task."""
    machine = machine_for(callback, container)
    user_id = caller_id(callback)
    task_id = callback.data.split(":", 1)[1]

    async with container.registry.lock(machine.session_id):
        result = machine.select_task(task_id, caller_id=user_id)

    if not result:
        await callback.answer(describe(result), show_alert=True)
        return
    audit_log(
        "select_task", user_id, display_name(callback), machine.session_id,
        {"task_id": task_id},
    )
    await callback.answer("🔁 Голосование начато заново")
    await refresh_board(callback, machine, user_id)


@router.callback_query(F.data.startswith("menu:"))
async def handle_menu(callback: types.CallbackQuery, container: DIContainer, state: FSMContext) -> None:
    """Handle menu callbacks."""
    machine = machine_for(callback, container)
    user_id = caller_id(callback)
    action = callback.data.split(":", 1)[1]
    name = display_name(callback)

    if action == "board":
        await state.clear()
        await callback.answer()
        await refresh_board(callback, machine, user_id)
        return

    if action == "join":
        try:
            cleaned = clean_name(name)
        except PlanningPokerError as e:
            await callback.answer(f"❌ {e.message}", show_alert=True)
            return
        async with container.registry.lock(machine.session_id):
            if machine.session is not None and machine.session.has_joined(user_id):
                await callback.answer("ℹ️ Вы уже в сессии")
                return
            result = machine.join(user_id, cleaned)
        if not result:
            await callback.answer(describe(result), show_alert=True)
            return
        await callback.answer(f"✅ {cleaned} присоединился")
        await refresh_board(callback, machine, user_id)
        return

    if action == "facilitate":
        async with container.registry.lock(machine.session_id):
            result = machine.become_facilitator(user_id)
        if not result:
            await callback.answer(describe(result), show_alert=True)
            return
        audit_log("become_facilitator", user_id, name, machine.session_id)
        await callback.answer("👑 Вы ведущий")
        await refresh_board(callback, machine, user_id)
        return

    session = machine.session
    if session is None or not session.is_facilitator(user_id):
        await callback.answer("❌ Только ведущий может это сделать", show_alert=True)
        return

    if action == "new_task":
        await state.set_state(PokerStates.waiting_for_task_title)
        await callback.answer()
        await safe_call(
            callback.message.answer,
            "📝 Отправьте название задачи одним сообщением",
            reply_markup=get_back_keyboard(),
            parse_mode=None,
        )
        return

    if action == "tasks":
        await callback.answer()
        await safe_call(
            callback.message.edit_text,
            "📋 Прошлые задачи — выберите, чтобы проголосовать заново:",
            reply_markup=get_tasks_keyboard(session.tasks, container.task_history_limit),
            parse_mode=None,
        )
        return

    if action == "reveal":
        async with container.registry.lock(machine.session_id):
            result = machine.reveal_votes(caller_id=user_id)
    elif action == "reset":
        async with container.registry.lock(machine.session_id):
            result = machine.reset_voting(caller_id=user_id)
    else:
        logger.warning(f"Unknown menu action: {action}")
        await callback.answer()
        return

    if not result:
        await callback.answer(describe(result), show_alert=True)
        return
    audit_log("reveal_votes" if action == "reveal" else "reset_voting", user_id, name, machine.session_id)
    await callback.answer()
    await refresh_board(callback, machine, user_id)
