"""Command handlers."""

import logging

from aiogram import Router, types
from aiogram.filters import Command, CommandObject

from app.keyboards import get_tasks_keyboard
from app.providers import DIContainer
from app.transport.telegram.handlers.common import (
    describe,
    display_name,
    machine_for,
    send_board,
)
from app.utils.audit import audit_log
from app.utils.context import caller_id
from app.utils.telegram import safe_call
from core.exceptions import PlanningPokerError
from core.validators import clean_name, clean_title

logger = logging.getLogger(__name__)

router = Router()

HELP_TEXT = (
    "👋 Привет! Я Planning Poker бот — помогаю оценивать задачи в команде.\n\n"
    "/join Имя — присоединиться к сессии\n"
    "/facilitate — стать ведущим (первый занявший остаётся ведущим)\n"
    "/task Название — новая задача (ведущий)\n"
    "/reveal — показать голоса (ведущий)\n"
    "/reset — начать голосование заново (ведущий)\n"
    "/tasks — прошлые задачи (ведущий)\n"
    "/board — текущее состояние"
)


@router.message(Command("start", "help"))
async def cmd_start_help(msg: types.Message, container: DIContainer) -> None:
    """Handle /start and /help commands."""
    machine = machine_for(msg, container)
    await safe_call(msg.answer, HELP_TEXT, parse_mode=None)
    await send_board(msg, machine, caller_id(msg))


@router.message(Command("board"))
async def cmd_board(msg: types.Message, container: DIContainer) -> None:
    """Handle /board command."""
    machine = machine_for(msg, container)
    await send_board(msg, machine, caller_id(msg))


@router.message(Command("join"))
async def cmd_join(msg: types.Message, command: CommandObject, container: DIContainer) -> None:
    """Handle /join command."""
    machine = machine_for(msg, container)
    user_id = caller_id(msg)

    try:
        name = clean_name(command.args or display_name(msg))
    except PlanningPokerError as e:
        await safe_call(msg.answer, f"❌ {e.message}", parse_mode=None)
        return

    async with container.registry.lock(machine.session_id):
        if machine.session is not None and machine.session.has_joined(user_id):
            await safe_call(msg.answer, "ℹ️ Вы уже в сессии", parse_mode=None)
            return
        result = machine.join(user_id, name)

    if not result:
        await safe_call(msg.answer, describe(result), parse_mode=None)
        return
    await safe_call(msg.answer, f"✅ {name} присоединился", parse_mode=None)
    await send_board(msg, machine, user_id)


@router.message(Command("facilitate"))
async def cmd_facilitate(msg: types.Message, container: DIContainer) -> None:
    """Handle /facilitate command."""
    machine = machine_for(msg, container)
    user_id = caller_id(msg)

    async with container.registry.lock(machine.session_id):
        result = machine.become_facilitator(user_id)

    if not result:
        await safe_call(msg.answer, describe(result), parse_mode=None)
        return
    audit_log("become_facilitator", user_id, display_name(msg), machine.session_id)
    await send_board(msg, machine, user_id)


@router.message(Command("task"))
async def cmd_task(msg: types.Message, command: CommandObject, container: DIContainer) -> None:
    """Handle /task command."""
    machine = machine_for(msg, container)
    user_id = caller_id(msg)

    try:
        title = clean_title(command.args or "")
    except PlanningPokerError:
        await safe_call(msg.answer, "❌ Использование: /task Название задачи", parse_mode=None)
        return

    async with container.registry.lock(machine.session_id):
        result = machine.create_task(title, caller_id=user_id)

    if not result:
        await safe_call(msg.answer, describe(result), parse_mode=None)
        return
    audit_log("create_task", user_id, display_name(msg), machine.session_id, {"title": title})
    await send_board(msg, machine, user_id)


@router.message(Command("reveal"))
async def cmd_reveal(msg: types.Message, container: DIContainer) -> None:
    """Handle /reveal command."""
    machine = machine_for(msg, container)
    user_id = caller_id(msg)

    async with container.registry.lock(machine.session_id):
        result = machine.reveal_votes(caller_id=user_id)

    if not result:
        await safe_call(msg.answer, describe(result), parse_mode=None)
        return
    audit_log(
        "reveal_votes", user_id, display_name(msg), machine.session_id,
        {"votes": len(machine.current_task.votes)},
    )
    await send_board(msg, machine, user_id)


@router.message(Command("reset"))
async def cmd_reset(msg: types.Message, container: DIContainer) -> None:
    """Handle /reset command."""
    machine = machine_for(msg, container)
    user_id = caller_id(msg)

    async with container.registry.lock(machine.session_id):
        result = machine.reset_voting(caller_id=user_id)

    if not result:
        await safe_call(msg.answer, describe(result), parse_mode=None)
        return
    audit_log("reset_voting", user_id, display_name(msg), machine.session_id)
    await send_board(msg, machine, user_id)


@router.message(Command("tasks"))
async def cmd_tasks(msg: types.Message, container: DIContainer) -> None:
    """Handle /tasks command."""
    machine = machine_for(msg, container)
    session = machine.session
    if session is None or not session.is_facilitator(caller_id(msg)):
        await safe_call(msg.answer, "❌ Только ведущий видит прошлые задачи", parse_mode=None)
        return
    if not session.tasks:
        await safe_call(msg.answer, "📭 Задач пока нет", parse_mode=None)
        return
    await safe_call(
        msg.answer,
        "📋 Прошлые задачи — выберите, чтобы проголосовать заново:",
        reply_markup=get_tasks_keyboard(session.tasks, container.task_history_limit),
        parse_mode=None,
    )
