"""Menu keyboards."""

from typing import List, Optional

from aiogram import types

from core.state_machine import SessionStateMachine
from domain.entities import DomainTask
from domain.value_objects import VOTE_SCALE

Rows = List[List[types.InlineKeyboardButton]]


def _vote_rows() -> Rows:
    values = [str(value) for value in VOTE_SCALE]
    return [
        [types.InlineKeyboardButton(text=value, callback_data=f"vote:{value}") for value in values[i : i + 4]]
        for i in range(0, len(values), 4)
    ]


def build_vote_keyboard() -> types.InlineKeyboardMarkup:
    """Build voting keyboard with the estimation scale."""
    return types.InlineKeyboardMarkup(inline_keyboard=_vote_rows())


def _menu_rows(machine: SessionStateMachine, user_id: str) -> Rows:
    session = machine.session
    if session is None:
        return []

    rows: Rows = []
    if not session.has_joined(user_id):
        rows.append([types.InlineKeyboardButton(text="🙋 Присоединиться", callback_data="menu:join")])

    if session.facilitator_id is None:
        rows.append([types.InlineKeyboardButton(text="👑 Стать ведущим", callback_data="menu:facilitate")])
    elif session.is_facilitator(user_id):
        task = session.current_task
        control_row = [types.InlineKeyboardButton(text="➕ Новая задача", callback_data="menu:new_task")]
        if task is not None and not task.revealed:
            control_row.append(types.InlineKeyboardButton(text="👁 Показать", callback_data="menu:reveal"))
        if task is not None:
            control_row.append(types.InlineKeyboardButton(text="🔄 Заново", callback_data="menu:reset"))
        rows.append(control_row)
        if session.tasks:
            rows.append([types.InlineKeyboardButton(text="📋 Прошлые задачи", callback_data="menu:tasks")])

    rows.append([types.InlineKeyboardButton(text="🔃 Обновить", callback_data="menu:board")])
    return rows


def get_main_menu(machine: SessionStateMachine, user_id: str) -> types.InlineKeyboardMarkup:
    """Get session controls visible to this user."""
    return types.InlineKeyboardMarkup(inline_keyboard=_menu_rows(machine, user_id))


def build_board_keyboard(machine: SessionStateMachine, user_id: str) -> types.InlineKeyboardMarkup:
    """Vote buttons while the current task is open, then session controls."""
    rows: Rows = []
    task = machine.current_task
    if task is not None and not task.revealed:
        rows.extend(_vote_rows())
    rows.extend(_menu_rows(machine, user_id))
    return types.InlineKeyboardMarkup(inline_keyboard=rows)


def get_tasks_keyboard(tasks: List[DomainTask], limit: Optional[int] = None) -> types.InlineKeyboardMarkup:
    """Previous tasks, newest first; pressing one restarts voting on it."""
    recent = list(reversed(tasks))
    if limit is not None:
        recent = recent[:limit]
    rows: Rows = [
        [types.InlineKeyboardButton(text=f"🔁 {task.title[:48]}", callback_data=f"select:{task.id}")]
        for task in recent
    ]
    rows.append([types.InlineKeyboardButton(text="⬅️ Назад", callback_data="menu:board")])
    return types.InlineKeyboardMarkup(inline_keyboard=rows)


def get_back_keyboard() -> types.InlineKeyboardMarkup:
    """Get back button keyboard."""
    return types.InlineKeyboardMarkup(
        inline_keyboard=[[types.InlineKeyboardButton(text="⬅️ Назад", callback_data="menu:board")]]
    )
