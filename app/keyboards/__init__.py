"""Inline keyboards."""

from app.keyboards.menus import (
    build_board_keyboard,
    build_vote_keyboard,
    get_back_keyboard,
    get_main_menu,
    get_tasks_keyboard,
)

__all__ = [
    "build_board_keyboard",
    "build_vote_keyboard",
    "get_back_keyboard",
    "get_main_menu",
    "get_tasks_keyboard",
]
