"""Context extraction utilities."""

from typing import Optional, Tuple, Union

from aiogram import types


def extract_context(entity: Union[types.Message, types.CallbackQuery]) -> Tuple[int, Optional[int]]:
    """Extract chat_id and topic_id from message or callback."""
    message = entity.message if isinstance(entity, types.CallbackQuery) else entity
    return message.chat.id, getattr(message, "message_thread_id", None)


def session_key(chat_id: int, topic_id: Optional[int]) -> str:
    """Build registry session id for a chat/topic pair."""
    return f"{chat_id}:{topic_id or 0}"


def caller_id(entity: Union[types.Message, types.CallbackQuery]) -> str:
    """Opaque caller identity from the Telegram user."""
    return str(entity.from_user.id)
