"""Text message handlers."""

from aiogram import F, Router, types
from aiogram.fsm.context import FSMContext

from app.providers import DIContainer
from app.transport.telegram.handlers.common import describe, display_name, machine_for, send_board
from app.utils.audit import audit_log
from app.utils.context import caller_id
from app.utils.telegram import safe_call
from config import PokerStates
from core.exceptions import PlanningPokerError
from core.validators import clean_title

router = Router()


@router.message(PokerStates.waiting_for_task_title, F.text, ~F.text.startswith("/"))
async def handle_task_title(msg: types.Message, container: DIContainer, state: FSMContext) -> None:
    """Create task from the facilitator's next text message."""
    machine = machine_for(msg, container)
    user_id = caller_id(msg)

    try:
        title = clean_title(msg.text)
    except PlanningPokerError as e:
        await safe_call(msg.answer, f"❌ {e.message}", parse_mode=None)
        return

    async with container.registry.lock(machine.session_id):
        result = machine.create_task(title, caller_id=user_id)
    await state.clear()

    if not result:
        await safe_call(msg.answer, describe(result), parse_mode=None)
        return
    audit_log("create_task", user_id, display_name(msg), machine.session_id, {"title": title})
    await send_board(msg, machine, user_id)
