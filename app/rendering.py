"""Text rendering of the session board."""

from typing import List

from core.state_machine import SessionStateMachine
from domain.aggregation import VoteSummary


def format_average(value: float) -> str:
    """Average with one decimal."""
    return f"{value:.1f}"


def render_results(summary: VoteSummary) -> List[str]:
    lines = ["🗳️ Голоса:"]
    if not summary.entries:
        lines.append("❌ Голосов не было")
        return lines
    for entry in summary.entries:
        mark = " ⚠️" if entry.is_outlier else ""
        lines.append(f"• {entry.name}: {entry.value}{mark}")
    lines.append("")
    lines.append(f"📊 Среднее: {format_average(summary.average)}")
    if summary.outliers:
        lines.append("⚠️ — сильно отличается от среднего")
    return lines


def render_board(machine: SessionStateMachine) -> str:
    """Render current task, who voted and, once revealed, the results."""
    session = machine.session
    if session is None:
        return "❌ Сессия не создана. Используйте /start"

    lines: List[str] = ["🃏 Planning Poker"]
    if session.facilitator_id is not None:
        facilitator = session.participant_name(session.facilitator_id) or session.facilitator_id
        lines.append(f"👑 Ведущий: {facilitator}")
    else:
        lines.append("👑 Ведущего пока нет")

    task = session.current_task
    lines.append("")
    if task is None:
        lines.append("📝 Задача не выбрана")
    else:
        lines.append(f"📝 Задача: {task.title}")

    lines.append("")
    lines.append(f"👥 Участники ({len({p.id for p in session.participants})}):")
    seen = set()
    for participant in session.participants:
        if participant.id in seen:
            continue
        seen.add(participant.id)
        voted = task is not None and task.has_voted(participant.id)
        lines.append(f"{'✅' if voted else '⏳'} {participant.name}")

    summary = machine.results()
    if summary is not None:
        lines.append("")
        lines.extend(render_results(summary))
    elif task is not None:
        lines.append("")
        lines.append(f"🗳️ Проголосовало: {len(task.votes)}")

    return "\n".join(lines)
