"""Vote aggregation: average and outlier detection for revealed tasks."""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from domain.entities import DomainSession

DEFAULT_OUTLIER_THRESHOLD = 0.5


@dataclass(frozen=True)
class VoteEntry:
    """One row of revealed results."""

    user_id: str
    name: str
    value: int
    is_outlier: bool


@dataclass(frozen=True)
class VoteSummary:
    """Revealed results for the current task."""

    task_id: str
    title: str
    entries: List[VoteEntry]
    average: float

    @property
    def outliers(self) -> List[VoteEntry]:
        return [entry for entry in self.entries if entry.is_outlier]


def average(values: Sequence[float]) -> float:
    """Arithmetic mean, 0 for an empty sequence."""
    if not values:
        return 0.0
    return sum(values) / len(values)


def is_outlier(vote: float, avg: float, threshold: float = DEFAULT_OUTLIER_THRESHOLD) -> bool:
    """Check whether vote deviates from the average by more than threshold * average.

    A zero average never yields outliers.
    """
    if avg == 0:
        return False
    return abs(vote - avg) > avg * threshold


def summarize(
    session: Optional[DomainSession],
    threshold: float = DEFAULT_OUTLIER_THRESHOLD,
) -> Optional[VoteSummary]:
    """Compute results for the revealed current task, None when nothing is revealed.

    Votes of users who never joined count towards the average but get no row.
    """
    if session is None or session.current_task is None:
        return None
    task = session.current_task
    if not task.revealed:
        return None

    avg = average(task.vote_values())
    entries = []
    for vote in task.votes:
        name = session.participant_name(vote.user_id)
        if name is None:
            continue
        entries.append(VoteEntry(
            user_id=vote.user_id,
            name=name,
            value=vote.value,
            is_outlier=is_outlier(vote.value, avg, threshold),
        ))
    return VoteSummary(task_id=task.id, title=task.title, entries=entries, average=avg)
