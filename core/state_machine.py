"""
Session state machine: owns session, task, participant and vote lifecycle.

Every operation returns a TransitionResult instead of raising, so callers can
tell "nothing happened" apart from an applied change without ever faulting.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from domain.aggregation import DEFAULT_OUTLIER_THRESHOLD, VoteSummary, summarize
from domain.entities import DomainParticipant, DomainSession, DomainTask, DomainVote
from domain.enums import TransitionReason
from domain.identity import generate_id
from domain.value_objects import ParticipantId, ParticipantName, TaskTitle, VoteValue

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransitionResult:
    """Outcome of a state machine operation"""
    applied: bool
    reason: Optional[TransitionReason] = None

    def __bool__(self) -> bool:
        return self.applied


APPLIED = TransitionResult(applied=True)


def _rejected(reason: TransitionReason) -> TransitionResult:
    return TransitionResult(applied=False, reason=reason)


class SessionStateMachine:
    """Planning poker session with its transition rules.

    With ``facilitator_only`` set, task creation, reveal, reset and task
    selection require ``caller_id`` to be the facilitator.
    """

    def __init__(
        self,
        session_id: Optional[str] = None,
        facilitator_only: bool = False,
        outlier_threshold: float = DEFAULT_OUTLIER_THRESHOLD,
    ):
        self.session_id = session_id or generate_id()
        self.facilitator_only = facilitator_only
        self.outlier_threshold = outlier_threshold
        self.session: Optional[DomainSession] = None

    @property
    def current_task(self) -> Optional[DomainTask]:
        return self.session.current_task if self.session else None

    def create_session(self) -> TransitionResult:
        """Install a fresh empty session, replacing any existing one"""
        self.session = DomainSession()
        logger.info(f"SESSION {self.session_id}: created")
        return APPLIED

    def ensure_session(self) -> TransitionResult:
        """Create the session only if absent"""
        if self.session is not None:
            return TransitionResult(applied=False)
        return self.create_session()

    def join(self, caller_id: str, name: str) -> TransitionResult:
        """Append participant; the same id may join more than once"""
        if self.session is None:
            return self._reject("join", TransitionReason.NO_SESSION)
        try:
            participant_id = ParticipantId(caller_id)
            participant_name = ParticipantName(name)
        except ValueError:
            return self._reject("join", TransitionReason.INVALID_INPUT)

        self.session.participants.append(
            DomainParticipant(id=participant_id.value, name=participant_name.value)
        )
        logger.info(f"SESSION {self.session_id}: {caller_id} joined as {participant_name.value!r}")
        return APPLIED

    def become_facilitator(self, caller_id: str) -> TransitionResult:
        """First claim wins permanently"""
        if self.session is None:
            return self._reject("become_facilitator", TransitionReason.NO_SESSION)
        if self.session.facilitator_id is not None:
            return self._reject("become_facilitator", TransitionReason.FACILITATOR_TAKEN)
        try:
            ParticipantId(caller_id)
        except ValueError:
            return self._reject("become_facilitator", TransitionReason.INVALID_INPUT)

        self.session.facilitator_id = caller_id
        logger.info(f"SESSION {self.session_id}: facilitator is {caller_id}")
        return APPLIED

    def create_task(self, title: str, caller_id: Optional[str] = None) -> TransitionResult:
        """Create task, append it to history and make it current"""
        if self.session is None:
            return self._reject("create_task", TransitionReason.NO_SESSION)
        if not self._may_facilitate(caller_id):
            return self._reject("create_task", TransitionReason.NOT_FACILITATOR)
        try:
            task_title = TaskTitle(title)
        except ValueError:
            return self._reject("create_task", TransitionReason.INVALID_INPUT)

        task = DomainTask(id=generate_id(), title=task_title.value)
        self.session.tasks.append(task)
        # history keeps the creation snapshot, voting happens on a copy
        self.session.current_task = task.fresh_round()
        logger.info(f"SESSION {self.session_id}: task {task.id} created ({task.title!r})")
        return APPLIED

    def vote(self, caller_id: str, value: int) -> TransitionResult:
        """Cast or replace caller's vote on the current unrevealed task"""
        if self.session is None:
            return self._reject("vote", TransitionReason.NO_SESSION)
        task = self.session.current_task
        if task is None:
            return self._reject("vote", TransitionReason.NO_CURRENT_TASK)
        if task.revealed:
            return self._reject("vote", TransitionReason.ALREADY_REVEALED)
        if not VoteValue.is_valid(value):
            return self._reject("vote", TransitionReason.INVALID_VOTE_VALUE)
        try:
            ParticipantId(caller_id)
        except ValueError:
            return self._reject("vote", TransitionReason.INVALID_INPUT)

        task.put_vote(DomainVote(user_id=caller_id, value=value))
        logger.info(f"SESSION {self.session_id}: {caller_id} voted on {task.id}, {len(task.votes)} vote(s)")
        return APPLIED

    def reveal_votes(self, caller_id: Optional[str] = None) -> TransitionResult:
        """Reveal current task; revealing twice changes nothing observable"""
        if self.session is None:
            return self._reject("reveal_votes", TransitionReason.NO_SESSION)
        if not self._may_facilitate(caller_id):
            return self._reject("reveal_votes", TransitionReason.NOT_FACILITATOR)
        task = self.session.current_task
        if task is None:
            return self._reject("reveal_votes", TransitionReason.NO_CURRENT_TASK)

        task.revealed = True
        logger.info(f"SESSION {self.session_id}: task {task.id} revealed with {len(task.votes)} vote(s)")
        return APPLIED

    def reset_voting(self, caller_id: Optional[str] = None) -> TransitionResult:
        """Clear votes and hide results, keeping task id and title"""
        if self.session is None:
            return self._reject("reset_voting", TransitionReason.NO_SESSION)
        if not self._may_facilitate(caller_id):
            return self._reject("reset_voting", TransitionReason.NOT_FACILITATOR)
        task = self.session.current_task
        if task is None:
            return self._reject("reset_voting", TransitionReason.NO_CURRENT_TASK)

        task.votes = []
        task.revealed = False
        logger.info(f"SESSION {self.session_id}: task {task.id} reset")
        return APPLIED

    def select_task(self, task_id: str, caller_id: Optional[str] = None) -> TransitionResult:
        """Restart voting on a previously created task"""
        if self.session is None:
            return self._reject("select_task", TransitionReason.NO_SESSION)
        if not self._may_facilitate(caller_id):
            return self._reject("select_task", TransitionReason.NOT_FACILITATOR)
        task = self.session.find_task(task_id)
        if task is None:
            return self._reject("select_task", TransitionReason.TASK_NOT_FOUND)

        self.session.current_task = task.fresh_round()
        logger.info(f"SESSION {self.session_id}: task {task.id} selected")
        return APPLIED

    def results(self) -> Optional[VoteSummary]:
        """Aggregate votes of the revealed current task"""
        return summarize(self.session, self.outlier_threshold)

    def _may_facilitate(self, caller_id: Optional[str]) -> bool:
        if not self.facilitator_only:
            return True
        return caller_id is not None and self.session.is_facilitator(caller_id)

    def _reject(self, operation: str, reason: TransitionReason) -> TransitionResult:
        logger.debug(f"SESSION {self.session_id}: {operation} ignored ({reason.value})")
        return _rejected(reason)
