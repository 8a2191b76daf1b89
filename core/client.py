"""
Single-process client bound to one identity.

The identity is generated once at construction and reused for every call,
so callers use the store-style operations without passing an id.
"""
import logging
from typing import Optional, Union

from core.exceptions import ValidationError
from core.state_machine import SessionStateMachine, TransitionResult
from core.validators import clean_name, clean_title, clean_vote
from domain.aggregation import VoteSummary
from domain.enums import TransitionReason
from domain.identity import generate_id

logger = logging.getLogger(__name__)


class PokerClient:
    """Local consumer of a session state machine"""

    def __init__(self, machine: SessionStateMachine, user_id: Optional[str] = None):
        self.machine = machine
        self.user_id = user_id or generate_id()
        self.user_name = ""
        self.machine.ensure_session()

    @property
    def is_facilitator(self) -> bool:
        session = self.machine.session
        return session is not None and session.is_facilitator(self.user_id)

    @property
    def has_voted(self) -> bool:
        task = self.machine.current_task
        return task is not None and task.has_voted(self.user_id)

    @property
    def can_vote(self) -> bool:
        task = self.machine.current_task
        return task is not None and not task.revealed

    def join(self, name: str) -> TransitionResult:
        try:
            cleaned = clean_name(name)
        except ValidationError as e:
            logger.debug(f"CLIENT {self.user_id}: join filtered ({e.message})")
            return TransitionResult(applied=False, reason=TransitionReason.INVALID_INPUT)
        self.user_name = cleaned
        return self.machine.join(self.user_id, cleaned)

    def become_facilitator(self) -> TransitionResult:
        return self.machine.become_facilitator(self.user_id)

    def create_task(self, title: str) -> TransitionResult:
        try:
            cleaned = clean_title(title)
        except ValidationError as e:
            logger.debug(f"CLIENT {self.user_id}: create_task filtered ({e.message})")
            return TransitionResult(applied=False, reason=TransitionReason.INVALID_INPUT)
        return self.machine.create_task(cleaned, caller_id=self.user_id)

    def vote(self, value: Union[int, str]) -> TransitionResult:
        try:
            cleaned = clean_vote(value)
        except ValidationError:
            return TransitionResult(applied=False, reason=TransitionReason.INVALID_VOTE_VALUE)
        return self.machine.vote(self.user_id, cleaned)

    def reveal_votes(self) -> TransitionResult:
        return self.machine.reveal_votes(caller_id=self.user_id)

    def reset_voting(self) -> TransitionResult:
        return self.machine.reset_voting(caller_id=self.user_id)

    def select_task(self, task_id: str) -> TransitionResult:
        return self.machine.select_task(task_id, caller_id=self.user_id)

    def results(self) -> Optional[VoteSummary]:
        return self.machine.results()
