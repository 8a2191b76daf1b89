"""
Domain enums
"""
from enum import Enum


class TransitionReason(Enum):
    """Why a state machine operation left the state unchanged"""
    NO_SESSION = "no_session"
    NO_CURRENT_TASK = "no_current_task"
    TASK_NOT_FOUND = "task_not_found"
    ALREADY_REVEALED = "already_revealed"
    INVALID_VOTE_VALUE = "invalid_vote_value"
    INVALID_INPUT = "invalid_input"
    FACILITATOR_TAKEN = "facilitator_taken"
    NOT_FACILITATOR = "not_facilitator"
