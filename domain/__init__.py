"""
Domain models and value objects
"""
from .value_objects import (
    VOTE_SCALE,
    ParticipantId,
    TaskId,
    ParticipantName,
    TaskTitle,
    VoteValue,
)
from .entities import (
    DomainSession,
    DomainParticipant,
    DomainTask,
    DomainVote,
)
from .enums import TransitionReason
from .identity import generate_id

__all__ = [
    'VOTE_SCALE',
    'ParticipantId',
    'TaskId',
    'ParticipantName',
    'TaskTitle',
    'VoteValue',
    'DomainSession',
    'DomainParticipant',
    'DomainTask',
    'DomainVote',
    'TransitionReason',
    'generate_id',
]
