"""
Domain entities
"""
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import List, Optional


@dataclass(frozen=True)
class DomainParticipant:
    """Someone who joined the session"""
    id: str
    name: str


@dataclass(frozen=True)
class DomainVote:
    """A cast vote; only exists once the participant has voted"""
    user_id: str
    value: int


@dataclass
class DomainTask:
    """Domain task entity"""
    id: str
    title: str
    votes: List[DomainVote] = field(default_factory=list)
    revealed: bool = False
    final_estimate: Optional[float] = None
    created_at: datetime = field(default_factory=datetime.now)

    def vote_of(self, user_id: str) -> Optional[DomainVote]:
        """Get vote cast by user"""
        for vote in self.votes:
            if vote.user_id == user_id:
                return vote
        return None

    def has_voted(self, user_id: str) -> bool:
        """Check if user voted in this round"""
        return self.vote_of(user_id) is not None

    def put_vote(self, vote: DomainVote) -> None:
        """Replace any earlier vote of the same user"""
        self.votes = [v for v in self.votes if v.user_id != vote.user_id]
        self.votes.append(vote)

    def vote_values(self) -> List[int]:
        """Get numeric vote values in casting order"""
        return [vote.value for vote in self.votes]

    def fresh_round(self) -> "DomainTask":
        """Copy of the task with votes cleared and unrevealed"""
        return replace(self, votes=[], revealed=False)


@dataclass
class DomainSession:
    """Domain session entity"""
    facilitator_id: Optional[str] = None
    current_task: Optional[DomainTask] = None
    tasks: List[DomainTask] = field(default_factory=list)
    participants: List[DomainParticipant] = field(default_factory=list)

    def is_facilitator(self, user_id: str) -> bool:
        """Check if user holds the facilitator role"""
        return self.facilitator_id is not None and self.facilitator_id == user_id

    def has_joined(self, user_id: str) -> bool:
        """Check if user is among participants"""
        return any(p.id == user_id for p in self.participants)

    def participant_name(self, user_id: str) -> Optional[str]:
        """Get display name of the first participant entry with this id"""
        for participant in self.participants:
            if participant.id == user_id:
                return participant.name
        return None

    def find_task(self, task_id: str) -> Optional[DomainTask]:
        """Find task in history by id"""
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None
