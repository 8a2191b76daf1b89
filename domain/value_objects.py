"""
Value Objects for domain modeling
"""
from dataclasses import dataclass
from typing import Tuple


# Fibonacci-like estimation scale
VOTE_SCALE: Tuple[int, ...] = (1, 2, 3, 5, 8, 13, 21)


@dataclass(frozen=True)
class ParticipantId:
    """Participant ID value object"""
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise ValueError("Participant ID must be a string")
        if not self.value.strip():
            raise ValueError("Participant ID cannot be empty")


@dataclass(frozen=True)
class TaskId:
    """Task ID value object"""
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise ValueError("Task ID must be a string")
        if not self.value.strip():
            raise ValueError("Task ID cannot be empty")


@dataclass(frozen=True)
class ParticipantName:
    """Participant display name value object"""
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise ValueError("Name must be a string")
        if not self.value.strip():
            raise ValueError("Name cannot be empty")


@dataclass(frozen=True)
class TaskTitle:
    """Task title value object"""
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise ValueError("Task title must be a string")
        if not self.value.strip():
            raise ValueError("Task title cannot be empty")


@dataclass(frozen=True)
class VoteValue:
    """Vote value object"""
    value: int

    def __post_init__(self):
        # bool is an int subclass
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("Vote value must be an integer")
        if self.value not in VOTE_SCALE:
            raise ValueError(f"Invalid vote value: {self.value}")

    @staticmethod
    def is_valid(value: object) -> bool:
        """Check membership in the scale without raising"""
        return isinstance(value, int) and not isinstance(value, bool) and value in VOTE_SCALE
