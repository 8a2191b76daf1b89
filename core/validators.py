"""
Data validators using Pydantic
"""
from typing import Union

from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from core.exceptions import ValidationError
from domain.value_objects import VOTE_SCALE

MAX_NAME_LENGTH = 100
MAX_TITLE_LENGTH = 200


class ParticipantNameValidator(BaseModel):
    """Participant name validator"""
    name: str = Field(..., description="Display name")

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        v = v.strip()
        if not v:
            raise ValueError('Name cannot be empty')
        if len(v) > MAX_NAME_LENGTH:
            raise ValueError(f'Name too long (max {MAX_NAME_LENGTH} characters)')
        return v


class TaskTitleValidator(BaseModel):
    """Task title validator"""
    title: str = Field(..., description="Task title")

    @field_validator('title')
    @classmethod
    def validate_title(cls, v):
        v = v.strip()
        if not v:
            raise ValueError('Task title cannot be empty')
        if len(v) > MAX_TITLE_LENGTH:
            raise ValueError(f'Task title too long (max {MAX_TITLE_LENGTH} characters)')
        return v


class VoteValueValidator(BaseModel):
    """Vote value validator"""
    value: int = Field(..., description="Vote value from the estimation scale")

    @field_validator('value')
    @classmethod
    def validate_value(cls, v):
        if v not in VOTE_SCALE:
            raise ValueError(f'Vote must be one of {", ".join(map(str, VOTE_SCALE))}')
        return v


def _first_error(exc: PydanticValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    return errors[0].get('msg', str(exc)).removeprefix('Value error, ')


def clean_name(raw: str) -> str:
    """Return trimmed name or raise ValidationError"""
    try:
        return ParticipantNameValidator(name=raw).name
    except PydanticValidationError as e:
        raise ValidationError(_first_error(e), error_code="invalid_name") from e


def clean_title(raw: str) -> str:
    """Return trimmed task title or raise ValidationError"""
    try:
        return TaskTitleValidator(title=raw).title
    except PydanticValidationError as e:
        raise ValidationError(_first_error(e), error_code="invalid_title") from e


def clean_vote(raw: Union[str, int]) -> int:
    """Return vote as int from the scale or raise ValidationError"""
    if isinstance(raw, str):
        raw = raw.strip()
    try:
        return VoteValueValidator(value=raw).value
    except PydanticValidationError as e:
        raise ValidationError(_first_error(e), error_code="invalid_vote") from e
