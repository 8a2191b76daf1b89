"""
Custom exceptions for the application
"""
from typing import Optional


class PlanningPokerError(Exception):
    """Base exception for Planning Poker"""

    def __init__(self, message: str, error_code: Optional[str] = None):
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class ValidationError(PlanningPokerError):
    """Validation error"""
    pass


class SessionNotFoundError(PlanningPokerError):
    """Session not found error"""
    pass


class ConfigurationError(PlanningPokerError):
    """Configuration error"""
    pass
