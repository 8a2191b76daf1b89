"""
Core module: session state machine, registry and validation
"""
from .client import PokerClient
from .registry import SessionRegistry
from .state_machine import SessionStateMachine, TransitionResult

__all__ = [
    'PokerClient',
    'SessionRegistry',
    'SessionStateMachine',
    'TransitionResult',
]
