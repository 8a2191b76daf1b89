"""
Session registry: one state machine per session id
"""
import asyncio
import logging
from typing import Dict, List, Optional

from core.exceptions import SessionNotFoundError
from core.state_machine import SessionStateMachine
from domain.aggregation import DEFAULT_OUTLIER_THRESHOLD
from domain.identity import generate_id

logger = logging.getLogger(__name__)


class SessionRegistry:
    """In-memory registry of planning poker sessions"""

    def __init__(
        self,
        facilitator_only: bool = False,
        outlier_threshold: float = DEFAULT_OUTLIER_THRESHOLD,
    ):
        self.facilitator_only = facilitator_only
        self.outlier_threshold = outlier_threshold
        self._machines: Dict[str, SessionStateMachine] = {}
        self._locks: Dict[str, asyncio.Lock] = {}

    def create(self, session_id: Optional[str] = None) -> SessionStateMachine:
        """Register a new state machine with an initialized session"""
        session_id = session_id or generate_id()
        machine = SessionStateMachine(
            session_id=session_id,
            facilitator_only=self.facilitator_only,
            outlier_threshold=self.outlier_threshold,
        )
        machine.create_session()
        self._machines[session_id] = machine
        logger.debug(f"Registered session {session_id}")
        return machine

    def get(self, session_id: str) -> Optional[SessionStateMachine]:
        """Get state machine or None"""
        return self._machines.get(session_id)

    def require(self, session_id: str) -> SessionStateMachine:
        """Get state machine or raise SessionNotFoundError"""
        machine = self._machines.get(session_id)
        if machine is None:
            raise SessionNotFoundError(
                f"Session {session_id} not found", error_code="session_not_found"
            )
        return machine

    def get_or_create(self, session_id: str) -> SessionStateMachine:
        """Get state machine, creating the session if absent"""
        machine = self._machines.get(session_id)
        if machine is None:
            machine = self.create(session_id)
        return machine

    def lock(self, session_id: str) -> asyncio.Lock:
        """Per-session lock serializing writers"""
        if session_id not in self._locks:
            self._locks[session_id] = asyncio.Lock()
        return self._locks[session_id]

    def session_ids(self) -> List[str]:
        return list(self._machines)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._machines

    def __len__(self) -> int:
        return len(self._machines)
