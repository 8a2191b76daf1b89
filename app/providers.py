"""Dependency injection container."""

from typing import Optional

from core.registry import SessionRegistry
from config import FACILITATOR_ONLY, OUTLIER_THRESHOLD, TASK_HISTORY_LIMIT


class DIContainer:
    """Dependency injection container."""

    def __init__(
        self,
        registry: Optional[SessionRegistry] = None,
        task_history_limit: int = TASK_HISTORY_LIMIT,
    ):
        self._registry = registry or SessionRegistry(
            facilitator_only=FACILITATOR_ONLY,
            outlier_threshold=OUTLIER_THRESHOLD,
        )
        self.task_history_limit = task_history_limit

    @property
    def registry(self) -> SessionRegistry:
        """Get session registry."""
        return self._registry
