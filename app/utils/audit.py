"""Audit logging for facilitator actions."""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

logger = logging.getLogger("audit")


def audit_log(
    action: str,
    user_id: str,
    user_name: str,
    session_id: str,
    extra: Optional[Dict[str, Any]] = None,
) -> None:
    """Write one audit line for an applied facilitator action.

    Args:
        action: Action name (e.g., 'create_task', 'reveal_votes', 'select_task')
        user_id: Caller identity
        user_name: Display name of the caller
        session_id: Registry session id
        extra: Additional data (e.g., task title, vote count)
    """
    timestamp = datetime.now(timezone.utc).isoformat()
    log_line = f"[AUDIT] {timestamp} | {action} | user:{user_id} ({user_name}) | session:{session_id}"
    if extra:
        log_line += f" | {json.dumps(extra, ensure_ascii=False)}"
    logger.info(log_line)
