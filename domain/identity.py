"""
Opaque identifiers for participants and tasks
"""
import uuid


def generate_id() -> str:
    """Return a random opaque token."""
    return uuid.uuid4().hex
