"""
Utility functions for the application.
"""
from typing import Any, Dict
from datetime import datetime, timezone


def utcnow() -> datetime:
    """Current UTC time, used for storage timestamps."""
    return datetime.now(timezone.utc)


def format_error(message: str) -> Dict[str, Any]:
    """Format error response."""
    return {"error": message}
