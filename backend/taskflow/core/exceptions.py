"""
Service-layer exceptions, mapped to HTTP responses at the API boundary.
"""
from fastapi import status


class TaskFlowError(Exception):
    """Base exception for service errors. `message` is safe to show to clients."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(TaskFlowError):
    """Malformed or missing input."""
    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(TaskFlowError):
    """Duplicate account."""
    status_code = status.HTTP_400_BAD_REQUEST


class AuthError(TaskFlowError):
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(TaskFlowError):
    status_code = status.HTTP_404_NOT_FOUND


class StorageError(TaskFlowError):
    """Unexpected persistence failure."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
