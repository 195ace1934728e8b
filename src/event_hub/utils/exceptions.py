"""
Custom Exceptions - Custom exception hierarchy

@file_name: exceptions.py
@author: NetMind.AI
@date: 2025-11-28
@description: Define custom exception types for event_hub

=============================================================================
Design Goals
=============================================================================

Map domain failures onto a small, stable set of API error codes:
- Define a clear exception hierarchy
- Preserve exception chains (cause)
- Carry field-level details for the client
- Provide rich context information for logging

Exception hierarchy:
    EventHubError (base class, INTERNAL_ERROR / 500)
    ├── EventValidationError   (VALIDATION_ERROR / 400)
    ├── UnauthorizedError      (UNAUTHORIZED / 401)
    ├── EventNotFoundError     (NOT_FOUND / 404)
    └── InvalidTransitionError (INVALID_TRANSITION / 400)

Usage example:
    event = await repo.find_by_id(event_id)
    if event is None:
        raise EventNotFoundError(event_id=event_id)

=============================================================================
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional


# =============================================================================
# Base Exceptions
# =============================================================================

class EventHubError(Exception):
    """
    Base exception class for event_hub

    All custom exceptions inherit from this class, providing:
    - API error code and HTTP status
    - Optional field-level details
    - Exception chain support

    Attributes:
        message: Error message (safe to expose to the client)
        details: List of {"field", "message"} pairs
        cause: Original exception (if any)
        context: Additional context information (logged, never exposed)
    """

    code: str = "INTERNAL_ERROR"
    status_code: int = 500

    def __init__(
        self,
        message: str,
        details: Optional[List[Dict[str, str]]] = None,
        cause: Optional[Exception] = None,
        **context: Any,
    ):
        self.message = message
        self.details = details
        self.cause = cause
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message"""
        parts = [self.message]

        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            parts.append(f"[{context_str}]")

        if self.cause:
            parts.append(f"Caused by: {type(self.cause).__name__}: {self.cause}")

        return " ".join(parts)

    def to_response(self) -> Dict[str, Any]:
        """Build the client-facing error body"""
        error: Dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            error["details"] = self.details
        return {"error": error}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging purposes"""
        return {
            "error_type": type(self).__name__,
            "code": self.code,
            "message": self.message,
            "cause": str(self.cause) if self.cause else None,
            "cause_type": type(self.cause).__name__ if self.cause else None,
            **self.context,
        }


# =============================================================================
# Request Errors
# =============================================================================

class EventValidationError(EventHubError):
    """
    Input shape or range violation

    Example:
        raise EventValidationError(details=[
            {"field": "startAt", "message": "Must be in the future"},
        ])
    """

    code = "VALIDATION_ERROR"
    status_code = 400

    def __init__(
        self,
        message: str = "Validation failed",
        details: Optional[List[Dict[str, str]]] = None,
        cause: Optional[Exception] = None,
        **context: Any,
    ):
        super().__init__(message, details, cause, **context)


class UnauthorizedError(EventHubError):
    """Missing or mismatched bearer token"""

    code = "UNAUTHORIZED"
    status_code = 401


# =============================================================================
# Domain Errors
# =============================================================================

class EventNotFoundError(EventHubError):
    """
    Event does not exist, or is not visible through the requested view

    The message never reveals which of the two applies.
    """

    code = "NOT_FOUND"
    status_code = 404

    def __init__(self, message: str = "Event not found", **context: Any):
        super().__init__(message, **context)


class InvalidTransitionError(EventHubError):
    """
    Status change rejected by the lifecycle table

    Example:
        raise InvalidTransitionError(
            current_status=EventStatus.PUBLISHED,
            new_status=EventStatus.DRAFT,
        )
    """

    code = "INVALID_TRANSITION"
    status_code = 400

    def __init__(self, current_status: Any, new_status: Any, **context: Any):
        current = getattr(current_status, "value", current_status)
        new = getattr(new_status, "value", new_status)
        self.current_status = current
        self.new_status = new
        super().__init__(
            f"Cannot transition from {current} to {new}",
            details=[{"field": "status", "message": f"Cannot move from {current} back to {new}"}],
            **context,
        )
