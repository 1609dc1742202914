"""
Error context management.

This module captures structured context for a failure so it can be
logged as a single record.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class ErrorContext:
    """Error type and message, plus the data describing where it happened."""

    timestamp: datetime = field(default_factory=_utcnow)
    error_type: str = ""
    error_message: str = ""
    context_data: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp.isoformat(),
            "error_type": self.error_type,
            "error_message": self.error_message,
            "context_data": self.context_data
        }


class ErrorContextManager:
    """Factory for error context information."""

    @staticmethod
    def create_context(error: Exception, **context_data: Any) -> ErrorContext:
        """
        Create error context from exception.

        Args:
            error: The exception to create context from
            **context_data: Data describing where the error happened

        Returns:
            ErrorContext: Created error context
        """
        return ErrorContext(
            error_type=error.__class__.__name__,
            error_message=str(error),
            context_data=context_data
        )
