"""
Logging contract of the validator.

The validator only reports debug traces of a validation pass and the
context of malformed rule specifications, so loggers injected into it
need just those two entry points.
"""

from abc import ABC, abstractmethod
from typing import Any
from enum import Enum


class LogLevel(Enum):
    """Log levels accepted in the ``logging`` configuration section."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LoggerInterface(ABC):
    """Logger accepted by ``Validator``; keyword arguments are structured fields."""

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        """Record a step of a validation pass."""

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        """Record a failure that is about to be raised to the caller."""
