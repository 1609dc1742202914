"""
Request source interface.

This module defines the interface through which the validator
reads named parameters from an incoming request.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class RequestSourceInterface(ABC):
    """
    Interface for request parameter sources.

    Implementations return the raw value of a named parameter, or
    the default when the parameter is absent.
    """

    @abstractmethod
    def get_param(self, name: str, default: Optional[Any] = None) -> Any:
        """
        Get a request parameter.

        Args:
            name: Parameter name
            default: Value returned when the parameter is absent

        Returns:
            Any: Raw parameter value
        """
        pass
