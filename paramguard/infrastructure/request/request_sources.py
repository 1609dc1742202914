"""
Request parameter sources.

This module adapts plain mappings and Flask requests to the
RequestSourceInterface consumed by the validator.
"""

from typing import Any, Mapping, Optional

from flask import Request

from ...core.interfaces import RequestSourceInterface


class MappingRequestSource(RequestSourceInterface):
    """Request source backed by a mapping of parameters."""

    def __init__(self, params: Optional[Mapping[str, Any]] = None):
        self._params = params if params is not None else {}

    def get_param(self, name: str, default: Optional[Any] = None) -> Any:
        """Get a parameter from the mapping."""
        return self._params.get(name, default)


class FlaskRequestSource(RequestSourceInterface):
    """
    Request source backed by a Flask request.

    Body parameters take precedence over query string parameters:
    a JSON object body is consulted first, then form data, then
    the query string.
    """

    def __init__(self, request: Request):
        """
        Initialize the source.

        Args:
            request: Flask request to read parameters from
        """
        self._request = request

    def get_param(self, name: str, default: Optional[Any] = None) -> Any:
        """Get a parameter from the request body or query string."""
        body = self._request.get_json(silent=True) if self._request.is_json else None
        if isinstance(body, Mapping) and name in body:
            return body[name]

        if name in self._request.form:
            return self._request.form.get(name)

        return self._request.args.get(name, default)


def as_request_source(source: Any) -> RequestSourceInterface:
    """
    Adapt an object to a request source.

    Args:
        source: A RequestSourceInterface, a Flask request, a mapping,
            or any object with a ``get_param`` method

    Returns:
        RequestSourceInterface: Adapted source

    Raises:
        TypeError: If the object cannot provide parameters
    """
    if isinstance(source, RequestSourceInterface):
        return source
    if isinstance(source, Request):
        return FlaskRequestSource(source)
    if isinstance(source, Mapping):
        return MappingRequestSource(source)
    if callable(getattr(source, "get_param", None)):
        return source
    raise TypeError(
        f"Cannot read request parameters from {type(source).__name__}"
    )
