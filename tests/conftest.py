"""
Test configuration and fixtures for paramguard tests.
"""

import pytest
from typing import Any, Dict
from unittest.mock import Mock

from paramguard.application.services import Validator
from paramguard.infrastructure.request import MappingRequestSource
from paramguard.shared.logging import LoggerInterface
from paramguard.shared.validation import EmailRule, LengthRule, NotEmptyRule, chain


@pytest.fixture
def params() -> Dict[str, Any]:
    """Parameters of a typical sign-up request."""
    return {
        "username": "alexis",
        "email": "alexis@example.com",
        "password": "correct horse battery staple",
    }


@pytest.fixture
def source(params) -> MappingRequestSource:
    """Request source over the sign-up parameters."""
    return MappingRequestSource(params)


@pytest.fixture
def mock_logger():
    """Mock logger recording validator log calls."""
    return Mock(spec=LoggerInterface)


@pytest.fixture
def validator(mock_logger) -> Validator:
    """Validator without default messages."""
    return Validator(logger=mock_logger)


@pytest.fixture
def signup_rules():
    """Rules for the sign-up request."""
    return {
        "username": chain(NotEmptyRule(), LengthRule(min_length=3, max_length=20)),
        "email": chain(NotEmptyRule(), EmailRule()),
        "password": chain(NotEmptyRule(), LengthRule(min_length=8)),
    }
