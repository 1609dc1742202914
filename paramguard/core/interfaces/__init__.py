"""
Core interfaces module for paramguard.

This module provides access to all core interfaces used throughout
the package.
"""

from .request_source_interface import RequestSourceInterface

__all__ = [
    'RequestSourceInterface'
]
