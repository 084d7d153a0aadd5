"""Domain Interfaces - Contracts between the mocking layers."""

from .mock_manager import IMockManager

__all__ = [
    "IMockManager",
]
