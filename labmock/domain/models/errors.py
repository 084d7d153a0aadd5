"""
Mock Framework Errors.

Precondition violations in test code are raised as MockAssertionError so they
surface exactly like a failed ``assert`` in the test that caused them.
"""


class MockAssertionError(AssertionError):
    """Raised when a mock is used in a way it was never set up for."""
