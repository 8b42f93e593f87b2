"""
Exception types raised by goalscope.

Missing input files surface as the built-in ``FileNotFoundError``; everything
else derives from ``GoalscopeError``.
"""

from __future__ import annotations


class GoalscopeError(ValueError):
    """Base class for goalscope data and analysis errors."""


class SchemaError(GoalscopeError):
    """Raised when the input table lacks one or more required columns."""

    def __init__(self, missing: list[str]):
        self.missing = list(missing)
        super().__init__(f"Missing required goal columns: {self.missing}")


class InsufficientSampleError(GoalscopeError):
    """Raised when a sample is too small for the requested statistical test."""

    def __init__(self, test_name: str, n: int, required: int):
        self.test_name = test_name
        self.n = n
        self.required = required
        super().__init__(
            f"{test_name} needs at least {required} observations, got {n}"
        )


class DegenerateTableError(GoalscopeError):
    """Raised when a contingency table has an all-zero row or column margin."""
