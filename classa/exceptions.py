"""
Exception types raised by the ClassA entropy pipeline.

Both subclass ValueError so callers that already guard numeric routines with
``except ValueError`` keep working.
"""


class ClassAError(ValueError):
    """Base class for all ClassA entropy errors."""


class InvalidParameter(ClassAError):
    """An input failed its pre-condition (type, range or unknown name)."""


class InsufficientLength(ClassAError):
    """Too few samples remain to form a non-empty coordinate pair."""
