"""Error types for samazama.

Provides a small exception hierarchy:
- A base error carrying a category, context and a recoverable flag
- The recursion budget failure raised by permutation generation
- Configuration errors raised while building lookup tables
"""

from __future__ import annotations

from enum import Enum


class ErrorCategory(str, Enum):
    """Categories of errors for handling decisions."""

    RESOURCE_LIMIT = "resource_limit"  # Work bound exceeded - pre-reduce and retry
    CONFIGURATION = "configuration"  # Bad tables or settings - don't retry
    INTERNAL = "internal"  # Bug in code - don't retry


class SamazamaError(Exception):
    """Base exception for samazama errors.

    Attributes:
        message: Human-readable error message
        category: Error category for handling
        context: Additional context information
        recoverable: Whether the caller can recover by changing its input
    """

    category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        context: dict | None = None,
        recoverable: bool = False,
    ):
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.recoverable = recoverable

    def __str__(self) -> str:
        if self.context:
            return f"{self.message} (context: {self.context})"
        return self.message


class RecursionExceeded(SamazamaError):
    """Permutation generation spent more than its recursion budget.

    The whole top-level call is abandoned. Callers recover by shrinking the
    input with ``remove_repeats`` and trying again.

    Attributes:
        ceiling: Budget ceiling that was crossed
        count: Budget count at the moment of failure
    """

    category = ErrorCategory.RESOURCE_LIMIT

    def __init__(self, ceiling: int, count: int, context: dict | None = None):
        super().__init__(
            f"Exceeded recursion budget of {ceiling}",
            context={"ceiling": ceiling, "count": count, **(context or {})},
            recoverable=True,
        )
        self.ceiling = ceiling
        self.count = count


class ConfigurationError(SamazamaError):
    """Configuration error.

    Examples: a letter assigned to two sound groups, a three-letter digraph.
    """

    category = ErrorCategory.CONFIGURATION

    def __init__(self, message: str, context: dict | None = None):
        super().__init__(message, context, recoverable=False)


def format_error_for_display(error: Exception) -> str:
    """Format an error message for user display.

    Args:
        error: Error to format

    Returns:
        Human-readable error message
    """
    if isinstance(error, SamazamaError):
        category = error.category.value
        if error.context:
            context_str = ", ".join(f"{k}={v}" for k, v in error.context.items())
            return f"[{category}] {error.message} ({context_str})"
        return f"[{category}] {error.message}"

    return f"[error] {type(error).__name__}: {error}"
