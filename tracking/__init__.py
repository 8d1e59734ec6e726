"""Function call tracking used across the booking client."""

from .runtime import t

__all__ = ["t"]
