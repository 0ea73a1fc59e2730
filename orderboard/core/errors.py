from __future__ import annotations


class InvalidOrderError(ValueError):
    """Raised when order input fails validation; nothing is stored."""
