from __future__ import annotations


class InvalidInput(ValueError):
    """Raised when a URL or scalar value cannot be validated or formatted."""
