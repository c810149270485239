"""
FiveStar Support SDK v1.1.0
Exception types (Python)
MIT License
"""

from typing import Optional


class FiveStarError(Exception):
    """Base class for every error raised by the SDK."""


class FormatError(FiveStarError, ValueError):
    """Text is not a 26 character Crockford Base32 value."""


class EntropyUnavailableError(FiveStarError):
    """The secure random source failed; a customer id cannot be minted."""


class FiveStarAPIError(FiveStarError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    def __repr__(self) -> str:
        return f"FiveStarAPIError(message={self.message!r}, status_code={self.status_code!r})"
