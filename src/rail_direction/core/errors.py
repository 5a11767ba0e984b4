"""Error types raised while correcting line directions."""
from __future__ import annotations

from typing import Any, List, Optional


class CorrectionError(Exception):
    """Base class for every fatal error of a correction run."""


class ArgumentError(CorrectionError):
    """The run was started without the arguments it needs."""


class StationLookupError(CorrectionError, LookupError):
    """A line segment references a station code missing from the index."""

    def __init__(self, code: str) -> None:
        super().__init__(f"{code} not found")
        self.code = code


class FeatureServiceError(CorrectionError):
    """A query or update call failed at the transport or service layer."""

    def __init__(self, message: str, code: Optional[int] = None, details: Optional[List[Any]] = None) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or []

    @classmethod
    def from_payload(cls, url: str, error: dict) -> "FeatureServiceError":
        code = error.get("code")
        message = error.get("message") or error.get("description") or "unknown error"
        return cls(f"{url}: {code} {message}", code=code, details=error.get("details"))
