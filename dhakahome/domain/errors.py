# dhakahome/domain/errors.py
from __future__ import annotations

from enum import Enum


class FallbackReason(str, Enum):
    """Closed set of upstream read failures that switch a call over to mock data."""

    network = "network"
    status = "status"
    decode = "decode"


class UpstreamError(Exception):
    def __init__(self, reason: FallbackReason, detail: str, *, status_code: int | None = None) -> None:
        super().__init__(f"{reason.value}: {detail}")
        self.reason = reason
        self.detail = detail
        self.status_code = status_code


class TokenError(RuntimeError):
    """OAuth token could not be obtained."""


class LeadSubmissionError(RuntimeError):
    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
