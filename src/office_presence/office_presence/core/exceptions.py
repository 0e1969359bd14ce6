from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ConfigurationError(DomainError):
    """Raised when a required setting is missing or unusable."""


class AuthenticationError(DomainError):
    """Raised when the dashboard sign-in flow fails."""


class AuthorizationError(DomainError):
    """Raised when a signed-in identity is not allowed to use the dashboard."""


class UpstreamError(DomainError):
    """Base exception for failures talking to the meal-ordering service."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def http_status(self) -> int:
        """Status to answer our own caller with.

        Upstream 4xx/5xx codes are passed through, anything else becomes 500.
        """
        if self.status_code is not None and 400 <= self.status_code <= 599:
            return self.status_code
        return 500


class UpstreamAuthError(UpstreamError):
    """Raised when the upstream login fails or yields no usable token."""


class UpstreamTransportError(UpstreamError):
    """Raised on DNS, timeout or connection failures."""


class UpstreamHttpError(UpstreamError):
    """Raised when the upstream answers with a non-success status."""


class UpstreamProtocolError(UpstreamError):
    """Raised when an upstream response is missing an expected field."""
