"""Domain errors surfaced to the boundary layers."""

from __future__ import annotations


class AdServerError(Exception):
    """Base class for every error the ad server raises on purpose."""


class InvalidCampaign(AdServerError, ValueError):
    """Campaign creation input failed validation."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(self.errors) or "invalid campaign")


class InvalidRequest(AdServerError, ValueError):
    """Ad decision or redemption input is empty or malformed."""


class UnknownImpression(AdServerError, LookupError):
    """Impression token is not pending on any campaign."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"unknown impression token: {token!r}")


class MethodNotSupported(AdServerError):
    """HTTP verb not accepted by the endpoint."""

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(f"method not supported: {method}")


class ImpressionTokenError(AdServerError):
    """A fresh impression token could not be minted; the decision is aborted."""
