"""Failure taxonomy for whitelist storage and mutation."""

from __future__ import annotations


class WhitelistError(Exception):
    """Base class for every failure surfaced to command handlers."""


class RemoteUnavailable(WhitelistError):
    """Network, authentication, or unexpected HTTP failure talking to the store."""


class NotFound(WhitelistError):
    """The whitelist document does not exist at the configured path."""


class DecodeError(WhitelistError):
    """Stored content is not a valid whitelist document."""


class RevisionConflict(WhitelistError):
    """Another writer committed since the revision used for this write was read."""


class ValidationError(WhitelistError):
    """Malformed user-id input rejected before it reaches the store."""


__all__ = [
    "WhitelistError",
    "RemoteUnavailable",
    "NotFound",
    "DecodeError",
    "RevisionConflict",
    "ValidationError",
]
