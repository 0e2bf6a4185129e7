"""
Whitelist storage core.

Wire-up for the bot goes through :func:`build_service`, which builds the
GitHub client and cache from configuration. Tests construct
:class:`WhitelistCache` directly around a fake store.
"""

from __future__ import annotations

from .cache import WhitelistCache
from .errors import (
    DecodeError,
    NotFound,
    RemoteUnavailable,
    RevisionConflict,
    ValidationError,
    WhitelistError,
)
from .models import CacheEntry, MutationKind, MutationRequest, MutationResult
from .remote import GitHubContentsClient
from .service import WhitelistService


def build_service(store_cfg) -> WhitelistService:
    """Create a service backed by the configured GitHub repository."""

    remote = GitHubContentsClient(
        store_cfg.GITHUB_TOKEN,
        store_cfg.GITHUB_OWNER,
        store_cfg.GITHUB_REPO,
        branch=store_cfg.GITHUB_BRANCH,
        api_url=store_cfg.GITHUB_API_URL,
        timeout=store_cfg.REQUEST_TIMEOUT,
    )
    cache = WhitelistCache(remote, store_cfg.WHITELIST_FILE, ttl=store_cfg.CACHE_TTL)
    return WhitelistService(cache)


__all__ = [
    "build_service",
    "CacheEntry",
    "DecodeError",
    "GitHubContentsClient",
    "MutationKind",
    "MutationRequest",
    "MutationResult",
    "NotFound",
    "RemoteUnavailable",
    "RevisionConflict",
    "ValidationError",
    "WhitelistCache",
    "WhitelistError",
    "WhitelistService",
]
