"""
Single-slot TTL cache in front of the remote whitelist document.

One ``WhitelistCache`` owns the slot for one document path. Reads inside the
TTL window return the same :class:`CacheEntry`; stale or empty slots are
refetched. ``write_through`` commits against the revision of the entry the new
document was derived from, never a revision fetched later, and clears the slot
afterwards so the next read picks up the sha the store assigned to the new
version.

No lock guards the read-modify-write cycle. Two commands that read the same
entry and both write will race; the loser gets :class:`RevisionConflict` from
the store and nothing is retried here.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Protocol, Tuple

from .models import CacheEntry, WhitelistDocument

logger = logging.getLogger(__name__)

DEFAULT_TTL = 60.0


class RemoteStore(Protocol):
    """Optimistic-concurrency file store used by the cache."""

    async def fetch_document(self, path: str) -> Tuple[WhitelistDocument, str]:
        ...

    async def commit_document(
        self, path: str, document: WhitelistDocument, revision: str, message: str
    ) -> None:
        ...


class WhitelistCache:
    def __init__(
        self,
        remote: RemoteStore,
        path: str,
        *,
        ttl: float = DEFAULT_TTL,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._remote = remote
        self._path = path
        self._ttl = ttl
        self._clock = clock
        self._entry: CacheEntry | None = None

    @property
    def path(self) -> str:
        return self._path

    async def read(self) -> CacheEntry:
        """Return the cached entry, refetching when absent or older than the TTL."""

        now = self._clock()
        entry = self._entry
        if entry is not None and entry.age(now) < self._ttl:
            logger.debug("Whitelist cache hit (age %.1fs)", entry.age(now))
            return entry

        document, revision = await self._remote.fetch_document(self._path)
        entry = CacheEntry(document=document, revision=revision, fetched_at=now)
        self._entry = entry
        return entry

    def invalidate(self) -> None:
        self._entry = None

    async def write_through(
        self, document: WhitelistDocument, message: str, *, revision: str
    ) -> None:
        """
        Commit ``document`` only if the store still holds ``revision``.

        ``revision`` must come from the :class:`CacheEntry` that ``document`` was
        computed from. Store errors propagate unchanged; the slot is only
        cleared on success.
        """

        await self._remote.commit_document(self._path, document, revision, message)
        self.invalidate()


__all__ = ["WhitelistCache", "RemoteStore", "DEFAULT_TTL"]
