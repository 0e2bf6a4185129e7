"""Read-apply-commit coordination between the cache and the mutation engine."""

from __future__ import annotations

import logging
from typing import List

from . import mutations
from .cache import WhitelistCache
from .models import MutationRequest, MutationResult, WhitelistDocument, copy_document

logger = logging.getLogger(__name__)


class WhitelistService:
    """Entry point used by command handlers; owns the injected cache."""

    def __init__(self, cache: WhitelistCache) -> None:
        self.cache = cache

    async def ids(self) -> List[int]:
        entry = await self.cache.read()
        return list(entry.ids)

    async def contains(self, user_id: int) -> bool:
        entry = await self.cache.read()
        return user_id in entry.ids

    async def count(self) -> int:
        entry = await self.cache.read()
        return len(entry.ids)

    async def snapshot(self) -> WhitelistDocument:
        """Return a private copy of the full document for export."""
        entry = await self.cache.read()
        return copy_document(entry.document)

    async def apply(self, request: MutationRequest) -> MutationResult:
        """
        Apply ``request`` to the current document and commit the outcome.

        A result with no applied ids is returned without writing, so no empty
        commit reaches the store history.
        """

        entry = await self.cache.read()
        result = mutations.apply(entry.document, request)
        if result.is_noop:
            logger.info(
                "Skipping %s: nothing changed (skipped %s)",
                request.kind.value,
                result.skipped,
            )
            return result

        message = mutations.commit_message(request, result)
        await self.cache.write_through(
            result.new_document, message, revision=entry.revision
        )
        logger.info("Applied %s: %s", request.kind.value, message)
        return result


__all__ = ["WhitelistService"]
