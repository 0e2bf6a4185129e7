"""
GitHub contents API client for the whitelist document.

The store is content-addressed: every read returns the blob ``sha`` of the
file, and a write is only accepted when it carries the sha of the current
version. A write made from an outdated sha is rejected (HTTP 409), which is
surfaced as :class:`RevisionConflict` instead of being retried.
"""

from __future__ import annotations

import asyncio
import base64
import binascii
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Tuple
from urllib.parse import quote

import aiohttp

from .errors import DecodeError, NotFound, RemoteUnavailable, RevisionConflict
from .models import WhitelistDocument, decode_document, encode_document

logger = logging.getLogger(__name__)

_CONFLICT_STATUSES = {409, 422}


class GitHubContentsClient:
    """Fetch and commit a single file through ``/repos/{owner}/{repo}/contents``."""

    def __init__(
        self,
        token: str,
        owner: str,
        repo: str,
        *,
        branch: str | None = None,
        api_url: str = "https://api.github.com",
        timeout: float = 15.0,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self.owner = owner
        self.repo = repo
        self.branch = branch
        self._api_url = api_url.rstrip("/")
        self._headers = {
            "Authorization": f"Bearer {token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        self._timeout = aiohttp.ClientTimeout(total=timeout)
        self._session = session

    def _url(self, path: str) -> str:
        return (
            f"{self._api_url}/repos/{quote(self.owner)}/{quote(self.repo)}"
            f"/contents/{quote(path.lstrip('/'))}"
        )

    @asynccontextmanager
    async def _client(self) -> AsyncIterator[aiohttp.ClientSession]:
        if self._session is not None:
            yield self._session
            return
        async with aiohttp.ClientSession(
            headers=self._headers, timeout=self._timeout
        ) as session:
            yield session

    # ---------- operations ------------------------------------------- #

    async def fetch_document(self, path: str) -> Tuple[WhitelistDocument, str]:
        """Return the decoded document at ``path`` and its blob sha."""

        params = {"ref": self.branch} if self.branch else None
        try:
            async with self._client() as session:
                async with session.get(
                    self._url(path), params=params, headers=self._headers
                ) as resp:
                    if resp.status == 404:
                        raise NotFound(
                            f"{path} not found in {self.owner}/{self.repo}"
                        )
                    if resp.status >= 400:
                        raise RemoteUnavailable(
                            f"GitHub returned {resp.status} fetching {path}"
                        )
                    try:
                        payload = await resp.json(content_type=None)
                    except ValueError as exc:
                        raise DecodeError(f"GitHub returned a non-JSON body for {path}") from exc
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise RemoteUnavailable(f"Failed to fetch {path}: {exc}") from exc

        if not isinstance(payload, dict) or payload.get("type", "file") != "file":
            raise DecodeError(f"{path} is not a file")

        try:
            raw = base64.b64decode(payload.get("content", ""), validate=False)
            sha = str(payload["sha"])
        except (binascii.Error, KeyError) as exc:
            raise DecodeError(f"Malformed contents response for {path}") from exc

        document = decode_document(raw)
        logger.info("Fetched %s (sha %s, %d ids)", path, sha[:7], len(document["whitelist"]))
        return document, sha

    async def commit_document(
        self, path: str, document: WhitelistDocument, revision: str, message: str
    ) -> None:
        """Write ``document`` to ``path`` if ``revision`` is still current."""

        content = encode_document(document)
        body = {
            "message": message,
            "content": base64.b64encode(content).decode("ascii"),
            "sha": revision,
        }
        if self.branch:
            body["branch"] = self.branch

        try:
            async with self._client() as session:
                async with session.put(
                    self._url(path), json=body, headers=self._headers
                ) as resp:
                    if resp.status in _CONFLICT_STATUSES:
                        raise RevisionConflict(
                            f"{path} changed since revision {revision[:7]}"
                        )
                    if resp.status == 404:
                        raise NotFound(
                            f"{path} not found in {self.owner}/{self.repo}"
                        )
                    if resp.status >= 400:
                        raise RemoteUnavailable(
                            f"GitHub returned {resp.status} committing {path}"
                        )
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise RemoteUnavailable(f"Failed to commit {path}: {exc}") from exc

        logger.info("Committed %s: %s", path, message)


__all__ = ["GitHubContentsClient"]
