import asyncio
import hashlib
import os
import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

# Add src/ to sys.path for imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

# Ensure required environment variables before whitelist_bot.config is imported
os.environ.setdefault("DISCORD_TOKEN", "test-token")
os.environ.setdefault("CLIENT_ID", "1234")
os.environ.setdefault("GITHUB_TOKEN", "test-github")

from whitelist_bot.whitelist.errors import NotFound, RevisionConflict  # noqa: E402
from whitelist_bot.whitelist.models import decode_document, encode_document  # noqa: E402


class InMemoryStore:
    """Content-addressed fake of the GitHub contents API."""

    def __init__(self, files=None, *, yield_on_commit: bool = False) -> None:
        self.files: dict[str, tuple[bytes, str]] = {}
        self.history: list[str] = []
        self.fetch_calls = 0
        self.commit_calls = 0
        self._yield_on_commit = yield_on_commit
        for path, document in (files or {}).items():
            self._put(path, document)

    def _put(self, path, document) -> str:
        raw = encode_document(document)
        sha = hashlib.sha1(raw).hexdigest()
        self.files[path] = (raw, sha)
        return sha

    def document(self, path):
        return decode_document(self.files[path][0])

    def revision(self, path):
        return self.files[path][1]

    async def fetch_document(self, path):
        self.fetch_calls += 1
        if path not in self.files:
            raise NotFound(path)
        raw, sha = self.files[path]
        return decode_document(raw), sha

    async def commit_document(self, path, document, revision, message):
        self.commit_calls += 1
        if self._yield_on_commit:
            await asyncio.sleep(0)
        if path not in self.files:
            raise NotFound(path)
        if self.files[path][1] != revision:
            raise RevisionConflict(f"{path} changed since {revision}")
        self._put(path, document)
        self.history.append(message)


class FakeClock:
    def __init__(self, start: float = 1000.0, step: float = 0.0) -> None:
        self.now = start
        self.step = step

    def __call__(self) -> float:
        current = self.now
        self.now += self.step
        return current

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def store_factory():
    return InMemoryStore


@pytest.fixture
def clock():
    return FakeClock()


class _FakeResponse:
    def __init__(self) -> None:
        self.deferred = False
        self.messages: list[dict] = []

    async def defer(self, **kwargs) -> None:
        self.deferred = True

    async def send_message(self, content=None, **kwargs) -> None:
        self.messages.append({"content": content, **kwargs})

    def is_done(self) -> bool:
        return self.deferred or bool(self.messages)


class _FakeFollowup:
    def __init__(self) -> None:
        self.messages: list[dict] = []

    async def send(self, content=None, **kwargs) -> None:
        self.messages.append({"content": content, **kwargs})


class FakeInteraction(SimpleNamespace):
    async def edit_original_response(self, **kwargs) -> None:
        self.edits.append(kwargs)


@pytest.fixture
def make_interaction():
    def _make(user_id: int = 55, roles=(), channel_id: int = 900):
        return FakeInteraction(
            user=SimpleNamespace(id=user_id, roles=list(roles), name="mod"),
            channel_id=channel_id,
            response=_FakeResponse(),
            followup=_FakeFollowup(),
            edits=[],
        )

    return _make
