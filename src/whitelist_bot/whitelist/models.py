"""
Data model for the remote whitelist document.

``WhitelistDocument`` is kept as a plain ``dict`` so fields other than
``whitelist`` round-trip untouched. The helpers here decode and encode it and
copy it before mutation so cached documents are never edited in place.
"""

from __future__ import annotations

import copy
import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple

from .errors import DecodeError

WhitelistDocument = Dict[str, Any]


def decode_document(raw: bytes) -> WhitelistDocument:
    """Parse stored bytes into a document, validating the ``whitelist`` field."""

    try:
        document = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise DecodeError(f"Whitelist document is not valid JSON: {exc}") from exc

    if not isinstance(document, dict):
        raise DecodeError("Whitelist document must be a JSON object")

    ids = document.get("whitelist")
    if not isinstance(ids, list) or not all(
        isinstance(i, int) and not isinstance(i, bool) for i in ids
    ):
        raise DecodeError("Whitelist document needs a 'whitelist' list of integers")

    return document


def encode_document(document: WhitelistDocument) -> bytes:
    """Serialize ``document`` the way it is committed: two-space indented JSON."""

    return json.dumps(document, indent=2).encode("utf-8")


def copy_document(document: WhitelistDocument) -> WhitelistDocument:
    return copy.deepcopy(document)


@dataclass(frozen=True, slots=True)
class CacheEntry:
    """Last fetched document with its revision token and monotonic fetch time."""

    document: WhitelistDocument
    revision: str
    fetched_at: float

    @property
    def ids(self) -> List[int]:
        return self.document["whitelist"]

    def age(self, now: float) -> float:
        return now - self.fetched_at


class MutationKind(str, Enum):
    ADD = "add"
    REMOVE = "remove"
    BULK_ADD = "bulk_add"
    BULK_REMOVE = "bulk_remove"
    CLEAR = "clear"


@dataclass(frozen=True, slots=True)
class MutationRequest:
    """A requested change; ``ids`` keeps caller order and may repeat."""

    kind: MutationKind
    ids: Tuple[int, ...] = ()
    reason: str = ""

    @classmethod
    def add(cls, user_id: int, reason: str = "") -> "MutationRequest":
        return cls(MutationKind.ADD, (user_id,), reason)

    @classmethod
    def remove(cls, user_id: int, reason: str = "") -> "MutationRequest":
        return cls(MutationKind.REMOVE, (user_id,), reason)

    @classmethod
    def bulk_add(cls, user_ids, reason: str = "") -> "MutationRequest":
        return cls(MutationKind.BULK_ADD, tuple(user_ids), reason)

    @classmethod
    def bulk_remove(cls, user_ids, reason: str = "") -> "MutationRequest":
        return cls(MutationKind.BULK_REMOVE, tuple(user_ids), reason)

    @classmethod
    def clear(cls) -> "MutationRequest":
        return cls(MutationKind.CLEAR)


@dataclass(slots=True)
class MutationResult:
    new_document: WhitelistDocument
    applied: List[int] = field(default_factory=list)
    skipped: List[int] = field(default_factory=list)
    previous_count: int = 0

    @property
    def is_noop(self) -> bool:
        """True when nothing changed; such results are never committed."""
        return not self.applied


__all__ = [
    "WhitelistDocument",
    "decode_document",
    "encode_document",
    "copy_document",
    "CacheEntry",
    "MutationKind",
    "MutationRequest",
    "MutationResult",
]
