"""Parsing of user-id arguments into validated integers."""

from __future__ import annotations

import re
from typing import List

from ..whitelist.errors import ValidationError

_ID_RE = re.compile(r"^\d+$", re.ASCII)


def parse_user_id(raw: str) -> int:
    """Return ``raw`` as a non-negative integer or raise :class:`ValidationError`."""

    value = (raw or "").strip()
    if not _ID_RE.match(value):
        raise ValidationError("Invalid User ID. Please provide a valid Roblox User ID.")
    return int(value)


def parse_user_ids(raw: str) -> List[int]:
    """
    Parse a comma-separated id list, keeping caller order.

    Non-numeric tokens are dropped; an input with no usable ids is rejected.
    """

    ids = [int(token) for token in (t.strip() for t in (raw or "").split(",")) if _ID_RE.match(token)]
    if not ids:
        raise ValidationError("No valid User IDs provided.")
    return ids


__all__ = ["parse_user_id", "parse_user_ids"]
