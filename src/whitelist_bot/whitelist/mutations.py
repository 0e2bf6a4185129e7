"""
Pure mutation engine for whitelist documents.

Each request kind maps to a function taking the current document and returning
a :class:`MutationResult` with a new document. Inputs are never modified. Ids
are processed in caller order, and every id sees the effect of the ids before
it, so repeated ids inside one bulk request land in ``skipped``.

Pre-existing duplicates in the stored list are left alone: ``add`` only checks
membership and ``remove`` drops the first occurrence.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable

from .models import (
    MutationKind,
    MutationRequest,
    MutationResult,
    WhitelistDocument,
    copy_document,
)


def _add_all(document: WhitelistDocument, ids: Iterable[int]) -> MutationResult:
    new_document = copy_document(document)
    current = new_document["whitelist"]
    result = MutationResult(new_document=new_document, previous_count=len(current))

    for user_id in ids:
        if user_id in current:
            result.skipped.append(user_id)
        else:
            current.append(user_id)
            result.applied.append(user_id)
    return result


def _remove_all(document: WhitelistDocument, ids: Iterable[int]) -> MutationResult:
    new_document = copy_document(document)
    current = new_document["whitelist"]
    result = MutationResult(new_document=new_document, previous_count=len(current))

    for user_id in ids:
        if user_id in current:
            current.remove(user_id)
            result.applied.append(user_id)
        else:
            result.skipped.append(user_id)
    return result


def _clear(document: WhitelistDocument, ids: Iterable[int]) -> MutationResult:
    new_document = copy_document(document)
    removed = list(new_document["whitelist"])
    new_document["whitelist"] = []
    return MutationResult(
        new_document=new_document, applied=removed, previous_count=len(removed)
    )


_HANDLERS: Dict[MutationKind, Callable[[WhitelistDocument, Iterable[int]], MutationResult]] = {
    MutationKind.ADD: _add_all,
    MutationKind.BULK_ADD: _add_all,
    MutationKind.REMOVE: _remove_all,
    MutationKind.BULK_REMOVE: _remove_all,
    MutationKind.CLEAR: _clear,
}


def apply(document: WhitelistDocument, request: MutationRequest) -> MutationResult:
    """Return the result of applying ``request`` to ``document``."""

    if request.kind in (MutationKind.ADD, MutationKind.REMOVE) and len(request.ids) != 1:
        raise ValueError(f"{request.kind.value} expects exactly one id, got {len(request.ids)}")
    return _HANDLERS[request.kind](document, request.ids)


def commit_message(request: MutationRequest, result: MutationResult) -> str:
    """Describe an applied mutation for the store's history."""

    kind = request.kind
    if kind is MutationKind.ADD:
        return f"Added user {result.applied[0]} - {request.reason}"
    if kind is MutationKind.REMOVE:
        return f"Removed user {result.applied[0]} - {request.reason}"
    if kind is MutationKind.BULK_ADD:
        return f"Bulk added {len(result.applied)} users - {request.reason}"
    if kind is MutationKind.BULK_REMOVE:
        return f"Bulk removed {len(result.applied)} users - {request.reason}"
    return f"Cleared whitelist - removed {result.previous_count} users"


__all__ = ["apply", "commit_message"]
