"""Embed builders for whitelist command replies."""

from __future__ import annotations

import datetime
import io
import json
from typing import List, Sequence

import discord

GREEN = discord.Colour(0x00FF00)
RED = discord.Colour(0xFF0000)
BLUE = discord.Colour(0x0099FF)

FIELD_LIMIT = 1024


def _embed(title: str, description: str | None, colour: discord.Colour) -> discord.Embed:
    return discord.Embed(
        title=title,
        description=description,
        colour=colour,
        timestamp=discord.utils.utcnow(),
    )


def _join_ids(ids: Sequence[int]) -> str:
    return ", ".join(str(i) for i in ids)[:FIELD_LIMIT] or "None"


def user_change(added: bool, user_id: int, reason: str, list_name: str) -> discord.Embed:
    if added:
        embed = _embed(
            "✅ User Added to Whitelist",
            f"Successfully added User ID `{user_id}` to the {list_name} whitelist.",
            GREEN,
        )
    else:
        embed = _embed(
            "✅ User Removed from Whitelist",
            f"Successfully removed User ID `{user_id}` from the {list_name} whitelist.",
            RED,
        )
    embed.add_field(name="User ID", value=str(user_id), inline=True)
    embed.add_field(name="Reason", value=reason, inline=True)
    return embed


def check(user_id: int, whitelisted: bool) -> discord.Embed:
    state = "✅ whitelisted" if whitelisted else "❌ not whitelisted"
    return _embed(
        "Whitelist Check",
        f"User ID `{user_id}` is {state}.",
        GREEN if whitelisted else RED,
    )


def list_pages(ids: Sequence[int], page_size: int, list_name: str) -> List[discord.Embed]:
    """Split ``ids`` into code-block pages of ``page_size`` entries each."""

    chunks = [ids[i : i + page_size] for i in range(0, len(ids), page_size)]
    pages = []
    for index, chunk in enumerate(chunks, start=1):
        body = "\n".join(str(i) for i in chunk)
        embed = _embed(
            f"{list_name} Whitelist (Page {index}/{len(chunks)})",
            f"```\n{body}\n```",
            BLUE,
        )
        embed.set_footer(text=f"Total: {len(ids)} users")
        pages.append(embed)
    return pages


def count(total: int, list_name: str) -> discord.Embed:
    return _embed(
        "Whitelist Count",
        f"There are currently **{total}** users whitelisted for {list_name}.",
        BLUE,
    )


def bulk_result(
    added: bool, applied: Sequence[int], skipped: Sequence[int]
) -> discord.Embed:
    if added:
        embed = _embed("Bulk Add Results", None, GREEN)
        applied_label, skipped_label = "✅ Added", "⚠️ Already Whitelisted"
    else:
        embed = _embed("Bulk Remove Results", None, RED)
        applied_label, skipped_label = "✅ Removed", "⚠️ Not in Whitelist"

    if applied:
        embed.add_field(name=f"{applied_label} ({len(applied)})", value=_join_ids(applied), inline=False)
    if skipped:
        embed.add_field(name=f"{skipped_label} ({len(skipped)})", value=_join_ids(skipped), inline=False)
    return embed


def clear_prompt() -> discord.Embed:
    return _embed(
        "⚠️ Clear Whitelist Confirmation",
        "Are you sure you want to clear the entire whitelist? This action cannot be undone.",
        RED,
    )


def cleared(removed: int) -> discord.Embed:
    return _embed(
        "✅ Whitelist Cleared",
        f"Successfully removed all {removed} users from the whitelist.",
        GREEN,
    )


def backup(document: dict, list_name: str) -> tuple[discord.Embed, discord.File]:
    """Return the backup summary embed and the JSON attachment."""

    stamp = datetime.datetime.now(datetime.timezone.utc).isoformat()
    for ch in ":.+":
        stamp = stamp.replace(ch, "-")
    filename = f"{list_name.lower()}-whitelist-backup-{stamp}.json"
    payload = json.dumps(document, indent=2).encode("utf-8")

    embed = _embed(
        "📁 Whitelist Backup",
        f"Here's your backup of the {list_name} whitelist containing "
        f"**{len(document.get('whitelist', []))}** users.",
        BLUE,
    )
    return embed, discord.File(io.BytesIO(payload), filename=filename)


def error(message: str) -> discord.Embed:
    return _embed("❌ Error", f"An error occurred: {message}", RED)


__all__ = [
    "user_change",
    "check",
    "list_pages",
    "count",
    "bulk_result",
    "clear_prompt",
    "cleared",
    "backup",
    "error",
]
