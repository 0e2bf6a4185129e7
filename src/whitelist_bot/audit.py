"""
Best-effort audit notifications for applied whitelist changes.

The commit history in the remote repository is the durable record. Messages
posted here are a convenience for moderators, so delivery failures are logged
and dropped.
"""

from __future__ import annotations

import logging

import discord

from whitelist_bot.config import core

logger = logging.getLogger(__name__)


def _colour_for(action: str) -> discord.Colour:
    if "Added" in action:
        return discord.Colour(0x00FF00)
    if "Removed" in action:
        return discord.Colour(0xFF0000)
    return discord.Colour(0x0099FF)


def build_embed(action: str, actor: str, details: str) -> discord.Embed:
    return discord.Embed(
        title="Whitelist Action",
        description=f"**Action:** {action}\n**By:** {actor}\n**Details:** {details}",
        colour=_colour_for(action),
        timestamp=discord.utils.utcnow(),
    )


async def log_action(
    client: discord.Client, actor: discord.abc.User, action: str, details: str
) -> None:
    """Post an audit embed to the configured log channel, if any."""

    channel_id = core.LOG_CHANNEL_ID
    if not channel_id:
        return

    try:
        channel = client.get_channel(channel_id) or await client.fetch_channel(channel_id)
        if channel is None:
            return
        await channel.send(embed=build_embed(action, str(actor), details))
    except Exception:
        logger.exception("Failed to post audit log for %r", action)


__all__ = ["log_action", "build_embed"]
