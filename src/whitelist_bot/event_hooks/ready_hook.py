import discord

from whitelist_bot.config import core, store

import logging

logger = logging.getLogger(__name__)


async def handle(client: discord.Client):
    """Log the connection and advertise the managed list in the bot's presence."""
    logger.info(f"Logged in as {client.user.name} (ID: {client.user.id})")
    logger.info(
        "Managing %s/%s:%s (cache TTL %.0fs)",
        store.GITHUB_OWNER,
        store.GITHUB_REPO,
        store.WHITELIST_FILE,
        store.CACHE_TTL,
    )

    activity = discord.Activity(
        type=discord.ActivityType.watching, name=f"{core.LIST_NAME} Whitelist"
    )
    await client.change_presence(activity=activity)
