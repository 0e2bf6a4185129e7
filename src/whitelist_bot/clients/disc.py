"""Discord bot bootstrap utilities."""

from __future__ import annotations

import logging

import discord
from discord.ext import commands as discord_commands

from whitelist_bot import commands as wl_commands
from whitelist_bot.config import core, store
from whitelist_bot.event_hooks import ready_hook
from whitelist_bot.whitelist import WhitelistService, build_service

logger = logging.getLogger(__name__)

# --- Intents --------------------------------------------------------------- #
# Message content is needed to read the typed clear confirmation.
intents = discord.Intents.default()
intents.message_content = True


class WhitelistBot(discord_commands.Bot):
    """Discord bot exposing the ``/whitelist`` command group."""

    def __init__(self, service: WhitelistService | None = None) -> None:
        super().__init__(
            command_prefix=discord_commands.when_mentioned,
            intents=intents,
            application_id=core.CLIENT_ID,
        )
        self.whitelist_service = service or build_service(store)

    async def setup_hook(self) -> None:
        """Register slash commands and synchronise with Discord."""

        await wl_commands.setup(self)

        guild = discord.Object(id=core.GUILD_ID) if core.GUILD_ID else None
        if guild is not None:
            self.tree.copy_global_to(guild=guild)

        try:
            synced = await self.tree.sync(guild=guild)
            logger.info(
                "Synced %d application command(s)%s",
                len(synced),
                f" to guild {core.GUILD_ID}" if guild else "",
            )
        except Exception:
            logger.exception("Failed to sync application commands")


bot = WhitelistBot()


@bot.event
async def on_ready() -> None:
    await ready_hook.handle(bot)


def run() -> None:
    """Start the Discord bot using configuration from the environment."""

    if not core.DISCORD_TOKEN:
        logger.error("No DISCORD_TOKEN configured. Cannot run client.")
        return

    try:
        bot.run(core.DISCORD_TOKEN, log_handler=None)
    except discord.LoginFailure as exc:
        logger.error("Login failed: %s", exc)
    except Exception as exc:  # pragma: no cover - defensive guard
        logger.exception("Unexpected error while running client: %s", exc)
