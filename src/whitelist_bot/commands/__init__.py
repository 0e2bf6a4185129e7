"""
Slash command wiring.

The bot exposes a single ``/whitelist`` group implemented by
:class:`~whitelist_bot.commands.whitelist.Whitelist`. :func:`setup` attaches
it during ``commands.Bot.setup_hook``; the cog reads the shared
``WhitelistService`` from ``bot.whitelist_service``.
"""

from __future__ import annotations

import logging

from discord.ext import commands as commands_ext

from .whitelist import Whitelist

logger = logging.getLogger(__name__)


async def setup(bot: commands_ext.Bot) -> None:
    """Attach the ``/whitelist`` cog to ``bot`` unless it is already loaded."""

    if bot.get_cog(Whitelist.__name__):
        return
    await bot.add_cog(Whitelist(bot))
    logger.info("Registered /whitelist command group")


__all__ = ["setup", "Whitelist"]
