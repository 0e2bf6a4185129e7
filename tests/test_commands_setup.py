import asyncio

import discord
from discord.ext import commands as discord_commands

from whitelist_bot import commands as wl_commands


async def _collect():
    bot = discord_commands.Bot(command_prefix="!", intents=discord.Intents.none())
    bot.whitelist_service = None
    try:
        await wl_commands.setup(bot)
        group = bot.tree.get_command("whitelist")
        return set(bot.cogs.keys()), group
    finally:
        await bot.close()


def test_setup_registers_whitelist_group():
    cogs, group = asyncio.run(_collect())

    assert "Whitelist" in cogs
    assert {cmd.name for cmd in group.commands} == {
        "add",
        "remove",
        "check",
        "list",
        "count",
        "bulk-add",
        "bulk-remove",
        "clear",
        "backup",
    }
