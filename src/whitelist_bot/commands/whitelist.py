"""
``/whitelist`` slash command group.

Every subcommand is gated on the configured admin role. Mutations go through
:class:`~whitelist_bot.whitelist.WhitelistService`, which the bot owns and
shares with this cog; store and validation failures are rendered by
:meth:`Whitelist.cog_app_command_error`.
"""

from __future__ import annotations

import logging

import discord
from discord import app_commands
from discord.ext import commands

from . import embeds
from .confirm import ClearConfirmation, ConfirmState
from .ids import parse_user_id, parse_user_ids
from .. import audit
from ..config import core
from ..whitelist import (
    MutationRequest,
    RevisionConflict,
    ValidationError,
    WhitelistError,
    WhitelistService,
)

logger = logging.getLogger(__name__)

DEFAULT_REASON = "No reason provided"
DEFAULT_BULK_ADD_REASON = "Bulk add - No reason provided"
DEFAULT_BULK_REMOVE_REASON = "Bulk remove - No reason provided"


def is_admin(user: discord.abc.User) -> bool:
    """Return ``True`` when no admin role is configured or ``user`` holds it."""

    role_id = core.ADMIN_ROLE_ID
    if not role_id:
        return True
    return any(role.id == role_id for role in getattr(user, "roles", ()))


class Whitelist(
    commands.GroupCog,
    group_name="whitelist",
    group_description="Manage the whitelist",
):
    """Slash commands managing the stored whitelist."""

    def __init__(self, bot: commands.Bot):
        self.bot = bot

    @property
    def service(self) -> WhitelistService:
        return self.bot.whitelist_service

    async def interaction_check(self, interaction: discord.Interaction) -> bool:
        if is_admin(interaction.user):
            return True
        await interaction.response.send_message(
            "❌ You do not have permission to manage the whitelist.", ephemeral=True
        )
        return False

    async def cog_app_command_error(
        self, interaction: discord.Interaction, error: app_commands.AppCommandError
    ) -> None:
        if isinstance(error, app_commands.CheckFailure):
            return

        original = getattr(error, "original", error)
        if isinstance(original, ValidationError):
            await self._reply(interaction, content=f"❌ {original}")
            return

        if isinstance(original, RevisionConflict):
            message = "The whitelist was changed by someone else at the same time. Please run the command again."
            logger.warning("Revision conflict: %s", original)
        elif isinstance(original, WhitelistError):
            message = str(original)
            logger.error("Whitelist command failed: %s", original)
        else:
            message = "Unexpected error"
            logger.exception("Unhandled error in /whitelist", exc_info=original)

        await self._reply(interaction, embed=embeds.error(message))

    @staticmethod
    async def _reply(interaction: discord.Interaction, **kwargs) -> None:
        if interaction.response.is_done():
            await interaction.followup.send(**kwargs)
        else:
            await interaction.response.send_message(ephemeral=True, **kwargs)

    # ----------------------------- single-id ----------------------------- #

    @app_commands.command(name="add", description="Add a user to the whitelist")
    @app_commands.describe(userid="Roblox User ID to add", reason="Reason for adding")
    async def add(
        self, interaction: discord.Interaction, userid: str, reason: str | None = None
    ) -> None:
        await interaction.response.defer()
        user_id = parse_user_id(userid)
        reason = reason or DEFAULT_REASON

        result = await self.service.apply(MutationRequest.add(user_id, reason))
        if result.is_noop:
            await interaction.edit_original_response(
                content=f"⚠️ User ID `{user_id}` is already whitelisted."
            )
            return

        await audit.log_action(
            self.bot, interaction.user, "Added User", f"User ID: {user_id}\nReason: {reason}"
        )
        await interaction.edit_original_response(
            embed=embeds.user_change(True, user_id, reason, core.LIST_NAME)
        )

    @app_commands.command(name="remove", description="Remove a user from the whitelist")
    @app_commands.describe(userid="Roblox User ID to remove", reason="Reason for removal")
    async def remove(
        self, interaction: discord.Interaction, userid: str, reason: str | None = None
    ) -> None:
        await interaction.response.defer()
        user_id = parse_user_id(userid)
        reason = reason or DEFAULT_REASON

        result = await self.service.apply(MutationRequest.remove(user_id, reason))
        if result.is_noop:
            await interaction.edit_original_response(
                content=f"⚠️ User ID `{user_id}` is not in the whitelist."
            )
            return

        await audit.log_action(
            self.bot, interaction.user, "Removed User", f"User ID: {user_id}\nReason: {reason}"
        )
        await interaction.edit_original_response(
            embed=embeds.user_change(False, user_id, reason, core.LIST_NAME)
        )

    # ----------------------------- read-only ----------------------------- #

    @app_commands.command(name="check", description="Check if a user is whitelisted")
    @app_commands.describe(userid="Roblox User ID to check")
    async def check(self, interaction: discord.Interaction, userid: str) -> None:
        await interaction.response.defer()
        user_id = parse_user_id(userid)
        whitelisted = await self.service.contains(user_id)
        await interaction.edit_original_response(embed=embeds.check(user_id, whitelisted))

    @app_commands.command(name="list", description="List all whitelisted users")
    async def list_(self, interaction: discord.Interaction) -> None:
        await interaction.response.defer()
        ids = await self.service.ids()
        if not ids:
            await interaction.edit_original_response(
                content="📋 The whitelist is currently empty."
            )
            return

        pages = embeds.list_pages(ids, core.PAGE_SIZE, core.LIST_NAME)
        await interaction.edit_original_response(embed=pages[0])
        for page in pages[1:]:
            await interaction.followup.send(embed=page)

    @app_commands.command(name="count", description="Get the count of whitelisted users")
    async def count(self, interaction: discord.Interaction) -> None:
        await interaction.response.defer()
        total = await self.service.count()
        await interaction.edit_original_response(embed=embeds.count(total, core.LIST_NAME))

    @app_commands.command(name="backup", description="Get a backup of the current whitelist")
    async def backup(self, interaction: discord.Interaction) -> None:
        await interaction.response.defer()
        document = await self.service.snapshot()
        embed, attachment = embeds.backup(document, core.LIST_NAME)
        await interaction.edit_original_response(embed=embed, attachments=[attachment])

    # ------------------------------- bulk -------------------------------- #

    @app_commands.command(name="bulk-add", description="Add multiple users to the whitelist")
    @app_commands.describe(
        userids="Comma-separated list of Roblox User IDs", reason="Reason for adding"
    )
    async def bulk_add(
        self, interaction: discord.Interaction, userids: str, reason: str | None = None
    ) -> None:
        await interaction.response.defer()
        ids = parse_user_ids(userids)
        reason = reason or DEFAULT_BULK_ADD_REASON

        result = await self.service.apply(MutationRequest.bulk_add(ids, reason))
        if not result.is_noop:
            await audit.log_action(
                self.bot,
                interaction.user,
                "Bulk Added Users",
                f"Added: {', '.join(map(str, result.applied))}\nReason: {reason}",
            )
        await interaction.edit_original_response(
            embed=embeds.bulk_result(True, result.applied, result.skipped)
        )

    @app_commands.command(
        name="bulk-remove", description="Remove multiple users from the whitelist"
    )
    @app_commands.describe(
        userids="Comma-separated list of Roblox User IDs", reason="Reason for removal"
    )
    async def bulk_remove(
        self, interaction: discord.Interaction, userids: str, reason: str | None = None
    ) -> None:
        await interaction.response.defer()
        ids = parse_user_ids(userids)
        reason = reason or DEFAULT_BULK_REMOVE_REASON

        result = await self.service.apply(MutationRequest.bulk_remove(ids, reason))
        if not result.is_noop:
            await audit.log_action(
                self.bot,
                interaction.user,
                "Bulk Removed Users",
                f"Removed: {', '.join(map(str, result.applied))}\nReason: {reason}",
            )
        await interaction.edit_original_response(
            embed=embeds.bulk_result(False, result.applied, result.skipped)
        )

    # ------------------------------- clear ------------------------------- #

    @app_commands.command(
        name="clear", description="Clear the entire whitelist (requires confirmation)"
    )
    async def clear(self, interaction: discord.Interaction) -> None:
        confirmation = ClearConfirmation(
            self.bot,
            interaction.user.id,
            interaction.channel_id,
            timeout=core.CONFIRM_TIMEOUT,
        )
        await interaction.response.send_message(
            content=(
                f"Type `{confirmation.word}` within {confirmation.timeout:.0f} seconds "
                "to clear the whitelist."
            ),
            embed=embeds.clear_prompt(),
        )

        if await confirmation.wait() is ConfirmState.TIMED_OUT:
            await interaction.followup.send(
                "❌ Clear operation cancelled - no confirmation received."
            )
            return

        result = await self.service.apply(MutationRequest.clear())
        if not result.is_noop:
            await audit.log_action(
                self.bot,
                interaction.user,
                "Cleared Whitelist",
                f"Removed {result.previous_count} users",
            )
        await interaction.followup.send(embed=embeds.cleared(result.previous_count))
