"""
Two-phase confirmation for destructive commands.

A :class:`ClearConfirmation` starts in ``AWAITING`` and moves exactly once, to
``CONFIRMED`` when the invoking user types the confirmation word in the same
channel, or to ``TIMED_OUT`` when the deadline passes first.
"""

from __future__ import annotations

import asyncio
import enum
import logging

import discord
from discord.ext import commands

logger = logging.getLogger(__name__)

CONFIRM_WORD = "CONFIRM"


class ConfirmState(enum.Enum):
    AWAITING = "awaiting"
    CONFIRMED = "confirmed"
    TIMED_OUT = "timed_out"


class ClearConfirmation:
    def __init__(
        self,
        bot: commands.Bot,
        user_id: int,
        channel_id: int,
        *,
        timeout: float = 30.0,
        word: str = CONFIRM_WORD,
    ) -> None:
        self._bot = bot
        self.user_id = user_id
        self.channel_id = channel_id
        self.timeout = timeout
        self.word = word
        self.state = ConfirmState.AWAITING

    def matches(self, message: discord.Message) -> bool:
        """Accept only the exact word from the invoking user in the same channel."""

        author = getattr(message, "author", None)
        channel = getattr(message, "channel", None)
        return (
            getattr(author, "id", None) == self.user_id
            and getattr(channel, "id", None) == self.channel_id
            and (message.content or "") == self.word
        )

    async def wait(self) -> ConfirmState:
        """Wait for the confirming message and return the final state."""

        if self.state is not ConfirmState.AWAITING:
            raise RuntimeError(f"Confirmation already resolved as {self.state.value}")

        try:
            await self._bot.wait_for("message", check=self.matches, timeout=self.timeout)
        except asyncio.TimeoutError:
            self.state = ConfirmState.TIMED_OUT
            logger.info(
                "Clear confirmation for user %s timed out after %.0fs",
                self.user_id,
                self.timeout,
            )
        else:
            self.state = ConfirmState.CONFIRMED
        return self.state


__all__ = ["ClearConfirmation", "ConfirmState", "CONFIRM_WORD"]
