import asyncio
from types import SimpleNamespace

import pytest

from whitelist_bot.commands.confirm import ClearConfirmation, ConfirmState


def _message(author_id=1, channel_id=2, content="CONFIRM"):
    return SimpleNamespace(
        author=SimpleNamespace(id=author_id),
        channel=SimpleNamespace(id=channel_id),
        content=content,
    )


class FakeBot:
    def __init__(self, message=None):
        self.message = message
        self.waits = []

    async def wait_for(self, event, *, check, timeout):
        self.waits.append((event, timeout))
        if self.message is not None and check(self.message):
            return self.message
        raise asyncio.TimeoutError


def test_matching_message_confirms():
    bot = FakeBot(_message())
    confirmation = ClearConfirmation(bot, 1, 2, timeout=30)

    assert asyncio.run(confirmation.wait()) is ConfirmState.CONFIRMED
    assert bot.waits == [("message", 30)]


def test_timeout_cancels():
    confirmation = ClearConfirmation(FakeBot(), 1, 2, timeout=5)

    assert asyncio.run(confirmation.wait()) is ConfirmState.TIMED_OUT
    assert confirmation.state is ConfirmState.TIMED_OUT


@pytest.mark.parametrize(
    "message",
    [
        _message(author_id=9),
        _message(channel_id=9),
        _message(content="confirm"),
        _message(content="CONFIRM please"),
    ],
)
def test_only_exact_word_from_invoker_in_channel_matches(message):
    assert ClearConfirmation(FakeBot(), 1, 2).matches(message) is False


def test_resolved_confirmation_cannot_wait_again():
    confirmation = ClearConfirmation(FakeBot(_message()), 1, 2)
    asyncio.run(confirmation.wait())

    with pytest.raises(RuntimeError):
        asyncio.run(confirmation.wait())
