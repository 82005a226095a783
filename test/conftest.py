# Shared fakes for interactions

from datetime import datetime
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import discord
import pytest
import pytz


class FakeResponse:
    """Mimics discord.InteractionResponse, tracking whether it was used."""

    def __init__(self):
        self.done = False
        self.defer = AsyncMock(side_effect=self._mark_done)
        self.send_message = AsyncMock(side_effect=self._mark_done)

    async def _mark_done(self, *args, **kwargs):
        self.done = True

    def is_done(self):
        return self.done


class FakeUser(SimpleNamespace):
    def __str__(self):
        return self.name


def make_user(**overrides):
    fields = dict(
        name="alice",
        display_name="Alice",
        id=1234,
        bot=False,
        display_avatar=SimpleNamespace(url="https://cdn.discordapp.com/avatars/1234/abc.png"),
        created_at=datetime(2021, 3, 7, 12, 0, tzinfo=pytz.utc),
    )
    fields.update(overrides)
    return FakeUser(**fields)


def make_interaction(name="ping", *, kind=discord.InteractionType.application_command, command_type=1, user=None, latency=0.042):
    return SimpleNamespace(
        type=kind,
        data={"id": "1", "name": name, "type": command_type},
        user=user or make_user(),
        client=SimpleNamespace(latency=latency),
        response=FakeResponse(),
        followup=SimpleNamespace(send=AsyncMock()),
        edit_original_response=AsyncMock(),
    )


@pytest.fixture
def interaction():
    return make_interaction()


def make_command(name="ping", execute=None):
    command = MagicMock()
    command.name = name
    command.execute = execute or AsyncMock()
    return command
