"""
Pytest Configuration and Fixtures for Stepline Tests
====================================================

Purpose
-------
Centralized fixtures for the Stepline test suite: a fixed clock, fresh
in-memory services, and discord.py mocks for cog tests.

Architecture Notes
------------------
- Every test gets its own StepsService; no state is shared between tests
- The clock is pinned to Tuesday 2024-03-05 unless a test moves it
- Discord objects are mocks built with pytest-mock
"""

from __future__ import annotations

import os

# Must be set before src.core.config is imported
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("LOG_COLORS", "false")

from datetime import date, datetime  # noqa: E402

import pytest  # noqa: E402

from src.core.config.config import Config  # noqa: E402
from src.modules.commands import CommandDispatcher  # noqa: E402
from src.modules.member.registry import MemberRegistry  # noqa: E402
from src.modules.steps.ledger import StepsLedger  # noqa: E402
from src.modules.steps.service import StepsService  # noqa: E402

class FixedClock:
    """Callable clock returning a settable instant."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def set_day(self, day: date, hour: int = 12) -> None:
        self.now = datetime(day.year, day.month, day.day, hour)


# ============================================================================
# DOMAIN FIXTURES
# ============================================================================


@pytest.fixture
def clock() -> FixedClock:
    """Clock pinned to Tuesday 2024-03-05 at noon."""
    return FixedClock(datetime(2024, 3, 5, 12, 0))


@pytest.fixture
def registry(clock) -> MemberRegistry:
    return MemberRegistry(clock=clock)


@pytest.fixture
def ledger(registry) -> StepsLedger:
    return StepsLedger(registry)


@pytest.fixture
def service(clock) -> StepsService:
    """Fresh StepsService bound to the fixed clock."""
    return StepsService(clock=clock)


@pytest.fixture
def dispatcher(service) -> CommandDispatcher:
    return CommandDispatcher(service)


# ============================================================================
# CONFIG FIXTURES
# ============================================================================


@pytest.fixture
def isolated_config(monkeypatch, tmp_path):
    """
    Let a test reload Config from the environment.

    Every field that Config.load() writes is restored after the test.
    """
    for field in (
        "DISCORD_TOKEN",
        "ENVIRONMENT",
        "DEBUG",
        "LOG_LEVEL",
        "LOG_JSON",
        "LOG_COLORS",
        "LOG_QUEUE_SIZE",
        "LOGS_DIR",
    ):
        monkeypatch.setattr(Config, field, getattr(Config, field))

    monkeypatch.setattr(Config, "_validated", False)
    monkeypatch.setenv("LOGS_DIR", str(tmp_path / "logs"))
    return Config


# ============================================================================
# DISCORD.PY MOCK FIXTURES (Cog Tests)
# ============================================================================


@pytest.fixture
def mock_bot(mocker):
    """Mock Discord bot for cog testing."""
    mock_bot = mocker.MagicMock()
    mock_bot.user = mocker.MagicMock()
    mock_bot.user.id = 123456789
    mock_bot.user.name = "TestBot"
    return mock_bot


@pytest.fixture
def make_message(mocker):
    """
    Factory for mock Discord messages.

    Usage:
        message = make_message("/steps 8500", author_id=42, display_name="Ann")
        await cog.on_message(message)
        message.reply.assert_awaited_once()
    """

    def _make(
        content: str,
        author_id: int = 987654321,
        display_name: str = "TestUser",
        bot: bool = False,
        guild_id: int | None = 111222333,
    ):
        message = mocker.MagicMock()
        message.content = content
        message.author = mocker.MagicMock()
        message.author.id = author_id
        message.author.display_name = display_name
        message.author.name = display_name.lower()
        message.author.bot = bot
        if guild_id is None:
            message.guild = None
        else:
            message.guild = mocker.MagicMock()
            message.guild.id = guild_id
        message.channel = mocker.MagicMock()
        message.channel.id = 444555666
        message.reply = mocker.AsyncMock()
        return message

    return _make
