"""
Centralized emoji definitions for the Stepline bot.

Single source of truth for every emoji used in reply text. All emojis are
Unicode so they render the same on every chat client.

Usage:
    from src.ui.emojis import Emojis

    message = f"{Emojis.LEADERBOARD} *DAILY LEADERBOARD* {Emojis.LEADERBOARD}"
"""


class Emojis:
    """Centralized emoji constants for Stepline replies."""

    # ═══════════════════════════════════════════════════════════════
    # LEADERBOARD MEDALS (Ranking positions)
    # ═══════════════════════════════════════════════════════════════
    FIRST_PLACE = "🥇"
    SECOND_PLACE = "🥈"
    THIRD_PLACE = "🥉"
    RUNNER = "🏃"

    # ═══════════════════════════════════════════════════════════════
    # STEPS & WINDOWS
    # ═══════════════════════════════════════════════════════════════
    SHOE = "👟"
    CALENDAR = "📅"
    MONTH = "📆"
    TREND = "📈"
    LEADERBOARD = "🏆"
    SLEEPING = "😴"
    RUNNER_MAN = "🏃‍♂️"
    RUNNER_WOMAN = "🏃‍♀️"

    # ═══════════════════════════════════════════════════════════════
    # UI & STATUS INDICATORS
    # ═══════════════════════════════════════════════════════════════
    SUCCESS = "✅"
    ERROR = "❌"
    INFO = "📊"
    CELEBRATE = "🎉"
    BOT = "🤖"
    TIP = "💡"
    BULLET = "•"
