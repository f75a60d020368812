"""
Pure UI formatters for reply text.

Contains zero business logic - only functions turning domain values
(leaderboard rows, stats, log results) into chat-ready strings using the
*bold* markup understood by the chat clients.

All functions are pure (no side effects, no state access).

Usage:
    >>> from src.ui.formatters import StepsFormatters
    >>> StepsFormatters.format_steps(12000)
    '12,000'
"""

from __future__ import annotations

from datetime import date
from typing import Sequence

from src.domain.models import LeaderboardEntry, StepsLogResult, UserStats
from src.modules.steps.aggregation import MONTH_NAMES
from src.ui.emojis import Emojis


class StepsFormatters:
    """
    Pure formatters for steps replies.

    All methods are static and pure.
    """

    MEDALS = {
        1: Emojis.FIRST_PLACE,
        2: Emojis.SECOND_PLACE,
        3: Emojis.THIRD_PLACE,
    }

    @staticmethod
    def format_steps(steps: int) -> str:
        """Thousands-separated count, e.g. 8500 -> '8,500'."""
        return f"{steps:,}"

    @staticmethod
    def day_label(day: date) -> str:
        """Locale-independent day label, e.g. '4 March 2024'."""
        return f"{day.day} {MONTH_NAMES[day.month - 1]} {day.year}"

    @classmethod
    def medal_for(cls, rank: int) -> str:
        return cls.MEDALS.get(rank, Emojis.RUNNER)

    # ========================================================================
    # Leaderboards
    # ========================================================================

    @classmethod
    def render_leaderboard(
        cls,
        title: str,
        subtitle: str,
        entries: Sequence[LeaderboardEntry],
        empty_message: str,
    ) -> str:
        """
        Render a ranked board.

        Example:
            🏆 *WEEKLY LEADERBOARD* 🏆
            📅 Week of 4 March 2024

            🥇 *1.* Ann
                👟 17,000 steps
        """
        header = (
            f"{Emojis.LEADERBOARD} *{title}* {Emojis.LEADERBOARD}\n"
            f"{Emojis.CALENDAR} {subtitle}\n\n"
        )
        if not entries:
            return header + empty_message

        rows = [
            f"{cls.medal_for(entry.rank)} *{entry.rank}.* {entry.name}\n"
            f"    {Emojis.SHOE} {cls.format_steps(entry.steps)} steps"
            for entry in entries
        ]
        return header + "\n\n".join(rows)

    @classmethod
    def daily_leaderboard(cls, entries: Sequence[LeaderboardEntry], day: date) -> str:
        return cls.render_leaderboard(
            "DAILY LEADERBOARD",
            cls.day_label(day),
            entries,
            f"{Emojis.SLEEPING} No steps logged today yet!\n"
            "Use /steps <number> to log your steps.",
        )

    @classmethod
    def weekly_leaderboard(cls, entries: Sequence[LeaderboardEntry], week_start: date) -> str:
        return cls.render_leaderboard(
            "WEEKLY LEADERBOARD",
            f"Week of {cls.day_label(week_start)}",
            entries,
            f"{Emojis.SLEEPING} No steps logged this week yet!",
        )

    @classmethod
    def monthly_leaderboard(cls, entries: Sequence[LeaderboardEntry], label: str) -> str:
        return cls.render_leaderboard(
            "MONTHLY LEADERBOARD",
            label,
            entries,
            f"{Emojis.SLEEPING} No steps logged this month yet!",
        )

    # ========================================================================
    # Member replies
    # ========================================================================

    @staticmethod
    def registered(display_name: str) -> str:
        return (
            f"{Emojis.CELEBRATE} Welcome to the family steps challenge, {display_name}!\n\n"
            "You're now registered. Use /steps <number> to log your daily steps.\n\n"
            "Example: /steps 8500"
        )

    @classmethod
    def steps_logged(cls, result: StepsLogResult) -> str:
        steps = cls.format_steps(result.steps)
        if result.created:
            return f"{Emojis.SUCCESS} Logged {steps} steps for today!"
        return f"{Emojis.SUCCESS} Updated your steps for today: {steps} steps"

    @classmethod
    def user_stats(cls, display_name: str, stats: UserStats) -> str:
        fmt = cls.format_steps
        return (
            f"{Emojis.INFO} *YOUR STATS* - {display_name}\n\n"
            f"{Emojis.SHOE} Today: {fmt(stats.today)} steps\n"
            f"{Emojis.CALENDAR} This Week: {fmt(stats.this_week)} steps\n"
            f"{Emojis.MONTH} This Month: {fmt(stats.this_month)} steps\n\n"
            f"{Emojis.LEADERBOARD} Total Steps: {fmt(stats.total)}\n"
            f"{Emojis.TREND} Daily Average: {fmt(stats.daily_average)} steps\n"
            f"{Emojis.CALENDAR} Active Days: {stats.active_days}"
        )

    @staticmethod
    def reset_done() -> str:
        return f"{Emojis.SUCCESS} Your step data has been reset!"

    @staticmethod
    def unexpected_error() -> str:
        return "Sorry, there was an error processing your request. Please try again."

    @staticmethod
    def help_text() -> str:
        return (
            f"{Emojis.BOT} *FAMILY STEPS TRACKER BOT* {Emojis.BOT}\n\n"
            "*Commands:*\n"
            "/register - Join the family challenge\n"
            "/steps <number> - Log your daily steps\n"
            "/daily or /leaderboard - Daily rankings\n"
            "/weekly - Weekly leaderboard\n"
            "/monthly - Monthly leaderboard\n"
            "/mystats - Your personal statistics\n"
            "/reset - Reset your step data\n"
            "/help - Show this help message\n\n"
            "*Examples:*\n"
            "/steps 8500\n"
            "/steps 12000\n\n"
            f"{Emojis.TIP} *Tips:*\n"
            f"{Emojis.BULLET} Log your steps daily for accurate tracking\n"
            f"{Emojis.BULLET} Check leaderboards to stay motivated\n"
            f"{Emojis.BULLET} Compete with family members!\n\n"
            f"{Emojis.RUNNER_MAN} Happy stepping! {Emojis.RUNNER_WOMAN}"
        )
