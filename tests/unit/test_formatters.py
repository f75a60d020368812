"""
Unit Tests for Reply Formatters
===============================

Test Coverage
-------------
- Medals and number formatting
- Leaderboard layout
- Steps and stats replies
"""

from datetime import date

import pytest

from src.domain.models import LeaderboardEntry, StepsLogResult, UserStats
from src.ui.formatters import StepsFormatters


@pytest.mark.unit
class TestBasics:
    @pytest.mark.parametrize("rank, medal", [(1, "🥇"), (2, "🥈"), (3, "🥉"), (4, "🏃"), (10, "🏃")])
    def test_medals(self, rank, medal):
        assert StepsFormatters.medal_for(rank) == medal

    def test_thousands_separator(self):
        assert StepsFormatters.format_steps(1234567) == "1,234,567"
        assert StepsFormatters.format_steps(0) == "0"

    def test_day_label(self):
        assert StepsFormatters.day_label(date(2024, 3, 4)) == "4 March 2024"


@pytest.mark.unit
class TestLeaderboardLayout:
    def test_rows_and_header(self):
        entries = [
            LeaderboardEntry(rank=1, name="Ann", steps=17000),
            LeaderboardEntry(rank=2, name="Bob", steps=900),
            LeaderboardEntry(rank=3, name="Cat", steps=800),
            LeaderboardEntry(rank=4, name="Dan", steps=700),
        ]

        text = StepsFormatters.weekly_leaderboard(entries, date(2024, 3, 4))

        assert text == (
            "🏆 *WEEKLY LEADERBOARD* 🏆\n"
            "📅 Week of 4 March 2024\n\n"
            "🥇 *1.* Ann\n    👟 17,000 steps\n\n"
            "🥈 *2.* Bob\n    👟 900 steps\n\n"
            "🥉 *3.* Cat\n    👟 800 steps\n\n"
            "🏃 *4.* Dan\n    👟 700 steps"
        )

    def test_empty_daily_board(self):
        text = StepsFormatters.daily_leaderboard([], date(2024, 3, 5))

        assert text.endswith("😴 No steps logged today yet!\nUse /steps <number> to log your steps.")

    def test_monthly_header_uses_label(self):
        text = StepsFormatters.monthly_leaderboard([], "March 2024")

        assert text.startswith("🏆 *MONTHLY LEADERBOARD* 🏆\n📅 March 2024\n\n")


@pytest.mark.unit
class TestMemberReplies:
    def test_steps_logged_created(self):
        assert StepsFormatters.steps_logged(StepsLogResult(steps=8500, created=True)) == (
            "✅ Logged 8,500 steps for today!"
        )

    def test_steps_logged_updated(self):
        assert StepsFormatters.steps_logged(StepsLogResult(steps=8500, created=False)) == (
            "✅ Updated your steps for today: 8,500 steps"
        )

    def test_stats_block(self):
        stats = UserStats(
            today=9000,
            this_week=17000,
            this_month=17000,
            total=17000,
            daily_average=8500,
            active_days=2,
        )

        assert StepsFormatters.user_stats("Ann", stats) == (
            "📊 *YOUR STATS* - Ann\n\n"
            "👟 Today: 9,000 steps\n"
            "📅 This Week: 17,000 steps\n"
            "📆 This Month: 17,000 steps\n\n"
            "🏆 Total Steps: 17,000\n"
            "📈 Daily Average: 8,500 steps\n"
            "📅 Active Days: 2"
        )

    def test_help_ends_with_sign_off(self):
        assert StepsFormatters.help_text().endswith("Happy stepping! 🏃‍♀️")
