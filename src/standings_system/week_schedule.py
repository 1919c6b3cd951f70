"""
Week Schedule

Decides when a week's fantasy results are final, for the "countable week"
predicate used by head-to-head tiebreakers.

A week becomes complete at the start of its end date (the Tuesday after
the Monday night game). Weeks missing from the schedule count as complete.

Usage:
    schedule = WeekSchedule.weekly(first_week_end=date(2025, 9, 9), num_weeks=18)
    index = HeadToHeadIndex(match_log, True, schedule.is_week_complete)
"""

from datetime import date, datetime, timedelta
from typing import Callable, Dict, Optional, Union


DAYS_PER_WEEK = 7


def is_live_season(season: Union[int, str], current_season: Union[int, str]) -> bool:
    """Check whether a season is the one currently in progress."""
    return str(season) == str(current_season)


class WeekSchedule:
    """
    Week number -> date the week's results become final.

    Attributes:
        week_end_dates: week number -> first day the week counts as complete
        today_provider: Returns today's date (injectable for tests)
    """

    def __init__(
        self,
        week_end_dates: Dict[int, date],
        today_provider: Optional[Callable[[], date]] = None
    ):
        self.week_end_dates = dict(week_end_dates)
        self.today_provider = today_provider or date.today

    @classmethod
    def weekly(
        cls,
        first_week_end: date,
        num_weeks: int,
        today_provider: Optional[Callable[[], date]] = None
    ) -> 'WeekSchedule':
        """
        Build a schedule where every week ends 7 days after the previous one.

        Args:
            first_week_end: End date of week 1
            num_weeks: Number of weeks in the season
            today_provider: Returns today's date

        Returns:
            WeekSchedule for weeks 1..num_weeks
        """
        return cls(
            {
                week: first_week_end + timedelta(days=DAYS_PER_WEEK * (week - 1))
                for week in range(1, num_weeks + 1)
            },
            today_provider=today_provider
        )

    def is_week_complete(self, week: int, today: Optional[Union[date, datetime]] = None) -> bool:
        """
        Check whether a week's results are final.

        Args:
            week: Week number
            today: Date to check against (defaults to today_provider())

        Returns:
            True once the week's end date is reached, or if the week is unknown
        """
        end_date = self.week_end_dates.get(week)
        if end_date is None:
            return True

        if today is None:
            today = self.today_provider()
        if isinstance(today, datetime):
            today = today.date()
        return today >= end_date

    def current_week(self, today: Optional[date] = None) -> Optional[int]:
        """
        Get the first week that is not yet complete.

        Returns:
            Week number, or None when every scheduled week is complete
        """
        for week in sorted(self.week_end_dates):
            if not self.is_week_complete(week, today):
                return week
        return None
