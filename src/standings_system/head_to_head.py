"""
Head-to-Head Index

Pairwise win/loss counts between teams, derived from the weekly match log.

For the live season only completed weeks count, so 0-0 placeholder games of
the current week never leak into tiebreakers. Finished seasons already carry
a commissioner-final rank, so no head-to-head is computed for them at all.
"""

import logging
from collections import defaultdict
from typing import Dict, Optional, Tuple

from .standings_models import (
    HeadToHeadRecord,
    MatchLog,
    TeamId,
    WeekCompletePredicate,
)


logger = logging.getLogger(__name__)


def _every_week_complete(week: int) -> bool:
    return True


class HeadToHeadIndex:
    """
    Pairwise head-to-head lookups over one season's match log.

    The log is scanned once on construction; get_record() is then a dict
    lookup, so resolvers may query as many pairs as they like.

    Usage:
        index = HeadToHeadIndex(match_log, is_live_season=True,
                                is_week_complete=schedule.is_week_complete)
        record = index.get_record("team_a", "team_b")
    """

    def __init__(
        self,
        match_log: Optional[MatchLog],
        is_live_season: bool,
        is_week_complete: Optional[WeekCompletePredicate] = None
    ):
        """
        Initialize and index the match log.

        Args:
            match_log: Week number -> matchups (may be None)
            is_live_season: True for the season in progress
            is_week_complete: Predicate for finished weeks (default: all weeks)
        """
        self.is_live_season = is_live_season
        self.is_week_complete = is_week_complete or _every_week_complete
        self.has_match_data = bool(match_log)

        # (winner_id, loser_id) -> wins
        self._wins: Dict[Tuple[TeamId, TeamId], int] = defaultdict(int)
        self._counted_weeks = 0

        if self.is_active:
            self._build_index(match_log)

    @property
    def is_active(self) -> bool:
        """True when head-to-head can contribute to tiebreakers"""
        return self.is_live_season and self.has_match_data

    def is_countable_week(self, week: int) -> bool:
        """Check whether a week's results may be used for tiebreakers."""
        return not self.is_live_season or self.is_week_complete(week)

    def _build_index(self, match_log: MatchLog) -> None:
        for week, matchups in match_log.items():
            if not self.is_countable_week(int(week)):
                logger.debug(f"Skipping incomplete week {week}")
                continue

            self._counted_weeks += 1
            for match in matchups:
                self._wins[(match.winner_id, match.loser_id)] += 1

        logger.debug(
            f"Indexed head-to-head results from {self._counted_weeks} of "
            f"{len(match_log)} weeks"
        )

    def get_record(self, team_a: TeamId, team_b: TeamId) -> HeadToHeadRecord:
        """
        Get the head-to-head record between two teams.

        Args:
            team_a: First team id
            team_b: Second team id

        Returns:
            HeadToHeadRecord from team_a's point of view (all zeros when the
            season is not live or there is no match data)
        """
        if not self.is_active or team_a == team_b:
            return HeadToHeadRecord()

        a_wins = self._wins.get((team_a, team_b), 0)
        b_wins = self._wins.get((team_b, team_a), 0)
        return HeadToHeadRecord(
            team_a_wins=a_wins,
            team_b_wins=b_wins,
            total_games=a_wins + b_wins
        )


def get_head_to_head_record(
    team_a: TeamId,
    team_b: TeamId,
    match_log: Optional[MatchLog],
    is_live_season: bool,
    is_week_complete: Optional[WeekCompletePredicate] = None
) -> HeadToHeadRecord:
    """
    Get head-to-head record between two teams without keeping an index.

    Args:
        team_a: First team id
        team_b: Second team id
        match_log: Week number -> matchups (may be None)
        is_live_season: True for the season in progress
        is_week_complete: Predicate for finished weeks (default: all weeks)

    Returns:
        HeadToHeadRecord from team_a's point of view
    """
    index = HeadToHeadIndex(match_log, is_live_season, is_week_complete)
    return index.get_record(team_a, team_b)
