"""
Ranking Engine

Ranks a league's teams by season record with cascading tiebreakers.
Pure calculation logic - no I/O, no caching across calls, inputs are never
modified.

Pipeline:
    records + match log + live flag
      -> HeadToHeadIndex
      -> strategy (record only, or divisional seeding)
           -> win percentage groups -> tie resolution per group
           -> leader bypass + bump rule (divisional leagues)
      -> RankAssigner
      -> ranked records (clones with rank / bump flag)

Historical seasons are normally shown with their commissioner-final rank
and never reach this engine; if they do, head-to-head is skipped and only
points for and original order break ties.
"""

import logging
from typing import List, Optional, Sequence

from .division_seeder import DivisionSeeder, has_division_data
from .head_to_head import HeadToHeadIndex
from .playoff_picture import PlayoffPicture, build_playoff_picture
from .rank_assigner import RankAssigner
from .ranking_config import DEFAULT_RANKING_CONFIG, RankingConfig
from .ranking_strategies import OrderedStandings, select_strategy
from .standings_models import (
    DivisionLeaders,
    MatchLog,
    TeamNameLookup,
    TeamSeasonRecord,
    TiebreakerInfo,
    WeekCompletePredicate,
)
from .tiebreaker_explainer import TiebreakerExplainer


logger = logging.getLogger(__name__)


class RankingEngine:
    """
    Entry point for standings ranking.

    Usage:
        engine = RankingEngine()
        ranked = engine.calculate_rankings(records, match_log, is_live_season=True)
        info = engine.explain(ranked, 4, match_log, is_live_season=True)
        picture = engine.build_playoff_picture(ranked, match_log, is_live_season=True)

    The engine holds configuration only; every call works on fresh state,
    so one instance can serve several leagues or threads.
    """

    def __init__(
        self,
        config: Optional[RankingConfig] = None,
        team_name_lookup: Optional[TeamNameLookup] = None
    ):
        """
        Initialize ranking engine.

        Args:
            config: Playoff format (defaults to the 6-team format)
            team_name_lookup: team id -> display name, for explanations
        """
        self.config = config or DEFAULT_RANKING_CONFIG
        self.team_name_lookup = team_name_lookup

    def order_standings(
        self,
        records: Sequence[TeamSeasonRecord],
        h2h_index: HeadToHeadIndex
    ) -> OrderedStandings:
        """Order records with the strategy matching the league format."""
        return select_strategy(records, self.config).order(records, h2h_index)

    def calculate_rankings(
        self,
        records: Sequence[TeamSeasonRecord],
        match_log: Optional[MatchLog] = None,
        is_live_season: bool = True,
        is_week_complete: Optional[WeekCompletePredicate] = None
    ) -> List[TeamSeasonRecord]:
        """
        Rank a league's standings.

        Args:
            records: Team season records (not modified)
            match_log: Week number -> matchups (may be None)
            is_live_season: True for the season in progress
            is_week_complete: Predicate for finished weeks

        Returns:
            New records in final order with rank set (and, for divisional
            leagues, is_third_division_leader_bumped)
        """
        h2h_index = HeadToHeadIndex(match_log, is_live_season, is_week_complete)
        ordered = self.order_standings(records, h2h_index)

        ranked = RankAssigner(h2h_index, self.config.win_pct_precision).assign_ranks(
            ordered.records,
            bumped_team_id=ordered.bumped_team_id,
            divisional=ordered.is_divisional,
            tie_groups=ordered.tie_groups
        )

        logger.debug(
            f"Ranked {len(ranked)} teams "
            f"(live={is_live_season}, head-to-head={h2h_index.is_active})"
        )
        return ranked

    def identify_division_leaders(
        self,
        records: Sequence[TeamSeasonRecord],
        match_log: Optional[MatchLog] = None,
        is_live_season: bool = True,
        is_week_complete: Optional[WeekCompletePredicate] = None
    ) -> Optional[DivisionLeaders]:
        """
        Identify division leaders (first, second, third).

        Returns:
            DivisionLeaders, or None when the league has no division data
        """
        if not has_division_data(records):
            return None

        h2h_index = HeadToHeadIndex(match_log, is_live_season, is_week_complete)
        return DivisionSeeder(h2h_index, self.config).identify_leaders(records)

    def explain(
        self,
        ranked_records: Sequence[TeamSeasonRecord],
        index: int,
        match_log: Optional[MatchLog] = None,
        is_live_season: bool = True,
        is_week_complete: Optional[WeekCompletePredicate] = None
    ) -> Optional[TiebreakerInfo]:
        """
        Explain the tiebreakers behind one ranked position.

        Args:
            ranked_records: Output of calculate_rankings()
            index: 0-based position to explain

        Returns:
            TiebreakerInfo or None (see TiebreakerExplainer.explain)
        """
        explainer = TiebreakerExplainer(
            ranked_records,
            match_log,
            is_live_season,
            is_week_complete=is_week_complete,
            team_name_lookup=self.team_name_lookup,
            config=self.config
        )
        return explainer.explain(index)

    def build_playoff_picture(
        self,
        ranked_records: Sequence[TeamSeasonRecord],
        match_log: Optional[MatchLog] = None,
        is_live_season: bool = True,
        is_week_complete: Optional[WeekCompletePredicate] = None
    ) -> PlayoffPicture:
        """Build the playoff picture for ranked standings."""
        leaders = self.identify_division_leaders(
            ranked_records, match_log, is_live_season, is_week_complete
        )
        return build_playoff_picture(ranked_records, leaders, self.config)


def calculate_rankings(
    records: Sequence[TeamSeasonRecord],
    match_log: Optional[MatchLog] = None,
    is_live_season: bool = True,
    is_week_complete: Optional[WeekCompletePredicate] = None,
    config: Optional[RankingConfig] = None
) -> List[TeamSeasonRecord]:
    """Rank standings with a default-configured engine."""
    engine = RankingEngine(config)
    return engine.calculate_rankings(records, match_log, is_live_season, is_week_complete)


def identify_division_leaders(
    records: Sequence[TeamSeasonRecord],
    match_log: Optional[MatchLog] = None,
    is_live_season: bool = True,
    is_week_complete: Optional[WeekCompletePredicate] = None,
    config: Optional[RankingConfig] = None
) -> Optional[DivisionLeaders]:
    """Identify division leaders with a default-configured engine."""
    engine = RankingEngine(config)
    return engine.identify_division_leaders(records, match_log, is_live_season, is_week_complete)
