"""
Tiebreaker Explainer

Reconstructs, for display, why a tied team sits where it does. Read-only:
nothing here feeds back into ranking.

Layers produced for a team tied on win percentage:
- Non-divisional league: one "overall" layer against every tied team
- Division leader: "division-leaders" layer against other tied leaders
  (the race for the top-2 seeds)
- Any team outside the top 2 seeds: "wild-card" layer against the tied
  teams outside the top 2
- Bumped third division leader: a single "division" layer, since its seed
  came from winning the division and not from the cross-division pool
"""

import logging
from typing import Dict, List, Optional, Sequence

from .division_seeder import DivisionSeeder, division_of, has_division_data
from .head_to_head import HeadToHeadIndex
from .ranking_config import DEFAULT_RANKING_CONFIG, RankingConfig
from .standings_constants import StandingsConstants
from .standings_exceptions import StandingsIndexException
from .standings_models import (
    MatchLog,
    TeamId,
    TeamNameLookup,
    TeamSeasonRecord,
    TiebreakerContext,
    TiebreakerInfo,
    TiebreakerLayer,
    WeekCompletePredicate,
)
from .tie_resolver import aggregate_head_to_head, aggregate_win_percentage
from .win_percentage import win_percentage_key


logger = logging.getLogger(__name__)


def default_name_lookup(records: Sequence[TeamSeasonRecord]) -> TeamNameLookup:
    """Build a lookup returning each record's team_name, falling back to its id."""
    names: Dict[TeamId, str] = {r.team_id: r.team_name or r.team_id for r in records}
    return lambda team_id: names.get(team_id, team_id)


class TiebreakerExplainer:
    """
    Builds TiebreakerInfo objects for standings tooltips.

    Usage:
        explainer = TiebreakerExplainer(ranked, match_log, is_live_season=True)
        info = explainer.explain(3)
        if info:
            for layer in info.layers:
                print(layer.context.value, layer.h2h_records)
    """

    def __init__(
        self,
        ordered_records: Sequence[TeamSeasonRecord],
        match_log: Optional[MatchLog],
        is_live_season: bool,
        is_week_complete: Optional[WeekCompletePredicate] = None,
        team_name_lookup: Optional[TeamNameLookup] = None,
        config: RankingConfig = DEFAULT_RANKING_CONFIG
    ):
        """
        Initialize explainer.

        Args:
            ordered_records: Ranked standings, in final order
            match_log: Week number -> matchups (may be None)
            is_live_season: True for the season in progress
            is_week_complete: Predicate for finished weeks
            team_name_lookup: team id -> display name
            config: Playoff format used for the ranking
        """
        self.records = list(ordered_records)
        self.match_log = match_log
        self.is_live_season = is_live_season
        self.config = config
        self.name_of = team_name_lookup or default_name_lookup(self.records)
        self.h2h_index = HeadToHeadIndex(match_log, is_live_season, is_week_complete)

    def _key(self, record: TeamSeasonRecord) -> float:
        return win_percentage_key(record, self.config.win_pct_precision)

    def explain(self, index: int) -> Optional[TiebreakerInfo]:
        """
        Explain the tiebreakers behind the team at a standings position.

        Args:
            index: 0-based position in the ordered standings

        Returns:
            TiebreakerInfo, or None when the season is not live, there is no
            match data, or the team shares its win percentage with nobody

        Raises:
            StandingsIndexException: If index is outside the standings
        """
        if not 0 <= index < len(self.records):
            raise StandingsIndexException(index, len(self.records))

        if not self.is_live_season or not self.match_log:
            return None

        team = self.records[index]
        tied = [r for r in self.records if self._key(r) == self._key(team)]
        if len(tied) < 2:
            return None

        if has_division_data(self.records):
            layers = self._divisional_layers(team, tied)
        else:
            layers = self._layers_for_pools(team, [(TiebreakerContext.OVERALL, tied)])

        if not layers:
            return None

        logger.debug(
            f"Explained {team.team_id}: "
            f"{[layer.context.value for layer in layers]}"
        )
        return TiebreakerInfo(team_id=team.team_id, layers=layers)

    def _divisional_layers(
        self,
        team: TeamSeasonRecord,
        tied: List[TeamSeasonRecord]
    ) -> List[TiebreakerLayer]:
        if team.is_third_division_leader_bumped:
            division_pool = [r for r in tied if division_of(r) == division_of(team)]
            return self._layers_for_pools(team, [(TiebreakerContext.DIVISION, division_pool)])

        leaders = DivisionSeeder(self.h2h_index, self.config).identify_leaders(self.records)
        top_ids = {
            r.team_id for r in self.records[:StandingsConstants.DIVISION_LEADER_SEEDS]
        }

        pools = []
        if leaders.is_leader(team.team_id):
            pools.append((
                TiebreakerContext.DIVISION_LEADERS,
                [r for r in tied if leaders.is_leader(r.team_id)]
            ))
        if team.team_id not in top_ids:
            pools.append((
                TiebreakerContext.WILD_CARD,
                [r for r in tied if r.team_id not in top_ids]
            ))
        return self._layers_for_pools(team, pools)

    def _layers_for_pools(self, team, pools) -> List[TiebreakerLayer]:
        return [
            self.build_layer(context, team, pool)
            for context, pool in pools
            if len(pool) > 1
        ]

    def build_layer(
        self,
        context: TiebreakerContext,
        team: TeamSeasonRecord,
        pool: Sequence[TeamSeasonRecord]
    ) -> TiebreakerLayer:
        """
        Describe how one team fared against a tied pool.

        Args:
            context: Which race the pool represents
            team: Team being explained (member of pool)
            pool: Tied teams compared in this layer

        Returns:
            TiebreakerLayer
        """
        opponents = [r for r in pool if r.team_id != team.team_id]

        h2h_records = []
        for opponent in opponents:
            record = self.h2h_index.get_record(team.team_id, opponent.team_id)
            if record.total_games > 0:
                h2h_records.append(f"{record.record_string()} vs {self.name_of(opponent.team_id)}")

        wins, games = aggregate_head_to_head(team, pool, self.h2h_index)
        aggregate = round(wins / games, self.config.win_pct_precision) if games else None

        uses_points_for = self._points_for_decides(team, opponents, pool)

        bumped = next((r.team_id for r in pool if r.is_third_division_leader_bumped), None)

        return TiebreakerLayer(
            context=context,
            tied_team_ids=[r.team_id for r in pool],
            h2h_records=h2h_records,
            aggregate_win_percentage=aggregate,
            uses_points_for=uses_points_for,
            points_for=team.points_for if uses_points_for else None,
            bumped_team_id=bumped
        )

    def _points_for_decides(
        self,
        team: TeamSeasonRecord,
        opponents: Sequence[TeamSeasonRecord],
        pool: Sequence[TeamSeasonRecord]
    ) -> bool:
        if len(opponents) == 1:
            record = self.h2h_index.get_record(team.team_id, opponents[0].team_id)
            return not record.is_decisive

        precision = self.config.win_pct_precision
        team_pct = aggregate_win_percentage(team, pool, self.h2h_index, precision)
        return any(
            aggregate_win_percentage(opponent, pool, self.h2h_index, precision) == team_pct
            for opponent in opponents
        )


def explain(
    ordered_records: Sequence[TeamSeasonRecord],
    index: int,
    match_log: Optional[MatchLog],
    is_live_season: bool,
    is_week_complete: Optional[WeekCompletePredicate] = None,
    team_name_lookup: Optional[TeamNameLookup] = None,
    config: RankingConfig = DEFAULT_RANKING_CONFIG
) -> Optional[TiebreakerInfo]:
    """Functional form of TiebreakerExplainer.explain()."""
    explainer = TiebreakerExplainer(
        ordered_records,
        match_log,
        is_live_season,
        is_week_complete=is_week_complete,
        team_name_lookup=team_name_lookup,
        config=config
    )
    return explainer.explain(index)
