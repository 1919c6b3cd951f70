"""
Ranking Strategies

A league is ranked either purely by record or with divisional seeding.
The strategy is chosen once, from the records, at the top of the pipeline.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Union

from .division_seeder import DivisionSeeder, has_division_data
from .head_to_head import HeadToHeadIndex
from .ranking_config import DEFAULT_RANKING_CONFIG, RankingConfig
from .standings_models import DivisionLeaders, TeamId, TeamSeasonRecord
from .tie_resolver import order_by_record
from .win_percentage import TieGroups, index_tie_groups


logger = logging.getLogger(__name__)


@dataclass
class OrderedStandings:
    """Final order produced by a strategy, before ranks are assigned."""
    records: List[TeamSeasonRecord]
    leaders: Optional[DivisionLeaders] = None
    bumped_team_id: Optional[TeamId] = None
    tie_groups: TieGroups = field(default_factory=dict)

    @property
    def is_divisional(self) -> bool:
        return self.leaders is not None


class RankByRecordOnly:
    """Whole league ordered by win percentage and tiebreakers."""

    name = "record_only"

    def __init__(self, config: RankingConfig = DEFAULT_RANKING_CONFIG):
        self.config = config

    def order(
        self,
        records: Sequence[TeamSeasonRecord],
        h2h_index: HeadToHeadIndex
    ) -> OrderedStandings:
        precision = self.config.win_pct_precision
        return OrderedStandings(
            records=order_by_record(records, h2h_index, precision),
            tie_groups=index_tie_groups(records, precision)
        )


class RankWithDivisions:
    """Divisional seeding: leader bypass for seeds 1-2 plus the bump rule."""

    name = "divisions"

    def __init__(self, config: RankingConfig = DEFAULT_RANKING_CONFIG):
        self.config = config

    def order(
        self,
        records: Sequence[TeamSeasonRecord],
        h2h_index: HeadToHeadIndex
    ) -> OrderedStandings:
        result = DivisionSeeder(h2h_index, self.config).seed(records)
        return OrderedStandings(
            records=result.records,
            leaders=result.leaders,
            bumped_team_id=result.bumped_team_id,
            tie_groups=result.tie_groups
        )


def select_strategy(
    records: Sequence[TeamSeasonRecord],
    config: RankingConfig = DEFAULT_RANKING_CONFIG
) -> Union[RankWithDivisions, RankByRecordOnly]:
    """
    Pick the ranking strategy for a league.

    Args:
        records: All league records
        config: Playoff format

    Returns:
        RankWithDivisions if any record has a division, else RankByRecordOnly
    """
    if has_division_data(records):
        strategy = RankWithDivisions(config)
    else:
        strategy = RankByRecordOnly(config)

    logger.debug(f"Selected '{strategy.name}' ranking strategy for {len(records)} teams")
    return strategy
