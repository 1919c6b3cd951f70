"""
Division Seeder

Seeding for divisional leagues.

Seeding Format:
- Seeds 1-2: best two division leaders (ordered against each other)
- Seeds 3+: everyone else, including the remaining division leaders,
  ordered by record and tiebreakers
- Bump rule: the third-best division leader is never seeded worse than
  the configured seed (6 by default); if it would be, it is moved there
  and flagged

Pure calculation logic - no side effects on the input records.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from .head_to_head import HeadToHeadIndex
from .ranking_config import DEFAULT_RANKING_CONFIG, RankingConfig
from .standings_constants import StandingsConstants
from .standings_models import DivisionLeaders, TeamId, TeamSeasonRecord
from .tie_resolver import order_by_record
from .win_percentage import TieGroups, index_tie_groups


logger = logging.getLogger(__name__)


@dataclass
class DivisionSeedingResult:
    """Output of DivisionSeeder.seed()."""
    records: List[TeamSeasonRecord]
    leaders: DivisionLeaders
    bumped_team_id: Optional[TeamId] = None
    division_orders: Dict[int, List[TeamSeasonRecord]] = field(default_factory=dict)
    tie_groups: TieGroups = field(default_factory=dict)


def division_of(record: TeamSeasonRecord) -> int:
    """Division number, with records lacking one bucketed into division 0."""
    if record.division is None:
        return StandingsConstants.DEFAULT_DIVISION
    return record.division


def has_division_data(records: Sequence[TeamSeasonRecord]) -> bool:
    """True when any record carries a division number."""
    return any(record.division is not None for record in records)


class DivisionSeeder:
    """
    Seeds a divisional league.

    Usage:
        seeder = DivisionSeeder(h2h_index)
        result = seeder.seed(records)
        result.records         # seeds 1..N
        result.leaders.first   # best division leader
    """

    def __init__(
        self,
        h2h_index: HeadToHeadIndex,
        config: RankingConfig = DEFAULT_RANKING_CONFIG
    ):
        self.h2h_index = h2h_index
        self.config = config

    def _order(self, records: Sequence[TeamSeasonRecord]) -> List[TeamSeasonRecord]:
        return order_by_record(records, self.h2h_index, self.config.win_pct_precision)

    def partition(
        self,
        records: Sequence[TeamSeasonRecord]
    ) -> Dict[int, List[TeamSeasonRecord]]:
        """
        Split records by division, keeping first-appearance order.

        Args:
            records: All league records

        Returns:
            division number -> records in input order
        """
        missing = [r.team_id for r in records if r.division is None]
        if missing and len(missing) < len(records):
            logger.warning(
                f"{len(missing)} team(s) have no division in a divisional league; "
                f"treating them as division {StandingsConstants.DEFAULT_DIVISION}: {missing}"
            )

        divisions: Dict[int, List[TeamSeasonRecord]] = {}
        for record in records:
            divisions.setdefault(division_of(record), []).append(record)
        return divisions

    def identify_leaders(
        self,
        records: Sequence[TeamSeasonRecord]
    ) -> DivisionLeaders:
        """Determine each division's leader and rank the leaders."""
        leaders, _ = self._leaders_and_orders(records)
        return leaders

    def _leaders_and_orders(self, records: Sequence[TeamSeasonRecord]):
        division_orders = {
            division: self._order(teams)
            for division, teams in self.partition(records).items()
        }
        leader_records = [ordered[0] for ordered in division_orders.values()]
        ranked_leaders = self._order(leader_records)

        leaders = DivisionLeaders(
            leaders_by_division={
                division: ordered[0].team_id
                for division, ordered in division_orders.items()
            },
            ranked_leader_ids=[r.team_id for r in ranked_leaders]
        )
        return leaders, division_orders

    def seed(self, records: Sequence[TeamSeasonRecord]) -> DivisionSeedingResult:
        """
        Calculate the full divisional seeding.

        Args:
            records: All league records (not modified)

        Returns:
            DivisionSeedingResult with seeds 1..N in order
        """
        leaders, division_orders = self._leaders_and_orders(records)
        by_id = {r.team_id: r for r in records}

        # Step 1: top leaders take the first seeds unconditionally
        top_leader_ids = leaders.ranked_leader_ids[:StandingsConstants.DIVISION_LEADER_SEEDS]
        top_leaders = [by_id[team_id] for team_id in top_leader_ids]

        # Step 2: everyone else competes for the remaining seeds
        pool = [r for r in records if r.team_id not in top_leader_ids]
        combined = top_leaders + self._order(pool)

        # Top leaders were ordered among the leaders, everyone else in the pool
        leader_records = [ordered[0] for ordered in division_orders.values()]
        leader_groups = index_tie_groups(leader_records, self.config.win_pct_precision)
        tie_groups = {team_id: leader_groups[team_id] for team_id in top_leader_ids}
        tie_groups.update(index_tie_groups(pool, self.config.win_pct_precision))

        # Step 3: bump rule for the third leader
        bumped_team_id = self._apply_bump_rule(combined, leaders.third)

        logger.debug(
            f"Division seeding: leaders={leaders.ranked_leader_ids}, "
            f"bumped={bumped_team_id}, order={[r.team_id for r in combined]}"
        )

        return DivisionSeedingResult(
            records=combined,
            leaders=leaders,
            bumped_team_id=bumped_team_id,
            division_orders=division_orders,
            tie_groups=tie_groups
        )

    def _apply_bump_rule(
        self,
        combined: List[TeamSeasonRecord],
        third_leader_id: Optional[TeamId]
    ) -> Optional[TeamId]:
        """
        Move the third division leader up to the max seed if it fell below.

        Args:
            combined: Seeds in order; modified in place
            third_leader_id: Third-ranked division leader, if any

        Returns:
            Bumped team id, or None when no bump was needed
        """
        if third_leader_id is None:
            return None

        position = next(
            i for i, record in enumerate(combined) if record.team_id == third_leader_id
        )
        if position < self.config.third_leader_max_seed:
            return None

        record = combined.pop(position)
        combined.insert(self.config.bump_index, record)

        logger.info(
            f"Bumped third division leader {third_leader_id} from seed "
            f"{position + 1} to seed {self.config.third_leader_max_seed}"
        )
        return third_leader_id
