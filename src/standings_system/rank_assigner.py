"""
Rank Assigner

Assigns display ranks to an already ordered standings list.

Teams share a rank only when nothing separates them: same win percentage,
same head-to-head standing (pairwise for a 2-way tie, aggregate for a larger
tie) and same points for. Ranks skip after ties (1, 1, 1, 4).

Head-to-head is compared inside the group the teams were ordered in. In a
divisional league that is the leader group for the top seeds and the pool
of remaining teams below them, so two adjacent teams ordered in different
groups never share a rank.
"""

import logging
from typing import List, Optional, Sequence

from .head_to_head import HeadToHeadIndex
from .standings_constants import StandingsConstants
from .standings_models import TeamSeasonRecord
from .tie_resolver import aggregate_win_percentage
from .win_percentage import TieGroups, index_tie_groups, win_percentage_key


logger = logging.getLogger(__name__)


class RankAssigner:
    """
    Walks an ordered list and assigns standard competition ranks.

    Usage:
        assigner = RankAssigner(h2h_index)
        ranked = assigner.assign_ranks(ordered_records)
    """

    def __init__(
        self,
        h2h_index: HeadToHeadIndex,
        precision: int = StandingsConstants.WIN_PCT_PRECISION
    ):
        self.h2h_index = h2h_index
        self.precision = precision

    def assign_ranks(
        self,
        ordered_records: Sequence[TeamSeasonRecord],
        bumped_team_id: Optional[str] = None,
        divisional: bool = False,
        tie_groups: Optional[TieGroups] = None
    ) -> List[TeamSeasonRecord]:
        """
        Assign ranks to an ordered list.

        Args:
            ordered_records: Teams in final order (not modified)
            bumped_team_id: Team to flag as the bumped third division leader
            divisional: Set the bump flag on every record (divisional leagues)
            tie_groups: team_id -> tied group the team was ordered in
                (default: the whole list grouped by win percentage)

        Returns:
            New records carrying rank (and bump flag when divisional)
        """
        if tie_groups is None:
            tie_groups = index_tie_groups(ordered_records, self.precision)

        ranked: List[TeamSeasonRecord] = []
        current_rank = 1

        for position, record in enumerate(ordered_records, start=1):
            if position > 1:
                previous = ordered_records[position - 2]
                # The bumped leader holds its seed by the bump rule alone
                moved = bumped_team_id in (previous.team_id, record.team_id)
                if moved or self.is_separated(previous, record, tie_groups):
                    current_rank = position

            bumped = None
            if divisional:
                bumped = record.team_id == bumped_team_id
            ranked.append(record.with_rank(current_rank, bumped=bumped))

        return ranked

    def is_separated(
        self,
        previous: TeamSeasonRecord,
        current: TeamSeasonRecord,
        tie_groups: TieGroups
    ) -> bool:
        """
        Check whether any tiebreaker criterion separates two adjacent teams.

        Args:
            previous: Team ranked just above
            current: Team being ranked
            tie_groups: team_id -> tied group the team was ordered in

        Returns:
            True if current gets its own rank
        """
        if win_percentage_key(previous, self.precision) != win_percentage_key(current, self.precision):
            return True

        group = tie_groups.get(current.team_id, [previous, current])
        if previous.team_id not in {r.team_id for r in group}:
            # Placed by seeding rules, not by a tiebreaker between the two
            return True

        if len(group) > 2:
            prev_pct = aggregate_win_percentage(previous, group, self.h2h_index, self.precision)
            curr_pct = aggregate_win_percentage(current, group, self.h2h_index, self.precision)
            if prev_pct != curr_pct:
                return True
        elif self.h2h_index.get_record(previous.team_id, current.team_id).is_decisive:
            return True

        if previous.points_for != current.points_for:
            return True

        logger.debug(f"{current.team_id} shares rank with {previous.team_id}")
        return False
