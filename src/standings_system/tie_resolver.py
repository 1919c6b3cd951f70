"""
Tie Resolver

Orders teams that share a win percentage.

Tiebreaker order:
1. Head-to-head
   - 2-way tie: pairwise record (only if they played and it isn't split)
   - 3+-way tie: aggregate head-to-head win percentage inside the tied set
2. Total points for
3. Original order (stable)

A strict pairwise cascade has no consistent answer for a cyclic 3-way tie
(A beat B, B beat C, C beat A). Collapsing each team to one win percentage
against the tied set keeps the order transitive.
"""

import logging
from typing import List, Sequence, Tuple

from .head_to_head import HeadToHeadIndex
from .standings_constants import StandingsConstants
from .standings_models import TeamSeasonRecord
from .win_percentage import group_by_win_percentage


logger = logging.getLogger(__name__)


def aggregate_head_to_head(
    team: TeamSeasonRecord,
    group: Sequence[TeamSeasonRecord],
    h2h_index: HeadToHeadIndex
) -> Tuple[int, int]:
    """
    Sum a team's head-to-head results against the rest of its tied group.

    Args:
        team: Team to total
        group: Tied group (may include the team itself)
        h2h_index: Head-to-head lookups

    Returns:
        (wins, games) against the other group members
    """
    wins = 0
    games = 0
    for opponent in group:
        if opponent.team_id == team.team_id:
            continue
        record = h2h_index.get_record(team.team_id, opponent.team_id)
        wins += record.team_a_wins
        games += record.total_games
    return wins, games


def aggregate_win_percentage(
    team: TeamSeasonRecord,
    group: Sequence[TeamSeasonRecord],
    h2h_index: HeadToHeadIndex,
    precision: int = StandingsConstants.WIN_PCT_PRECISION
) -> float:
    """Aggregate head-to-head win percentage in the group (0 with no games)."""
    wins, games = aggregate_head_to_head(team, group, h2h_index)
    if games == 0:
        return 0.0
    return round(wins / games, precision)


def _by_points_for(records: Sequence[TeamSeasonRecord]) -> List[TeamSeasonRecord]:
    return sorted(records, key=lambda r: r.points_for, reverse=True)


def _resolve_two_way(
    group: Sequence[TeamSeasonRecord],
    h2h_index: HeadToHeadIndex
) -> List[TeamSeasonRecord]:
    first, second = group
    record = h2h_index.get_record(first.team_id, second.team_id)

    if record.is_decisive:
        logger.debug(
            f"2-way tie {first.team_id}/{second.team_id} broken by head-to-head "
            f"({record.record_string()})"
        )
        if record.leader(first.team_id, second.team_id) == first.team_id:
            return [first, second]
        return [second, first]

    logger.debug(f"2-way tie {first.team_id}/{second.team_id} falls to points for")
    return _by_points_for(group)


def _resolve_multi_way(
    group: Sequence[TeamSeasonRecord],
    h2h_index: HeadToHeadIndex,
    precision: int
) -> List[TeamSeasonRecord]:
    percentages = {
        team.team_id: aggregate_win_percentage(team, group, h2h_index, precision)
        for team in group
    }

    if len(set(percentages.values())) == 1:
        logger.debug(
            f"{len(group)}-way tie has equal aggregate head-to-head "
            f"({next(iter(percentages.values())):.3f}), falling back to points for"
        )
        return _by_points_for(group)

    logger.debug(f"{len(group)}-way tie broken by aggregate head-to-head: {percentages}")
    return sorted(
        group,
        key=lambda r: (percentages[r.team_id], r.points_for),
        reverse=True
    )


def resolve_group(
    group: Sequence[TeamSeasonRecord],
    h2h_index: HeadToHeadIndex,
    precision: int = StandingsConstants.WIN_PCT_PRECISION
) -> List[TeamSeasonRecord]:
    """
    Order one group of teams tied on win percentage.

    Args:
        group: Teams sharing a win percentage, in their original order
        h2h_index: Head-to-head lookups
        precision: Decimal digits for aggregate win percentage comparison

    Returns:
        New list, best team first
    """
    if len(group) <= 1:
        return list(group)
    if len(group) == 2:
        return _resolve_two_way(group, h2h_index)
    return _resolve_multi_way(group, h2h_index, precision)


def order_by_record(
    records: Sequence[TeamSeasonRecord],
    h2h_index: HeadToHeadIndex,
    precision: int = StandingsConstants.WIN_PCT_PRECISION
) -> List[TeamSeasonRecord]:
    """
    Order any set of teams by win percentage, resolving ties within groups.

    Args:
        records: Teams to order (not modified)
        h2h_index: Head-to-head lookups
        precision: Decimal digits for win percentage comparison

    Returns:
        New list, best team first
    """
    ordered: List[TeamSeasonRecord] = []
    for group in group_by_win_percentage(records, precision):
        ordered.extend(resolve_group(group, h2h_index, precision))
    return ordered
