"""
Win Percentage Grouping

Partitions teams into groups sharing an identical win percentage.
"""

from typing import Dict, Iterable, List

from .standings_constants import StandingsConstants
from .standings_models import TeamSeasonRecord


# team_id -> teams it was ordered against on equal win percentage
TieGroups = Dict[str, List[TeamSeasonRecord]]


def win_percentage_key(
    record: TeamSeasonRecord,
    precision: int = StandingsConstants.WIN_PCT_PRECISION
) -> float:
    """
    Win percentage rounded for comparison.

    Rounding keeps float near-misses (e.g. 7/12 computed two ways) from
    producing spurious distinct groups.
    """
    return round(record.win_percentage, precision)


def group_by_win_percentage(
    records: Iterable[TeamSeasonRecord],
    precision: int = StandingsConstants.WIN_PCT_PRECISION
) -> List[List[TeamSeasonRecord]]:
    """
    Group teams with the same win percentage.

    Args:
        records: Team records in any order
        precision: Decimal digits used for comparison

    Returns:
        Groups ordered best win percentage first; members keep input order
    """
    groups: Dict[float, List[TeamSeasonRecord]] = {}
    for record in records:
        groups.setdefault(win_percentage_key(record, precision), []).append(record)

    return [groups[key] for key in sorted(groups, reverse=True)]


def index_tie_groups(
    records: Iterable[TeamSeasonRecord],
    precision: int = StandingsConstants.WIN_PCT_PRECISION
) -> TieGroups:
    """
    Map each team to the group it shares a win percentage with.

    Args:
        records: Teams that were ordered against each other
        precision: Decimal digits used for comparison

    Returns:
        team_id -> every team in records with the same win percentage
    """
    lookup: TieGroups = {}
    for group in group_by_win_percentage(records, precision):
        for record in group:
            lookup[record.team_id] = group
    return lookup
