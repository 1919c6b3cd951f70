"""
Division Display Helpers

Small helpers the standings and playoff views use around the ranking.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence

from .division_seeder import division_of, has_division_data
from .standings_constants import StandingsConstants
from .standings_models import TeamSeasonRecord
from .win_percentage import win_percentage_key


@dataclass
class DivisionGroup:
    """Teams of one division, in ranked order."""
    division: int
    name: str
    teams: List[TeamSeasonRecord] = field(default_factory=list)

    @property
    def leader(self) -> Optional[TeamSeasonRecord]:
        """First-listed team (the leader when teams are in ranked order)"""
        return self.teams[0] if self.teams else None


def get_division_name(
    division: int,
    division_names: Optional[Mapping[int, str]] = None
) -> str:
    """
    Get display name for a division.

    Args:
        division: Division number
        division_names: Optional league-specific names

    Returns:
        Custom name if configured, else "Division N"
    """
    if division_names and division_names.get(division):
        return division_names[division]
    return StandingsConstants.DEFAULT_DIVISION_NAME.format(number=division)


def group_standings_by_division(
    ranked_records: Sequence[TeamSeasonRecord],
    division_names: Optional[Mapping[int, str]] = None
) -> Optional[List[DivisionGroup]]:
    """
    Group ranked standings by division.

    Args:
        ranked_records: Standings in ranked order
        division_names: Optional league-specific names

    Returns:
        DivisionGroups ordered by division number, or None when the league
        has no division data
    """
    if not has_division_data(ranked_records):
        return None

    groups: Dict[int, DivisionGroup] = {}
    for record in ranked_records:
        division = division_of(record)
        if division not in groups:
            groups[division] = DivisionGroup(
                division=division,
                name=get_division_name(division, division_names)
            )
        groups[division].teams.append(record)

    return [groups[division] for division in sorted(groups)]


def are_teams_tied(
    team_a: TeamSeasonRecord,
    team_b: TeamSeasonRecord,
    precision: int = StandingsConstants.WIN_PCT_PRECISION
) -> bool:
    """Check whether two teams match on win percentage, points for and points against."""
    return (
        win_percentage_key(team_a, precision) == win_percentage_key(team_b, precision)
        and team_a.points_for == team_b.points_for
        and team_a.points_against == team_b.points_against
    )


def get_display_rank(rank: int) -> str:
    """Format a rank for display (e.g., '#3')."""
    return f"#{rank}"
