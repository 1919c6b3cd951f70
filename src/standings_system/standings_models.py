"""
Standings Data Models

Data structures for league standings, weekly match results and the
tiebreaker explanations shown next to tied teams.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from .standings_constants import StandingsConstants


TeamId = str


@dataclass
class TeamSeasonRecord:
    """
    One team's season record as supplied by the season-data layer.

    The engine treats records as immutable input: ranking returns clones
    carrying the resolved rank (and bump flag) instead of editing these.
    """
    team_id: TeamId
    wins: int = 0
    losses: int = 0
    ties: int = 0
    points_for: float = 0.0
    points_against: float = 0.0
    division: Optional[int] = None
    is_third_division_leader_bumped: bool = False
    rank: Optional[int] = None
    team_name: Optional[str] = None

    @property
    def games_played(self) -> int:
        """Total games played"""
        return self.wins + self.losses + (self.ties or 0)

    @property
    def win_percentage(self) -> float:
        """Calculate win percentage (ties count as half a win)"""
        if self.games_played == 0:
            return 0.0
        return (self.wins + (self.ties or 0) * StandingsConstants.TIE_WEIGHT) / self.games_played

    @property
    def record_string(self) -> str:
        """Get record as string (e.g., '10-4' or '9-4-1')"""
        if self.ties:
            return f"{self.wins}-{self.losses}-{self.ties}"
        return f"{self.wins}-{self.losses}"

    @property
    def point_differential(self) -> float:
        """Calculate point differential"""
        return self.points_for - self.points_against

    def with_rank(self, rank: int, bumped: Optional[bool] = None) -> 'TeamSeasonRecord':
        """
        Return a copy annotated with a resolved rank.

        Args:
            rank: 1-based rank
            bumped: New bump flag, or None to keep the current one

        Returns:
            New TeamSeasonRecord; self is left untouched
        """
        if bumped is None:
            return replace(self, rank=rank)
        return replace(self, rank=rank, is_third_division_leader_bumped=bumped)


@dataclass
class MatchResult:
    """A single completed (or placeholder) matchup within a week."""
    week: int
    winner_id: TeamId
    loser_id: TeamId
    winner_score: float = 0.0
    loser_score: float = 0.0

    def involves(self, team_a: TeamId, team_b: TeamId) -> bool:
        """Check whether this matchup was played between the two teams."""
        return {self.winner_id, self.loser_id} == {team_a, team_b}


# Week number -> matchups played that week
MatchLog = Mapping[int, Sequence[MatchResult]]

# Predicate deciding whether a week's results are final
WeekCompletePredicate = Callable[[int], bool]

# Team id -> display name
TeamNameLookup = Callable[[TeamId], str]


@dataclass(frozen=True)
class HeadToHeadRecord:
    """Derived win/loss tally between two teams."""
    team_a_wins: int = 0
    team_b_wins: int = 0
    total_games: int = 0

    @property
    def is_decisive(self) -> bool:
        """True when the pair played and one side won more often"""
        return self.total_games > 0 and self.team_a_wins != self.team_b_wins

    def leader(self, team_a: TeamId, team_b: TeamId) -> Optional[TeamId]:
        """Team with more wins in the series, or None when split or unplayed"""
        if not self.is_decisive:
            return None
        return team_a if self.team_a_wins > self.team_b_wins else team_b

    def record_string(self) -> str:
        """Team A's record against team B (e.g., '2-1')"""
        return f"{self.team_a_wins}-{self.team_b_wins}"


class TiebreakerContext(Enum):
    """Which comparison pool a tiebreaker layer describes."""
    DIVISION_LEADERS = "division-leaders"  # race for the top-2 seeds
    WILD_CARD = "wild-card"                # seeds 3 and below
    DIVISION = "division"                  # in-division race (bumped leader)
    OVERALL = "overall"                    # league without divisions


@dataclass
class TiebreakerLayer:
    """
    One tiebreaker explanation for a single comparison pool.

    Purely descriptive: building it never changes a ranking.
    """
    context: TiebreakerContext
    tied_team_ids: List[TeamId]
    h2h_records: List[str] = field(default_factory=list)
    aggregate_win_percentage: Optional[float] = None
    uses_points_for: bool = False
    points_for: Optional[float] = None
    bumped_team_id: Optional[TeamId] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            'context': self.context.value,
            'tied_team_ids': list(self.tied_team_ids),
            'h2h_records': list(self.h2h_records),
            'aggregate_win_percentage': self.aggregate_win_percentage,
            'uses_points_for': self.uses_points_for,
            'points_for': self.points_for,
            'bumped_team_id': self.bumped_team_id,
        }


@dataclass
class TiebreakerInfo:
    """All tiebreaker layers that explain one team's position."""
    team_id: TeamId
    layers: List[TiebreakerLayer] = field(default_factory=list)

    @property
    def uses_points_for(self) -> bool:
        """True when points for decided any layer"""
        return any(layer.uses_points_for for layer in self.layers)

    def get_layer(self, context: TiebreakerContext) -> Optional[TiebreakerLayer]:
        """Get the layer for a comparison pool, if present."""
        for layer in self.layers:
            if layer.context == context:
                return layer
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            'team_id': self.team_id,
            'layers': [layer.to_dict() for layer in self.layers],
        }


@dataclass
class DivisionLeaders:
    """
    Division leaders of a divisional league.

    Attributes:
        leaders_by_division: division number -> leader team id
        ranked_leader_ids: leaders ordered against each other
    """
    leaders_by_division: Dict[int, TeamId] = field(default_factory=dict)
    ranked_leader_ids: List[TeamId] = field(default_factory=list)

    def _leader_at(self, position: int) -> Optional[TeamId]:
        if position < len(self.ranked_leader_ids):
            return self.ranked_leader_ids[position]
        return None

    @property
    def first(self) -> Optional[TeamId]:
        return self._leader_at(0)

    @property
    def second(self) -> Optional[TeamId]:
        return self._leader_at(1)

    @property
    def third(self) -> Optional[TeamId]:
        return self._leader_at(2)

    def is_leader(self, team_id: TeamId) -> bool:
        """Check whether a team currently leads its division."""
        return team_id in self.ranked_leader_ids

    def leader_position(self, team_id: TeamId) -> Optional[int]:
        """0-based position among leaders, or None for non-leaders."""
        if team_id not in self.ranked_leader_ids:
            return None
        return self.ranked_leader_ids.index(team_id)
