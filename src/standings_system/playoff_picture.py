"""
Playoff Picture

Data structures for the current playoff picture derived from ranked
standings: who holds each seed, who has a bye, who is a division winner.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .ranking_config import DEFAULT_RANKING_CONFIG, RankingConfig
from .standings_models import DivisionLeaders, TeamId, TeamSeasonRecord


@dataclass
class PlayoffSeed:
    """
    Represents a single playoff seed.

    Contains team record information and seeding context.
    """
    seed: int                      # 1-6 by default
    team_id: TeamId
    wins: int
    losses: int
    ties: int
    win_percentage: float
    points_for: float
    points_against: float
    rank: Optional[int]
    has_bye: bool
    division: Optional[int] = None
    division_leader: bool = False
    bumped_leader: bool = False

    @property
    def record_string(self) -> str:
        """Get record as string (e.g., '10-4' or '9-4-1')."""
        if self.ties > 0:
            return f"{self.wins}-{self.losses}-{self.ties}"
        return f"{self.wins}-{self.losses}"

    @property
    def seed_label(self) -> str:
        """Get seed label (e.g., '#1 Seed (Bye)' or '#5 Seed')."""
        if self.has_bye:
            return f"#{self.seed} Seed (Bye)"
        if self.division_leader:
            return f"#{self.seed} Seed (Division Winner)"
        return f"#{self.seed} Seed"


@dataclass
class PlayoffPicture:
    """
    Playoff picture for one league at the current point of the season.

    This is the main output of build_playoff_picture().
    """
    seeds: List[PlayoffSeed]
    bye_teams: List[TeamId]
    non_playoff_teams: List[TeamId]

    def get_seed_by_number(self, seed_number: int) -> Optional[PlayoffSeed]:
        """Get seed by seed number."""
        for seed in self.seeds:
            if seed.seed == seed_number:
                return seed
        return None

    def get_seed_by_team(self, team_id: TeamId) -> Optional[PlayoffSeed]:
        """Get seed for a specific team."""
        for seed in self.seeds:
            if seed.team_id == team_id:
                return seed
        return None

    def is_in_playoffs(self, team_id: TeamId) -> bool:
        """Check if team currently holds a playoff seed."""
        return self.get_seed_by_team(team_id) is not None

    def has_bye(self, team_id: TeamId) -> bool:
        """Check if team currently holds a first-round bye."""
        return team_id in self.bye_teams

    def get_matchups(self) -> List[Tuple[TeamId, TeamId]]:
        """
        Get first-round matchups for the non-bye seeds.

        Highest remaining seed plays the lowest: with 6 spots and 2 byes
        that is 3 vs 6 and 4 vs 5.

        Returns:
            List of (higher seed team, lower seed team)
        """
        playing = [seed for seed in self.seeds if not seed.has_bye]
        matchups = []
        while len(playing) >= 2:
            high = playing.pop(0)
            low = playing.pop()
            matchups.append((high.team_id, low.team_id))
        return matchups

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            'seeds': [
                {
                    'seed': s.seed,
                    'team_id': s.team_id,
                    'record': s.record_string,
                    'win_percentage': s.win_percentage,
                    'points_for': s.points_for,
                    'points_against': s.points_against,
                    'rank': s.rank,
                    'has_bye': s.has_bye,
                    'division': s.division,
                    'division_leader': s.division_leader,
                    'bumped_leader': s.bumped_leader,
                }
                for s in self.seeds
            ],
            'bye_teams': list(self.bye_teams),
            'non_playoff_teams': list(self.non_playoff_teams),
        }


def build_playoff_picture(
    ranked_records: Sequence[TeamSeasonRecord],
    leaders: Optional[DivisionLeaders] = None,
    config: RankingConfig = DEFAULT_RANKING_CONFIG
) -> PlayoffPicture:
    """
    Create the playoff picture from ranked standings.

    Args:
        ranked_records: Standings in final order
        leaders: Division leaders, for divisional leagues
        config: Playoff format

    Returns:
        PlayoffPicture with the first playoff_spots teams seeded
    """
    seeds = []
    for seed_number, record in enumerate(ranked_records[:config.playoff_spots], start=1):
        seeds.append(PlayoffSeed(
            seed=seed_number,
            team_id=record.team_id,
            wins=record.wins,
            losses=record.losses,
            ties=record.ties or 0,
            win_percentage=record.win_percentage,
            points_for=record.points_for,
            points_against=record.points_against,
            rank=record.rank,
            has_bye=seed_number <= config.bye_seeds,
            division=record.division,
            division_leader=bool(leaders and leaders.is_leader(record.team_id)),
            bumped_leader=record.is_third_division_leader_bumped
        ))

    return PlayoffPicture(
        seeds=seeds,
        bye_teams=[s.team_id for s in seeds if s.has_bye],
        non_playoff_teams=[r.team_id for r in ranked_records[config.playoff_spots:]]
    )
