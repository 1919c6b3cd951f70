"""
Ranking Configuration

Tunable playoff-format values. Defaults match the league's 6-team format.
"""

from dataclasses import dataclass

from .standings_constants import StandingsConstants
from .standings_exceptions import InvalidRankingConfigException


@dataclass(frozen=True)
class RankingConfig:
    """
    Playoff format used by seeding and the playoff picture.

    Attributes:
        playoff_spots: Teams that qualify for the playoffs
        bye_seeds: Top seeds that receive a first-round bye
        third_leader_max_seed: Worst seed the third division leader can get
        win_pct_precision: Decimal digits kept when comparing win percentages
    """
    playoff_spots: int = StandingsConstants.PLAYOFF_SPOTS
    bye_seeds: int = StandingsConstants.BYE_SEEDS
    third_leader_max_seed: int = StandingsConstants.THIRD_LEADER_MAX_SEED
    win_pct_precision: int = StandingsConstants.WIN_PCT_PRECISION

    def __post_init__(self):
        """Validate values"""
        if self.playoff_spots < 1:
            raise InvalidRankingConfigException(
                'playoff_spots', self.playoff_spots, "must be at least 1"
            )
        if not 0 <= self.bye_seeds <= self.playoff_spots:
            raise InvalidRankingConfigException(
                'bye_seeds', self.bye_seeds,
                f"must be between 0 and playoff_spots ({self.playoff_spots})"
            )
        # Seeds 1 and 2 always belong to the top two leaders
        if self.third_leader_max_seed < 3:
            raise InvalidRankingConfigException(
                'third_leader_max_seed', self.third_leader_max_seed, "must be at least 3"
            )
        if self.win_pct_precision < StandingsConstants.MIN_WIN_PCT_PRECISION:
            raise InvalidRankingConfigException(
                'win_pct_precision', self.win_pct_precision,
                f"must be at least {StandingsConstants.MIN_WIN_PCT_PRECISION} digits"
            )

    @property
    def bump_index(self) -> int:
        """0-based position the bumped leader is moved to"""
        return self.third_leader_max_seed - 1


DEFAULT_RANKING_CONFIG = RankingConfig()
