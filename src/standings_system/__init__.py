"""
Standings System

League standings ranking, tiebreaker resolution and playoff seeding.
"""

from .standings_models import (
    TeamSeasonRecord,
    MatchResult,
    HeadToHeadRecord,
    TiebreakerContext,
    TiebreakerLayer,
    TiebreakerInfo,
    DivisionLeaders,
)
from .ranking_config import RankingConfig
from .head_to_head import HeadToHeadIndex, get_head_to_head_record
from .ranking_engine import RankingEngine, calculate_rankings, identify_division_leaders
from .tiebreaker_explainer import TiebreakerExplainer, explain
from .playoff_picture import PlayoffPicture, PlayoffSeed
from .division_utils import (
    DivisionGroup,
    get_division_name,
    group_standings_by_division,
    are_teams_tied,
    get_display_rank,
)
from .week_schedule import WeekSchedule, is_live_season
from .standings_exceptions import (
    StandingsException,
    InvalidRankingConfigException,
    StandingsIndexException,
)

__all__ = [
    'TeamSeasonRecord',
    'MatchResult',
    'HeadToHeadRecord',
    'TiebreakerContext',
    'TiebreakerLayer',
    'TiebreakerInfo',
    'DivisionLeaders',
    'RankingConfig',
    'HeadToHeadIndex',
    'get_head_to_head_record',
    'RankingEngine',
    'calculate_rankings',
    'identify_division_leaders',
    'TiebreakerExplainer',
    'explain',
    'PlayoffPicture',
    'PlayoffSeed',
    'DivisionGroup',
    'get_division_name',
    'group_standings_by_division',
    'are_teams_tied',
    'get_display_rank',
    'WeekSchedule',
    'is_live_season',
    'StandingsException',
    'InvalidRankingConfigException',
    'StandingsIndexException',
]
