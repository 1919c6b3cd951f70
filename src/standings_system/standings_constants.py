"""
Standings Constants

Centralized constants for league standings and playoff seeding to eliminate
magic numbers.

Usage:
    from standings_system.standings_constants import StandingsConstants

    if seed <= StandingsConstants.PLAYOFF_SPOTS:
        # Team is in playoff position
"""


class StandingsConstants:
    """
    League standings and seeding constants.

    The defaults describe a 6-team playoff: 3 division winners and
    3 wild cards, with the top 2 seeds receiving a first-round bye.
    """

    # ==================== Playoff Format ====================

    PLAYOFF_SPOTS = 6
    """Number of teams that qualify for the championship playoffs"""

    BYE_SEEDS = 2
    """Seeds that skip the first playoff round"""

    DIVISION_LEADER_SEEDS = 2
    """Seeds reserved for the best two division leaders"""

    THIRD_LEADER_MAX_SEED = 6
    """Worst seed the third-ranked division leader can receive (bump rule)"""

    # ==================== Tiebreakers ====================

    WIN_PCT_PRECISION = 6
    """Decimal digits kept when comparing win percentages"""

    MIN_WIN_PCT_PRECISION = 4
    """Fewer digits than this would merge genuinely different records"""

    TIE_WEIGHT = 0.5
    """A tie counts as half a win"""

    # ==================== Divisions ====================

    DEFAULT_DIVISION = 0
    """Division assigned to records without one in a divisional league"""

    DEFAULT_DIVISION_NAME = "Division {number}"
