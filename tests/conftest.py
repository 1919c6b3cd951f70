"""
Pytest configuration for test discovery and imports.

Provides fixtures for testing including:
- Team record and match log factories
- A 12-team divisional league (3 divisions of 4)
"""

import sys
from pathlib import Path

import pytest


# Determine paths
project_root = Path(__file__).parent.parent
src_path = project_root / "src"


def pytest_configure(config):
    """Put src/ at the front of sys.path so packages import by name."""
    if str(src_path) in sys.path:
        sys.path.remove(str(src_path))
    sys.path.insert(0, str(src_path))


# ============================================================================
# RECORD FIXTURES
# ============================================================================

@pytest.fixture
def make_record():
    """
    Factory for TeamSeasonRecord.

    Usage:
        make_record("A", 10, 3, points_for=1200.5, division=1)
    """
    from standings_system.standings_models import TeamSeasonRecord

    def _make(team_id, wins, losses, ties=0, points_for=0.0, division=None, team_name=None):
        return TeamSeasonRecord(
            team_id=team_id,
            wins=wins,
            losses=losses,
            ties=ties,
            points_for=points_for,
            points_against=0.0,
            division=division,
            team_name=team_name
        )

    return _make


@pytest.fixture
def make_match_log():
    """
    Factory for a match log from (week, winner_id, loser_id) tuples.

    Usage:
        make_match_log([(1, "A", "B"), (2, "B", "C")])
    """
    from standings_system.standings_models import MatchResult

    def _make(games):
        match_log = {}
        for week, winner_id, loser_id in games:
            match_log.setdefault(week, []).append(MatchResult(
                week=week,
                winner_id=winner_id,
                loser_id=loser_id,
                winner_score=110.0,
                loser_score=95.0
            ))
        return match_log

    return _make


@pytest.fixture
def divisional_league(make_record):
    """
    12-team league, 3 divisions of 4, 20-game season.

    Division leaders: A1 (.800), B1 (.750), C1 (.700).
    Ignoring the bump rule C1 would be the 8th seed:
        A1, B1, A2, A3, B2, B3, A4, C1, C2, C3, C4, B4
    With the bump rule C1 moves to seed 6:
        A1, B1, A2, A3, B2, C1, B3, A4, C2, C3, C4, B4
    """
    return [
        make_record("A1", 16, 4, points_for=2000.0, division=1),
        make_record("A2", 15, 5, points_for=1900.0, division=1),
        make_record("A3", 15, 5, points_for=1880.0, division=1),
        make_record("A4", 14, 5, ties=1, points_for=1700.0, division=1),
        make_record("B1", 15, 5, points_for=1950.0, division=2),
        make_record("B2", 14, 5, ties=1, points_for=1750.0, division=2),
        make_record("B3", 14, 5, ties=1, points_for=1720.0, division=2),
        make_record("B4", 4, 16, points_for=1200.0, division=2),
        make_record("C1", 14, 6, points_for=1800.0, division=3),
        make_record("C2", 13, 7, points_for=1650.0, division=3),
        make_record("C3", 12, 8, points_for=1600.0, division=3),
        make_record("C4", 5, 15, points_for=1300.0, division=3),
    ]
