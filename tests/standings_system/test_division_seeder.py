"""
Unit Tests for DivisionSeeder

Tests divisional seeding including:
- Division leader identification
- Top-2 leader bypass
- Third division leader bump rule
- Records without a division bucketed into division 0
"""

import logging

import pytest

from standings_system.division_seeder import DivisionSeeder, division_of, has_division_data
from standings_system.head_to_head import HeadToHeadIndex
from standings_system.ranking_config import RankingConfig


def ids(records):
    return [r.team_id for r in records]


class TestDivisionSeeder:
    """Test suite for DivisionSeeder"""

    @pytest.fixture
    def seeder(self):
        return DivisionSeeder(HeadToHeadIndex(None, True))

    def test_identifies_leaders(self, seeder, divisional_league):
        leaders = seeder.identify_leaders(divisional_league)

        assert leaders.leaders_by_division == {1: "A1", 2: "B1", 3: "C1"}
        assert leaders.ranked_leader_ids == ["A1", "B1", "C1"]
        assert (leaders.first, leaders.second, leaders.third) == ("A1", "B1", "C1")

    def test_third_leader_bumped_to_sixth_seed(self, seeder, divisional_league):
        """Test C1 moves from seed 8 to seed 6 and B3/A4 shift down one."""
        result = seeder.seed(divisional_league)

        assert ids(result.records) == [
            "A1", "B1", "A2", "A3", "B2", "C1", "B3", "A4", "C2", "C3", "C4", "B4"
        ]
        assert result.bumped_team_id == "C1"
        assert set(ids(result.records)) == set(ids(divisional_league))

    def test_no_bump_when_third_leader_already_in_range(self, seeder, make_record):
        records = [
            make_record("A1", 10, 4, points_for=1500.0, division=1),
            make_record("A2", 9, 5, points_for=1400.0, division=1),
            make_record("B1", 9, 5, points_for=1300.0, division=2),
            make_record("B2", 4, 10, points_for=1000.0, division=2),
            make_record("C1", 8, 6, points_for=1200.0, division=3),
            make_record("C2", 3, 11, points_for=900.0, division=3),
        ]

        result = seeder.seed(records)

        assert ids(result.records) == ["A1", "B1", "A2", "C1", "B2", "C2"]
        assert result.bumped_team_id is None

    def test_configured_max_seed(self, divisional_league):
        """Test the bump threshold follows the configured seed."""
        seeder = DivisionSeeder(HeadToHeadIndex(None, True), RankingConfig(third_leader_max_seed=4))

        result = seeder.seed(divisional_league)

        assert ids(result.records)[:5] == ["A1", "B1", "A2", "C1", "A3"]
        assert result.bumped_team_id == "C1"

    def test_leader_bypass_beats_better_points(self, seeder, make_record):
        """Test the second leader holds seed 2 over an equal-record non-leader with more points."""
        records = [
            make_record("A1", 10, 4, points_for=1500.0, division=1),
            make_record("A2", 9, 5, points_for=1800.0, division=1),
            make_record("B1", 9, 5, points_for=1200.0, division=2),
            make_record("C1", 5, 9, points_for=1000.0, division=3),
        ]

        result = seeder.seed(records)

        assert ids(result.records)[:3] == ["A1", "B1", "A2"]

    def test_division_leader_decided_by_head_to_head(self, make_record, make_match_log):
        records = [
            make_record("A1", 9, 5, points_for=1500.0, division=1),
            make_record("A2", 9, 5, points_for=1200.0, division=1),
            make_record("B1", 8, 6, points_for=1300.0, division=2),
        ]
        index = HeadToHeadIndex(make_match_log([(1, "A2", "A1"), (8, "A2", "A1")]), True)

        leaders = DivisionSeeder(index).identify_leaders(records)

        assert leaders.leaders_by_division[1] == "A2"

    def test_missing_division_bucketed_into_zero(self, seeder, make_record, caplog):
        """Test records lacking a division are treated as division 0 (with a warning)."""
        records = [
            make_record("A1", 10, 4, division=1),
            make_record("X", 9, 5),
            make_record("Y", 7, 7),
        ]

        with caplog.at_level(logging.WARNING, logger="standings_system.division_seeder"):
            leaders = seeder.identify_leaders(records)

        assert leaders.leaders_by_division == {1: "A1", 0: "X"}
        assert "division 0" in caplog.text

    def test_fewer_than_three_divisions_never_bumps(self, seeder, make_record):
        records = [
            make_record("A1", 10, 4, division=1),
            make_record("B1", 2, 12, division=2),
        ] + [make_record(f"A{i}", 9, 5, division=1) for i in range(2, 10)]

        result = seeder.seed(records)

        assert result.bumped_team_id is None
        assert ids(result.records)[:2] == ["A1", "B1"]

    def test_input_not_mutated(self, seeder, divisional_league):
        snapshot = [r.team_id for r in divisional_league]
        seeder.seed(divisional_league)
        assert [r.team_id for r in divisional_league] == snapshot


class TestDivisionHelpers:
    """Test suite for division helper functions"""

    def test_division_of(self, make_record):
        assert division_of(make_record("A", 1, 1, division=2)) == 2
        assert division_of(make_record("A", 1, 1)) == 0

    def test_has_division_data(self, make_record):
        assert has_division_data([make_record("A", 1, 1), make_record("B", 1, 1, division=1)])
        assert not has_division_data([make_record("A", 1, 1)])
