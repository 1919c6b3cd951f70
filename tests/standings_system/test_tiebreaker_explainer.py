"""
Tests for TiebreakerExplainer

Covers:
- When no explanation is produced
- Overall layer for leagues without divisions
- Division-leader and wild-card layers
- The single division layer of a bumped third division leader
"""

import pytest

from standings_system.ranking_engine import RankingEngine
from standings_system.standings_exceptions import StandingsIndexException
from standings_system.standings_models import TiebreakerContext
from standings_system.tiebreaker_explainer import TiebreakerExplainer, explain


def index_of(ranked, team_id):
    return [r.team_id for r in ranked].index(team_id)


class TestExplainerEdgeCases:
    """Test suite for positions that have nothing to explain"""

    @pytest.fixture
    def ranked(self, make_record):
        return RankingEngine().calculate_rankings([
            make_record("A", 8, 5, points_for=1000.0),
            make_record("B", 8, 5, points_for=1200.0),
            make_record("C", 4, 9, points_for=900.0),
        ])

    @pytest.fixture
    def match_log(self, make_match_log):
        return make_match_log([(1, "A", "B")])

    def test_finished_season_returns_none(self, ranked, match_log):
        assert explain(ranked, 0, match_log, is_live_season=False) is None

    @pytest.mark.parametrize("empty_log", [None, {}])
    def test_missing_match_log_returns_none(self, ranked, empty_log):
        assert explain(ranked, 0, empty_log, is_live_season=True) is None

    def test_unique_win_percentage_returns_none(self, ranked, match_log):
        assert explain(ranked, 2, match_log, is_live_season=True) is None

    @pytest.mark.parametrize("index", [-1, 3, 50])
    def test_out_of_range_index_raises(self, ranked, match_log, index):
        with pytest.raises(StandingsIndexException) as exc_info:
            explain(ranked, index, match_log, is_live_season=False)

        assert exc_info.value.error_code == "STANDINGS_INDEX_001"
        assert isinstance(exc_info.value, IndexError)


class TestOverallLayer:
    """Test suite for leagues without divisions"""

    def test_decisive_head_to_head(self, make_record, make_match_log):
        records = [
            make_record("A", 8, 5, points_for=1000.0, team_name="Alpha"),
            make_record("B", 8, 5, points_for=1200.0, team_name="Bravo"),
        ]
        match_log = make_match_log([(1, "A", "B"), (6, "A", "B")])
        ranked = RankingEngine().calculate_rankings(records, match_log)

        info = explain(ranked, 0, match_log, is_live_season=True)

        assert info.team_id == "A"
        assert len(info.layers) == 1
        layer = info.layers[0]
        assert layer.context == TiebreakerContext.OVERALL
        assert layer.tied_team_ids == ["A", "B"]
        assert layer.h2h_records == ["2-0 vs Bravo"]
        assert layer.aggregate_win_percentage == 1.0
        assert layer.uses_points_for is False
        assert layer.points_for is None
        assert layer.bumped_team_id is None

    def test_split_series_falls_to_points_for(self, make_record, make_match_log):
        records = [
            make_record("A", 8, 5, points_for=1000.0, team_name="Alpha"),
            make_record("B", 8, 5, points_for=1200.0, team_name="Bravo"),
        ]
        match_log = make_match_log([(1, "A", "B"), (6, "B", "A")])
        ranked = RankingEngine().calculate_rankings(records, match_log)

        info = explain(ranked, 0, match_log, is_live_season=True)

        assert info.team_id == "B"
        layer = info.layers[0]
        assert layer.h2h_records == ["1-1 vs Alpha"]
        assert layer.uses_points_for is True
        assert layer.points_for == 1200.0
        assert info.uses_points_for is True

    def test_cyclic_tie(self, make_record, make_match_log):
        records = [
            make_record("A", 8, 5, points_for=1100.0),
            make_record("B", 8, 5, points_for=1300.0),
            make_record("C", 8, 5, points_for=1200.0),
        ]
        match_log = make_match_log([(1, "A", "B"), (2, "B", "C"), (3, "C", "A")])
        ranked = RankingEngine().calculate_rankings(records, match_log)

        info = explain(ranked, 0, match_log, is_live_season=True)

        layer = info.layers[0]
        assert info.team_id == "B"
        assert layer.tied_team_ids == ["B", "C", "A"]
        assert layer.h2h_records == ["1-0 vs C", "0-1 vs A"]
        assert layer.aggregate_win_percentage == 0.5
        assert layer.uses_points_for is True

    def test_unplayed_opponents_left_out(self, make_record, make_match_log):
        records = [
            make_record("A", 8, 5, points_for=1000.0),
            make_record("B", 8, 5, points_for=1200.0),
            make_record("C", 2, 11, points_for=800.0),
        ]
        match_log = make_match_log([(1, "A", "C")])
        ranked = RankingEngine().calculate_rankings(records, match_log)

        info = explain(ranked, 0, match_log, is_live_season=True)

        layer = info.layers[0]
        assert layer.h2h_records == []
        assert layer.aggregate_win_percentage is None
        assert layer.uses_points_for is True

    def test_custom_name_lookup(self, make_record, make_match_log):
        records = [
            make_record("A", 8, 5, points_for=1000.0),
            make_record("B", 8, 5, points_for=1200.0),
        ]
        match_log = make_match_log([(1, "A", "B")])
        names = {"A": "Team One", "B": "Team Two"}
        engine = RankingEngine(team_name_lookup=names.get)
        ranked = engine.calculate_rankings(records, match_log)

        info = engine.explain(ranked, 0, match_log, is_live_season=True)

        assert info.layers[0].h2h_records == ["1-0 vs Team Two"]

    def test_to_dict(self, make_record, make_match_log):
        records = [
            make_record("A", 8, 5, points_for=1000.0),
            make_record("B", 8, 5, points_for=1200.0),
        ]
        match_log = make_match_log([(1, "A", "B")])
        ranked = RankingEngine().calculate_rankings(records, match_log)

        data = explain(ranked, 1, match_log, is_live_season=True).to_dict()

        assert data['team_id'] == "B"
        assert data['layers'][0]['context'] == "overall"
        assert data['layers'][0]['h2h_records'] == ["0-1 vs A"]


class TestDivisionalLayers:
    """Test suite for divisional leagues"""

    @pytest.fixture
    def league(self, make_record, make_match_log):
        """
        A1, B1, C1 lead their divisions at 10-4; A2 is also 10-4.
        A1 beat B1, B1 beat C1, C1 beat A2.
        Final order: A1, B1, C1, A2, B2, C2
        """
        records = [
            make_record("A1", 10, 4, points_for=1500.0, division=1),
            make_record("A2", 10, 4, points_for=1400.0, division=1),
            make_record("B1", 10, 4, points_for=1300.0, division=2),
            make_record("B2", 3, 11, points_for=1100.0, division=2),
            make_record("C1", 10, 4, points_for=1200.0, division=3),
            make_record("C2", 2, 12, points_for=1000.0, division=3),
        ]
        match_log = make_match_log([(1, "A1", "B1"), (2, "C1", "A2"), (3, "B1", "C1")])
        ranked = RankingEngine().calculate_rankings(records, match_log)
        return ranked, match_log

    def test_league_order(self, league):
        ranked, _ = league
        assert [r.team_id for r in ranked] == ["A1", "B1", "C1", "A2", "B2", "C2"]

    def test_third_leader_gets_both_layers(self, league):
        ranked, match_log = league
        explainer = TiebreakerExplainer(ranked, match_log, is_live_season=True)

        info = explainer.explain(index_of(ranked, "C1"))

        assert [layer.context for layer in info.layers] == [
            TiebreakerContext.DIVISION_LEADERS,
            TiebreakerContext.WILD_CARD,
        ]

        leaders_layer = info.get_layer(TiebreakerContext.DIVISION_LEADERS)
        assert leaders_layer.tied_team_ids == ["A1", "B1", "C1"]
        assert leaders_layer.h2h_records == ["0-1 vs B1"]
        assert leaders_layer.aggregate_win_percentage == 0.0
        assert leaders_layer.uses_points_for is False

        wild_card_layer = info.get_layer(TiebreakerContext.WILD_CARD)
        assert wild_card_layer.tied_team_ids == ["C1", "A2"]
        assert wild_card_layer.h2h_records == ["1-0 vs A2"]
        assert wild_card_layer.aggregate_win_percentage == 1.0

    def test_top_seed_has_only_leader_layer(self, league):
        ranked, match_log = league

        info = explain(ranked, 0, match_log, is_live_season=True)

        assert [layer.context for layer in info.layers] == [TiebreakerContext.DIVISION_LEADERS]
        assert info.layers[0].h2h_records == ["1-0 vs B1"]

    def test_non_leader_has_only_wild_card_layer(self, league):
        ranked, match_log = league

        info = explain(ranked, index_of(ranked, "A2"), match_log, is_live_season=True)

        assert [layer.context for layer in info.layers] == [TiebreakerContext.WILD_CARD]
        assert info.layers[0].h2h_records == ["0-1 vs C1"]

    @pytest.fixture
    def bumped_league(self, make_record, make_match_log, divisional_league):
        """Divisional league with C2 tied with C1 at 14-6."""
        records = [
            make_record("C2", 14, 6, points_for=1650.0, division=3) if r.team_id == "C2" else r
            for r in divisional_league
        ]
        match_log = make_match_log([(1, "A4", "B4")])
        ranked = RankingEngine().calculate_rankings(records, match_log)
        return ranked, match_log

    def test_bumped_leader_gets_division_layer(self, bumped_league):
        ranked, match_log = bumped_league
        assert index_of(ranked, "C1") == 5
        assert ranked[5].is_third_division_leader_bumped

        info = explain(ranked, 5, match_log, is_live_season=True)

        assert len(info.layers) == 1
        layer = info.layers[0]
        assert layer.context == TiebreakerContext.DIVISION
        assert layer.tied_team_ids == ["C1", "C2"]
        assert layer.bumped_team_id == "C1"
        assert layer.uses_points_for is True
        assert layer.points_for == 1800.0

    def test_team_tied_with_bumped_leader(self, bumped_league):
        ranked, match_log = bumped_league

        info = explain(ranked, index_of(ranked, "C2"), match_log, is_live_season=True)

        layer = info.get_layer(TiebreakerContext.WILD_CARD)
        assert layer.tied_team_ids == ["C1", "C2"]
        assert layer.bumped_team_id == "C1"
        assert layer.points_for == 1650.0
