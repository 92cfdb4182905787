"""Tests for scoreboard data models."""

import json
import pytest
from datetime import datetime, timezone

from warpscore.scoreboard.models import (
    AccountScore,
    ScoreboardReport,
    Team,
    TeamScore,
    parse_account_scores,
)


class TestAccountScore:
    """Tests for AccountScore creation and validation."""

    def test_from_dict_reads_weighted_score(self):
        score = AccountScore.from_dict('0xA', {'weightedScore': 0.5, 'tvl': 12})

        assert score.account == '0xA'
        assert score.weighted_score == 0.5
        assert score.extra == {'tvl': 12}

    def test_to_dict_round_trips_extra_fields(self):
        score = AccountScore.from_dict('0xA', {'weightedScore': 0.5, 'tvl': 12})

        assert score.to_dict() == {'weightedScore': 0.5, 'tvl': 12}

    def test_missing_weighted_score_raises_error(self):
        with pytest.raises(ValueError, match="missing 'weightedScore'"):
            AccountScore.from_dict('0xA', {'score': 1})

    def test_negative_score_raises_error(self):
        with pytest.raises(ValueError, match="non-negative"):
            AccountScore('0xA', -0.1)

    @pytest.mark.parametrize("bad", ["1.0", None, True, float('nan')])
    def test_non_numeric_score_raises_error(self, bad):
        with pytest.raises(ValueError):
            AccountScore('0xA', bad)

    def test_integer_score_accepted(self):
        assert AccountScore('0xA', 3).weighted_score == 3

    @pytest.mark.parametrize("bad", [float('inf'), float('-inf')])
    def test_infinite_score_raises_error(self, bad):
        with pytest.raises(ValueError, match="finite"):
            AccountScore('0xA', bad)

    def test_parse_account_scores_keeps_order(self):
        raw = {'0xB': {'weightedScore': 1}, '0xA': {'weightedScore': 2}}

        table = parse_account_scores(raw)

        assert list(table) == ['0xB', '0xA']
        assert table['0xA'].weighted_score == 2


class TestTeam:
    """Tests for Team and TeamScore."""

    def test_from_dict_with_nested_teams(self):
        team = Team.from_dict({'id': 7, 'members': ['0xa', '0xb'], 'teams': [8]})

        assert team.id == 7
        assert team.members == ('0xa', '0xb')
        assert team.sub_teams == (8,)

    def test_from_dict_defaults(self):
        team = Team.from_dict({'id': 'T1'})

        assert team.members == ()
        assert team.sub_teams == ()

    def test_members_stored_as_tuple(self):
        team = Team('T1', ['a', 'b'])

        assert team.members == ('a', 'b')

    def test_empty_id_raises_error(self):
        with pytest.raises(ValueError, match="Team ID cannot be empty"):
            Team('')

    def test_null_id_raises_error(self):
        with pytest.raises(ValueError, match="Team ID cannot be empty"):
            Team(None)

    def test_non_string_member_raises_error(self):
        with pytest.raises(ValueError, match="invalid member"):
            Team('T1', (123,))

    def test_team_score_serialization(self):
        assert TeamScore('T1', 0.25).to_dict() == {'id': 'T1', 'weightedScore': 0.25}


class TestScoreboardReport:
    """Tests for report serialization."""

    def test_to_dict(self):
        report = ScoreboardReport.create(
            [TeamScore('T1', 0.02), TeamScore('T2', 0.0)],
            timestamp=datetime(2021, 3, 4, 12, 30, 15, 250000, tzinfo=timezone.utc)
        )

        assert report.to_dict() == {
            'teams': [
                {'id': 'T1', 'weightedScore': 0.02},
                {'id': 'T2', 'weightedScore': 0.0},
            ],
            'timestamp': '2021-03-04T12:30:15.250Z',
        }

    def test_to_json_is_parseable(self):
        report = ScoreboardReport.create([TeamScore('T1', 1.5)])

        data = json.loads(report.to_json())

        assert data['teams'] == [{'id': 'T1', 'weightedScore': 1.5}]
        assert data['timestamp'].endswith('Z')

    def test_default_timestamp_is_utc(self):
        report = ScoreboardReport.create([])

        assert report.timestamp.tzinfo is not None
        assert report.teams == ()

    def test_report_is_immutable(self):
        report = ScoreboardReport.create([])

        with pytest.raises(AttributeError):
            report.teams = ()

    def test_numeric_team_id_kept_in_output(self):
        team = Team.from_dict({'id': 5, 'members': ['0xa']})
        report = ScoreboardReport.create(
            [TeamScore(team.id, 0.1)],
            timestamp=datetime(2021, 3, 4, tzinfo=timezone.utc)
        )

        assert report.to_dict()['teams'] == [{'id': 5, 'weightedScore': 0.1}]
        assert json.loads(report.to_json())['teams'][0]['id'] == 5

    def test_to_json_rejects_non_finite_scores(self):
        report = ScoreboardReport.create([TeamScore('T1', float('inf'))])

        with pytest.raises(ValueError):
            report.to_json()
