import logging

import pytest

from league.aggregator import (
    compute_standings,
    rank_standings,
    render_standings,
    standings_report,
    standings_to_frame,
    tally_points,
)
from league.models import Match, MatchResult, StandingsEntry, TeamScore
from league.parser import PreconditionViolation


def make_result(team_a, score_a, team_b, score_b):
    return MatchResult(Match(TeamScore(team_a, score_a), TeamScore(team_b, score_b)))


def test_standings_rank_by_points():
    results = [
        make_result("Lions", 3, "Snakes", 1),
        make_result("Tarantulas", 1, "FC Awesome", 0),
        make_result("Lions", 1, "FC Awesome", 1),
    ]

    standings = compute_standings(results)

    assert standings == [
        StandingsEntry("Lions", 4),
        StandingsEntry("Tarantulas", 3),
        StandingsEntry("FC Awesome", 1),
        StandingsEntry("Snakes", 0),
    ]


def test_losing_team_is_registered_with_zero_points():
    points = tally_points([make_result("Lions", 0, "Snakes", 2)])

    assert points == {"Snakes": 3, "Lions": 0}


def test_ties_are_broken_by_name():
    standings = rank_standings({"Zebras": 3, "Beavers": 3, "Antelopes": 3, "Cougars": 0})

    assert [entry.team for entry in standings] == ["Antelopes", "Beavers", "Zebras", "Cougars"]


def test_tie_break_is_case_sensitive():
    standings = rank_standings({"alpha": 1, "Beta": 1})

    assert [entry.team for entry in standings] == ["Beta", "alpha"]


def test_render_lists_header_then_points():
    lines = render_standings([StandingsEntry("Lions", 4), StandingsEntry("", 0)])

    assert lines == ["Team Standings:", "Lions: 4 pts", ": 0 pts"]


def test_render_is_repeatable():
    standings = compute_standings([make_result("Lions", 1, "Snakes", 1)])

    assert render_standings(standings) == render_standings(standings)
    assert render_standings(standings) == ["Team Standings:", "Lions: 1 pts", "Snakes: 1 pts"]


def test_empty_results_give_header_only():
    assert compute_standings([]) == []
    assert standings_report([]) == "Team Standings:"


def test_each_match_is_logged(caplog):
    caplog.set_level(logging.INFO, logger="league.aggregator")

    tally_points([make_result("Lions", 3, "Snakes", 1)])

    assert "Processed: Lions 3 - Snakes 1" in caplog.text


@pytest.mark.parametrize("bad", [None, MatchResult(None)])
def test_missing_result_is_rejected(bad):
    with pytest.raises(PreconditionViolation):
        tally_points([make_result("Lions", 3, "Snakes", 1), bad])


def test_standings_frame_has_positions():
    frame = standings_to_frame([StandingsEntry("Lions", 4), StandingsEntry("Snakes", 0)])

    assert list(frame.columns) == ["position", "team", "points"]
    assert frame["position"].tolist() == [1, 2]
    assert frame["team"].tolist() == ["Lions", "Snakes"]
    assert frame["points"].tolist() == [4, 0]


def test_empty_standings_frame_keeps_columns():
    frame = standings_to_frame([])

    assert frame.empty
    assert list(frame.columns) == ["position", "team", "points"]
