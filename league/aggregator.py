"""Aggregation helpers for league standings."""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Mapping, Tuple

import pandas as pd

from .models import Match, MatchResult, StandingsEntry
from .parser import PreconditionViolation

logger = logging.getLogger(__name__)

POINTS_FOR_WIN = 3
POINTS_FOR_DRAW = 1
POINTS_FOR_LOSS = 0
REPORT_HEADER = "Team Standings:"


def award_points(match: Match) -> Tuple[Tuple[str, int], Tuple[str, int]]:
    """Return the ``(team, points)`` awards for both sides of *match*."""

    team_a, team_b = match.team_a, match.team_b
    if team_a.score > team_b.score:
        return (team_a.name, POINTS_FOR_WIN), (team_b.name, POINTS_FOR_LOSS)
    if team_a.score < team_b.score:
        return (team_b.name, POINTS_FOR_WIN), (team_a.name, POINTS_FOR_LOSS)
    return (team_a.name, POINTS_FOR_DRAW), (team_b.name, POINTS_FOR_DRAW)


def tally_points(results: Iterable[MatchResult]) -> Dict[str, int]:
    points: Dict[str, int] = {}
    for index, result in enumerate(results):
        if result is None or result.match is None:
            raise PreconditionViolation(f"Match result #{index + 1} is missing its match")
        for team, awarded in award_points(result.match):
            # A loss still registers the team.
            points[team] = points.get(team, 0) + awarded
        logger.info("Processed: %s", result.match)
    return points


def rank_standings(points: Mapping[str, int]) -> List[StandingsEntry]:
    """Order teams by points, highest first, then by name."""

    ordered = sorted(points.items(), key=lambda entry: (-entry[1], entry[0]))
    return [StandingsEntry(team=team, points=total) for team, total in ordered]


def compute_standings(results: Iterable[MatchResult]) -> List[StandingsEntry]:
    return rank_standings(tally_points(results))


def render_standings(entries: Iterable[StandingsEntry]) -> List[str]:
    return [REPORT_HEADER, *(str(entry) for entry in entries)]


def standings_report(results: Iterable[MatchResult]) -> str:
    return "\n".join(render_standings(compute_standings(results)))


def standings_to_frame(entries: Iterable[StandingsEntry]) -> pd.DataFrame:
    records = [
        {"position": position, "team": entry.team, "points": entry.points}
        for position, entry in enumerate(entries, start=1)
    ]
    return pd.DataFrame.from_records(records, columns=["position", "team", "points"])
