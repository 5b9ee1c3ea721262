"""Data models for match results and league standings."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TeamScore:
    """One side of a match: the team name and the goals it scored."""

    name: str
    score: int

    def __str__(self) -> str:
        return f"{self.name} {self.score}"


@dataclass(frozen=True)
class Match:
    """A single played match. A/B order only matters for display."""

    team_a: TeamScore
    team_b: TeamScore

    def __str__(self) -> str:
        return f"{self.team_a} - {self.team_b}"


@dataclass(frozen=True)
class MatchResult:
    match: Match


@dataclass(frozen=True)
class StandingsEntry:
    """Accumulated league points for one team."""

    team: str
    points: int

    def __str__(self) -> str:
        return f"{self.team}: {self.points} pts"
