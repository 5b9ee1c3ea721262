"""Toolkit for parsing match results and ranking league standings."""

from .models import Match, MatchResult, StandingsEntry, TeamScore
from .parser import (
    FormatError,
    MalformedScoreError,
    MatchLineParser,
    ParsingError,
    PreconditionViolation,
    ScoreOverflowError,
    parse_match_line,
)
from .aggregator import compute_standings, render_standings, standings_report
from .sources import FileSource, InteractiveSource, SourceError, read_results

__all__ = [
    "FileSource",
    "FormatError",
    "InteractiveSource",
    "MalformedScoreError",
    "Match",
    "MatchLineParser",
    "MatchResult",
    "ParsingError",
    "PreconditionViolation",
    "ScoreOverflowError",
    "SourceError",
    "StandingsEntry",
    "TeamScore",
    "compute_standings",
    "parse_match_line",
    "read_results",
    "render_standings",
    "standings_report",
]
