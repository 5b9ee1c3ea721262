"""Text parsing utilities for match result lines."""
from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional

from .models import Match, MatchResult, TeamScore

logger = logging.getLogger(__name__)

DELIMITER = ","
EXPECTED_FORMAT = "TeamA ScoreA, TeamB ScoreB"
# Scores are limited to the 32-bit signed integer range.
MAX_SCORE = 2**31 - 1

_TRAILING_SCORE = re.compile(r"(?<!\d)(\d+)\s*$", re.ASCII)


class ParsingError(ValueError):
    """Raised when a line of text cannot be interpreted as a match result."""


class FormatError(ParsingError):
    """The line does not split into exactly two team entries."""


class MalformedScoreError(ParsingError):
    """A team entry does not end with a score."""


class ScoreOverflowError(MalformedScoreError):
    """A score is too large to be a real result."""


class PreconditionViolation(ValueError):
    """A required line, result or match was missing."""


def extract_team_score(segment: str) -> TeamScore:
    """Split ``"FC Awesome 3"`` into the team name and its trailing score.

    The score is the longest run of digits at the end of the segment, so names
    that carry digits of their own (``"Team99 3"``) keep them. The name is not
    checked for emptiness.
    """

    match = _TRAILING_SCORE.search(segment)
    if match is None:
        raise MalformedScoreError(f"Invalid score format: {segment!r}")
    digits = match.group(1)
    significant = digits.lstrip("0")
    if len(significant) > len(str(MAX_SCORE)) or int(significant or "0") > MAX_SCORE:
        raise ScoreOverflowError(
            f"Score with {len(significant)} digits out of range in {segment[:40]!r}"
        )
    score = int(significant or "0")
    name = segment[: match.start()].strip()
    return TeamScore(name=name, score=score)


def parse_match_line(line: str) -> Match:
    if line is None:
        raise PreconditionViolation("Cannot parse a missing line")
    # A trailing delimiter counts as an extra, empty entry.
    parts = line.split(DELIMITER)
    if len(parts) != 2:
        raise FormatError(
            f"Expected 2 comma separated entries, found {len(parts)} in {line!r}"
        )
    return Match(team_a=extract_team_score(parts[0]), team_b=extract_team_score(parts[1]))


class MatchLineParser:
    """Collects match results from a stream of raw lines.

    Lines with the wrong number of entries are reported and skipped. A line
    with a missing or unreadable score raises, which aborts the batch for the
    caller; results parsed before that point stay in :attr:`results`.
    """

    def __init__(self) -> None:
        self.results: List[MatchResult] = []

    def process_line(self, line: str) -> Optional[MatchResult]:
        try:
            match = parse_match_line(line)
        except FormatError as exc:
            logger.warning("Invalid format, please use: %s (%s)", EXPECTED_FORMAT, exc)
            return None
        result = MatchResult(match=match)
        self.results.append(result)
        logger.debug("Parsed %s", match)
        return result

    def process_lines(self, lines: Iterable[str]) -> List[MatchResult]:
        for line in lines:
            self.process_line(line)
        return self.results
