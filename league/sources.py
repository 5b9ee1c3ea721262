"""Input sources that feed raw match lines into the parser."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Protocol, TextIO, Union

from .models import MatchResult
from .parser import EXPECTED_FORMAT, MatchLineParser

logger = logging.getLogger(__name__)

SENTINEL = "done"


class SourceError(OSError):
    """Raised when an input source cannot be read."""


class LineSource(Protocol):
    def lines(self) -> Iterator[str]:
        ...


class InteractiveSource:
    """Reads lines typed by a user until ``done`` or end of input."""

    def __init__(self, stream: TextIO, prompt: Callable[[str], None] = print) -> None:
        self.stream = stream
        self.prompt = prompt

    def lines(self) -> Iterator[str]:
        self.prompt(f"Enter match results (format: {EXPECTED_FORMAT})")
        self.prompt(f"Enter '{SENTINEL}' when finished")
        try:
            for raw in self.stream:
                if raw.rstrip("\r\n").lower() == SENTINEL:
                    return
                yield raw.rstrip("\r\n")
        except OSError as exc:
            logger.error("Unable to process input: %s", exc)


class FileSource:
    """Reads every line of a results file."""

    def __init__(self, path: Union[str, Path], encoding: str = "utf-8") -> None:
        self.path = Path(path)
        self.encoding = encoding

    def lines(self) -> Iterator[str]:
        try:
            with self.path.open(encoding=self.encoding) as handle:
                for raw in handle:
                    yield raw.rstrip("\r\n")
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceError(f"Error reading CSV file {self.path}: {exc}") from exc


def read_results(
    source: LineSource, parser: Optional[MatchLineParser] = None
) -> List[MatchResult]:
    """Parse all lines from *source*.

    An unreadable source is logged and produces no results. Score errors from
    the parser are not caught here.
    """

    parser = parser or MatchLineParser()
    try:
        return parser.process_lines(source.lines())
    except SourceError as exc:
        logger.error("%s", exc)
        return []
