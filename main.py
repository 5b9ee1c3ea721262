"""League standings calculator.

Reads match results such as ``Lions 3, Snakes 1`` either typed at the prompt
(finish with ``done``) or from a results file, and prints the league table.
Wins are worth 3 points, draws 1 and losses 0. Teams level on points are
listed alphabetically.

Usage
-----
python main.py --input-method file --file results.csv --output standings.xlsx

Without ``--input-method`` the script asks which input to use.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

import pandas as pd

from league.aggregator import compute_standings, render_standings, standings_to_frame
from league.models import StandingsEntry
from league.parser import MalformedScoreError, PreconditionViolation
from league.sources import FileSource, InteractiveSource, LineSource, read_results

logger = logging.getLogger(__name__)

# -------------------------
# Configuration defaults
# -------------------------

LEAGUE_NAME = "Span Digital League"
DEFAULT_OUTPUT = Path("standings.csv")
INPUT_METHODS = {"1": "stdin", "2": "file"}


# -------------------------
# Output helpers
# -------------------------

def write_standings(entries: Iterable[StandingsEntry], path: Path) -> None:
    """Write the ranked table to *path* (Excel for ``.xlsx``, CSV otherwise)."""

    path.parent.mkdir(parents=True, exist_ok=True)
    frame = standings_to_frame(entries)
    if path.suffix.lower() == ".xlsx":
        with pd.ExcelWriter(path, engine="openpyxl") as writer:
            frame.to_excel(writer, sheet_name="standings", index=False)
    else:
        frame.to_csv(path, index=False)


def create_plot(entries: Sequence[StandingsEntry], output_path: Path) -> None:
    try:
        import matplotlib.pyplot as plt
    except ImportError:  # pragma: no cover - optional dependency
        logger.info("matplotlib not installed; skipping plot generation")
        return

    if not entries:
        logger.info("No standings to plot; skipping plot generation")
        return

    output_path.parent.mkdir(parents=True, exist_ok=True)
    plt.figure(figsize=(max(6, len(entries)), 4))
    plt.bar([entry.team for entry in entries], [entry.points for entry in entries])
    plt.ylabel("Points")
    plt.xticks(rotation=45, ha="right")
    plt.grid(True, axis="y", linestyle="--", alpha=0.3)
    plt.tight_layout()
    plt.savefig(output_path)
    plt.close()
    logger.info("Created %s", output_path.resolve())


# -------------------------
# Processing
# -------------------------

def run(
    source: LineSource,
    *,
    output: Optional[Path] = None,
    plot: Optional[Path] = None,
) -> List[StandingsEntry]:
    """Read all results from *source*, print the table and write optional exports.

    :class:`~league.parser.MalformedScoreError` propagates before anything is
    printed or written.
    """

    results = read_results(source)
    print(f"Processing {len(results)} match results...")
    entries = compute_standings(results)

    print()
    for line in render_standings(entries):
        print(line)

    if output is not None:
        write_standings(entries, output)
        logger.info("Wrote %s", output.resolve())
    if plot is not None:
        create_plot(entries, plot)

    print("Processing complete!")
    return entries


def choose_source(args: argparse.Namespace) -> Optional[LineSource]:
    method = args.input_method
    if method is None:
        print(f"Welcome to the {LEAGUE_NAME}")
        print("Please input team results")
        print("Choose input method:")
        print("1. Standard Input")
        print("2. CSV File")
        try:
            method = INPUT_METHODS.get(input().strip())
        except EOFError:
            method = None
        if method is None:
            return None

    if method == "stdin":
        return InteractiveSource(sys.stdin)

    path = args.file
    if path is None:
        print("Enter CSV file path:")
        try:
            path = Path(input().strip())
        except EOFError:
            return None
    return FileSource(path)


# -------------------------
# CLI entry-point
# -------------------------

def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--input-method",
        choices=sorted(INPUT_METHODS.values()),
        help="Read results from standard input or a file (asked interactively if omitted).",
    )
    parser.add_argument(
        "--file",
        type=Path,
        help="Results file, one 'TeamA ScoreA, TeamB ScoreB' per line.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help=f"Optional standings export, .xlsx or .csv (e.g. {DEFAULT_OUTPUT}).",
    )
    parser.add_argument(
        "--plot",
        type=Path,
        help="Optional points bar chart (PNG).",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging for detailed progress information.",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress informational output, showing only warnings and errors.",
    )

    args = parser.parse_args(argv)

    if args.verbose and args.quiet:
        parser.error("--verbose and --quiet are mutually exclusive")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING if args.quiet else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )

    source = choose_source(args)
    if source is None:
        print("Invalid choice. Exiting.")
        raise SystemExit(2)

    try:
        run(source, output=args.output, plot=args.plot)
    except (MalformedScoreError, PreconditionViolation) as exc:
        raise SystemExit(f"Failed to parse match line: {exc}") from exc


if __name__ == "__main__":
    main()
