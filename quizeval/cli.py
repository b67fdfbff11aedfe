#!/usr/bin/env python3
"""Command-line front end: a batch ``run`` command and the interactive menu."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence

from quizeval import operations
from quizeval.config import default_log_level, default_output_dir
from quizeval.operations import OperationResult
from quizeval.scoring import SCORING_RULES, resolve_rule
from quizeval.session import Session

logger = logging.getLogger(__name__)

MENU = """
===== QUIZ SYSTEM =====
1. Load Data Files
2. Generate Score Report
3. Show Questions
4. Show Answers
5. Export Difficulty Analysis
6. Export Detailed Student Report
7. Exit"""

EXIT_CHOICE = "7"


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Configure and parse CLI arguments."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--output-dir",
        default=None,
        help="Directory for report.csv, difficulty.csv and detailed_report.csv "
        "(defaults to $QUIZEVAL_OUTPUT_DIR or the working directory).",
    )
    common.add_argument("--xlsx", action="store_true", help="Also write an .xlsx copy of each report.")
    common.add_argument(
        "--scoring",
        choices=sorted(SCORING_RULES),
        default="standard",
        help="Scoring rule applied to every response.",
    )
    common.add_argument(
        "--max-penalty",
        type=float,
        default=None,
        help="Cap the deduction for a wrong answer (standard scoring only).",
    )
    common.add_argument("--log", help="Optional log file capturing warnings and errors.")
    common.add_argument("-v", "--verbose", action="store_true", help="Log progress at INFO level.")

    parser = argparse.ArgumentParser(
        description="Score quiz responses against an answer key and export reports.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    commands = parser.add_subparsers(dest="command", required=True)

    run = commands.add_parser(
        "run",
        parents=[common],
        help="Load the three tables and write every report.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    run.add_argument("--questions", required=True, help="Questions CSV (id,text,options,correctOption,marks,penalty).")
    run.add_argument("--answers", required=True, help="Answer-key CSV (id,correctOption).")
    run.add_argument("--responses", required=True, help="Responses CSV (studentId,questionId,chosenOption).")

    commands.add_parser(
        "menu",
        parents=[common],
        help="Interactive menu.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    return parser.parse_args(argv)


def configure_logging(verbose: bool = False, log_path: Optional[str] = None) -> None:
    level = logging.INFO if verbose else default_log_level()
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_path:
        path = Path(log_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, encoding="utf-8"))
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=handlers,
        force=True,
    )


def build_session(args: argparse.Namespace) -> Session:
    return Session(evaluator=resolve_rule(args.scoring, args.max_penalty))


def emit(result: OperationResult, print_fn: Callable[[str], None] = print) -> None:
    print_fn(result.message)
    for line in result.lines:
        print_fn(line)


def run_batch(args: argparse.Namespace, session: Session) -> int:
    """Load every table and export every report; 1 if any step failed."""
    output_dir = Path(args.output_dir) if args.output_dir else default_output_dir()
    results: List[OperationResult] = operations.load_data(
        session, Path(args.questions), Path(args.answers), Path(args.responses)
    )
    results.append(operations.generate_score_report(session, output_dir, args.xlsx))
    results.append(operations.export_difficulty(session, output_dir, args.xlsx))
    results.append(operations.export_detailed_report(session, output_dir, args.xlsx))
    for result in results:
        emit(result)
    return 0 if all(result.ok for result in results) else 1


def run_menu(
    session: Session,
    output_dir: Optional[Path] = None,
    xlsx: bool = False,
    input_fn: Callable[[str], str] = input,
    print_fn: Callable[[str], None] = print,
) -> None:
    """Prompt for choices until the user exits or input runs out."""

    def _prompt(text: str) -> Optional[str]:
        try:
            return input_fn(text).strip()
        except EOFError:
            return None

    def _load() -> Iterable[OperationResult]:
        paths = []
        for table in ("questions", "answers", "responses"):
            raw = _prompt(f"Path to {table}.csv: ")
            if raw is None:
                return []
            paths.append(Path(raw).expanduser())
        return operations.load_data(session, *paths)

    actions = {
        "1": _load,
        "2": lambda: [operations.generate_score_report(session, output_dir, xlsx)],
        "3": lambda: [operations.show_questions(session)],
        "4": lambda: [operations.show_answers(session)],
        "5": lambda: [operations.export_difficulty(session, output_dir, xlsx)],
        "6": lambda: [operations.export_detailed_report(session, output_dir, xlsx)],
    }

    while True:
        print_fn(MENU)
        choice = _prompt("Choose: ")
        if choice is None or choice == EXIT_CHOICE:
            print_fn("Exiting...")
            return
        action = actions.get(choice)
        if action is None:
            print_fn("Invalid choice!")
            continue
        for result in action():
            emit(result, print_fn)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for the quizeval CLI."""
    args = parse_args(argv)
    configure_logging(args.verbose, args.log)
    try:
        session = build_session(args)
    except ValueError as exc:
        print(f"Invalid options: {exc}", file=sys.stderr)
        return 2
    if args.command == "run":
        return run_batch(args, session)
    output_dir = Path(args.output_dir) if args.output_dir else None
    run_menu(session, output_dir, args.xlsx)
    return 0


if __name__ == "__main__":
    sys.exit(main())
