"""
taskrank command line

Usage:
    # Rank tasks for a segment (browse all)
    taskrank rank --csv data/tasks.csv --segment Single

    # Rank with interests selected (hero + top slots, max 15)
    taskrank rank --csv data/tasks.csv --segment Couple --category "Travel and mobility" --json

    # Show the expanded categories for a primary tag
    taskrank expand --category Relocation --segment Parents
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from .ingestion import load_tasks_from_csv
from .models.config import RankingConfig
from .models.task import Task
from .settings import get_settings
from .stages.category_expansion import expand_categories
from .stages.orchestrator import get_top_tasks

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="taskrank", description="Rank recommended tasks for a user segment.")
    parser.add_argument("--log-level", help="Override TASKRANK_LOG_LEVEL (DEBUG, INFO, ...)")
    parser.add_argument("--config", type=Path, help="JSON file with RankingConfig overrides")
    sub = parser.add_subparsers(dest="command", required=True)

    rank = sub.add_parser("rank", help="Rank tasks from a CSV file")
    rank.add_argument("--csv", type=Path, help="Task sheet (defaults to TASKRANK_TASKS_CSV)")
    rank.add_argument("--segment", required=True, help="User life-status segment, e.g. Single")
    rank.add_argument(
        "--category", action="append", default=[], dest="categories",
        help="Selected interest category (repeatable)",
    )
    rank.add_argument("--json", action="store_true", help="Print JSON instead of a table")

    expand = sub.add_parser("expand", help="Show expanded categories for a primary tag")
    expand.add_argument("--category", required=True, help="Primary category")
    expand.add_argument("--segment", required=True, help="User life-status segment")
    return parser


def _format_table(tasks: List[Task]) -> str:
    """One line per task; the featured task is marked with '*'."""
    if not tasks:
        return "No tasks found."
    lines = []
    for pos, task in enumerate(tasks, start=1):
        mark = "*" if task.is_featured else " "
        categories = ", ".join(task.categories)
        lines.append(
            f"{pos:>3}{mark} {task.title:<40} {task.impact.value:<6} "
            f"score={task.priority_score}  [{categories}]"
        )
    return "\n".join(lines)


def _load_config(path: Optional[Path]) -> RankingConfig:
    if path is not None:
        return RankingConfig.from_json_file(path)
    return get_settings().load_ranking_config()


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    settings = get_settings()

    logging.basicConfig(
        level=(args.log_level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = _load_config(args.config)
    except FileNotFoundError as e:
        print(f"Config file not found: {e.filename}", file=sys.stderr)
        return EXIT_USAGE
    except ValidationError as e:
        print(f"Invalid ranking config:\n{e}", file=sys.stderr)
        return EXIT_USAGE

    if args.command == "expand":
        print(json.dumps(expand_categories(args.category, args.segment, config)))
        return EXIT_OK

    csv_path = args.csv or settings.tasks_csv_path
    if csv_path is None or not Path(csv_path).is_file():
        print(f"Tasks CSV not found: {csv_path}", file=sys.stderr)
        return EXIT_USAGE

    tasks = load_tasks_from_csv(csv_path)
    ranked = get_top_tasks(tasks, args.segment, args.categories, config)
    logger.info("Ranked %d of %d tasks for segment=%s", len(ranked), len(tasks), args.segment)

    if args.json:
        print(json.dumps([t.model_dump(mode="json", exclude_none=True) for t in ranked], indent=2))
    else:
        print(_format_table(ranked))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
