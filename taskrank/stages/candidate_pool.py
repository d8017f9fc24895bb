"""
Candidate pool — segment and interest filters applied before ranking.

Filters: one record per task id, segment membership, and (when the user
picked interests) at least one category in common with the selection.
All comparisons are case/whitespace-insensitive.
"""

import logging
from typing import Iterable, List, Set

from ..models.task import Task
from ..utils.text import normalize_string

logger = logging.getLogger(__name__)


def _dedupe_by_id(tasks: List[Task]) -> List[Task]:
    """Keep the first record for each task id."""
    seen: Set[str] = set()
    unique = []
    for task in tasks:
        if task.id in seen:
            logger.warning("Duplicate task id=%s ignored (title=%r)", task.id, task.title)
            continue
        seen.add(task.id)
        unique.append(task)
    return unique


def _matches_segment(task: Task, segment_key: str) -> bool:
    """True if the task lists the (normalized) segment."""
    return any(normalize_string(s) == segment_key for s in task.segments)


def _matches_any_category(task: Task, selected_keys: Set[str]) -> bool:
    """True if any task category is in the (normalized) selection."""
    return any(normalize_string(c) in selected_keys for c in task.categories)


def filter_by_segment(tasks: List[Task], segment: str) -> List[Task]:
    """Tasks relevant to segment, in input order."""
    segment_key = normalize_string(segment)
    return [t for t in _dedupe_by_id(tasks) if _matches_segment(t, segment_key)]


def filter_by_segment_and_categories(
    tasks: List[Task],
    segment: str,
    selected_categories: Iterable[str],
) -> List[Task]:
    """Tasks relevant to segment that share a category with the selection."""
    selected_keys = {normalize_string(c) for c in selected_categories}
    return [
        t for t in filter_by_segment(tasks, segment)
        if _matches_any_category(t, selected_keys)
    ]
