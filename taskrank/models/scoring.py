"""
Scoring helpers — category priority scores shared by browse and hero ranking.
"""

from typing import Iterable, Mapping

from .config import RankingConfig
from .task import Task
from ..utils.text import normalize_string


def priority_score(
    task: Task,
    priority_map: Mapping[str, int],
    config: RankingConfig,
) -> int:
    """Best (lowest) rank over all of a task's categories."""
    ranks = [config.priority_of(priority_map, tag) for tag in task.categories]
    return min(ranks) if ranks else config.default_priority


def relevant_priority_score(
    task: Task,
    selected: Iterable[str],
    priority_map: Mapping[str, int],
    config: RankingConfig,
) -> int:
    """
    Best rank over the task categories the user selected.

    selected must already be normalized. Returns default_priority when no
    category intersects.
    """
    wanted = set(selected)
    ranks = [
        config.priority_of(priority_map, tag)
        for tag in task.categories
        if normalize_string(tag) in wanted
    ]
    return min(ranks) if ranks else config.default_priority
