"""
Ordering keys shared by the browse and hero paths.

Browse order (and the tail of the hero path) is impact ordinal, then priority
score, then title. The high-impact top slots use priority score, then title.
Titles collate case-insensitively first, with case only breaking exact ties.
Python's sort is stable, so full ties keep filter order.
"""

from typing import List, Tuple

from ...models.config import RankingConfig
from ...models.task import Task


def with_priority_score(task: Task, score: int) -> Task:
    """Copy of task carrying its per-invocation priority score."""
    return task.model_copy(update={"priority_score": score})


def title_key(title: str) -> Tuple[str, str]:
    """Collation key: "apply for esim" sorts before "Buy adapter"."""
    return (title.casefold(), title)


def _score(task: Task, config: RankingConfig) -> int:
    return task.priority_score if task.priority_score is not None else config.default_priority


def sort_by_impact_score_title(tasks: List[Task], config: RankingConfig) -> List[Task]:
    """Sort ascending by (impact ordinal, priority score, title)."""
    return sorted(
        tasks,
        key=lambda t: (config.impact_rank(t.impact), _score(t, config), title_key(t.title)),
    )


def sort_by_score_title(tasks: List[Task], config: RankingConfig) -> List[Task]:
    """Sort ascending by (priority score, title)."""
    return sorted(tasks, key=lambda t: (_score(t, config), title_key(t.title)))
