"""
Pipeline orchestrator — expands categories, filters, and ranks tasks.

The main entry point is get_top_tasks, which picks one of three cases:
- no segment: nothing to rank, returns [];
- segment only: browse ranking over every task for the segment;
- segment and interests: hero ranking, capped at config.max_results.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Union

from ..models.config import RankingConfig, resolve_config
from ..models.task import Task, ensure_tasks
from ..utils.text import normalize_string
from .category_expansion import with_expanded_categories
from .ranking import rank_for_browse, rank_with_hero

logger = logging.getLogger(__name__)


def get_top_tasks(
    tasks: List[Union[Dict[str, Any], Task]],
    segment: Optional[str],
    selected_categories: Optional[Iterable[str]] = None,
    config: Optional[RankingConfig] = None,
) -> List[Task]:
    """
    Rank tasks for a user segment and optional interest categories.

    Accepts Task models or dicts. The input is never mutated; returned records
    are fresh copies carrying priority_score, and is_featured on the hero.
    """
    # Segment selection is mandatory
    if not normalize_string(segment):
        return []

    config = resolve_config(config)
    if not config.has_segment(segment):
        logger.debug("Unregistered segment=%r; all priorities default to %d", segment, config.default_priority)

    # Featured flag and score belong to one call only
    tasks_typed = [t.without_transient() for t in ensure_tasks(list(tasks or []))]
    expanded = with_expanded_categories(tasks_typed, segment, config)

    selected = [c for c in (selected_categories or []) if normalize_string(c)]
    if not selected:
        return rank_for_browse(expanded, segment, config)

    return rank_with_hero(expanded, segment, selected, config)
