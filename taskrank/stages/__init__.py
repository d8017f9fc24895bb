"""Pipeline stages: category expansion, candidate pool, ranking, orchestration."""

from .candidate_pool import filter_by_segment, filter_by_segment_and_categories
from .category_expansion import expand_categories, with_expanded_categories
from .orchestrator import get_top_tasks
from .ranking import rank_for_browse, rank_with_hero, select_hero_task

__all__ = [
    "expand_categories",
    "with_expanded_categories",
    "filter_by_segment",
    "filter_by_segment_and_categories",
    "rank_for_browse",
    "rank_with_hero",
    "select_hero_task",
    "get_top_tasks",
]
