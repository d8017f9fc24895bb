"""
Browse ranking: every task for a segment, no interests selected.

Scores each task by the best priority over all of its (expanded) categories
and returns the full list in browse order. No result cap applies here.
"""

import logging
from typing import List

from ...models.config import DEFAULT_CONFIG, RankingConfig
from ...models.scoring import priority_score
from ...models.task import Task
from ..candidate_pool import filter_by_segment
from .ordering import sort_by_impact_score_title, with_priority_score

logger = logging.getLogger(__name__)


def rank_for_browse(
    tasks: List[Task],
    segment: str,
    config: RankingConfig = DEFAULT_CONFIG,
) -> List[Task]:
    """
    Filter tasks to segment, score them, and sort by (impact, score, title).

    tasks should already carry expanded categories for segment.
    """
    priority_map = config.priority_map(segment)
    candidates = filter_by_segment(tasks, segment)
    scored = [
        with_priority_score(task, priority_score(task, priority_map, config))
        for task in candidates
    ]
    logger.debug("Browse ranking: segment=%r candidates=%d", segment, len(scored))
    return sort_by_impact_score_title(scored, config)
