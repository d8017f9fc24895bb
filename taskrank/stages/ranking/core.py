"""
Hero ranking: a segment plus one or more selected interest categories.

Builds the result as [hero, up to top_slots High-impact tasks, remainder],
capped at max_results. Without a hero the whole candidate set is sorted in
browse order and capped.
"""

import logging
from typing import List

from ...models.config import DEFAULT_CONFIG, RankingConfig
from ...models.scoring import relevant_priority_score
from ...models.task import Impact, Task
from ...utils.text import normalize_string
from ..candidate_pool import filter_by_segment_and_categories
from .hero import select_hero_task
from .ordering import sort_by_impact_score_title, sort_by_score_title, with_priority_score

logger = logging.getLogger(__name__)


def rank_with_hero(
    tasks: List[Task],
    segment: str,
    selected_categories: List[str],
    config: RankingConfig = DEFAULT_CONFIG,
) -> List[Task]:
    """
    Rank tasks matching segment and any selected category.

    tasks should already carry expanded categories for segment. Scores use only
    the categories the user selected. Returns [] when nothing matches.
    """
    selected = [key for key in (normalize_string(c) for c in selected_categories) if key]
    candidates = filter_by_segment_and_categories(tasks, segment, selected)
    if not candidates:
        logger.debug("No tasks match segment=%r categories=%r", segment, selected)
        return []

    priority_map = config.priority_map(segment)
    scored = [
        with_priority_score(
            task, relevant_priority_score(task, selected, priority_map, config)
        )
        for task in candidates
    ]

    hero = select_hero_task(scored, selected, priority_map, config)
    if hero is None:
        logger.debug("No High-impact candidate; returning browse order")
        return sort_by_impact_score_title(scored, config)[: config.max_results]

    remaining = [t for t in scored if t.id != hero.id]

    high_impact = [t for t in remaining if t.impact is Impact.HIGH]
    top_slots = sort_by_score_title(high_impact, config)[: config.top_slots]
    top_ids = {t.id for t in top_slots}

    rest = sort_by_impact_score_title(
        [t for t in remaining if t.id not in top_ids], config
    )

    logger.debug(
        "Hero ranking: hero=%s top=%d rest=%d", hero.id, len(top_slots), len(rest)
    )
    return [hero, *top_slots, *rest][: config.max_results]
