"""
Category expansion — derive a segment-aware category list from a primary tag.

A task is ingested with a single primary category. For a given segment the
engine widens it with the segment's top-priority categories so that tasks can
match interests adjacent to their primary one.

The public entry point is expand_categories.
"""

import logging
from typing import List, Optional

from ..models.config import DEFAULT_CONFIG, RankingConfig
from ..models.task import Task
from ..utils.text import normalize_string

logger = logging.getLogger(__name__)


def expand_categories(
    primary_tag: Optional[str],
    segment: Optional[str],
    config: RankingConfig = DEFAULT_CONFIG,
) -> List[str]:
    """
    Return [primary_tag, *next] where next holds the segment's highest-priority
    tags other than the primary, up to config.expansion_size in total.

    Empty primary -> []. Segment without a priority map -> [primary_tag].
    """
    if not primary_tag or not primary_tag.strip():
        return []

    if not config.has_segment(segment):
        logger.debug("No priority map for segment=%r; category not expanded", segment)
        return [primary_tag]

    priority_map = config.priority_map(segment)
    # sorted() is stable: equal ranks keep declaration order
    ordered = sorted(config.tags, key=lambda tag: config.priority_of(priority_map, tag))

    primary_key = normalize_string(primary_tag)
    additional = [tag for tag in ordered if normalize_string(tag) != primary_key]
    return [primary_tag, *additional[: config.expansion_size - 1]]


def with_expanded_categories(
    tasks: List[Task],
    segment: str,
    config: RankingConfig = DEFAULT_CONFIG,
) -> List[Task]:
    """Copies of tasks whose categories are expanded for segment; uncategorised tasks pass through."""
    expanded = []
    for task in tasks:
        primary = task.primary_category
        if not primary:
            expanded.append(task)
            continue
        categories = expand_categories(primary, segment, config)
        expanded.append(task.model_copy(update={"categories": tuple(categories)}))
    return expanded
