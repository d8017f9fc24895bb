"""
Hero task selection — the featured task shown at position 1.

Fallback chain:
1. The popular task of the user's top-priority selected category, when it is
   among the candidates and has High impact.
2. Otherwise the High-impact candidate with the best (score, title).
3. Otherwise no hero.
"""

import logging
from typing import List, Mapping, Optional

from ...models.config import RankingConfig
from ...models.task import Impact, Task
from ...utils.text import normalize_string
from .ordering import sort_by_score_title

logger = logging.getLogger(__name__)


def top_selected_category(
    selected: List[str],
    priority_map: Mapping[str, int],
    config: RankingConfig,
) -> Optional[str]:
    """Selected category with the lowest rank; first in input order on ties."""
    if not selected:
        return None
    return min(selected, key=lambda tag: config.priority_of(priority_map, tag))


def _popular_hero(
    candidates: List[Task],
    selected: List[str],
    priority_map: Mapping[str, int],
    config: RankingConfig,
) -> Optional[Task]:
    """The top category's popular task, if present and High impact."""
    category = top_selected_category(selected, priority_map, config)
    popular_title = config.popular_task_for(category)
    if not popular_title:
        return None
    wanted = normalize_string(popular_title)
    match = next((t for t in candidates if normalize_string(t.title) == wanted), None)
    if match is None:
        logger.debug("Popular task %r for category %r not among candidates", popular_title, category)
        return None
    if match.impact is not Impact.HIGH:
        logger.debug("Popular task %r skipped: impact=%s", popular_title, match.impact.value)
        return None
    return match


def _best_high_impact(candidates: List[Task], config: RankingConfig) -> Optional[Task]:
    """High-impact candidate with the lowest (score, title)."""
    high = [t for t in candidates if t.impact is Impact.HIGH]
    if not high:
        return None
    return sort_by_score_title(high, config)[0]


def select_hero_task(
    candidates: List[Task],
    selected: List[str],
    priority_map: Mapping[str, int],
    config: RankingConfig,
) -> Optional[Task]:
    """
    Pick the hero among scored candidates and return it flagged as featured.

    selected holds normalized category keys in the user's original order.
    Returns None when no candidate has High impact.
    """
    hero = _popular_hero(candidates, selected, priority_map, config)
    if hero is None:
        hero = _best_high_impact(candidates, config)
    if hero is None:
        return None
    return hero.model_copy(update={"is_featured": True})
