"""
Ranking: browse ordering and the hero protocol.

Public API: rank_for_browse, rank_with_hero, select_hero_task.
- browse: segment only, full sorted list.
- core: segment plus interests, hero + top slots + remainder.
- hero, ordering: hero fallback chain and shared sort keys.
"""

from .browse import rank_for_browse
from .core import rank_with_hero
from .hero import select_hero_task, top_selected_category

__all__ = [
    "rank_for_browse",
    "rank_with_hero",
    "select_hero_task",
    "top_selected_category",
]
