"""
Ranking configuration — category universe, per-segment priorities, hero lookups.

RankingConfig defaults are defined here. Callers may pass a dict (e.g. loaded
from a JSON file named by TASKRANK_CONFIG_JSON); from_dict() merges it with
these defaults. Instances are frozen and safe to share between calls.
"""

import json
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..utils.text import normalize_string
from .task import Impact

DEFAULT_TAGS: Tuple[str, ...] = (
    "Travel and mobility",
    "Social and dining",
    "Health and Fitness",
    "Work and Career",
    "International Living",
    "Event Planning",
    "Wedding Planning",
    "Pregnancy and Baby",
    "Pet Care",
    "Relocation",
    "Entertainment",
)

DEFAULT_SEGMENTS: Tuple[str, ...] = ("Single", "Couple", "Parents")

DEFAULT_TAG_PRIORITY_MAPS: Dict[str, Dict[str, int]] = {
    "Single": {
        "travel and mobility": 1,
        "social and dining": 2,
        "work and career": 3,
        "health and fitness": 4,
        "entertainment": 5,
        "international living": 6,
        "relocation": 7,
        "event planning": 8,
        "pet care": 9,
        "wedding planning": 10,
        "pregnancy and baby": 11,
    },
    "Couple": {
        "wedding planning": 1,
        "travel and mobility": 2,
        "social and dining": 3,
        "event planning": 4,
        "relocation": 5,
        "health and fitness": 6,
        "entertainment": 7,
        "international living": 8,
        "work and career": 9,
        "pet care": 10,
        "pregnancy and baby": 11,
    },
    "Parents": {
        "pregnancy and baby": 1,
        "health and fitness": 2,
        "event planning": 3,
        "relocation": 4,
        "pet care": 5,
        "travel and mobility": 6,
        "social and dining": 7,
        "entertainment": 8,
        "work and career": 9,
        "international living": 10,
        "wedding planning": 11,
    },
}

DEFAULT_CATEGORY_POPULAR_TASKS: Dict[str, str] = {
    "travel and mobility": "Book a flight",
    "social and dining": "Reserve a restaurant table",
    "health and fitness": "Book a gym class",
    "work and career": "Update your CV",
    "international living": "Apply for a visa",
    "event planning": "Book an event venue",
    "wedding planning": "Find a wedding venue",
    "pregnancy and baby": "Book a prenatal appointment",
    "pet care": "Book a vet appointment",
    "relocation": "Hire movers",
    "entertainment": "Buy concert tickets",
}

DEFAULT_IMPACT_ORDER: Dict[Impact, int] = {
    Impact.HIGH: 0,
    Impact.MEDIUM: 1,
    Impact.LOW: 2,
}


class RankingConfig(BaseModel):
    """Static lookup tables and limits for the ranking engine."""

    model_config = ConfigDict(frozen=True)

    # -------------------------------------------------------------------------
    # Vocabulary
    # -------------------------------------------------------------------------

    # Universe of known category tags, in declaration order.
    # Declaration order breaks ties during category expansion.
    tags: Tuple[str, ...] = DEFAULT_TAGS

    # Recognised user life-status segments.
    segments: Tuple[str, ...] = DEFAULT_SEGMENTS

    # -------------------------------------------------------------------------
    # Lookup tables (keys normalized on load)
    # -------------------------------------------------------------------------

    # segment -> {category -> rank}; lower rank = more important.
    tag_priority_maps: Dict[str, Dict[str, int]] = Field(
        default_factory=lambda: {k: dict(v) for k, v in DEFAULT_TAG_PRIORITY_MAPS.items()},
        validate_default=True,
    )

    # category -> title of the signature task for that category.
    category_popular_tasks: Dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_CATEGORY_POPULAR_TASKS),
        validate_default=True,
    )

    # Impact -> ordinal; lower ordinal sorts first.
    impact_order: Dict[Impact, int] = Field(
        default_factory=lambda: dict(DEFAULT_IMPACT_ORDER)
    )

    # -------------------------------------------------------------------------
    # Limits
    # -------------------------------------------------------------------------

    # Rank given to categories absent from a segment's priority map.
    default_priority: int = 999

    # Max tasks returned when categories are selected (hero path).
    max_results: int = Field(default=15, ge=1)

    # High-impact slots directly after the hero (positions 2-5).
    top_slots: int = Field(default=4, ge=0)

    # Length of an expanded category list, primary included.
    expansion_size: int = Field(default=5, ge=1)

    @field_validator("tag_priority_maps", mode="before")
    @classmethod
    def _normalize_priority_keys(cls, value: Any) -> Any:
        if not isinstance(value, Mapping):
            return value
        return {
            normalize_string(segment): {
                normalize_string(tag): rank for tag, rank in (tag_map or {}).items()
            }
            for segment, tag_map in value.items()
        }

    @field_validator("category_popular_tasks", mode="before")
    @classmethod
    def _normalize_popular_keys(cls, value: Any) -> Any:
        if not isinstance(value, Mapping):
            return value
        return {normalize_string(tag): title for tag, title in value.items()}

    @model_validator(mode="after")
    def impact_order_is_complete(self):
        missing = [i.value for i in Impact if i not in self.impact_order]
        if missing:
            raise ValueError(f"impact_order is missing: {missing}")
        return self

    def has_segment(self, segment: Optional[str]) -> bool:
        """True if a priority map is registered for this segment."""
        return normalize_string(segment) in self.tag_priority_maps

    def priority_map(self, segment: Optional[str]) -> Dict[str, int]:
        """Priority map for a segment; empty when the segment is unknown."""
        return self.tag_priority_maps.get(normalize_string(segment), {})

    def priority_of(self, priority_map: Mapping[str, int], tag: Optional[str]) -> int:
        """Rank of a tag in a priority map, default_priority when absent."""
        return priority_map.get(normalize_string(tag), self.default_priority)

    def impact_rank(self, impact: Impact) -> int:
        """Ordinal of an impact level."""
        return self.impact_order.get(impact, len(self.impact_order))

    def popular_task_for(self, tag: Optional[str]) -> Optional[str]:
        """Designated popular task title for a category, if any."""
        return self.category_popular_tasks.get(normalize_string(tag))

    @classmethod
    def from_dict(cls, config_dict: Dict) -> "RankingConfig":
        """Create config from dictionary (e.g., loaded from JSON)."""
        flat = dict(config_dict)
        limits = flat.pop("limits", None)
        if isinstance(limits, dict):
            flat.update(limits)
        allowed = set(cls.model_fields)
        filtered = {k: v for k, v in flat.items() if k in allowed}
        return cls.model_validate(filtered)

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> "RankingConfig":
        """Load config overrides from a JSON file."""
        with open(path, encoding="utf-8") as f:
            return cls.from_dict(json.load(f))


DEFAULT_CONFIG = RankingConfig()


def resolve_config(config: Optional["RankingConfig"]) -> "RankingConfig":
    """Return config or DEFAULT_CONFIG when none is provided."""
    return config if config is not None else DEFAULT_CONFIG
