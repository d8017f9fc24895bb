"""
Task model — typed, immutable representation of a recommendable task.

Used by every ranking stage instead of raw dicts. Built from dataset/CSV rows
via Task.model_validate(d) or ensure_tasks(). Records are frozen: stages that
derive per-invocation fields (expanded categories, featured flag, priority
score) work on copies made with model_copy(update=...).
"""

import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, field_validator

logger = logging.getLogger(__name__)

# Per-invocation fields cleared before ranking
TRANSIENT_RESET: Dict[str, Any] = {"is_featured": None, "priority_score": None}


class Impact(str, Enum):
    """Impact level of a task. Ordering comes from RankingConfig.impact_order."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @classmethod
    def parse(cls, value: Any) -> Optional["Impact"]:
        """Case/whitespace-insensitive lookup; None when nothing matches."""
        if isinstance(value, cls):
            return value
        if value is None:
            return None
        wanted = str(value).strip().lower()
        for member in cls:
            if member.value.lower() == wanted:
                return member
        return None


class Task(BaseModel):
    """
    A task record as consumed by the ranking engine.

    categories[0] is the primary category assigned at ingestion; ranking may
    append derived categories on a copy. is_featured and priority_score are
    transient and only set on records returned from one ranking call.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    impact: Impact = Impact.LOW
    categories: Tuple[str, ...] = ()
    segments: Tuple[str, ...] = ()
    duration_minutes: int = 0
    time: str = ""
    image: str = ""
    is_featured: Optional[bool] = None
    priority_score: Optional[int] = None

    @field_validator("impact", mode="before")
    @classmethod
    def _parse_impact(cls, value: Any) -> Impact:
        parsed = Impact.parse(value)
        if parsed is None:
            logger.warning("Unrecognised impact %r defaulted to %s", value, Impact.LOW.value)
            return Impact.LOW
        return parsed

    @field_validator("categories", "segments", mode="before")
    @classmethod
    def _drop_empty(cls, value: Any) -> Any:
        if value is None:
            return ()
        if isinstance(value, str):
            value = [value]
        return tuple(v for v in value if v is not None and str(v).strip())

    @property
    def primary_category(self) -> Optional[str]:
        """Primary (first) category, or None for uncategorised tasks."""
        return self.categories[0] if self.categories else None

    def without_transient(self) -> "Task":
        """Copy with is_featured and priority_score cleared."""
        if self.is_featured is None and self.priority_score is None:
            return self
        return self.model_copy(update=TRANSIENT_RESET)


def ensure_tasks(items: List[Union[Dict[str, Any], "Task"]]) -> List["Task"]:
    """Convert list of dicts or Tasks to list of Task models for the pipeline."""
    return [
        Task.model_validate(t) if isinstance(t, dict) else t
        for t in items
    ]
