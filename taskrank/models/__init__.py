"""Data models for the ranking engine."""

from .config import DEFAULT_CONFIG, RankingConfig, resolve_config
from .scoring import priority_score, relevant_priority_score
from .task import Impact, Task, ensure_tasks

__all__ = [
    "DEFAULT_CONFIG",
    "Impact",
    "RankingConfig",
    "Task",
    "ensure_tasks",
    "priority_score",
    "relevant_priority_score",
    "resolve_config",
]
