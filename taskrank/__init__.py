"""
Task recommendation ranking engine

Single entry point for the taskrank package:
- models/: RankingConfig, Task, Impact, priority scoring helpers
- stages/: category expansion, candidate pool, browse and hero ranking, orchestrator
- ingestion/: CSV task loading and field normalization
"""

from .ingestion import IngestionConfig, load_tasks_from_csv
from .models.config import DEFAULT_CONFIG, RankingConfig, resolve_config
from .models.task import Impact, Task, ensure_tasks
from .stages.category_expansion import expand_categories
from .stages.orchestrator import get_top_tasks

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_CONFIG",
    "Impact",
    "IngestionConfig",
    "RankingConfig",
    "Task",
    "ensure_tasks",
    "expand_categories",
    "get_top_tasks",
    "load_tasks_from_csv",
    "resolve_config",
]
