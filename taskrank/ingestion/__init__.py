"""
Task ingestion package.

Responsibilities:
- Read the task sheet (CSV) into rows.
- Normalize tags, segments, impact, durations and images.
- Hand the ranking engine a resolved list of Task records (empty on failure).
"""

from .config import DEFAULT_INGESTION_CONFIG, IngestionConfig
from .csv_loader import load_tasks_from_csv, parse_task_rows
from .normalize import find_image_for_task, normalize_impact, normalize_segment, normalize_tag

__all__ = [
    "DEFAULT_INGESTION_CONFIG",
    "IngestionConfig",
    "load_tasks_from_csv",
    "parse_task_rows",
    "find_image_for_task",
    "normalize_impact",
    "normalize_segment",
    "normalize_tag",
]
