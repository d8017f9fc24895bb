"""
CSV task loader — turns a delimited task sheet into Task records.

Expected columns (names configurable in IngestionConfig):
    Tasks, Time(in hrs), Tags, Impact, Status categories

Only the primary (first) tag is stored on each record; the ranking engine
derives further categories per segment. Load failures are logged and resolve
to an empty list so callers always get zero or more valid records.
"""

import csv
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from ..models.task import Task
from ..utils.time import format_time, hours_to_minutes, parse_time_string
from .config import DEFAULT_INGESTION_CONFIG, IngestionConfig
from .normalize import find_image_for_task, normalize_impact, normalize_segment, normalize_tag

logger = logging.getLogger(__name__)


def _split(cell: Optional[str], separator: str) -> List[str]:
    """Split a list cell; a present but empty cell yields one blank entry."""
    if cell is None:
        return []
    return [part.strip() for part in cell.split(separator)]


def _is_blank_row(row: Dict[str, Optional[str]]) -> bool:
    return not any((v or "").strip() for v in row.values() if isinstance(v, str))


def _row_to_task(
    row: Dict[str, Optional[str]],
    index: int,
    config: IngestionConfig,
) -> Task:
    """Map one CSV row to a Task; index is the 0-based position among kept rows."""
    title = (row.get(config.title_column) or "").strip() or config.default_title
    hours = parse_time_string(row.get(config.time_column) or "")

    tags = [
        tag for tag in (
            normalize_tag(raw, config)
            for raw in _split(row.get(config.tags_column), config.list_separator)
        )
        if tag
    ]
    segments = []
    for raw in _split(row.get(config.segments_column), config.list_separator):
        segment = normalize_segment(raw, config)
        if segment and segment not in segments:
            segments.append(segment)

    return Task(
        id=f"{config.id_prefix}{index + 1}",
        title=title,
        time=format_time(hours),
        duration_minutes=hours_to_minutes(hours),
        impact=normalize_impact(row.get(config.impact_column), config),
        image=find_image_for_task(title, config),
        categories=tags[:1],
        segments=segments,
    )


def parse_task_rows(
    rows: Iterable[Dict[str, Optional[str]]],
    config: IngestionConfig = DEFAULT_INGESTION_CONFIG,
) -> List[Task]:
    """Convert csv.DictReader rows to Tasks, skipping blank rows."""
    kept = [row for row in rows if not _is_blank_row(row)]
    return [_row_to_task(row, i, config) for i, row in enumerate(kept)]


def load_tasks_from_csv(
    csv_path: Union[str, Path],
    config: IngestionConfig = DEFAULT_INGESTION_CONFIG,
) -> List[Task]:
    """
    Load and normalize tasks from a CSV file.

    Returns [] (and logs the error) when the file is missing or malformed.
    """
    try:
        with open(csv_path, "r", encoding="utf-8", errors="replace", newline="") as f:
            reader = csv.DictReader(f)
            tasks = parse_task_rows(reader, config)
    except (OSError, csv.Error, ValueError):
        logger.exception("Error loading tasks from %s", csv_path)
        return []
    logger.info("Loaded %d tasks from %s", len(tasks), csv_path)
    return tasks
