"""Shared fixtures: small ranking configs and a task factory."""

import pytest

from taskrank.models.config import RankingConfig
from taskrank.models.task import Task
from taskrank.settings import reset_settings

TEST_TAGS = ("Travel", "Social", "Health", "Work", "Pets", "Money")

TEST_PRIORITY_MAPS = {
    "Single": {"travel": 1, "social": 2, "health": 3, "work": 4, "pets": 5},
    "Couple": {"social": 1, "travel": 2, "money": 3},
}

TEST_POPULAR_TASKS = {
    "Travel": "Book flight",
    "Social": "Plan date night",
    "Health": "Join a gym",
    "Pets": "Walk dog",
}


@pytest.fixture
def config():
    """Small config; categories expand to 5 as in production."""
    return RankingConfig(
        tags=TEST_TAGS,
        tag_priority_maps=TEST_PRIORITY_MAPS,
        category_popular_tasks=TEST_POPULAR_TASKS,
    )


@pytest.fixture
def flat_config():
    """Same tables, but expansion keeps only the primary category."""
    return RankingConfig(
        tags=TEST_TAGS,
        tag_priority_maps=TEST_PRIORITY_MAPS,
        category_popular_tasks=TEST_POPULAR_TASKS,
        expansion_size=1,
    )


@pytest.fixture
def make_task():
    """Factory: make_task("t1", "Book flight", "High", ["Travel"], ["Single"])."""
    def _make(task_id, title, impact="Low", categories=(), segments=("Single",)):
        return Task(
            id=task_id,
            title=title,
            impact=impact,
            categories=tuple(categories),
            segments=tuple(segments),
        )
    return _make


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from TASKRANK_* variables and the cached settings."""
    for key in ("TASKRANK_TASKS_CSV", "TASKRANK_CONFIG_JSON", "TASKRANK_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    reset_settings()
    yield
    reset_settings()
