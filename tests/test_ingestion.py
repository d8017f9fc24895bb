"""
Ingestion Tests

CSV rows -> Task records: defaults for missing cells, alias normalization,
configurable fallbacks, image lookup, and failure -> empty list.
"""

import logging
from pathlib import Path

import pytest

from taskrank.ingestion import (
    IngestionConfig,
    find_image_for_task,
    load_tasks_from_csv,
    normalize_impact,
    normalize_segment,
    normalize_tag,
    parse_task_rows,
)
from taskrank.models.task import Impact

HEADER = "Tasks,Time(in hrs),Tags,Impact,Status categories\n"


def _write_csv(tmp_path, body):
    path = tmp_path / "tasks.csv"
    path.write_text(HEADER + body, encoding="utf-8")
    return path


class TestNormalize:

    @pytest.mark.parametrize("raw, expected", [
        ("parent", "Parents"),
        (" Parents ", "Parents"),
        ("COUPLE", "Couple"),
        ("single", "Single"),
    ])
    def test_segment_aliases(self, raw, expected):
        assert normalize_segment(raw) == expected

    def test_unknown_segment_uses_fallback_and_logs(self, caplog):
        with caplog.at_level(logging.WARNING, logger="taskrank.ingestion.normalize"):
            assert normalize_segment("Retired") == "Single"
        assert "Retired" in caplog.text

    def test_unknown_segment_dropped_without_fallback(self):
        cfg = IngestionConfig(fallback_segment=None)
        assert normalize_segment("Retired", cfg) is None

    def test_blank_segment_uses_fallback(self):
        assert normalize_segment("  ") == "Single"
        assert normalize_segment("  ", IngestionConfig(fallback_segment=None)) is None
        assert normalize_segment(None) is None

    def test_blank_tag_uses_fallback(self):
        assert normalize_tag("") == "Health and Fitness"
        assert normalize_tag("", IngestionConfig(fallback_tag=None)) is None
        assert normalize_tag(None) is None

    def test_tag_aliases_and_fallback(self):
        assert normalize_tag("pet care") == "Pet Care"
        assert normalize_tag(" TRAVEL AND MOBILITY ") == "Travel and mobility"
        assert normalize_tag("Gardening") == "Health and Fitness"
        assert normalize_tag("Gardening", IngestionConfig(fallback_tag=None)) is None

    @pytest.mark.parametrize("raw, expected", [
        ("High", Impact.HIGH),
        (" medium ", Impact.MEDIUM),
        ("low", Impact.LOW),
        ("", Impact.LOW),
        (None, Impact.LOW),
        ("Critical", Impact.LOW),
    ])
    def test_impact(self, raw, expected):
        assert normalize_impact(raw) is expected

    def test_image_lookup_is_case_insensitive(self):
        cfg = IngestionConfig(image_map={"Book a flight": "/img/flight.jpg"}, default_image="/img/default.jpg")
        assert find_image_for_task("  BOOK A FLIGHT", cfg) == "/img/flight.jpg"
        assert find_image_for_task("Book a flight now", cfg) == "/img/default.jpg"


class TestParseRows:

    def test_row_mapping(self):
        rows = [{
            "Tasks": " Book a flight ",
            "Time(in hrs)": "1.5 hours",
            "Tags": "travel and mobility, Entertainment",
            "Impact": "high",
            "Status categories": "single, parent, parents",
        }]
        [task] = parse_task_rows(rows)

        assert task.id == "task-1"
        assert task.title == "Book a flight"
        assert task.time == "1 hr 30 mins"
        assert task.duration_minutes == 90
        assert task.impact is Impact.HIGH
        assert task.categories == ("Travel and mobility",)
        assert task.segments == ("Single", "Parents")
        assert task.image == "/images/book-flight.jpg"

    def test_missing_cells_get_defaults(self):
        [task] = parse_task_rows([{"Tasks": "", "Time(in hrs)": "soon", "Impact": None}])

        assert task.title == "Untitled Task"
        assert task.impact is Impact.LOW
        assert task.categories == ()
        assert task.segments == ()
        assert task.time == "0 mins"


class TestLoadTasksFromCsv:

    def test_loads_file(self, tmp_path):
        path = _write_csv(
            tmp_path,
            'Book a flight,1 hour,"Travel and mobility, Entertainment",High,"Single, Couple"\n'
            ",,,,\n"
            "Hire movers,2,Relocation,Medium,Parents\n",
        )
        tasks = load_tasks_from_csv(path)

        assert [t.id for t in tasks] == ["task-1", "task-2"]
        assert [t.title for t in tasks] == ["Book a flight", "Hire movers"]
        assert tasks[1].categories == ("Relocation",)
        assert tasks[1].time == "2 hrs"

    def test_fallback_is_configurable(self, tmp_path):
        path = _write_csv(tmp_path, "Plant tomatoes,1,Gardening,Low,Retired\n")

        [coerced] = load_tasks_from_csv(path)
        [dropped] = load_tasks_from_csv(
            path, IngestionConfig(fallback_tag=None, fallback_segment=None)
        )

        assert coerced.categories == ("Health and Fitness",)
        assert coerced.segments == ("Single",)
        assert dropped.categories == ()
        assert dropped.segments == ()

    def test_empty_list_cells_use_fallback(self, tmp_path):
        path = _write_csv(tmp_path, "Do something,1,,High,\n")

        [coerced] = load_tasks_from_csv(path)
        [dropped] = load_tasks_from_csv(
            path, IngestionConfig(fallback_tag=None, fallback_segment=None)
        )

        assert coerced.categories == ("Health and Fitness",)
        assert coerced.segments == ("Single",)
        assert dropped.categories == ()
        assert dropped.segments == ()

    def test_missing_file_returns_empty(self, tmp_path, caplog):
        with caplog.at_level(logging.ERROR, logger="taskrank.ingestion.csv_loader"):
            assert load_tasks_from_csv(tmp_path / "absent.csv") == []
        assert "absent.csv" in caplog.text

    def test_header_only_returns_empty(self, tmp_path):
        assert load_tasks_from_csv(_write_csv(tmp_path, "")) == []

    def test_sample_sheet_loads(self):
        sample = Path(__file__).resolve().parent.parent / "data" / "tasks.csv"
        tasks = load_tasks_from_csv(sample)

        assert len(tasks) == 14
        assert len({t.id for t in tasks}) == 14
