"""
Category Expansion Tests

A primary category is widened with the segment's highest-priority categories.

Priority (Single): Travel 1, Social 2, Health 3, Work 4, Pets 5, Money -> 999
Priority (Couple): Social 1, Travel 2, Money 3, everything else -> 999
"""

from taskrank.models.config import RankingConfig
from taskrank.stages.category_expansion import expand_categories, with_expanded_categories


class TestExpandCategories:
    """expand_categories(primary, segment, config)."""

    def test_appends_top_four_by_priority(self, config):
        assert expand_categories("Health", "Single", config) == [
            "Health", "Travel", "Social", "Work", "Pets",
        ]

    def test_unranked_primary_keeps_first_position(self, config):
        assert expand_categories("Money", "Single", config) == [
            "Money", "Travel", "Social", "Health", "Work",
        ]

    def test_ties_keep_declaration_order(self, config):
        # Health, Work, Pets all default to 999 for Couple
        assert expand_categories("Health", "Couple", config) == [
            "Health", "Social", "Travel", "Money", "Work",
        ]

    def test_primary_excluded_case_insensitively(self, config):
        result = expand_categories(" travel ", "Single", config)
        assert result == [" travel ", "Social", "Health", "Work", "Pets"]

    def test_segment_lookup_is_case_insensitive(self, config):
        assert expand_categories("Health", " single ", config) == expand_categories(
            "Health", "Single", config
        )

    def test_empty_primary_returns_empty(self, config):
        assert expand_categories("", "Single", config) == []
        assert expand_categories(None, "Single", config) == []
        assert expand_categories("   ", "Single", config) == []

    def test_unknown_segment_returns_primary_only(self, config):
        assert expand_categories("Travel", "Astronaut", config) == ["Travel"]
        assert expand_categories("Travel", None, config) == ["Travel"]

    def test_expansion_size_is_configurable(self):
        cfg = RankingConfig(
            tags=("A", "B", "C"),
            tag_priority_maps={"Single": {"a": 1, "b": 2, "c": 3}},
            expansion_size=2,
        )
        assert expand_categories("C", "Single", cfg) == ["C", "A"]

    def test_default_config_expands_to_five(self):
        result = expand_categories("Relocation", "Parents")
        assert len(result) == 5
        assert result[0] == "Relocation"
        assert "Relocation" not in result[1:]


class TestWithExpandedCategories:
    """Per-invocation copies with expanded categories."""

    def test_returns_copies_and_keeps_input(self, config, make_task):
        task = make_task("t1", "Join a gym", "High", ["Health"])
        [expanded] = with_expanded_categories([task], "Single", config)

        assert expanded is not task
        assert expanded.categories[0] == "Health"
        assert len(expanded.categories) == 5
        assert task.categories == ("Health",)

    def test_uncategorised_task_passes_through(self, config, make_task):
        task = make_task("t1", "Mystery", "High", [])
        assert with_expanded_categories([task], "Single", config) == [task]
