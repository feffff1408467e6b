"""
Tests for demo data generation.
"""

import pytest

from calendar_heatmap.demo import generate_demo_data


class TestGenerateDemoData:
    """Tests for generate_demo_data."""

    def test_covers_every_day_of_range(self):
        data = generate_demo_data("2025-01", "2025-03", seed=1)

        # 31 + 28 + 31
        assert len(data) == 90
        assert data[0]["date"] == "2025-01-01"
        assert data[-1]["date"] == "2025-03-31"

    def test_december_end(self):
        data = generate_demo_data("2025-12", "2025-12", seed=1)

        assert data[-1]["date"] == "2025-12-31"

    def test_values_within_bounds(self):
        data = generate_demo_data("2025-01", "2025-01", max_value=10, seed=3)

        assert all(0 <= entry["value"] <= 10 for entry in data)

    def test_seed_is_reproducible(self):
        assert generate_demo_data("2025-01", "2025-02", seed=42) == generate_demo_data(
            "2025-01", "2025-02", seed=42
        )

    def test_end_before_start_is_empty(self):
        assert generate_demo_data("2025-05", "2025-01") == []

    def test_invalid_month_raises(self):
        with pytest.raises(ValueError):
            generate_demo_data("2025-1x", "2025-02")
