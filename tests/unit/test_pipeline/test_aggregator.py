"""
Unit tests for averaging grouped metrics and deriving percentages.
"""

import pytest

from mesostasks.pipeline import average_metrics


@pytest.mark.unit
class TestAverageMetrics:
    """Test cases for average_metrics."""

    def test_empty_groups(self):
        assert average_metrics({}) == {}

    def test_average_across_instances(self):
        result = average_metrics({"a": [{"mem_rss_bytes": 100.0}, {"mem_rss_bytes": 300.0}]})
        assert result == {"a": {"mem_rss_bytes": 200.0, "instances": 2.0}}

    def test_partial_field_counts_missing_as_zero(self):
        result = average_metrics({"b": [{"cpus_limit": 10.0}, {}]})
        assert result["b"]["cpus_limit"] == 5.0
        assert result["b"]["instances"] == 2.0

    def test_metric_absent_everywhere_is_omitted(self):
        result = average_metrics({"c": [{}, {}, {}]})
        assert result == {"c": {"instances": 3.0}}

    def test_mem_perc(self):
        result = average_metrics({"a": [{"mem_rss_bytes": 50.0, "mem_limit_bytes": 200.0}]})
        assert result["a"]["mem_perc"] == pytest.approx(25.0)

    def test_disk_perc(self):
        result = average_metrics({"a": [{"disk_used_bytes": 1.0, "disk_limit_bytes": 4.0}]})
        assert result["a"]["disk_perc"] == pytest.approx(25.0)

    def test_zero_denominator_guard(self):
        result = average_metrics({"a": [{"disk_used_bytes": 50.0, "disk_limit_bytes": 0.0}]})
        assert "disk_perc" not in result["a"]
        assert result["a"]["disk_limit_bytes"] == 0.0

    def test_percentage_requires_both_fields(self):
        result = average_metrics({
            "rss_only": [{"mem_rss_bytes": 10.0}],
            "limit_only": [{"mem_limit_bytes": 10.0}],
        })
        assert "mem_perc" not in result["rss_only"]
        assert "mem_perc" not in result["limit_only"]

    def test_percentage_uses_averaged_values(self):
        result = average_metrics({
            "a": [
                {"mem_rss_bytes": 100.0, "mem_limit_bytes": 400.0},
                {"mem_limit_bytes": 400.0},
            ]
        })
        # rss averages to 50 over two instances, limit stays 400
        assert result["a"]["mem_perc"] == pytest.approx(12.5)

    def test_groups_are_independent(self):
        result = average_metrics({
            "a": [{"cpus_limit": 1.0}],
            "b": [{"cpus_limit": 3.0}, {"cpus_limit": 5.0}],
        })
        assert result["a"] == {"cpus_limit": 1.0, "instances": 1.0}
        assert result["b"] == {"cpus_limit": 4.0, "instances": 2.0}
