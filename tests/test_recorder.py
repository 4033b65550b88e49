"""Tests for engine.recorder."""

from engine import record


class TestRecord:
    def test_bubble_metrics(self):
        rec = record("bubble-sort", [64, 34, 25, 12, 22, 11, 90])
        m = rec.metrics
        assert m.algorithm_id == "bubble-sort"
        assert m.total_steps == 43
        assert m.comparisons == 21
        assert m.swaps == 14
        assert m.found_index is None
        assert m.terminal_action == "Complete"
        assert m.wall_time_ms >= 0

    def test_binary_metrics(self):
        m = record("binary-search", "23").metrics
        assert m.comparisons == 3
        assert m.swaps == 0
        assert m.found_index == 5
        assert m.terminal_action == "Found!"

    def test_export_payload(self):
        data = record("binary-search", [1, 3, 5], target=3).export()
        assert data["algorithm"] == "binary-search"
        assert data["name"] == "Binary Search"
        assert data["input"] == [1, 3, 5]
        assert data["target"] == 3
        assert data["stepCount"] == len(data["steps"])
        assert data["steps"][-1]["foundIndex"] == 1
        assert {n["id"] for n in data["flowchart"]["nodes"]} >= {"init", "mid", "found"}
        assert data["layout"]["width"] == 600
        assert data["metrics"]["total_steps"] == 3

    def test_export_without_target(self):
        data = record("foo-sort", "1, 2").export()
        assert "target" not in data
        assert data["stepCount"] == 3
        assert data["flowchart"]["nodes"][2]["label"] == "foo-sort"
