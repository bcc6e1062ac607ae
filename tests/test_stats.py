"""Tests for run summaries and the JSON stats report."""

import json
import os

from log_to_gor.models import ConversionStats, stats_to_dict
from log_to_gor.stats import format_summary, save_stats


def _stats() -> ConversionStats:
    return ConversionStats(
        total_lines=11,
        blank_lines=1,
        converted=8,
        skipped_malformed=2,
        skipped_id_errors=0,
        missing_timestamps=1,
    )


def test_skipped_total():
    stats = _stats()
    stats.skipped_id_errors = 3
    assert stats.skipped == 5


def test_stats_to_dict():
    data = stats_to_dict(_stats())
    assert data["converted"] == 8
    assert data["skipped"] == 2
    assert data["missing_timestamps"] == 1


def test_format_summary():
    summary = format_summary(_stats())
    assert "lines=11" in summary
    assert "converted=8" in summary
    assert "malformed=2" in summary
    assert "no_timestamp=1" in summary


def test_save_stats(tmp_path):
    path = tmp_path / "reports" / "stats.json"
    save_stats(_stats(), str(path), "access.log", "requests.gor")
    data = json.loads(path.read_text())
    assert data["converted"] == 8
    assert data["input_file"] == "access.log"
    assert data["output_file"] == "requests.gor"
    assert "finished_at" in data


def test_save_stats_replaces_previous(tmp_path):
    path = tmp_path / "stats.json"
    path.write_text("{}")
    save_stats(_stats(), str(path), "a.log", "a.gor")
    assert json.loads(path.read_text())["total_lines"] == 11
    assert [p for p in os.listdir(tmp_path) if p.endswith(".tmp")] == []
