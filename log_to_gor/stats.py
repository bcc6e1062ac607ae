"""Run summary — human-readable line and atomic JSON report."""

import json
import os
import tempfile
from datetime import datetime, timezone

from log_to_gor.models import ConversionStats, stats_to_dict


def format_summary(stats: ConversionStats) -> str:
    return (
        f"lines={stats.total_lines} converted={stats.converted} "
        f"blank={stats.blank_lines} malformed={stats.skipped_malformed} "
        f"id_errors={stats.skipped_id_errors} no_timestamp={stats.missing_timestamps}"
    )


def save_stats(stats: ConversionStats, path: str, input_file: str, output_file: str):
    """Write the run's stats to *path* as JSON, replacing any previous report atomically."""
    report = stats_to_dict(stats)
    report["input_file"] = input_file
    report["output_file"] = output_file
    report["finished_at"] = datetime.now(timezone.utc).isoformat()

    target_dir = os.path.dirname(os.path.abspath(path))
    os.makedirs(target_dir, exist_ok=True)
    tmp_fd, tmp_path = tempfile.mkstemp(dir=target_dir, suffix=".tmp")
    try:
        with os.fdopen(tmp_fd, "w", encoding="utf-8") as f:
            json.dump(report, f, indent=2)
            f.write("\n")
        os.replace(tmp_path, path)
    except Exception:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise
