"""Parsed request and per-run conversion statistics."""

from dataclasses import asdict, dataclass
from typing import Any

HTTP_METHODS = ("GET", "POST", "PUT", "DELETE", "HEAD", "OPTIONS", "PATCH")


@dataclass(frozen=True)
class ParsedRequest:
    method: str
    path: str
    protocol: str
    request_id: str
    timestamp_nanos: int = 0  # 0 when the log line had no usable timestamp

    @property
    def request_line(self) -> str:
        return f"{self.method} {self.path} {self.protocol}"


@dataclass
class ConversionStats:
    total_lines: int = 0
    blank_lines: int = 0
    converted: int = 0
    skipped_malformed: int = 0
    skipped_id_errors: int = 0
    missing_timestamps: int = 0

    @property
    def skipped(self) -> int:
        return self.skipped_malformed + self.skipped_id_errors


def stats_to_dict(stats: ConversionStats) -> dict[str, Any]:
    """Convert stats to a plain dict, including the derived skip total."""
    data = asdict(stats)
    data["skipped"] = stats.skipped
    return data
