"""Regex-based field extraction from Apache Combined Log Format lines.

Only two fields feed a replay record:
  1. The quoted request line  "GET /path HTTP/1.1"  (required)
  2. The bracketed timestamp  [10/Oct/2000:13:55:36 -0700]  (optional)

A line without a request line is rejected; a line without a usable timestamp
is kept with a zero timestamp.
"""

import re
from datetime import datetime, timezone

from log_to_gor.models import HTTP_METHODS

# ---------------------------------------------------------------------------
# Compiled regex patterns
# ---------------------------------------------------------------------------

REQUEST_LINE_RE = re.compile(
    r'"(' + "|".join(HTTP_METHODS) + r') ([^ ]+) ([^"]+)"',
    re.ASCII,
)

TIMESTAMP_RE = re.compile(
    r'\[(\d{2}/\w{3}/\d{4}:\d{2}:\d{2}:\d{2}) [^\]]+\]',
    re.ASCII,
)

# %h %l %u %t "%r" %>s %b "%{Referer}i" "%{User-Agent}i"
COMBINED_LOG_RE = re.compile(
    r'^(?P<host>\S+) (?P<ident>\S+) (?P<user>\S+) '
    r'\[(?P<time>[^\]]+)\] '
    r'"(?P<request>(?:[^"\\]|\\.)*)" '
    r'(?P<status>\d{3}|-) '
    r'(?P<size>\d+|-) '
    r'"(?P<referer>(?:[^"\\]|\\.)*)" '
    r'"(?P<user_agent>(?:[^"\\]|\\.)*)"$'
)

APACHE_TIME_FORMAT = "%d/%b/%Y:%H:%M:%S"
NANOS_PER_SECOND = 1_000_000_000

# ---------------------------------------------------------------------------
# Extractors
# ---------------------------------------------------------------------------


def extract_request_line(line: str) -> tuple[str, str, str] | None:
    """Find the quoted request line → (method, path, protocol), or None."""
    m = REQUEST_LINE_RE.search(line)
    if not m:
        return None
    return m.group(1), m.group(2), m.group(3)


def extract_timestamp_nanos(line: str) -> int:
    """Return the bracketed timestamp as epoch nanoseconds, or 0 if absent/invalid.

    The UTC offset inside the brackets is ignored and the wall-clock value is
    read as UTC, so logs written with a non-zero offset are shifted by it.
    """
    m = TIMESTAMP_RE.search(line)
    if not m:
        return 0
    try:
        dt = datetime.strptime(m.group(1), APACHE_TIME_FORMAT)
    except ValueError:
        return 0
    return int(dt.replace(tzinfo=timezone.utc).timestamp()) * NANOS_PER_SECOND


def is_combined_log_line(line: str) -> bool:
    """True if the whole line has the Combined Log Format shape."""
    return COMBINED_LOG_RE.match(line) is not None
