"""GoReplay record framing.

Each converted log entry becomes three consecutive writes:

  1 <request_id> <timestamp_nanos> <latency>\\n      header
  <METHOD> <PATH> <PROTOCOL>\\r\\n\\r\\n\\n           request, empty header block
  🐵🙈🙉\\n                                         payload delimiter

The payload type is always 1 (request) and latency is always 0.
"""

from typing import TextIO

from log_to_gor.errors import OutputWriteError
from log_to_gor.models import ParsedRequest

GOR_PAYLOAD_DELIMITER = "\U0001F435\U0001F648\U0001F649"

REQUEST_TYPE = "1"
LATENCY = 0


def format_header(req: ParsedRequest) -> str:
    return f"{REQUEST_TYPE} {req.request_id} {req.timestamp_nanos} {LATENCY}\n"


def format_request_segment(req: ParsedRequest) -> str:
    return f"{req.request_line}\r\n\r\n\n"


def format_delimiter() -> str:
    return f"{GOR_PAYLOAD_DELIMITER}\n"


def write_record(sink: TextIO, req: ParsedRequest) -> None:
    """Write one framed record to *sink*, segment by segment.

    Raises:
        OutputWriteError: Naming the segment whose write failed.
    """
    segments = (
        ("header", format_header(req)),
        ("request line", format_request_segment(req)),
        ("delimiter", format_delimiter()),
    )
    for name, text in segments:
        try:
            sink.write(text)
        except (OSError, ValueError) as exc:
            raise OutputWriteError(name, f"failed to write {name}: {exc}") from exc
