"""Line-by-line conversion of Combined Log Format entries into GoReplay records."""

import logging
import os
from typing import Iterable, TextIO

from log_to_gor.errors import ConversionError
from log_to_gor.extractor import (
    extract_request_line,
    extract_timestamp_nanos,
    is_combined_log_line,
)
from log_to_gor.models import ConversionStats, ParsedRequest
from log_to_gor.reader import read_lines
from log_to_gor.request_id import RandomSource, RequestIDError, generate_request_id
from log_to_gor.serializer import write_record

logger = logging.getLogger(__name__)


class LogRecordConverter:
    """Converts access-log lines to replay records in a single streaming pass.

    Malformed lines are logged and skipped. Only stream failures abort a run:
    they raise a ConversionError subclass whose ``count`` is the number of
    records already written.
    """

    def __init__(self, random_source: RandomSource = os.urandom, strict: bool = False):
        self._random_source = random_source
        self._strict = strict
        self.stats = ConversionStats()

    def parse(self, line: str) -> ParsedRequest | None:
        """Build a ParsedRequest from one non-empty line, or None if it must be skipped."""
        if self._strict and not is_combined_log_line(line):
            logger.warning("Skipping line not in Combined Log Format: %s", line)
            self.stats.skipped_malformed += 1
            return None

        request = extract_request_line(line)
        if request is None:
            logger.warning("Skipping malformed line: %s", line)
            self.stats.skipped_malformed += 1
            return None
        method, path, protocol = request

        timestamp_nanos = extract_timestamp_nanos(line)
        if timestamp_nanos == 0:
            logger.debug("No usable timestamp, using 0: %s", line)
            self.stats.missing_timestamps += 1

        try:
            request_id = generate_request_id(self._random_source)
        except RequestIDError as exc:
            logger.warning("Skipping line due to ID generation error: %s", exc)
            self.stats.skipped_id_errors += 1
            return None

        return ParsedRequest(
            method=method,
            path=path,
            protocol=protocol,
            request_id=request_id,
            timestamp_nanos=timestamp_nanos,
        )

    def convert(self, source: Iterable[str], sink: TextIO) -> int:
        """Convert every line of *source* and write the records to *sink*.

        Returns the number of records written.

        Raises:
            InputReadError: If *source* fails mid-read.
            OutputWriteError: If any segment of a record cannot be written.
        """
        self.stats = ConversionStats()
        count = 0
        try:
            for line in read_lines(source):
                self.stats.total_lines += 1
                if line == "":
                    self.stats.blank_lines += 1
                    continue

                req = self.parse(line)
                if req is None:
                    continue

                write_record(sink, req)
                count += 1
                self.stats.converted = count
        except ConversionError as exc:
            exc.count = count
            raise
        return count
