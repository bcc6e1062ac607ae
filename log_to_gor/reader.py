"""Generator-based line reading with I/O errors surfaced as InputReadError."""

from typing import Generator, Iterable

from log_to_gor.errors import InputReadError


def _strip_terminator(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def read_lines(stream: Iterable[str]) -> Generator[str, None, None]:
    """Yield each line of *stream* without its line terminator.

    Raises:
        InputReadError: If the stream fails while reading or decoding.
    """
    lines = iter(stream)
    while True:
        try:
            line = next(lines)
        except StopIteration:
            return
        except (OSError, ValueError) as exc:
            raise InputReadError(f"error reading input file: {exc}") from exc
        yield _strip_terminator(line)
