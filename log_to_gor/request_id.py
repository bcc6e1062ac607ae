"""Random request identifiers for replay records."""

import os
from typing import Callable

REQUEST_ID_BYTES = 12

RandomSource = Callable[[int], bytes]


class RequestIDError(Exception):
    """Raised when the random source cannot produce an identifier."""


def generate_request_id(random_source: RandomSource = os.urandom) -> str:
    """Read 12 bytes from *random_source* and return them as 24 lowercase hex chars.

    Raises:
        RequestIDError: If the source fails or returns the wrong number of bytes.
    """
    try:
        raw = random_source(REQUEST_ID_BYTES)
    except (OSError, NotImplementedError) as exc:
        raise RequestIDError(f"random source unavailable: {exc}") from exc

    if len(raw) != REQUEST_ID_BYTES:
        raise RequestIDError(
            f"random source returned {len(raw)} bytes, expected {REQUEST_ID_BYTES}"
        )
    return raw.hex()
