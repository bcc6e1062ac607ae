"""Tests for request identifier generation."""

import re

import pytest

from log_to_gor.request_id import REQUEST_ID_BYTES, RequestIDError, generate_request_id

HEX24 = re.compile(r"^[0-9a-f]{24}$")


def test_default_source_format():
    assert HEX24.match(generate_request_id())


def test_no_collisions():
    ids = {generate_request_id() for _ in range(1000)}
    assert len(ids) == 1000


def test_injected_source_is_deterministic():
    source = lambda n: bytes(range(n))
    assert generate_request_id(source) == "000102030405060708090a0b"


def test_requests_twelve_bytes():
    seen = []

    def source(n):
        seen.append(n)
        return b"\xff" * n

    assert generate_request_id(source) == "ff" * REQUEST_ID_BYTES
    assert seen == [12]


def test_failing_source_raises():
    def source(n):
        raise OSError("no entropy")

    with pytest.raises(RequestIDError, match="no entropy"):
        generate_request_id(source)


def test_unsupported_source_raises():
    def source(n):
        raise NotImplementedError

    with pytest.raises(RequestIDError):
        generate_request_id(source)


def test_short_read_raises():
    with pytest.raises(RequestIDError, match="4 bytes"):
        generate_request_id(lambda n: b"\x00" * 4)
