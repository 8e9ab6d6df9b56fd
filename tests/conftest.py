import typing

import pytest

SAMPLES: typing.List[bytes] = [
    b"",
    b"a",
    b"hello world " * 100,
    bytes(range(256)) * 16,
    '{"field1": "Привет", "field2": 42}'.encode(),
]


@pytest.fixture(params=SAMPLES, ids=["empty", "single", "repeated", "binary", "unicode"])
def raw_bytes(request) -> bytes:
    return request.param


@pytest.fixture
def compressible_bytes() -> bytes:
    return b"hello world " * 100
