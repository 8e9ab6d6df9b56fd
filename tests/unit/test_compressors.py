import logging
import zlib

import pytest

import compressible
from compressible import compressors
from compressible.compressors import zlib as zlib_compressor

SNAPPY_STREAM_IDENTIFIER = b"\xff\x06\x00\x00sNaPpY"


@pytest.mark.parametrize(
    "compressor",
    [compressors.SnappyCompressor(), compressors.ZlibCompressor()],
    ids=["snappy", "zlib"],
)
def test_compressor_round_trip_positive(compressor: compressors.Compressor, raw_bytes: bytes):
    compressed = compressor.compress(raw_bytes)

    assert isinstance(compressed, bytes)
    assert compressor.decompress(compressed) == raw_bytes


def test_snappy_compressor_writes_framing_format(compressible_bytes: bytes):
    compressed = compressors.SnappyCompressor().compress(compressible_bytes)

    assert compressed.startswith(SNAPPY_STREAM_IDENTIFIER)
    assert len(compressed) < len(compressible_bytes)


def test_zlib_compressor_respects_level(compressible_bytes: bytes):
    fast = compressors.ZlibCompressor(level=0).compress(compressible_bytes)
    best = compressors.ZlibCompressor(level=9).compress(compressible_bytes)

    assert fast == zlib.compress(compressible_bytes, 0)
    assert len(best) < len(fast)
    assert compressors.ZlibCompressor().decompress(fast) == compressible_bytes


def test_zlib_compressor_default_level():
    assert zlib_compressor.ZLIB_COMPRESSION_LEVEL == zlib.Z_DEFAULT_COMPRESSION


def test_zlib_compressor_invalid_level_negative(compressible_bytes: bytes):
    with pytest.raises(compressible.CompressionError) as error:
        compressors.ZlibCompressor(level=42).compress(compressible_bytes)

    assert isinstance(error.value.__cause__, zlib.error)


@pytest.mark.parametrize(
    "compressor",
    [compressors.SnappyCompressor(), compressors.ZlibCompressor()],
    ids=["snappy", "zlib"],
)
def test_compressor_truncated_payload_negative(
    compressor: compressors.Compressor,
    compressible_bytes: bytes,
):
    compressed = compressor.compress(compressible_bytes)

    with pytest.raises(compressible.DecompressionError):
        compressor.decompress(compressed[:-1])


@pytest.mark.parametrize(
    "compressor",
    [compressors.SnappyCompressor(), compressors.ZlibCompressor()],
    ids=["snappy", "zlib"],
)
def test_compressor_flipped_byte_negative(
    compressor: compressors.Compressor,
    compressible_bytes: bytes,
):
    compressed = bytearray(compressor.compress(compressible_bytes))
    compressed[-1] ^= 0xFF

    with pytest.raises(compressible.DecompressionError):
        compressor.decompress(bytes(compressed))


@pytest.mark.parametrize(
    "compressor",
    [compressors.SnappyCompressor(), compressors.ZlibCompressor()],
    ids=["snappy", "zlib"],
)
def test_compressor_garbage_payload_negative(compressor: compressors.Compressor):
    with pytest.raises(compressible.DecompressionError) as error:
        compressor.decompress(b"definitely not a compressed payload")

    assert error.value.message
    assert str(error.value).startswith("Decompression error: ")
    assert error.value.__cause__ is not None


def test_decompression_error_is_logged(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.ERROR, logger="compressible"):
        with pytest.raises(compressible.DecompressionError):
            compressors.SnappyCompressor().decompress(b"garbage")

    assert any(record.name == "compressible" for record in caplog.records)


def test_compressor_is_shared_between_calls(compressible_bytes: bytes):
    compressor = compressors.SnappyCompressor()

    first = compressor.compress(compressible_bytes)
    second = compressor.compress(compressible_bytes)

    assert first == second
    assert compressor.decompress(first) == compressor.decompress(second)
