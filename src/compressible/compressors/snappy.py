import logging

import cramjam

from compressible import errors

logger = logging.getLogger("compressible")


class SnappyCompressor:
    """
    Snappy compressor over the framing format.

    Every chunk of the frame carries a masked CRC-32C of its uncompressed data,
    so truncated or corrupted payloads are rejected on decompression.
    """

    def compress(self, value: bytes) -> bytes:
        try:
            return bytes(cramjam.snappy.compress(value))
        except cramjam.CompressionError as error:
            logger.error(f"Error while compressing value with snappy: {error}")
            raise errors.CompressionError(str(error)) from error

    def decompress(self, value: bytes) -> bytes:
        try:
            return bytes(cramjam.snappy.decompress(value))
        except cramjam.DecompressionError as error:
            logger.error(f"Error while decompressing snappy frame: {error}")
            raise errors.DecompressionError(str(error)) from error
