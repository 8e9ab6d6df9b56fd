import logging
import os
import zlib

import dotenv

from compressible import errors

dotenv.load_dotenv()

ZLIB_COMPRESSION_LEVEL = int(os.getenv("ZLIB_COMPRESSION_LEVEL", zlib.Z_DEFAULT_COMPRESSION))

logger = logging.getLogger("compressible")


class ZlibCompressor:
    def __init__(self, level: int = ZLIB_COMPRESSION_LEVEL):
        self._level = level

    def compress(self, value: bytes) -> bytes:
        try:
            return zlib.compress(value, self._level)
        except zlib.error as error:
            logger.error(f"Error while compressing value with zlib: {error}")
            raise errors.CompressionError(str(error)) from error

    def decompress(self, value: bytes) -> bytes:
        try:
            return zlib.decompress(value)
        except zlib.error as error:
            logger.error(f"Error while decompressing zlib stream: {error}")
            raise errors.DecompressionError(str(error)) from error
