from compressible.compressors.enums import CompressionAlgorithm
from compressible.compressors.factory import (
    CompressorFactory,
    DEFAULT_ALGORITHM,
    DefaultCompressor,
)
from compressible.compressors.protocol import Compressor
from compressible.compressors.snappy import SnappyCompressor
from compressible.compressors.zlib import ZlibCompressor

__all__ = (
    "Compressor",
    "CompressionAlgorithm",
    "CompressorFactory",
    "DEFAULT_ALGORITHM",
    "DefaultCompressor",
    "SnappyCompressor",
    "ZlibCompressor",
)
