from compressible.compressible import Compressible, compress, decompress
from compressible.compressors import (
    CompressionAlgorithm,
    Compressor,
    CompressorFactory,
    DEFAULT_ALGORITHM,
    DefaultCompressor,
    SnappyCompressor,
    ZlibCompressor,
)
from compressible.errors import (
    CompressionError,
    CompressorError,
    DecompressionError,
    DeserializationError,
    SerializationError,
)

__all__ = (
    "Compressible",
    "compress",
    "decompress",
    "Compressor",
    "CompressionAlgorithm",
    "CompressorFactory",
    "DEFAULT_ALGORITHM",
    "DefaultCompressor",
    "SnappyCompressor",
    "ZlibCompressor",
    "CompressorError",
    "CompressionError",
    "DecompressionError",
    "SerializationError",
    "DeserializationError",
)
