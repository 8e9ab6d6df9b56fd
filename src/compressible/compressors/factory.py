import logging
import typing

from compressible.compressors.enums import CompressionAlgorithm
from compressible.compressors.protocol import Compressor
from compressible.compressors.snappy import SnappyCompressor
from compressible.compressors.zlib import ZlibCompressor

logger = logging.getLogger("compressible")

DefaultCompressor = SnappyCompressor
DEFAULT_ALGORITHM = CompressionAlgorithm.SNAPPY


class CompressorFactory:
    _registry: typing.Dict[CompressionAlgorithm, typing.Type[Compressor]] = {
        CompressionAlgorithm.SNAPPY: SnappyCompressor,
        CompressionAlgorithm.ZLIB: ZlibCompressor,
    }

    @classmethod
    def get_compressor(cls, algorithm: CompressionAlgorithm | typing.Text) -> Compressor:
        """
        Returns a new compressor for the algorithm.

        Accepts the enum member or its value, e.g. an identifier stored next to the payload.
        Unknown values raise ``ValueError``.
        """
        algorithm = CompressionAlgorithm(algorithm)
        logger.debug(f"Select {cls._registry[algorithm].__name__} for algorithm {algorithm}")
        return cls._registry[algorithm]()

    @classmethod
    def algorithms(cls) -> typing.List[CompressionAlgorithm]:
        return list(cls._registry)


def _check_exhaustive() -> None:
    missing = set(CompressionAlgorithm) - set(CompressorFactory._registry)
    if missing:
        raise TypeError(
            f"No compressor registered for algorithms: {', '.join(sorted(missing))}",
        )


_check_exhaustive()
