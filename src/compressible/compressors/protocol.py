import typing


class Compressor(typing.Protocol):
    def compress(self, value: bytes) -> bytes:
        """
        Compress value.

        Raises:
            CompressionError: If the underlying encoder fails.
        """
        raise NotImplementedError

    def decompress(self, value: bytes) -> bytes:
        """
        Decompress compressed value.

        Raises:
            DecompressionError: If the value is not a valid payload of the algorithm.
        """
        raise NotImplementedError
