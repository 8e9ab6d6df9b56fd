import typing

from compressible import compressors
from compressible.deserializers import JsonDeserializer
from compressible.serializers import JsonSerializer

_T = typing.TypeVar("_T")


class Compressible(typing.Generic[_T]):
    """
    Compresses values of ``model`` into payloads and restores them back.

    Values are serialized into json and passed through a compressor chosen in
    one of four ways:

    * ``compress`` / ``decompress`` use the default compressor;
    * ``compress_with`` / ``decompress_with`` take a compressor instance;
    * ``compress_with_type`` / ``decompress_with_type`` take a compressor class;
    * ``compress_with_algorithm`` / ``decompress_with_algorithm`` take a
      :class:`CompressionAlgorithm` resolved by :class:`CompressorFactory`.

    Payloads do not store the algorithm, the same one must be used on both sides.

    Raises:
        SerializationError: If the value can not be serialized.
        CompressionError: If the compressor fails.
        DecompressionError: If the payload is not valid for the compressor.
        DeserializationError: If the decompressed data does not match ``model``.

    Example::

        users = Compressible(User)
        payload = users.compress_with_algorithm(user, CompressionAlgorithm.ZLIB)
        assert users.decompress_with_algorithm(payload, "zlib") == user
    """

    def __init__(self, model: typing.Type[_T]):
        self._model = model
        self._serializer = JsonSerializer[_T](model)
        self._deserializer = JsonDeserializer[_T](model)

    @property
    def model(self) -> typing.Type[_T]:
        return self._model

    def compress(self, value: _T) -> bytes:
        return self.compress_with(value, compressors.DefaultCompressor())

    def decompress(self, payload: bytes) -> _T:
        return self.decompress_with(payload, compressors.DefaultCompressor())

    def compress_with(self, value: _T, compressor: compressors.Compressor) -> bytes:
        serialized = self._serializer(value)
        return compressor.compress(serialized)

    def decompress_with(self, payload: bytes, compressor: compressors.Compressor) -> _T:
        decompressed = compressor.decompress(payload)
        return self._deserializer(decompressed)

    def compress_with_type(
        self,
        value: _T,
        compressor_type: typing.Type[compressors.Compressor],
    ) -> bytes:
        return self.compress_with(value, compressor_type())

    def decompress_with_type(
        self,
        payload: bytes,
        compressor_type: typing.Type[compressors.Compressor],
    ) -> _T:
        return self.decompress_with(payload, compressor_type())

    def compress_with_algorithm(
        self,
        value: _T,
        algorithm: compressors.CompressionAlgorithm | typing.Text,
    ) -> bytes:
        compressor = compressors.CompressorFactory.get_compressor(algorithm)
        return self.compress_with(value, compressor)

    def decompress_with_algorithm(
        self,
        payload: bytes,
        algorithm: compressors.CompressionAlgorithm | typing.Text,
    ) -> _T:
        compressor = compressors.CompressorFactory.get_compressor(algorithm)
        return self.decompress_with(payload, compressor)


def compress(
    value: typing.Any,
    compressor: compressors.Compressor | None = None,
) -> bytes:
    """Compress value of any serializable type, the type is taken from the value."""
    return Compressible(type(value)).compress_with(
        value,
        compressor if compressor is not None else compressors.DefaultCompressor(),
    )


def decompress(
    payload: bytes,
    model: typing.Type[_T],
    compressor: compressors.Compressor | None = None,
) -> _T:
    return Compressible(model).decompress_with(
        payload,
        compressor if compressor is not None else compressors.DefaultCompressor(),
    )
