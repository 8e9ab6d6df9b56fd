class CompressorError(Exception):
    """
    Base error of the compression pipeline.

    Carries the message of the backend (serializer or compressor) that failed.
    """

    stage: str = "Compressor"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.stage} error: {self.message}"


class CompressionError(CompressorError):
    stage = "Compression"


class DecompressionError(CompressorError):
    stage = "Decompression"


class SerializationError(CompressorError):
    stage = "Serialization"


class DeserializationError(CompressorError):
    stage = "Deserialization"
