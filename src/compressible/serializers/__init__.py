from compressible.serializers.default import JsonSerializer, default_serializer

__all__ = (
    "JsonSerializer",
    "default_serializer",
)
