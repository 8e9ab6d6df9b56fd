from compressible.deserializers.json import JsonDeserializer

__all__ = ("JsonDeserializer",)
