import enum


class CompressionAlgorithm(enum.StrEnum):
    SNAPPY = "snappy"
    ZLIB = "zlib"
