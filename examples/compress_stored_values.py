"""
Example: Compressing values for storage

This example shows how to turn structured values into compact payloads and back.
The algorithm is stored next to the payload, so the reader picks the matching
compressor without knowing how the payload was written.

================================================================================
HOW TO RUN THIS EXAMPLE
================================================================================

Run the example:
   python examples/compress_stored_values.py

The example will:
- Compress an order with the default algorithm and with every known algorithm
- Store every payload with the algorithm identifier
- Restore all orders and check they are equal to the original one
- Show that a payload read with the wrong algorithm is rejected
"""

import datetime
import logging
import typing
import uuid

import pydantic

import compressible

logging.basicConfig(level=logging.DEBUG)

STORAGE: typing.Dict[uuid.UUID, typing.Tuple[compressible.CompressionAlgorithm, bytes]] = {}


class Order(pydantic.BaseModel):
    order_id: uuid.UUID = pydantic.Field(default_factory=uuid.uuid4)
    created_at: datetime.datetime = pydantic.Field(default_factory=datetime.datetime.now)
    items: typing.List[typing.Text]


orders = compressible.Compressible(Order)


def save(order: Order, algorithm: compressible.CompressionAlgorithm) -> uuid.UUID:
    key = uuid.uuid4()
    STORAGE[key] = (algorithm, orders.compress_with_algorithm(order, algorithm))
    return key


def load(key: uuid.UUID) -> Order:
    algorithm, payload = STORAGE[key]
    return orders.decompress_with_algorithm(payload, algorithm)


def main():
    order = Order(items=["keyboard", "mouse"] * 20)

    payload = orders.compress(order)
    print(f"Default payload: {len(payload)} bytes, json: {len(order.model_dump_json())} bytes")
    assert orders.decompress(payload) == order

    keys = [save(order, algorithm) for algorithm in compressible.CompressorFactory.algorithms()]
    for key in keys:
        assert load(key) == order

    try:
        orders.decompress_with_algorithm(payload, compressible.CompressionAlgorithm.ZLIB)
    except compressible.DecompressionError as error:
        print(f"Payload rejected: {error}")


if __name__ == "__main__":
    main()
