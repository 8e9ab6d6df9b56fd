import logging
import typing

import orjson
import pydantic

from compressible import errors

_T = typing.TypeVar("_T")

logger = logging.getLogger("compressible")


class JsonSerializer(typing.Generic[_T]):
    """
    Serialize values of ``model`` into json bytes.

    The value is dumped by pydantic in json mode, so models, dataclasses and
    typed dicts are supported along with plain containers.
    """

    def __init__(self, model: typing.Type[_T]):
        self._model: typing.Type[_T] = model
        self._adapter: pydantic.TypeAdapter[_T] = pydantic.TypeAdapter(model)

    def __call__(self, value: _T) -> bytes:
        try:
            return orjson.dumps(self._adapter.dump_python(value, mode="json"))
        except Exception as error:
            logger.error(f"Error while serializing value of type {type(value).__name__}: {error}")
            raise errors.SerializationError(str(error)) from error


def default_serializer(
    value: typing.Any,
    model: typing.Any | None = None,
) -> bytes:
    """``model`` is the declared type of the value, the runtime type is used when it is omitted."""
    try:
        serializer = JsonSerializer(type(value) if model is None else model)
    except pydantic.PydanticSchemaGenerationError as error:
        logger.error(f"Error while serializing value of type {type(value).__name__}: {error}")
        raise errors.SerializationError(str(error)) from error
    return serializer(value)
