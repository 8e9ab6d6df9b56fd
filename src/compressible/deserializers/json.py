import logging
import typing

import pydantic

from compressible import errors

_T = typing.TypeVar("_T")

logger = logging.getLogger("compressible")


class JsonDeserializer(typing.Generic[_T]):
    def __init__(self, model: typing.Type[_T]):
        self._model: typing.Type[_T] = model
        self._adapter: pydantic.TypeAdapter[_T] = pydantic.TypeAdapter(model)

    def __call__(self, data: bytes) -> _T:
        try:
            return self._adapter.validate_json(data)
        except pydantic.ValidationError as error:
            logger.error(
                f"Error while deserializing json message: {error}",
            )
            raise errors.DeserializationError(str(error)) from error
