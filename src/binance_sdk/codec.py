"""
JSON codec shared by all generated clients

Encodes request parameters and decodes success and error payloads with one
format configuration.
"""

import json
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, List, Mapping, Optional, Tuple, Union, get_args, get_origin

from .domain.general import BinanceApiError
from .exceptions import BinanceSDKError

BodyType = Any


class CodecError(BinanceSDKError):
    """Exception raised when a payload cannot be encoded or decoded"""

    def __init__(self, message: str, details=None):
        super().__init__(message, "CODEC_ERROR", details)


class JsonCodec:
    """
    Converts between Python values and the exchange's JSON wire format.

    Body types are resolved as follows: ``None`` (or an empty payload) yields None,
    classes exposing ``from_json`` are built from the decoded object,
    ``List[X]`` decodes each element as ``X``, and anything else (``dict``,
    ``list``, ``Any``) returns the decoded JSON unchanged.
    """

    def __init__(self, encoding: str = 'utf-8'):
        self.encoding = encoding
        self._error_decoder = ErrorBodyDecoder(self)

    @property
    def error_decoder(self) -> 'ErrorBodyDecoder':
        return self._error_decoder

    @staticmethod
    def encode_value(value: Any) -> str:
        if isinstance(value, Enum):
            return str(value.value)
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, float):
            # The exchange rejects exponent notation such as 1e-05
            return format(Decimal(repr(value)), 'f')
        return str(value)

    def encode_params(self, params: Mapping[str, Any]) -> List[Tuple[str, str]]:
        """Encode parameters as ordered query/form pairs, dropping None values"""
        return [(name, self.encode_value(value)) for name, value in params.items() if value is not None]

    def loads(self, content: Union[bytes, str]) -> Any:
        try:
            if isinstance(content, bytes):
                content = content.decode(self.encoding)
            return json.loads(content)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise CodecError(f"Invalid JSON payload: {e}", {'payload': content[:200]}) from e

    def decode(self, content: Union[bytes, str], body_type: BodyType) -> Any:
        """
        Decode a response payload into ``body_type``.

        Raises:
            CodecError: If the payload is not JSON or does not fit the type
        """
        if body_type is None or not content:
            return None
        return self.convert(self.loads(content), body_type)

    def convert(self, data: Any, body_type: BodyType) -> Any:
        if get_origin(body_type) in (list, List):
            (item_type,) = get_args(body_type) or (Any,)
            if not isinstance(data, list):
                raise CodecError(f"Expected a JSON array for {body_type}, got {type(data).__name__}")
            return [self.convert(item, item_type) for item in data]

        from_json: Optional[Callable[[Any], Any]] = getattr(body_type, 'from_json', None)
        if from_json is None:
            return data
        if not isinstance(data, dict):
            raise CodecError(
                f"Expected a JSON object for {getattr(body_type, '__name__', body_type)}, got {type(data).__name__}",
                {'type': getattr(body_type, '__name__', str(body_type))}
            )

        try:
            return from_json(data)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise CodecError(
                f"Cannot decode {getattr(body_type, '__name__', body_type)}: {e}",
                {'type': getattr(body_type, '__name__', str(body_type))}
            ) from e


class ErrorBodyDecoder:
    """Decodes non-2xx payloads into ``BinanceApiError``"""

    def __init__(self, codec: JsonCodec):
        self.codec = codec

    def __call__(self, content: Union[bytes, str], status: int = 0) -> BinanceApiError:
        data = self.codec.loads(content)
        if not isinstance(data, dict):
            raise CodecError("Error payload must be a JSON object", {'status': status})
        try:
            return BinanceApiError.from_json(data, status=status)
        except (KeyError, TypeError, ValueError) as e:
            raise CodecError(f"Malformed error payload: {e}", {'status': status}) from e
