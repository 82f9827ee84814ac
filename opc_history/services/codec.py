"""Codec between history models and their JSON wire form."""

import json
from typing import Any, TypeVar

from pydantic import ValidationError

from opc_history.config import settings
from opc_history.exceptions import WireDecodeError
from opc_history.logging.config import get_logger, log_context
from opc_history.models.base import ApiModel
from opc_history.models.history import ReadEventsDetails
from opc_history.schemas.wire import schema_for

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=ApiModel)


class WireCodec:
    """
    Encodes models to wire payloads and decodes payloads back.

    Unset fields are left out of the payload entirely rather than sent as
    ``null``; ``ApiModel.keep_null`` names the literal fields that keep an
    explicit ``null``. Decoding only accepts wire keys; keys outside the
    declared table are ignored.
    """

    def __init__(self, indent: int | None = None) -> None:
        """
        Initialize WireCodec.

        Args:
            indent: JSON indent for to_json (None for compact output)
        """
        self.indent = indent

    def to_wire(self, model: ApiModel) -> dict[str, Any]:
        """
        Encode a model into a JSON-compatible dict keyed by wire keys.

        Args:
            model: Model to encode

        Returns:
            Wire payload; timestamps are ISO 8601 strings with offset
        """
        return model.model_dump(mode="json", by_alias=True)

    def to_json(self, model: ApiModel) -> str:
        """Encode a model into JSON text."""
        return model.model_dump_json(by_alias=True, indent=self.indent)

    def from_wire(
        self, model_cls: type[ModelT], payload: Any
    ) -> ModelT:
        """
        Decode a wire payload into a model.

        Args:
            model_cls: Target model class
            payload: Decoded JSON object

        Returns:
            Model instance

        Raises:
            WireDecodeError: If the payload does not fit the model
            UnknownModelError: If no wire schema is registered for model_cls
        """
        schema = schema_for(model_cls)

        if isinstance(payload, dict):
            unknown = schema.unknown_keys(payload)
            if unknown:
                logger.debug(
                    "Ignoring unknown wire keys",
                    extra=log_context(
                        model=model_cls.__name__, unknown_keys=unknown
                    ),
                )

        try:
            return model_cls.model_validate(
                payload, by_alias=True, by_name=False
            )
        except ValidationError as exc:
            errors = exc.errors(include_url=False, include_context=False)
            logger.warning(
                "Wire payload rejected",
                extra=log_context(
                    model=model_cls.__name__, error_count=len(errors)
                ),
            )
            raise WireDecodeError(
                message=f"Malformed {model_cls.__name__} payload",
                model=model_cls.__name__,
                errors=errors,
            ) from exc

    def from_json(self, model_cls: type[ModelT], text: str | bytes) -> ModelT:
        """
        Decode JSON text into a model.

        Raises:
            WireDecodeError: If the text is not JSON or does not fit the model
        """
        try:
            payload = json.loads(text)
        except ValueError as exc:
            # UnicodeDecodeError for undecodable bytes, JSONDecodeError otherwise
            error_type = (
                "unicode_invalid"
                if isinstance(exc, UnicodeDecodeError)
                else "json_invalid"
            )
            logger.warning(
                "Wire payload is not valid JSON",
                extra=log_context(model=model_cls.__name__, error_type=error_type),
            )
            raise WireDecodeError(
                message=f"Invalid JSON for {model_cls.__name__}",
                model=model_cls.__name__,
                errors=[{"type": error_type, "msg": str(exc)}],
            ) from exc

        return self.from_wire(model_cls, payload)


# Default codec configured from settings
codec = WireCodec(indent=settings.json_indent)


def encode_read_events_details(details: ReadEventsDetails) -> str:
    """Encode read events details as JSON text."""
    return codec.to_json(details)


def decode_read_events_details(text: str | bytes) -> ReadEventsDetails:
    """Decode read events details from JSON text."""
    return codec.from_json(ReadEventsDetails, text)
