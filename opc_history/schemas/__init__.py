"""Wire schema tables."""

from opc_history.schemas.wire import (
    READ_EVENTS_DETAILS_SCHEMA,
    WIRE_SCHEMAS,
    FieldMapping,
    WireSchema,
    schema_for,
)

__all__ = [
    "FieldMapping",
    "READ_EVENTS_DETAILS_SCHEMA",
    "WIRE_SCHEMAS",
    "WireSchema",
    "schema_for",
]
