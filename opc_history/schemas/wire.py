"""
Declared field-to-wire-key tables for every history model.

The tables are the reference for the JSON keys each model exchanges.
``WireSchema.matches_model`` checks a table against the aliases the
model declares, so a renamed alias cannot drift silently.
"""

from dataclasses import dataclass
from typing import Any, Mapping

from pydantic import BaseModel

from opc_history.exceptions import UnknownModelError
from opc_history.models import (
    ContentFilter,
    ContentFilterElement,
    Credential,
    Diagnostics,
    EventFilter,
    FilterOperand,
    HistoricEvent,
    HistoryReadNextRequest,
    HistoryReadRequest,
    HistoryReadResponse,
    ReadEventsDetails,
    RequestHeader,
    ServiceResult,
    SimpleAttributeOperand,
)


@dataclass(frozen=True)
class FieldMapping:
    """One Python field name and the key it uses on the wire."""

    name: str
    wire_key: str


@dataclass(frozen=True)
class WireSchema:
    """Wire key table for one model."""

    model: type[BaseModel]
    fields: tuple[FieldMapping, ...]

    def wire_key(self, name: str) -> str:
        """
        Look up the wire key of a field.

        Args:
            name: Python field name

        Returns:
            Wire key

        Raises:
            KeyError: If the model has no such field
        """
        for mapping in self.fields:
            if mapping.name == name:
                return mapping.wire_key
        raise KeyError(name)

    def field_name(self, wire_key: str) -> str:
        """
        Look up the field stored under a wire key.

        Raises:
            KeyError: If no field uses this wire key
        """
        for mapping in self.fields:
            if mapping.wire_key == wire_key:
                return mapping.name
        raise KeyError(wire_key)

    def wire_keys(self) -> tuple[str, ...]:
        return tuple(mapping.wire_key for mapping in self.fields)

    def unknown_keys(self, payload: Mapping[str, Any]) -> list[str]:
        """Return payload keys that are not part of this table."""
        known = set(self.wire_keys())
        return [key for key in payload if key not in known]

    def matches_model(self) -> bool:
        """Check that the table agrees with the model's declared aliases."""
        declared = {
            name: info.alias or name
            for name, info in self.model.model_fields.items()
        }
        table = {mapping.name: mapping.wire_key for mapping in self.fields}
        return declared == table


def _schema(model: type[BaseModel], *pairs: tuple[str, str]) -> WireSchema:
    return WireSchema(
        model=model,
        fields=tuple(FieldMapping(name, key) for name, key in pairs),
    )


READ_EVENTS_DETAILS_SCHEMA = _schema(
    ReadEventsDetails,
    ("start_time", "startTime"),
    ("end_time", "endTime"),
    ("num_events", "numEvents"),
    ("filter", "filter"),
)

SIMPLE_ATTRIBUTE_OPERAND_SCHEMA = _schema(
    SimpleAttributeOperand,
    ("type_definition_id", "typeDefinitionId"),
    ("browse_path", "browsePath"),
    ("attribute_id", "attributeId"),
    ("index_range", "indexRange"),
)

FILTER_OPERAND_SCHEMA = _schema(
    FilterOperand,
    ("index", "index"),
    ("value", "value"),
    ("node_id", "nodeId"),
    ("attribute_id", "attributeId"),
    ("browse_path", "browsePath"),
    ("index_range", "indexRange"),
    ("alias", "alias"),
)

CONTENT_FILTER_ELEMENT_SCHEMA = _schema(
    ContentFilterElement,
    ("filter_operator", "filterOperator"),
    ("filter_operands", "filterOperands"),
)

CONTENT_FILTER_SCHEMA = _schema(ContentFilter, ("elements", "elements"))

EVENT_FILTER_SCHEMA = _schema(
    EventFilter,
    ("select_clauses", "selectClauses"),
    ("where_clause", "whereClause"),
)

CREDENTIAL_SCHEMA = _schema(Credential, ("type", "type"), ("value", "value"))

DIAGNOSTICS_SCHEMA = _schema(
    Diagnostics,
    ("level", "level"),
    ("audit_id", "auditId"),
    ("time_stamp", "timeStamp"),
)

REQUEST_HEADER_SCHEMA = _schema(
    RequestHeader,
    ("elevation", "elevation"),
    ("locales", "locales"),
    ("diagnostics", "diagnostics"),
)

HISTORY_READ_REQUEST_SCHEMA = _schema(
    HistoryReadRequest,
    ("node_id", "nodeId"),
    ("browse_path", "browsePath"),
    ("index_range", "indexRange"),
    ("details", "details"),
    ("header", "header"),
)

HISTORY_READ_NEXT_REQUEST_SCHEMA = _schema(
    HistoryReadNextRequest,
    ("continuation_token", "continuationToken"),
    ("abort", "abort"),
    ("header", "header"),
)

SERVICE_RESULT_SCHEMA = _schema(
    ServiceResult,
    ("status_code", "statusCode"),
    ("error_message", "errorMessage"),
    ("diagnostics", "diagnostics"),
)

HISTORIC_EVENT_SCHEMA = _schema(HistoricEvent, ("event_fields", "eventFields"))

HISTORY_READ_RESPONSE_SCHEMA = _schema(
    HistoryReadResponse,
    ("history", "history"),
    ("continuation_token", "continuationToken"),
    ("error_info", "errorInfo"),
)

WIRE_SCHEMAS: dict[type[BaseModel], WireSchema] = {
    schema.model: schema
    for schema in (
        READ_EVENTS_DETAILS_SCHEMA,
        SIMPLE_ATTRIBUTE_OPERAND_SCHEMA,
        FILTER_OPERAND_SCHEMA,
        CONTENT_FILTER_ELEMENT_SCHEMA,
        CONTENT_FILTER_SCHEMA,
        EVENT_FILTER_SCHEMA,
        CREDENTIAL_SCHEMA,
        DIAGNOSTICS_SCHEMA,
        REQUEST_HEADER_SCHEMA,
        HISTORY_READ_REQUEST_SCHEMA,
        HISTORY_READ_NEXT_REQUEST_SCHEMA,
        SERVICE_RESULT_SCHEMA,
        HISTORIC_EVENT_SCHEMA,
        HISTORY_READ_RESPONSE_SCHEMA,
    )
}


def schema_for(model_cls: type[BaseModel]) -> WireSchema:
    """
    Get the wire schema registered for a model class.

    Args:
        model_cls: Model class

    Returns:
        Registered WireSchema

    Raises:
        UnknownModelError: If no table is registered for the class
    """
    try:
        return WIRE_SCHEMAS[model_cls]
    except KeyError:
        raise UnknownModelError(
            message=f"No wire schema registered for {model_cls.__name__}",
            model=model_cls.__name__,
        ) from None
