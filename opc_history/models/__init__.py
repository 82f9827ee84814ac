"""Wire models for the OPC history API."""

from opc_history.models.base import ApiModel
from opc_history.models.filter import (
    ContentFilter,
    ContentFilterElement,
    EventFilter,
    FilterOperand,
    FilterOperatorType,
    NodeAttribute,
    SimpleAttributeOperand,
)
from opc_history.models.history import (
    Credential,
    CredentialType,
    Diagnostics,
    DiagnosticsLevel,
    HistoricEvent,
    HistoryReadNextRequest,
    HistoryReadRequest,
    HistoryReadResponse,
    ReadEventsDetails,
    RequestHeader,
    ServiceResult,
)

__all__ = [
    "ApiModel",
    "ContentFilter",
    "ContentFilterElement",
    "Credential",
    "CredentialType",
    "Diagnostics",
    "DiagnosticsLevel",
    "EventFilter",
    "FilterOperand",
    "FilterOperatorType",
    "HistoricEvent",
    "HistoryReadNextRequest",
    "HistoryReadRequest",
    "HistoryReadResponse",
    "NodeAttribute",
    "ReadEventsDetails",
    "RequestHeader",
    "ServiceResult",
    "SimpleAttributeOperand",
]
