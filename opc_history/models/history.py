"""Event-history read request and response models."""

from datetime import datetime
from enum import Enum
from typing import Any, ClassVar, List, Optional, Self

from pydantic import ConfigDict, Field

from opc_history.models.base import ApiModel
from opc_history.models.filter import EventFilter


class ReadEventsDetails(ApiModel):
    """
    Parameters of an event-history read.

    No relation between the fields is checked here: a missing bound, an
    inverted range or a negative count is passed on to the history service
    as given.

    Attributes:
        start_time: Start time to read from
        end_time: End time to read to
        num_events: Number of events to read
        filter: Event selection predicate
    """

    start_time: Optional[datetime] = Field(
        None, alias="startTime", description="Start time to read from"
    )
    end_time: Optional[datetime] = Field(
        None, alias="endTime", description="End time to read to"
    )
    num_events: Optional[int] = Field(
        None, alias="numEvents", description="Number of events to read"
    )
    filter: Optional[EventFilter] = Field(
        None, alias="filter", description="Event filter"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "startTime": "2023-01-01T00:00:00Z",
                "endTime": "2023-01-02T00:00:00Z",
                "numEvents": 100,
                "filter": {},
            }
        }
    )

    def with_start_time(self, start_time: Optional[datetime]) -> Self:
        """Set start time to read from."""
        return self._with("start_time", start_time)

    def with_end_time(self, end_time: Optional[datetime]) -> Self:
        """Set end time to read to."""
        return self._with("end_time", end_time)

    def with_num_events(self, num_events: Optional[int]) -> Self:
        """Set number of events to read."""
        return self._with("num_events", num_events)

    def with_filter(self, filter: Optional[EventFilter]) -> Self:
        """Set the event filter."""
        return self._with("filter", filter)


class CredentialType(str, Enum):
    """Kind of credential used to elevate a request."""

    NONE = "None"
    USER_NAME = "UserName"
    X509_CERTIFICATE = "X509Certificate"
    JWT_TOKEN = "JwtToken"


class Credential(ApiModel):
    """Credential presented to the server."""

    keep_null: ClassVar[frozenset[str]] = frozenset({"value"})

    type: Optional[CredentialType] = Field(
        None, alias="type", description="Credential type"
    )
    value: Optional[Any] = Field(
        None, alias="value", description="Credential value"
    )


class DiagnosticsLevel(str, Enum):
    """Amount of diagnostics the server should return."""

    NONE = "None"
    STATUS = "Status"
    OPERATIONS = "Operations"
    DIAGNOSTICS = "Diagnostics"
    VERBOSE = "Verbose"


class Diagnostics(ApiModel):
    """Diagnostics requested for an operation."""

    level: Optional[DiagnosticsLevel] = Field(
        None, alias="level", description="Requested level"
    )
    audit_id: Optional[str] = Field(
        None, alias="auditId", description="Client audit log entry id"
    )
    time_stamp: Optional[datetime] = Field(
        None, alias="timeStamp", description="Timestamp of the request"
    )


class RequestHeader(ApiModel):
    """Header carried by every history request."""

    elevation: Optional[Credential] = Field(
        None, alias="elevation", description="Optional elevation"
    )
    locales: Optional[List[str]] = Field(
        None, alias="locales", description="Preferred locales"
    )
    diagnostics: Optional[Diagnostics] = Field(
        None, alias="diagnostics", description="Diagnostics options"
    )


class HistoryReadRequest(ApiModel):
    """
    Request to read the event history of a node.

    Attributes:
        node_id: Node to read from
        browse_path: Browse path from the node to the actual target
        index_range: Index range to read
        details: Read events details
        header: Optional request header
    """

    node_id: Optional[str] = Field(None, alias="nodeId", description="Node id")
    browse_path: Optional[List[str]] = Field(
        None, alias="browsePath", description="Browse path"
    )
    index_range: Optional[str] = Field(
        None, alias="indexRange", description="Index range"
    )
    details: Optional[ReadEventsDetails] = Field(
        None, alias="details", description="Read events details"
    )
    header: Optional[RequestHeader] = Field(
        None, alias="header", description="Request header"
    )


class HistoryReadNextRequest(ApiModel):
    """Request for the next page of a history read."""

    continuation_token: Optional[str] = Field(
        None, alias="continuationToken", description="Continuation token"
    )
    abort: Optional[bool] = Field(
        None, alias="abort", description="Release the continuation point"
    )
    header: Optional[RequestHeader] = Field(
        None, alias="header", description="Request header"
    )


class ServiceResult(ApiModel):
    """Status of a service call."""

    status_code: Optional[int] = Field(
        None, alias="statusCode", description="OPC UA status code"
    )
    error_message: Optional[str] = Field(
        None, alias="errorMessage", description="Error message"
    )
    diagnostics: Optional[Any] = Field(
        None, alias="diagnostics", description="Additional diagnostics"
    )


class HistoricEvent(ApiModel):
    """One historic event; fields follow the order of the select clauses."""

    event_fields: Optional[List[Any]] = Field(
        None, alias="eventFields", description="Selected event fields"
    )


class HistoryReadResponse(ApiModel):
    """
    Result of an event-history read.

    Attributes:
        history: Events read
        continuation_token: Token to read the next page, if any
        error_info: Service result of the read
    """

    history: Optional[List[HistoricEvent]] = Field(
        None, alias="history", description="Historic events"
    )
    continuation_token: Optional[str] = Field(
        None, alias="continuationToken", description="Continuation token"
    )
    error_info: Optional[ServiceResult] = Field(
        None, alias="errorInfo", description="Service result"
    )
