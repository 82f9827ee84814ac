"""Event filter models used to narrow an event-history read."""

from enum import Enum
from typing import Any, ClassVar, List, Optional

from pydantic import ConfigDict, Field

from opc_history.models.base import ApiModel


class NodeAttribute(str, Enum):
    """OPC UA node attribute identifiers."""

    NODE_CLASS = "NodeClass"
    BROWSE_NAME = "BrowseName"
    DISPLAY_NAME = "DisplayName"
    DESCRIPTION = "Description"
    WRITE_MASK = "WriteMask"
    USER_WRITE_MASK = "UserWriteMask"
    IS_ABSTRACT = "IsAbstract"
    SYMMETRIC = "Symmetric"
    INVERSE_NAME = "InverseName"
    CONTAINS_NO_LOOPS = "ContainsNoLoops"
    EVENT_NOTIFIER = "EventNotifier"
    VALUE = "Value"
    DATA_TYPE = "DataType"
    VALUE_RANK = "ValueRank"
    ARRAY_DIMENSIONS = "ArrayDimensions"
    ACCESS_LEVEL = "AccessLevel"
    USER_ACCESS_LEVEL = "UserAccessLevel"
    MINIMUM_SAMPLING_INTERVAL = "MinimumSamplingInterval"
    HISTORIZING = "Historizing"
    EXECUTABLE = "Executable"
    USER_EXECUTABLE = "UserExecutable"
    DATA_TYPE_DEFINITION = "DataTypeDefinition"
    ROLE_PERMISSIONS = "RolePermissions"
    USER_ROLE_PERMISSIONS = "UserRolePermissions"
    ACCESS_RESTRICTIONS = "AccessRestrictions"


class FilterOperatorType(str, Enum):
    """Operators usable in a content filter element."""

    EQUALS = "Equals"
    IS_NULL = "IsNull"
    GREATER_THAN = "GreaterThan"
    LESS_THAN = "LessThan"
    GREATER_THAN_OR_EQUAL = "GreaterThanOrEqual"
    LESS_THAN_OR_EQUAL = "LessThanOrEqual"
    LIKE = "Like"
    NOT = "Not"
    BETWEEN = "Between"
    IN_LIST = "InList"
    AND = "And"
    OR = "Or"
    CAST = "Cast"
    IN_VIEW = "InView"
    OF_TYPE = "OfType"
    RELATED_TO = "RelatedTo"
    BITWISE_AND = "BitwiseAnd"
    BITWISE_OR = "BitwiseOr"


class SimpleAttributeOperand(ApiModel):
    """
    Select clause entry naming an event field to return.

    Attributes:
        type_definition_id: Event type the browse path starts from
        browse_path: Browse names relative to the type definition
        attribute_id: Attribute to read from the target node
        index_range: Index range into an array value
    """

    type_definition_id: Optional[str] = Field(
        None, alias="typeDefinitionId", description="Type definition node id"
    )
    browse_path: Optional[List[str]] = Field(
        None, alias="browsePath", description="Browse path of the field"
    )
    attribute_id: Optional[NodeAttribute] = Field(
        None, alias="attributeId", description="Attribute to select"
    )
    index_range: Optional[str] = Field(
        None, alias="indexRange", description="Index range"
    )


class FilterOperand(ApiModel):
    """
    Operand of a content filter element.

    Only the members relevant to the operand kind are set: ``index`` for an
    element reference, ``value`` for a literal, the node/attribute members
    for attribute and simple attribute operands.
    """

    keep_null: ClassVar[frozenset[str]] = frozenset({"value"})

    index: Optional[int] = Field(
        None, alias="index", description="Index of another filter element"
    )
    value: Optional[Any] = Field(
        None, alias="value", description="Literal value"
    )
    node_id: Optional[str] = Field(None, alias="nodeId", description="Node id")
    attribute_id: Optional[NodeAttribute] = Field(
        None, alias="attributeId", description="Attribute of the node"
    )
    browse_path: Optional[List[str]] = Field(
        None, alias="browsePath", description="Browse path"
    )
    index_range: Optional[str] = Field(
        None, alias="indexRange", description="Index range"
    )
    alias: Optional[str] = Field(
        None, alias="alias", description="Alias for the operand"
    )


class ContentFilterElement(ApiModel):
    """One operator applied to its operands."""

    filter_operator: Optional[FilterOperatorType] = Field(
        None, alias="filterOperator", description="Filter operator"
    )
    filter_operands: Optional[List[FilterOperand]] = Field(
        None, alias="filterOperands", description="Operands of the operator"
    )


class ContentFilter(ApiModel):
    """Where clause; element 0 is the root of the expression."""

    elements: Optional[List[ContentFilterElement]] = Field(
        None, alias="elements", description="Filter elements"
    )


class EventFilter(ApiModel):
    """
    Event-selection predicate for an event-history read.

    Attributes:
        select_clauses: Event fields to return, in order
        where_clause: Predicate events must satisfy
    """

    select_clauses: Optional[List[SimpleAttributeOperand]] = Field(
        None, alias="selectClauses", description="Fields to select"
    )
    where_clause: Optional[ContentFilter] = Field(
        None, alias="whereClause", description="Where clause"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "selectClauses": [
                    {
                        "typeDefinitionId": "i=2041",
                        "browsePath": ["Message"],
                        "attributeId": "Value",
                    }
                ],
                "whereClause": {
                    "elements": [
                        {
                            "filterOperator": "OfType",
                            "filterOperands": [{"value": "i=2041"}],
                        }
                    ]
                },
            }
        }
    )
