"""Tests for event filter models."""

from opc_history.models import (
    ContentFilter,
    ContentFilterElement,
    EventFilter,
    FilterOperand,
    FilterOperatorType,
    NodeAttribute,
    SimpleAttributeOperand,
)


def test_empty_filter_has_no_fields():
    """Test an empty filter dumps to an empty dict."""
    assert EventFilter().model_dump() == {}


def test_filter_from_wire_keys():
    """Test nested filter parsed from wire keys and enum strings."""
    event_filter = EventFilter.model_validate(
        {
            "selectClauses": [
                {
                    "typeDefinitionId": "i=2041",
                    "browsePath": ["Severity"],
                    "attributeId": "Value",
                }
            ],
            "whereClause": {
                "elements": [
                    {
                        "filterOperator": "GreaterThan",
                        "filterOperands": [
                            {"nodeId": "i=2041", "browsePath": ["Severity"]},
                            {"value": 500},
                        ],
                    }
                ]
            },
        }
    )

    clause = event_filter.select_clauses[0]
    assert clause.type_definition_id == "i=2041"
    assert clause.browse_path == ["Severity"]
    assert clause.attribute_id is NodeAttribute.VALUE

    element = event_filter.where_clause.elements[0]
    assert element.filter_operator is FilterOperatorType.GREATER_THAN
    assert element.filter_operands[0].node_id == "i=2041"
    assert element.filter_operands[1].value == 500


def test_filter_built_in_python():
    """Test a filter built with field names dumps wire keys."""
    event_filter = EventFilter(
        select_clauses=[
            SimpleAttributeOperand(browse_path=["Message"]),
        ],
        where_clause=ContentFilter(
            elements=[
                ContentFilterElement(
                    filter_operator=FilterOperatorType.OF_TYPE,
                    filter_operands=[FilterOperand(value="i=2041")],
                )
            ]
        ),
    )

    dumped = event_filter.model_dump(mode="json", exclude_none=True)

    assert dumped == {
        "selectClauses": [{"browsePath": ["Message"]}],
        "whereClause": {
            "elements": [
                {
                    "filterOperator": "OfType",
                    "filterOperands": [{"value": "i=2041"}],
                }
            ]
        },
    }


def test_element_index_operand():
    """Test operands referencing other elements by index."""
    element = ContentFilterElement(
        filter_operator=FilterOperatorType.AND,
        filter_operands=[FilterOperand(index=1), FilterOperand(index=2)],
    )

    assert [op.index for op in element.filter_operands] == [1, 2]


def test_operand_alias_field():
    """Test the operand 'alias' member is an ordinary field."""
    operand = FilterOperand.model_validate({"alias": "sev"})

    assert operand.alias == "sev"
    assert operand.model_dump(exclude_none=True) == {"alias": "sev"}
