"""Tests for exception classes."""

from opc_history.exceptions import (
    HistoryModelError,
    UnknownModelError,
    WireDecodeError,
)


def test_base_error_defaults():
    """Test base error fields."""
    error = HistoryModelError("bad")

    assert str(error) == "bad"
    assert error.error_code == "INTERNAL_ERROR"
    assert error.details == {}


def test_decode_error_details():
    """Test decode error carries model and errors."""
    errors = [{"type": "int_parsing", "loc": ("numEvents",)}]

    error = WireDecodeError(model="ReadEventsDetails", errors=errors)

    assert isinstance(error, HistoryModelError)
    assert error.error_code == "DECODE_ERROR"
    assert error.details == {"model": "ReadEventsDetails", "errors": errors}
    assert error.errors == errors


def test_decode_error_without_model():
    """Test decode error with no model name."""
    error = WireDecodeError()

    assert error.model is None
    assert error.details == {"errors": []}


def test_unknown_model_error():
    """Test unknown model error code."""
    error = UnknownModelError(model="Thing")

    assert error.error_code == "UNKNOWN_MODEL"
    assert error.details == {"model": "Thing"}
