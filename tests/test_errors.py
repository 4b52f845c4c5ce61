"""Tests for the response bodies of the error taxonomy."""

from common.errors import DemoError, FieldError, NotFound, StorageError, ValidationError


def test_validation_error_body():
    error = ValidationError([
        FieldError("Validation isUrl failed", "Validation error", "url", "nope"),
        FieldError("Validation isInt failed", "Validation error", "number", "x"),
    ])

    assert error.to_dict() == {
        "name": "ValidationError",
        "message": "Validation error: Validation isUrl failed,\nValidation error: Validation isInt failed",
        "errors": [
            {"message": "Validation isUrl failed", "type": "Validation error", "path": "url", "value": "nope"},
            {"message": "Validation isInt failed", "type": "Validation error", "path": "number", "value": "x"},
        ],
    }


def test_not_found_body():
    error = NotFound(7)

    assert str(error) == "demo with id: 7 not found"
    assert error.to_dict() == {"message": "demo with id: 7 not found", "status": 404}


def test_storage_error_body():
    error = StorageError("Can't delete a demo with id: 2", ConnectionRefusedError("db down"))

    assert error.to_dict() == {
        "message": "Can't delete a demo with id: 2",
        "error": "db down",
        "status": 500,
    }
    assert StorageError("boom").to_dict()["error"] is None


def test_validation_error_body_with_wide_integers():
    error = ValidationError([
        FieldError("Value should be less or equal to 2147483647", "Validation error", "number", 2**70),
        FieldError("Validation isUrl failed", "Validation error", "url", {"host": [2**64, 7, True]}),
    ])

    values = [item["value"] for item in error.to_dict()["errors"]]

    assert values == [str(2**70), {"host": [str(2**64), 7, True]}]
    assert error.errors[0].value == 2**70


def test_base_error_body():
    assert DemoError("something broke").to_dict() == {"message": "something broke"}
