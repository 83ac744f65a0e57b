from user_directory_api.app.core.errors import (
    UserNotFoundError,
    UserValidationError,
    describe_validation_errors,
)


def test_status_codes():
    assert UserValidationError("bad").status_code == 400
    assert UserNotFoundError("abc").status_code == 404
    assert UserNotFoundError("abc").message == "User abc not found"


def test_describe_drops_body_marker_and_offsets():
    errors = [
        {"type": "string_type", "loc": ("body", "firstName"), "msg": "Input should be a valid string"},
        {"type": "int_parsing", "loc": ("permissionLevel", 0), "msg": "Input should be a valid integer"},
    ]

    assert describe_validation_errors(errors) == (
        "firstName: Input should be a valid string; permissionLevel: Input should be a valid integer"
    )


def test_describe_reports_invalid_json():
    errors = [{"type": "json_invalid", "loc": ("body", 1), "msg": "JSON decode error"}]

    assert describe_validation_errors(errors) == "Malformed JSON body"


def test_describe_without_location_or_errors():
    assert describe_validation_errors([{"type": "missing", "loc": ("body",), "msg": "Field required"}]) == "Field required"
    assert describe_validation_errors([]) == "Invalid request"
