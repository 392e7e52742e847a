from http import HTTPStatus

import pytest

from adplatform.errors import (
    ApiErrorBody,
    CampaignStartedError,
    CustomApiError,
    DatabaseError,
    FileHostError,
    InvalidInputError,
    JsonError,
    NotFoundError,
    NotOwnerError,
    ValidationFailedError,
    not_found,
)


@pytest.mark.parametrize(
    "error, code, status",
    [
        (DatabaseError("down"), "database_error", 500),
        (FileHostError("down"), "file_host_error", 500),
        (NotFoundError("Client"), "not_found", 404),
        (NotOwnerError(), "not_owner", 403),
        (JsonError("bad"), "json_error", 400),
        (InvalidInputError("bad"), "invalid_input", 400),
        (ValidationFailedError("bad"), "invalid_input", 400),
        (CampaignStartedError("start_date"), "campaign_started", 409),
    ],
)
def test_codes_and_statuses(error, code, status):
    assert error.as_api_error().error == code
    assert int(error.status_code) == status
    response_status, body = error.error_response()
    assert response_status == status
    assert body == {"error": code, "description": str(error)}


def test_messages():
    assert str(DatabaseError("down")) == "Database error: down"
    assert str(NotFoundError("Client")) == "Client was not found"
    assert str(NotOwnerError()) == "You're not allowed to do this"
    assert (
        str(CampaignStartedError("start_date"))
        == "Unable to change field `start_date`: Campaign has already started"
    )


def test_description_is_message():
    error = InvalidInputError("age")
    assert error.as_api_error() == ApiErrorBody("invalid_input", "Invalid input: age")


def test_custom_error():
    error = CustomApiError("file_too_large", 413, "File size exceeds the limit of 5.7 MB")
    assert error.status_code == HTTPStatus.REQUEST_ENTITY_TOO_LARGE
    assert error.error_response() == (
        413,
        {"error": "file_too_large", "description": "File size exceeds the limit of 5.7 MB"},
    )


def test_errors_are_raisable():
    with pytest.raises(NotFoundError, match="Campaign was not found") as excinfo:
        raise NotFoundError("Campaign")
    assert int(excinfo.value.status_code) == 404
    assert excinfo.value.as_api_error() == ApiErrorBody(
        "not_found", "Campaign was not found"
    )


def test_not_found_route():
    assert not_found() == (
        404,
        {"error": "not_found", "description": "the requested route does not exist"},
    )