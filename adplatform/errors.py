"""API errors, their wire representation and HTTP status codes."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from http import HTTPStatus
from typing import Any


@dataclass(frozen=True)
class ApiErrorBody:
    """JSON body sent to the client when a request fails."""

    error: str
    description: str


class ApiError(Exception):
    """Base of every error a request handler may raise."""

    code: str = "internal_error"
    status_code: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR
    template: str = "{}"

    def __init__(self, detail: object = "") -> None:
        self.detail = detail
        super().__init__(self.template.format(detail))

    def as_api_error(self) -> ApiErrorBody:
        """Return the body describing this error."""
        return ApiErrorBody(error=self.code, description=str(self))

    def error_response(self) -> tuple[int, dict[str, Any]]:
        """Return the HTTP status and the JSON body of the response."""
        return int(self.status_code), asdict(self.as_api_error())


class DatabaseError(ApiError):
    """The database failed."""

    code = "database_error"
    status_code = HTTPStatus.INTERNAL_SERVER_ERROR
    template = "Database error: {}"


class FileHostError(ApiError):
    """The file host failed."""

    code = "file_host_error"
    status_code = HTTPStatus.INTERNAL_SERVER_ERROR
    template = "File host error: {}"


class NotFoundError(ApiError):
    """The requested entity does not exist."""

    code = "not_found"
    status_code = HTTPStatus.NOT_FOUND
    template = "{} was not found"


class NotOwnerError(ApiError):
    """The caller does not own the entity."""

    code = "not_owner"
    status_code = HTTPStatus.FORBIDDEN
    template = "You're not allowed to do this"

    def __init__(self) -> None:
        super().__init__()


class JsonError(ApiError):
    """The request body could not be deserialised."""

    code = "json_error"
    status_code = HTTPStatus.BAD_REQUEST
    template = "Deserialization error: {}"


class InvalidInputError(ApiError):
    """The request holds invalid data."""

    code = "invalid_input"
    status_code = HTTPStatus.BAD_REQUEST
    template = "Invalid input: {}"


class ValidationFailedError(ApiError):
    """Validation of the input failed."""

    code = "invalid_input"
    status_code = HTTPStatus.BAD_REQUEST
    template = "Error while validating input: {}"


class CampaignStartedError(ApiError):
    """A field cannot be changed once the campaign has started."""

    code = "campaign_started"
    status_code = HTTPStatus.CONFLICT
    template = "Unable to change field `{}`: Campaign has already started"


class CustomApiError(ApiError):
    """An error with its own code, status and message."""

    def __init__(self, error: str, status_code: int, message: str) -> None:
        self.code = error
        self.status_code = HTTPStatus(status_code)
        self.detail = message
        Exception.__init__(self, message)


def not_found() -> tuple[int, dict[str, Any]]:
    """Response for a route that does not exist."""
    body = ApiErrorBody(error="not_found", description="the requested route does not exist")
    return int(HTTPStatus.NOT_FOUND), asdict(body)