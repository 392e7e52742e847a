"""Description of the HTTP endpoints the API serves."""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Optional

HTTP_METHODS = frozenset({"GET", "POST", "PUT", "DELETE", "PATCH", "HEAD", "OPTIONS"})
PARAMETER_LOCATIONS = frozenset({"path", "query", "header", "cookie"})
JSON_CONTENT_TYPE = "application/json"

_PLACEHOLDER = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")


def _schema_ref(name: str, array: bool) -> dict[str, Any]:
    ref: dict[str, Any] = {"$ref": f"#/components/schemas/{name}"}
    return {"type": "array", "items": ref} if array else ref


@lru_cache(maxsize=None)
def _compile(template: str) -> re.Pattern[str]:
    pattern = []
    position = 0
    for placeholder in _PLACEHOLDER.finditer(template):
        pattern.append(re.escape(template[position : placeholder.start()]))
        pattern.append(f"(?P<{placeholder.group(1)}>[^/]+)")
        position = placeholder.end()
    pattern.append(re.escape(template[position:]))
    return re.compile("".join(pattern))


def join_paths(*args: str) -> str:
    """Join scope prefixes and route paths into one absolute path."""
    segments = [segment for part in args for segment in part.split("/") if segment]
    return "/" + "/".join(segments)


@dataclass(frozen=True)
class Parameter:
    """A path or query parameter of an endpoint."""

    name: str
    description: str
    location: str = "path"
    required: bool = True
    schema_type: str = "string"
    schema_format: Optional[str] = "uuid"

    def __post_init__(self) -> None:
        if self.location not in PARAMETER_LOCATIONS:
            raise ValueError(f"unknown parameter location `{self.location}`")

    def _openapi(self) -> dict[str, Any]:
        schema: dict[str, Any] = {"type": self.schema_type}
        if self.schema_format is not None:
            schema["format"] = self.schema_format
        return {
            "name": self.name,
            "in": self.location,
            "description": self.description,
            "required": self.required,
            "schema": schema,
        }


@dataclass(frozen=True)
class ResponseSpec:
    """One documented response of an endpoint."""

    status: int
    description: str
    body: Optional[str] = None
    array: bool = False

    def _openapi(self) -> dict[str, Any]:
        response: dict[str, Any] = {"description": self.description}
        if self.body is not None:
            response["content"] = {
                JSON_CONTENT_TYPE: {"schema": _schema_ref(self.body, self.array)}
            }
        return response


@dataclass(frozen=True)
class Endpoint:
    """A route with its documentation."""

    method: str
    path: str
    operation_id: str
    tag: str
    summary: str
    description: str
    parameters: tuple[Parameter, ...] = ()
    responses: tuple[ResponseSpec, ...] = ()
    request_body: Optional[str] = None
    request_body_array: bool = False
    request_body_description: Optional[str] = None
    request_content_type: str = JSON_CONTENT_TYPE

    def __post_init__(self) -> None:
        method = self.method.upper()
        if method not in HTTP_METHODS:
            raise ValueError(f"unknown HTTP method `{self.method}`")
        if not self.path.startswith("/"):
            raise ValueError(f"path `{self.path}` must start with `/`")
        object.__setattr__(self, "method", method)

    @property
    def path_parameters(self) -> list[str]:
        """Names of the placeholders in the path, in order."""
        return _PLACEHOLDER.findall(self.path)

    def match(self, method: str, path: str) -> Optional[dict[str, str]]:
        """Return the path parameters if the request hits this endpoint, else None."""
        if method.upper() != self.method:
            return None
        found = _compile(self.path).fullmatch(path)
        if found is None:
            return None
        return found.groupdict()

    def to_openapi(self) -> dict[str, Any]:
        """Return the OpenAPI operation object of this endpoint."""
        operation: dict[str, Any] = {
            "tags": [self.tag],
            "summary": self.summary,
            "description": self.description,
            "operationId": self.operation_id,
        }
        if self.parameters:
            operation["parameters"] = [parameter._openapi() for parameter in self.parameters]
        if self.request_body is not None:
            body: dict[str, Any] = {
                "content": {
                    self.request_content_type: {
                        "schema": _schema_ref(self.request_body, self.request_body_array)
                    }
                },
                "required": True,
            }
            if self.request_body_description is not None:
                body["description"] = self.request_body_description
            operation["requestBody"] = body
        operation["responses"] = {
            str(response.status): response._openapi() for response in self.responses
        }
        return operation