"""The full route table, request routing and the OpenAPI document."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Optional
from urllib.parse import urlsplit

from adplatform.api import ads, advertisers, campaigns, clients, statistics, time
from adplatform.api.spec import Endpoint

OPENAPI_VERSION = "3.1.0"
OPENAPI_JSON_PATH = "/openapi.json"
SWAGGER_UI_PATH = "/swagger-ui/{_}*"

INFO = {
    "title": "PROD Backend 2025 Advertising Platform API",
    "description": (
        "API для управления данными клиентов, рекламодателей, рекламными кампаниями, "
        'показом объявлений, статистикой и управлением "текущим днём" в системе.'
    ),
    "version": "1.1.0",
}

SERVERS = [{"url": "http://localhost:8080", "description": "Dev server"}]

TAGS = [
    {
        "name": "Clients",
        "description": (
            "Управление клиентами: создание и обновление информации о клиентах."
        ),
    },
    {
        "name": "Advertisers",
        "description": (
            "Управление рекламодателями и ML скорами для определения релевантности."
        ),
    },
    {
        "name": "Campaigns",
        "description": (
            "Управление рекламными кампаниями: создание, обновление, удаление и "
            "получение списка кампаний."
        ),
    },
    {
        "name": "Campaign images",
        "description": (
            "Управление изображениями рекламных кампаний: загрузка, обновление, "
            "удаление и получение изображения рекламной кампании."
        ),
    },
    {
        "name": "Ads",
        "description": "Показ рекламных объявлений клиентам и фиксация кликов.",
    },
    {
        "name": "Statistics",
        "description": (
            "Получение статистики по кампаниям и рекламодателям, а также ежедневной "
            "статистики."
        ),
    },
    {
        "name": "Time",
        "description": "Управление текущим днём (эмуляция времени) в системе.",
    },
]

SCHEMAS: dict[str, Any] = {
    "ApiError": {
        "type": "object",
        "required": ["error", "description"],
        "properties": {
            "error": {"type": "string"},
            "description": {"type": "string"},
        },
    },
    "ClickRequest": {
        "type": "object",
        "required": ["client_id"],
        "properties": {
            "client_id": {
                "type": "string",
                "format": "uuid",
                "description": "UUID клиента, совершившего клик по объявлению.",
            }
        },
    },
    "UploadForm": {
        "type": "object",
        "required": ["file"],
        "properties": {
            "file": {
                "type": "string",
                "format": "binary",
                "contentMediaType": "application/octet-stream",
                "description": (
                    "Изображение, которое будет загружено. Размер не должен превышать "
                    "5.7 МБ. Разрешённые MIME типы: `image/jpeg`, `image/pjpeg`, "
                    "`image/png`, `image/webp`"
                ),
            }
        },
    },
}


def all_endpoints() -> list[Endpoint]:
    """Every endpoint of the API, in registration order."""
    return [
        *clients.endpoints(),
        *advertisers.endpoints(),
        *campaigns.endpoints(),
        *ads.endpoints(),
        *statistics.endpoints(),
        *time.endpoints(),
    ]


@dataclass(frozen=True)
class RouteMatch:
    """An endpoint hit by a request, with the values of its path parameters."""

    endpoint: Endpoint
    params: dict[str, str] = field(default_factory=dict)


class Router:
    """Finds the endpoint serving a request."""

    def __init__(self, endpoints: Optional[Iterable[Endpoint]] = None) -> None:
        self.endpoints = list(all_endpoints() if endpoints is None else endpoints)

    def resolve(self, method: str, path: str) -> Optional[RouteMatch]:
        """Return the first endpoint matching the request, or None if no route does.

        A query string in ``path`` is ignored.
        """
        route = urlsplit(path).path
        for endpoint in self.endpoints:
            params = endpoint.match(method, route)
            if params is not None:
                return RouteMatch(endpoint, params)
        return None


def build_openapi() -> dict[str, Any]:
    """Return the OpenAPI document of the whole API."""
    paths: dict[str, dict[str, Any]] = {}
    for endpoint in all_endpoints():
        paths.setdefault(endpoint.path, {})[endpoint.method.lower()] = endpoint.to_openapi()
    return {
        "openapi": OPENAPI_VERSION,
        "info": dict(INFO),
        "servers": [dict(server) for server in SERVERS],
        "tags": [dict(tag) for tag in TAGS],
        "paths": paths,
        "components": {"schemas": {name: dict(s) for name, s in SCHEMAS.items()}},
    }