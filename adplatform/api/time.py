"""Endpoint that moves the emulated current day."""

from __future__ import annotations

from adplatform.api.spec import Endpoint, ResponseSpec, join_paths

SCOPE = "/time"
TAG = "Time"


def _advance() -> Endpoint:
    return Endpoint(
        method="POST",
        path=join_paths(SCOPE, "/advance"),
        operation_id="advance_day",
        tag=TAG,
        summary="Установка текущей даты",
        description="Устанавливает текущий день в системе в заданную дату.",
        request_body="Time",
        responses=(
            ResponseSpec(200, "Текущая дата обновлена", body="Time"),
            ResponseSpec(400, "Новая дата раньше текущей", body="ApiError"),
        ),
    )


def endpoints() -> list[Endpoint]:
    """Endpoints under ``/time``."""
    return [_advance()]