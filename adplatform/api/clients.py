"""Client endpoints: bulk upsert and lookup by id."""

from __future__ import annotations

from adplatform.api.spec import Endpoint, Parameter, ResponseSpec, join_paths

SCOPE = "/clients"
TAG = "Clients"


def _bulk() -> Endpoint:
    return Endpoint(
        method="POST",
        path=join_paths(SCOPE, "/bulk"),
        operation_id="upsert_clients",
        tag=TAG,
        summary="Массовое создание/обновление клиентов",
        description="Создаёт новых или обновляет существующих клиентов",
        request_body="Client",
        request_body_array=True,
        responses=(
            ResponseSpec(
                201, "Успешное создание/обновление клиентов", body="Client", array=True
            ),
            ResponseSpec(400, "Объект клиента не соответствует модели", body="ApiError"),
        ),
    )


def _by_id() -> Endpoint:
    return Endpoint(
        method="GET",
        path=join_paths(SCOPE, "/{client_id}"),
        operation_id="get_client_by_id",
        tag=TAG,
        summary="Получение клиента по ID",
        description="Возвращает информацию о клиенте по его ID.",
        parameters=(Parameter("client_id", "UUID клиента."),),
        responses=(
            ResponseSpec(200, "Информация о клиенте успешно получена.", body="Client"),
            ResponseSpec(
                404, "Клиента с указанным UUID не существует.", body="ApiError"
            ),
        ),
    )


def endpoints() -> list[Endpoint]:
    """Endpoints under ``/clients``."""
    return [_by_id(), _bulk()]