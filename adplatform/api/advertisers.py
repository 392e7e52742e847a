"""Advertiser endpoints and ML score upsert."""

from __future__ import annotations

from adplatform.api.spec import Endpoint, Parameter, ResponseSpec, join_paths

SCOPE = "/advertisers"
TAG = "Advertisers"


def _by_id() -> Endpoint:
    return Endpoint(
        method="GET",
        path=join_paths(SCOPE, "/{advertiser_id}"),
        operation_id="get_advertiser_by_id",
        tag=TAG,
        summary="Получение рекламодателя по ID",
        description="Возвращает информацию о рекламодателе по его ID.",
        parameters=(Parameter("advertiser_id", "UUID рекламодателя."),),
        responses=(
            ResponseSpec(
                200, "Информация о рекламодателе успешно получена.", body="Advertiser"
            ),
            ResponseSpec(
                404, "Рекламодателя с указанным UUID не существует.", body="ApiError"
            ),
        ),
    )


def _bulk() -> Endpoint:
    return Endpoint(
        method="POST",
        path=join_paths(SCOPE, "/bulk"),
        operation_id="upsert_advertisers",
        tag=TAG,
        summary="Массовое создание/обновление рекламодателей",
        description="Создаёт новых или обновляет существующих рекламодателей",
        request_body="Advertiser",
        request_body_array=True,
        responses=(
            ResponseSpec(
                201,
                "Успешное создание/обновление рекламодателей",
                body="Advertiser",
                array=True,
            ),
            ResponseSpec(
                400, "Объект рекламодателя не соответствует модели", body="ApiError"
            ),
        ),
    )


def _ml_scores() -> Endpoint:
    return Endpoint(
        method="POST",
        path=join_paths("/ml-scores"),
        operation_id="upsert_ml_score",
        tag=TAG,
        summary="Добавление или обновление ML скора",
        description=(
            "Добавляет или обновляет ML скор для указанной пары клиент-рекламодатель."
        ),
        request_body="MLScore",
        request_body_description=(
            "Объект с данными ML скора, включая client_id, advertiser_id и значение скора."
        ),
        responses=(
            ResponseSpec(200, "ML скор успешно добавлен или обновлён."),
            ResponseSpec(
                404,
                "Рекламодателя или клиента с указанным UUID не существует.",
                body="ApiError",
            ),
        ),
    )


def endpoints() -> list[Endpoint]:
    """Endpoints under ``/advertisers`` and the ``/ml-scores`` endpoint."""
    return [_by_id(), _bulk(), _ml_scores()]