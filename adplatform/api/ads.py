"""Ad serving and click recording endpoints."""

from __future__ import annotations

from adplatform.api.spec import Endpoint, Parameter, ResponseSpec, join_paths

SCOPE = "/ads"
TAG = "Ads"


def _get_for_client() -> Endpoint:
    return Endpoint(
        method="GET",
        path=join_paths(SCOPE, ""),
        operation_id="get_ad_for_client",
        tag=TAG,
        summary="Получение рекламного объявления для клиента",
        description=(
            "Возвращает рекламное объявление, подходящее для показа клиенту с учетом "
            "таргетинга и ML скора."
        ),
        parameters=(
            Parameter(
                "client_id",
                "UUID клиента, запрашивающего показ объявления.",
                location="query",
            ),
        ),
        responses=(
            ResponseSpec(200, "Рекламное объявление успешно возвращено.", body="Ad"),
            ResponseSpec(204, "Не удалось найти подходящее рекламное объявление."),
            ResponseSpec(
                404, "Клиента с указанным UUID не существует.", body="ApiError"
            ),
        ),
    )


def _click() -> Endpoint:
    return Endpoint(
        method="POST",
        path=join_paths(SCOPE, "/{ad_id}", "/click"),
        operation_id="record_ad_click",
        tag=TAG,
        summary="Фиксация перехода по рекламному объявлению",
        description="Фиксирует клик (переход) клиента по рекламному объявлению.",
        parameters=(
            Parameter(
                "ad_id",
                "UUID рекламного объявления (идентификатор кампании), по которому "
                "совершен клик.",
            ),
        ),
        request_body="ClickRequest",
        responses=(
            ResponseSpec(204, "Переход по рекламному объявлению успешно зафиксирован."),
            ResponseSpec(
                409, "Клиент не видел данное рекламное объявление", body="ApiError"
            ),
            ResponseSpec(
                404,
                "Клиента или рекламного объявления с указанным UUID не существует.",
                body="ApiError",
            ),
        ),
    )


def endpoints() -> list[Endpoint]:
    """Endpoints under ``/ads``."""
    return [_get_for_client(), _click()]