"""Statistics endpoints for campaigns and advertisers."""

from __future__ import annotations

from adplatform.api.spec import Endpoint, Parameter, ResponseSpec, join_paths

SCOPE = "/statistics"
TAG = "Statistics"


def _campaign_endpoints() -> list[Endpoint]:
    base = join_paths(SCOPE, "/campaigns", "/{campaign_id}")
    missing = ResponseSpec(
        404, "Рекламной кампании с указанным UUID не существует.", body="ApiError"
    )
    return [
        Endpoint(
            method="GET",
            path=base,
            operation_id="get_campaign_stats",
            tag=TAG,
            summary="Получение статистики по рекламной кампании",
            description=(
                "Возвращает агрегированную статистику (показы, переходы, затраты и "
                "конверсию) для заданной рекламной кампании."
            ),
            parameters=(
                Parameter(
                    "campaign_id",
                    "UUID рекламной кампании, для которой запрашивается статистика.",
                ),
            ),
            responses=(
                ResponseSpec(
                    200, "Статистика по рекламной кампании успешно получена.", body="Stats"
                ),
                missing,
            ),
        ),
        Endpoint(
            method="GET",
            path=join_paths(base, "/daily"),
            operation_id="get_campaign_daily_stats",
            tag=TAG,
            summary="Получение ежедневной статистики по рекламной кампании",
            description=(
                "Возвращает массив ежедневной статистики для указанной рекламной кампании."
            ),
            parameters=(
                Parameter(
                    "campaign_id",
                    "UUID рекламной кампании, для которой запрашивается ежедневная "
                    "статистика.",
                ),
            ),
            responses=(
                ResponseSpec(
                    200,
                    "Ежедневная статистика по рекламной кампании успешно получена.",
                    body="Stats",
                ),
                missing,
            ),
        ),
    ]


def _advertiser_endpoints() -> list[Endpoint]:
    base = join_paths(SCOPE, "/advertisers", "/{advertiser_id}")
    missing = ResponseSpec(
        404, "Рекламодателя с указанным UUID не существует.", body="ApiError"
    )
    return [
        Endpoint(
            method="GET",
            path=base,
            operation_id="get_advertiser_campaigns_stats",
            tag=TAG,
            summary=(
                "Получение агрегированной статистики по всем кампаниям рекламодателя"
            ),
            description=(
                "Возвращает сводную статистику по всем рекламным кампаниям, "
                "принадлежащим заданному рекламодателю."
            ),
            parameters=(
                Parameter(
                    "advertiser_id",
                    "UUID рекламодателя, для которого запрашивается статистика.",
                ),
            ),
            responses=(
                ResponseSpec(
                    200,
                    "Агрегированная статистика по всем кампаниям рекламодателя успешно "
                    "получена.",
                    body="Stats",
                ),
                missing,
            ),
        ),
        Endpoint(
            method="GET",
            path=join_paths(base, "/daily"),
            operation_id="get_advertiser_daily_stats",
            tag=TAG,
            summary=(
                "Получение ежедневной агрегированной статистики по всем кампаниям "
                "рекламодателя"
            ),
            description=(
                "Возвращает массив ежедневной сводной статистики по всем рекламным "
                "кампаниям заданного рекламодателя."
            ),
            parameters=(
                Parameter(
                    "advertiser_id",
                    "UUID рекламодателя, для которого запрашивается ежедневная "
                    "статистика по кампаниям.",
                ),
            ),
            responses=(
                ResponseSpec(
                    200,
                    "Ежедневная агрегированная статистика успешно получена.",
                    body="Stats",
                ),
                missing,
            ),
        ),
    ]


def endpoints() -> list[Endpoint]:
    """Endpoints under ``/statistics``."""
    return _campaign_endpoints() + _advertiser_endpoints()