"""Campaign endpoints of an advertiser, including campaign images."""

from __future__ import annotations

from adplatform.api.spec import Endpoint, Parameter, ResponseSpec, join_paths

SCOPE = join_paths("/advertisers", "/{advertiser_id}/campaigns")
BY_ID_SCOPE = join_paths(SCOPE, "/{campaign_id}")
IMAGE_SCOPE = join_paths(BY_ID_SCOPE, "/image")
TAG = "Campaigns"
IMAGE_TAG = "Campaign images"
MULTIPART_CONTENT_TYPE = "multipart/form-data"

_OWNER_DESCRIPTION = "UUID рекламодателя, которому принадлежит кампания."
_IMAGE_CAMPAIGN_DESCRIPTION = (
    "UUID рекламной кампании, которой необходимо установить данное изображение."
)
_MISSING_CAMPAIGN = ResponseSpec(
    404,
    "Рекламодателя или рекламной кампании с указанным UUID не существует.",
    body="ApiError",
)
_MISSING_ADVERTISER = ResponseSpec(
    404, "Рекламодателя с таким ID не существует.", body="ApiError"
)


def _create() -> Endpoint:
    return Endpoint(
        method="POST",
        path=SCOPE,
        operation_id="create_campaign",
        tag=TAG,
        summary="Создание рекламной кампании",
        description="Создаёт новую рекламную кампанию для указанного рекламодателя.",
        parameters=(
            Parameter(
                "advertiser_id", "UUID рекламодателя, для которого создаётся кампания."
            ),
        ),
        request_body="CreateCampaign",
        request_body_description="Объект с данными для создания рекламной кампании.",
        responses=(
            ResponseSpec(201, "Рекламная кампания успешно создана.", body="Campaign"),
            ResponseSpec(
                400, "Объект рекламной кампании не соответствует модели", body="ApiError"
            ),
            _MISSING_ADVERTISER,
        ),
    )


def _list() -> Endpoint:
    return Endpoint(
        method="GET",
        path=SCOPE,
        operation_id="list_campaigns",
        tag=TAG,
        summary="Получение рекламных кампаний рекламодателя c пагинацией",
        description=(
            "Возвращает список рекламных кампаний для указанного рекламодателя "
            "с пагинацией."
        ),
        parameters=(
            Parameter(
                "advertiser_id",
                "UUID рекламодателя, для которого запрашиваются кампании.",
            ),
            Parameter(
                "size",
                "Размер страницы.",
                location="query",
                required=False,
                schema_type="integer",
                schema_format=None,
            ),
            Parameter(
                "page",
                "Номер страницы.",
                location="query",
                required=False,
                schema_type="integer",
                schema_format=None,
            ),
        ),
        responses=(
            ResponseSpec(
                200, "Список рекламных кампаний рекламодателя.", body="Campaign", array=True
            ),
            ResponseSpec(400, "Некорректные параметры пагинации.", body="ApiError"),
            _MISSING_ADVERTISER,
        ),
    )


def _get() -> Endpoint:
    return Endpoint(
        method="GET",
        path=BY_ID_SCOPE,
        operation_id="get_campaign_by_id",
        tag=TAG,
        summary="Получение кампании по ID",
        description="Возвращает информацию о кампании по её ID.",
        parameters=(
            Parameter("advertiser_id", _OWNER_DESCRIPTION),
            Parameter(
                "campaign_id", "UUID рекламной кампании, которую необходимо получить."
            ),
        ),
        responses=(
            ResponseSpec(200, "Кампания успешно получена.", body="Campaign"),
            _MISSING_CAMPAIGN,
        ),
    )


def _update() -> Endpoint:
    return Endpoint(
        method="PUT",
        path=BY_ID_SCOPE,
        operation_id="update_campaign",
        tag=TAG,
        summary="Обновление рекламной кампании",
        description="Обновляет разрешённые параметры рекламной кампании до её старта.",
        parameters=(
            Parameter("advertiser_id", _OWNER_DESCRIPTION),
            Parameter(
                "campaign_id", "UUID рекламной кампании, которую необходимо обновить."
            ),
        ),
        request_body="CampaignUpdate",
        request_body_description="Объект с обновлёнными данными рекламной кампании.",
        responses=(
            ResponseSpec(204, "Рекламная кампания успешно обновлена.", body="Campaign"),
            ResponseSpec(
                400, "Объект рекламной кампании не соответствует модели", body="ApiError"
            ),
            _MISSING_CAMPAIGN,
        ),
    )


def _delete() -> Endpoint:
    return Endpoint(
        method="DELETE",
        path=BY_ID_SCOPE,
        operation_id="delete_campaign",
        tag=TAG,
        summary="Удаление рекламной кампании",
        description="Удаляет рекламную кампанию рекламодателя по заданному campaign_id.",
        parameters=(
            Parameter("advertiser_id", _OWNER_DESCRIPTION),
            Parameter(
                "campaign_id", "UUID рекламной кампании, которую необходимо удалить."
            ),
        ),
        responses=(
            ResponseSpec(204, "Рекламная кампания успешно удалена.", body="Campaign"),
            _MISSING_CAMPAIGN,
        ),
    )


def _image_parameters() -> tuple[Parameter, ...]:
    return (
        Parameter("advertiser_id", _OWNER_DESCRIPTION),
        Parameter("campaign_id", _IMAGE_CAMPAIGN_DESCRIPTION),
    )


def _put_image() -> Endpoint:
    return Endpoint(
        method="PUT",
        path=IMAGE_SCOPE,
        operation_id="set_campaign_image",
        tag=IMAGE_TAG,
        summary="Установка изображения рекламной кампании",
        description="Добавляет изображение к рекламной кампании",
        parameters=_image_parameters(),
        request_body="UploadForm",
        request_content_type=MULTIPART_CONTENT_TYPE,
        responses=(
            ResponseSpec(204, "Изображение успешно установлено."),
            ResponseSpec(415, "MIME тип изображения не разрешён", body="ApiError"),
            ResponseSpec(413, "Размер изображения превосходит максимально допустимый"),
            ResponseSpec(
                404,
                "Рекламодателя или рекламной кампании с указанным UUID не существует.",
                body="ApiError",
            ),
        ),
    )


def _get_image() -> Endpoint:
    return Endpoint(
        method="GET",
        path=IMAGE_SCOPE,
        operation_id="get_campaign_image",
        tag=IMAGE_TAG,
        summary="Получение изображения рекламной кампании",
        description="Получает изображение к рекламной кампании",
        parameters=_image_parameters(),
        responses=(
            ResponseSpec(204, "Изображение успешно получено."),
            ResponseSpec(
                404,
                "Рекламодателя, рекламной кампании или с указанным UUID или её "
                "изображения не существует.",
                body="ApiError",
            ),
        ),
    )


def _delete_image() -> Endpoint:
    return Endpoint(
        method="DELETE",
        path=IMAGE_SCOPE,
        operation_id="delete_campaign_image",
        tag=IMAGE_TAG,
        summary="Удаление изображения рекламной кампании",
        description="Удаляет изображение рекламной кампании",
        parameters=_image_parameters(),
        responses=(
            ResponseSpec(204, "Изображение успешно удалено."),
            _MISSING_CAMPAIGN,
        ),
    )


def endpoints() -> list[Endpoint]:
    """Endpoints under ``/advertisers/{advertiser_id}/campaigns``."""
    return [
        _create(),
        _list(),
        _get(),
        _update(),
        _delete(),
        _put_image(),
        _get_image(),
        _delete_image(),
    ]