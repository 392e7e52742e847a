"""Campaign images: upload checks and object storage."""

from __future__ import annotations

from collections.abc import MutableMapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Optional
from uuid import UUID

from adplatform.errors import CustomApiError, FileHostError

MAX_IMAGE_SIZE = int(5.7 * 1024 * 1024)
ALLOWED_IMAGE_TYPES = ("jpeg", "pjpeg", "png", "webp")


def _mime_type_error(got: str) -> CustomApiError:
    expected = ", ".join(f"`image/{subtype}`" for subtype in ALLOWED_IMAGE_TYPES)
    return CustomApiError(
        "invalid_mime_type",
        HTTPStatus.UNSUPPORTED_MEDIA_TYPE,
        "Invalide MIME type: expected file of one of the folowing mime types: "
        f"{expected}, but got `{got}`",
    )


def validate_image(size: int, content_type: Optional[str]) -> None:
    """Raise ``CustomApiError`` if an upload is too large or not an allowed image."""
    if size > MAX_IMAGE_SIZE:
        raise CustomApiError(
            "file_too_large",
            HTTPStatus.REQUEST_ENTITY_TOO_LARGE,
            "File size exceeds the limit of 5.7 MB",
        )
    if content_type is None:
        raise _mime_type_error("")
    essence = content_type.split(";", 1)[0].strip().lower()
    main_type, _, subtype = essence.partition("/")
    if main_type != "image" or subtype not in ALLOWED_IMAGE_TYPES:
        raise _mime_type_error(essence)


def image_object_name(advertiser_id: UUID, campaign_id: UUID) -> str:
    """Name of the stored object holding a campaign's image."""
    return f"{advertiser_id}_{campaign_id}"


@dataclass(frozen=True)
class StoredImage:
    """An image with its MIME type."""

    content_type: str
    data: bytes


class ImageStore:
    """Images kept in one bucket of an object storage.

    ``storage`` maps bucket names to the objects of each bucket; the bucket
    is created when missing.
    """

    def __init__(
        self,
        bucket_name: str,
        storage: Optional[MutableMapping[str, MutableMapping[str, StoredImage]]] = None,
    ) -> None:
        self.bucket_name = bucket_name
        self._storage = {} if storage is None else storage
        self._storage.setdefault(bucket_name, {})

    def _bucket(self) -> MutableMapping[str, StoredImage]:
        try:
            return self._storage[self.bucket_name]
        except KeyError:
            raise FileHostError("The specified bucket does not exist") from None

    def put_image(
        self, advertiser_id: UUID, campaign_id: UUID, data: bytes, content_type: str
    ) -> None:
        """Store or replace a campaign's image."""
        self._bucket()[image_object_name(advertiser_id, campaign_id)] = StoredImage(
            content_type, bytes(data)
        )

    def get_image(self, advertiser_id: UUID, campaign_id: UUID) -> Optional[StoredImage]:
        """Return a campaign's image, or None if there is none."""
        bucket = self._storage.get(self.bucket_name)
        if bucket is None:
            return None
        return bucket.get(image_object_name(advertiser_id, campaign_id))

    def remove_image(self, advertiser_id: UUID, campaign_id: UUID) -> None:
        """Delete a campaign's image; deleting a missing image is not an error."""
        self._bucket().pop(image_object_name(advertiser_id, campaign_id), None)

    def remove_bucket(self) -> None:
        """Delete the bucket, which must be empty."""
        if self._bucket():
            raise FileHostError("The bucket you tried to delete is not empty")
        del self._storage[self.bucket_name]