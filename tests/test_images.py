from uuid import UUID

import pytest

from adplatform.errors import CustomApiError, FileHostError
from adplatform.images import (
    ALLOWED_IMAGE_TYPES,
    MAX_IMAGE_SIZE,
    ImageStore,
    StoredImage,
    image_object_name,
    validate_image,
)

ADVERTISER = UUID("00000000-0000-0000-0000-000000000001")
CAMPAIGN = UUID("00000000-0000-0000-0000-000000000002")


def test_too_large():
    with pytest.raises(CustomApiError) as info:
        validate_image(MAX_IMAGE_SIZE + 1, "image/png")
    assert info.value.error_response() == (
        413,
        {"error": "file_too_large", "description": "File size exceeds the limit of 5.7 MB"},
    )


@pytest.mark.parametrize("subtype", ALLOWED_IMAGE_TYPES)
def test_allowed_types_at_limit(subtype):
    assert validate_image(MAX_IMAGE_SIZE, f"image/{subtype}") is None


def test_type_with_parameters_and_case():
    assert validate_image(10, "IMAGE/PNG; charset=binary") is None
    with pytest.raises(CustomApiError):
        validate_image(10, "image/gif; charset=binary")


@pytest.mark.parametrize("content_type", ["image/gif", "text/plain", "application/png"])
def test_rejected_types(content_type):
    with pytest.raises(CustomApiError) as info:
        validate_image(10, content_type)
    status, body = info.value.error_response()
    assert status == 415
    assert body["error"] == "invalid_mime_type"
    assert body["description"].endswith(f"but got `{content_type}`")
    assert "`image/jpeg`, `image/pjpeg`, `image/png`, `image/webp`" in body["description"]


def test_missing_type():
    with pytest.raises(CustomApiError) as info:
        validate_image(10, None)
    assert info.value.error_response()[1]["description"].endswith("but got ``")


def test_object_name():
    assert (
        image_object_name(ADVERTISER, CAMPAIGN)
        == "00000000-0000-0000-0000-000000000001_00000000-0000-0000-0000-000000000002"
    )


def test_round_trip():
    store = ImageStore("images")
    store.put_image(ADVERTISER, CAMPAIGN, b"\x89PNG", "image/png")
    assert store.get_image(ADVERTISER, CAMPAIGN) == StoredImage("image/png", b"\x89PNG")
    assert store.get_image(CAMPAIGN, ADVERTISER) is None


def test_replace_and_remove():
    store = ImageStore("images")
    store.put_image(ADVERTISER, CAMPAIGN, b"a", "image/png")
    store.put_image(ADVERTISER, CAMPAIGN, b"b", "image/webp")
    assert store.get_image(ADVERTISER, CAMPAIGN) == StoredImage("image/webp", b"b")
    store.remove_image(ADVERTISER, CAMPAIGN)
    assert store.get_image(ADVERTISER, CAMPAIGN) is None
    store.remove_image(ADVERTISER, CAMPAIGN)
    assert store.get_image(ADVERTISER, CAMPAIGN) is None


def test_shared_storage_and_existing_bucket():
    storage = {}
    ImageStore("images", storage).put_image(ADVERTISER, CAMPAIGN, b"x", "image/png")
    again = ImageStore("images", storage)
    assert again.get_image(ADVERTISER, CAMPAIGN) == StoredImage("image/png", b"x")


def test_remove_bucket():
    storage = {}
    store = ImageStore("images", storage)
    store.put_image(ADVERTISER, CAMPAIGN, b"x", "image/png")
    with pytest.raises(FileHostError):
        store.remove_bucket()
    store.remove_image(ADVERTISER, CAMPAIGN)
    store.remove_bucket()
    assert "images" not in storage
    assert store.get_image(ADVERTISER, CAMPAIGN) is None
    with pytest.raises(FileHostError):
        store.put_image(ADVERTISER, CAMPAIGN, b"x", "image/png")
    with pytest.raises(FileHostError):
        store.remove_bucket()