"""Tests for attachment paths and the S3 adapter."""

from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from zelene.shared.adapters.s3_adapter import S3Adapter
from zelene.shared.core.exceptions import ExternalServiceError
from zelene.shared.services.storage_service import StorageService, build_path, extension_of, folder_for
from tests.conftest import InMemoryS3


@pytest.mark.parametrize(
    "content_type, folder",
    [
        ("image/png", "images"),
        ("IMAGE/JPEG", "images"),
        ("application/pdf", "pdfs"),
        ("text/csv", "texts"),
        ("application/json", "applications"),
        ("application/vnd.openxmlformats-officedocument.wordprocessingml.document", "documents"),
        ("video/mp4", "others"),
    ],
)
def test_folder_for_content_type(content_type, folder):
    assert folder_for(content_type) == folder


@pytest.mark.parametrize(
    "filename, ext",
    [("screen.png", "png"), ("archive.tar.gz", "gz"), ("README", "unknown"), ("trailing.", "unknown")],
)
def test_extension_of(filename, ext):
    assert extension_of(filename) == ext


def test_paths_are_unique():
    first = build_path("screen.png", "image/png")
    second = build_path("screen.png", "image/png")

    assert first != second
    assert first.startswith("images/") and first.endswith(".png")


async def test_upload_returns_stored_path():
    backend = InMemoryS3()
    service = StorageService(backend)

    path = await service.upload(b"data", "clip", "video/mp4")

    assert path.startswith("others/") and path.endswith(".unknown")
    assert backend.objects[path] == (b"data", "video/mp4")
    assert await service.get_url(path) == f"https://storage.test/{path}?signature=test"


def test_s3_upload_errors_become_service_errors():
    adapter = S3Adapter(bucket="attachments")
    adapter._client = MagicMock()
    adapter._client.put_object.side_effect = ClientError(
        {"Error": {"Code": "AccessDenied", "Message": "denied"}},
        "PutObject",
    )

    with pytest.raises(ExternalServiceError):
        adapter.put_object("images/a.png", b"data", "image/png")


def test_s3_presigned_url_uses_bucket_and_key():
    adapter = S3Adapter(bucket="attachments")
    adapter._client = MagicMock()
    adapter._client.generate_presigned_url.return_value = "https://signed"

    assert adapter.presigned_url("pdfs/a.pdf", expires_in=60) == "https://signed"
    adapter._client.generate_presigned_url.assert_called_once_with(
        "get_object",
        Params={"Bucket": "attachments", "Key": "pdfs/a.pdf"},
        ExpiresIn=60,
    )
