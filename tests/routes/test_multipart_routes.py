"""Tests for the multipart upload endpoints."""

import base64

from storage_gateway.domain import UploadedPart
from storage_gateway.exceptions import StorageNotFoundError

UPLOAD = {"bucket": "videos", "key": "big.mp4", "uploadId": "u-1"}


def test_initiate(client, storage):
    storage.create_multipart_upload.return_value = "u-1"

    response = client.post(
        "/s3/multipart/initiate", json={"bucket": "videos", "key": "big.mp4"}
    )

    assert response.status_code == 200
    assert response.json() == {"uploadId": "u-1"}


def test_upload_part_decodes_body(client, storage):
    storage.upload_part.return_value = UploadedPart(etag='"abc"', part_number=1)

    response = client.post(
        "/s3/multipart/upload-part",
        json={
            **UPLOAD,
            "partNumber": 1,
            "bodyBase64": base64.b64encode(b"chunk").decode(),
        },
    )

    assert response.status_code == 200
    assert response.json() == {"ETag": '"abc"', "PartNumber": 1}
    storage.upload_part.assert_called_once_with("videos", "big.mp4", "u-1", 1, b"chunk")


def test_upload_part_rejects_invalid_base64(client, storage):
    response = client.post(
        "/s3/multipart/upload-part",
        json={**UPLOAD, "partNumber": 1, "bodyBase64": "not base64!"},
    )

    assert response.status_code == 400
    assert len(response.json()["errors"]) == 1
    storage.upload_part.assert_not_called()


def test_complete_marks_object(client, storage, cache):
    response = client.post(
        "/s3/multipart/complete",
        json={**UPLOAD, "parts": [{"ETag": '"abc"', "PartNumber": 1}]},
    )

    assert response.status_code == 200
    assert response.json()["message"] == "Multipart upload completed successfully"
    assert cache.object_exists_cached("videos", "big.mp4") is True


def test_complete_with_malformed_part(client, storage):
    response = client.post(
        "/s3/multipart/complete",
        json={**UPLOAD, "parts": [{"PartNumber": 1}]},
    )

    assert response.status_code == 400
    storage.complete_multipart_upload.assert_not_called()


def test_abort(client, storage):
    response = client.post("/s3/multipart/abort", json=UPLOAD)

    assert response.status_code == 200
    assert response.json()["message"] == 'Multipart upload aborted for "videos/big.mp4"'
    storage.abort_multipart_upload.assert_called_once_with("videos", "big.mp4", "u-1")


def test_abort_unknown_upload_is_400(client, storage):
    storage.abort_multipart_upload.side_effect = StorageNotFoundError("u-1")

    response = client.post("/s3/multipart/abort", json=UPLOAD)

    assert response.status_code == 400
    assert response.json()["message"] == "Failed to abort multipart upload"


def test_upload_part_accepts_wrapped_base64(client, storage):
    storage.upload_part.return_value = UploadedPart(etag='"abc"', part_number=2)
    encoded = base64.encodebytes(b"x" * 100).decode()

    response = client.post(
        "/s3/multipart/upload-part",
        json={**UPLOAD, "partNumber": 2, "bodyBase64": f"  {encoded}  "},
    )

    assert "\n" in encoded
    assert response.status_code == 200
    assert storage.upload_part.call_args.args[4] == b"x" * 100
