"""Tests for the bucket endpoints."""

from storage_gateway.domain import BucketInfo
from storage_gateway.exceptions import StorageError, StorageNotFoundError


class TestCreateBucket:
    def test_creates_bucket(self, client, storage):
        response = client.post("/s3/bucket", json={"bucket": "photos"})

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Bucket created"}
        storage.create_bucket.assert_called_once_with("photos")

    def test_missing_bucket_is_rejected(self, client, storage):
        response = client.post("/s3/bucket", json={})

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert len(body["errors"]) == 1
        assert body["errors"][0]["message"].startswith(
            "Invalid parameters for create_bucket"
        )
        storage.create_bucket.assert_not_called()

    def test_storage_failure(self, client, storage):
        storage.create_bucket.side_effect = StorageError("BucketAlreadyOwnedByYou")

        response = client.post("/s3/bucket", json={"bucket": "photos"})

        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Bucket creation failed"
        assert body["errors"] == [
            {
                "message": "create_bucket failed",
                "context": {"bucket": "photos", "error": "BucketAlreadyOwnedByYou"},
            }
        ]

    def test_errors_do_not_leak_between_requests(self, client, storage):
        storage.create_bucket.side_effect = [StorageError("first"), None, StorageError("third")]

        client.post("/s3/bucket", json={"bucket": "a"})
        assert client.post("/s3/bucket", json={"bucket": "b"}).status_code == 200
        response = client.post("/s3/bucket", json={"bucket": "c"})

        assert [e["context"]["error"] for e in response.json()["errors"]] == ["third"]

    def test_malformed_json(self, client):
        response = client.post(
            "/s3/bucket",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid request"


class TestListBuckets:
    def test_lists_buckets(self, client, storage):
        storage.list_buckets.return_value = [BucketInfo(name="photos")]

        response = client.get("/s3/buckets")

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Buckets fetched successfully"
        assert body["buckets"] == [{"name": "photos", "creationDate": None}]

    def test_unexpected_error_is_500(self, client, storage):
        storage.list_buckets.side_effect = RuntimeError("boom")

        response = client.get("/s3/buckets")

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "message": "Unexpected error occurred",
            "errors": [],
            "error": "boom",
        }


class TestBucketExists:
    def test_exists(self, client, storage):
        response = client.get("/s3/bucket/exists", params={"bucket": "photos"})

        assert response.json() == {
            "success": True,
            "message": "Bucket exists",
            "exists": True,
        }

    def test_does_not_exist(self, client, storage):
        storage.head_bucket.side_effect = StorageNotFoundError("photos")

        response = client.get("/s3/bucket/exists", params={"bucket": "photos"})

        assert response.status_code == 200
        assert response.json()["exists"] is False
        assert response.json()["message"] == "Bucket does not exist"

    def test_answer_is_cached_across_requests(self, client, storage):
        client.get("/s3/bucket/exists", params={"bucket": "photos"})
        client.get("/s3/bucket/exists", params={"bucket": "photos"})

        storage.head_bucket.assert_called_once_with("photos")

    def test_fresh_bypasses_cache(self, client, storage, cache):
        cache.mark_bucket("photos", False)

        response = client.get(
            "/s3/bucket/exists", params={"bucket": "photos", "fresh": "true"}
        )

        assert response.json()["exists"] is True
        storage.head_bucket.assert_called_once_with("photos")


class TestDeleteBucket:
    def test_deletes_bucket(self, client, storage, cache):
        cache.mark_bucket("photos", True)

        response = client.request("DELETE", "/s3/bucket", json={"bucket": "photos"})

        assert response.status_code == 200
        assert response.json()["message"] == "Bucket deleted"
        assert cache.bucket_exists_cached("photos") is None

    def test_missing_bucket_is_a_storage_failure(self, client, storage):
        storage.delete_bucket.side_effect = StorageNotFoundError("gone")

        response = client.request("DELETE", "/s3/bucket", json={"bucket": "gone"})

        assert response.status_code == 400
        assert response.json()["message"] == "Bucket deletion failed"
