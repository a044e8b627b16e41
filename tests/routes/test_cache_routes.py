"""Tests for the existence cache endpoint."""


def test_clear_drops_every_entry(client, cache):
    cache.mark_bucket("photos", True)
    cache.mark_object("photos", "a.jpg", False)

    response = client.delete("/s3/cache")

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "message": "Existence cache cleared (2 entries)",
    }
    assert len(cache) == 0


def test_cleared_entry_is_checked_remotely_again(client, storage, cache):
    cache.mark_object("photos", "a.jpg", False)

    client.delete("/s3/cache")
    response = client.get("/s3/file/exists", params={"bucket": "photos", "key": "a.jpg"})

    assert response.json()["exists"] is True
    storage.head_object.assert_called_once_with("photos", "a.jpg")
