"""Abstract interface for object storage operations."""

from abc import ABC, abstractmethod
from typing import BinaryIO

from storage_gateway.domain.models import (
    BucketInfo,
    DeleteObjectsOutcome,
    ObjectInfo,
    StoredObject,
    UploadedPart,
)


class StorageClient(ABC):
    """
    Abstract base class for object storage backends.

    Every method is blocking. Implementations raise StorageNotFoundError when
    the addressed resource is missing and another StorageError subclass for
    any other backend failure; SDK exceptions never escape.
    """

    @abstractmethod
    def create_bucket(self, bucket_name: str) -> None:
        """Creates a bucket."""

    @abstractmethod
    def delete_bucket(self, bucket_name: str) -> None:
        """Deletes an empty bucket."""

    @abstractmethod
    def list_buckets(self) -> list[BucketInfo]:
        """Returns every bucket visible to the credentials."""

    @abstractmethod
    def head_bucket(self, bucket_name: str) -> None:
        """
        Checks that a bucket exists.

        Raises:
            StorageNotFoundError: If the bucket does not exist.
        """

    @abstractmethod
    def put_object(
        self,
        bucket_name: str,
        object_name: str,
        data: bytes | BinaryIO,
        content_type: str,
    ) -> None:
        """
        Uploads an object.

        Args:
            bucket_name: The storage bucket name.
            object_name: The destination key in storage.
            data: Bytes or a file-like object with the content.
            content_type: MIME type of the content.
        """

    @abstractmethod
    def head_object(self, bucket_name: str, object_name: str) -> None:
        """
        Checks that an object exists.

        Raises:
            StorageNotFoundError: If the object does not exist.
        """

    @abstractmethod
    def delete_object(self, bucket_name: str, object_name: str) -> None:
        """Deletes a single object."""

    @abstractmethod
    def delete_objects(
        self, bucket_name: str, object_names: list[str]
    ) -> DeleteObjectsOutcome:
        """Deletes several objects and reports which keys failed."""

    @abstractmethod
    def list_objects(self, bucket_name: str, prefix: str = "") -> list[ObjectInfo]:
        """Returns every object whose key starts with ``prefix``."""

    @abstractmethod
    def get_object(self, bucket_name: str, object_name: str) -> StoredObject:
        """Opens an object for streaming."""

    @abstractmethod
    def copy_object(
        self,
        source_bucket: str,
        source_key: str,
        dest_bucket: str,
        dest_key: str,
    ) -> None:
        """Copies an object server-side."""

    @abstractmethod
    def create_multipart_upload(self, bucket_name: str, object_name: str) -> str:
        """Starts a multipart upload and returns its upload id."""

    @abstractmethod
    def upload_part(
        self,
        bucket_name: str,
        object_name: str,
        upload_id: str,
        part_number: int,
        data: bytes,
    ) -> UploadedPart:
        """Uploads one part of a multipart upload."""

    @abstractmethod
    def complete_multipart_upload(
        self,
        bucket_name: str,
        object_name: str,
        upload_id: str,
        parts: list[UploadedPart],
    ) -> None:
        """Assembles the uploaded parts into the final object."""

    @abstractmethod
    def abort_multipart_upload(
        self, bucket_name: str, object_name: str, upload_id: str
    ) -> None:
        """Discards a multipart upload and its parts."""

    @abstractmethod
    def generate_presigned_url(
        self,
        client_method: str,
        bucket_name: str,
        object_name: str,
        expires_in: int,
    ) -> str:
        """
        Signs a URL granting temporary access to one object.

        Args:
            client_method: SDK operation to sign, ``get_object`` or ``put_object``.
            bucket_name: The storage bucket name.
            object_name: The object key.
            expires_in: URL lifetime in seconds.
        """
