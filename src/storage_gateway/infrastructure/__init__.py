"""Concrete implementations of infrastructure interfaces."""

from .s3_storage import S3Storage, create_s3_client

__all__ = ["S3Storage", "create_s3_client"]
