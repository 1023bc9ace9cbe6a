"""Shared configuration models for infrastructure components."""

from pydantic import BaseModel


class ObjectStorageConfig(BaseModel, frozen=True):
    """S3-compatible object storage configuration."""

    endpoint: str
    access_key: str
    secret_key: str
    bucket_name: str = "tubely-videos"
    region: str = "us-east-1"
    secure: bool = True
