"""Exceptions shared between services."""


class StorageUploadError(Exception):
    """Raised when uploading a file to object storage fails."""

    def __init__(self, object_name: str, cause: Exception | None = None):
        self.object_name = object_name
        self.cause = cause
        super().__init__(f"Failed to upload '{object_name}' to storage")
