from tubely_common.config import ObjectStorageConfig
from tubely_common.db_models import Video
from tubely_common.exceptions import StorageUploadError
from tubely_common.logging import setup_logging

__all__ = [
    "setup_logging",
    "StorageUploadError",
    "ObjectStorageConfig",
    "Video",
]
