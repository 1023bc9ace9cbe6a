from .thumbnail_upload_handler import MAX_THUMBNAIL_UPLOAD_SIZE, ThumbnailUploadHandler
from .video_upload_handler import MAX_VIDEO_UPLOAD_SIZE, VideoUploadHandler

__all__ = [
    "MAX_THUMBNAIL_UPLOAD_SIZE",
    "MAX_VIDEO_UPLOAD_SIZE",
    "ThumbnailUploadHandler",
    "VideoUploadHandler",
]
