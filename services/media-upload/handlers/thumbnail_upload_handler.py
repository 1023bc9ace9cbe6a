"""Handler for thumbnail image uploads."""

import secrets
from pathlib import Path
from uuid import UUID

from tubely_common import Video
from tubely_common.logging import setup_logging

from domain import UploadedFile
from exceptions import AssetWriteError
from repositories import VideoRepository

from .validation import ensure_owner, parse_video_id, validate_upload

logger = setup_logging()

MAX_THUMBNAIL_UPLOAD_SIZE = 10 << 20
THUMBNAIL_CONTENT_TYPES = frozenset({"image/jpeg", "image/png"})


def random_asset_name(content_type: str) -> str:
    """32 random bytes, URL-safe base64, with the media subtype as extension."""
    extension = content_type.split("/", 1)[1]
    return f"{secrets.token_urlsafe(32)}.{extension}"


class ThumbnailUploadHandler:
    """Stores a thumbnail in the local assets directory and records its URL."""

    def __init__(self, repository: VideoRepository, assets_root: Path, assets_base_url: str):
        self._repository = repository
        self._assets_root = Path(assets_root)
        self._assets_base_url = assets_base_url.rstrip("/")

    def process(self, video_id: str, user_id: UUID, upload: UploadedFile | None) -> Video:
        """
        Saves the ``thumbnail`` part and points the video record at it.

        Raises:
            BadRequestError: If the id or file is invalid.
            VideoNotFoundError: If the video does not exist.
            ForbiddenError: If the caller does not own the video.
            AssetWriteError: If the image cannot be written.
            VideoPersistenceError: If the record update fails.
        """
        parsed_id = parse_video_id(video_id)
        video = self._repository.get_by_id(parsed_id)
        ensure_owner(video, user_id)
        upload = validate_upload(
            upload,
            field="thumbnail",
            max_size=MAX_THUMBNAIL_UPLOAD_SIZE,
            max_size_label="10MB",
            allowed_types=THUMBNAIL_CONTENT_TYPES,
        )

        asset_name = random_asset_name(upload.content_type)
        asset_path = self._assets_root / asset_name
        try:
            self._assets_root.mkdir(parents=True, exist_ok=True)
            asset_path.write_bytes(upload.data.read())
        except OSError as e:
            logger.exception("Thumbnail write failed", extra={"path": str(asset_path)})
            raise AssetWriteError(asset_name, e) from e

        logger.info(
            "Thumbnail stored",
            extra={"video_id": video_id, "user_id": str(user_id), "asset": asset_name},
        )

        video.thumbnail_url = f"{self._assets_base_url}/{asset_name}"
        return self._repository.update(video)
