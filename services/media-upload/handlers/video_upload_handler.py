"""Handler for the video upload pipeline."""

from pathlib import Path
from uuid import UUID

from tubely_common import Video
from tubely_common.infrastructure import StorageClient
from tubely_common.logging import setup_logging

from domain import AspectCategory, AspectRatioClassifier, ScratchSpace, UploadedFile, UploadStage
from interfaces import MediaTool
from repositories import VideoRepository

from .validation import ensure_owner, parse_video_id, validate_upload

logger = setup_logging()

MAX_VIDEO_UPLOAD_SIZE = 1 << 30
VIDEO_CONTENT_TYPE = "video/mp4"


def build_object_key(category: AspectCategory, video_id: UUID) -> str:
    return f"{category.value}/{video_id}.mp4"


class VideoUploadHandler:
    """
    Validates an uploaded mp4, makes it fast-start, publishes it and records its URL.

    Scratch files are removed on every exit path. The record's video URL is
    only written after the object storage upload has succeeded.
    """

    def __init__(
        self,
        repository: VideoRepository,
        storage: StorageClient,
        media_tool: MediaTool,
        scratch_root: Path,
        cdn_host: str,
    ):
        self._repository = repository
        self._storage = storage
        self._media_tool = media_tool
        self._classifier = AspectRatioClassifier(media_tool)
        self._scratch_root = scratch_root
        self._cdn_host = cdn_host

    def process(self, video_id: str, user_id: UUID, upload: UploadedFile | None) -> Video:
        """
        Runs the upload pipeline for one request.

        Args:
            video_id: The video id from the request path.
            user_id: The authenticated caller.
            upload: The ``video`` file part, or None if it was not sent.

        Returns:
            The updated video record.

        Raises:
            BadRequestError: If the id or file is invalid.
            VideoNotFoundError: If the video does not exist.
            ForbiddenError: If the caller does not own the video.
            RemuxError, ProbeError: If an external tool fails.
            ProbeParseError: If probe output is malformed.
            ScratchWriteError: If the upload cannot be staged locally.
            StorageUploadError: If publishing to object storage fails.
            VideoPersistenceError: If the record update fails.
        """
        stage = UploadStage.VALIDATING
        log_extra = {"video_id": video_id, "user_id": str(user_id)}
        try:
            parsed_id = parse_video_id(video_id)
            video = self._repository.get_by_id(parsed_id)
            ensure_owner(video, user_id)
            upload = validate_upload(
                upload,
                field="video",
                max_size=MAX_VIDEO_UPLOAD_SIZE,
                max_size_label="1GB",
                allowed_types=frozenset({VIDEO_CONTENT_TYPE}),
            )

            stage = self._enter(UploadStage.STAGING, log_extra)
            with ScratchSpace(self._scratch_root, parsed_id) as scratch:
                staged_path = scratch.stage(upload.data)

                stage = self._enter(UploadStage.REMUXING, log_extra)
                remuxed_path = self._media_tool.remux(staged_path)

                stage = self._enter(UploadStage.CLASSIFYING, log_extra)
                category = self._classifier.classify_file(remuxed_path)

                stage = self._enter(UploadStage.PUBLISHING, log_extra)
                object_key = build_object_key(category, parsed_id)
                with open(remuxed_path, "rb") as f:
                    self._storage.upload(
                        object_name=object_key,
                        data=f,
                        size=remuxed_path.stat().st_size,
                        content_type=VIDEO_CONTENT_TYPE,
                    )

                stage = self._enter(UploadStage.FINALIZING, log_extra)
                video.video_url = f"https://{self._cdn_host}/{object_key}"
                updated = self._repository.update(video)
        except Exception:
            logger.warning(
                "Video upload failed",
                extra={
                    **log_extra,
                    "stage": UploadStage.FAILED.value,
                    "failed_stage": stage.value,
                },
                exc_info=True,
            )
            raise

        logger.info(
            "Video upload complete",
            extra={
                **log_extra,
                "stage": UploadStage.DONE.value,
                "object_key": object_key,
            },
        )
        return updated

    @staticmethod
    def _enter(stage: UploadStage, log_extra: dict) -> UploadStage:
        logger.info("Video upload stage", extra={**log_extra, "stage": stage.value})
        return stage
