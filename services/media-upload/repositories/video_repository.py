"""Repository for video metadata access."""

from datetime import datetime, timezone
from uuid import UUID

from tubely_common import Video
from tubely_common.logging import setup_logging

from exceptions import VideoNotFoundError, VideoPersistenceError

logger = setup_logging()


class VideoRepository:
    """
    Reads and writes video records.

    Keeps session handling out of the upload handlers: records come back
    fully loaded and detached, and are written back whole.
    """

    def __init__(self, session_factory):
        """
        Initializes the repository.

        Args:
            session_factory: Callable that returns a SQLModel Session context manager.
        """
        self._session_factory = session_factory

    def get_by_id(self, video_id: UUID) -> Video:
        """
        Retrieves a single video record.

        Raises:
            VideoNotFoundError: If the video does not exist.
        """
        with self._session_factory() as db_session:
            video = db_session.get(Video, video_id)
            if video is None:
                raise VideoNotFoundError(video_id)
            db_session.expunge(video)
            return video

    def update(self, video: Video) -> Video:
        """
        Persists all fields of ``video`` and returns the stored record.

        Raises:
            VideoPersistenceError: If the write fails.
        """
        video.updated_at = datetime.now(timezone.utc)
        try:
            with self._session_factory() as db_session:
                stored = db_session.merge(video)
                db_session.commit()
                db_session.refresh(stored)
                db_session.expunge(stored)
        except Exception as e:
            logger.exception("Failed to persist video", extra={"video_id": str(video.id)})
            raise VideoPersistenceError(video.id, cause=e) from e

        logger.info("Video persisted", extra={"video_id": str(video.id)})
        return stored
