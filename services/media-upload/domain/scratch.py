"""Per-request scratch directory for files handed to external tools."""

import shutil
import tempfile
from pathlib import Path
from typing import BinaryIO
from uuid import UUID

from tubely_common.logging import setup_logging

from exceptions import ScratchWriteError

logger = setup_logging()

_COPY_CHUNK_SIZE = 1 << 20


class ScratchSpace:
    """
    Holds the local copies of one upload while it is being processed.

    Entering creates a fresh directory under ``root``; exiting deletes every
    file in it and then the directory, on success and on error alike.
    Deletion failures are logged and never raised, so they cannot replace the
    outcome of the work done inside the block.

    Each request gets its own directory, so concurrent uploads for the same
    video id do not write to the same path even though the staged file is
    always named ``{video_id}.mp4``.
    """

    def __init__(self, root: Path, video_id: UUID | str):
        self._root = Path(root)
        self._video_id = str(video_id)
        self._directory: Path | None = None

    def __enter__(self) -> "ScratchSpace":
        try:
            self._root.mkdir(parents=True, exist_ok=True)
            self._directory = Path(
                tempfile.mkdtemp(prefix=f"{self._video_id}-", dir=self._root)
            )
        except OSError as e:
            logger.exception(
                "Failed to create scratch directory", extra={"root": str(self._root)}
            )
            raise ScratchWriteError(str(self._root), e) from e
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    @property
    def directory(self) -> Path:
        if self._directory is None:
            raise RuntimeError("Scratch space is not active")
        return self._directory

    def stage(self, data: BinaryIO) -> Path:
        """Writes the uploaded bytes to ``{video_id}.mp4`` and returns its path."""
        path = self.directory / f"{self._video_id}.mp4"
        try:
            with open(path, "wb") as f:
                shutil.copyfileobj(data, f, _COPY_CHUNK_SIZE)
        except OSError as e:
            logger.exception("Failed to stage upload", extra={"path": str(path)})
            raise ScratchWriteError(str(path), e) from e
        logger.info(
            "Upload staged",
            extra={"video_id": self._video_id, "path": str(path)},
        )
        return path

    def release(self) -> None:
        """Deletes all scratch files. Never raises."""
        if self._directory is None:
            return
        directory, self._directory = self._directory, None

        try:
            entries = list(directory.iterdir())
        except OSError:
            logger.warning(
                "Could not list scratch directory",
                extra={"path": str(directory)},
                exc_info=True,
            )
            return

        for path in entries:
            try:
                path.unlink()
            except FileNotFoundError:
                continue
            except OSError:
                logger.warning(
                    "Failed to delete scratch file",
                    extra={"path": str(path), "video_id": self._video_id},
                    exc_info=True,
                )

        try:
            directory.rmdir()
        except OSError:
            logger.warning(
                "Failed to delete scratch directory",
                extra={"path": str(directory)},
                exc_info=True,
            )
