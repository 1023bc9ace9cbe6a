"""Custom exceptions for the media-upload service."""

from uuid import UUID


class BadRequestError(Exception):
    """Raised when the request or its uploaded file violates an input constraint."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class UnauthorizedError(Exception):
    """Raised when the bearer credential is missing or invalid."""

    def __init__(self, reason: str, cause: Exception | None = None):
        self.reason = reason
        self.cause = cause
        super().__init__(reason)


class ForbiddenError(Exception):
    """Raised when the authenticated user does not own the requested video."""

    def __init__(self, video_id: UUID, user_id: UUID):
        self.video_id = video_id
        self.user_id = user_id
        super().__init__(f"User {user_id} is not the owner of video {video_id}")


class VideoNotFoundError(Exception):
    """Raised when a requested video record does not exist."""

    def __init__(self, video_id: UUID):
        self.video_id = video_id
        super().__init__(f"Video {video_id} not found")


class VideoPersistenceError(Exception):
    """Raised when saving a video record to the database fails."""

    def __init__(self, video_id: UUID, cause: Exception | None = None):
        self.video_id = video_id
        self.cause = cause
        super().__init__(f"Failed to persist video '{video_id}' to database")


class ExternalToolError(Exception):
    """Raised when an external command exits non-zero, cannot start or times out."""

    def __init__(
        self,
        command: str,
        stderr: str = "",
        returncode: int | None = None,
        cause: Exception | None = None,
    ):
        self.command = command
        self.stderr = stderr
        self.returncode = returncode
        self.cause = cause
        if returncode is None:
            message = f"'{command}' did not complete"
        else:
            message = f"'{command}' exited with code {returncode}"
        if stderr:
            message = f"{message}: {stderr.strip()}"
        super().__init__(message)


class ProbeError(ExternalToolError):
    """Raised when the probing tool fails to inspect a video file."""


class RemuxError(ExternalToolError):
    """Raised when the remux tool fails to produce a fast-start copy."""


class ProbeParseError(Exception):
    """Raised when probing tool output is empty or not in the expected shape."""

    def __init__(self, path: str, reason: str, cause: Exception | None = None):
        self.path = path
        self.reason = reason
        self.cause = cause
        super().__init__(f"Could not parse probe output for '{path}': {reason}")


class AssetWriteError(Exception):
    """Raised when writing a thumbnail to the assets directory fails."""

    def __init__(self, asset_name: str, cause: Exception | None = None):
        self.asset_name = asset_name
        self.cause = cause
        super().__init__(f"Failed to write asset '{asset_name}'")


class ScratchWriteError(Exception):
    """Raised when the scratch directory or a staged upload cannot be written."""

    def __init__(self, path: str, cause: Exception | None = None):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to write scratch file '{path}'")
