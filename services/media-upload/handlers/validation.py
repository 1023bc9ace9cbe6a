"""Request checks shared by the upload handlers."""

from uuid import UUID

from tubely_common import Video

from domain import UploadedFile
from exceptions import BadRequestError, ForbiddenError


def parse_video_id(video_id: str | None) -> UUID:
    if not video_id:
        raise BadRequestError("Invalid video ID")
    try:
        return UUID(video_id)
    except ValueError as e:
        raise BadRequestError("Invalid video ID") from e


def ensure_owner(video: Video, user_id: UUID) -> None:
    if video.user_id != user_id:
        raise ForbiddenError(video.id, user_id)


def validate_upload(
    upload: UploadedFile | None,
    *,
    field: str,
    max_size: int,
    max_size_label: str,
    allowed_types: frozenset[str],
) -> UploadedFile:
    """
    Checks presence, size and declared media type, in that order.

    Raises:
        BadRequestError: Naming the first violated constraint.
    """
    if upload is None:
        raise BadRequestError(f"{field.capitalize()} file missing")
    if upload.size > max_size:
        raise BadRequestError(
            f"File is too large. Max size is {max_size_label}. File size is {upload.size}"
        )
    if upload.content_type not in allowed_types:
        raise BadRequestError(
            f"Invalid media type '{upload.content_type}'. "
            f"Accepted types: {', '.join(sorted(allowed_types))}"
        )
    return upload
