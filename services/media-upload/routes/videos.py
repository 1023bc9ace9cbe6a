"""Video upload endpoint."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from tubely_common import StorageUploadError
from tubely_common.logging import setup_logging

from dependencies import get_current_user_id, get_video_upload_handler
from exceptions import (
    BadRequestError,
    ExternalToolError,
    ForbiddenError,
    ProbeParseError,
    ScratchWriteError,
    VideoNotFoundError,
    VideoPersistenceError,
)
from handlers import VideoUploadHandler
from response_models import VideoResponse

from ._common import to_uploaded_file

logger = setup_logging()

router = APIRouter(prefix="/videos", tags=["videos"])

UserIdDep = Annotated[UUID, Depends(get_current_user_id)]
VideoHandlerDep = Annotated[VideoUploadHandler, Depends(get_video_upload_handler)]


@router.post("/{video_id}/upload", response_model=VideoResponse)
def upload_video(
    video_id: str,
    user_id: UserIdDep,
    handler: VideoHandlerDep,
    video: Annotated[UploadFile | str | None, File()] = None,
) -> VideoResponse:
    """
    Uploads the mp4 for a video the caller owns.

    The file is remuxed for fast start, stored under an aspect-ratio prefix
    and the video's URL is updated.
    """
    logger.info(
        "Received video upload request",
        extra={"video_id": video_id, "user_id": str(user_id)},
    )

    try:
        updated = handler.process(video_id, user_id, to_uploaded_file(video))
    except BadRequestError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except VideoNotFoundError:
        raise HTTPException(status_code=404, detail="Video not found")
    except ForbiddenError:
        raise HTTPException(
            status_code=403, detail="User is not the owner of the requested video"
        )
    except (ExternalToolError, ProbeParseError, ScratchWriteError):
        raise HTTPException(status_code=500, detail="Video processing failed")
    except StorageUploadError:
        raise HTTPException(status_code=500, detail="File upload failed")
    except VideoPersistenceError:
        raise HTTPException(status_code=500, detail="Failed to save video metadata")

    return VideoResponse.model_validate(updated)
