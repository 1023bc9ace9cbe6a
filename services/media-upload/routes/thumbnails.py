"""Thumbnail upload endpoint."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from tubely_common.logging import setup_logging

from dependencies import get_current_user_id, get_thumbnail_upload_handler
from exceptions import (
    AssetWriteError,
    BadRequestError,
    ForbiddenError,
    VideoNotFoundError,
    VideoPersistenceError,
)
from handlers import ThumbnailUploadHandler
from response_models import VideoResponse

from ._common import to_uploaded_file

logger = setup_logging()

router = APIRouter(prefix="/thumbnails", tags=["thumbnails"])

UserIdDep = Annotated[UUID, Depends(get_current_user_id)]
ThumbnailHandlerDep = Annotated[
    ThumbnailUploadHandler, Depends(get_thumbnail_upload_handler)
]


@router.post("/{video_id}/upload", response_model=VideoResponse)
def upload_thumbnail(
    video_id: str,
    user_id: UserIdDep,
    handler: ThumbnailHandlerDep,
    thumbnail: Annotated[UploadFile | str | None, File()] = None,
) -> VideoResponse:
    """Uploads a jpeg or png thumbnail for a video the caller owns."""
    logger.info(
        "Received thumbnail upload request",
        extra={"video_id": video_id, "user_id": str(user_id)},
    )

    try:
        updated = handler.process(video_id, user_id, to_uploaded_file(thumbnail))
    except BadRequestError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except VideoNotFoundError:
        raise HTTPException(status_code=404, detail="Video not found")
    except ForbiddenError:
        raise HTTPException(
            status_code=403, detail="User is not the owner of the requested video"
        )
    except AssetWriteError:
        raise HTTPException(status_code=500, detail="Thumbnail could not be saved")
    except VideoPersistenceError:
        raise HTTPException(status_code=500, detail="Failed to save video metadata")

    return VideoResponse.model_validate(updated)
