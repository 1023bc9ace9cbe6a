"""Domain models for the media upload pipelines."""

import enum
from dataclasses import dataclass
from typing import BinaryIO

from pydantic import BaseModel, Field


class VideoDimensions(BaseModel, frozen=True):
    """Width and height of a video's first video stream, in pixels."""

    width: int = Field(gt=0)
    height: int = Field(gt=0)


@dataclass(frozen=True)
class UploadedFile:
    """
    A file part received with an upload request.

    Lives only for the duration of the request. ``size`` and ``content_type``
    are what the caller declared; ``data`` is the open stream of its bytes.
    """

    data: BinaryIO
    size: int
    content_type: str | None
    filename: str | None = None


class UploadStage(str, enum.Enum):
    """Steps of the video upload pipeline, in execution order."""

    VALIDATING = "validating"
    STAGING = "staging"
    REMUXING = "remuxing"
    CLASSIFYING = "classifying"
    PUBLISHING = "publishing"
    FINALIZING = "finalizing"
    DONE = "done"
    FAILED = "failed"
