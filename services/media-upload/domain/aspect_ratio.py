"""Aspect ratio classification of video stream geometry."""

from __future__ import annotations

import enum
from pathlib import Path
from typing import TYPE_CHECKING

from tubely_common.logging import setup_logging

if TYPE_CHECKING:
    from interfaces import MediaTool

logger = setup_logging()

# 16:9 is 1.777...; anything outside this band is "other".
SIXTEEN_NINE_MIN = 1.76
SIXTEEN_NINE_MAX = 1.78


class AspectCategory(str, enum.Enum):
    """Coarse orientation bucket used as the object key prefix."""

    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"
    OTHER = "other"


def classify_aspect_ratio(width: int, height: int) -> AspectCategory:
    """
    Buckets a frame size into portrait 9:16, landscape 16:9 or other.

    Raises:
        ValueError: If either dimension is not positive.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Invalid dimensions {width}x{height}")

    if height > width:
        ratio = height / width
        category = AspectCategory.PORTRAIT
    elif height < width:
        ratio = width / height
        category = AspectCategory.LANDSCAPE
    else:
        return AspectCategory.OTHER

    if SIXTEEN_NINE_MIN <= ratio <= SIXTEEN_NINE_MAX:
        return category
    return AspectCategory.OTHER


class AspectRatioClassifier:
    """Probes a video file and classifies its first video stream."""

    def __init__(self, media_tool: MediaTool):
        self._media_tool = media_tool

    def classify_file(self, path: Path) -> AspectCategory:
        """
        Determines the aspect category of the video at ``path``.

        Raises:
            ProbeError: If the probing tool fails.
            ProbeParseError: If the probe output cannot be parsed.
        """
        dimensions = self._media_tool.probe(path)
        category = classify_aspect_ratio(dimensions.width, dimensions.height)
        logger.info(
            "Video classified",
            extra={
                "path": str(path),
                "width": dimensions.width,
                "height": dimensions.height,
                "category": category.value,
            },
        )
        return category
