"""Domain layer containing business logic and models."""

from .aspect_ratio import AspectCategory, AspectRatioClassifier, classify_aspect_ratio
from .models import UploadedFile, UploadStage, VideoDimensions
from .scratch import ScratchSpace

__all__ = [
    "AspectCategory",
    "AspectRatioClassifier",
    "classify_aspect_ratio",
    "ScratchSpace",
    "UploadedFile",
    "UploadStage",
    "VideoDimensions",
]
