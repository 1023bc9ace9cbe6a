"""Abstract interface for external media inspection and remuxing."""

from abc import ABC, abstractmethod
from pathlib import Path

from domain.models import VideoDimensions


class MediaTool(ABC):
    """Abstract base class for the probe and remux operations on video files."""

    @abstractmethod
    def probe(self, path: Path) -> VideoDimensions:
        """
        Reads the width and height of the first video stream.

        Args:
            path: Local path of the video file.

        Raises:
            ProbeError: If the probing tool fails.
            ProbeParseError: If its output is empty or malformed.
        """

    @abstractmethod
    def remux(self, path: Path) -> Path:
        """
        Writes a fast-start copy of the video without re-encoding its streams.

        Args:
            path: Local path of the source video file.

        Returns:
            Path of the new file. The caller owns it and must delete it.

        Raises:
            RemuxError: If the remux tool fails or produces no output.
        """
