"""Concrete implementations of infrastructure interfaces."""

from .ffmpeg_media_tool import FFmpegMediaTool, parse_probe_output
from .minio_storage import MinioStorageClient
from .tool_runner import run_tool

__all__ = [
    "FFmpegMediaTool",
    "MinioStorageClient",
    "parse_probe_output",
    "run_tool",
]
