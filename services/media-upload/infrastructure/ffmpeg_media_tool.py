"""ffprobe/ffmpeg implementation of the MediaTool interface."""

import json
from pathlib import Path

from tubely_common.logging import setup_logging

from domain.models import VideoDimensions
from exceptions import ExternalToolError, ProbeError, ProbeParseError, RemuxError
from interfaces import MediaTool

from .tool_runner import run_tool

logger = setup_logging()

REMUX_SUFFIX = ".processing"


def parse_probe_output(output: str, path: str) -> VideoDimensions:
    """
    Parses ``ffprobe -of json`` stream output into the first stream's size.

    Raises:
        ProbeParseError: If the output is empty, not JSON, or has no stream
            with integer width and height.
    """
    if not output or not output.strip():
        raise ProbeParseError(path, "empty output")

    try:
        data = json.loads(output)
    except json.JSONDecodeError as e:
        raise ProbeParseError(path, "output is not valid JSON", e) from e

    streams = data.get("streams") if isinstance(data, dict) else None
    if not streams:
        raise ProbeParseError(path, "no video stream found")

    stream = streams[0]
    try:
        return VideoDimensions(width=int(stream["width"]), height=int(stream["height"]))
    except (KeyError, TypeError, ValueError) as e:
        raise ProbeParseError(path, "stream has no valid width and height", e) from e


class FFmpegMediaTool(MediaTool):
    """Inspects videos with ffprobe and remuxes them with ffmpeg."""

    def __init__(
        self,
        ffprobe_bin: str = "ffprobe",
        ffmpeg_bin: str = "ffmpeg",
        timeout: float | None = None,
    ):
        self._ffprobe_bin = ffprobe_bin
        self._ffmpeg_bin = ffmpeg_bin
        self._timeout = timeout

    def probe(self, path: Path) -> VideoDimensions:
        args = [
            "-v", "error",
            "-select_streams", "v:0",
            "-show_entries", "stream=width,height",
            "-of", "json",
            str(path),
        ]
        try:
            output = run_tool(self._ffprobe_bin, args, timeout=self._timeout)
        except ExternalToolError as e:
            raise ProbeError(e.command, e.stderr, e.returncode, cause=e) from e

        return parse_probe_output(output, str(path))

    def remux(self, path: Path) -> Path:
        output_path = path.with_name(path.name + REMUX_SUFFIX)
        args = [
            "-hide_banner",
            "-y",
            "-i", str(path),
            "-map_metadata", "0",
            "-c", "copy",
            "-movflags", "faststart",
            "-f", "mp4",
            str(output_path),
        ]
        try:
            run_tool(self._ffmpeg_bin, args, timeout=self._timeout)
        except ExternalToolError as e:
            raise RemuxError(e.command, e.stderr, e.returncode, cause=e) from e

        if not output_path.is_file() or output_path.stat().st_size == 0:
            raise RemuxError(self._ffmpeg_bin, stderr=f"no output written to {output_path}")

        logger.info(
            "Video remuxed for fast start",
            extra={"source": str(path), "output": str(output_path)},
        )
        return output_path
