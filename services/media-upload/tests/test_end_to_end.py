"""
End-to-end upload through real ffprobe/ffmpeg
"""

import shutil
import subprocess

import pytest

from exceptions import RemuxError
from handlers import VideoUploadHandler
from infrastructure import FFmpegMediaTool

pytestmark = pytest.mark.skipif(
    shutil.which("ffmpeg") is None or shutil.which("ffprobe") is None,
    reason="ffmpeg and ffprobe are required",
)


@pytest.fixture
def make_fixture_video(tmp_path):
    """Renders a one second test pattern mp4 of the given size"""

    def render(width, height):
        path = tmp_path / f"fixture-{width}x{height}.mp4"
        subprocess.run(
            [
                "ffmpeg", "-v", "error", "-y",
                "-f", "lavfi", "-i", f"testsrc=size={width}x{height}:rate=10",
                "-t", "1",
                "-c:v", "mpeg4",
                "-pix_fmt", "yuv420p",
                str(path),
            ],
            check=True,
            capture_output=True,
        )
        return path

    return render


@pytest.fixture
def real_handler(repository, storage, scratch_root):
    return VideoUploadHandler(
        repository=repository,
        storage=storage,
        media_tool=FFmpegMediaTool(timeout=60),
        scratch_root=scratch_root,
        cdn_host="cdn.example.com",
    )


@pytest.mark.parametrize(
    "width,height,prefix",
    [(1280, 720, "landscape/"), (720, 1280, "portrait/"), (640, 480, "other/")],
)
def test_object_key_prefix_follows_geometry(
    real_handler, video, owner_id, make_upload, make_fixture_video, storage, scratch_root, width, height, prefix
):
    data = make_fixture_video(width, height).read_bytes()

    updated = real_handler.process(str(video.id), owner_id, make_upload(data))

    (key,) = storage.objects
    assert key == f"{prefix}{video.id}.mp4"
    assert updated.video_url == f"https://cdn.example.com/{key}"
    assert list(scratch_root.rglob("*")) == []


def test_remuxed_output_is_fast_start(real_handler, video, owner_id, make_upload, make_fixture_video, storage):
    data = make_fixture_video(1280, 720).read_bytes()

    real_handler.process(str(video.id), owner_id, make_upload(data))

    (stored,) = storage.objects.values()
    body = stored["data"]
    assert body.index(b"moov") < body.index(b"mdat")


def test_garbage_upload_fails_remux_and_cleans_up(
    real_handler, video, owner_id, make_upload, storage, scratch_root, fetch_video
):
    with pytest.raises(RemuxError):
        real_handler.process(str(video.id), owner_id, make_upload(b"this is not a video"))

    assert storage.objects == {}
    assert list(scratch_root.rglob("*")) == []
    assert fetch_video(video.id).video_url is None
