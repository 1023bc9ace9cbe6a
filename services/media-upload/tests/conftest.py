"""
Pytest configuration for media-upload tests
"""

import io
import os
from contextlib import contextmanager
from datetime import timedelta
from pathlib import Path
from uuid import uuid4

import pytest

# Keep the tracer from trying to reach an agent while tests import main
os.environ.setdefault("DD_TRACE_ENABLED", "false")

from sqlmodel import Session, SQLModel, create_engine
from tubely_common import StorageUploadError, Video
from tubely_common.infrastructure import StorageClient

from auth import make_jwt
from domain import UploadedFile, VideoDimensions
from handlers import ThumbnailUploadHandler, VideoUploadHandler
from infrastructure.ffmpeg_media_tool import REMUX_SUFFIX
from interfaces import MediaTool
from repositories import VideoRepository

JWT_SECRET = "test-secret-with-enough-bytes-for-hs256!"
CDN_HOST = "cdn.example.com"
ASSETS_BASE_URL = "http://localhost:8091/assets"


class FakeMediaTool(MediaTool):
    """Records calls and imitates ffprobe/ffmpeg without spawning processes."""

    def __init__(self, width=1280, height=720, probe_error=None, remux_error=None):
        self.dimensions = VideoDimensions(width=width, height=height)
        self.probe_error = probe_error
        self.remux_error = remux_error
        self.probed: list[Path] = []
        self.remuxed: list[Path] = []

    def probe(self, path: Path) -> VideoDimensions:
        self.probed.append(path)
        if self.probe_error:
            raise self.probe_error
        return self.dimensions

    def remux(self, path: Path) -> Path:
        self.remuxed.append(path)
        output = path.with_name(path.name + REMUX_SUFFIX)
        if self.remux_error:
            # a failed ffmpeg run can leave a truncated output behind
            output.write_bytes(b"partial")
            raise self.remux_error
        output.write_bytes(b"faststart:" + path.read_bytes())
        return output


class FakeStorage(StorageClient):
    """In-memory object storage."""

    def __init__(self, error: Exception | None = None):
        self.error = error
        self.objects: dict[str, dict] = {}
        self.bucket_checked = False

    def upload(self, object_name, data, size, content_type) -> None:
        if self.error:
            raise StorageUploadError(object_name, self.error)
        self.objects[object_name] = {
            "data": data.read(),
            "size": size,
            "content_type": content_type,
        }

    def ensure_bucket_exists(self) -> None:
        self.bucket_checked = True


@pytest.fixture
def engine(tmp_path):
    """SQLite engine with the videos table created"""
    engine = create_engine(
        f"sqlite:///{tmp_path / 'tubely.db'}",
        connect_args={"check_same_thread": False},
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    @contextmanager
    def factory():
        with Session(engine) as session:
            yield session

    return factory


@pytest.fixture
def repository(session_factory):
    return VideoRepository(session_factory)


@pytest.fixture
def owner_id():
    return uuid4()


@pytest.fixture
def video(engine, owner_id):
    """A stored video record owned by ``owner_id``"""
    record = Video(user_id=owner_id, title="Boots", description="A video about boots")
    with Session(engine) as session:
        session.add(record)
        session.commit()
        session.refresh(record)
        session.expunge(record)
    return record


@pytest.fixture
def fetch_video(engine):
    """Reads a video record straight from the database"""

    def fetch(video_id):
        with Session(engine) as session:
            record = session.get(Video, video_id)
            session.expunge(record)
            return record

    return fetch


@pytest.fixture
def make_upload():
    def make(data=b"\x00\x00\x00\x18ftypmp42", content_type="video/mp4", size=None):
        return UploadedFile(
            data=io.BytesIO(data),
            size=len(data) if size is None else size,
            content_type=content_type,
            filename="upload",
        )

    return make


@pytest.fixture
def scratch_root(tmp_path):
    return tmp_path / "scratch"


@pytest.fixture
def assets_root(tmp_path):
    return tmp_path / "assets"


@pytest.fixture
def media_tool():
    return FakeMediaTool()


@pytest.fixture
def storage():
    return FakeStorage()


@pytest.fixture
def video_handler(repository, storage, media_tool, scratch_root):
    return VideoUploadHandler(
        repository=repository,
        storage=storage,
        media_tool=media_tool,
        scratch_root=scratch_root,
        cdn_host=CDN_HOST,
    )


@pytest.fixture
def thumbnail_handler(repository, assets_root):
    return ThumbnailUploadHandler(repository, assets_root, ASSETS_BASE_URL)


@pytest.fixture
def jwt_secret():
    return JWT_SECRET


@pytest.fixture
def token_for():
    def issue(user_id, expires_in=timedelta(hours=1), secret=JWT_SECRET):
        return make_jwt(user_id, secret, expires_in)

    return issue
