import re
from uuid import uuid4

import pytest

from exceptions import AssetWriteError, BadRequestError, ForbiddenError, VideoNotFoundError
from handlers import MAX_THUMBNAIL_UPLOAD_SIZE

ASSET_NAME = re.compile(r"^[A-Za-z0-9_-]{43}\.(png|jpeg)$")


def test_exactly_ten_megabytes_is_accepted(thumbnail_handler, video, owner_id, make_upload, assets_root):
    data = b"\x89PNG" + b"\x00" * (MAX_THUMBNAIL_UPLOAD_SIZE - 4)

    updated = thumbnail_handler.process(str(video.id), owner_id, make_upload(data, "image/png"))

    name = updated.thumbnail_url.rsplit("/", 1)[1]
    assert updated.thumbnail_url == f"http://localhost:8091/assets/{name}"
    assert ASSET_NAME.match(name)
    assert (assets_root / name).stat().st_size == MAX_THUMBNAIL_UPLOAD_SIZE


def test_one_byte_over_ten_megabytes_is_rejected(thumbnail_handler, video, owner_id, make_upload, assets_root):
    upload = make_upload(b"x", "image/png", size=MAX_THUMBNAIL_UPLOAD_SIZE + 1)

    with pytest.raises(BadRequestError, match="File size is 10485761"):
        thumbnail_handler.process(str(video.id), owner_id, upload)

    assert not assets_root.exists()


def test_jpeg_extension(thumbnail_handler, video, owner_id, make_upload):
    updated = thumbnail_handler.process(str(video.id), owner_id, make_upload(b"\xff\xd8", "image/jpeg"))

    assert updated.thumbnail_url.endswith(".jpeg")


@pytest.mark.parametrize("content_type", ["image/gif", "video/mp4", None])
def test_other_media_types_are_rejected(thumbnail_handler, video, owner_id, make_upload, content_type):
    with pytest.raises(BadRequestError, match="Accepted types: image/jpeg, image/png"):
        thumbnail_handler.process(str(video.id), owner_id, make_upload(b"GIF89a", content_type))


def test_missing_file(thumbnail_handler, video, owner_id):
    with pytest.raises(BadRequestError, match="Thumbnail file missing"):
        thumbnail_handler.process(str(video.id), owner_id, None)


def test_repeated_uploads_never_reuse_a_name(thumbnail_handler, video, owner_id, make_upload, assets_root):
    urls = {
        thumbnail_handler.process(str(video.id), owner_id, make_upload(b"png", "image/png")).thumbnail_url
        for _ in range(20)
    }

    assert len(urls) == 20
    assert len(list(assets_root.iterdir())) == 20


def test_record_points_at_latest_thumbnail(thumbnail_handler, video, owner_id, make_upload, fetch_video):
    updated = thumbnail_handler.process(str(video.id), owner_id, make_upload(b"png", "image/png"))

    stored = fetch_video(video.id)
    assert stored.thumbnail_url == updated.thumbnail_url
    assert stored.video_url is None


def test_other_users_video_is_forbidden_and_untouched(
    thumbnail_handler, video, make_upload, assets_root, fetch_video
):
    with pytest.raises(ForbiddenError):
        thumbnail_handler.process(str(video.id), uuid4(), make_upload(b"png", "image/png"))

    assert not assets_root.exists()
    assert fetch_video(video.id).thumbnail_url is None


def test_unknown_video(thumbnail_handler, owner_id, make_upload):
    with pytest.raises(VideoNotFoundError):
        thumbnail_handler.process(str(uuid4()), owner_id, make_upload(b"png", "image/png"))


def test_unwritable_assets_root(thumbnail_handler, video, owner_id, make_upload, assets_root, fetch_video):
    assets_root.parent.mkdir(parents=True, exist_ok=True)
    assets_root.write_text("a file where the directory should be")

    with pytest.raises(AssetWriteError):
        thumbnail_handler.process(str(video.id), owner_id, make_upload(b"png", "image/png"))

    assert fetch_video(video.id).thumbnail_url is None
