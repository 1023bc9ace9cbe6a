from pathlib import Path

from config import load_config


def test_defaults(monkeypatch):
    for name in ("MEDIA_TOOL_TIMEOUT_SECONDS", "PORT", "HOST", "CDN_HOST", "S3_SECURE"):
        monkeypatch.delenv(name, raising=False)

    config = load_config()

    assert config.media_tools.timeout_seconds is None
    assert config.media_tools.ffprobe_bin == "ffprobe"
    assert config.server.assets_base_url == "http://localhost:8091/assets"
    assert config.storage.secure is True


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("HOST", "media.internal")
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("ASSETS_ROOT", "/srv/assets")
    monkeypatch.setenv("CDN_HOST", "d111111abcdef8.cloudfront.net")
    monkeypatch.setenv("S3_BUCKET", "tubely-prod")
    monkeypatch.setenv("S3_REGION", "eu-west-1")
    monkeypatch.setenv("S3_SECURE", "false")
    monkeypatch.setenv("MEDIA_TOOL_TIMEOUT_SECONDS", "120")
    monkeypatch.setenv("POSTGRES_HOST", "db")

    config = load_config()

    assert config.server.assets_root == Path("/srv/assets")
    assert config.server.assets_base_url == "http://media.internal:9000/assets"
    assert config.cdn_host == "d111111abcdef8.cloudfront.net"
    assert config.storage.bucket_name == "tubely-prod"
    assert config.storage.region == "eu-west-1"
    assert config.storage.secure is False
    assert config.media_tools.timeout_seconds == 120.0
    assert config.database.url.startswith("postgresql+psycopg://")
    assert "@db:5432/" in config.database.url
