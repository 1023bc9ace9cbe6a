"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from ddtrace import patch_all
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from dependencies import get_config, init_resources
from routes import thumbnails_router, videos_router

patch_all()

_config = get_config()


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_resources()
    yield


app = FastAPI(title="Tubely Media Upload Service", lifespan=lifespan)
app.include_router(videos_router)
app.include_router(thumbnails_router)
app.mount(
    "/assets",
    StaticFiles(directory=_config.server.assets_root, check_dir=False),
    name="assets",
)


@app.get("/health")
def health_check():
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=_config.server.port)
