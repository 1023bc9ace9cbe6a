"""Helpers shared by the upload routes."""

import os

from starlette.datastructures import UploadFile

from domain import UploadedFile


def to_uploaded_file(file: UploadFile | str | None) -> UploadedFile | None:
    """
    Wraps a multipart file part, measuring it when no size was recorded.

    A plain form value sent under the file field is treated as no file.
    """
    if not isinstance(file, UploadFile):
        return None

    size = file.size
    if size is None:
        file.file.seek(0, os.SEEK_END)
        size = file.file.tell()
        file.file.seek(0)

    return UploadedFile(
        data=file.file,
        size=size,
        content_type=file.content_type,
        filename=file.filename,
    )
