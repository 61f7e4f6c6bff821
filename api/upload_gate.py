from typing import Optional

from fastapi import UploadFile

from domain.errors import ClientInputError
from domain.schemas import UploadedFile

PDF_CONTENT_TYPE = "application/pdf"
CHUNK_SIZE = 64 * 1024


async def read_upload(file: Optional[UploadFile], max_bytes: int) -> UploadedFile:
    """Validate the uploaded file and buffer it in memory.

    The body is read in chunks and dropped as soon as it grows past
    ``max_bytes``, which bounds the in-memory copy. The server may already
    have spooled the whole part to a temporary file before this runs.
    """
    if file is None or not file.filename:
        raise ClientInputError("No file uploaded")
    if file.content_type != PDF_CONTENT_TYPE:
        raise ClientInputError("Only PDF files are allowed")
    if file.size is not None and file.size > max_bytes:
        raise ClientInputError(_too_large(max_bytes))

    buf = bytearray()
    while True:
        chunk = await file.read(CHUNK_SIZE)
        if not chunk:
            break
        buf.extend(chunk)
        if len(buf) > max_bytes:
            raise ClientInputError(_too_large(max_bytes))
    return UploadedFile(filename=file.filename, content_type=file.content_type, data=bytes(buf))


def _too_large(max_bytes: int) -> str:
    if max_bytes >= 1024 * 1024:
        return f"File too large (limit is {max_bytes // (1024 * 1024)} MB)"
    return f"File too large (limit is {max_bytes} bytes)"
