"""File upload utilities."""
from fastapi import HTTPException, UploadFile, status

CHUNK_SIZE = 64 * 1024


async def read_upload_limited(upload: UploadFile, max_bytes: int) -> bytes:
    """Read an uploaded file, rejecting anything larger than ``max_bytes``."""
    chunks = []
    total = 0
    while True:
        chunk = await upload.read(CHUNK_SIZE)
        if not chunk:
            break
        total += len(chunk)
        if total > max_bytes:
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail=f"File exceeds {max_bytes} bytes",
            )
        chunks.append(chunk)
    return b"".join(chunks)
