from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from fastapi.responses import FileResponse

from tradeslink.config import settings
from tradeslink.dependencies import require_session
from tradeslink.schemas.upload import ImageUploadResponse
from tradeslink.services.image_service import ALLOWED_IMAGE_TYPES, get_image_path, store_image

router = APIRouter(prefix="/uploads", tags=["uploads"])


@router.post("/images", response_model=ImageUploadResponse, status_code=201)
async def upload_image(
    file: UploadFile = File(...),
    _account_id: str = Depends(require_session),
):
    if file.content_type not in ALLOWED_IMAGE_TYPES:
        raise HTTPException(
            status_code=400,
            detail=f"Unsupported image type. Must be one of: {sorted(ALLOWED_IMAGE_TYPES)}",
        )

    max_bytes = settings.max_upload_bytes
    size = 0
    chunks: list[bytes] = []
    while True:
        chunk = await file.read(1024 * 1024)
        if not chunk:
            break
        size += len(chunk)
        if size > max_bytes:
            raise HTTPException(status_code=413, detail=f"File too large (max {max_bytes} bytes)")
        chunks.append(chunk)

    content = b"".join(chunks)
    if not content:
        raise HTTPException(status_code=400, detail="Empty file")

    url, file_hash, file_size = store_image(file.filename, content)
    return ImageUploadResponse(url=url, file_hash=file_hash, file_size_bytes=file_size)


# Stored images are served outside the API prefix
media_router = APIRouter(prefix="/media", tags=["media"])


@media_router.get("/{name}")
async def get_image(name: str):
    path = get_image_path(name)
    if path is None:
        raise HTTPException(status_code=404, detail="Image not found")
    return FileResponse(str(path))
