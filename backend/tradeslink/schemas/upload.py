from pydantic import BaseModel


class ImageUploadResponse(BaseModel):
    url: str
    file_hash: str
    file_size_bytes: int
