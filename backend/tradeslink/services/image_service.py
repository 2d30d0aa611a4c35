import hashlib
import os
import re
from pathlib import Path

from tradeslink.config import settings

ALLOWED_IMAGE_TYPES = {"image/jpeg", "image/png", "image/webp", "image/gif"}

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]")


def ensure_media_dir() -> Path:
    settings.media_dir.mkdir(parents=True, exist_ok=True)
    return settings.media_dir


def safe_image_name(name: str) -> str:
    return _UNSAFE_CHARS.sub("_", name)


def store_image(filename: str, content: bytes) -> tuple[str, str, int]:
    """Store an uploaded image content-addressed. Returns (url, file_hash, file_size)."""
    file_hash = hashlib.sha256(content).hexdigest()
    stored_name = f"{file_hash[:12]}_{safe_image_name(filename or 'image')}"

    image_path = ensure_media_dir() / stored_name
    if not image_path.exists():
        image_path.write_bytes(content)
        os.chmod(image_path, 0o444)

    return f"/media/{stored_name}", file_hash, len(content)


def get_image_path(name: str) -> Path | None:
    if safe_image_name(name) != name:
        return None
    path = settings.media_dir / name
    return path if path.is_file() else None
