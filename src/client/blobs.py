from pathlib import Path
from typing import Protocol

import httpx
import structlog

from src.config import settings
from src.core.data_uri import parse_data_uri

logger = structlog.get_logger()


async def fetch_blob(src: str) -> tuple[str, bytes]:
    if src.startswith("data:"):
        return parse_data_uri(src)
    async with httpx.AsyncClient(timeout=settings.fetch_timeout) as client:
        response = await client.get(src)
        response.raise_for_status()
        content_type = response.headers.get("Content-Type", "application/octet-stream").split(";")[0].strip()
        return content_type, response.content


class BlobSaver(Protocol):
    def save(self, filename: str, data: bytes) -> Path: ...


class DirectorySaver:
    def __init__(self, directory: str | Path | None = None) -> None:
        self.directory = Path(directory or settings.download_dir)

    def save(self, filename: str, data: bytes) -> Path:
        if not filename or "/" in filename or "\\" in filename or ".." in filename:
            raise ValueError(f"Invalid filename: {filename!r}")
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.directory / filename
        path.write_bytes(data)
        logger.info("blob_saved", path=str(path), size=len(data))
        return path
