import asyncio
from dataclasses import dataclass, field
from enum import StrEnum
from io import BytesIO

import mammoth
import structlog
from PIL import Image, UnidentifiedImageError

from src.core.data_uri import DEFAULT_CONTENT_TYPE, build_data_uri
from src.services import docs_export

logger = structlog.get_logger()


class ExtractionOutcome(StrEnum):
    FETCHED = "fetched"
    NO_IMAGES = "no_images"
    UPSTREAM_UNAVAILABLE = "upstream_unavailable"
    UNREADABLE_DOCUMENT = "unreadable_document"


@dataclass
class ExtractionResult:
    outcome: ExtractionOutcome
    images: list[str] = field(default_factory=list)


def detect_content_type(image_bytes: bytes) -> str:
    try:
        with Image.open(BytesIO(image_bytes)) as img:
            return Image.MIME.get(img.format or "", DEFAULT_CONTENT_TYPE)
    except (UnidentifiedImageError, OSError):
        return DEFAULT_CONTENT_TYPE


def extract_images(docx_bytes: bytes) -> list[str]:
    images: list[str] = []

    def _inline_image(image: "mammoth.documents.Image") -> dict[str, str]:
        with image.open() as stream:
            image_bytes = stream.read()
        content_type = image.content_type or detect_content_type(image_bytes)
        data_uri = build_data_uri(content_type, image_bytes)
        images.append(data_uri)
        return {"src": data_uri}

    result = mammoth.convert_to_html(BytesIO(docx_bytes), convert_image=mammoth.images.img_element(_inline_image))
    if result.messages:
        logger.debug("docx_conversion_messages", messages=[m.message for m in result.messages])
    return images


async def extract_document_images(docs_id: str) -> ExtractionResult:
    docx_bytes = await docs_export.fetch_export(docs_id)
    if not docx_bytes:
        return ExtractionResult(outcome=ExtractionOutcome.UPSTREAM_UNAVAILABLE)

    try:
        images = await asyncio.to_thread(extract_images, docx_bytes)
    except Exception as e:
        logger.error("docx_conversion_failed", docs_id=docs_id, error=str(e))
        return ExtractionResult(outcome=ExtractionOutcome.UNREADABLE_DOCUMENT)

    if not images:
        return ExtractionResult(outcome=ExtractionOutcome.NO_IMAGES)

    logger.info("images_extracted", docs_id=docs_id, count=len(images))
    return ExtractionResult(outcome=ExtractionOutcome.FETCHED, images=images)
