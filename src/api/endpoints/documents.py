from typing import Annotated

import structlog
from fastapi import APIRouter, Query, Response

from src.schemas.documents import OUTCOME_HEADER, ImagesResponse
from src.services import image_extraction

logger = structlog.get_logger()

router = APIRouter(prefix="/api")


@router.get("/download", response_model=ImagesResponse)
async def download_document_images(
    response: Response,
    docs_id: Annotated[str, Query(alias="docsId", min_length=1)],
) -> ImagesResponse:
    result = await image_extraction.extract_document_images(docs_id)
    response.headers[OUTCOME_HEADER] = result.outcome.value
    logger.info("document_images_served", docs_id=docs_id, outcome=result.outcome.value, count=len(result.images))
    return ImagesResponse(images=result.images)
