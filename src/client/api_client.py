from dataclasses import dataclass

import httpx

from src.config import settings
from src.schemas.documents import OUTCOME_HEADER


@dataclass
class ExtractionResponse:
    images: list[str]
    outcome: str | None = None


class ExtractionApiClient:
    def __init__(self, http: httpx.AsyncClient | None = None, base_url: str | None = None) -> None:
        self._http = http or httpx.AsyncClient(base_url=base_url or settings.api_base_url)

    async def fetch_images(self, docs_id: str) -> ExtractionResponse:
        response = await self._http.get("/api/download", params={"docsId": docs_id})
        response.raise_for_status()
        data = response.json()
        return ExtractionResponse(images=list(data["images"]), outcome=response.headers.get(OUTCOME_HEADER))

    async def aclose(self) -> None:
        await self._http.aclose()
