from urllib.parse import urlencode

import structlog
from resilient_httpx import ProxyHttpClient, RetryPolicy

from src.config import settings

logger = structlog.get_logger()

_client: ProxyHttpClient | None = None


class ExportTooLargeError(Exception):
    pass


def get_http_client() -> ProxyHttpClient:
    global _client
    if _client is None:
        pools = {name: urls for name, urls in settings.proxies.items() if urls}
        _client = ProxyHttpClient(
            proxies=pools or None,
            proxy_strategy=settings.proxy_strategy,
            retry=RetryPolicy(max_attempts=settings.fetch_max_retries),
            timeout=settings.fetch_timeout,
            headers={"User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"},
            fallback_to_direct=True,
        )
    return _client


def build_export_url(docs_id: str) -> str:
    query = urlencode({"id": docs_id, "exportFormat": settings.export_format})
    return f"{settings.export_url}?{query}"


async def fetch_export(docs_id: str, pool: str | None = None) -> bytes | None:
    url = build_export_url(docs_id)
    client = get_http_client()
    try:
        async with client.stream("GET", url, pool=pool) as response:
            response.raise_for_status()
            content_length = response.headers.get("Content-Length")
            if content_length and int(content_length) > settings.max_export_bytes:
                raise ExportTooLargeError(f"Content-Length {content_length} exceeds limit")
            chunks: list[bytes] = []
            received = 0
            async for chunk in response.aiter_bytes():
                received += len(chunk)
                if received > settings.max_export_bytes:
                    raise ExportTooLargeError(f"Body exceeds {settings.max_export_bytes} bytes")
                chunks.append(chunk)
    except Exception as e:
        logger.error("export_fetch_failed", docs_id=docs_id, error=str(e))
        return None

    data = b"".join(chunks)
    logger.info("export_fetched", docs_id=docs_id, size=len(data))
    return data


async def close_client() -> None:
    global _client
    if _client:
        await _client.aclose()
        _client = None
