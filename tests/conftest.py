from collections.abc import AsyncIterator, Callable
from io import BytesIO

import docx
import pytest
from httpx import ASGITransport, AsyncClient
from PIL import Image

from src.main import app


def _make_test_image(fmt: str = "PNG", color: str = "red", width: int = 40, height: int = 30) -> bytes:
    img = Image.new("RGB", (width, height), color=color)
    buffer = BytesIO()
    img.save(buffer, format=fmt)
    return buffer.getvalue()


def _make_docx(images: list[bytes]) -> bytes:
    document = docx.Document()
    document.add_paragraph("Document with pictures")
    for image_bytes in images:
        document.add_picture(BytesIO(image_bytes))
    buffer = BytesIO()
    document.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def make_image() -> Callable[..., bytes]:
    return _make_test_image


@pytest.fixture
def make_docx() -> Callable[[list[bytes]], bytes]:
    return _make_docx


@pytest.fixture
async def client() -> AsyncIterator[AsyncClient]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
