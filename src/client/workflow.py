import asyncio
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

import structlog

from src.client import blobs
from src.client.api_client import ExtractionApiClient
from src.client.blobs import BlobSaver, DirectorySaver
from src.client.docs_link import extract_docs_id
from src.client.gallery import Gallery, SelectionState
from src.config import settings
from src.core.data_uri import extension_for
from src.services.archive import build_zip

logger = structlog.get_logger()

MSG_MISSING_URL = "Please paste a Google Docs link."
MSG_INVALID_LINK = "Please paste a valid public Google Docs link."
MSG_NO_IMAGES = "This document has no images."
MSG_FETCH_SUCCESS = "Images fetched successfully!"
MSG_FETCH_ERROR = "Error fetching images. Please try again."
MSG_NOTHING_SELECTED = "Please select images to download."
MSG_DOWNLOAD_ERROR = "Error downloading images. Please try again."


class WorkflowState(StrEnum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    RESULTS = "results"
    ERROR = "error"


@dataclass
class Notification:
    level: str
    message: str


class Notifier:
    def __init__(self) -> None:
        self.notifications: list[Notification] = []

    def _push(self, level: str, message: str) -> None:
        self.notifications.append(Notification(level=level, message=message))
        logger.info("notification", level=level, message=message)

    def success(self, message: str) -> None:
        self._push("success", message)

    def error(self, message: str) -> None:
        self._push("error", message)

    def dismiss(self) -> None:
        self.notifications.clear()

    @property
    def last(self) -> Notification | None:
        return self.notifications[-1] if self.notifications else None


class DocsImageWorkflow:
    def __init__(
        self,
        api: ExtractionApiClient,
        saver: BlobSaver | None = None,
        notifier: Notifier | None = None,
    ) -> None:
        self.api = api
        self.saver: BlobSaver = saver or DirectorySaver()
        self.notifier = notifier or Notifier()
        self.gallery = Gallery()
        self.url = ""
        self.docs_id = ""
        self.error = ""
        self.loading = False
        self.is_submitted = False
        self.state = WorkflowState.IDLE
        self._generation = 0

    @property
    def select_all(self) -> bool:
        return self.gallery.select_all

    @property
    def selection(self) -> SelectionState:
        return self.gallery.state

    @property
    def can_submit(self) -> bool:
        return bool(self.docs_id) and not self.loading

    def set_url(self, url: str) -> None:
        self.url = url
        self.error = ""
        self.docs_id = extract_docs_id(url)

    async def submit(self) -> bool:
        if self.loading:
            return False
        self.notifier.dismiss()
        if not self.url.strip() or not self.docs_id:
            self.notifier.error(MSG_MISSING_URL)
            return False

        docs_id = self.docs_id
        generation = self._generation
        self.loading = True
        self.state = WorkflowState.SUBMITTING
        try:
            result = await self.api.fetch_images(docs_id)
        except Exception as e:
            if generation != self._generation:
                return False
            logger.error("images_fetch_failed", docs_id=docs_id, error=str(e))
            self.loading = False
            self.notifier.error(MSG_FETCH_ERROR)
            self.state = WorkflowState.ERROR
            return False

        # reset() while the request was in flight
        if generation != self._generation:
            logger.info("stale_images_discarded", docs_id=docs_id)
            return False
        self.loading = False

        if not result.images:
            logger.warning("no_images_returned", docs_id=docs_id, outcome=result.outcome)
            self.notifier.error(MSG_NO_IMAGES if result.outcome == "no_images" else MSG_INVALID_LINK)
            self.state = WorkflowState.ERROR
            return False

        self.gallery = Gallery.from_data_uris(result.images)
        self.is_submitted = True
        self.state = WorkflowState.RESULTS
        self.notifier.success(MSG_FETCH_SUCCESS)
        return True

    def _valid_index(self, index: int) -> bool:
        if 0 <= index < len(self.gallery):
            return True
        logger.warning("image_index_out_of_range", index=index, count=len(self.gallery))
        return False

    def toggle(self, index: int) -> None:
        if self._valid_index(index):
            self.gallery.toggle(index)

    def toggle_all(self) -> None:
        self.gallery.toggle_all()

    async def download_image(self, index: int) -> Path | None:
        try:
            if not self._valid_index(index):
                raise IndexError(f"No image at index {index}")
            content_type, data = await blobs.fetch_blob(self.gallery.images[index].src)
            return self.saver.save(f"image_{index + 1}.{extension_for(content_type)}", data)
        except Exception as e:
            logger.error("image_download_failed", index=index, error=str(e))
            self.error = MSG_DOWNLOAD_ERROR
            self.notifier.error(MSG_DOWNLOAD_ERROR)
            return None

    async def download_zip(self) -> Path | None:
        selected = self.gallery.selected
        if not selected:
            self.notifier.error(MSG_NOTHING_SELECTED)
            return None

        semaphore = asyncio.Semaphore(settings.max_concurrent_downloads)

        async def _fetch(position: int, src: str) -> tuple[str, bytes] | None:
            async with semaphore:
                try:
                    content_type, data = await blobs.fetch_blob(src)
                except Exception as e:
                    logger.error("image_download_failed", index=position, error=str(e))
                    return None
            return f"image_{position}.{extension_for(content_type)}", data

        results = await asyncio.gather(*[_fetch(n, image.src) for n, image in enumerate(selected, 1)])
        entries = [entry for entry in results if entry is not None]
        if len(entries) < len(selected):
            self.error = MSG_DOWNLOAD_ERROR
            self.notifier.error(MSG_DOWNLOAD_ERROR)
        if not entries:
            return None

        try:
            archive = await asyncio.to_thread(build_zip, entries)
            path = self.saver.save(settings.archive_name, archive)
        except Exception as e:
            logger.error("archive_save_failed", error=str(e))
            self.error = MSG_DOWNLOAD_ERROR
            self.notifier.error(MSG_DOWNLOAD_ERROR)
            return None

        logger.info("archive_saved", path=str(path), entries=len(entries), selected=len(selected))
        return path

    def reset(self) -> None:
        self._generation += 1
        self.error = ""
        self.url = ""
        self.docs_id = ""
        self.gallery.clear()
        self.is_submitted = False
        self.loading = False
        self.state = WorkflowState.IDLE
