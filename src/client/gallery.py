from dataclasses import dataclass
from enum import StrEnum

from src.config import settings


class SelectionState(StrEnum):
    NONE = "none"
    SOME = "some"
    ALL = "all"


@dataclass
class GalleryImage:
    src: str
    thumbnail: str
    thumbnail_width: int
    thumbnail_height: int
    is_selected: bool = False

    @classmethod
    def from_data_uri(cls, src: str) -> "GalleryImage":
        return cls(
            src=src,
            thumbnail=src,
            thumbnail_width=settings.thumbnail_width,
            thumbnail_height=settings.thumbnail_height,
        )


class Gallery:
    def __init__(self, images: list[GalleryImage] | None = None) -> None:
        self.images: list[GalleryImage] = images or []

    @classmethod
    def from_data_uris(cls, uris: list[str]) -> "Gallery":
        return cls([GalleryImage.from_data_uri(uri) for uri in uris])

    def __len__(self) -> int:
        return len(self.images)

    @property
    def select_all(self) -> bool:
        return any(image.is_selected for image in self.images)

    @property
    def state(self) -> SelectionState:
        selected = sum(1 for image in self.images if image.is_selected)
        if selected == 0:
            return SelectionState.NONE
        if selected == len(self.images):
            return SelectionState.ALL
        return SelectionState.SOME

    @property
    def selected(self) -> list[GalleryImage]:
        return [image for image in self.images if image.is_selected]

    def toggle(self, index: int) -> None:
        image = self.images[index]
        image.is_selected = not image.is_selected

    def toggle_all(self) -> None:
        target = not self.select_all
        for image in self.images:
            image.is_selected = target

    def clear(self) -> None:
        self.images = []
