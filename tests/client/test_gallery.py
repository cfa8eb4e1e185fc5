from src.client.gallery import Gallery, GalleryImage, SelectionState

PNG_URI = "data:image/png;base64,iVBORw0KGgo="
JPEG_URI = "data:image/jpeg;base64,/9j/4AAQ"


def _gallery(count: int = 3) -> Gallery:
    return Gallery.from_data_uris([PNG_URI] * count)


class TestGalleryImage:
    def test_display_record_defaults(self) -> None:
        image = GalleryImage.from_data_uri(PNG_URI)
        assert image.src == PNG_URI
        assert image.thumbnail == PNG_URI
        assert (image.thumbnail_width, image.thumbnail_height) == (320, 212)
        assert image.is_selected is False


class TestSelection:
    def test_initially_nothing_selected(self) -> None:
        gallery = _gallery()
        assert gallery.select_all is False
        assert gallery.state == SelectionState.NONE

    def test_toggle_flips_single_image(self) -> None:
        gallery = _gallery()
        gallery.toggle(1)
        assert [image.is_selected for image in gallery.images] == [False, True, False]
        assert gallery.state == SelectionState.SOME
        gallery.toggle(1)
        assert gallery.state == SelectionState.NONE

    def test_select_all_tracks_selection(self) -> None:
        gallery = _gallery()
        gallery.toggle(0)
        assert gallery.select_all is True
        gallery.toggle(0)
        assert gallery.select_all is False

    def test_toggle_all_from_none(self) -> None:
        gallery = _gallery()
        gallery.toggle_all()
        assert all(image.is_selected for image in gallery.images)
        assert gallery.select_all is True
        assert gallery.state == SelectionState.ALL
        gallery.toggle_all()
        assert not any(image.is_selected for image in gallery.images)
        assert gallery.select_all is False

    def test_toggle_all_with_partial_selection_deselects(self) -> None:
        gallery = _gallery()
        gallery.toggle(2)
        gallery.toggle_all()
        assert gallery.selected == []

    def test_selected_keeps_order(self) -> None:
        gallery = Gallery.from_data_uris([PNG_URI, JPEG_URI, PNG_URI])
        gallery.toggle(2)
        gallery.toggle(1)
        assert [image.src for image in gallery.selected] == [JPEG_URI, PNG_URI]

    def test_empty_gallery(self) -> None:
        gallery = Gallery()
        gallery.toggle_all()
        assert len(gallery) == 0
        assert gallery.select_all is False
        assert gallery.state == SelectionState.NONE
