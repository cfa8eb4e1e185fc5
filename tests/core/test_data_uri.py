import pytest

from src.core.data_uri import build_data_uri, extension_for, parse_data_uri


class TestBuildDataUri:
    def test_format(self) -> None:
        assert build_data_uri("image/png", b"abc") == "data:image/png;base64,YWJj"

    def test_missing_content_type(self) -> None:
        assert build_data_uri(None, b"").startswith("data:application/octet-stream;base64,")


class TestParseDataUri:
    def test_parses_content_type_and_bytes(self) -> None:
        assert parse_data_uri("data:image/jpeg;base64,YWJj") == ("image/jpeg", b"abc")

    def test_ignores_parameters(self) -> None:
        content_type, data = parse_data_uri("data:image/svg+xml;charset=utf-8;base64,PHN2Zy8+")
        assert content_type == "image/svg+xml"
        assert data == b"<svg/>"

    def test_missing_mime_defaults(self) -> None:
        assert parse_data_uri("data:;base64,YWJj") == ("application/octet-stream", b"abc")

    @pytest.mark.parametrize(
        "uri",
        ["https://example.com/a.png", "data:image/png,plain", "data:image/png;base64,!!!"],
    )
    def test_rejects_invalid(self, uri: str) -> None:
        with pytest.raises(ValueError):
            parse_data_uri(uri)


class TestExtensionFor:
    @pytest.mark.parametrize(
        ("content_type", "ext"),
        [
            ("image/png", "png"),
            ("image/jpeg", "jpeg"),
            ("image/gif", "gif"),
            ("image/svg+xml", "svg"),
            ("image/x-emf", "emf"),
            ("image/x-icon", "icon"),
            ("application/octet-stream", "bin"),
            ("garbage", "bin"),
        ],
    )
    def test_extension(self, content_type: str, ext: str) -> None:
        assert extension_for(content_type) == ext
