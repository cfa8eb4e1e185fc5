import zipfile
from io import BytesIO


def build_zip(entries: list[tuple[str, bytes]]) -> bytes:
    names = [name for name, _ in entries]
    if len(set(names)) != len(names):
        raise ValueError("Duplicate archive entry names")

    buffer = BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        for name, data in entries:
            zf.writestr(name, data)
    return buffer.getvalue()
