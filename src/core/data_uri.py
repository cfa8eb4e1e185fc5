import base64
import binascii
import re

DEFAULT_CONTENT_TYPE = "application/octet-stream"

_DATA_URI_RE = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)?(?P<params>(?:;[^;,]+=[^;,]*)*);base64,(?P<payload>.*)$", re.DOTALL)

SUBTYPE_TO_EXT = {
    "svg+xml": "svg",
    "x-emf": "emf",
    "x-wmf": "wmf",
    "octet-stream": "bin",
}


def build_data_uri(content_type: str | None, data: bytes) -> str:
    payload = base64.b64encode(data).decode()
    return f"data:{content_type or DEFAULT_CONTENT_TYPE};base64,{payload}"


def parse_data_uri(uri: str) -> tuple[str, bytes]:
    m = _DATA_URI_RE.match(uri)
    if not m:
        raise ValueError("Not a base64 data URI")
    try:
        data = base64.b64decode(m.group("payload"), validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid base64 payload: {e}") from e
    return m.group("mime") or DEFAULT_CONTENT_TYPE, data


def extension_for(content_type: str) -> str:
    _, _, subtype = content_type.lower().partition("/")
    if not subtype:
        return "bin"
    if subtype in SUBTYPE_TO_EXT:
        return SUBTYPE_TO_EXT[subtype]
    subtype = subtype.split("+", 1)[0]
    if subtype.startswith("x-"):
        subtype = subtype[2:]
    return subtype or "bin"
