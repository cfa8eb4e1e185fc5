import re

DOCS_ID_PATTERN = re.compile(r"/document/d/([a-zA-Z0-9\-_]+)/")


def extract_docs_id(url: str) -> str:
    m = DOCS_ID_PATTERN.search(url)
    return m.group(1) if m else ""
