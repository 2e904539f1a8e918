"""Domain service: candidate URLs for a remote product image.

Product images are usually Google Drive sharing links, which browsers
and HTTP clients often cannot load directly. Given the raw reference we
build an ordered list of URLs to try, from the form most likely to load
without cross-origin or hotlink trouble down to the reference itself.
"""

from __future__ import annotations

import re
from urllib.parse import urlsplit

DRIVE_HOSTS = frozenset({"drive.google.com", "docs.google.com"})

_FILE_ID = r"([a-zA-Z0-9_-]+)"
_ID_PATTERNS = (
    re.compile(r"/file/d/" + _FILE_ID),  # sharing link: /file/d/<id>/view
    re.compile(r"[?&]id=" + _FILE_ID),   # uc?id=, open?id=, uc?export=view&id=
)

CANDIDATE_TEMPLATES = (
    "https://lh3.googleusercontent.com/d/{file_id}=w400-h400-c",
    "https://drive.google.com/thumbnail?id={file_id}&sz=w400-h400",
    "https://lh3.googleusercontent.com/d/{file_id}",
    "https://drive.google.com/uc?export=view&id={file_id}",
    "https://drive.google.com/uc?id={file_id}",
)


def extract_drive_file_id(url: str | None) -> str | None:
    """Return the Drive document id embedded in *url*, or None.

    Only links on a recognised Drive host are considered; an ``id=``
    query parameter on any other site is not a Drive id.
    """
    if not url or not isinstance(url, str):
        return None
    clean = url.strip()
    host = (urlsplit(clean).hostname or "").lower()
    if host not in DRIVE_HOSTS:
        return None
    for pattern in _ID_PATTERNS:
        match = pattern.search(clean)
        if match:
            return match.group(1)
    return None


def convert_drive_link(url: str | None) -> str | None:
    """Rewrite a Drive sharing link into the direct ``uc?id=`` form.

    Links that are already direct, and anything that is not a Drive
    link, come back unchanged.
    """
    if not url or not isinstance(url, str):
        return url
    if "drive.google.com/uc?id=" in url and "export=view" not in url:
        return url
    file_id = extract_drive_file_id(url)
    if file_id is None:
        return url
    return f"https://drive.google.com/uc?id={file_id}"


def build_candidate_urls(reference: str | None) -> list[str]:
    """Ordered, de-duplicated list of URLs to try for *reference*.

    An empty reference yields no candidates at all. When no document id
    can be extracted the list holds just the (converted) reference.
    Otherwise the reference itself is always the last entry.
    """
    if not reference or not reference.strip():
        return []
    original = reference.strip()
    file_id = extract_drive_file_id(original)
    if file_id is None:
        return [convert_drive_link(original) or original]

    templates = (t.format(file_id=file_id) for t in CANDIDATE_TEMPLATES)
    return [url for url in dict.fromkeys(templates) if url != original] + [original]
