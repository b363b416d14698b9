"""Field pickers for inconsistently shaped upstream items."""

import random
import re
import string
import time
from typing import Any, Optional

TEXT_KEYS = ("text", "value", "label", "title", "name", "caption", "displayName", "content")
LINK_RELATIONS = ("html", "self", "alternate", "record", "ui", "web")
TMP_ID_PREFIX = "tmp_"

_HTTP_URL = re.compile(r"^https?://", re.I)
_YEAR = re.compile(r"\b(1[0-9]{3}|20[0-9]{2})\b")
_BASE36 = string.digits + string.ascii_lowercase


def pick_text(value: Any) -> str:
    """Flatten a string, number, list or nested object into one trimmed string.

    Objects are unwrapped through the first present semantic key in
    ``TEXT_KEYS``; list elements are joined with a single space.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)
    if isinstance(value, (list, tuple)):
        return " ".join(p for p in (pick_text(v) for v in value) if p).strip()
    if isinstance(value, dict):
        for key in TEXT_KEYS:
            if value.get(key) is not None:
                return pick_text(value[key])
        return ""
    return str(value).strip()


def first_text(*values: Any) -> str:
    """Return the first non-empty ``pick_text`` among ``values``."""
    for value in values:
        text = pick_text(value)
        if text:
            return text
    return ""


def safe_url(value: Any) -> str:
    """Return ``value`` if it is an absolute http(s) URL, else ''."""
    if not isinstance(value, str):
        return ""
    url = value.strip()
    if not url or not _HTTP_URL.match(url):
        return ""
    return url


def extract_url_from_links(links: Any) -> str:
    """Pick a usable URL from a ``{relation: {href} | [{href}]}`` map."""
    if not isinstance(links, dict):
        return ""

    for rel in LINK_RELATIONS:
        url = _href_of(links.get(rel))
        if url:
            return url

    for node in links.values():
        if isinstance(node, dict):
            url = safe_url(node.get("href"))
            if url:
                return url
    return ""


def _href_of(node: Any) -> str:
    if isinstance(node, dict):
        return safe_url(node.get("href"))
    if isinstance(node, list):
        for entry in node:
            if isinstance(entry, dict):
                url = safe_url(entry.get("href"))
                if url:
                    return url
    return ""


def parse_year_range(value: Any) -> tuple[Optional[int], Optional[int]]:
    """Extract (birth, death) from text like "1661 - 1704".

    The first two 4-digit years in document order are used as-is. No
    ordering check is done; the upstream text is authoritative.
    """
    text = pick_text(value)
    if not text:
        return None, None

    years = [int(y) for y in _YEAR.findall(text)]
    birth = years[0] if len(years) >= 1 else None
    death = years[1] if len(years) >= 2 else None
    return birth, death


def new_tmp_id() -> str:
    """Locally unique placeholder id, valid only within one response."""
    return f"{TMP_ID_PREFIX}{_to_base36(int(time.time() * 1000))}_{_random_suffix()}"


def is_tmp_id(value: str) -> bool:
    return value.startswith(TMP_ID_PREFIX)


def _to_base36(n: int) -> str:
    digits = []
    while n:
        n, rem = divmod(n, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits)) or "0"


def _random_suffix(length: int = 6) -> str:
    return "".join(random.choices(_BASE36, k=length))
