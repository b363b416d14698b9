"""Canonical Candidate construction."""

import math
from typing import Any, Iterable, Optional

from archive_lookup.models import Candidate, NAME_MISSING
from archive_lookup.models.candidate import MAX_YEAR, MIN_YEAR

from .fields import new_tmp_id, safe_url


def make_candidate(
    id: Any = None,
    name: Any = None,
    birth_year: Any = None,
    death_year: Any = None,
    place: Any = None,
    source: Any = None,
    url: Any = None,
    why: Optional[Iterable[Any]] = None,
) -> Candidate:
    """Build a Candidate from loosely typed values.

    Every provider goes through here. Values are coerced rather than
    rejected: bad years become None, bad URLs become '', and a missing
    id or name is replaced by a placeholder.
    """
    return Candidate(
        id=_text(id) or new_tmp_id(),
        name=_text(name) or NAME_MISSING,
        birth_year=coerce_year(birth_year),
        death_year=coerce_year(death_year),
        place=_text(place),
        source=_text(source),
        url=safe_url(_text(url)),
        why=_dedupe_why(why),
    )


def coerce_year(value: Any) -> Optional[int]:
    """Return a plausible year as int, or None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value.isdecimal():
            return None
        year = int(value)
    elif isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            return None
        year = int(value)
    elif isinstance(value, int):
        year = value
    else:
        return None
    return year if MIN_YEAR <= year <= MAX_YEAR else None


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _dedupe_why(why: Optional[Iterable[Any]]) -> tuple[str, ...]:
    if why is None or isinstance(why, (str, bytes)):
        why = [why] if why else []
    seen: list[str] = []
    for entry in why:
        if entry is None:
            continue
        text = str(entry).strip()
        if text and text not in seen:
            seen.append(text)
    return tuple(seen)
