"""Resolve the item list out of a variably shaped response envelope."""

from dataclasses import dataclass, field
from typing import Any, Optional

from archive_lookup.errors import BadPayloadError

# Priority order; the upstream has moved between these across versions.
ENVELOPE_KEYS = ("items", "records", "data", "results", "hits")


@dataclass
class EnvelopeResult:
    """Either the resolved item list or the reason resolution failed."""

    ok: bool
    items: list[Any] = field(default_factory=list)
    key: Optional[str] = None
    reason: str = ""

    def unwrap(self) -> list[Any]:
        """Return the items or raise ``BadPayloadError``."""
        if not self.ok:
            raise BadPayloadError(self.reason)
        return self.items


def resolve_envelope(payload: Any, keys: tuple[str, ...] = ENVELOPE_KEYS) -> EnvelopeResult:
    """Find the first known key in ``payload`` whose value is a list.

    An unrecognized shape is a failure, never an empty success: an empty
    list must mean the upstream really found nothing.
    """
    if not isinstance(payload, dict):
        return EnvelopeResult(ok=False, reason=f"envelope is {type(payload).__name__}, not an object")

    for key in keys:
        value = payload.get(key)
        if isinstance(value, list):
            return EnvelopeResult(ok=True, items=value, key=key)

    present = [k for k in keys if k in payload]
    if present:
        return EnvelopeResult(ok=False, reason=f"no list under {', '.join(present)}")
    return EnvelopeResult(ok=False, reason="no known envelope key")
