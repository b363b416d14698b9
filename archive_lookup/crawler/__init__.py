"""HTTP access to the remote archive."""

from .fetcher import FetchGateway
from .envelope import EnvelopeResult, resolve_envelope, ENVELOPE_KEYS

__all__ = ["FetchGateway", "EnvelopeResult", "resolve_envelope", "ENVELOPE_KEYS"]
