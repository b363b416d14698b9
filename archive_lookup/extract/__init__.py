"""Field extraction, person classification and candidate normalization."""

from .fields import (
    pick_text,
    first_text,
    safe_url,
    extract_url_from_links,
    parse_year_range,
    new_tmp_id,
    is_tmp_id,
)
from .classifier import Classification, ClassificationResult, PersonClassifier
from .normalizer import make_candidate, coerce_year

__all__ = [
    "pick_text",
    "first_text",
    "safe_url",
    "extract_url_from_links",
    "parse_year_range",
    "new_tmp_id",
    "is_tmp_id",
    "Classification",
    "ClassificationResult",
    "PersonClassifier",
    "make_candidate",
    "coerce_year",
]
