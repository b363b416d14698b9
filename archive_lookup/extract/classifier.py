"""Person-vs-non-person classification of raw archive items."""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from .fields import first_text, pick_text

logger = logging.getLogger(__name__)


class Classification(str, Enum):
    """Outcome of classifying one raw item."""

    ACCEPT_PRIMARY = "accept_primary"
    ACCEPT_FALLBACK = "accept_fallback"
    REJECT_NEGATIVE = "reject_negative"
    REJECT_UNMATCHED = "reject_unmatched"

    @property
    def accepted(self) -> bool:
        return self in (Classification.ACCEPT_PRIMARY, Classification.ACCEPT_FALLBACK)


@dataclass
class ClassificationResult:
    """Result of person classification."""

    outcome: Classification
    name: str = ""
    reasons: list[str] = field(default_factory=list)

    @property
    def accepted(self) -> bool:
        return self.outcome.accepted


class PersonClassifier:
    """Decide whether a raw item represents a person.

    Negative type signals always win. An explicit agent/person type is
    accepted outright. Items without any type signal fall back to a
    name-likeness check and are marked as lower confidence.
    """

    OBJECT_TYPE_KEYS = ("objectType", "object_type")
    SUB_TYPE_KEYS = ("subType", "sub_type", "subtype", "type")
    TYPE_KEYS = (
        "objectType", "object_type", "type", "subType", "sub_type", "subtype",
        "recordType", "record_type", "entityKind", "entity_kind", "kind",
    )
    NAME_KEYS = ("caption", "name", "title", "label")

    NON_PERSON_PATTERNS = {
        "archival series": [r"\barchives?\b", r"\barkiv(et)?\b", r"\barkivserie", r"\bseries\b", r"\bserie\b"],
        "place": [r"\bplaces?\b", r"\bplats(er)?\b", r"\blocation\b", r"\bort\b"],
        "building": [r"\bbuilding", r"\bbyggnad"],
        "drawing": [r"\bdrawing", r"\britning"],
        "map": [r"\bmaps?\b", r"\bkart(a|or)\b"],
        "photograph": [r"\bphoto", r"\bfotografi", r"\bbild(er)?\b"],
        "record set": [r"\brecord ?sets?\b", r"\bfonds?\b", r"\bvolumes?\b", r"\bvolym", r"\bcollection"],
    }

    # Institutional, ecclesiastical and architectural terms. Substrings catch
    # Swedish compounds ("domkyrka", "Storkyrkoförsamling").
    STOP_SUBSTRINGS = (
        "kyrk", "församling", "socken", "ritning", "byggnad", "prästgård",
        "kloster", "sjukhus", "lasarett", "regemente", "kommun", "skola",
        "arkiv", "härad", "fabrik", "aktiebolag", "förening", "sällskap",
        "church", "parish", "cathedral", "chapel", "hospital", "school",
        "building", "drawing", "archive", "company", "society",
    )
    STOP_WORDS = (
        "ab", "hb", "län", "gård", "bruk", "slott", "bro", "karta", "kartor",
        "map", "plan", "kapell", "stad", "hamn", "torg",
    )

    _WORD = r"[^\W\d_](?:[^\W\d_]|['.\-])*"
    COMMA_NAME = re.compile(rf"^{_WORD}(?:\s+{_WORD}){{0,2}},\s*{_WORD}(?:\s+{_WORD}){{0,3}}$")
    FREE_NAME = re.compile(rf"^{_WORD}(?:\s+{_WORD}){{0,3}}$")

    MIN_NAME_LENGTH = 3

    def __init__(self):
        self._negative = {
            label: [re.compile(p, re.I) for p in patterns]
            for label, patterns in self.NON_PERSON_PATTERNS.items()
        }

    def classify(self, item: Any) -> ClassificationResult:
        """Classify one raw item."""
        if not isinstance(item, dict):
            return ClassificationResult(Classification.REJECT_UNMATCHED, reasons=["not an object"])

        name = self.display_name(item)

        tokens = self.type_tokens(item)
        negative = self._negative_label(tokens)
        if negative:
            logger.debug(f"Rejected item: non-person type ({negative})")
            return ClassificationResult(
                Classification.REJECT_NEGATIVE,
                name=name,
                reasons=[f"Non-person type: {negative}"],
            )

        if self._has_primary_signal(item):
            return ClassificationResult(
                Classification.ACCEPT_PRIMARY,
                name=name,
                reasons=["Type: agent/person"],
            )

        if self.looks_like_person_name(name):
            return ClassificationResult(
                Classification.ACCEPT_FALLBACK,
                name=name,
                reasons=["Fallback: name pattern, no type signal"],
            )

        logger.debug("Rejected item: no person signal")
        return ClassificationResult(
            Classification.REJECT_UNMATCHED,
            name=name,
            reasons=["No person signal"],
        )

    def display_name(self, item: dict) -> str:
        """Best-guess display name for an item."""
        metadata = item.get("metadata")
        md_title = metadata.get("title") if isinstance(metadata, dict) else None
        return first_text(*(item.get(k) for k in self.NAME_KEYS), md_title)

    def type_tokens(self, item: dict) -> list[str]:
        """All normalized type-like tokens on the item and its metadata."""
        tokens = []
        for source in self._sources(item):
            for key in self.TYPE_KEYS:
                token = _normalize(pick_text(source.get(key)))
                if token:
                    tokens.append(token)
        return tokens

    def looks_like_person_name(self, name: str) -> bool:
        """Heuristic check that ``name`` reads as a personal name."""
        text = " ".join(name.split())
        if len(text) < self.MIN_NAME_LENGTH:
            return False
        if not any(ch.isalpha() for ch in text):
            return False

        lowered = text.lower()
        if any(term in lowered for term in self.STOP_SUBSTRINGS):
            return False
        words = re.findall(r"[^\W\d_]+", lowered)
        if any(word in self.STOP_WORDS for word in words):
            return False

        return bool(self.COMMA_NAME.match(text) or self.FREE_NAME.match(text))

    def _has_primary_signal(self, item: dict) -> bool:
        for source in self._sources(item):
            object_type = _normalize(first_text(*(source.get(k) for k in self.OBJECT_TYPE_KEYS)))
            if "agent" not in object_type:
                continue
            for key in self.SUB_TYPE_KEYS:
                if "person" in _normalize(pick_text(source.get(key))):
                    return True
        return False

    def _negative_label(self, tokens: list[str]) -> Optional[str]:
        for token in tokens:
            for label, patterns in self._negative.items():
                if any(p.search(token) for p in patterns):
                    return label
        return None

    @staticmethod
    def _sources(item: dict) -> list[dict]:
        sources = [item]
        metadata = item.get("metadata")
        if isinstance(metadata, dict):
            sources.append(metadata)
        return sources


def _normalize(text: str) -> str:
    return " ".join(text.lower().split())
