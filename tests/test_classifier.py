"""Tests for person classification."""

import pytest

from archive_lookup.extract import Classification, PersonClassifier


def make_item(**kwargs) -> dict:
    """Create a raw archive item with defaults."""
    item = {"id": "SE/RA/1", "caption": "Odhelius, Erich"}
    item.update(kwargs)
    return item


class TestPrimarySignal:
    """Explicit agent/person types are accepted outright."""

    def test_agent_person(self):
        result = PersonClassifier().classify(make_item(objectType="Agent", type="Person"))
        assert result.outcome is Classification.ACCEPT_PRIMARY
        assert result.accepted
        assert result.name == "Odhelius, Erich"

    def test_substring_match(self):
        item = make_item(objectType="Agent (arkivbildare)", subType="Fysisk person")
        assert PersonClassifier().classify(item).outcome is Classification.ACCEPT_PRIMARY

    def test_nested_metadata(self):
        item = make_item(metadata={"objectType": "agent", "subType": "person"})
        assert PersonClassifier().classify(item).outcome is Classification.ACCEPT_PRIMARY

    def test_primary_even_with_odd_name(self):
        item = make_item(objectType="Agent", type="Person", caption="X 1")
        assert PersonClassifier().classify(item).outcome is Classification.ACCEPT_PRIMARY

    def test_agent_without_person_is_not_primary(self):
        item = make_item(objectType="Agent", type="Organisation", caption="Stockholms stad")
        assert PersonClassifier().classify(item).outcome is Classification.REJECT_UNMATCHED


class TestNegativeSignal:
    """Non-person types always win."""

    @pytest.mark.parametrize("type_value", [
        "Archive", "Serie", "Place", "Byggnad", "Ritning", "Map", "Karta",
        "Fotografi", "Photograph", "Volym", "Record set",
    ])
    def test_non_person_types_rejected(self, type_value):
        result = PersonClassifier().classify(make_item(type=type_value))
        assert result.outcome is Classification.REJECT_NEGATIVE

    def test_negative_beats_primary(self):
        item = make_item(objectType="Agent", type="Person", recordType="Ritning")
        assert PersonClassifier().classify(item).outcome is Classification.REJECT_NEGATIVE

    def test_negative_in_metadata(self):
        item = make_item(metadata={"entityKind": "building"})
        assert PersonClassifier().classify(item).outcome is Classification.REJECT_NEGATIVE

    def test_negative_as_nested_value(self):
        item = make_item(objectType={"value": "Archive"})
        assert PersonClassifier().classify(item).outcome is Classification.REJECT_NEGATIVE

    def test_reason_names_category(self):
        result = PersonClassifier().classify(make_item(type="Ritning"))
        assert result.reasons == ["Non-person type: drawing"]


class TestFallback:
    """Items without type signals are judged by their name."""

    @pytest.mark.parametrize("name", [
        "Odhelius, Erich",
        "Karl Johansson",
        "von Linné, Carl",
        "Maria Nilsdotter",
        "Karl XII",
        "Anna-Lisa Andersson",
        "Johansson, Karl-Erik",
        "O'Neill, John",
        "Lind, E.",
    ])
    def test_person_like_names_accepted(self, name):
        result = PersonClassifier().classify({"caption": name})
        assert result.outcome is Classification.ACCEPT_FALLBACK
        assert "Fallback" in result.reasons[0]

    @pytest.mark.parametrize("name", [
        "Församlingens kyrka, ritning",
        "Uppsala domkyrka",
        "Leksands sockenstämma",
        "Falu gruva AB",
        "Gävle slott",
    ])
    def test_stoplist_rejected(self, name):
        result = PersonClassifier().classify({"caption": name})
        assert result.outcome is Classification.REJECT_UNMATCHED

    @pytest.mark.parametrize("name", ["", "Ab", "1704", "A very long title with far too many words"])
    def test_non_names_rejected(self, name):
        assert not PersonClassifier().classify({"caption": name}).accepted

    def test_name_from_metadata_title(self):
        result = PersonClassifier().classify({"metadata": {"title": "Erik Lind"}})
        assert result.outcome is Classification.ACCEPT_FALLBACK
        assert result.name == "Erik Lind"

    def test_not_an_object(self):
        assert PersonClassifier().classify("Karl Johansson").outcome is Classification.REJECT_UNMATCHED


class TestNameHeuristic:
    """Direct tests for the name-likeness check."""

    def test_comma_pattern(self):
        assert PersonClassifier().looks_like_person_name("Persdotter, Anna Maria")

    def test_digits_rejected(self):
        assert not PersonClassifier().looks_like_person_name("Volym 12")

    def test_whitespace_collapsed(self):
        assert PersonClassifier().looks_like_person_name("  Erik   Lind ")
