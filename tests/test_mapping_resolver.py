"""Tests for the element mapping resolver."""

from charstyle.core.mapping_resolver import (
    resolve_element,
    resolve_mapping,
    MODE_LITERAL,
    MODE_INDIRECT,
    MODE_NONE,
)
from charstyle.models import ElementMapping, SpecificColors, ELEMENT_SLOTS


class TestResolveElement:
    def test_literal_wins_over_every_mode(self):
        for mode in ("primary", "secondary", "neutral"):
            resolution = resolve_element("links", mode, "#123456")
            assert resolution.mode == MODE_LITERAL
            assert resolution.value == "#123456"

    def test_literal_normalized(self):
        assert resolve_element("bold", "neutral", "#abc").value == "#AABBCC"

    def test_primary_and_secondary_are_indirect(self):
        assert resolve_element("bold", "primary").ref == "primary"
        secondary = resolve_element("bold", "secondary")
        assert secondary.mode == MODE_INDIRECT
        assert secondary.ref == "secondary"

    def test_neutral_without_literal_is_none(self):
        assert resolve_element("italic", "neutral").mode == MODE_NONE

    def test_malformed_literal_ignored(self):
        resolution = resolve_element("quotes", "secondary", "oops")
        assert resolution.mode == MODE_INDIRECT

    def test_character_name_follows_mapping(self):
        assert resolve_element("characterName", "neutral").mode == MODE_NONE


class TestResolveMapping:
    def test_all_slots_in_order(self):
        resolutions = resolve_mapping(ElementMapping())
        assert [r.slot for r in resolutions] == list(ELEMENT_SLOTS)

    def test_default_mapping(self):
        modes = {r.slot: r.mode for r in resolve_mapping(ElementMapping())}
        assert modes["characterName"] == MODE_INDIRECT
        assert modes["mainText"] == MODE_NONE
        assert modes["bold"] == MODE_NONE
        assert modes["links"] == MODE_INDIRECT

    def test_specific_colors_applied(self):
        resolutions = resolve_mapping(ElementMapping(), SpecificColors({"mainText": "#010203"}))
        main_text = next(r for r in resolutions if r.slot == "mainText")
        assert main_text.mode == MODE_LITERAL
        assert main_text.value == "#010203"
