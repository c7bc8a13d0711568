"""Tests for the style aggregator and its sinks."""

from charstyle.core.css_generator import generate_global_css, generate_entity_css
from charstyle.core.sinks import MemorySink, FileSink, BodyClassList
from charstyle.core.style_aggregator import (
    StyleAggregator,
    LiveOverrides,
    merge_live_overrides,
    build_main_stylesheet,
)
from charstyle.models import (
    ColorSlots,
    SpecificColors,
    EntitySettings,
    StyleSettings,
    entity_marker_class,
)

ARIA = "character|Aria|aria.png"
SAM = "persona|Sam|sam.png"


def _with_global_css(settings):
    settings.enable_global_css = True
    settings.character_settings[ARIA].global_css = ".drawer { color: red; }"
    settings.character_settings[SAM].global_css = "body { background: #000; }"
    return settings


class TestMainStylesheet:
    def test_global_then_entities(self, aggregator, sinks, settings):
        css = aggregator.rebuild_main_stylesheet(settings)
        mapping = settings.global_settings.color_mapping
        expected = "\n".join([
            generate_global_css(settings.global_settings, settings.user_settings),
            generate_entity_css(ARIA, settings.character_settings[ARIA], mapping),
            generate_entity_css(SAM, settings.character_settings[SAM], mapping),
        ])
        assert css == expected
        assert sinks["main"].text == expected

    def test_rebuild_replaces_content(self, aggregator, sinks, settings):
        aggregator.rebuild_main_stylesheet(settings)
        del settings.character_settings[SAM]
        aggregator.rebuild_main_stylesheet(settings)
        assert SAM not in sinks["main"].text
        assert sinks["main"].write_count == 2

    def test_repeated_rebuild_is_stable(self, aggregator, sinks, settings):
        first = aggregator.rebuild_main_stylesheet(settings)
        second = aggregator.rebuild_main_stylesheet(settings)
        assert first == second

    def test_empty_settings_still_write_global_rules(self, aggregator, sinks):
        css = aggregator.rebuild_main_stylesheet(StyleSettings())
        assert css.startswith(":root {")
        assert "csc-author-uid=" not in css

    def test_disabled_clears_everything(self, aggregator, sinks, settings):
        _with_global_css(settings)
        aggregator.rebuild_main_stylesheet(settings)
        aggregator.apply_global_freeform_css(settings, ARIA)

        settings.enabled = False
        css = aggregator.rebuild_main_stylesheet(settings)
        assert css == ""
        assert sinks["main"].text == ""
        assert sinks["global"].text == ""
        assert aggregator.body.classes == ["theme-dark"]

    def test_missing_sink_is_noop(self, settings):
        aggregator = StyleAggregator()
        assert aggregator.rebuild_main_stylesheet(settings) == ""
        assert aggregator.rebuild_preview(settings, ARIA) == ""
        assert aggregator.apply_global_freeform_css(settings, ARIA) is False

    def test_signal_emitted(self, aggregator, sinks, settings, mocker):
        received = []
        aggregator.main_stylesheet_changed.connect(lambda css: received.append(css))
        write = mocker.spy(sinks["main"], "write")
        css = aggregator.rebuild_main_stylesheet(settings)
        assert received == [css]
        write.assert_called_once_with(css)

    def test_build_main_stylesheet_order(self, settings):
        sheet = build_main_stylesheet(settings)
        assert sheet.items[0].selectors == (":root",)
        entity_rules = [i for i in sheet.items if any(ARIA in s or SAM in s for s in i.selectors)]
        assert ARIA in entity_rules[0].selectors[0]


class TestGlobalFreeformCSS:
    def test_applies_text_and_marker(self, aggregator, sinks, settings):
        _with_global_css(settings)
        assert aggregator.apply_global_freeform_css(settings, ARIA) is True
        assert ".drawer { color: red; }" in sinks["global"].text
        assert sinks["global"].text.startswith("/* Global CSS for character|Aria|aria.png */")
        assert entity_marker_class(ARIA) in aggregator.body

    def test_marker_class_name(self):
        assert entity_marker_class(ARIA) == "csc-global-css-character-Aria-aria_png"

    def test_switching_entities_never_stacks(self, aggregator, sinks, settings):
        _with_global_css(settings)
        aggregator.apply_global_freeform_css(settings, ARIA)
        aggregator.apply_global_freeform_css(settings, SAM)

        assert entity_marker_class(ARIA) not in aggregator.body
        assert entity_marker_class(SAM) in aggregator.body
        assert "theme-dark" in aggregator.body
        assert "body { background: #000; }" in sinks["global"].text
        assert ".drawer" not in sinks["global"].text
        assert aggregator.active_global_entity == SAM

    def test_feature_disabled_clears(self, aggregator, sinks, settings):
        _with_global_css(settings)
        aggregator.apply_global_freeform_css(settings, ARIA)
        settings.enable_global_css = False
        assert aggregator.apply_global_freeform_css(settings, ARIA) is False
        assert sinks["global"].text == ""
        assert aggregator.body.classes == ["theme-dark"]

    def test_entity_flag_disabled(self, aggregator, sinks, settings):
        _with_global_css(settings)
        settings.character_settings[ARIA].enable_global_css = False
        assert aggregator.apply_global_freeform_css(settings, ARIA) is False
        assert sinks["global"].text == ""

    def test_unknown_entity_or_empty_text(self, aggregator, sinks, settings):
        settings.enable_global_css = True
        assert aggregator.apply_global_freeform_css(settings, "character|Nobody|x.png") is False
        assert aggregator.apply_global_freeform_css(settings, ARIA) is False
        assert aggregator.apply_global_freeform_css(settings, None) is False

    def test_clear_emits_once(self, aggregator, settings):
        _with_global_css(settings)
        aggregator.apply_global_freeform_css(settings, ARIA)
        received = []
        aggregator.global_css_changed.connect(lambda entity_id, css: received.append((entity_id, css)))
        aggregator.clear_global_css()
        aggregator.clear_global_css()
        assert received == [("", "")]


class TestPreview:
    def test_preview_uses_live_values(self, aggregator, sinks, settings):
        overrides = LiveOverrides(main_colors={"primary": "#00ff00"}, custom_css="font-weight: bold;")
        css = aggregator.rebuild_preview(settings, ARIA, overrides)
        assert "--csc-char-primary: #00FF00;" in css
        assert "font-weight: bold;" in css
        assert sinks["preview"].text == css

    def test_preview_does_not_touch_saved_or_main(self, aggregator, sinks, settings):
        aggregator.rebuild_main_stylesheet(settings)
        main_before = sinks["main"].text
        aggregator.rebuild_preview(settings, ARIA, LiveOverrides(main_colors={"primary": "#00ff00"}))
        assert settings.character_settings[ARIA].main_colors.primary == ""
        assert sinks["main"].text == main_before

    def test_preview_for_unsaved_entity(self, aggregator, sinks, settings):
        css = aggregator.rebuild_preview(settings, "character|New|new.png",
                                         LiveOverrides(specific_colors={"quotes": "#abc"}))
        assert "color: #AABBCC !important;" in css

    def test_preview_applies_live_global_css(self, aggregator, sinks, settings):
        settings.enable_global_css = True
        aggregator.rebuild_preview(settings, ARIA, LiveOverrides(global_css=".x { top: 0; }"))
        assert ".x { top: 0; }" in sinks["global"].text

    def test_no_entity_clears_preview(self, aggregator, sinks, settings):
        aggregator.rebuild_preview(settings, ARIA)
        aggregator.rebuild_preview(settings, None)
        assert sinks["preview"].text == ""

    def test_clear_preview(self, aggregator, sinks, settings):
        aggregator.rebuild_preview(settings, ARIA)
        aggregator.clear_preview()
        assert sinks["preview"].text == ""


class TestMergeLiveOverrides:
    def test_empty_fields_keep_saved(self):
        saved = EntitySettings(main_colors=ColorSlots(primary="#111111"), custom_css="a: b;")
        merged = merge_live_overrides(saved, LiveOverrides(main_colors={"primary": ""}))
        assert merged.main_colors.primary == "#111111"
        assert merged.custom_css == "a: b;"

    def test_overrides_win(self):
        saved = EntitySettings(specific_colors=SpecificColors({"bold": "#111111"}))
        merged = merge_live_overrides(saved, LiveOverrides(
            main_colors={"bgPrimary": "#222222"},
            specific_colors={"bold": "#333333"},
            custom_css="",
            enable_global_css=False,
        ))
        assert merged.main_colors.bg_primary == "#222222"
        assert merged.specific_colors.get("bold") == "#333333"
        assert merged.custom_css == ""
        assert merged.enable_global_css is False

    def test_saved_untouched(self):
        saved = EntitySettings()
        merge_live_overrides(saved, LiveOverrides(main_colors={"primary": "#fff"}))
        assert saved.main_colors.primary == ""

    def test_nothing_saved(self):
        merged = merge_live_overrides(None, None)
        assert merged == EntitySettings()


class TestSinks:
    def test_file_sink_roundtrip(self, tmp_path):
        sink = FileSink(tmp_path / "out" / "main.css")
        sink.write(".a { color: red; }")
        assert sink.text == ".a { color: red; }"
        sink.clear()
        assert sink.text == ""
        assert not (tmp_path / "out" / "main.css.tmp").exists()

    def test_file_sink_missing_file(self, tmp_path):
        assert FileSink(tmp_path / "none.css").text == ""

    def test_memory_sink_counts_writes(self):
        sink = MemorySink()
        sink.write("x")
        sink.clear()
        assert sink.text == ""
        assert sink.write_count == 2

    def test_body_class_list(self):
        body = BodyClassList(["a", "csc-global-css-x"])
        body.add("a")
        assert body.remove_prefixed() == ["csc-global-css-x"]
        assert body.class_name == "a"
