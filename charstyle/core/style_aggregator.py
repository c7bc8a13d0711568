"""Style Aggregator

Owns the three CSS outputs of the customizer:

* main      - global rules followed by every saved entity, always active
* preview   - one entity's unsaved edits while its style editor is open
* page-wide - the free-form global CSS of the single active entity

Every write replaces the previous sink content, so rebuilding is also the
reset path.
"""
from ..common_imports import *
from ..models.color_models import ColorSlots, SpecificColors
from ..models.css_models import Stylesheet
from ..models.entity import EntitySettings, entity_marker_class
from ..models.settings import StyleSettings
from ..utils.helpers import css_comment
from .css_generator import build_global_stylesheet, build_entity_stylesheet
from .sinks import CSSSink, BodyClassList


@dataclass
class LiveOverrides:
    """Values currently typed into the style editor, not yet saved"""
    main_colors: Dict[str, str] = field(default_factory=dict)      # stored keys: primary, bgPrimary...
    specific_colors: Dict[str, str] = field(default_factory=dict)  # element slot -> color
    custom_css: Optional[str] = None
    global_css: Optional[str] = None
    enable_global_css: Optional[bool] = None


def merge_live_overrides(saved: Optional[EntitySettings],
                         overrides: Optional[LiveOverrides]) -> EntitySettings:
    """Overlay editor values on saved settings without touching the saved copy.

    Empty editor fields keep the saved value, matching how the color pickers
    report "nothing entered".
    """
    saved = saved or EntitySettings()
    overrides = overrides or LiveOverrides()

    main_colors = saved.main_colors.to_dict()
    main_colors.update({k: v for k, v in overrides.main_colors.items() if v})

    specific_colors = saved.specific_colors.to_dict()
    specific_colors.update({k: v for k, v in overrides.specific_colors.items() if v})

    return EntitySettings(
        main_colors=ColorSlots.from_dict(main_colors),
        specific_colors=SpecificColors.from_dict(specific_colors),
        custom_css=saved.custom_css if overrides.custom_css is None else overrides.custom_css,
        global_css=saved.global_css if overrides.global_css is None else overrides.global_css,
        enable_global_css=(
            saved.enable_global_css if overrides.enable_global_css is None
            else overrides.enable_global_css
        ),
    )


def build_main_stylesheet(settings: StyleSettings) -> Stylesheet:
    """Global rules first (lowest priority), then each entity in stored order"""
    sheet = build_global_stylesheet(settings.global_settings, settings.user_settings)
    mapping = settings.global_settings.color_mapping
    for entity_id, entity_settings in settings.character_settings.items():
        sheet = sheet + build_entity_stylesheet(
            entity_id, entity_settings, mapping, settings.enable_character_css
        )
    return sheet


class StyleAggregator(QObject):
    """Writes generated CSS into the main, preview and page-wide sinks"""

    main_stylesheet_changed = Signal(str)
    preview_changed = Signal(str)
    global_css_changed = Signal(str, str)  # entity id ("" when cleared), css text

    def __init__(self, main_sink: Optional[CSSSink] = None,
                 preview_sink: Optional[CSSSink] = None,
                 global_sink: Optional[CSSSink] = None,
                 body: Optional[BodyClassList] = None,
                 parent=None):
        super().__init__(parent)
        self.main_sink = main_sink
        self.preview_sink = preview_sink
        self.global_sink = global_sink
        self.body = body if body is not None else BodyClassList()
        self.active_global_entity: Optional[str] = None

    # ---------- main ----------

    def rebuild_main_stylesheet(self, settings: StyleSettings) -> str:
        """Regenerate the full stylesheet and replace the main sink content"""
        if self.main_sink is None:
            print("⚠️ Main style sink not ready, skipping rebuild")
            return ""

        if not settings.enabled:
            print("🎨 Style customizer disabled, clearing styles")
            self.main_sink.clear()
            self.clear_global_css()
            self.main_stylesheet_changed.emit("")
            return ""

        css = build_main_stylesheet(settings).to_css()
        self.main_sink.write(css)
        self.main_stylesheet_changed.emit(css)
        return css

    # ---------- page-wide ----------

    def clear_global_css(self):
        """Remove any active page-wide CSS and its body marker classes"""
        if self.global_sink is not None:
            self.global_sink.clear()
        self.body.remove_prefixed()
        if self.active_global_entity is not None:
            self.active_global_entity = None
            self.global_css_changed.emit("", "")

    def apply_global_freeform_css(self, settings: StyleSettings, entity_id: Optional[str],
                                  entity_settings: Optional[EntitySettings] = None) -> bool:
        """Make `entity_id` the single entity whose global CSS is on the page.

        The previous entity's CSS and marker are always removed first. Returns
        True when something was applied.
        """
        if self.global_sink is None:
            print("⚠️ Global CSS sink not ready, skipping")
            return False

        self.clear_global_css()

        if not settings.enabled or not settings.enable_global_css:
            return False

        entity = entity_settings if entity_settings is not None else settings.get_entity(entity_id)
        if not entity_id or entity is None:
            return False
        if not entity.enable_global_css or not entity.global_css.strip():
            return False

        css = f"{css_comment(f'Global CSS for {entity_id}')}\n{entity.global_css}"
        self.body.add(entity_marker_class(entity_id))
        self.global_sink.write(css)
        self.active_global_entity = entity_id
        self.global_css_changed.emit(entity_id, css)
        print(f"🎨 Applied global CSS for {entity_id}")
        return True

    # ---------- preview ----------

    def rebuild_preview(self, settings: StyleSettings, entity_id: Optional[str],
                        live_overrides: Optional[LiveOverrides] = None) -> str:
        """Render saved settings plus unsaved editor values into the preview sink"""
        if self.preview_sink is None:
            print("⚠️ Preview style sink not ready, skipping")
            return ""

        if not entity_id:
            self.clear_preview()
            return ""

        merged = merge_live_overrides(settings.get_entity(entity_id), live_overrides)
        css = build_entity_stylesheet(
            entity_id,
            merged,
            settings.global_settings.color_mapping,
            settings.enable_character_css,
        ).to_css()
        self.preview_sink.write(css)
        self.preview_changed.emit(css)

        if settings.enable_global_css and merged.enable_global_css and merged.global_css:
            self.apply_global_freeform_css(settings, entity_id, merged)

        return css

    def clear_preview(self):
        if self.preview_sink is not None:
            self.preview_sink.clear()
        self.preview_changed.emit("")
