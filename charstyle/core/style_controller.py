"""Style controller: connects host events to the style aggregator"""
from ..common_imports import *
from ..models.chat_models import RenderedMessage
from ..models.settings import StyleSettings
from .classifier import ChatObserver
from .debounce import Debouncer
from .style_aggregator import StyleAggregator, LiveOverrides


class StyleController(QObject):
    """Keeps the sinks in step with the current settings snapshot.

    The active entity (the character whose chat is open) is passed in by the
    host on every relevant event rather than looked up from global state.
    """

    def __init__(self, aggregator: StyleAggregator,
                 settings: Optional[StyleSettings] = None,
                 observer: Optional[ChatObserver] = None,
                 rebuild_delay_ms: int = 300,
                 preview_delay_ms: int = 150,
                 parent=None):
        super().__init__(parent)
        self.aggregator = aggregator
        self.settings = settings or StyleSettings()
        self.observer = observer or ChatObserver(parent=self)
        self.active_entity_id: Optional[str] = None
        self.preview_entity_id: Optional[str] = None

        self._rebuild_debouncer = Debouncer(self.rebuild_now, rebuild_delay_ms, parent=self)
        self._preview_debouncer = Debouncer(self._render_preview, preview_delay_ms, parent=self)

        self.observer.style_update_requested.connect(self.settings_changed)

    def set_settings(self, settings: StyleSettings, rebuild: bool = True):
        """Swap in a new settings snapshot"""
        self.settings = settings
        if rebuild:
            self.rebuild_now()

    def settings_changed(self):
        """Schedule a main rebuild; bursts of changes collapse into one"""
        self._rebuild_debouncer.trigger()

    def rebuild_now(self) -> str:
        self._rebuild_debouncer.cancel()
        css = self.aggregator.rebuild_main_stylesheet(self.settings)
        if self.settings.enabled:
            self._apply_active_global_css()
        return css

    def chat_changed(self, messages: Iterable[RenderedMessage], active_entity_id: Optional[str]):
        """A different chat was opened: re-tag all messages and restyle"""
        self.active_entity_id = active_entity_id
        self.observer.classifier.process_all_messages(messages)
        self.rebuild_now()

    def character_selected(self, entity_id: Optional[str]):
        self.active_entity_id = entity_id
        self._apply_active_global_css()

    def preview(self, entity_id: Optional[str], overrides: Optional[LiveOverrides] = None):
        """Schedule a preview render of unsaved editor values"""
        self.preview_entity_id = entity_id
        self._preview_debouncer.trigger(entity_id, overrides)

    def flush_preview(self):
        self._preview_debouncer.flush()

    def end_preview(self):
        """Editor closed: drop the preview and restore the active page-wide CSS"""
        self._preview_debouncer.cancel()
        self.preview_entity_id = None
        self.aggregator.clear_preview()
        self._apply_active_global_css()

    def _render_preview(self, entity_id: Optional[str], overrides: Optional[LiveOverrides]):
        self.aggregator.rebuild_preview(self.settings, entity_id, overrides)

    def _apply_active_global_css(self):
        if self.active_entity_id:
            self.aggregator.apply_global_freeform_css(self.settings, self.active_entity_id)
        else:
            self.aggregator.clear_global_css()
