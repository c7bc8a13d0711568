"""Character Style Customizer

Per-character and per-persona chat theming: resolves color settings into
CSS, tags chat messages with their author's entity id and keeps the
generated stylesheets in the host page up to date.
"""

__version__ = "1.0.0"

from .models import (
    ColorSlots,
    ElementMapping,
    SpecificColors,
    EntityKind,
    EntitySettings,
    GlobalSettings,
    UserSettings,
    StyleSettings,
    RenderedMessage,
)
from .core import (
    generate_entity_css,
    generate_global_css,
    StyleAggregator,
    StyleController,
    LiveOverrides,
    MessageClassifier,
    MemorySink,
    FileSink,
    classify,
)
