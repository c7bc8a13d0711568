"""Data Models Package

This package contains all data models for the style customizer, including
color slots and element mapping, per-entity style settings, the settings
snapshot, structured CSS rules and rendered chat messages.
"""

from .color_models import (
    ColorSlots,
    ElementMapping,
    SpecificColors,
    COLOR_SLOTS,
    ELEMENT_SLOTS,
    MAPPING_MODES,
    DEFAULT_MAIN_COLORS,
    DEFAULT_COLOR_MAPPING,
)
from .entity import (
    EntityKind,
    EntitySettings,
    make_entity_id,
    parse_entity_id,
    entity_display_name,
    entity_marker_class,
)
from .settings import GlobalSettings, UserSettings, StyleSettings
from .css_models import CSSRule, RawCSSBlock, Stylesheet
from .chat_models import RenderedMessage, AUTHOR_UID_ATTR, IS_USER_ATTR

__all__ = [
    # Color Models
    'ColorSlots',
    'ElementMapping',
    'SpecificColors',
    'COLOR_SLOTS',
    'ELEMENT_SLOTS',
    'MAPPING_MODES',
    'DEFAULT_MAIN_COLORS',
    'DEFAULT_COLOR_MAPPING',

    # Entity Models
    'EntityKind',
    'EntitySettings',
    'make_entity_id',
    'parse_entity_id',
    'entity_display_name',
    'entity_marker_class',

    # Settings Models
    'GlobalSettings',
    'UserSettings',
    'StyleSettings',

    # CSS Models
    'CSSRule',
    'RawCSSBlock',
    'Stylesheet',

    # Chat Models
    'RenderedMessage',
    'AUTHOR_UID_ATTR',
    'IS_USER_ATTR',
]
