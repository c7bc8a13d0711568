"""Core Business Logic Package

This package contains the style engine: color and element mapping
resolution, CSS generation, output sinks, the style aggregator, message
classification and the controller tying them to host events.
"""

# Resolvers
from .color_resolver import normalize_hex, resolve_colors, ResolvedColorSlots
from .mapping_resolver import resolve_element, resolve_mapping, ElementResolution

# CSS Generation
from .css_generator import (
    build_entity_stylesheet,
    build_global_stylesheet,
    generate_entity_css,
    generate_global_css,
    entity_selector,
)

# Output
from .sinks import CSSSink, MemorySink, FileSink, BodyClassList
from .style_aggregator import StyleAggregator, LiveOverrides, merge_live_overrides, build_main_stylesheet

# Messages and Events
from .classifier import MessageClassifier, ChatObserver, classify, extract_avatar_reference
from .debounce import Debouncer
from .style_controller import StyleController

__all__ = [
    # Resolvers
    'normalize_hex',
    'resolve_colors',
    'ResolvedColorSlots',
    'resolve_element',
    'resolve_mapping',
    'ElementResolution',

    # CSS Generation
    'build_entity_stylesheet',
    'build_global_stylesheet',
    'generate_entity_css',
    'generate_global_css',
    'entity_selector',

    # Output
    'CSSSink',
    'MemorySink',
    'FileSink',
    'BodyClassList',
    'StyleAggregator',
    'LiveOverrides',
    'merge_live_overrides',
    'build_main_stylesheet',

    # Messages and Events
    'MessageClassifier',
    'ChatObserver',
    'classify',
    'extract_avatar_reference',
    'Debouncer',
    'StyleController',
]
