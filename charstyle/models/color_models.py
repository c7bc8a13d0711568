"""Color Configuration Models"""
from ..common_imports import *


# Main color slots: attribute name -> stored (camelCase) key
COLOR_SLOTS: Tuple[Tuple[str, str], ...] = (
    ("primary", "primary"),
    ("secondary", "secondary"),
    ("bg_primary", "bgPrimary"),
    ("bg_secondary", "bgSecondary"),
)

# Message sub-elements, in the order rules are generated
ELEMENT_SLOTS: Tuple[str, ...] = (
    "characterName",
    "mainText",
    "quotes",
    "bold",
    "italic",
    "boldItalic",
    "underline",
    "strikethrough",
    "blockquoteBorder",
    "links",
    "linksHover",
)

MAPPING_PRIMARY = "primary"
MAPPING_SECONDARY = "secondary"
MAPPING_NEUTRAL = "neutral"
MAPPING_MODES = (MAPPING_PRIMARY, MAPPING_SECONDARY, MAPPING_NEUTRAL)

DEFAULT_MAIN_COLORS: Dict[str, str] = {
    "primary": "#51A0DE",     # Main accent color
    "secondary": "#FFFFFF",   # Secondary accent color
    "bgPrimary": "#1E1E1E",   # Main background color
    "bgSecondary": "#333333", # Secondary background color
}

DEFAULT_COLOR_MAPPING: Dict[str, str] = {
    "characterName": MAPPING_PRIMARY,
    "mainText": MAPPING_NEUTRAL,
    "quotes": MAPPING_SECONDARY,
    "bold": MAPPING_NEUTRAL,
    "italic": MAPPING_NEUTRAL,
    "boldItalic": MAPPING_PRIMARY,
    "underline": MAPPING_SECONDARY,
    "strikethrough": MAPPING_SECONDARY,
    "blockquoteBorder": MAPPING_PRIMARY,
    "links": MAPPING_PRIMARY,
    "linksHover": MAPPING_SECONDARY,
}


@dataclass
class ColorSlots:
    """The four main colors of a scope. Empty string means "inherit"."""
    primary: str = ""
    secondary: str = ""
    bg_primary: str = ""
    bg_secondary: str = ""

    def get(self, slot: str) -> str:
        return getattr(self, slot)

    def to_dict(self) -> Dict[str, str]:
        return {key: getattr(self, attr) for attr, key in COLOR_SLOTS}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]], defaults: Optional[Dict[str, str]] = None) -> "ColorSlots":
        """Build from stored camelCase keys, filling gaps from defaults"""
        data = data or {}
        defaults = defaults or {}
        values = {}
        for attr, key in COLOR_SLOTS:
            value = data.get(key)
            if value is None:
                value = defaults.get(key, "")
            values[attr] = str(value)
        return cls(**values)

    @classmethod
    def defaults(cls) -> "ColorSlots":
        return cls.from_dict(DEFAULT_MAIN_COLORS)


@dataclass
class ElementMapping:
    """Global table assigning each message element to a main color"""
    modes: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_COLOR_MAPPING))

    def __post_init__(self):
        # Unknown slots are dropped, missing or invalid ones get the default mode
        cleaned = {}
        for slot in ELEMENT_SLOTS:
            mode = self.modes.get(slot)
            cleaned[slot] = mode if mode in MAPPING_MODES else DEFAULT_COLOR_MAPPING[slot]
        self.modes = cleaned

    def __getitem__(self, slot: str) -> str:
        return self.modes[slot]

    def to_dict(self) -> Dict[str, str]:
        return dict(self.modes)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "ElementMapping":
        return cls(modes=dict(data or {}))


@dataclass
class SpecificColors:
    """Per-entity literal colors that bypass the global mapping"""
    colors: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        self.colors = {
            slot: str(value)
            for slot, value in self.colors.items()
            if slot in ELEMENT_SLOTS and value
        }

    def get(self, slot: str) -> str:
        return self.colors.get(slot, "")

    def to_dict(self) -> Dict[str, str]:
        return dict(self.colors)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "SpecificColors":
        return cls(colors=dict(data or {}))
