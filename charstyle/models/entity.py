"""Entity (character / persona) Models"""
from enum import Enum

from ..common_imports import *
from .color_models import ColorSlots, SpecificColors

ENTITY_ID_SEPARATOR = "|"
MARKER_CLASS_PREFIX = "csc-global-css-"


class EntityKind(str, Enum):
    CHARACTER = "character"
    PERSONA = "persona"


def make_entity_id(kind: EntityKind, display_name: str, avatar_ref: str) -> str:
    """Compose the stable `kind|displayName|avatarRef` key"""
    return ENTITY_ID_SEPARATOR.join((EntityKind(kind).value, display_name, avatar_ref))


def parse_entity_id(entity_id: str) -> Optional[Tuple[EntityKind, str, str]]:
    """Split an entity id back into (kind, name, avatar); None when malformed"""
    parts = entity_id.split(ENTITY_ID_SEPARATOR, 1)
    if len(parts) != 2:
        return None

    # Names may contain the separator, avatar file names may not
    name, sep, avatar = parts[1].rpartition(ENTITY_ID_SEPARATOR)
    if not sep:
        return None

    try:
        kind = EntityKind(parts[0])
    except ValueError:
        return None
    return kind, name, avatar


def entity_display_name(entity_id: str) -> str:
    parsed = parse_entity_id(entity_id)
    return parsed[1] if parsed else entity_id


def entity_marker_class(entity_id: str) -> str:
    """Body class naming the entity whose page-wide CSS is active"""
    safe_id = entity_id.replace("|", "-").replace(".", "_")
    return f"{MARKER_CLASS_PREFIX}{safe_id}"


def _text(value: Any) -> str:
    # Hand-edited files can hold numbers or lists where CSS text belongs
    return value if isinstance(value, str) else ""


@dataclass
class EntitySettings:
    """Styling saved for one character or persona"""
    main_colors: ColorSlots = field(default_factory=ColorSlots)
    specific_colors: SpecificColors = field(default_factory=SpecificColors)
    custom_css: str = ""
    global_css: str = ""
    enable_global_css: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mainColors": self.main_colors.to_dict(),
            "specificColors": self.specific_colors.to_dict(),
            "customCSS": self.custom_css,
            "globalCSS": self.global_css,
            "enableGlobalCSS": self.enable_global_css,
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "EntitySettings":
        data = data or {}
        return cls(
            main_colors=ColorSlots.from_dict(data.get("mainColors")),
            specific_colors=SpecificColors.from_dict(data.get("specificColors")),
            custom_css=_text(data.get("customCSS")),
            global_css=_text(data.get("globalCSS")),
            # Older saves have no flag; they were always enabled
            enable_global_css=data.get("enableGlobalCSS") is not False,
        )
