"""Style Settings Models"""
from ..common_imports import *
from .color_models import ColorSlots, ElementMapping, DEFAULT_MAIN_COLORS
from .entity import EntitySettings


@dataclass
class GlobalSettings:
    """Colors for every message without entity-specific styling"""
    main_colors: ColorSlots = field(default_factory=ColorSlots.defaults)
    color_mapping: ElementMapping = field(default_factory=ElementMapping)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mainColors": self.main_colors.to_dict(),
            "colorMapping": self.color_mapping.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "GlobalSettings":
        data = data or {}
        return cls(
            main_colors=ColorSlots.from_dict(data.get("mainColors"), DEFAULT_MAIN_COLORS),
            color_mapping=ElementMapping.from_dict(data.get("colorMapping")),
        )


@dataclass
class UserSettings:
    """Colors for the local user's own messages"""
    main_colors: ColorSlots = field(default_factory=ColorSlots.defaults)

    def to_dict(self) -> Dict[str, Any]:
        return {"mainColors": self.main_colors.to_dict()}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "UserSettings":
        data = data or {}
        return cls(main_colors=ColorSlots.from_dict(data.get("mainColors"), DEFAULT_MAIN_COLORS))


@dataclass
class StyleSettings:
    """Snapshot of everything the CSS generator reads"""
    enabled: bool = True
    enable_character_css: bool = True  # Per-entity message CSS
    enable_global_css: bool = False    # Page-wide CSS, off by default for safety
    global_settings: GlobalSettings = field(default_factory=GlobalSettings)
    user_settings: UserSettings = field(default_factory=UserSettings)
    character_settings: Dict[str, EntitySettings] = field(default_factory=dict)

    def get_entity(self, entity_id: Optional[str]) -> Optional[EntitySettings]:
        if not entity_id:
            return None
        return self.character_settings.get(entity_id)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "enabled": self.enabled,
            "enableCharacterCSS": self.enable_character_css,
            "enableGlobalCSS": self.enable_global_css,
            "globalSettings": self.global_settings.to_dict(),
            "userSettings": self.user_settings.to_dict(),
            "characterSettings": {
                entity_id: entity.to_dict()
                for entity_id, entity in self.character_settings.items()
            },
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "StyleSettings":
        """Load a stored settings object, filling anything missing with defaults"""
        data = data or {}
        character_settings = {}
        for entity_id, entity_data in (data.get("characterSettings") or {}).items():
            if isinstance(entity_data, dict):
                character_settings[entity_id] = EntitySettings.from_dict(entity_data)
            else:
                print(f"⚠️ Skipping corrupted style settings for {entity_id}")

        return cls(
            enabled=data.get("enabled", True) is not False,
            enable_character_css=data.get("enableCharacterCSS", True) is not False,
            enable_global_css=data.get("enableGlobalCSS") is True,
            global_settings=GlobalSettings.from_dict(data.get("globalSettings")),
            user_settings=UserSettings.from_dict(data.get("userSettings")),
            character_settings=character_settings,
        )
