"""File management utilities"""
from ..common_imports import *
from ..models.entity import EntitySettings
from ..models.settings import StyleSettings
from .helpers import convert_to_hex_color

SETTINGS_FILENAME = "style_settings.json"


def get_app_data_dir():
    """Get application data directory - LOCAL PROJECT STORAGE VERSION"""
    # Project root is where the charstyle/ package lives
    current_file = Path(__file__)  # This file: charstyle/utils/file_manager.py
    project_root = current_file.parent.parent.parent

    app_dir = project_root / "data"
    app_dir.mkdir(parents=True, exist_ok=True)
    return app_dir


def _convert_colors(colors: Any) -> Dict[str, str]:
    if not isinstance(colors, dict):
        return {}
    return {key: convert_to_hex_color(value) if value else "" for key, value in colors.items()}


def normalize_stored_colors(data: Dict[str, Any]) -> Dict[str, Any]:
    """Convert every stored color to #RRGGBB; values that aren't colors become empty"""
    data = dict(data)

    for section in ("globalSettings", "userSettings"):
        section_data = data.get(section)
        if isinstance(section_data, dict) and "mainColors" in section_data:
            section_data = dict(section_data)
            section_data["mainColors"] = _convert_colors(section_data["mainColors"])
            data[section] = section_data

    characters = data.get("characterSettings")
    if isinstance(characters, dict):
        converted = {}
        for entity_id, entity_data in characters.items():
            if isinstance(entity_data, dict):
                entity_data = dict(entity_data)
                for key in ("mainColors", "specificColors"):
                    if key in entity_data:
                        entity_data[key] = _convert_colors(entity_data[key])
            converted[entity_id] = entity_data
        data["characterSettings"] = converted

    return data


class SettingsManager:
    """Loads and saves the style settings file"""
    def __init__(self, settings_file: Optional[Union[str, Path]] = None):
        if settings_file is None:
            settings_file = get_app_data_dir() / SETTINGS_FILENAME
        self.settings_file = Path(settings_file)
        self.settings = self._load_settings()

    def _load_settings(self) -> StyleSettings:
        """Load style settings, falling back to defaults when missing or corrupt"""
        if self.settings_file.exists():
            try:
                with open(self.settings_file, 'r', encoding='utf-8') as f:
                    data = json.load(f)

                if not isinstance(data, dict):
                    raise ValueError("settings file does not contain an object")

                settings = StyleSettings.from_dict(normalize_stored_colors(data))
                print(f"✅ Loaded style settings for {len(settings.character_settings)} entities")
                return settings

            except Exception as e:
                print(f"❌ Error loading style settings: {e}")
                print("🔄 Using default style settings")

        return StyleSettings()

    def reload(self) -> StyleSettings:
        self.settings = self._load_settings()
        return self.settings

    def save_settings(self) -> bool:
        if safe_json_save(self.settings.to_dict(), str(self.settings_file)):
            return True
        print(f"❌ Error saving style settings to {self.settings_file}")
        return False

    def get_entity_ids(self) -> List[str]:
        return list(self.settings.character_settings)

    def save_entity_settings(self, entity_id: str, entity_settings: EntitySettings) -> bool:
        """Store an entity's styling, creating its entry on first save"""
        is_new = entity_id not in self.settings.character_settings
        self.settings.character_settings[entity_id] = entity_settings
        if is_new:
            print(f"✅ Created style settings for {entity_id}")
        return self.save_settings()

    def reset_entity_settings(self, entity_id: str) -> bool:
        """Delete an entity's styling; False if it had none"""
        if entity_id not in self.settings.character_settings:
            return False
        del self.settings.character_settings[entity_id]
        print(f"🧹 Reset style settings for {entity_id}")
        return self.save_settings()
