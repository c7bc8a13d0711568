"""Helper utility functions"""
from ..common_imports import *

HEX_COLOR_PATTERN = re.compile(r'^#(?:[0-9a-fA-F]{3}){1,2}$')
FILE_EXTENSION_PATTERN = re.compile(r'\.[^/.]+$')


def normalize_hex(color: Optional[str]) -> Optional[str]:
    """Normalize #RGB / #RRGGBB to uppercase #RRGGBB, None if not a hex color"""
    if not color:
        return None

    color = str(color).strip()
    if not HEX_COLOR_PATTERN.match(color):
        return None

    r, g, b = ImageColor.getrgb(color)[:3]
    return f"#{r:02X}{g:02X}{b:02X}"


def convert_to_hex_color(color: Optional[str]) -> str:
    """Convert any CSS color notation Pillow understands (rgb(), hsl(), names) to #RRGGBB"""
    if not color:
        return ""

    hex_color = normalize_hex(color)
    if hex_color:
        return hex_color

    try:
        r, g, b = ImageColor.getrgb(str(color).strip())[:3]
    except ValueError:
        print(f"⚠️ Unrecognized color value: {color!r}")
        return ""
    return f"#{r:02X}{g:02X}{b:02X}"


def css_string(value: str) -> str:
    """Quote a value as a CSS string literal"""
    escaped = value.replace('\\', '\\\\').replace('"', '\\"').replace('\n', '\\a ')
    return f'"{escaped}"'


def css_comment(text: str) -> str:
    """Wrap text in a CSS comment that cannot terminate early"""
    return f"/* {text.replace('*/', '* /')} */"


def strip_file_extension(name: str) -> str:
    """Drop everything from the last dot on; names with a dot are cut there too"""
    return FILE_EXTENSION_PATTERN.sub('', name)
