"""Color Resolver

Turns the four main color slots of a scope into the values written into CSS
custom properties: either a normalized `#RRGGBB` literal or a `var(...)`
reference to the next scope up the chain.
"""
from ..common_imports import *
from ..models.color_models import ColorSlots, COLOR_SLOTS, DEFAULT_MAIN_COLORS
from ..utils.helpers import normalize_hex

SCOPE_GLOBAL = "global"
SCOPE_USER = "user"
SCOPE_ENTITY = "entity"

SCOPE_VAR_PREFIX = {
    SCOPE_GLOBAL: "--csc-",
    SCOPE_USER: "--csc-user-",
    SCOPE_ENTITY: "--csc-char-",
}

SLOT_VAR_SUFFIX = {
    "primary": "primary",
    "secondary": "secondary",
    "bg_primary": "bg-primary",
    "bg_secondary": "bg-secondary",
}

DEFAULT_USER_COLORS = dict(DEFAULT_MAIN_COLORS)


def custom_property(scope: str, slot: str) -> str:
    """Name of the CSS custom property holding `slot` for `scope`"""
    return f"{SCOPE_VAR_PREFIX[scope]}{SLOT_VAR_SUFFIX[slot]}"


def var_ref(scope: str, slot: str) -> str:
    return f"var({custom_property(scope, slot)})"


@dataclass(frozen=True)
class ResolvedColorSlots:
    primary: str
    secondary: str
    bg_primary: str
    bg_secondary: str

    def get(self, slot: str) -> str:
        return getattr(self, slot)

    def items(self) -> List[Tuple[str, str]]:
        return [(attr, getattr(self, attr)) for attr, _ in COLOR_SLOTS]


def _fallback(scope: str, slot: str, key: str, fallback_prefix: Optional[str]) -> str:
    if scope == SCOPE_ENTITY:
        prefix = fallback_prefix or SCOPE_VAR_PREFIX[SCOPE_GLOBAL]
        return f"var({prefix}{SLOT_VAR_SUFFIX[slot]})"
    if scope == SCOPE_USER:
        return DEFAULT_USER_COLORS[key]
    return DEFAULT_MAIN_COLORS[key]


def resolve_colors(scope: str, overrides: Optional[ColorSlots],
                   fallback_prefix: Optional[str] = None) -> ResolvedColorSlots:
    """Resolve the effective value of each main color slot for a scope.

    Global and user scopes fall back to the built-in default colors; the
    entity scope falls back to a reference to the global custom property
    (or `fallback_prefix` + slot), so editing a global color restyles every
    entity that does not override it without regenerating entity CSS.
    Malformed override values count as unset.
    """
    if scope not in SCOPE_VAR_PREFIX:
        raise ValueError(f"Unknown color scope: {scope}")

    overrides = overrides or ColorSlots()
    values = {}
    for slot, key in COLOR_SLOTS:
        color = normalize_hex(overrides.get(slot))
        values[slot] = color if color else _fallback(scope, slot, key, fallback_prefix)
    return ResolvedColorSlots(**values)
