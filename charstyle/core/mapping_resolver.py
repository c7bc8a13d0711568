"""Element Mapping Resolver"""
from ..common_imports import *
from ..models.color_models import (
    ElementMapping,
    SpecificColors,
    ELEMENT_SLOTS,
    MAPPING_PRIMARY,
    MAPPING_SECONDARY,
)
from ..utils.helpers import normalize_hex

MODE_LITERAL = "literal"
MODE_INDIRECT = "indirect"
MODE_NONE = "none"


@dataclass(frozen=True)
class ElementResolution:
    slot: str
    mode: str
    value: Optional[str] = None  # literal color for MODE_LITERAL
    ref: Optional[str] = None    # "primary" / "secondary" for MODE_INDIRECT


def resolve_element(slot: str, mapping_mode: Optional[str],
                    literal_override: Optional[str] = None) -> ElementResolution:
    """Decide how one message element gets colored.

    An entity's literal override always wins; otherwise primary/secondary
    point at the scope's own main color and neutral leaves the element alone.
    """
    literal = normalize_hex(literal_override)
    if literal:
        return ElementResolution(slot, MODE_LITERAL, value=literal)

    if mapping_mode in (MAPPING_PRIMARY, MAPPING_SECONDARY):
        return ElementResolution(slot, MODE_INDIRECT, ref=mapping_mode)

    return ElementResolution(slot, MODE_NONE)


def resolve_mapping(mapping: ElementMapping,
                    specific_colors: Optional[SpecificColors] = None) -> List[ElementResolution]:
    """Resolve all element slots in generation order"""
    specific_colors = specific_colors or SpecificColors()
    return [
        resolve_element(slot, mapping[slot], specific_colors.get(slot))
        for slot in ELEMENT_SLOTS
    ]
