"""CSS Rule Generator

Builds the stylesheet for one entity and the page-level stylesheet for
untagged and user messages. Output is a `Stylesheet` of rule records;
`generate_*_css` serialize it.
"""
from ..common_imports import *
from ..models.color_models import ElementMapping
from ..models.css_models import CSSRule, RawCSSBlock, Stylesheet
from ..models.chat_models import AUTHOR_UID_ATTR, IS_USER_ATTR
from ..models.entity import EntitySettings
from ..models.settings import GlobalSettings, UserSettings
from ..utils.helpers import css_string, css_comment
from .color_resolver import (
    resolve_colors,
    custom_property,
    var_ref,
    ResolvedColorSlots,
    SCOPE_GLOBAL,
    SCOPE_USER,
    SCOPE_ENTITY,
)
from .mapping_resolver import resolve_mapping, ElementResolution, MODE_LITERAL, MODE_INDIRECT

MESSAGE_SELECTOR = ".mes"
UNTAGGED_SELECTOR = f'{MESSAGE_SELECTOR}:not([{IS_USER_ATTR}="true"]):not([{AUTHOR_UID_ATTR}])'
USER_SELECTOR = f'{MESSAGE_SELECTOR}[{IS_USER_ATTR}="true"]'

# Element slot -> (descendant selectors, CSS property, value template)
ELEMENT_TARGETS: Dict[str, Tuple[Tuple[str, ...], str, str]] = {
    "characterName": ((".name_text",), "color", "{}"),
    "mainText": ((".mes_text",), "color", "{}"),
    "quotes": ((".mes_text q",), "color", "{}"),
    "bold": ((".mes_text b", ".mes_text strong"), "color", "{}"),
    "italic": ((".mes_text i", ".mes_text em"), "color", "{}"),
    "boldItalic": (
        (".mes_text b i", ".mes_text strong em", ".mes_text i b", ".mes_text em strong"),
        "color",
        "{}",
    ),
    "underline": ((".mes_text u",), "color", "{}"),
    "strikethrough": ((".mes_text s", ".mes_text strike", ".mes_text del"), "color", "{}"),
    "blockquoteBorder": ((".mes_text blockquote",), "border-left", "3px solid {}"),
    "links": ((".mes_text a",), "color", "{}"),
    "linksHover": ((".mes_text a:hover",), "color", "{}"),
}


def entity_selector(entity_id: str) -> str:
    """Selector matching exactly the messages tagged with `entity_id`"""
    return f"{MESSAGE_SELECTOR}[{AUTHOR_UID_ATTR}={css_string(entity_id)}]"


def _variables_rule(selector: str, scope: str, colors: ResolvedColorSlots) -> CSSRule:
    declarations = tuple(
        (custom_property(scope, slot), value) for slot, value in colors.items()
    )
    return CSSRule((selector,), declarations)


def _element_rules(base_selector: str, scope: str,
                   resolutions: Iterable[ElementResolution]) -> List[CSSRule]:
    rules = []
    for resolution in resolutions:
        if resolution.mode == MODE_LITERAL:
            color = resolution.value
        elif resolution.mode == MODE_INDIRECT:
            color = var_ref(scope, resolution.ref)
        else:
            continue

        targets, prop, template = ELEMENT_TARGETS[resolution.slot]
        selectors = tuple(f"{base_selector} {target}" for target in targets)
        rules.append(CSSRule(selectors, ((prop, template.format(color)),), important=True))
    return rules


def build_entity_stylesheet(entity_id: str, entity_settings: Optional[EntitySettings],
                            global_mapping: Optional[ElementMapping] = None,
                            enable_character_css: bool = True) -> Stylesheet:
    """Stylesheet for one character or persona.

    Order matters: the entity's custom properties come first, then one rule
    per colored element, then the entity's own message CSS.
    """
    if entity_settings is None:
        return Stylesheet()

    mapping = global_mapping or ElementMapping()
    selector = entity_selector(entity_id)

    colors = resolve_colors(SCOPE_ENTITY, entity_settings.main_colors)
    items: List[Union[CSSRule, RawCSSBlock]] = [_variables_rule(selector, SCOPE_ENTITY, colors)]

    resolutions = resolve_mapping(mapping, entity_settings.specific_colors)
    items.extend(_element_rules(selector, SCOPE_ENTITY, resolutions))

    # Message CSS is trusted and emitted exactly as written
    if enable_character_css and entity_settings.custom_css.strip():
        items.append(RawCSSBlock(
            body=entity_settings.custom_css,
            selector=selector,
            comment=css_comment(f"Custom CSS for {entity_id} messages"),
        ))

    return Stylesheet(tuple(items))


def generate_entity_css(entity_id: str, entity_settings: Optional[EntitySettings],
                        global_mapping: Optional[ElementMapping] = None,
                        enable_character_css: bool = True) -> str:
    return build_entity_stylesheet(
        entity_id, entity_settings, global_mapping, enable_character_css
    ).to_css()


def build_global_stylesheet(global_settings: GlobalSettings,
                            user_settings: UserSettings) -> Stylesheet:
    """Page-root variables plus element rules for untagged and user messages"""
    global_colors = resolve_colors(SCOPE_GLOBAL, global_settings.main_colors)
    user_colors = resolve_colors(SCOPE_USER, user_settings.main_colors)

    root = CSSRule(
        (":root",),
        _variables_rule(":root", SCOPE_GLOBAL, global_colors).declarations
        + _variables_rule(":root", SCOPE_USER, user_colors).declarations,
    )

    # No entity overrides at this level, only the mapping applies
    resolutions = resolve_mapping(global_settings.color_mapping)

    items: List[Union[CSSRule, RawCSSBlock]] = [root]
    items.extend(_element_rules(UNTAGGED_SELECTOR, SCOPE_GLOBAL, resolutions))
    items.extend(_element_rules(USER_SELECTOR, SCOPE_USER, resolutions))
    return Stylesheet(tuple(items))


def generate_global_css(global_settings: GlobalSettings, user_settings: UserSettings) -> str:
    return build_global_stylesheet(global_settings, user_settings).to_css()
