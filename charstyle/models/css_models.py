"""Structured CSS Models

Generated CSS is kept as a sequence of rule records and only turned into
text by `Stylesheet.to_css()`, so two generation passes can be compared by
value instead of by whitespace.
"""
from ..common_imports import *

INDENT = "    "


@dataclass(frozen=True)
class CSSRule:
    """One rule: selector list plus ordered (property, value) declarations"""
    selectors: Tuple[str, ...]
    declarations: Tuple[Tuple[str, str], ...]
    important: bool = False

    def to_css(self) -> str:
        suffix = " !important" if self.important else ""
        body = "".join(
            f"{INDENT}{prop}: {value}{suffix};\n" for prop, value in self.declarations
        )
        selector = ",\n".join(self.selectors)
        return f"{selector} {{\n{body}}}\n"


@dataclass(frozen=True)
class RawCSSBlock:
    """User supplied CSS text, emitted verbatim inside an optional selector"""
    body: str
    selector: Optional[str] = None
    comment: Optional[str] = None

    def to_css(self) -> str:
        lines = []
        if self.comment:
            lines.append(self.comment)
        if self.selector:
            lines.append(f"{self.selector} {{\n{self.body}\n}}")
        else:
            lines.append(self.body)
        return "\n".join(lines) + "\n"


@dataclass(frozen=True)
class Stylesheet:
    items: Tuple[Union[CSSRule, RawCSSBlock], ...] = ()

    def __add__(self, other: "Stylesheet") -> "Stylesheet":
        return Stylesheet(self.items + other.items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    @property
    def rules(self) -> List[CSSRule]:
        return [item for item in self.items if isinstance(item, CSSRule)]

    def rules_for(self, selector_fragment: str) -> List[CSSRule]:
        """Rules with at least one selector ending in the given fragment"""
        return [
            rule for rule in self.rules
            if any(selector.endswith(selector_fragment) for selector in rule.selectors)
        ]

    def to_css(self) -> str:
        return "\n".join(item.to_css() for item in self.items)
